# routes/dashboard.py
from fastapi import APIRouter, HTTPException, Depends, Request
from pydantic import BaseModel
from typing import Dict, Optional
import logging

import config
from models.dashboard import DashboardStats, DashboardStatus, FormState, FormValuesUpdate
from models.student import Student
from services.dashboard import DashboardController
from services.errors import ApiError, ValidationError

# Set up logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

class DashboardView(BaseModel):
    status: DashboardStatus
    stats: DashboardStats
    form: Optional[FormState] = None

class ValidationResult(BaseModel):
    valid: bool
    errors: Dict[str, str]

def get_dashboard(request: Request) -> DashboardController:
    return request.app.state.dashboard

def to_http_exception(e: ApiError) -> HTTPException:
    if isinstance(e, ValidationError):
        return HTTPException(status_code=e.status_code, detail={"message": str(e), "errors": e.errors})
    return HTTPException(status_code=e.status_code, detail=str(e))

@router.get("/", response_model=DashboardView)
async def get_dashboard_view(dashboard: DashboardController = Depends(get_dashboard)):
    return DashboardView(status=dashboard.status, stats=dashboard.stats, form=dashboard.form)

@router.post("/form", response_model=FormState)
async def open_create_form(dashboard: DashboardController = Depends(get_dashboard)):
    try:
        return dashboard.open_create_form()
    except ApiError as e:
        raise to_http_exception(e)

@router.post("/form/validate", response_model=ValidationResult)
async def validate_form(dashboard: DashboardController = Depends(get_dashboard)):
    try:
        valid = dashboard.validate()
        return ValidationResult(valid=valid, errors=dashboard.form.errors)
    except ApiError as e:
        raise to_http_exception(e)

@router.post("/form/submit", response_model=Student)
async def submit_form(dashboard: DashboardController = Depends(get_dashboard)):
    try:
        student = await dashboard.submit()
        logger.info(f"Committed student {student.id}: {student.name}")
        return student
    except ApiError as e:
        raise to_http_exception(e)

@router.post("/form/{student_id}", response_model=FormState)
async def open_edit_form(student_id: int, dashboard: DashboardController = Depends(get_dashboard)):
    try:
        return dashboard.open_edit_form(student_id)
    except ApiError as e:
        raise to_http_exception(e)

@router.patch("/form", response_model=FormState)
async def update_form(values: FormValuesUpdate, dashboard: DashboardController = Depends(get_dashboard)):
    try:
        return dashboard.update_form(**values.model_dump(exclude_unset=True))
    except ApiError as e:
        raise to_http_exception(e)

@router.delete("/form")
async def cancel_form(dashboard: DashboardController = Depends(get_dashboard)):
    try:
        dashboard.cancel_form()
        return {"message": "Form closed"}
    except ApiError as e:
        raise to_http_exception(e)
