# routes/students.py
from fastapi import APIRouter, Depends
from typing import List, Optional
import logging

import config
from models.dashboard import DashboardStats
from models.student import Student
from services.dashboard import DashboardController
from .dashboard import get_dashboard

# Set up logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/students", tags=["students"])

@router.get("/", response_model=List[Student])
async def get_students(search: Optional[str] = None, dashboard: DashboardController = Depends(get_dashboard)):
    if search:
        logger.info(f"Searching students for: {search}")
        return dashboard.search(search)
    return dashboard.students

@router.get("/stats", response_model=DashboardStats)
async def get_stats(dashboard: DashboardController = Depends(get_dashboard)):
    return dashboard.stats

@router.delete("/storage")
async def clear_saved_students(dashboard: DashboardController = Depends(get_dashboard)):
    dashboard.clear_saved_roster()
    return {"message": "Saved student data cleared"}
