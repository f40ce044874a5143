# routes/courses.py
from fastapi import APIRouter, Depends
from typing import List

from models.course import Course, CourseOption
from services.dashboard import DashboardController
from .dashboard import get_dashboard

router = APIRouter(prefix="/api/courses", tags=["courses"])

@router.get("/", response_model=List[Course])
async def get_courses(dashboard: DashboardController = Depends(get_dashboard)):
    return dashboard.courses

@router.get("/options", response_model=List[CourseOption])
async def get_course_options(dashboard: DashboardController = Depends(get_dashboard)):
    return dashboard.course_options()
