# models/dashboard.py
from pydantic import BaseModel, field_validator
from enum import Enum
from typing import Any, Dict, Optional

class DashboardStatus(str, Enum):
    IDLE = "idle"
    LOADING_COURSES = "loading_courses"
    READY = "ready"
    FORM_CREATE = "form_create"
    FORM_EDIT = "form_edit"
    SUBMITTING = "submitting"

class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"

class FormValues(BaseModel):
    name: str = ""
    email: str = ""
    course: str = ""  # String form of Course.id, "" when unset
    profileImage: str = ""

class FormValuesUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    course: Optional[str] = None
    profileImage: Optional[str] = None

    @field_validator("course", mode="before")
    @classmethod
    def course_id_as_text(cls, value: Any) -> Any:
        # Course selectors send the numeric option value
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

class FormState(BaseModel):
    mode: FormMode
    editingId: Optional[int] = None
    values: FormValues = FormValues()
    errors: Dict[str, str] = {}

class DashboardStats(BaseModel):
    totalStudents: int = 0
    coursesInUse: int = 0
    totalCourses: int = 0
