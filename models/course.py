# models/course.py
from pydantic import BaseModel, ConfigDict
from typing import Optional

class Course(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: Optional[str] = None
    duration: Optional[str] = None  # e.g. "6 weeks"

class CourseOption(BaseModel):
    value: int
    label: str
