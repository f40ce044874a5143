# models/student.py
from pydantic import BaseModel, Field, computed_field
from datetime import datetime
from typing import Optional

from services.formatting import generate_avatar

class StudentDraft(BaseModel):
    name: str = ""
    email: str = ""
    course: str = ""  # Course name snapshot
    courseId: Optional[int] = None
    profileImage: Optional[str] = None
    enrolledDate: Optional[str] = None

class Student(StudentDraft):
    id: int = Field(frozen=True)
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @computed_field
    @property
    def fallbackImage(self) -> str:
        """Avatar shown when profileImage fails to load."""
        return generate_avatar(self.name)
