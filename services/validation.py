# services/validation.py
import re
from typing import Dict, Iterable, Optional

from models.dashboard import FormValues

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

def validate_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email or ""))

def validate_form(values: FormValues, course_ids: Optional[Iterable[int]] = None) -> Dict[str, str]:
    """Check a student form and return a field -> message mapping.

    An empty mapping means the form is valid. When ``course_ids`` is given the
    selected course must be one of them.
    """
    errors: Dict[str, str] = {}

    if not values.name.strip():
        errors["name"] = "Name is required"

    if not values.email.strip():
        errors["email"] = "Email is required"
    elif not validate_email(values.email):
        errors["email"] = "Please enter a valid email"

    course = values.course.strip()
    if not course:
        errors["course"] = "Course selection is required"
    elif course_ids is not None and parse_course_id(course) not in set(course_ids):
        errors["course"] = "Please select a valid course"

    return errors

def parse_course_id(course: str) -> Optional[int]:
    try:
        return int(course)
    except (TypeError, ValueError):
        return None
