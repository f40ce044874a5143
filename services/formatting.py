# services/formatting.py
from datetime import date, datetime
from typing import Optional, Union
from urllib.parse import quote

AVATAR_BASE_URL = "https://ui-avatars.com/api/"
AVATAR_COLORS = ["6366f1", "8b5cf6", "ec4899", "f59e0b", "10b981", "ef4444"]

def generate_avatar(name: str, background: Optional[str] = None) -> str:
    """Placeholder profile image URL for a student name.

    The background colour is picked from the name, so the same student always
    gets the same avatar.
    """
    name = (name or "").strip()
    if background is None:
        background = AVATAR_COLORS[sum(map(ord, name)) % len(AVATAR_COLORS)]
    return f"{AVATAR_BASE_URL}?name={quote(name, safe='')}&background={background}&color=fff&size=128&bold=true"

def format_date(value: Union[date, datetime, str]) -> str:
    """Format a date the way the roster shows it, e.g. "Oct 19, 2026"."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return f"{value:%b} {value.day}, {value.year}"
