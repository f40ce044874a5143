# services/mock_api.py
import asyncio
import random
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel

import config
from models.course import Course
from models.student import Student, StudentDraft
from .errors import NetworkError, ServerError, ValidationError

# Set up logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

COURSES = [
    Course(id=1, name="HTML Basics", description="Learn the fundamentals of HTML", duration="4 weeks"),
    Course(id=2, name="CSS Mastery", description="Master CSS styling and layouts", duration="6 weeks"),
    Course(id=3, name="JavaScript Pro", description="Advanced JavaScript concepts", duration="8 weeks"),
    Course(id=4, name="React In Depth", description="Build modern React applications", duration="10 weeks"),
    Course(id=5, name="Node.js Backend", description="Server-side JavaScript development", duration="8 weeks"),
    Course(id=6, name="Database Design", description="SQL and NoSQL database concepts", duration="6 weeks"),
    Course(id=7, name="Full Stack Project", description="Complete full-stack application", duration="12 weeks"),
]

# Served by the dashboard when the course fetch fails
FALLBACK_COURSES = COURSES[:4]

class SimulationSettings(BaseModel):
    """Latency bounds (seconds) and failure probabilities of the mock calls."""
    fetch_delay: Tuple[float, float] = (config.FETCH_DELAY_MIN, config.FETCH_DELAY_MAX)
    save_delay: Tuple[float, float] = (config.SAVE_DELAY_MIN, config.SAVE_DELAY_MAX)
    update_delay: Tuple[float, float] = (config.UPDATE_DELAY_MIN, config.UPDATE_DELAY_MAX)
    fetch_failure_rate: float = config.FETCH_FAILURE_RATE
    save_failure_rate: float = config.SAVE_FAILURE_RATE

    @classmethod
    def instant(cls, **overrides) -> "SimulationSettings":
        """No latency and no random failures."""
        values: Dict[str, Any] = {
            "fetch_delay": (0.0, 0.0),
            "save_delay": (0.0, 0.0),
            "update_delay": (0.0, 0.0),
            "fetch_failure_rate": 0.0,
            "save_failure_rate": 0.0,
        }
        values.update(overrides)
        return cls(**values)

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

class MockApi:
    """Stand-in for the student backend.

    Every call waits for a simulated network delay before it settles, and some
    calls fail at random. Pass ``SimulationSettings.instant()`` and a seeded
    ``random.Random`` to make the outcome deterministic.
    """

    def __init__(
        self,
        settings: Optional[SimulationSettings] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = utcnow,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    ):
        self.settings = settings or SimulationSettings()
        self._rng = rng or random.Random()
        self._clock = clock
        self._sleep = sleep or asyncio.sleep
        self._last_id = 0

    async def _simulate_latency(self, bounds: Tuple[float, float]) -> None:
        low, high = bounds
        await self._sleep(self._rng.uniform(low, high) if high > low else low)

    def _should_fail(self, rate: float) -> bool:
        return rate > 0 and self._rng.random() < rate

    def _next_id(self, now: datetime) -> int:
        # Millisecond timestamp, bumped so two saves in one millisecond stay unique
        self._last_id = max(int(now.timestamp() * 1000), self._last_id + 1)
        return self._last_id

    def reserve_ids(self, ids: Iterable[int]) -> None:
        """Make sure ids handed out from now on are above the given ones."""
        self._last_id = max([self._last_id, *ids])

    @staticmethod
    def _coerce_draft(draft: Union[StudentDraft, Dict[str, Any]]) -> StudentDraft:
        if isinstance(draft, dict):
            return StudentDraft(**draft)
        return StudentDraft(**draft.model_dump(include=set(StudentDraft.model_fields)))

    @staticmethod
    def _check_required(draft: StudentDraft) -> None:
        if not draft.name.strip() or not draft.email.strip():
            raise ValidationError("Name and email are required")

    async def fetch_courses(self) -> List[Course]:
        logger.info("Starting course fetch")
        await self._simulate_latency(self.settings.fetch_delay)
        logger.info("Network request completed")
        if self._should_fail(self.settings.fetch_failure_rate):
            logger.error("Error fetching courses: network error occurred")
            raise NetworkError("Network error occurred")
        logger.info(f"Course data processed successfully: {len(COURSES)} courses")
        return list(COURSES)

    async def save_student(self, draft: Union[StudentDraft, Dict[str, Any]]) -> Student:
        draft = self._coerce_draft(draft)
        logger.info(f"Saving student data: {draft.model_dump()}")
        try:
            await self._simulate_latency(self.settings.save_delay)
            self._check_required(draft)
            if self._should_fail(self.settings.save_failure_rate):
                raise ServerError("Server error occurred")
        except (ValidationError, ServerError) as e:
            logger.error(f"Error saving student: {e}")
            raise

        now = self._clock()
        student = Student(**draft.model_dump(), id=self._next_id(now), createdAt=now, updatedAt=now)
        logger.info(f"Student saved successfully: {student.id}")
        return student

    async def update_student(self, student_id: int, draft: Union[StudentDraft, Dict[str, Any]]) -> Student:
        draft = self._coerce_draft(draft)
        logger.info(f"Updating student {student_id}: {draft.model_dump()}")
        try:
            await self._simulate_latency(self.settings.update_delay)
            self._check_required(draft)
        except ValidationError as e:
            logger.error(f"Error updating student {student_id}: {e}")
            raise

        student = Student(**draft.model_dump(), id=student_id, updatedAt=self._clock())
        logger.info(f"Student updated successfully: {student_id}")
        return student
