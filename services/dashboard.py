# services/dashboard.py
"""
Dashboard controller.

Owns the student roster and the course list, drives the mock API and keeps the
form state machine:

    idle -> loading_courses -> ready <-> form_create / form_edit -> submitting -> ready

Derived statistics are recomputed after every committed change.
"""
import logging
from datetime import date
from typing import Callable, List, Optional

import config
from models.course import Course, CourseOption
from models.dashboard import DashboardStats, DashboardStatus, FormMode, FormState, FormValues
from models.student import Student, StudentDraft
from .errors import ApiError, InvalidTransitionError, NetworkError, StudentNotFoundError, ValidationError
from .formatting import format_date, generate_avatar
from .mock_api import FALLBACK_COURSES, MockApi
from .storage import LocalStorageHelper
from .validation import validate_form

# Set up logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

FORM_STATUSES = (DashboardStatus.FORM_CREATE, DashboardStatus.FORM_EDIT)

class DashboardController:
    def __init__(
        self,
        api: MockApi,
        storage: Optional[LocalStorageHelper] = None,
        today: Callable[[], date] = date.today,
    ):
        self._api = api
        self._storage = storage
        self._today = today
        self._status = DashboardStatus.IDLE
        self._students: List[Student] = []
        self._courses: List[Course] = []
        self._form: Optional[FormState] = None
        self._stats = DashboardStats()

    # === read access ===

    @property
    def status(self) -> DashboardStatus:
        return self._status

    @property
    def students(self) -> List[Student]:
        return list(self._students)

    @property
    def courses(self) -> List[Course]:
        return list(self._courses)

    @property
    def form(self) -> Optional[FormState]:
        return self._form.model_copy(deep=True) if self._form else None

    @property
    def stats(self) -> DashboardStats:
        return self._stats

    def course_options(self) -> List[CourseOption]:
        return [CourseOption(value=c.id, label=c.name) for c in self._courses]

    def search(self, query: str) -> List[Student]:
        query = (query or "").strip().lower()
        if not query:
            return self.students
        return [s for s in self._students if query in s.name.lower() or query in s.email.lower()]

    def get_student(self, student_id: int) -> Student:
        for student in self._students:
            if student.id == student_id:
                return student
        raise StudentNotFoundError(f"Student {student_id} not found")

    # === lifecycle ===

    async def mount(self) -> None:
        """Load the saved roster and the course catalogue."""
        self._require(DashboardStatus.IDLE)
        self._status = DashboardStatus.LOADING_COURSES

        if self._storage is not None:
            self._students = self._storage.load()
            self._api.reserve_ids(s.id for s in self._students)
            logger.info(f"Loaded {len(self._students)} saved students")

        try:
            self._courses = await self._api.fetch_courses()
            logger.info("Courses loaded successfully")
        except NetworkError as e:
            logger.error(f"Failed to load courses, using fallback catalogue: {e}")
            self._courses = list(FALLBACK_COURSES)

        self._status = DashboardStatus.READY
        self._refresh()

    # === form ===

    def open_create_form(self) -> FormState:
        self._require(DashboardStatus.READY)
        self._form = FormState(mode=FormMode.CREATE)
        self._status = DashboardStatus.FORM_CREATE
        return self.form

    def open_edit_form(self, student_id: int) -> FormState:
        self._require(DashboardStatus.READY)
        student = self.get_student(student_id)
        self._form = FormState(
            mode=FormMode.EDIT,
            editingId=student.id,
            values=FormValues(
                name=student.name,
                email=student.email,
                course=str(student.courseId) if student.courseId is not None else "",
                profileImage=student.profileImage or "",
            ),
        )
        self._status = DashboardStatus.FORM_EDIT
        return self.form

    def update_form(self, **values) -> FormState:
        self._require(*FORM_STATUSES)
        unknown = set(values) - set(FormValues.model_fields)
        if unknown:
            raise ValidationError(f"Unknown form fields: {', '.join(sorted(unknown))}")
        changes = {k: ("" if v is None else str(v)) for k, v in values.items()}
        self._form.values = self._form.values.model_copy(update=changes)
        return self.form

    def validate(self, values: Optional[FormValues] = None) -> bool:
        """Validate the open form, replacing its errors, or check the given values only."""
        own_values = values is None
        if own_values:
            self._require(*FORM_STATUSES)
            values = self._form.values
        errors = validate_form(values, course_ids=[c.id for c in self._courses])
        if own_values:
            self._form.errors = errors
        return not errors

    def cancel_form(self) -> None:
        self._require(*FORM_STATUSES)
        self._form = None
        self._status = DashboardStatus.READY

    async def submit(self) -> Student:
        """Send the open form to the API and commit the result to the roster.

        Raises ValidationError (form stays open with errors) when local
        validation fails, and re-raises API failures with the roster untouched.
        """
        self._require(*FORM_STATUSES)
        if not self.validate():
            raise ValidationError("Please fix the highlighted fields", self._form.errors)

        previous = self._status
        self._status = DashboardStatus.SUBMITTING
        form = self._form
        draft = self._build_draft(form.values)
        try:
            if form.mode == FormMode.CREATE:
                draft.enrolledDate = format_date(self._today())
                saved = await self._api.save_student(draft)
                self._students.append(saved)
            else:
                result = await self._api.update_student(form.editingId, draft)
                saved = self._replace(result)
        except ApiError as e:
            logger.error(f"Submitting student form failed: {e}")
            self._status = previous
            raise
        except BaseException:
            # Cancelled or crashed mid-request: reopen the form for resubmission
            self._status = previous
            raise

        self._form = None
        self._status = DashboardStatus.READY
        self._commit()
        return saved

    def clear_saved_roster(self) -> None:
        if self._storage is not None:
            self._storage.clear()

    # === internals ===

    def _require(self, *allowed: DashboardStatus) -> None:
        if self._status not in allowed:
            expected = ", ".join(s.value for s in allowed)
            raise InvalidTransitionError(f"Action not allowed while {self._status.value} (expected {expected})")

    def _build_draft(self, values: FormValues) -> StudentDraft:
        course_id = int(values.course)
        course = next((c for c in self._courses if c.id == course_id), None)
        name = values.name.strip()
        return StudentDraft(
            name=name,
            email=values.email.strip(),
            course=course.name if course else "",
            courseId=course_id,
            profileImage=values.profileImage.strip() or generate_avatar(name),
        )

    def _replace(self, result: Student) -> Student:
        for i, student in enumerate(self._students):
            if student.id == result.id:
                changes = result.model_dump(include={"name", "email", "course", "courseId", "profileImage", "updatedAt"})
                updated = student.model_copy(update=changes)
                self._students[i] = updated
                return updated
        raise StudentNotFoundError(f"Student {result.id} not found")

    def _refresh(self) -> None:
        self._stats = DashboardStats(
            totalStudents=len(self._students),
            coursesInUse=len({s.courseId for s in self._students if s.courseId is not None}),
            totalCourses=len(self._courses),
        )

    def _commit(self) -> None:
        self._refresh()
        if self._storage is not None:
            self._storage.save(self._students)
