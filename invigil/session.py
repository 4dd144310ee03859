import copy
import logging
from typing import Iterable, List, Optional, Set, Union

from .errors import InputError
from .models import Exam, Teacher, ScheduleResult, make_exam, make_teacher
from .scheduling.assign_teachers import build_schedule

logger = logging.getLogger(__name__)


def parse_slots(raw: Union[str, Iterable[str], None]) -> Set[str]:
    """Turn "9AM, 10AM" (or an iterable of tokens) into a set of slot tokens."""
    if raw is None:
        return set()
    parts = raw.split(',') if isinstance(raw, str) else raw
    return {p.strip() for p in parts if p and p.strip()}


class PlannerSession:
    """Exams and teachers entered during one planning session.

    Ids are handed out sequentially from 0 and never reused until clear().
    """

    def __init__(self):
        self.exams: List[Exam] = []
        self.teachers: List[Teacher] = []
        self._exam_counter = 0
        self._teacher_counter = 0

    def add_exam(self, name: str, time_slot: str) -> Exam:
        name = (name or '').strip()
        time_slot = (time_slot or '').strip()
        if not name or not time_slot:
            raise InputError("exam name and time slot are required")
        exam = make_exam(self._exam_counter, name, time_slot)
        self._exam_counter += 1
        self.exams.append(exam)
        logger.debug("exam added: %s at %s", name, time_slot)
        return exam

    def add_teacher(self, name: str, unavailable: Union[str, Iterable[str], None] = None) -> Teacher:
        name = (name or '').strip()
        if not name:
            raise InputError("teacher name is required")
        teacher = make_teacher(self._teacher_counter, name, parse_slots(unavailable))
        self._teacher_counter += 1
        self.teachers.append(teacher)
        logger.debug("teacher added: %s, unavailable: %s", name, sorted(teacher.unavailable_slots))
        return teacher

    def schedule(self, order: str = 'given', seed: Optional[int] = None) -> ScheduleResult:
        if not self.exams or not self.teachers:
            raise InputError("add at least one exam and one teacher first")
        # solve on a snapshot so the session's entities are never shared
        exams = copy.deepcopy(self.exams)
        teachers = copy.deepcopy(self.teachers)
        return build_schedule(exams, teachers, order=order, seed=seed)

    def clear(self) -> None:
        self.exams.clear()
        self.teachers.clear()
        self._exam_counter = 0
        self._teacher_counter = 0
