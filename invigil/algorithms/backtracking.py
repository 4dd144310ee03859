import logging
from typing import Dict, List, Sequence, Tuple

from ..models import Exam, Teacher

logger = logging.getLogger(__name__)


def is_safe(exam: Exam, teacher_idx: int, assignment: Dict[int, int]) -> bool:
    """True if no already-assigned conflicting exam holds ``teacher_idx``."""
    for other_id in exam.conflicts:
        if assignment.get(other_id, -1) == teacher_idx:
            return False
    return True


def backtrack_assign(exams: Sequence[Exam], teachers: Sequence[Teacher]) -> Tuple[bool, Dict[int, int]]:
    """Depth-first search for the first feasible exam -> teacher index map.

    Exams are visited in list order and teachers are tried in list order, so
    the result is deterministic for a fixed ordering. ``next_try[i]`` is the
    frame for exam ``i``: the next teacher index to try when the search
    returns to it. Conflict sets must already be populated.
    """
    n = len(exams)
    assignment: Dict[int, int] = {}
    next_try: List[int] = [0] * n
    steps = 0
    backtracks = 0
    idx = 0
    while 0 <= idx < n:
        exam = exams[idx]
        t = next_try[idx]
        placed = False
        while t < len(teachers):
            steps += 1
            if teachers[t].is_available(exam.time_slot) and is_safe(exam, t, assignment):
                assignment[exam.id] = t
                next_try[idx] = t + 1
                placed = True
                break
            t += 1
        if placed:
            idx += 1
            continue
        # exhausted every teacher here: undo the previous exam's choice
        next_try[idx] = 0
        idx -= 1
        backtracks += 1
        if idx >= 0:
            del assignment[exams[idx].id]
    success = idx == n
    logger.debug("backtracking finished: success=%s steps=%d backtracks=%d", success, steps, backtracks)
    return success, assignment
