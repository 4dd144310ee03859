import logging
from typing import Optional, Sequence

from ..models import Exam, Teacher, ScheduleResult
from ..graph_build import build_conflict_graph
from ..algorithms.backtracking import backtrack_assign
from ..algorithms.ordering import order_exams
from .evaluation import format_report

logger = logging.getLogger(__name__)


def build_schedule(exams: Sequence[Exam], teachers: Sequence[Teacher], order: str = 'given',
                   seed: Optional[int] = None) -> ScheduleResult:
    """Build conflicts, search for an assignment and format the outcome.

    The report always lists exams in the caller's order, even when the
    search visited them in a different ``order``. On failure the partial
    map is discarded.
    """
    G = build_conflict_graph(exams)
    search_order = order_exams(G, exams, order=order, seed=seed)
    success, assignments = backtrack_assign(search_order, teachers)
    if not success:
        logger.warning("no valid assignment for %d exams with %d teachers", len(exams), len(teachers))
        assignments = {}
    else:
        logger.info("assigned %d exams to %d teachers", len(assignments), len(set(assignments.values())))
    report = format_report(exams, teachers, assignments, success)
    return ScheduleResult(success=success, report=report, assignments=dict(assignments), graph=G)
