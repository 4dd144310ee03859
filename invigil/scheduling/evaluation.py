from collections import Counter
from typing import Dict, Sequence
import networkx as nx
import pandas as pd

from ..errors import ScheduleContractError
from ..models import Exam, Teacher
from .validation import conflicts_ok, availability_ok, complete_ok

SUCCESS_HEADER = "✅ Teacher assignment successful:"
FAILURE_LINE = "❌ No valid schedule found."


def _teacher_for(ex: Exam, teachers: Sequence[Teacher], assignments: Dict[int, int]) -> Teacher:
    if ex.id not in assignments:
        raise ScheduleContractError(f"exam {ex.id} ({ex.name}) has no teacher in a successful schedule")
    t = assignments[ex.id]
    if not 0 <= t < len(teachers):
        raise ScheduleContractError(f"exam {ex.id} ({ex.name}) maps to unknown teacher index {t}")
    return teachers[t]


def format_report(exams: Sequence[Exam], teachers: Sequence[Teacher],
                  assignments: Dict[int, int], success: bool) -> str:
    """Render the displayable schedule, one line per exam in list order."""
    if not success:
        return FAILURE_LINE
    lines = [SUCCESS_HEADER, ""]
    for ex in exams:
        teacher = _teacher_for(ex, teachers, assignments)
        lines.append(f"📘 Exam: {ex.name} ({ex.time_slot}) → 👨‍🏫 Teacher: {teacher.name}")
    return "\n".join(lines) + "\n"


def assignment_table(exams: Sequence[Exam], teachers: Sequence[Teacher],
                     assignments: Dict[int, int]) -> pd.DataFrame:
    rows = []
    for ex in exams:
        teacher = _teacher_for(ex, teachers, assignments)
        rows.append({
            "exam_id": ex.id,
            "exam": ex.name,
            "time_slot": ex.time_slot,
            "teacher_id": assignments[ex.id],
            "teacher": teacher.name,
        })
    return pd.DataFrame(rows, columns=["exam_id", "exam", "time_slot", "teacher_id", "teacher"])


def teacher_load(teachers: Sequence[Teacher], assignments: Dict[int, int]) -> pd.Series:
    """Number of exams per teacher name, zero for idle teachers."""
    counts = pd.Series(list(assignments.values()), dtype="int64").value_counts()
    return pd.Series(
        [int(counts.get(i, 0)) for i in range(len(teachers))],
        index=[t.name for t in teachers],
        dtype="int64",
    )


def teachers_needed_lb(exams: Sequence[Exam]) -> int:
    """Size of the largest same-slot group; each of its exams needs its own teacher."""
    return max(Counter(ex.time_slot for ex in exams).values(), default=0)


def summary(G: nx.Graph, exams: Sequence[Exam], teachers: Sequence[Teacher],
            assignments: Dict[int, int], success: bool) -> str:
    lb = teachers_needed_lb(exams)
    warning = ""
    if len(teachers) < lb:
        warning = f"Warning: teachers={len(teachers)} < largest slot group={lb}; no valid assignment exists.\n"
    head = (
        f"Exams: {G.number_of_nodes()}  Conflict edges: {G.number_of_edges()}\n"
        f"Teachers available: {len(teachers)}  Teachers needed (lower bound): {lb}\n"
    )
    if not success:
        return head + "Feasible: False\n" + warning
    ok_conf = conflicts_ok(G, assignments)
    ok_avail = availability_ok(exams, teachers, assignments)
    ok_complete = complete_ok(exams, assignments)
    load = ""
    if teachers:
        loads = teacher_load(teachers, assignments)
        load = "Load: " + ", ".join(f"{name}={cnt}" for name, cnt in loads.items()) + "\n"
    return (
        head
        + f"Teachers used: {len(set(assignments.values()))}\n"
        + f"Feasible: True  Valid (conflicts): {ok_conf}  Valid (availability): {ok_avail}"
        + f"  Complete: {ok_complete}\n"
        + load
        + warning
    )
