from typing import Dict, Sequence
import networkx as nx

from ..models import Exam, Teacher


def conflicts_ok(G: nx.Graph, assignments: Dict[int, int]) -> bool:
    for u, v in G.edges():
        if u in assignments and assignments.get(u) == assignments.get(v):
            return False
    return True


def availability_ok(exams: Sequence[Exam], teachers: Sequence[Teacher], assignments: Dict[int, int]) -> bool:
    for ex in exams:
        if ex.id not in assignments:
            continue
        t = assignments[ex.id]
        if not 0 <= t < len(teachers):
            return False
        if not teachers[t].is_available(ex.time_slot):
            return False
    return True


def complete_ok(exams: Sequence[Exam], assignments: Dict[int, int]) -> bool:
    return set(assignments) == {ex.id for ex in exams}
