from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, Optional, Set

import networkx as nx


@dataclass
class Exam:
    id: int
    name: str
    time_slot: str  # opaque token, compared by equality only
    # ids of exams sharing this time slot; filled by build_conflict_graph
    conflicts: Set[int] = field(default_factory=set)

    def is_conflict(self, other: "Exam") -> bool:
        return self.id != other.id and self.time_slot == other.time_slot


@dataclass
class Teacher:
    id: int
    name: str
    unavailable_slots: Set[str] = field(default_factory=set)

    def is_available(self, time_slot: str) -> bool:
        return time_slot not in self.unavailable_slots


@dataclass
class ScheduleResult:
    success: bool
    report: str
    # exam id -> teacher index; empty when success is False
    assignments: Dict[int, int] = field(default_factory=dict)
    # conflict graph the search ran on
    graph: Optional[nx.Graph] = field(default=None, repr=False, compare=False)

    def __iter__(self) -> Iterator:
        # allows `success, report, assignments = build_schedule(...)`
        return iter((self.success, self.report, self.assignments))


def make_exam(id: int, name: str, time_slot: str) -> Exam:
    return Exam(id=id, name=name, time_slot=time_slot)


def make_teacher(id: int, name: str, unavailable_slots: Iterable[str] = ()) -> Teacher:
    return Teacher(id=id, name=name, unavailable_slots=set(unavailable_slots))
