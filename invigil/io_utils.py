import csv
import io
import os
from typing import Dict, List, Union, IO

from .errors import InputError
from .models import Exam, Teacher, make_exam, make_teacher
from .session import parse_slots

TextOrPath = Union[str, os.PathLike, IO]


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='', encoding='utf-8')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        if hasattr(src, 'seek'):
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def _field(row: Dict[str, str], key: str, line: int) -> str:
    value = row.get(key)
    if value is None:
        raise InputError(f"line {line}: missing column '{key}'")
    return value.strip()


def load_exams(src: TextOrPath) -> List[Exam]:
    """CSV with columns name,time_slot. Ids follow row order from 0."""
    exams: List[Exam] = []
    f, should_close = _open_text(src)
    try:
        r = csv.DictReader(f)
        for row in r:
            name = _field(row, 'name', r.line_num)
            slot = _field(row, 'time_slot', r.line_num)
            if not name or not slot:
                raise InputError(f"line {r.line_num}: exam name and time slot are required")
            exams.append(make_exam(len(exams), name, slot))
    finally:
        if should_close:
            f.close()
    return exams


def load_teachers(src: TextOrPath) -> List[Teacher]:
    """CSV with columns name,unavailable_slots (comma-separated, quoted)."""
    teachers: List[Teacher] = []
    f, should_close = _open_text(src)
    try:
        r = csv.DictReader(f)
        for row in r:
            name = _field(row, 'name', r.line_num)
            if not name:
                raise InputError(f"line {r.line_num}: teacher name is required")
            slots = parse_slots(row.get('unavailable_slots') or '')
            teachers.append(make_teacher(len(teachers), name, slots))
    finally:
        if should_close:
            f.close()
    return teachers


def encode_assignments(assignments: Dict[int, int]) -> str:
    """'0:1;1:0' style pairs, sorted by exam id."""
    return ";".join(f"{exam_id}:{tid}" for exam_id, tid in sorted(assignments.items()))


def decode_assignments(text: str) -> Dict[int, int]:
    assignments: Dict[int, int] = {}
    for pair in text.split(';'):
        pair = pair.strip()
        if not pair:
            continue
        kv = pair.split(':')
        if len(kv) != 2:
            raise InputError(f"malformed assignment pair: {pair!r}")
        try:
            assignments[int(kv[0])] = int(kv[1])
        except ValueError:
            raise InputError(f"malformed assignment pair: {pair!r}") from None
    return assignments


def save_assignments_csv(path: str, assignments: Dict[int, int]):
    with open(path, 'w', newline='', encoding='utf-8') as f:
        w = csv.writer(f)
        w.writerow(['exam_id', 'teacher_id'])
        for exam_id, tid in sorted(assignments.items()):
            w.writerow([exam_id, tid])
