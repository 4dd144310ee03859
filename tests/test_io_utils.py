import csv
import io

import pytest

from invigil.errors import InputError
from invigil.io_utils import (
    load_exams, load_teachers, save_assignments_csv, encode_assignments, decode_assignments,
)


def test_load_exams_from_text():
    src = io.StringIO("name,time_slot\nMath,9AM\n Physics , 9AM \n")
    exams = load_exams(src)
    assert [(e.id, e.name, e.time_slot) for e in exams] == [(0, "Math", "9AM"), (1, "Physics", "9AM")]


def test_load_exams_from_bytes():
    exams = load_exams(io.BytesIO("name,time_slot\nArt,1PM\n".encode("utf-8")))
    assert exams[0].name == "Art"


def test_load_exams_missing_column():
    with pytest.raises(InputError):
        load_exams(io.StringIO("name\nMath\n"))


def test_load_exams_blank_slot():
    with pytest.raises(InputError):
        load_exams(io.StringIO("name,time_slot\nMath,\n"))


def test_load_teachers_with_quoted_slots(tmp_path):
    path = tmp_path / "teachers.csv"
    path.write_text('name,unavailable_slots\nSmith,"9AM, 1PM"\nJones,\n', encoding="utf-8")
    teachers = load_teachers(str(path))
    assert teachers[0].id == 0 and teachers[0].unavailable_slots == {"9AM", "1PM"}
    assert teachers[1].id == 1 and teachers[1].unavailable_slots == set()


def test_load_teachers_without_slot_column():
    teachers = load_teachers(io.StringIO("name\nSmith\n"))
    assert teachers[0].unavailable_slots == set()


def test_unsupported_source():
    with pytest.raises(TypeError):
        load_exams(42)


def test_save_assignments_csv(tmp_path):
    path = tmp_path / "out.csv"
    save_assignments_csv(str(path), {1: 0, 0: 1})
    with open(path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows == [["exam_id", "teacher_id"], ["0", "1"], ["1", "0"]]


def test_assignment_pairs():
    assert encode_assignments({1: 0, 0: 1}) == "0:1;1:0"
    assert encode_assignments({}) == ""
    assert decode_assignments("0:1; 1:0;") == {0: 1, 1: 0}
    assert decode_assignments("") == {}


@pytest.mark.parametrize("text", ["0-1", "a:1", "0:1:2"])
def test_malformed_pairs(text):
    with pytest.raises(InputError):
        decode_assignments(text)
