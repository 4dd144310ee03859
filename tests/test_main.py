import csv

import pytest

from main import main


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_cli_from_csv(tmp_path, capsys):
    exams = _write(tmp_path / "exams.csv", "name,time_slot\nMath,9AM\nPhysics,9AM\n")
    teachers = _write(tmp_path / "teachers.csv", "name,unavailable_slots\nSmith,\nJones,1PM\n")
    out = tmp_path / "assignments.csv"
    code = main(["--exams", exams, "--teachers", teachers, "--out_assignments", str(out)])
    assert code == 0
    printed = capsys.readouterr().out
    assert "Teacher: Smith" in printed and "Teacher: Jones" in printed
    with open(out, newline="") as f:
        assert list(csv.reader(f)) == [["exam_id", "teacher_id"], ["0", "0"], ["1", "1"]]


def test_cli_infeasible_exit_code(tmp_path, capsys):
    exams = _write(tmp_path / "exams.csv", "name,time_slot\nMath,9AM\n")
    teachers = _write(tmp_path / "teachers.csv", "name,unavailable_slots\nSmith,9AM\n")
    out = tmp_path / "assignments.csv"
    code = main(["--exams", exams, "--teachers", teachers, "--out_assignments", str(out)])
    assert code == 1
    printed = capsys.readouterr().out
    assert "No valid schedule found" in printed
    assert "Feasible: False" in printed
    assert "Valid (conflicts)" not in printed
    assert not out.exists()


def test_cli_generate(tmp_path, capsys):
    out = tmp_path / "assignments.csv"
    code = main(["--generate", "6", "--slots", "3", "--num_teachers", "6",
                 "--unavailability", "0", "--out_assignments", str(out), "--order", "degree"])
    assert code == 0
    assert out.exists()
    assert "Exams: 6" in capsys.readouterr().out


def test_cli_requires_input():
    with pytest.raises(SystemExit):
        main([])
