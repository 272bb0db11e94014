import builtins

import pytest

from dsakit.cgpa import Student, calculate_cgpa, grade_to_points, main


def _feed(monkeypatch, answers):
    it = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.mark.parametrize(
    "grade, expected", [("B", 8), ("C", 7), ("D", 6), ("E", 5), ("F", 0)]
)
def test_grade_points(grade, expected):
    assert grade_to_points(grade, 50.0) == expected


def test_grade_a_depends_on_percentage():
    assert grade_to_points("A", 9.5) == 10
    assert grade_to_points("A", 9.4) == 9


def test_invalid_grade():
    with pytest.raises(ValueError):
        grade_to_points("Z", 80.0)


def test_cgpa_of_equal_points_is_that_point():
    assert calculate_cgpa([8, 8, 8], [1, 3, 4]) == 8


def test_cgpa_weighted():
    assert calculate_cgpa([10, 8], [3, 1]) == pytest.approx(9.5)


def test_cgpa_lies_between_extremes():
    points, credits = [5, 9, 7], [2, 3, 4]
    result = calculate_cgpa(points, credits)
    assert min(points) <= result <= max(points)


def test_cgpa_zero_credits():
    with pytest.raises(ValueError):
        calculate_cgpa([8], [0])


def test_cgpa_length_mismatch():
    with pytest.raises(ValueError):
        calculate_cgpa([8, 9], [1])


def test_student_defaults_are_independent():
    first = Student("Ann", "S1")
    second = Student("Bob", "S2")
    first.grade_points.append(9)
    assert second.grade_points == []


def test_main_single_subject(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "Ann", "S1", "1", "a", "9.7", "4"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "CGPA for semester 1: 10" in out
    assert "Your overall CGPA is: 10" in out


def test_main_rejects_invalid_grade(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "Ann", "S1", "1", "Q"])
    assert main([]) == 1
    assert "Invalid grade entered" in capsys.readouterr().out


def test_main_reprompts_on_bad_number(monkeypatch, capsys):
    _feed(monkeypatch, ["x", "1", "Ann", "S1", "1", "B", "70", "3"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Invalid input. Please try again." in out
    assert "Your overall CGPA is: 8" in out


def test_main_stops_on_end_of_input(monkeypatch):
    _feed(monkeypatch, ["2", "Ann"])
    assert main([]) == 1