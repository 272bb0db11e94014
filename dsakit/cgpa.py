"""Grade-point and CGPA calculation with an interactive front end."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Optional, TypeVar

T = TypeVar("T")

_GRADE_POINTS = {"B": 8, "C": 7, "D": 6, "E": 5, "F": 0}
VALID_GRADES = frozenset("ABCDEF")


@dataclass
class Student:
    """A student and the grade points and credits gathered for them."""

    name: str
    student_id: str
    grade_points: list[int] = field(default_factory=list)
    credits: list[int] = field(default_factory=list)


def grade_to_points(grade: str, percentage: float) -> int:
    """Grade points for a letter grade; an A scores 10 when ``percentage`` >= 9.5."""
    if grade == "A":
        return 10 if percentage >= 9.5 else 9
    try:
        return _GRADE_POINTS[grade]
    except KeyError:
        raise ValueError(f"invalid grade: {grade!r}") from None


def calculate_cgpa(points: Sequence[int], credits: Sequence[int]) -> float:
    """Credit-weighted mean of ``points``."""
    if len(points) != len(credits):
        raise ValueError("points and credits must have the same length")
    total_credits = sum(credits)
    if total_credits == 0:
        raise ValueError("total credits must not be zero")
    total_points = sum(p * c for p, c in zip(points, credits))
    return total_points / total_credits


def _ask(prompt: str, convert: Callable[[str], T]) -> T:
    while True:
        text = input(prompt).strip()
        try:
            return convert(text)
        except ValueError:
            print("Invalid input. Please try again.")


def _word(text: str) -> str:
    parts = text.split()
    if not parts:
        raise ValueError("empty input")
    return parts[0]


def _format(value: float) -> str:
    return f"{value:g}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for semesters, grades and credits, then print the CGPA."""
    parser = argparse.ArgumentParser(description="Compute semester and overall CGPA.")
    parser.parse_args(argv)

    try:
        semesters = _ask("Enter number of semesters: ", int)
        student = Student(
            name=_ask("Enter student's name: ", _word),
            student_id=_ask("Enter student ID: ", _word),
        )

        total = 0.0
        for sem in range(1, semesters + 1):
            subjects = _ask(f"Enter the number of subjects for semester {sem}: ", int)
            grade_points: list[int] = []
            credits: list[int] = []
            for i in range(1, subjects + 1):
                answer = input(
                    f"Enter grade for subject {i} (A+/A/B+/B/C/D/E/F): "
                ).strip()
                grade = answer[:1].upper()
                if grade not in VALID_GRADES:
                    print(
                        "Invalid grade entered. Please enter a valid grade "
                        "(A+/A/B+/B/C/D/E/F)."
                    )
                    return 1
                percentage = _ask(f"Enter percentage for subject {i}: ", float)
                credit = _ask(f"Enter the credit hours for subject {i}: ", int)
                grade_points.append(grade_to_points(grade, percentage))
                credits.append(credit)

            student.grade_points.extend(grade_points)
            student.credits.extend(credits)
            try:
                semester_cgpa = calculate_cgpa(grade_points, credits)
            except ValueError as exc:
                print(f"Cannot compute CGPA for semester {sem}: {exc}")
                return 1
            print(f"CGPA for semester {sem}: {_format(semester_cgpa)}")
            total += semester_cgpa
    except EOFError:
        print()
        return 1

    overall = total / semesters if semesters else math.nan
    print(f"Your overall CGPA is: {_format(overall)}")
    return 0