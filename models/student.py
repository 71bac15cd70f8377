"""
models/student.py
-----------------
Domain model for a graded student.
"""

from dataclasses import dataclass

# (lower bound, upper bound, grade), inclusive on both ends
_GRADE_BANDS = (
    (80, 100, "A"),
    (70, 79, "B"),
    (60, 69, "C"),
    (50, 59, "D"),
)

GRADES = ("A", "B", "C", "D", "F")


def grade_for(score: int) -> str:
    """
    Bucket a numeric score into a letter grade.

    Scores outside 50..100 (including anything above 100) are an F.
    """
    for low, high, grade in _GRADE_BANDS:
        if low <= score <= high:
            return grade
    return "F"


@dataclass(frozen=True)
class Student:
    """
    A student's result.

    Attributes:
        id: Student number.
        full_name: Name as it appears in the input file.
        score: Integer score.
    """
    id: int
    full_name: str
    score: int

    @property
    def grade(self) -> str:
        return grade_for(self.score)

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"
