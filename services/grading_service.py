"""
services/grading_service.py
---------------------------
Reads student results from a comma-delimited text file, derives grades,
and writes a one-line-per-student report.

Input format (one record per line, blank lines ignored):
    101, Alice Smith, 84
"""

import os
import re
from collections import Counter

from models.result import ErrorKind, Result
from models.student import GRADES, Student
from utils.logger import get_logger

logger = get_logger(__name__)

# Plain ASCII integers only: no digit separators, no non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")

SAMPLE_LINES = (
    "101, Alice Smith, 84",
    "102, Bernard Mensah, 73",
    "103, Cynthia Ofori, 65",
    "104, David Owusu, 49",
)


class GradingService:
    """Parses student input files and produces grade reports."""

    def ensure_sample_input(self, path: str) -> Result[bool]:
        """
        Write the sample input file if `path` does not exist yet.

        Returns:
            Success with True if the file was created, False if it was
            already there, or IO_FAILURE.
        """
        if os.path.exists(path):
            return Result.success(False)
        try:
            with open(path, "w", encoding="utf-8") as fh:
                fh.write("\n".join(SAMPLE_LINES) + "\n")
        except OSError as e:
            logger.error(f"Failed to create sample input {path}: {e}")
            return Result.failure(ErrorKind.IO_FAILURE, f"Could not write {path}: {e}")
        logger.info(f"Sample input file '{path}' created.")
        return Result.success(True)

    def read_students(self, path: str) -> Result[list[Student]]:
        """
        Parse every non-blank line of `path` into a Student.
        Lines end at \\n or \\r only; a leading UTF-8 BOM is dropped.
        The first bad line aborts the whole read.

        Returns:
            Success with the students in file order, or one of
            MALFORMED_RECORD, UNPARSABLE_FIELD, FILE_ABSENT, FILE_UNREADABLE.
        """
        try:
            with open(path, "r", encoding="utf-8-sig") as fh:
                lines = [line.rstrip("\r\n") for line in fh]
        except FileNotFoundError:
            return Result.failure(ErrorKind.FILE_ABSENT, f"File not found: {path}")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read {path}: {e}")
            return Result.failure(ErrorKind.FILE_UNREADABLE, f"Could not read {path}: {e}")

        students = []
        for line_no, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            parsed = self._parse_line(line, line_no)
            if not parsed.ok:
                logger.warning(f"Aborting read of {path}: {parsed.error.message}")
                return parsed
            students.append(parsed.value)

        logger.info(f"Read {len(students)} students from {path}")
        return Result.success(students)

    def write_report(self, students: list[Student], path: str) -> Result[int]:
        """
        Write one formatted line per student to `path`.

        Returns:
            Success with the number of lines written, or IO_FAILURE.
        """
        try:
            with open(path, "w", encoding="utf-8") as fh:
                for s in students:
                    fh.write(f"{s}\n")
        except OSError as e:
            logger.error(f"Failed to write report {path}: {e}")
            return Result.failure(ErrorKind.IO_FAILURE, f"Could not write {path}: {e}")
        logger.info(f"Report written to {path} ({len(students)} students)")
        return Result.success(len(students))

    @staticmethod
    def grade_distribution(students: list[Student]) -> dict[str, int]:
        """Count of students per grade, A through F, zeros included."""
        counts = Counter(s.grade for s in students)
        return {g: counts.get(g, 0) for g in GRADES}

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _parse_line(line: str, line_no: int) -> Result[Student]:
        parts = line.split(",")
        if len(parts) < 3:
            return Result.failure(
                ErrorKind.MALFORMED_RECORD,
                f"Line {line_no}: expected 3 fields, got {len(parts)}",
            )

        id_str, name, score_str = (p.strip() for p in parts[:3])
        if not _INTEGER.fullmatch(id_str):
            return Result.failure(ErrorKind.UNPARSABLE_FIELD, f"Line {line_no}: invalid Id '{id_str}'")
        if not _INTEGER.fullmatch(score_str):
            return Result.failure(ErrorKind.UNPARSABLE_FIELD, f"Line {line_no}: invalid score '{score_str}'")

        return Result.success(Student(id=int(id_str), full_name=name, score=int(score_str)))
