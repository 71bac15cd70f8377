"""
handlers/grading_handler.py
---------------------------
Grading demo: read the student input file (creating a sample one if it is
missing), write the text report, and export an Excel workbook and a
grade distribution chart.
"""

from config import EXPORT_DIR, STUDENT_INPUT_PATH, STUDENT_REPORT_PATH
from handlers.common import check, write_buffer
from models.student import Student
from services.chart_service import ChartService
from services.export_service import ExportService
from services.grading_service import GradingService
from utils.logger import get_logger

logger = get_logger(__name__)


def run_grading(
    input_path: str = STUDENT_INPUT_PATH,
    report_path: str = STUDENT_REPORT_PATH,
    export_dir: str = EXPORT_DIR,
) -> list[Student] | None:
    """
    Run the grading demo.

    Returns:
        The graded students, or None if the input could not be read
        (a malformed line aborts the whole run).
    """
    service = GradingService()
    sample = service.ensure_sample_input(input_path)
    if check(sample, logger, "CreateSampleInput") and sample.value:
        print(f"Sample input file '{input_path}' created.")

    read = service.read_students(input_path)
    if not check(read, logger, "ReadStudents"):
        return None
    students = read.value

    if check(service.write_report(students, report_path), logger, "WriteReport"):
        print(f"Report written to {report_path}")

    distribution = service.grade_distribution(students)
    print("Grades: " + ", ".join(f"{g}={n}" for g, n in distribution.items()))

    write_buffer(ExportService().grades_to_excel(students), export_dir, "grades.xlsx", logger)
    chart = ChartService().grade_distribution_bar(students)
    if chart is not None:
        write_buffer(chart, export_dir, "grade_distribution.png", logger)
    return students
