"""
services/export_service.py
---------------------------
Generates CSV and Excel exports of repository snapshots.
"""

import io

import pandas as pd

from models.inventory import InventoryItem
from models.student import Student
from utils.logger import get_logger

logger = get_logger(__name__)


class ExportService:
    """Turns inventory and grading data into downloadable CSV/Excel files."""

    def inventory_to_csv(self, items: list[InventoryItem]) -> io.BytesIO:
        """
        Export inventory items as CSV.

        Returns:
            A BytesIO buffer containing UTF-8 (with BOM) CSV data.
        """
        data = [
            {
                "id": item.id,
                "name": item.name,
                "quantity": item.quantity,
                "date_added": item.date_added.isoformat(),
            }
            for item in items
        ]

        df = pd.DataFrame(data, columns=["id", "name", "quantity", "date_added"])
        buffer = io.BytesIO()
        df.to_csv(buffer, index=False, encoding="utf-8-sig")
        buffer.seek(0)
        logger.info(f"Exported {len(data)} inventory items as CSV")
        return buffer

    def grades_to_excel(self, students: list[Student]) -> io.BytesIO:
        """
        Export graded students as an Excel (.xlsx) workbook.

        Sheets:
            Grades: one row per student.
            Summary: student count per grade (only when there is data).

        Returns:
            A BytesIO buffer containing the workbook.
        """
        data = [
            {"id": s.id, "name": s.full_name, "score": s.score, "grade": s.grade}
            for s in students
        ]

        df = pd.DataFrame(data, columns=["id", "name", "score", "grade"])

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
            df.to_excel(writer, sheet_name="Grades", index=False)

            if data:
                summary = df.groupby("grade")["id"].count().reset_index()
                summary.columns = ["grade", "students"]
                summary.to_excel(writer, sheet_name="Summary", index=False)

        buffer.seek(0)
        logger.info(f"Exported {len(data)} students as Excel")
        return buffer
