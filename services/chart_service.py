"""
services/chart_service.py
--------------------------
Generates chart images for grade reports.
Uses matplotlib to draw a bar chart and returns it as a BytesIO buffer.
"""

import io

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend, no display needed
import matplotlib.pyplot as plt

from models.student import GRADES, Student
from utils.logger import get_logger

logger = get_logger(__name__)

_GRADE_COLORS = {
    "A": "#82E0AA",
    "B": "#4ECDC4",
    "C": "#F7DC6F",
    "D": "#F8C471",
    "F": "#FF6B6B",
}


class ChartService:
    """Generates visual charts for grade data."""

    def grade_distribution_bar(self, students: list[Student]) -> io.BytesIO | None:
        """
        Generate a bar chart of how many students got each grade.

        Returns:
            BytesIO buffer with PNG image, or None if no data.
        """
        if not students:
            return None

        counts = {g: 0 for g in GRADES}
        for s in students:
            counts[s.grade] += 1

        grades = list(counts.keys())
        values = list(counts.values())

        fig, ax = plt.subplots(figsize=(7, 4.5))

        bars = ax.bar(
            range(len(grades)), values,
            color=[_GRADE_COLORS[g] for g in grades],
            edgecolor="#333",
            linewidth=1.2,
            width=0.6,
            zorder=3,
        )

        for bar, count in zip(bars, values):
            if count > 0:
                ax.text(
                    bar.get_x() + bar.get_width() / 2, bar.get_height() + 0.05,
                    str(count),
                    ha="center", va="bottom",
                    fontsize=10, fontweight="bold",
                )

        ax.set_xticks(range(len(grades)))
        ax.set_xticklabels(grades, fontsize=11)
        ax.set_ylabel("Students", fontsize=11)
        ax.set_title(
            f"Grade distribution ({len(students)} students)",
            fontsize=13, fontweight="bold", pad=15,
        )

        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        ax.grid(axis="y", alpha=0.3)
        ax.set_axisbelow(True)

        plt.tight_layout()

        buf = io.BytesIO()
        fig.savefig(buf, format="png", dpi=120, bbox_inches="tight")
        buf.seek(0)
        plt.close(fig)

        logger.info(f"Generated grade distribution chart for {len(students)} students")
        return buf
