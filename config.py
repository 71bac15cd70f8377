"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Inventory logger ──────────────────────────────────────
INVENTORY_LOG_PATH: str = os.getenv("INVENTORY_LOG_PATH", "inventory_log.json")

# ── Student grading ───────────────────────────────────────
STUDENT_INPUT_PATH: str = os.getenv("STUDENT_INPUT_PATH", "students_input.txt")
STUDENT_REPORT_PATH: str = os.getenv("STUDENT_REPORT_PATH", "students_report.txt")

# ── Exports (CSV / Excel / charts) ────────────────────────
EXPORT_DIR: str = os.getenv("EXPORT_DIR", "exports")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE: str = os.getenv("LOG_FILE", "")  # empty = stdout only

# ── Finance ───────────────────────────────────────────────
DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "EUR")
SAVINGS_OPENING_BALANCE: float = float(os.getenv("SAVINGS_OPENING_BALANCE", "1000"))
