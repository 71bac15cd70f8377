"""
main.py
-------
Entry point for the record-keeping demos.

Usage:
    python main.py                      # run every demo
    python main.py grading warehouse    # run only the named demos
"""

import sys
from typing import Callable

from handlers.finance_handler import run_finance
from handlers.grading_handler import run_grading
from handlers.health_handler import run_health
from handlers.inventory_handler import run_inventory
from handlers.warehouse_handler import run_warehouse
from utils.logger import get_logger

logger = get_logger(__name__)

# Run order when no demo is named
COMMANDS: dict[str, Callable] = {
    "finance": run_finance,
    "health": run_health,
    "inventory": run_inventory,
    "grading": run_grading,
    "warehouse": run_warehouse,
}


def main(argv: list[str] | None = None) -> int:
    """Run the requested demos. Returns the process exit status."""
    names = list(sys.argv[1:] if argv is None else argv) or list(COMMANDS)

    unknown = [n for n in names if n not in COMMANDS]
    if unknown:
        logger.error(f"Unknown demo(s): {', '.join(unknown)}. Choose from: {', '.join(COMMANDS)}")
        return 2

    for name in names:
        logger.info(f"── Running {name} demo ──")
        COMMANDS[name]()
        print()

    logger.info("All requested demos finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
