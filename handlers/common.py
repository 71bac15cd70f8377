"""
handlers/common.py
------------------
Helpers shared by the console drivers.
"""

import logging
import os

from models.result import Result


def check(result: Result, logger: logging.Logger, context: str) -> bool:
    """
    Log a failed result as ``[Category] context: message``.

    Returns:
        True if the result succeeded.
    """
    if result.ok:
        return True
    logger.warning(f"{result.error.kind.label} {context}: {result.error.message}")
    return False


def write_buffer(buffer, directory: str, filename: str, logger: logging.Logger) -> str | None:
    """
    Write an in-memory export to `directory/filename`.

    Returns:
        The written path, or None if the write failed (the failure is logged).
    """
    path = os.path.join(directory, filename)
    try:
        os.makedirs(directory, exist_ok=True)
        with open(path, "wb") as fh:
            fh.write(buffer.getvalue())
    except OSError as e:
        logger.error(f"[IOFailure] Could not write export {path}: {e}")
        return None
    logger.info(f"Export written to {path}")
    return path
