"""
Session log setup shared by the contexts.

A session is one CLI invocation or one export_resume(log_dir=...) call: it gets
its own directory, a full DEBUG log file, and an INFO console stream. Contexts
wrap this in contexts/{context}/logger.py and add their own prefix.
"""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv
from loguru import logger

from resumate import __version__

load_dotenv()
CONSOLE_LOG_LEVEL = os.getenv("CONSOLE_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    session_info: Optional[Mapping[str, object]] = None,
) -> Path:
    """
    Start a logging session for a context.

    Replaces any existing sinks with a DEBUG file sink at
    `{log_dir}/{context_name}.log` and a console sink at CONSOLE_LOG_LEVEL,
    then writes the session header.

    Args:
        context_name: Context identifier, also the log file stem (e.g. "render")
        log_dir: Directory for this session, created if missing
        session_info: Extra header lines, e.g. {"Template": "modern"}

    Returns:
        Path to the log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_session_header(context_name, session_info)
    return log_file


def log_session_header(context_name: str, session_info: Optional[Mapping[str, object]] = None) -> None:
    """Write the package version, invocation and session details to the current sinks."""
    logger.info("-" * 60)
    logger.info(f"resumate {__version__} | {context_name} session")
    logger.info(f"Invocation: {' '.join(sys.argv) or '<interactive>'}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")

    for key, value in (session_info or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("-" * 60)
