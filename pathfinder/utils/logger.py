"""
Session logger setup for PATHFINDER scripts.

Library code never configures loguru; each context logs through its own
contexts/{context}/logger.py wrappers. Scripts call setup_logger() once per
run to send those lines to a session file and to the console.
"""

import sys
from pathlib import Path

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: dict = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for one CLI session.

    Everything (DEBUG and up) goes to {log_dir}/{context_name}.log. The
    console gets console_level and up on stderr, so stdout stays clean for
    --json output.

    Args:
        context_name: Session identifier, used as the log file stem
        log_dir: Directory for this session (created if missing)
        extra_provenance: Key-value pairs written under the session header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    logger.debug(f"Session: {context_name} | Command: {' '.join(sys.argv)}")
    for key, value in (extra_provenance or {}).items():
        logger.debug(f"{key}: {value}")

    return log_file
