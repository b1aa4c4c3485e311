"""
Logging session utilities.

A logging session is a timestamped directory under LOGS_PATH holding one log
file per context (render.log, ...) plus links to whatever the session produced.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from loguru import logger

from quire import __version__
from quire.utils.timestamp import now

LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"


def session_dir(logs_root: Path, context_name: str) -> Path:
    """
    Pick a fresh directory for a logging session, e.g. outs/logs/render_20251114_123456.

    Sessions started within the same second get a numeric suffix.
    """
    base = Path(logs_root) / f"{context_name}_{now()}"
    candidate, n = base, 1
    while candidate.exists():
        candidate = base.with_name(f"{base.name}_{n}")
        n += 1
    return candidate


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Mapping[str, object]] = None,
    console_level: Optional[str] = None,
) -> Path:
    """
    Route loguru output to `<log_dir>/<context_name>.log` and the console.

    The file receives every DEBUG message. The console threshold comes from
    `console_level`, then QUIRE_LOG_LEVEL, then INFO.

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            "render",
            session_dir(Path("outs/logs"), "render"),
            extra_provenance={"Backend": "procedural"},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=console_level or os.getenv("QUIRE_LOG_LEVEL", "INFO"),
        colorize=True,
    )

    log_provenance(context_name, extra_provenance)
    return log_file


def log_provenance(context_name: str, extra: Optional[Mapping[str, object]] = None) -> None:
    """Write a header recording how and where this session was started."""
    fields = {
        "Session": context_name,
        "quire": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        **(extra or {}),
    }
    width = max(len(key) for key in fields)

    logger.debug("-" * 72)
    for key, value in fields.items():
        logger.debug(f"{key:<{width}} : {value}")
    logger.debug("-" * 72)
