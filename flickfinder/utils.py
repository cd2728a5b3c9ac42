"""
Logging setup for FlickFinder.

Every module logs through a child of the ``flickfinder`` logger. The parent
owns the handlers: one daily file in the log directory and a stdout handler
for warnings. The level comes from ``LOG_LEVEL`` unless given explicitly.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "flickfinder"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level_from_env(default: int = logging.INFO) -> int:
    """Read ``LOG_LEVEL`` as a logging level, ignoring unknown names."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "").upper())
    return level if isinstance(level, int) else default


def default_log_dir() -> Path:
    return Path(os.getenv("LOG_DIR", str(Path.cwd() / "logs")))


def _use_log_dir(logger: logging.Logger, log_dir: Path, level: int) -> None:
    """Point the logger's file handler at ``log_dir``, replacing any other."""
    log_file = os.path.abspath(log_dir / f"{logger.name}_{datetime.now().strftime('%Y%m%d')}.log")

    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            if handler.baseFilename == log_file:
                handler.setLevel(level)
                return
            logger.removeHandler(handler)
            handler.close()

    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)


def setup_logger(
    name: str = ROOT_LOGGER,
    log_dir: Optional[Path] = None,
    level: Optional[int] = None,
    console_output: bool = True,
) -> logging.Logger:
    """
    Get a component logger, configuring the ``flickfinder`` parent on first use.

    Args:
        name: Module or component name; bare names become ``flickfinder.<name>``
        log_dir: Directory for the log file. Passing one moves the file
            handler there; otherwise LOG_DIR or ./logs is used on first setup
        level: Logging level (defaults to LOG_LEVEL or INFO)
        console_output: Whether to also log warnings to stdout

    Returns:
        The component logger, which propagates to the configured parent
    """
    root = logging.getLogger(ROOT_LOGGER)
    if level is None:
        level = log_level_from_env()
    root.setLevel(level)

    if log_dir is not None or not root.handlers:
        _use_log_dir(root, Path(log_dir) if log_dir is not None else default_log_dir(), level)

    has_console = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    )
    if console_output and not has_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(console_handler)

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return root.getChild(name)
