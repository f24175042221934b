# src/budgetmaster/utils/logging.py
from loguru import logger
import sys
from pathlib import Path
from typing import Union

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[module]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}:{function}:{line} | {message}"
)

logger.configure(extra={"module": "budgetmaster"})


def configure_logging(level: str = "INFO", log_dir: Union[str, Path, None] = None) -> None:
    """Install the application sinks, replacing any configured before."""
    logger.remove()

    logger.add(sys.stderr, colorize=True, format=CONSOLE_FORMAT, level=level)

    if log_dir is None:
        return

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path / "app.log",
        rotation="500 MB",
        retention="10 days",
        compression="zip",
        format=FILE_FORMAT,
        level=level,
    )
    logger.add(
        log_path / "error.log",
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format=FILE_FORMAT,
        level="ERROR",
    )


def get_logger(name: Union[str, None] = None):
    """Get a logger bound to a specific module"""
    return logger.bind(module=name if name else "budgetmaster")
