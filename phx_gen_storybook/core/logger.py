"""Logging for phx-gen-storybook with console and optional file output."""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

LOGGER_NAME = "phx_gen_storybook"

# Track if file logging has been set up
_file_logging_configured = False


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> None:
    """Mirror generator logs into a file.

    Args:
        log_file: Path to log file (defaults to ./phx_gen_storybook.log)
        verbose: Enable debug-level logging

    Note:
        Creates the parent directory if it doesn't exist. Repeated calls are ignored.
    """
    global _file_logging_configured

    if _file_logging_configured:
        return

    target_log_file = Path(log_file) if log_file else Path.cwd() / "phx_gen_storybook.log"
    target_log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger(LOGGER_NAME)
    file_handler = logging.FileHandler(target_log_file)
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    _file_logging_configured = True

    root_logger.info(f"phx-gen-storybook logging initialized: {target_log_file}")


def set_verbose(verbose: bool) -> None:
    """Switch every package logger between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger(LOGGER_NAME).setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith(LOGGER_NAME) and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger instance with console output.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler
    """
    logger = logging.getLogger(name)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
