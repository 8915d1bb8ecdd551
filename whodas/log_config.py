"""Logging configuration for the root logger (Python >= 3.11)."""

import logging
import sys
from pathlib import Path


def configure_logging(
    stream_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    file_path: Path | str | None = None,
    stream: bool = True,
    ignore_libs: list[str] | None = None,
) -> None:
    """
    Configures the root logger for console and file logging.

    Parameters:
    - stream_level: The logging level for the stream handler.
    - file_level: The logging level for the file handler.
    - file_path: The path to the log file (if None, file logging is disabled).
    - stream: Whether to enable console logging (default is True).
    - ignore_libs: Library names whose logs are reduced to warnings and above.

    Example usage:
    >>> import logging
    >>> configure_logging(stream_level=logging.DEBUG)
    >>> logging.debug("Scoring 10 respondents.")
    """
    handlers = []

    if stream:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setLevel(stream_level)
        stream_handler.setFormatter(
            ColoredFormatter(
                "{asctime} | {color}{levelname:8}{reset}| {name} | {message}",
                style="{",
                datefmt="%H:%M:%S",
                use_colors=sys.stdout.isatty(),
            )
        )
        handlers.append(stream_handler)

    # FileHandler only if a file path is provided
    if file_path:
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("{asctime} | {levelname:8} | {name} | {message}", style="{")
        )
        handlers.append(file_handler)

    for lib in ignore_libs or []:
        logging.getLogger(lib).setLevel(logging.WARNING)

    close_root_logging()
    logging.basicConfig(
        level=min(stream_level, file_level) if file_path else stream_level,
        handlers=handlers,
        force=True,
    )


def close_root_logging() -> None:
    """Closes and removes all handlers of the root logger."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)


class ColoredFormatter(logging.Formatter):
    """Logging Formatter that colors the level name with ANSI escape sequences."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[92m",
        "WARNING": "\033[93m",
        "ERROR": "\033[91m",
        "CRITICAL": "\033[1m\033[91m\033[4m",
    }
    RESET = "\033[0m"

    def __init__(self, *args, use_colors: bool = True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.use_colors = use_colors

    def format(self, record) -> str:
        record.color = self.COLORS.get(record.levelname, "") if self.use_colors else ""
        record.reset = self.RESET if self.use_colors else ""
        return super().format(record)
