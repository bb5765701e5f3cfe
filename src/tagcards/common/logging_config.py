"""
Logging configuration for tagcards.

Human-readable console output with structured context fields appended.
"""
import logging
import sys
from typing import Optional, TextIO

# Attributes every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


class ContextFormatter(logging.Formatter):
    """Formatter that appends `extra` fields to the message.

    Format: timestamp [LEVEL] logger_name: message | key1=value1 key2=value2
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',
        'GRAY': '\033[90m',
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_colors = use_colors

    def _paint(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{self.COLORS[color]}{text}{self.COLORS['RESET']}"

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)

        levelname = record.levelname
        if levelname in self.COLORS:
            base_msg = base_msg.replace(f"[{levelname}]", self._paint(f"[{levelname}]", levelname), 1)

        extra_fields = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and value is not None
        ]

        if extra_fields:
            return f"{base_msg}{self._paint(' | ' + ' '.join(extra_fields), 'GRAY')}"
        return base_msg


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure logging for the `tagcards` namespace.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               DEBUG adds per-file read and parse summaries.
        stream: Output stream, stdout by default. Colours are used only
                when the stream is a terminal.

    Example:
        >>> from tagcards.common.logging_config import setup_logging
        >>> setup_logging("DEBUG")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    stream = stream or sys.stdout

    formatter = ContextFormatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        use_colors=hasattr(stream, "isatty") and stream.isatty(),
    )

    console_handler = logging.StreamHandler(stream)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger('tagcards')
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Wrote result", extra={"fields": 3})
    """
    return logging.getLogger(name)
