"""Logging configuration for git-prompt-status"""
import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE = 'git_prompt_status'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that tints whole stderr lines by level when stderr is a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[2m',      # Dim
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[1;31m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 use_color: Optional[bool] = None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record):
        # record.levelname stays plain; the file handler formats the same record
        text = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return text
        return f"{color}{text}{self.RESET}"


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Everything goes to stderr (and the log file in debug mode) so that
    stdout only ever carries the status line.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages and also write a log file
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        log_dir = Path.home() / '.git-prompt-status'
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / 'git-prompt-status.log'
        file_handler = logging.FileHandler(log_file, mode='w')  # Overwrite each run
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    if debug:
        formatter = ColoredFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    else:
        formatter = ColoredFormatter(fmt='[%(name)s] %(message)s')
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module of this package.

    ``git_prompt_status.services.probes`` becomes ``probes``; names from
    outside the package are used unchanged.
    """
    if name == PACKAGE or name.startswith(PACKAGE + '.'):
        name = name.rsplit('.', 1)[-1]
    return logging.getLogger(name)
