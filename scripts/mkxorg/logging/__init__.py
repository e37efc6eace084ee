import logging
import sys
from typing import Union

ROOT_LOGGER = "mkxorg"

LEVEL_COLORS = {
    "DEBUG": "\x1b[36m",
    "INFO": "\x1b[32m",
    "WARNING": "\x1b[33m",
    "ERROR": "\x1b[31m",
    "CRITICAL": "\x1b[41m",
}
RESET = "\x1b[0m"


class ColoredFormatter(logging.Formatter):
    def __init__(self, fmt: str, color: bool = True):
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        color = LEVEL_COLORS.get(levelname, "") if self.color else ""
        record.levelname = f"{color}{levelname}{RESET}" if color else levelname
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def _level_value(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    level_value = logging.getLevelName(level)
    if isinstance(level_value, str):
        return logging.WARNING
    return level_value


def configure_logging(level: Union[str, int] = "WARNING", color: bool = True) -> None:
    """Install handlers on the package logger.

    Records go to stderr because stdout may carry the generated config.
    Calling this again replaces the previous handlers.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(_level_value(level))
    root.propagate = False

    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_format = "[%(levelname)s] %(name)s: %(message)s"
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter(console_format, color=color))
    root.addHandler(console_handler)


class Logger:
    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.logger.info(msg, *args, **kwargs)


__all__ = ["Logger", "ColoredFormatter", "configure_logging"]
