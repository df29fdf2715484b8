"""
Logging configuration for the finding-aid splitter

Includes HierarchyLogger, which indents messages by a unit's depth in the
archival tree so the split log reads like the finding aid itself.
"""

import io
import logging
import sys

LOGGER_NAME = "findingaid"

_BRANCH = "├── "
_PIPE = "│   "


class HierarchyLogger:
    """Logger wrapper that prefixes messages with tree indentation"""

    def __init__(self, base_logger: logging.Logger) -> None:
        self._logger = base_logger

    @staticmethod
    def indent(depth: int) -> str:
        """Tree prefix for a unit at the given depth (0 = archdesc)"""
        if depth <= 0:
            return ""
        return _PIPE * (depth - 1) + _BRANCH

    def debug(self, msg: str, *args, depth: int = 0, **kwargs) -> None:
        self._logger.debug(f"{self.indent(depth)}{msg}", *args, **kwargs)

    def info(self, msg: str, *args, depth: int = 0, **kwargs) -> None:
        self._logger.info(f"{self.indent(depth)}{msg}", *args, **kwargs)

    def warning(self, msg: str, *args, depth: int = 0, **kwargs) -> None:
        self._logger.warning(f"{self.indent(depth)}{msg}", *args, **kwargs)

    def error(self, msg: str, *args, depth: int = 0, **kwargs) -> None:
        self._logger.error(f"{self.indent(depth)}{msg}", *args, **kwargs)


def setup_logging(level=logging.INFO):
    """
    Configure logging for the splitter

    Args:
        level: Logging level (default: INFO)

    Returns:
        HierarchyLogger: Configured logger with depth indentation
    """
    base_logger = logging.getLogger(LOGGER_NAME)
    base_logger.setLevel(level)

    # Remove existing handlers
    base_logger.handlers = []

    # Records go to stdout, log lines to stderr (UTF-8 regardless of locale)
    stream = io.TextIOWrapper(
        sys.stderr.buffer, encoding="utf-8", errors="replace", write_through=True
    )
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)

    formatter = logging.Formatter("%(levelname)8s %(message)s")
    handler.setFormatter(formatter)

    base_logger.addHandler(handler)

    return HierarchyLogger(base_logger)


# Default logger with hierarchy indentation
logger = HierarchyLogger(logging.getLogger(LOGGER_NAME))
