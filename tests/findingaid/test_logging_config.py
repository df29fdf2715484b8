"""Tests for logging configuration."""

import logging
import sys

from findingaid.logging_config import LOGGER_NAME, HierarchyLogger, setup_logging


class TestHierarchyLogger:
    """Tests for depth indentation."""

    def test_indent(self) -> None:
        assert HierarchyLogger.indent(0) == ""
        assert HierarchyLogger.indent(1) == "├── "
        assert HierarchyLogger.indent(3) == "│   │   ├── "


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_writes_utf8_to_stderr_without_touching_it(self, capsys) -> None:
        stderr = sys.stderr
        errors = stderr.errors
        base_logger = logging.getLogger(LOGGER_NAME)

        hierarchy = setup_logging(logging.DEBUG)
        handler = base_logger.handlers[0]
        try:
            assert sys.stderr is stderr
            assert sys.stderr.errors == errors
            assert handler.stream is not stderr
            assert handler.stream.encoding == "utf-8"

            hierarchy.info("Säätiö", depth=1)

            captured = capsys.readouterr()
            assert "INFO ├── Säätiö" in captured.err
            assert captured.out == ""
        finally:
            # Keep the captured buffer open when the wrapper goes away
            handler.stream.detach()
            base_logger.handlers = []
            base_logger.setLevel(logging.NOTSET)
