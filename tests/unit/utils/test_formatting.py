"""Unit tests for formatting utilities."""

import logging

import pytest
from treesweep.utils.formatting import configure_logging, format_size


class TestFormatSize:
    """Tests for format_size."""

    @pytest.mark.parametrize(
        ("size", "expected"),
        [
            (0, "0.0 B"),
            (100, "100.0 B"),
            (1023, "1023.0 B"),
            (1024, "1.0 KB"),
            (1536, "1.5 KB"),
            (1024 * 1024, "1.0 MB"),
            (5 * 1024**3, "5.0 GB"),
            (2048 * 1024**3, "2048.0 GB"),
        ],
    )
    def test_scaling(self, size: int, expected: str) -> None:
        """Sizes scale by 1024 with one decimal, capped at GB."""
        assert format_size(size) == expected


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level(self) -> None:
        configure_logging()
        logger = logging.getLogger("treesweep")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_verbose_level(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("treesweep").level == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        configure_logging()
        configure_logging(verbose=True)
        assert len(logging.getLogger("treesweep").handlers) == 1
