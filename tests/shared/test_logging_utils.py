"""Tests for logging setup."""

import logging

from magic_sorter.shared.logging_utils import log_level


class TestLogLevel:
    """Test the -v/-q switch mapping."""

    def test_default_is_info(self) -> None:
        assert log_level() == logging.INFO

    def test_verbose(self) -> None:
        assert log_level(verbose=True) == logging.DEBUG

    def test_quiet_wins_over_verbose(self) -> None:
        assert log_level(verbose=True, quiet=True) == logging.WARNING
