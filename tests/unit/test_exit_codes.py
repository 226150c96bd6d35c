"""Tests for exit_codes module."""

from cpgdiscord.cli.exit_codes import (
    EXIT_ERROR,
    EXIT_SIGINT,
    EXIT_SIGTERM,
    EXIT_SUCCESS,
    EXIT_USAGE,
)


class TestExitCodes:
    """Test exit code constants."""

    def test_shell_conventions(self):
        assert EXIT_SUCCESS == 0
        assert EXIT_ERROR == 1
        assert EXIT_USAGE == 2

    def test_signal_codes(self):
        assert EXIT_SIGINT == 128 + 2
        assert EXIT_SIGTERM == 128 + 15

    def test_exit_codes_are_unique_bytes(self):
        codes = [EXIT_SUCCESS, EXIT_ERROR, EXIT_USAGE, EXIT_SIGINT, EXIT_SIGTERM]
        assert len(codes) == len(set(codes))
        assert all(0 <= code <= 255 for code in codes)
