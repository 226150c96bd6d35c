"""Tests for exceptions module."""

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from cpgdiscord.exceptions import (
    ConfigurationError,
    CpGDiscordError,
    FileFormatError,
    InputFileError,
    OutputWriteError,
    ValidationError,
    WindowBoundsError,
)


@pytest.mark.parametrize(
    "exc_type",
    [
        ConfigurationError,
        FileFormatError,
        InputFileError,
        OutputWriteError,
        ValidationError,
        WindowBoundsError,
    ],
)
def test_all_errors_share_base(exc_type):
    assert issubclass(exc_type, CpGDiscordError)
    with pytest.raises(CpGDiscordError):
        raise exc_type("boom")


def test_input_file_error_keeps_path():
    error = InputFileError("Input file not found: x.bam", path=Path("x.bam"))
    assert str(error) == "Input file not found: x.bam"
    assert error.path == Path("x.bam")


def test_output_write_error_defaults():
    error = OutputWriteError()
    assert str(error) == ""
    assert error.path is None
