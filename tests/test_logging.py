"""Tests for the shared logging configuration."""
import sys

from src.utils.logging import format_exception

def test_format_exception_single_line():
    """Test tracebacks are flattened into one line."""
    try:
        raise RuntimeError("broken calendar")
    except RuntimeError:
        formatted = format_exception(sys.exc_info())

    assert "\n" not in formatted
    assert " | " in formatted
    assert "RuntimeError: broken calendar" in formatted

def test_format_exception_without_error():
    """Test nothing is formatted outside an exception."""
    assert format_exception(None) is None
    assert format_exception((None, None, None)) is None
