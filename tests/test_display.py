"""Tests for the refresh banner."""
import pytest

from devtoolz import __version__
from devtoolz.refresh.display import format_header, should_show_header


@pytest.mark.parametrize("argv", [
    [],
    ["-p", "api"],
    ["--help"],
    ["--version"],
    ["-h", "--help", "-V"],
])
def test_header_shown_unless_every_flag_present(argv):
    """
    Test the banner condition.
    Expected: shown whenever at least one help/version flag is absent.
    """
    # Act & Assert
    assert should_show_header(argv) is True


def test_header_hidden_when_all_flags_present():
    """
    Test the only case that hides the banner.
    Expected: all four flags present hides it.
    """
    # Act & Assert
    assert should_show_header(["-h", "--help", "-V", "--version"]) is False


def test_format_header_contains_version():
    """
    Test banner content.
    Expected: product name with version and utility name.
    """
    # Act
    header = format_header()

    # Assert
    assert f"DevToolz v{__version__}" in header
    assert "utility: refresh" in header
    assert all(len(line) == 40 for line in header.splitlines()[:5])
