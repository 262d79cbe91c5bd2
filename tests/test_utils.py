"""Tests for utility functions."""
from unittest.mock import patch

import pytest

from devtoolz.exceptions import UpdateFailed
from devtoolz.themed_console import ThemedConsole
from devtoolz.utils import handle_errors


@patch('devtoolz.utils.console')
def test_handle_errors_reports_refresh_error(mock_console):
    """
    Test handle_errors with a refresh failure.
    Expected: "Error: <message>" shown and exit status 1.
    """
    # Arrange - create decorated function that raises
    @handle_errors
    def failing_function():
        raise UpdateFailed("Update of A failed: locked", "A")

    # Act & Assert - process exits with 1
    with pytest.raises(SystemExit) as exc:
        failing_function()

    assert exc.value.code == 1
    mock_console.error.assert_called_once_with("Error: Update of A failed: locked")


@patch('devtoolz.utils.console')
def test_handle_errors_reports_unexpected_error(mock_console):
    """
    Test handle_errors with an unexpected exception.
    Expected: "Unexpected error" shown and exit status 1.
    """
    # Arrange
    @handle_errors
    def failing_function():
        raise ValueError("Test error")

    # Act & Assert
    with pytest.raises(SystemExit):
        failing_function()
    mock_console.error.assert_called_once_with("Unexpected error: Test error")


def test_handle_errors_passes_through_result():
    """
    Test that a successful call is untouched.
    Expected: return value returned.
    """
    # Arrange
    @handle_errors
    def ok_function():
        return 42

    # Act & Assert
    assert ok_function() == 42


@pytest.mark.parametrize("theme, color", [("dark", "red"), ("light", "red3"), ("unknown", "red")])
def test_themed_console_error_style(monkeypatch, theme, color):
    """
    Test that the error style follows DEVTOOLZ_THEME.
    Expected: markup uses the theme's error color, unknown themes fall back to dark.
    """
    # Arrange
    monkeypatch.setenv("DEVTOOLZ_THEME", theme)

    # Act
    styled = ThemedConsole().get_styled("Error: boom", "error")

    # Assert
    assert styled == f"[{color}]Error: boom[/{color}]"
