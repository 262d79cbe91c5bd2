"""Tests for progress and timing output."""
import pytest

from devtoolz.core import Reporter, format_elapsed


@pytest.mark.parametrize("seconds, expected", [
    (125, "2 minutes and 5 seconds"),
    (0, "0 minutes and 0 seconds"),
    (59.4, "0 minutes and 59 seconds"),
    (59.6, "1 minutes and 0 seconds"),
    (2.5, "0 minutes and 3 seconds"),
    (3725, "62 minutes and 5 seconds"),
])
def test_format_elapsed(seconds, expected):
    """
    Test duration formatting.
    Expected: whole minutes plus half-up rounded seconds.
    """
    # Act & Assert
    assert format_elapsed(seconds) == expected


def test_reporter_elapsed_line(capsys):
    """
    Test the final summary line.
    Expected: "Refresh complete in 2 minutes and 5 seconds."
    """
    # Act
    Reporter().elapsed(125)

    # Assert
    assert "Refresh complete in 2 minutes and 5 seconds." in capsys.readouterr().out


def test_reporter_step_marks_completion(capsys):
    """
    Test that a successful step ends with "complete.".
    Expected: title and marker on the same line.
    """
    # Act
    with Reporter().step("Updating local copy"):
        pass

    # Assert
    assert "  Updating local copy...complete." in capsys.readouterr().out


def test_reporter_step_failure_leaves_line_open(capsys):
    """
    Test that a failing step does not claim completion.
    Expected: exception propagates, no "complete." printed.
    """
    # Act & Assert
    with pytest.raises(RuntimeError):
        with Reporter().step("Rebuilding solution"):
            raise RuntimeError("boom")

    out = capsys.readouterr().out
    assert "Rebuilding solution..." in out
    assert "complete." not in out


def test_reporter_echo_prints_text_verbatim(capsys):
    """
    Test that external stderr is mirrored without markup interpretation.
    Expected: bracketed text printed as-is.
    """
    # Act
    Reporter().echo("warning [MSB3245]: could not resolve reference\n")

    # Assert
    assert "warning [MSB3245]: could not resolve reference" in capsys.readouterr().out
