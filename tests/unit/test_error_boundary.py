"""Tests for the CLI error boundary decorator."""

import pytest

from agents_md_kit.error_boundary import cli_error_boundary


@pytest.mark.parametrize(
    "error",
    [
        FileNotFoundError("missing AGENTS.md"),
        PermissionError("permission denied"),
        FileExistsError("exists"),
        OSError("No space left on device"),
        ValueError("bad value"),
    ],
)
def test_known_errors_exit_with_clean_message(
    error: Exception, capsys: pytest.CaptureFixture[str]
) -> None:
    @cli_error_boundary
    def failing() -> None:
        raise error

    with pytest.raises(SystemExit) as exc_info:
        failing()

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.err == f"Error: {error}\n"
    assert captured.out == ""


def test_unknown_errors_propagate() -> None:
    @cli_error_boundary
    def failing() -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        failing()


def test_return_value_passes_through() -> None:
    @cli_error_boundary
    def succeeding(value: int) -> int:
        return value * 2

    assert succeeding(21) == 42
