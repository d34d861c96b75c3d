"""Output helpers for CLI commands with clear intent."""

import click


def user_output(message: str = "") -> None:
    """Write a progress or status line for the user to stdout."""
    click.echo(message)


def error_output(message: str) -> None:
    """Write an error line to stderr."""
    click.echo(message, err=True)
