"""Error boundary handling for the CLI entry point.

This module provides a decorator to catch well-known exceptions at the CLI
entry point and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from agents_md_kit.output import error_output

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - FileNotFoundError: Missing payload files or directories
        - PermissionError: Destination not writable
        - FileExistsError: A file sits where a directory is expected
        - OSError: Any other filesystem failure (disk full, etc.)
        - ValueError: Invalid input

    All other exceptions bubble up normally with full stack traces. Files
    written before the failure are left in place.

    Example:
        @cli_error_boundary
        def main():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except FileNotFoundError as e:
            error_output(f"Error: {e}")
            raise SystemExit(1) from None
        except PermissionError as e:
            error_output(f"Error: {e}")
            raise SystemExit(1) from None
        except FileExistsError as e:
            error_output(f"Error: {e}")
            raise SystemExit(1) from None
        except OSError as e:
            error_output(f"Error: {e}")
            raise SystemExit(1) from None
        except ValueError as e:
            error_output(f"Error: {e}")
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
