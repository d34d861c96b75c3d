"""Fake Time implementation for testing.

FakeTime returns a fixed instant and records every read, so tests can
predict backup filenames exactly.
"""

from datetime import datetime

from agents_md_kit.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory fake implementation with a fixed current time.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, current: datetime | None = None) -> None:
        """Create FakeTime frozen at the given instant.

        Args:
            current: Instant returned by now() (defaults to 2024-01-02 03:04:05)
        """
        self._current = current if current is not None else datetime(2024, 1, 2, 3, 4, 5)
        self._now_calls = 0

    @property
    def now_calls(self) -> int:
        """Number of times now() was called.

        This property is for test assertions only.
        """
        return self._now_calls

    def now(self) -> datetime:
        self._now_calls += 1
        return self._current
