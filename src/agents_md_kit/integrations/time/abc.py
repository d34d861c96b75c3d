"""Clock abstraction for testing.

This module provides an ABC for reading the wall clock so that backup
timestamps can be pinned in tests.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time.

        Returns:
            Naive local datetime, as used for backup file suffixes
        """
        ...
