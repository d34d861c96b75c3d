"""Application context with dependency injection.

The InstallContext dataclass holds every ambient input an install depends
on (home directory, payload location, clock) and is created once at the CLI
entry point, then threaded through the operations.
"""

from dataclasses import dataclass
from pathlib import Path

from agents_md_kit.integrations.time import RealTime, Time
from agents_md_kit.sources import bundled_data_dir


@dataclass(frozen=True)
class InstallContext:
    """Immutable context holding all dependencies for install operations.

    Attributes:
        home: Base directory destination roots are derived from
        source_root: Payload directory agents, skills and AGENTS.md are read from
        time: Clock used for backup timestamps
        debug: Show full stack traces instead of clean error messages
    """

    home: Path
    source_root: Path
    time: Time
    debug: bool

    @staticmethod
    def for_test(
        home: Path | None = None,
        source_root: Path | None = None,
        time: Time | None = None,
        debug: bool = False,
    ) -> "InstallContext":
        """Create test context with a fake clock by default.

        Args:
            home: Home directory (defaults to Path("/fake/home"))
            source_root: Payload directory (defaults to the bundled payload)
            time: Optional Time implementation. If None, creates FakeTime.
            debug: Whether to enable debug mode (default False)
        """
        from agents_md_kit.integrations.time import FakeTime

        resolved_time: Time = time if time is not None else FakeTime()
        return InstallContext(
            home=home if home is not None else Path("/fake/home"),
            source_root=source_root if source_root is not None else bundled_data_dir(),
            time=resolved_time,
            debug=debug,
        )


def create_context(*, debug: bool) -> InstallContext:
    """Create production context reading the real home directory and clock."""
    return InstallContext(
        home=Path.home(),
        source_root=bundled_data_dir(),
        time=RealTime(),
        debug=debug,
    )
