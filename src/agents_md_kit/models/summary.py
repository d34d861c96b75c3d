"""Post-install summary model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InstallSummary:
    """Counts of artifacts present at a destination after an install."""

    agent_count: int
    skill_count: int
