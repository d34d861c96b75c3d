"""Installation target models.

A target selects both where the package is installed and which pair of
source directories (agents, skills) is read from the bundled payload.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast

Target = Literal["opencode", "claude", "both"]
ConcreteTarget = Literal["opencode", "claude"]

DEFAULT_TARGET: Target = "opencode"
VALID_TARGETS: tuple[Target, ...] = ("opencode", "claude", "both")
CONCRETE_TARGETS: tuple[ConcreteTarget, ...] = ("opencode", "claude")

CONFIG_FILE = "AGENTS.md"


class UnknownTargetError(ValueError):
    """Raised when a target token is not one of VALID_TARGETS."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Unknown target '{value}' (expected one of: {', '.join(VALID_TARGETS)})"
        )
        self.value = value


@dataclass(frozen=True)
class TargetLayout:
    """Resolved destination and source layout for one concrete target.

    Attributes:
        name: Concrete target token
        destination_root: Directory the package is installed into
        agents_source_subdir: Payload subdirectory holding agent files
        skills_source_subdir: Payload subdirectory holding skill directories
        config_file: Root config document name
        restart_message: Reminder printed after a successful install
    """

    name: ConcreteTarget
    destination_root: Path
    agents_source_subdir: str
    skills_source_subdir: str
    config_file: str
    restart_message: str


def validate_target(value: str) -> Target:
    """Validate and return a target token.

    Matching is case-sensitive.

    Raises:
        UnknownTargetError: If value is not a valid target
    """
    if value not in VALID_TARGETS:
        raise UnknownTargetError(value)
    return cast(Target, value)


def expand_target(target: Target) -> list[ConcreteTarget]:
    """Expand a target into the concrete targets it installs, in order."""
    if target == "both":
        return list(CONCRETE_TARGETS)
    return [target]


def resolve_layout(target: ConcreteTarget, home: Path) -> TargetLayout:
    """Map a concrete target to its layout under the given home directory.

    Args:
        target: "opencode" or "claude"
        home: Base directory destination roots are derived from

    Raises:
        UnknownTargetError: If target is not a concrete target
    """
    if target == "opencode":
        return TargetLayout(
            name="opencode",
            destination_root=home / ".config" / "opencode",
            agents_source_subdir="agents",
            skills_source_subdir="skills",
            config_file=CONFIG_FILE,
            restart_message="Restart opencode to pick up changes.",
        )
    if target == "claude":
        return TargetLayout(
            name="claude",
            destination_root=home / ".claude",
            agents_source_subdir="claude-agents",
            skills_source_subdir="claude-skills",
            config_file=CONFIG_FILE,
            restart_message="Restart Claude Code to pick up changes.",
        )
    raise UnknownTargetError(target)
