"""Destination directory creation."""

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def materialize_directories(destination_root: Path, skill_names: Iterable[str]) -> None:
    """Create the agents dir and one skills/<name> dir per skill.

    Idempotent: existing directories are left alone and missing parents are
    created. Every skill directory is created up front, including skills
    whose SKILL.md is later found to be missing.

    Args:
        destination_root: Target destination root
        skill_names: Skill names discovered in the source tree
    """
    (destination_root / "agents").mkdir(parents=True, exist_ok=True)
    for name in skill_names:
        skill_dir = destination_root / "skills" / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("Ensured skill directory: %s", skill_dir)
