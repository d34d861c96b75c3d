"""File copy operations for the agents.md payload.

Every copy overwrites its destination unconditionally and reports the
destination-relative path through the ``report`` callback as soon as it
completes, so progress lines reflect what was written before any failure.
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path

from agents_md_kit.sources import SKILL_FILE, SourceTree

logger = logging.getLogger(__name__)

Reporter = Callable[[str], None]


def copy_config_document(source: SourceTree, destination_root: Path, report: Reporter) -> Path:
    """Copy the root config document. Mandatory.

    Raises:
        FileNotFoundError: If the source document does not exist
    """
    dest = destination_root / source.config_path.name
    shutil.copy2(source.config_path, dest)
    report(f"  {source.config_path.name}")
    return dest


def copy_agents(source: SourceTree, destination_root: Path, report: Reporter) -> list[Path]:
    """Copy every agent document into <dest>/agents/."""
    agents_dir = destination_root / "agents"
    copied: list[Path] = []
    for agent in source.agent_files():
        dest = agents_dir / agent.name
        shutil.copy2(agent, dest)
        report(f"  agents/{agent.name}")
        copied.append(dest)
    return copied


def copy_skills(source: SourceTree, destination_root: Path, report: Reporter) -> list[Path]:
    """Copy each skill's SKILL.md into <dest>/skills/<name>/.

    Skills without a SKILL.md are skipped without error.
    """
    copied: list[Path] = []
    for skill_dir in source.skill_dirs():
        skill_file = skill_dir / SKILL_FILE
        if not skill_file.is_file():
            logger.debug("Skipping skill without %s: %s", SKILL_FILE, skill_dir.name)
            continue

        dest_dir = destination_root / "skills" / skill_dir.name
        dest_dir.mkdir(parents=True, exist_ok=True)
        dest = dest_dir / SKILL_FILE
        shutil.copy2(skill_file, dest)
        report(f"  skills/{skill_dir.name}/{SKILL_FILE}")
        copied.append(dest)
    return copied


def copy_hook_examples(
    source: SourceTree, destination_root: Path, report: Reporter
) -> Path | None:
    """Copy the hook examples tree into <dest>/hooks/examples/.

    Returns:
        The destination directory, or None if the source tree has no hook examples
    """
    if not source.hook_examples_dir.is_dir():
        logger.debug("No hook examples at %s", source.hook_examples_dir)
        return None

    dest = destination_root / "hooks" / "examples"
    shutil.copytree(source.hook_examples_dir, dest, dirs_exist_ok=True)
    entry_count = sum(1 for _ in source.hook_examples_dir.iterdir())
    report(f"  hooks/examples/ ({entry_count} files)")
    return dest
