"""Bundled payload source.

The agents.md package ships its payload as package data under
``agents_md_kit/data``. A SourceTree selects the parts of that payload a
given target reads.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from agents_md_kit.models.target import TargetLayout

logger = logging.getLogger(__name__)

SKILL_FILE = "SKILL.md"
HOOK_EXAMPLES_SUBDIR = Path("hooks") / "examples"


def bundled_data_dir() -> Path:
    """Return the payload directory shipped with this package."""
    return Path(__file__).parent.parent / "data"


@dataclass(frozen=True)
class SourceTree:
    """Source paths one target installs from."""

    root: Path
    config_path: Path
    agents_dir: Path
    skills_dir: Path
    hook_examples_dir: Path

    @staticmethod
    def for_layout(root: Path, layout: TargetLayout) -> "SourceTree":
        return SourceTree(
            root=root,
            config_path=root / layout.config_file,
            agents_dir=root / layout.agents_source_subdir,
            skills_dir=root / layout.skills_source_subdir,
            hook_examples_dir=root / HOOK_EXAMPLES_SUBDIR,
        )

    def ensure_complete(self) -> None:
        """Check that every mandatory source exists.

        Hook examples and per-skill SKILL.md files are optional and not checked.

        Raises:
            FileNotFoundError: If the config document, agents dir or skills dir is missing
        """
        if not self.config_path.is_file():
            raise FileNotFoundError(f"Config document not found: {self.config_path}")
        if not self.agents_dir.is_dir():
            raise FileNotFoundError(f"Agents directory not found: {self.agents_dir}")
        if not self.skills_dir.is_dir():
            raise FileNotFoundError(f"Skills directory not found: {self.skills_dir}")
        logger.debug("Source tree complete: root=%s", self.root)

    def agent_files(self) -> list[Path]:
        """Agent documents directly inside the agents dir, sorted by name."""
        return sorted(p for p in self.agents_dir.glob("*.md") if p.is_file())

    def skill_dirs(self) -> list[Path]:
        """Skill subdirectories of the skills dir, sorted by name."""
        return sorted(p for p in self.skills_dir.iterdir() if p.is_dir())

    def skill_names(self) -> list[str]:
        return [p.name for p in self.skill_dirs()]
