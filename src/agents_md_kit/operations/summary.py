"""Post-install summary."""

from pathlib import Path

from agents_md_kit.models import InstallSummary
from agents_md_kit.sources import SKILL_FILE


def count_installed(destination_root: Path) -> InstallSummary:
    """Count agents and skills actually present at a destination.

    This is a scan of the destination, not a count of what was copied, so
    artifacts left by earlier installs are included.
    """
    agents = [p for p in (destination_root / "agents").glob("*.md") if p.is_file()]
    skills = [p for p in (destination_root / "skills").glob(f"*/{SKILL_FILE}") if p.is_file()]
    return InstallSummary(agent_count=len(agents), skill_count=len(skills))


def format_summary(summary: InstallSummary) -> str:
    return f"Installed: {summary.agent_count} agents, {summary.skill_count} skills"
