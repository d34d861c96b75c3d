"""Shared fixtures: a small payload tree and an empty home directory."""

from pathlib import Path

import pytest


def write_payload(root: Path) -> Path:
    """Write a minimal payload with two agents and two skills per target."""
    root.mkdir(parents=True, exist_ok=True)
    (root / "AGENTS.md").write_text("# Agreements\n", encoding="utf-8")

    for agents_subdir, skills_subdir, flavor in (
        ("agents", "skills", "opencode"),
        ("claude-agents", "claude-skills", "claude"),
    ):
        agents = root / agents_subdir
        agents.mkdir()
        (agents / "reviewer.md").write_text(f"# reviewer ({flavor})\n", encoding="utf-8")
        (agents / "planner.md").write_text(f"# planner ({flavor})\n", encoding="utf-8")

        for skill in ("testing", "git-workflow"):
            skill_dir = root / skills_subdir / skill
            skill_dir.mkdir(parents=True)
            (skill_dir / "SKILL.md").write_text(f"# {skill} ({flavor})\n", encoding="utf-8")

    examples = root / "hooks" / "examples"
    examples.mkdir(parents=True)
    (examples / "README.md").write_text("# hooks\n", encoding="utf-8")
    (examples / "guard.sh").write_text("#!/usr/bin/env bash\n", encoding="utf-8")
    return root


def _snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under root to its content, keyed by relative path."""
    if not root.exists():
        return {}
    return {
        str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()
    }


@pytest.fixture
def payload(tmp_path: Path) -> Path:
    return write_payload(tmp_path / "payload")


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def snapshot():
    """Return a function mapping every file under a root to its content."""
    return _snapshot
