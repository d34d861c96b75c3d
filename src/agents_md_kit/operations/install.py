"""Install pipeline for one or more targets."""

import logging

from agents_md_kit.context import InstallContext
from agents_md_kit.models import (
    InstallSummary,
    Target,
    TargetLayout,
    expand_target,
    resolve_layout,
)
from agents_md_kit.operations.backup import backup_existing_config
from agents_md_kit.operations.copy import (
    Reporter,
    copy_agents,
    copy_config_document,
    copy_hook_examples,
    copy_skills,
)
from agents_md_kit.operations.materialize import materialize_directories
from agents_md_kit.operations.summary import count_installed, format_summary
from agents_md_kit.sources import SourceTree

logger = logging.getLogger(__name__)


def install_target(ctx: InstallContext, layout: TargetLayout, report: Reporter) -> InstallSummary:
    """Install the payload for one concrete target.

    Mandatory sources are checked before anything is written. After that,
    any filesystem error propagates and files already written stay in place.

    Args:
        ctx: Install context
        layout: Resolved layout of the target
        report: Receives each progress line

    Returns:
        Counts scanned from the destination after the copy

    Raises:
        FileNotFoundError: If a mandatory source is missing
        OSError: On any destination write failure
    """
    source = SourceTree.for_layout(ctx.source_root, layout)
    source.ensure_complete()

    dest = layout.destination_root
    logger.debug("Resolved layout: target=%s, dest=%s", layout.name, dest)

    report(f"Installing agents.md package for {layout.name} to {dest}")
    report("---")

    backup = backup_existing_config(dest / layout.config_file, ctx.time)
    if backup is not None:
        report(f"Backing up existing {layout.config_file} -> {backup}")

    materialize_directories(dest, source.skill_names())

    copy_hook_examples(source, dest, report)
    copy_config_document(source, dest, report)
    copy_agents(source, dest, report)
    copy_skills(source, dest, report)

    report("---")
    report("")

    summary = count_installed(dest)
    report(format_summary(summary))
    report("")
    report(layout.restart_message)
    return summary


def install(ctx: InstallContext, target: Target, report: Reporter) -> list[InstallSummary]:
    """Install for a target, expanding "both" into opencode then claude.

    Runs in sequence and stops at the first failure.
    """
    concrete = expand_target(target)
    if target == "both":
        report("Installing for both OpenCode and Claude Code...")
        report("")

    summaries: list[InstallSummary] = []
    for index, name in enumerate(concrete):
        if index > 0:
            report("")
        layout = resolve_layout(name, ctx.home)
        summaries.append(install_target(ctx, layout, report))
    return summaries
