from agents_md_kit.operations.backup import backup_existing_config, backup_path_for
from agents_md_kit.operations.copy import (
    copy_agents,
    copy_config_document,
    copy_hook_examples,
    copy_skills,
)
from agents_md_kit.operations.install import install, install_target
from agents_md_kit.operations.materialize import materialize_directories
from agents_md_kit.operations.summary import count_installed, format_summary

__all__ = [
    "backup_existing_config",
    "backup_path_for",
    "copy_agents",
    "copy_config_document",
    "copy_hook_examples",
    "copy_skills",
    "count_installed",
    "format_summary",
    "install",
    "install_target",
    "materialize_directories",
]
