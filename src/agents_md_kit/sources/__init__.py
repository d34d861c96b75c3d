from agents_md_kit.sources.bundled import (
    HOOK_EXAMPLES_SUBDIR,
    SKILL_FILE,
    SourceTree,
    bundled_data_dir,
)

__all__ = [
    "HOOK_EXAMPLES_SUBDIR",
    "SKILL_FILE",
    "SourceTree",
    "bundled_data_dir",
]
