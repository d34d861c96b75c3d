"""Data models for agents-md-kit."""

from agents_md_kit.models.summary import InstallSummary
from agents_md_kit.models.target import (
    CONCRETE_TARGETS,
    DEFAULT_TARGET,
    VALID_TARGETS,
    ConcreteTarget,
    Target,
    TargetLayout,
    UnknownTargetError,
    expand_target,
    resolve_layout,
    validate_target,
)

__all__ = [
    "CONCRETE_TARGETS",
    "DEFAULT_TARGET",
    "VALID_TARGETS",
    "ConcreteTarget",
    "InstallSummary",
    "Target",
    "TargetLayout",
    "UnknownTargetError",
    "expand_target",
    "resolve_layout",
    "validate_target",
]
