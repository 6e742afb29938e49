"""Gommit - conventional commit message checker for git hooks."""

__version__ = "0.1.0"

from gommit.breaking import append_breaking_change
from gommit.config import GommitConfig
from gommit.models import (
    CommitMessage,
    HeaderParts,
    Rule,
    RuleContext,
    RuleDescriptor,
    ValidationResult,
    Violation,
)
from gommit.validator import validate

__all__ = [
    "CommitMessage",
    "GommitConfig",
    "HeaderParts",
    "Rule",
    "RuleContext",
    "RuleDescriptor",
    "ValidationResult",
    "Violation",
    "append_breaking_change",
    "validate",
]
