"""Rule catalog, in evaluation order."""
from __future__ import annotations

from gommit.models import Rule, RuleDescriptor
from gommit.rules.body import BodyLineMaxLength, BreakingChange, FooterFormat
from gommit.rules.commit_type import ScopeCase, TypeCase, TypeEmpty, TypeEnum
from gommit.rules.header import (
    DescriptionCase,
    HeaderFormat,
    HeaderLowercase,
    HeaderMaxLength,
    SubjectEmpty,
)

AUTO_BREAKING_CHANGE = RuleDescriptor(
    name="auto-breaking-change",
    description="Automatically add BREAKING CHANGE to footer when '!' is present in header",
)

RULES: list[Rule] = [
    # Header
    HeaderFormat(),
    HeaderMaxLength(),
    HeaderLowercase(),
    TypeEnum(),
    TypeCase(),
    TypeEmpty(),
    ScopeCase(),
    SubjectEmpty(),
    DescriptionCase(),
    # Body and footer
    BodyLineMaxLength(),
    FooterFormat(),
    BreakingChange(),
]

RULE_CATALOG: tuple[RuleDescriptor, ...] = tuple(
    [rule.descriptor for rule in RULES] + [AUTO_BREAKING_CHANGE]
)


def rule_names() -> list[str]:
    return [d.name for d in RULE_CATALOG]

