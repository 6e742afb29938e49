"""Rules: header line format, length and case."""
from __future__ import annotations

from gommit.models import Rule, RuleContext, Violation
from gommit.parser import HEADER_RE


class HeaderFormat(Rule):
    """Header must follow the conventional ``type(scope)!: description`` shape."""

    id = "header-format"
    description = "Header must be in format: <type>[optional scope][!]: <description>"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        if HEADER_RE.match(context.message.header):
            return []
        return [self.violation(self.description)]


class HeaderMaxLength(Rule):
    id = "header-max-length"
    description = "Header must not exceed the configured maximum length"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        limit = context.config.header_max_length
        if len(context.message.header) > limit:
            return [self.violation(f"Header must not exceed {limit} characters")]
        return []


class HeaderLowercase(Rule):
    id = "header-lowercase"
    description = "Header (short description) must be all lowercase"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        header = context.message.header
        if header.lower() != header:
            return [self.violation(self.description)]
        return []


class SubjectEmpty(Rule):
    id = "subject-empty"
    description = "Subject must not be empty"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        parts = context.header
        if parts.has_separator and parts.description.strip():
            return []
        return [self.violation(self.description)]


class DescriptionCase(Rule):
    """First character of the description must not be an uppercase ASCII letter."""

    id = "description-case"
    description = "Description must start with lowercase"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        parts = context.header
        if not parts.has_separator or not parts.description:
            return []
        first = parts.description[0]
        if "A" <= first <= "Z":
            return [self.violation(self.description)]
        return []
