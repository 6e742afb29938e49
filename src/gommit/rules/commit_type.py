"""Rules: commit type and scope."""
from __future__ import annotations

from gommit.models import Rule, RuleContext, Violation


class TypeEnum(Rule):
    id = "type-enum"
    description = "Type must be one of the configured allowed types"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        commit_type = context.header.type
        allowed = context.config.allowed_types
        if commit_type in allowed:
            return []
        return [
            self.violation(
                f"Type '{commit_type}' is not allowed. Allowed types are: {', '.join(allowed)}"
            )
        ]


class TypeCase(Rule):
    id = "type-case"
    description = "Type must be lowercase"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        commit_type = context.header.type
        if commit_type.lower() != commit_type:
            return [self.violation(f"Type '{commit_type}' must be lowercase")]
        return []


class TypeEmpty(Rule):
    id = "type-empty"
    description = "Type must not be empty"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        if context.header.type:
            return []
        return [self.violation(self.description)]


class ScopeCase(Rule):
    """Scope is optional; when present it must be lowercase."""

    id = "scope-case"
    description = "Scope must be lowercase"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        scope = context.header.scope
        if scope is None or scope.lower() == scope:
            return []
        return [self.violation(f"Scope '{scope}' must be lowercase")]
