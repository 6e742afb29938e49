"""Rules: body line length, trailers and breaking-change markers."""
from __future__ import annotations

from gommit.models import Rule, RuleContext, Violation
from gommit.parser import contains_breaking_change, footer_value, is_footer_line


class BodyLineMaxLength(Rule):
    id = "body-line-max-length"
    description = "Body lines must not exceed the configured maximum length"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        limit = context.config.body_line_max_length
        return [
            self.violation(f"Body line {number} exceeds {limit} characters", line=number)
            for number, line in context.message.numbered_body_lines()
            if len(line) > limit
        ]


class FooterFormat(Rule):
    """Generic ``TOKEN: value`` trailers need a non-empty value.

    The BREAKING CHANGE marker is not checked here.
    """

    id = "footer-format"
    description = "Footer must be in format: <token>: <value>"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        return [
            self.violation(f"Footer line {number} must be in format: <token>: <value>", line=number)
            for number, line in context.message.numbered_body_lines()
            if is_footer_line(line) and not footer_value(line)
        ]


class BreakingChange(Rule):
    """Flags headers marked with ``!`` that lack a BREAKING CHANGE trailer.

    Never produces a violation; the validator reads ``needs_footer`` instead.
    """

    id = "breaking-change"
    description = "Breaking changes must be indicated in footer"

    def evaluate(self, context: RuleContext) -> list[Violation]:
        return []

    def needs_footer(self, context: RuleContext) -> bool:
        message = context.message
        return "!" in message.header and not contains_breaking_change(message.body_lines)
