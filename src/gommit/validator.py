"""Gommit validation engine."""
from __future__ import annotations

import logging

from gommit.config import GommitConfig
from gommit.models import CommitMessage, Rule, RuleContext, ValidationResult, Violation
from gommit.parser import parse_header
from gommit.rules import RULES
from gommit.rules.body import BreakingChange

logger = logging.getLogger("gommit")

EMPTY_MESSAGE = "Commit message is empty"


class Validator:
    """Applies every enabled rule to a commit message, in catalog order.

    Validation has no side effects, so it may run any number of times per
    repair cycle.
    """

    def __init__(self, config: GommitConfig, rules: list[Rule] | None = None):
        self.config = config
        self.rules = RULES if rules is None else rules

    def validate(self, text: str) -> ValidationResult:
        message = CommitMessage(text)
        result = ValidationResult()

        if message.is_empty:
            result.violations.append(Violation(rule_id="empty", message=EMPTY_MESSAGE))
            return result

        context = RuleContext(
            message=message,
            header=parse_header(message.header),
            config=self.config,
        )

        for rule in self.rules:
            if not self.config.is_rule_enabled(rule.id):
                logger.debug("Rule %s disabled, skipping", rule.id)
                continue

            violations = rule.evaluate(context)
            if violations:
                logger.debug("Rule %s reported %d violation(s)", rule.id, len(violations))
            result.violations.extend(violations)

            if isinstance(rule, BreakingChange) and rule.needs_footer(context):
                result.needs_breaking_change_footer = True

        return result


def validate(text: str, config: GommitConfig) -> ValidationResult:
    """Validate ``text`` against ``config`` with the default rule set."""
    return Validator(config).validate(text)
