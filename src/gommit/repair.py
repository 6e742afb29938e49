"""Validate, repair and revalidate a commit message."""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from gommit.breaking import append_breaking_change
from gommit.config import GommitConfig
from gommit.editor import Editor
from gommit.models import ValidationResult, Violation
from gommit.rules import AUTO_BREAKING_CHANGE
from gommit.validator import Validator

logger = logging.getLogger("gommit")


class RepairError(Exception):
    """The commit message could not be brought into a valid state."""


class MessageNotModifiedError(RepairError):
    """The editor was cancelled or returned the original message unchanged."""

    def __init__(self) -> None:
        super().__init__("commit message was not modified")


class StillInvalidError(RepairError):
    """The edited message still violates the configured rules."""

    def __init__(self, violations: list[Violation]) -> None:
        super().__init__("commit message still does not follow the configured rules")
        self.violations = violations


@dataclass
class RepairOutcome:
    """Final state of a successful repair cycle."""
    message: str
    edited: bool = False
    breaking_change_added: bool = False


class RepairLoop:
    """Runs one repair cycle over a commit message.

    The flow is: validate, inject a BREAKING CHANGE trailer if needed, and if
    violations remain hand the text to ``editor`` once. The edited text gets
    the same treatment; anything still invalid after that is a failure.
    """

    def __init__(
        self,
        config: GommitConfig,
        editor: Editor,
        prompt: Callable[[], str],
        on_violations: Callable[[list[Violation]], None] | None = None,
    ):
        self.config = config
        self.validator = Validator(config)
        self.editor = editor
        self.prompt = prompt
        self.on_violations = on_violations

    def _check(self, message: str) -> tuple[str, ValidationResult, bool]:
        """Validate, injecting a breaking-change trailer when flagged."""
        result = self.validator.validate(message)
        injected = False

        if result.needs_breaking_change_footer and self.config.is_rule_enabled(AUTO_BREAKING_CHANGE.name):
            logger.debug("Header marks a breaking change without a trailer, prompting")
            description = self.prompt()
            message = append_breaking_change(message, description)
            result = self.validator.validate(message)
            injected = True

        return message, result, injected

    def run(self, original: str) -> RepairOutcome:
        message, result, injected = self._check(original)
        outcome = RepairOutcome(
            message=message,
            breaking_change_added=injected,
        )
        if result.is_valid:
            logger.debug("Commit message is valid")
            return outcome

        logger.debug("Found %d violation(s), opening editor", len(result.violations))
        if self.on_violations is not None:
            self.on_violations(result.violations)

        edited = self.editor.edit(message)
        if edited is None or edited.strip() == original.strip():
            raise MessageNotModifiedError()

        message, result, injected = self._check(edited)
        if not result.is_valid:
            raise StillInvalidError(result.violations)

        outcome.message = message
        outcome.edited = True
        outcome.breaking_change_added = outcome.breaking_change_added or injected
        return outcome
