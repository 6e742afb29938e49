"""Core models for Gommit."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gommit.config import GommitConfig


@dataclass(frozen=True)
class RuleDescriptor:
    """Name and human description of a rule."""
    name: str
    description: str


@dataclass(frozen=True)
class HeaderParts:
    """View of the first line of a commit message."""
    type: str
    scope: str | None = None
    breaking: bool = False
    description: str = ""
    has_separator: bool = False


@dataclass(frozen=True)
class CommitMessage:
    """A raw commit message. Line 0 is the header."""
    text: str

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    @property
    def header(self) -> str:
        return self.lines[0]

    @property
    def body_lines(self) -> list[str]:
        return self.lines[1:]

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()

    def numbered_body_lines(self) -> list[tuple[int, str]]:
        """Body lines paired with their 1-indexed line number in the message."""
        return [(i, line) for i, line in enumerate(self.body_lines, start=2)]


@dataclass
class Violation:
    """A single rule violation."""
    rule_id: str
    message: str
    line: int | None = None


@dataclass
class ValidationResult:
    """Ordered violations plus the breaking-change footer flag."""
    violations: list[Violation] = field(default_factory=list)
    needs_breaking_change_footer: bool = False

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    @property
    def is_valid(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class RuleContext:
    """Context passed to rules during evaluation."""
    message: CommitMessage
    header: HeaderParts
    config: GommitConfig


class Rule(ABC):
    """Base class for all Gommit rules."""
    id: str
    description: str

    @abstractmethod
    def evaluate(self, context: RuleContext) -> list[Violation]:
        """Evaluate this rule against the given context."""

    @property
    def descriptor(self) -> RuleDescriptor:
        return RuleDescriptor(name=self.id, description=self.description)

    def violation(self, message: str, line: int | None = None) -> Violation:
        return Violation(rule_id=self.id, message=message, line=line)
