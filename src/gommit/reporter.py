"""Terminal output for Gommit."""
from __future__ import annotations

from dataclasses import dataclass

import click

from gommit.config import GommitConfig
from gommit.models import RuleDescriptor, Violation


@dataclass(frozen=True)
class Palette:
    """click.style colors for each kind of output line."""
    error: str = "red"
    success: str = "green"
    header: str = "cyan"
    detail: str = "yellow"
    enabled: bool = True

    def style(self, text: str, role: str, bold: bool = False) -> str:
        if not self.enabled:
            return text
        return click.style(text, fg=getattr(self, role), bold=bold)


DEFAULT_PALETTE = Palette()


class Reporter:
    """Formats violations, results and the rule catalog."""

    def __init__(self, palette: Palette = DEFAULT_PALETTE):
        self.palette = palette

    def format_violations(self, violations: list[Violation]) -> str:
        p = self.palette
        lines = [p.style("Commit message does not follow the configured rules:", "error", bold=True)]
        for v in violations:
            lines.append(p.style(f"  • [{v.rule_id}] {v.message}", "detail"))
        return "\n".join(lines)

    def format_edit_hint(self) -> str:
        return self.palette.style("Please edit your commit message to follow the rules.", "header", bold=True)

    def format_note(self, text: str) -> str:
        return self.palette.style(text, "header")

    def format_success(self, message: str) -> str:
        p = self.palette
        return "\n".join([
            p.style("✔ Commit message is valid.", "success", bold=True),
            p.style("Final commit message:", "header", bold=True),
            p.style(message, "detail"),
        ])

    def format_failure(self, reason: str, violations: list[Violation] | None = None) -> str:
        lines = [self.palette.style(f"✘ {reason}", "error", bold=True)]
        if violations:
            lines.append(self.format_violations(violations))
        return "\n".join(lines)

    def format_catalog(self, catalog: tuple[RuleDescriptor, ...], config: GommitConfig) -> str:
        lines = [f"{'Rule':<24} {'Enabled':<8} Description", "-" * 90]
        for rule in catalog:
            state = "yes" if config.is_rule_enabled(rule.name) else "no"
            lines.append(f"{rule.name:<24} {state:<8} {rule.description}")
        lines.append("")
        lines.append(f"{len(catalog)} rules total.")
        return "\n".join(lines)
