"""Tests for body, footer and breaking-change rules."""
from __future__ import annotations

from gommit.config import GommitConfig
from gommit.models import CommitMessage, RuleContext
from gommit.parser import parse_header
from gommit.rules.body import BodyLineMaxLength, BreakingChange, FooterFormat


def _ctx(text: str, config: GommitConfig | None = None) -> RuleContext:
    message = CommitMessage(text)
    return RuleContext(
        message=message,
        header=parse_header(message.header),
        config=config or GommitConfig(),
    )


class TestBodyLineMaxLength:
    rule = BodyLineMaxLength()

    def test_short_lines(self):
        assert self.rule.evaluate(_ctx("feat: x\n\nshort body")) == []

    def test_header_not_counted(self):
        assert self.rule.evaluate(_ctx("feat: " + "x" * 100)) == []

    def test_one_violation_per_line(self):
        config = GommitConfig(body_line_max_length=10)
        text = "feat: x\n\n" + "a" * 11 + "\nok\n" + "b" * 12
        violations = self.rule.evaluate(_ctx(text, config))
        assert [v.message for v in violations] == [
            "Body line 3 exceeds 10 characters",
            "Body line 5 exceeds 10 characters",
        ]


class TestFooterFormat:
    rule = FooterFormat()

    def test_valid_footer(self):
        assert self.rule.evaluate(_ctx("feat: x\n\nREFS: #42")) == []

    def test_empty_value(self):
        violations = self.rule.evaluate(_ctx("feat: x\n\nREFS:   "))
        assert [v.message for v in violations] == ["Footer line 3 must be in format: <token>: <value>"]
        assert violations[0].line == 3

    def test_bare_token_without_value_does_not_match_footer_shape(self):
        assert self.rule.evaluate(_ctx("feat: x\n\nREFS:")) == []

    def test_breaking_change_marker_exempt(self):
        assert self.rule.evaluate(_ctx("feat!: x\n\nBREAKING-CHANGE: ")) == []
        assert self.rule.evaluate(_ctx("feat!: x\n\nBREAKING CHANGE: ")) == []

    def test_header_not_checked(self):
        assert self.rule.evaluate(_ctx("REFS: ")) == []


class TestBreakingChange:
    rule = BreakingChange()

    def test_never_reports_violations(self):
        assert self.rule.evaluate(_ctx("feat!: x")) == []

    def test_needs_footer(self):
        assert self.rule.needs_footer(_ctx("feat!: x")) is True

    def test_footer_present(self):
        assert self.rule.needs_footer(_ctx("feat!: x\n\nBREAKING CHANGE: gone")) is False

    def test_no_marker(self):
        assert self.rule.needs_footer(_ctx("feat: x")) is False

    def test_marker_in_header_not_counted_as_footer(self):
        assert self.rule.needs_footer(_ctx("BREAKING CHANGE: x!")) is True
