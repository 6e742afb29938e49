"""Tests for header rules."""
from __future__ import annotations

from gommit.config import GommitConfig
from gommit.models import CommitMessage, RuleContext
from gommit.parser import parse_header
from gommit.rules.header import (
    DescriptionCase,
    HeaderFormat,
    HeaderLowercase,
    HeaderMaxLength,
    SubjectEmpty,
)


def _ctx(text: str, config: GommitConfig | None = None) -> RuleContext:
    message = CommitMessage(text)
    return RuleContext(
        message=message,
        header=parse_header(message.header),
        config=config or GommitConfig(),
    )


# --- HeaderFormat ---


class TestHeaderFormat:
    rule = HeaderFormat()

    def test_plain(self):
        assert self.rule.evaluate(_ctx("feat: add login flow")) == []

    def test_with_scope(self):
        assert self.rule.evaluate(_ctx("fix(auth-v2): token refresh")) == []

    def test_with_breaking_marker(self):
        assert self.rule.evaluate(_ctx("feat(api)!: remove deprecated endpoint")) == []

    def test_revert_not_in_builtin_pattern(self):
        violations = self.rule.evaluate(_ctx("revert: undo last change"))
        assert len(violations) == 1
        assert violations[0].rule_id == "header-format"

    def test_scope_must_be_lowercase_alnum(self):
        assert len(self.rule.evaluate(_ctx("feat(Api): add"))) == 1
        assert len(self.rule.evaluate(_ctx("feat(my_scope): add"))) == 1

    def test_only_header_is_checked(self):
        assert self.rule.evaluate(_ctx("feat: add\n\nnot a header at all")) == []

    def test_missing_space_after_colon(self):
        assert len(self.rule.evaluate(_ctx("feat:add"))) == 1


# --- HeaderMaxLength ---


class TestHeaderMaxLength:
    rule = HeaderMaxLength()

    def test_at_limit(self):
        header = "feat: " + "x" * 44
        assert len(header) == 50
        assert self.rule.evaluate(_ctx(header)) == []

    def test_over_limit_cites_configured_limit(self):
        config = GommitConfig(header_max_length=20)
        violations = self.rule.evaluate(_ctx("feat: " + "x" * 15, config))
        assert [v.message for v in violations] == ["Header must not exceed 20 characters"]

    def test_counts_characters_not_bytes(self):
        header = "feat: " + "é" * 44
        assert self.rule.evaluate(_ctx(header)) == []


# --- HeaderLowercase ---


class TestHeaderLowercase:
    rule = HeaderLowercase()

    def test_lowercase(self):
        assert self.rule.evaluate(_ctx("fix: lower case only 123")) == []

    def test_uppercase_anywhere(self):
        violations = self.rule.evaluate(_ctx("fix: support JSON"))
        assert [v.message for v in violations] == ["Header (short description) must be all lowercase"]

    def test_body_may_contain_uppercase(self):
        assert self.rule.evaluate(_ctx("fix: ok\n\nBody With Capitals")) == []


# --- SubjectEmpty ---


class TestSubjectEmpty:
    rule = SubjectEmpty()

    def test_has_subject(self):
        assert self.rule.evaluate(_ctx("feat: add")) == []

    def test_no_separator(self):
        assert len(self.rule.evaluate(_ctx("feat"))) == 1

    def test_blank_subject(self):
        assert len(self.rule.evaluate(_ctx("feat:    "))) == 1


# --- DescriptionCase ---


class TestDescriptionCase:
    rule = DescriptionCase()

    def test_lowercase_start(self):
        assert self.rule.evaluate(_ctx("feat: add")) == []

    def test_uppercase_start(self):
        violations = self.rule.evaluate(_ctx("feat: Add"))
        assert [v.message for v in violations] == ["Description must start with lowercase"]

    def test_non_letter_start(self):
        assert self.rule.evaluate(_ctx("feat: 2fa support")) == []

    def test_non_ascii_uppercase_is_allowed(self):
        assert self.rule.evaluate(_ctx("feat: Émile support")) == []

    def test_no_separator_is_ignored(self):
        assert self.rule.evaluate(_ctx("Feat Add")) == []
