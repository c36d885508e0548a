"""Tests for the commit message parser."""

import pytest

from commitcheck.config.schema import ConfigurationError
from commitcheck.parser import MessageParser, Note

REFERENCE_PATTERN = r"^([a-zA-Z]+)(\([^)]+\))?:\s*(.*)$"
REFERENCE_CORRESPONDENCE = ["type", "scope", "subject"]


@pytest.fixture
def reference_parser() -> MessageParser:
    return MessageParser(REFERENCE_PATTERN, REFERENCE_CORRESPONDENCE)


class TestHeader:
    def test_reference_pattern_fields(self, reference_parser):
        parsed = reference_parser.parse("feat(parser): add header support")
        assert parsed.header_matched is True
        assert parsed.type == "feat"
        assert parsed.scope == "parser"
        assert parsed.subject == "add header support"

    def test_reference_pattern_without_scope(self, reference_parser):
        parsed = reference_parser.parse("fix: handle nulls")
        assert parsed.type == "fix"
        assert parsed.scope is None
        assert parsed.subject == "handle nulls"

    def test_reference_pattern_empty_subject(self, reference_parser):
        parsed = reference_parser.parse("fix:")
        assert parsed.header_matched is True
        assert parsed.type == "fix"
        assert parsed.subject == ""

    def test_default_pattern_with_breaking_bang(self):
        parsed = MessageParser().parse("feat(api)!: drop v1 endpoints")
        assert parsed.type == "feat"
        assert parsed.scope == "api"
        assert parsed.subject == "drop v1 endpoints"

    def test_default_pattern_requires_space(self):
        parsed = MessageParser().parse("fix:no space")
        assert parsed.header_matched is False

    def test_unmatched_header_leaves_fields_absent(self, reference_parser):
        parsed = reference_parser.parse("Update stuff")
        assert parsed.header_matched is False
        assert parsed.header == "Update stuff"
        assert parsed.type is None
        assert parsed.scope is None
        assert parsed.subject is None

    def test_empty_message(self):
        parsed = MessageParser().parse("")
        assert parsed.header == ""
        assert parsed.header_matched is False
        assert parsed.body is None

    def test_get_by_name(self, reference_parser):
        parsed = reference_parser.parse("feat(parser): add header support")
        assert parsed.get("type") == "feat"
        assert parsed.get("body") is None
        with pytest.raises(KeyError):
            parsed.get("ticket")


class TestParserConfiguration:
    def test_correspondence_length_mismatch(self):
        with pytest.raises(ConfigurationError):
            MessageParser(r"^(\w+): (.*)$", ["type", "scope", "subject"])

    def test_unknown_field_name(self):
        with pytest.raises(ConfigurationError):
            MessageParser(r"^(\w+): (.*)$", ["type", "ticket"])

    def test_duplicate_field_name(self):
        with pytest.raises(ConfigurationError):
            MessageParser(r"^(\w+): (.*)$", ["type", "type"])

    def test_invalid_regex(self):
        with pytest.raises(ConfigurationError):
            MessageParser(r"^(\w+: (.*)$", ["type", "subject"])

    def test_non_string_pattern(self):
        with pytest.raises(ConfigurationError):
            MessageParser(5, ["type"])

    def test_non_string_comment_char(self):
        with pytest.raises(ConfigurationError):
            MessageParser(comment_char=1)

    def test_partial_correspondence(self):
        parser = MessageParser(r"^(\w+): (.*)$", ["type", "subject"])
        parsed = parser.parse("docs: fix typo")
        assert parsed.type == "docs"
        assert parsed.scope is None
        assert parsed.subject == "fix typo"


class TestBodyAndFooter:
    def test_body_and_footer_split(self, message_with_body_and_footer):
        parsed = MessageParser().parse(message_with_body_and_footer)
        assert parsed.body == (
            "The header is now tokenized with a configurable pattern\n"
            "and correspondence list."
        )
        assert parsed.footer == "Refs: #12\nBREAKING CHANGE: the old tokenizer is gone"
        assert parsed.notes == (Note(title="BREAKING CHANGE", text="the old tokenizer is gone"),)

    def test_comment_lines_stripped(self, message_with_comments):
        parsed = MessageParser().parse(message_with_comments)
        assert parsed.subject == "handle empty payload"
        assert parsed.body is None
        assert parsed.footer is None

    def test_comment_char_disabled(self):
        parsed = MessageParser(comment_char=None).parse("fix: x\n\n# not a comment")
        assert parsed.body == "# not a comment"

    def test_crlf_line_endings(self):
        parsed = MessageParser().parse("feat: x\r\n\r\nbody text\r\n")
        assert parsed.subject == "x"
        assert parsed.body == "body text"

    def test_header_only(self):
        parsed = MessageParser().parse("chore: bump deps\n\n")
        assert parsed.body is None
        assert parsed.footer is None
        assert parsed.footer_start is None

    def test_footer_without_body(self):
        parsed = MessageParser().parse("fix: x\n\nCloses #4")
        assert parsed.body is None
        assert parsed.footer == "Closes #4"

    def test_trailer_like_body_line_stays_in_body(self):
        parsed = MessageParser().parse("fix: x\n\nFirst line\nNote: keep going")
        assert parsed.body == "First line\nNote: keep going"
        assert parsed.footer is None

    def test_parse_is_deterministic(self, message_with_body_and_footer):
        parser = MessageParser()
        assert parser.parse(message_with_body_and_footer) == parser.parse(
            message_with_body_and_footer
        )
