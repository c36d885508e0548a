"""Commit message parser — header tokenizing plus body / footer split.

The header pattern and its correspondence list are validated when the
parser is built, so a misconfigured pattern fails before any message is
read. Parsing itself never raises on message content: an unmatched header
yields a ParsedMessage with the header fields absent.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple

from commitcheck.config.schema import ConfigurationError
from commitcheck.parser.models import HEADER_FIELDS, Note, ParsedMessage

DEFAULT_HEADER_PATTERN = r"^(\w*)(?:\((.*)\))?!?: (.*)$"
DEFAULT_HEADER_CORRESPONDENCE: Tuple[str, ...] = ("type", "scope", "subject")

_NOTE_RE = re.compile(r"^(BREAKING[ -]CHANGE):\s*(.*)$")
_TRAILER_RE = re.compile(r"^[A-Za-z][\w-]*(?:: | #)\S")


def _is_trailer(line: str) -> bool:
    return bool(_NOTE_RE.match(line) or _TRAILER_RE.match(line))


def _unwrap_scope(value: str) -> str:
    """``(parser)`` → ``parser`` when a pattern captures the parentheses."""
    if len(value) >= 2 and value.startswith("(") and value.endswith(")"):
        return value[1:-1]
    return value


def _join(lines: Sequence[str]) -> Optional[str]:
    text = "\n".join(lines).strip("\n")
    return text if text.strip() else None


class MessageParser:
    """Split raw commit messages into ParsedMessage objects.

    Usage::

        parser = MessageParser(r"^(\\w+)(\\([^)]+\\))?:\\s*(.*)$", ["type", "scope", "subject"])
        parsed = parser.parse("feat(parser): add header support")
        parsed.scope  # "parser"
    """

    def __init__(
        self,
        header_pattern: Optional[str] = None,
        header_correspondence: Optional[Sequence[str]] = None,
        comment_char: Optional[str] = "#",
    ) -> None:
        pattern = header_pattern if header_pattern is not None else DEFAULT_HEADER_PATTERN
        correspondence = tuple(
            header_correspondence
            if header_correspondence is not None
            else DEFAULT_HEADER_CORRESPONDENCE
        )

        try:
            self._header_re = re.compile(pattern)
        except (re.error, TypeError) as exc:
            raise ConfigurationError(f"Invalid header pattern {pattern!r}: {exc}") from exc

        if len(correspondence) != self._header_re.groups:
            raise ConfigurationError(
                f"Header correspondence has {len(correspondence)} field(s) "
                f"{list(correspondence)} but the header pattern has "
                f"{self._header_re.groups} capture group(s)"
            )
        unknown = [name for name in correspondence if name not in HEADER_FIELDS]
        if unknown:
            raise ConfigurationError(
                f"Unknown header field(s) {unknown}; expected any of {list(HEADER_FIELDS)}"
            )
        if len(set(correspondence)) != len(correspondence):
            raise ConfigurationError(
                f"Duplicate field in header correspondence: {list(correspondence)}"
            )

        if comment_char is not None and not isinstance(comment_char, str):
            raise ConfigurationError(f"comment_char must be a string, got {comment_char!r}")

        self.header_pattern = pattern
        self.header_correspondence = correspondence
        self.comment_char = comment_char or None

    def _clean_lines(self, raw: str) -> List[str]:
        lines = raw.replace("\r\n", "\n").lstrip("\ufeff").split("\n")
        if self.comment_char:
            lines = [ln for ln in lines if not ln.startswith(self.comment_char)]
        while lines and not lines[-1].strip():
            lines.pop()
        return lines

    def _match_header(self, header: str) -> Tuple[bool, Dict[str, Optional[str]]]:
        fields: Dict[str, Optional[str]] = {name: None for name in HEADER_FIELDS}
        m = self._header_re.match(header)
        if m is None:
            return False, fields
        for name, value in zip(self.header_correspondence, m.groups()):
            if value is not None and name == "scope":
                value = _unwrap_scope(value)
            fields[name] = value
        return True, fields

    def _split_body_footer(
        self, lines: List[str]
    ) -> Tuple[Optional[str], Optional[str], Optional[int]]:
        """Return (body, footer, footer_start) for the lines after the header."""
        content_start = 1
        while content_start < len(lines) and not lines[content_start].strip():
            content_start += 1
        if content_start >= len(lines):
            return None, None, None

        footer_start: Optional[int] = None
        for idx in range(content_start, len(lines)):
            line = lines[idx]
            if _NOTE_RE.match(line):
                footer_start = idx
                break
            # plain trailers only count as a footer once a paragraph starts
            if _TRAILER_RE.match(line) and (
                idx == content_start or not lines[idx - 1].strip()
            ):
                footer_start = idx
                break

        if footer_start is None:
            return _join(lines[content_start:]), None, None
        return (
            _join(lines[content_start:footer_start]),
            _join(lines[footer_start:]),
            footer_start,
        )

    @staticmethod
    def _collect_notes(footer_lines: Sequence[str]) -> Tuple[Note, ...]:
        notes: List[Note] = []
        current: Optional[List[str]] = None
        title = ""
        for line in footer_lines:
            nm = _NOTE_RE.match(line)
            if nm:
                if current is not None:
                    notes.append(Note(title=title, text="\n".join(current).strip()))
                title = nm.group(1)
                current = [nm.group(2)]
            elif current is not None:
                if _is_trailer(line):
                    notes.append(Note(title=title, text="\n".join(current).strip()))
                    current = None
                else:
                    current.append(line)
        if current is not None:
            notes.append(Note(title=title, text="\n".join(current).strip()))
        return tuple(notes)

    def parse(self, raw: str) -> ParsedMessage:
        """Parse *raw* into a ParsedMessage. Never raises on message content."""
        lines = self._clean_lines(raw)
        header = lines[0] if lines else ""
        matched, fields = self._match_header(header)
        body, footer, footer_start = self._split_body_footer(lines)
        notes = self._collect_notes(lines[footer_start:]) if footer_start is not None else ()

        return ParsedMessage(
            raw=raw,
            header=header,
            type=fields["type"],
            scope=fields["scope"],
            subject=fields["subject"],
            body=body,
            footer=footer,
            notes=notes,
            header_matched=matched,
            lines=tuple(lines),
            footer_start=footer_start,
        )
