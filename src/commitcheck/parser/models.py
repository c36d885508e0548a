"""Data models for commit message parsing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

HEADER_FIELDS = ("type", "scope", "subject")


@dataclass(frozen=True, slots=True)
class Note:
    """A footer note such as ``BREAKING CHANGE: ...``."""

    title: str
    text: str


@dataclass(frozen=True)
class ParsedMessage:
    """A commit message split into named fields.

    Header fields are ``None`` when the header pattern did not capture them
    (or did not match at all, see ``header_matched``).
    """

    raw: str
    header: str = ""
    type: Optional[str] = None
    scope: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None
    footer: Optional[str] = None
    notes: Tuple[Note, ...] = ()
    header_matched: bool = False
    # comment-stripped lines; footer_start indexes into them
    lines: Tuple[str, ...] = field(default=(), repr=False)
    footer_start: Optional[int] = field(default=None, repr=False)

    def get(self, name: str) -> Optional[str]:
        """Field lookup by name (``type``, ``scope``, ``subject``, ``body``, ``footer``, ``header``)."""
        if name not in (*HEADER_FIELDS, "body", "footer", "header"):
            raise KeyError(name)
        return getattr(self, name)
