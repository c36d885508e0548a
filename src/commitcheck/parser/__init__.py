"""Commit message parsing — header tokenizer, body/footer split, models."""

from commitcheck.parser.message_parser import (
    DEFAULT_HEADER_CORRESPONDENCE,
    DEFAULT_HEADER_PATTERN,
    MessageParser,
)
from commitcheck.parser.models import HEADER_FIELDS, Note, ParsedMessage

__all__ = [
    "DEFAULT_HEADER_CORRESPONDENCE",
    "DEFAULT_HEADER_PATTERN",
    "HEADER_FIELDS",
    "MessageParser",
    "Note",
    "ParsedMessage",
]
