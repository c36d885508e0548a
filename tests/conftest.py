"""Shared test fixtures — sample messages, reference config, linters."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from commitcheck.config.defaults import DEFAULT_TOML
from commitcheck.config.loader import load_config
from commitcheck.lint.evaluator import Linter


@pytest.fixture
def reference_root(tmp_path: Path) -> Path:
    """A project root holding the starter .commitcheck.toml."""
    (tmp_path / ".commitcheck.toml").write_text(DEFAULT_TOML, encoding="utf-8")
    return tmp_path


@pytest.fixture
def reference_linter(reference_root: Path) -> Linter:
    """Linter built from the starter config (conventional, Merge ignore, subject-empty off)."""
    cfg = load_config(reference_root)
    return Linter.from_config(cfg, reference_root)


@pytest.fixture
def default_linter(tmp_path: Path) -> Linter:
    """Linter built with no config file at all."""
    return Linter.from_config(load_config(tmp_path), tmp_path)


@pytest.fixture
def message_with_body_and_footer() -> str:
    return textwrap.dedent("""\
        feat(parser): add header support

        The header is now tokenized with a configurable pattern
        and correspondence list.

        Refs: #12
        BREAKING CHANGE: the old tokenizer is gone
    """)


@pytest.fixture
def message_with_comments() -> str:
    return textwrap.dedent("""\
        fix(api): handle empty payload

        # Please enter the commit message for your changes. Lines starting
        # with '#' will be ignored, and an empty message aborts the commit.
    """)


@pytest.fixture
def merge_message() -> str:
    return "Merge branch 'main' into feature"
