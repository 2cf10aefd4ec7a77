"""Tests for mdtoc.files."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdtoc import TocOptions, add_toc
from tests._fixtures.docs_builder import DocsBuilder

README = """
# Project

<!-- toc -->

## Install

## Usage
"""


def test_add_toc_rewrites_source_in_place(docs_builder: DocsBuilder) -> None:
    path = docs_builder.write("README.md", README)

    target = add_toc(path)

    assert target == path
    content = docs_builder.read("README.md")
    assert "* [Install](#install)\n* [Usage](#usage)\n" in content
    assert content.count("<!-- tocstop -->") == 1


def test_add_toc_writes_to_destination(docs_builder: DocsBuilder, tmp_path: Path) -> None:
    path = docs_builder.write("README.md", README)
    dest = tmp_path / "out" / "nested" / "README.md"

    target = add_toc(str(path), dest, TocOptions(bullet="- "))

    assert target == dest
    assert "- [Install](#install)" in dest.read_text(encoding="utf-8")
    assert "<!-- tocstop -->" not in path.read_text(encoding="utf-8")


def test_add_toc_propagates_missing_source(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        add_toc(tmp_path / "missing.md")
