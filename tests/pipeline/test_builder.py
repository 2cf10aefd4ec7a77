"""Tests for mdtoc.pipeline.builder."""

from __future__ import annotations

import pytest

from mdtoc.config import ConfigError, SlugifyOptions, TocOptions
from mdtoc.models import FilteredHeading, HeadingToken
from mdtoc.pipeline.builder import TocBuilder


def _heading(text: str, depth: int) -> FilteredHeading:
    return FilteredHeading(token=HeadingToken(depth=depth + 1, text=text), depth=depth, heading=text)


def test_builder_indents_two_spaces_per_level() -> None:
    records = TocBuilder(TocOptions()).build([_heading("A", 1), _heading("B", 2), _heading("C", 3)])
    assert [record.indent for record in records] == ["", "  ", "    "]
    assert [record.bullet for record in records] == ["* ", "* ", "* "]
    assert [record.anchor for record in records] == ["a", "b", "c"]


def test_builder_clamps_non_positive_depths() -> None:
    records = TocBuilder(TocOptions()).build([_heading("Zero", 0), _heading("Negative", -1)])
    assert [record.indent for record in records] == ["", ""]
    assert [record.depth for record in records] == [0, -1]


def test_builder_cycles_bullet_sequences_by_depth() -> None:
    builder = TocBuilder(TocOptions(bullet=["- ", "+ "]))
    records = builder.build([_heading("A", 1), _heading("B", 2), _heading("C", 3), _heading("D", 0)])
    assert [record.bullet for record in records] == ["- ", "+ ", "- ", "+ "]


def test_builder_uses_single_bullet_string_and_default_for_falsy() -> None:
    assert TocBuilder(TocOptions(bullet="- ")).build([_heading("A", 1)])[0].bullet == "- "
    assert TocBuilder(TocOptions(bullet="")).build([_heading("A", 1)])[0].bullet == "* "
    assert TocBuilder(TocOptions(bullet=("", "- "))).build([_heading("A", 1)])[0].bullet == "* "


def test_builder_rejects_empty_bullet_sequence() -> None:
    with pytest.raises(ConfigError):
        TocBuilder(TocOptions(bullet=[]))


def test_builder_slugifies_raw_text_without_tags() -> None:
    heading = FilteredHeading(
        token=HeadingToken(depth=2, text="Use <code>run</code>"),
        depth=1,
        heading="Use <code>run</code>",
    )
    record = TocBuilder(TocOptions()).build([heading])[0]
    assert record.anchor == "use-run"
    assert record.heading == "Use <code>run</code>"


def test_builder_honours_slugify_options_and_override() -> None:
    snake = _heading("snake_case", 1)
    options = TocOptions(slugify_options=SlugifyOptions(allowed_chars="-_"))
    assert TocBuilder(options).build([snake])[0].anchor == "snake_case"
    custom = TocOptions(slugify=lambda text: f"custom-{text}")
    assert TocBuilder(custom).build([snake])[0].anchor == "custom-snake_case"


def test_builder_record_context_merges_extra_data() -> None:
    record = TocBuilder(TocOptions(data={"project": "mdtoc", "url": "ignored"})).build([_heading("A", 2)])[0]
    assert record.context() == {
        "project": "mdtoc",
        "depth": "  ",
        "bullet": "* ",
        "heading": "A",
        "url": "a",
    }
