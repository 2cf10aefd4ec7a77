"""Tests for mdtoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from mdtoc.config import ConfigError, SlugifyOptions, TocOptions, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == TocOptions()
    assert config.firsth1 is False
    assert config.blacklist is True
    assert config.omit == ()
    assert config.omit_match == "exact"
    assert config.max_depth == 3
    assert config.slugify_options == SlugifyOptions(allowed_chars="-")
    assert config.bullet is None
    assert config.template is None
    assert config.strip is None


def test_load_config_parses_toc_section(tmp_path: Path) -> None:
    config_file = tmp_path / ".mdtoc.yml"
    config_file.write_text(
        """
toc:
  max_depth: 2
  firsth1: true
  omit:
    - Changelog
    - "Release *"
  omit_match: glob
  bullet: ["- ", "+ "]
  slugify_options:
    allowed_chars: "-_"
  data:
    page: README.md
  strip: docs
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.max_depth == 2
    assert config.firsth1 is True
    assert config.omit == ("Changelog", "Release *")
    assert config.omit_match == "glob"
    assert config.bullet == ("- ", "+ ")
    assert config.slugify_options.allowed_chars == "-_"
    assert config.data == {"page": "README.md"}
    assert config.strip == ["docs"]


def test_load_config_accepts_root_mapping(tmp_path: Path) -> None:
    (tmp_path / ".mdtoc.yml").write_text("max_depth: '4'\nomit: Notes\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.max_depth == 4
    assert config.omit == ("Notes",)


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    (tmp_path / ".mdtoc.yml").write_text("toc:\n  maxDepth: 2\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="maxDepth"):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".mdtoc.yml").write_text("toc: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_bad_values(tmp_path: Path) -> None:
    config_file = tmp_path / ".mdtoc.yml"
    config_file.write_text("max_depth: deep\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)

    config_file.write_text("omit_match: fuzzy\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(config_file)


def test_merge_ignores_unset_overrides() -> None:
    base = TocOptions(max_depth=2, bullet="- ")

    merged = base.merge(max_depth=None, bullet="+ ", template=None)

    assert merged.max_depth == 2
    assert merged.bullet == "+ "
    assert base.bullet == "- "
    assert base.merge() is base
