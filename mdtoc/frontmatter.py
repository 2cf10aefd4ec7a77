"""YAML front-matter parsing and serialization."""

from __future__ import annotations

from typing import Any, Mapping

import yaml

from .models import Document

FENCE = "---"


class FrontMatterError(ValueError):
    """Raised when a front-matter block is present but cannot be parsed."""


def parse(text: str) -> Document:
    """Split ``text`` into front-matter data and body content.

    Front matter is a YAML mapping between a leading ``---`` line and the next
    ``---`` line. Text without a complete block is returned as the body.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FENCE:
        return Document(content=text)

    end_index = None
    for index in range(1, len(lines)):
        if lines[index].rstrip("\r\n") == FENCE:
            end_index = index
            break
    if end_index is None:
        return Document(content=text)

    raw = "".join(lines[1:end_index])
    try:
        data = yaml.safe_load(raw) if raw.strip() else {}
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid front matter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError("Front matter must be a YAML mapping")
    return Document(
        content="".join(lines[end_index + 1 :]),
        data=data,
        front_matter="".join(lines[: end_index + 1]),
    )


def stringify(content: str, data: Mapping[str, Any] | None = None) -> str:
    """Prefix ``content`` with ``data`` as a front-matter block; empty data adds nothing."""
    if not data:
        return content
    dumped = yaml.safe_dump(dict(data), sort_keys=False, allow_unicode=True)
    return f"{FENCE}\n{dumped}{FENCE}\n{content}"


def reassemble(document: Document, content: str) -> str:
    """Put the original front-matter block of ``document`` back in front of ``content``.

    The block is reused byte for byte, so empty blocks and YAML comments survive.
    """
    if document.front_matter:
        return document.front_matter + content
    return stringify(content, document.data)


__all__ = ["FENCE", "FrontMatterError", "parse", "reassemble", "stringify"]
