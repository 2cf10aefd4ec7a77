"""File-level entry point for adding a TOC to a Markdown document on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .generator import OptionsLike
from .logging import get_logger
from .markers import insert

PathLike = Union[str, Path]

_logger = get_logger("files")


def add_toc(path: PathLike, dest: PathLike | None = None, options: OptionsLike = None) -> Path:
    """Insert a TOC into ``path`` and write the result to ``dest``.

    ``dest`` defaults to ``path``; missing parent directories are created.
    Read and write errors propagate unchanged. Returns the destination path.
    """
    source = Path(path)
    target = Path(dest) if dest is not None else source
    content = source.read_text(encoding="utf-8")
    updated = insert(content, options)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(updated, encoding="utf-8")
    _logger.info("Success: %s", target)
    return target


__all__ = ["add_toc"]
