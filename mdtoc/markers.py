"""Marker-delimited TOC insertion for Markdown documents."""

from __future__ import annotations

import re

from . import frontmatter
from .generator import OptionsLike, resolve_options, toc
from .logging import get_logger
from .pipeline import TemplateRenderer


class TocInserter:
    """Replaces the ``<!-- toc -->`` region of a document with a fresh TOC.

    Only the first marker pair is regenerated. The blank lines that surround a
    generated block are removed together with it, so inserting into already
    processed text reproduces that text exactly.
    """

    START = "<!-- toc -->"
    STOP = "<!-- tocstop -->"
    _REGION = re.compile(r"(?:\n\n)?<!-- toc -->[\s\S]+?<!-- tocstop -->\n?")

    def __init__(
        self,
        options: OptionsLike = None,
        *,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.options = resolve_options(options)
        self.renderer = renderer
        self.logger = get_logger("markers")

    def insert(self, markdown: str) -> str:
        document = frontmatter.parse(markdown)
        content = document.content

        match = self._REGION.search(content)
        if match:
            self.logger.debug("Removing existing TOC block at offset %d", match.start())
            before, after = content[: match.start()], content[match.end() :]
            body = f"{before}{self.START}{after}"
            # Keep the placeholder a standalone block so it never joins a heading line.
            source = f"{before}\n\n{self.START}\n\n{after}"
        else:
            body = source = content

        if self.START not in body:
            self.logger.debug("No %s marker found; leaving document unchanged", self.START)

        generated = toc(source, self.options, renderer=self.renderer)
        block = f"\n\n{self.START}\n\n{generated}\n{self.STOP}\n"

        serialized = frontmatter.reassemble(document, body)
        return serialized.replace(self.START, block, 1)


def insert(
    markdown: str,
    options: OptionsLike = None,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Insert or refresh the TOC between the markers of ``markdown``."""
    return TocInserter(options, renderer=renderer).insert(markdown)


__all__ = ["TocInserter", "insert"]
