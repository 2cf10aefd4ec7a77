"""Turns filtered headings into TOC records."""

from __future__ import annotations

from typing import Sequence, Tuple

from ..config import ConfigError, TocOptions
from ..models import FilteredHeading, TocRecord
from ..text import slugify, strip_tags

DEFAULT_BULLET = "* "
INDENT_WIDTH = 2


class TocBuilder:
    """Computes indentation, bullets and anchors for each accepted heading."""

    def __init__(self, options: TocOptions) -> None:
        self.options = options
        bullet = options.bullet
        if bullet is not None and not isinstance(bullet, str) and len(bullet) == 0:
            raise ConfigError("bullet sequence must contain at least one entry")
        self._slugify = options.slugify or self._default_slugify

    def build(self, headings: Sequence[FilteredHeading]) -> Tuple[TocRecord, ...]:
        return tuple(
            TocRecord(
                depth=item.depth,
                indent=" " * max(0, (item.depth - 1) * INDENT_WIDTH),
                bullet=self._bullet_for(item.depth),
                heading=item.heading,
                anchor=self._slugify(strip_tags(item.token.text)),
                extra=dict(self.options.data),
            )
            for item in headings
        )

    def _bullet_for(self, depth: int) -> str:
        bullet = self.options.bullet
        if bullet is not None and not isinstance(bullet, str):
            bullet = bullet[(depth - 1) % len(bullet)]
        return bullet or DEFAULT_BULLET

    def _default_slugify(self, text: str) -> str:
        return slugify(text, allowed_chars=self.options.slugify_options.allowed_chars)


__all__ = ["DEFAULT_BULLET", "INDENT_WIDTH", "TocBuilder"]
