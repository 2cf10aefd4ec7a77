"""Heading selection, omission rules and depth rebasing."""

from __future__ import annotations

from typing import List, Sequence

from ..config import TocOptions
from ..logging import get_logger
from ..models import FilteredHeading, HeadingToken, Token
from ..text import build_matcher, strip

BUILTIN_OMISSIONS = ("Table of Contents", "TOC", "TABLE OF CONTENTS")


class HeadingFilter:
    """Selects the headings that belong in the TOC."""

    def __init__(self, options: TocOptions) -> None:
        self.options = options
        self.omissions = tuple(dict.fromkeys((*options.omit, *BUILTIN_OMISSIONS)))
        self._is_omitted = build_matcher(self.omissions, options.omit_match)
        self.logger = get_logger("filter")

    def filter(self, tokens: Sequence[Token]) -> List[FilteredHeading]:
        remaining = list(tokens)
        # The first block is treated as the document title.
        if not self.options.firsth1 and remaining:
            remaining = remaining[1:]

        headings = [token for token in remaining if isinstance(token, HeadingToken)]
        rebase = 0 if any(token.depth == 1 for token in headings) else 1

        accepted: List[FilteredHeading] = []
        for token in headings:
            depth = token.depth - rebase
            text = strip(token.text, self.options.strip) if self.options.strip else token.text
            if self._is_omitted(text):
                self.logger.debug("Omitting heading %r", text)
                continue
            if depth > self.options.max_depth:
                continue
            accepted.append(FilteredHeading(token=token, depth=depth, heading=text))

        self.logger.debug(
            "Accepted %d of %d headings (rebased=%s)", len(accepted), len(headings), bool(rebase)
        )
        return accepted


__all__ = ["BUILTIN_OMISSIONS", "HeadingFilter"]
