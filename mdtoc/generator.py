"""TOC generation pipeline: tokenize, filter, build and render."""

from __future__ import annotations

from typing import Any, Mapping, Union

from .config import TocOptions
from .logging import get_logger
from .models import TocResult
from .pipeline import HeadingFilter, TemplateRenderer, TocBuilder, render
from .tokenizer import tokenize

OptionsLike = Union[TocOptions, Mapping[str, Any], None]

_logger = get_logger("generator")


def resolve_options(options: OptionsLike) -> TocOptions:
    """Return ``options`` as a :class:`TocOptions`, applying defaults."""
    if options is None:
        return TocOptions()
    if isinstance(options, TocOptions):
        return options
    return TocOptions.from_mapping(options)


def raw(
    markdown: str,
    options: OptionsLike = None,
    *,
    renderer: TemplateRenderer | None = None,
) -> TocResult:
    """Generate the TOC records and rendered text for ``markdown``."""
    opts = resolve_options(options)
    tokens = tokenize(markdown)
    headings = HeadingFilter(opts).filter(tokens)
    records = TocBuilder(opts).build(headings)
    _logger.debug("Built %d TOC records from %d tokens", len(records), len(tokens))
    text = render(records, opts.template, renderer=renderer, strip_spec=opts.strip)
    return TocResult(records=records, toc=text)


def toc(
    markdown: str,
    options: OptionsLike = None,
    *,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Return only the rendered TOC for ``markdown``."""
    return raw(markdown, options, renderer=renderer).toc


__all__ = ["OptionsLike", "raw", "resolve_options", "toc"]
