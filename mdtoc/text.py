"""Text helpers: slugs, tag stripping, strip transforms and omission matching."""

from __future__ import annotations

import re
import unicodedata
from fnmatch import fnmatchcase
from typing import Callable, Iterable, Sequence, Union

from .config import ConfigError

_TAG_PATTERN = re.compile(r"<[^>]*>")
_WHITESPACE_RUN = re.compile(r"\s+")
_EDGE_DASH = re.compile(r"^-|-$")


def slugify(text: str, *, allowed_chars: str = "-") -> str:
    """Return a URL-safe anchor for ``text``.

    Letters and numbers from any script are kept, as are the characters in
    ``allowed_chars``; separators become spaces and everything else is
    dropped. Whitespace runs collapse to a single ``-`` and the result is
    lowercased. Duplicate headings produce duplicate slugs.

    >>> slugify("Hello World!")
    'hello-world'
    >>> slugify("Über uns")
    'über-uns'
    """
    kept = []
    for char in unicodedata.normalize("NFKC", text):
        if char in allowed_chars:
            kept.append(char)
            continue
        category = unicodedata.category(char)
        if category[0] in ("L", "N"):
            kept.append(char)
        elif category[0] == "Z" or char.isspace():
            kept.append(" ")
    slug = _WHITESPACE_RUN.sub("-", "".join(kept).strip())
    return slug.lower()


def strip_tags(text: str) -> str:
    """Remove inline HTML tags, leaving their text content."""
    return _TAG_PATTERN.sub("", text)


def strip(text: str, spec: Union[Sequence[str], Callable[[str], str], None]) -> str:
    """Apply the configured strip transform to ``text``.

    A callable is applied directly. A sequence is treated as regex fragments:
    the text is trimmed, every match is removed, and a single ``-`` is dropped
    from the start and from the end.
    """
    if not spec:
        return text
    if callable(spec):
        return spec(text)
    try:
        pattern = re.compile("|".join(spec))
    except re.error as exc:
        raise ConfigError(f"Invalid strip pattern: {exc}") from exc
    text = pattern.sub("", text.strip())
    return _EDGE_DASH.sub("", text)


def build_matcher(patterns: Iterable[str], policy: str = "exact") -> Callable[[str], bool]:
    """Compile ``patterns`` once and return a predicate over candidate text."""
    entries = tuple(patterns)
    if policy == "exact":
        exact = frozenset(entries)
        return lambda candidate: candidate in exact
    if policy == "glob":
        return lambda candidate: any(fnmatchcase(candidate, entry) for entry in entries)
    if policy == "regex":
        try:
            compiled = [re.compile(entry) for entry in entries]
        except re.error as exc:
            raise ConfigError(f"Invalid omit pattern: {exc}") from exc
        return lambda candidate: any(regex.search(candidate) for regex in compiled)
    raise ValueError(f"Unknown match policy: {policy}")


def is_match(patterns: Iterable[str], candidate: str, policy: str = "exact") -> bool:
    """Return True when any entry of ``patterns`` matches ``candidate``."""
    return build_matcher(patterns, policy)(candidate)


__all__ = ["build_matcher", "is_match", "slugify", "strip", "strip_tags"]
