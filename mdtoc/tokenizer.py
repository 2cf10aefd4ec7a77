"""Block-level Markdown tokenization backed by markdown-it-py."""

from __future__ import annotations

from typing import List

from markdown_it import MarkdownIt

from .models import BlockToken, HeadingToken, Token

_OPENING_SUFFIX = "_open"


def tokenize(markdown: str) -> List[Token]:
    """Return the block tokens of ``markdown`` in document order.

    Every heading, including headings nested in block quotes or lists, becomes
    a :class:`HeadingToken` carrying its raw inline source. Other top-level
    blocks are reduced to a :class:`BlockToken` naming the block type.
    """
    parser = MarkdownIt("commonmark")
    stream = parser.parse(markdown)
    tokens: List[Token] = []
    for index, token in enumerate(stream):
        if token.type == "heading_open":
            inline = stream[index + 1] if index + 1 < len(stream) else None
            text = inline.content if inline is not None and inline.type == "inline" else ""
            tokens.append(HeadingToken(depth=int(token.tag[1:]), text=text))
            continue
        if token.level != 0 or token.nesting < 0 or token.type == "inline":
            continue
        block_type = token.type
        if block_type.endswith(_OPENING_SUFFIX):
            block_type = block_type[: -len(_OPENING_SUFFIX)]
        tokens.append(BlockToken(type=block_type))
    return tokens


__all__ = ["tokenize"]
