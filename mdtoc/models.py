"""Core data models shared across mdtoc components."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple, Union


@dataclass(frozen=True)
class HeadingToken:
    """A Markdown heading with its level and raw inline source."""

    depth: int
    text: str
    type: str = field(default="heading", init=False)


@dataclass(frozen=True)
class BlockToken:
    """Any other block-level element; opaque to the TOC pipeline."""

    type: str


Token = Union[HeadingToken, BlockToken]


@dataclass(frozen=True)
class FilteredHeading:
    """Heading accepted by the filter, with its rebased depth and display text."""

    token: HeadingToken
    depth: int
    heading: str


@dataclass(frozen=True)
class TocRecord:
    """One rendered TOC entry."""

    depth: int
    indent: str
    bullet: str
    heading: str
    anchor: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def context(self) -> Dict[str, Any]:
        """Return the template substitution map for this entry."""
        merged: Dict[str, Any] = dict(self.extra)
        merged.update(
            {
                "depth": self.indent,
                "bullet": self.bullet,
                "heading": self.heading,
                "url": self.anchor,
            }
        )
        return merged


@dataclass(frozen=True)
class TocResult:
    """Records and rendered text produced by one generation run."""

    records: Tuple[TocRecord, ...]
    toc: str

    @property
    def data(self) -> List[Dict[str, Any]]:
        return [record.context() for record in self.records]


@dataclass
class Document:
    """A Markdown document split into front matter and body."""

    content: str
    data: Dict[str, Any] = field(default_factory=dict)
    front_matter: str = ""
