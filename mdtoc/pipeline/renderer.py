"""Template rendering for TOC records."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Protocol, Sequence

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from ..config import ConfigError, StripSpec
from ..models import TocRecord
from ..text import strip

DEFAULT_TEMPLATE = "{{ depth }}{{ bullet }}[{{ heading }}](#{{ url }})\n"


class TemplateRenderer(Protocol):
    """Renders one template with a substitution map."""

    def render(self, template: str, context: Mapping[str, Any]) -> str:
        """Return the rendered text."""


class JinjaTemplateRenderer:
    """Default renderer backed by Jinja2.

    Markdown output is not HTML, so autoescaping is off, and the trailing
    newline of each line template is preserved.
    """

    def __init__(self, environment: Environment | None = None) -> None:
        self.environment = environment or Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._compiled: Dict[str, Template] = {}

    def render(self, template: str, context: Mapping[str, Any]) -> str:
        try:
            compiled = self._compiled.get(template)
            if compiled is None:
                compiled = self.environment.from_string(template)
                self._compiled[template] = compiled
            return compiled.render(**context)
        except TemplateError as exc:
            raise ConfigError(f"Invalid TOC template: {exc}") from exc


def render(
    records: Sequence[TocRecord],
    template: Optional[str] = None,
    *,
    renderer: TemplateRenderer | None = None,
    strip_spec: StripSpec = None,
) -> str:
    """Render ``records`` line by line and concatenate them in order."""
    active = renderer or JinjaTemplateRenderer()
    line_template = template or DEFAULT_TEMPLATE
    output = "".join(active.render(line_template, record.context()) for record in records)
    return strip(output, strip_spec) if strip_spec else output


__all__ = ["DEFAULT_TEMPLATE", "JinjaTemplateRenderer", "TemplateRenderer", "render"]
