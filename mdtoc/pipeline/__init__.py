"""TOC generation stages: filtering, record building and rendering."""

from .builder import TocBuilder
from .filter import BUILTIN_OMISSIONS, HeadingFilter
from .renderer import DEFAULT_TEMPLATE, JinjaTemplateRenderer, TemplateRenderer, render

__all__ = [
    "BUILTIN_OMISSIONS",
    "DEFAULT_TEMPLATE",
    "HeadingFilter",
    "JinjaTemplateRenderer",
    "TemplateRenderer",
    "TocBuilder",
    "render",
]
