"""Generate and maintain Markdown tables of contents."""

from .config import ConfigError, SlugifyOptions, TocOptions, load_config
from .files import add_toc
from .generator import raw, toc
from .markers import TocInserter, insert
from .models import TocRecord, TocResult

__all__ = [
    "ConfigError",
    "SlugifyOptions",
    "TocInserter",
    "TocOptions",
    "TocRecord",
    "TocResult",
    "add_toc",
    "insert",
    "load_config",
    "raw",
    "toc",
]
