"""Configuration for TOC generation (.mdtoc.yml and call-site options)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

import yaml

CONFIG_FILENAME = ".mdtoc.yml"
OMIT_MATCH_POLICIES = ("exact", "glob", "regex")

BulletSpec = Union[str, Sequence[str], None]
StripSpec = Union[Sequence[str], Callable[[str], str], None]


class ConfigError(RuntimeError):
    """Raised when TOC options or the configuration file are invalid."""


@dataclass(frozen=True)
class SlugifyOptions:
    """Options forwarded to the default slugifier."""

    allowed_chars: str = "-"


@dataclass(frozen=True)
class TocOptions:
    """Effective settings for one TOC generation run.

    ``firsth1`` keeps the document's first block in the TOC when true; by
    default it is treated as the title and dropped. ``blacklist`` is accepted
    for compatibility and has no effect on generation.
    """

    firsth1: bool = False
    blacklist: bool = True
    omit: Tuple[str, ...] = ()
    omit_match: str = "exact"
    max_depth: int = 3
    slugify_options: SlugifyOptions = field(default_factory=SlugifyOptions)
    slugify: Optional[Callable[[str], str]] = None
    bullet: BulletSpec = None
    template: Optional[str] = None
    data: Mapping[str, Any] = field(default_factory=dict)
    strip: StripSpec = None

    def __post_init__(self) -> None:
        if self.omit_match not in OMIT_MATCH_POLICIES:
            raise ConfigError(
                f"omit_match must be one of {', '.join(OMIT_MATCH_POLICIES)}; got {self.omit_match!r}"
            )
        if isinstance(self.omit, str):
            object.__setattr__(self, "omit", (self.omit,))
        else:
            object.__setattr__(self, "omit", tuple(self.omit))
        if isinstance(self.bullet, list):
            object.__setattr__(self, "bullet", tuple(self.bullet))
        if isinstance(self.slugify_options, Mapping):
            object.__setattr__(
                self, "slugify_options", _slugify_options_from_mapping(self.slugify_options)
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "TocOptions":
        """Build options from a plain mapping, rejecting unknown keys."""
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigError(f"Unknown TOC option(s): {', '.join(unknown)}")
        values: Dict[str, Any] = dict(mapping)
        if "max_depth" in values:
            max_depth = _as_int(values["max_depth"])
            if max_depth is None:
                raise ConfigError("max_depth must be an integer")
            values["max_depth"] = max_depth
        if "omit" in values:
            values["omit"] = _as_str_list(values["omit"])
        if "slugify_options" in values and values["slugify_options"] is None:
            values.pop("slugify_options")
        elif "slugify_options" in values and not isinstance(values["slugify_options"], (Mapping, SlugifyOptions)):
            raise ConfigError("slugify_options must be a mapping")
        if values.get("data") is None:
            values.pop("data", None)
        elif not isinstance(values["data"], Mapping):
            raise ConfigError("data must be a mapping of template fields")
        if "strip" in values and isinstance(values["strip"], str):
            values["strip"] = [values["strip"]]
        return cls(**values)

    def merge(self, **overrides: Any) -> "TocOptions":
        """Return a copy with ``overrides`` applied; ``None`` values are ignored."""
        applied = {key: value for key, value in overrides.items() if value is not None}
        if not applied:
            return self
        return replace(self, **applied)


def load_config(config_path: Path) -> TocOptions:
    """Load TOC options from ``.mdtoc.yml``; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return TocOptions()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    section = data.get("toc", data)
    if section is None:
        return TocOptions()
    if not isinstance(section, dict):
        raise ConfigError("The `toc` section must be a mapping")
    return TocOptions.from_mapping(section)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _slugify_options_from_mapping(value: Mapping[str, Any]) -> SlugifyOptions:
    allowed = value.get("allowed_chars", SlugifyOptions.allowed_chars)
    if not isinstance(allowed, str):
        raise ConfigError("slugify_options.allowed_chars must be a string")
    return SlugifyOptions(allowed_chars=allowed)


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    raise ConfigError("omit must be a string or a list of strings")


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OMIT_MATCH_POLICIES",
    "SlugifyOptions",
    "TocOptions",
    "load_config",
]
