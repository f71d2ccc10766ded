"""Engine configuration.

One frozen flag set per engine instance. Every optional signal has its own
toggle and all of them default to enabled, so ``SentimentConfig()`` is the
full analysis. ``from_env`` builds the same object from environment variables
for the HTTP server.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from .errors import ConfigurationError

DEFAULT_CACHE_SIZE = 4096

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off"}


@dataclass(frozen=True)
class SentimentConfig:
    enable_cache: bool = True
    enable_emoji_analysis: bool = True
    enable_punctuation_analysis: bool = True
    enable_repetition_analysis: bool = True
    enable_context_analysis: bool = True
    enable_irony_detection: bool = True
    enable_connectors_analysis: bool = True
    # Reserved: no analyzer consults this flag.
    enable_position_weight: bool = True
    cache_size: Optional[int] = DEFAULT_CACHE_SIZE

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "cache_size":
                if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
                    raise ConfigurationError(f"cache_size must be None or a non-negative integer, got {value!r}")
            elif not isinstance(value, bool):
                raise ConfigurationError(f"{f.name} must be a bool, got {value!r}")

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "SentimentConfig":
        """Build a config from a plain dict, rejecting unknown keys.

        String values are parsed with the same rules as environment variables.
        """
        if not values:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        overrides = {
            name: _parse(name, name, value) if isinstance(value, str) else value
            for name, value in values.items()
        }
        return replace(cls(), **overrides)

    @classmethod
    def from_env(cls, prefix: str = "SENTIMENT_") -> "SentimentConfig":
        """Read ``<prefix>ENABLE_*`` flags and ``<prefix>CACHE_SIZE``.

        Unset variables keep their defaults.
        """
        overrides: dict[str, Any] = {}
        for f in fields(cls):
            raw = os.getenv(prefix + f.name.upper())
            if raw is None or not raw.strip():
                continue
            overrides[f.name] = _parse(f.name, prefix + f.name.upper(), raw)
        return replace(cls(), **overrides)


def _parse(field_name: str, label: str, raw: str) -> Any:
    if field_name == "cache_size":
        return _parse_cache_size(raw)
    return _parse_bool(label, raw)


def _parse_bool(name: str, raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_cache_size(raw: str) -> Optional[int]:
    v = raw.strip().lower()
    if v in {"none", "unbounded"}:
        return None
    try:
        size = int(v)
    except ValueError as exc:
        raise ConfigurationError(f"Cache size must be an integer, got {raw!r}") from exc
    if size < 0:
        raise ConfigurationError(f"Cache size must not be negative, got {size}")
    return size
