"""Static resource tables consumed by the engine.

The engine never reads files. It receives one immutable ``SentimentResources``
bundle at construction; ``load_resources`` is the collaborator that builds
that bundle from a directory of JSON tables (the pt-BR bundle shipped under
``sentiment_app/data/pt-br`` by default).

Directory layout::

    lexicon.json           {"word": weight, ...}
    intensity_words.json   {"word": multiplier, ...}   negative = negation
    connectors.json        {"connectors": {"word": multiplier}, "adversative": [...]}
    emoji_scores.json      {"glyph": weight, ...}
    irony_indicators.json  ["substring", ...]
    repetition_stems.json  {"negative": [...], "positive": [...]}
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from .errors import ResourceLoadError
from .tokenizer import fold_accents

log = logging.getLogger(__name__)

DEFAULT_RESOURCES_DIR = Path(__file__).resolve().parent / "data" / "pt-br"


def _empty() -> Mapping[str, float]:
    return MappingProxyType({})


def _fold(word: str) -> str:
    return fold_accents(word.lower())


def _frozen_weights(name: str, table: Mapping[str, Any], fold: bool = True) -> Mapping[str, float]:
    """Validate weights and key them the way the tokenizer emits words."""
    out: dict = {}
    for key, value in table.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ResourceLoadError(f"{name}: weight for {key!r} is not a number: {value!r}")
        word = _fold(str(key)) if fold else str(key)
        if word in out and out[word] != float(value):
            raise ResourceLoadError(f"{name}: {key!r} folds to {word!r}, which already has another weight")
        out[word] = float(value)
    return MappingProxyType(out)


def _strings(name: str, items: Iterable[Any]) -> tuple:
    out = []
    for item in items:
        if not isinstance(item, str):
            raise ResourceLoadError(f"{name}: expected strings, got {item!r}")
        if item:
            out.append(item)
    return tuple(out)


@dataclass(frozen=True)
class SentimentResources:
    """Read-only lookup tables for one engine instance."""

    lexicon: Mapping[str, float] = field(default_factory=_empty)
    intensity_words: Mapping[str, float] = field(default_factory=_empty)
    connectors: Mapping[str, float] = field(default_factory=_empty)
    adversative: frozenset = frozenset()
    emoji_scores: Mapping[str, float] = field(default_factory=_empty)
    irony_indicators: tuple = ()
    negative_stems: tuple = ()
    positive_stems: tuple = ()
    name: str = field(default="custom", compare=False)

    @classmethod
    def build(
        cls,
        lexicon: Optional[Mapping[str, Any]] = None,
        intensity_words: Optional[Mapping[str, Any]] = None,
        connectors: Optional[Mapping[str, Any]] = None,
        adversative: Iterable[str] = (),
        emoji_scores: Optional[Mapping[str, Any]] = None,
        irony_indicators: Iterable[str] = (),
        negative_stems: Iterable[str] = (),
        positive_stems: Iterable[str] = (),
        name: str = "custom",
    ) -> "SentimentResources":
        """Validate plain tables and freeze them into a bundle."""
        connectors = _frozen_weights("connectors", connectors or {})
        adversative = frozenset(_fold(w) for w in _strings("adversative", adversative))
        missing = sorted(adversative - set(connectors))
        if missing:
            raise ResourceLoadError(
                f"connectors: adversative words without a multiplier: {', '.join(missing)}"
            )
        return cls(
            lexicon=_frozen_weights("lexicon", lexicon or {}),
            intensity_words=_frozen_weights("intensity_words", intensity_words or {}),
            connectors=connectors,
            adversative=adversative,
            emoji_scores=_frozen_weights("emoji_scores", emoji_scores or {}, fold=False),
            irony_indicators=_strings("irony_indicators", irony_indicators),
            negative_stems=tuple(_fold(s) for s in _strings("negative_stems", negative_stems)),
            positive_stems=tuple(_fold(s) for s in _strings("positive_stems", positive_stems)),
            name=name,
        )


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as exc:
        raise ResourceLoadError(f"Resource file not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ResourceLoadError(f"Could not read resource file {path}: {exc}") from exc


def _expect(kind: type, name: str, value: Any) -> Any:
    if not isinstance(value, kind):
        raise ResourceLoadError(f"{name}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def load_resources(directory: Optional[Union[str, Path]] = None) -> SentimentResources:
    """Load and validate the JSON tables found in ``directory``."""
    root = Path(directory) if directory else DEFAULT_RESOURCES_DIR
    if not root.is_dir():
        raise ResourceLoadError(f"Resource directory not found: {root}")

    connectors = _expect(dict, "connectors.json", _read_json(root / "connectors.json"))
    stems = _expect(dict, "repetition_stems.json", _read_json(root / "repetition_stems.json"))

    resources = SentimentResources.build(
        lexicon=_expect(dict, "lexicon.json", _read_json(root / "lexicon.json")),
        intensity_words=_expect(dict, "intensity_words.json", _read_json(root / "intensity_words.json")),
        connectors=_expect(dict, "connectors.json[connectors]", connectors.get("connectors", {})),
        adversative=_expect(list, "connectors.json[adversative]", connectors.get("adversative", [])),
        emoji_scores=_expect(dict, "emoji_scores.json", _read_json(root / "emoji_scores.json")),
        irony_indicators=_expect(list, "irony_indicators.json", _read_json(root / "irony_indicators.json")),
        negative_stems=_expect(list, "repetition_stems.json[negative]", stems.get("negative", [])),
        positive_stems=_expect(list, "repetition_stems.json[positive]", stems.get("positive", [])),
        name=root.name,
    )
    log.info(
        "Loaded sentiment resources %r: %d lexicon words, %d emoji, %d irony indicators",
        resources.name, len(resources.lexicon), len(resources.emoji_scores),
        len(resources.irony_indicators),
    )
    return resources


@lru_cache(maxsize=1)
def default_resources() -> SentimentResources:
    """The bundled pt-BR tables, loaded once per process."""
    return load_resources(DEFAULT_RESOURCES_DIR)
