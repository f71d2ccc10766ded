# engine.py
# Multi-signal lexicon sentiment engine for short informal text.
# Public API:
#   SentimentEngine(config=None, resources=None)
#   SentimentEngine.analyze(text) -> SentimentResult
#   SentimentEngine.analyze_many(texts) -> list[SentimentResult]
#   SentimentEngine.explain(text) -> Dict[str, Any]   # debug-friendly trace
#   SentimentEngine.clear_cache()
#
# Pipeline
# 1) Tokenize and score the lexicon with negation, intensifier and connector state.
# 2) Add the enabled signals: emoji, punctuation, repetition, sentence structure.
# 3) Multiply by the irony veto.
# 4) Memoize the raw score per literal text, then classify.
# Pure standard library heuristics. Deterministic and side effect free apart
# from the per-instance cache.

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from . import signals
from .cache import ScoreCache
from .classifier import NEUTRAL, classify
from .config import SentimentConfig
from .lexicon import score_tokens
from .resources import SentimentResources, default_resources
from .tokenizer import tokenize

log = logging.getLogger(__name__)


# =============================================================================
# Data model
# =============================================================================

@dataclass(frozen=True)
class SentimentResult:
    intensity: float
    sentiment: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


EMPTY_RESULT = SentimentResult(intensity=0.0, sentiment=NEUTRAL)

ConfigLike = Union[SentimentConfig, Mapping[str, Any], None]


def _coerce_config(config: ConfigLike) -> SentimentConfig:
    if isinstance(config, SentimentConfig):
        return config
    return SentimentConfig.from_mapping(config)


# =============================================================================
# Engine
# =============================================================================

class SentimentEngine:
    """Scores text against one immutable resource bundle and flag set.

    Instances share nothing but the read-only resources, so engines with
    different configs can live side by side. A single instance is not safe for
    concurrent ``analyze`` calls; guard it with a lock when sharing.
    """

    def __init__(
        self,
        config: ConfigLike = None,
        resources: Optional[SentimentResources] = None,
    ):
        self.config = _coerce_config(config)
        self.resources = resources if resources is not None else default_resources()
        self._cache = ScoreCache(self.config.cache_size)
        log.debug(
            "SentimentEngine created with resources=%r config=%s",
            self.resources.name, self.config,
        )

    # ---- Public API ----

    def analyze(self, text: Any) -> SentimentResult:
        """Classify ``text``. Never raises; empty or non-string input is neutral."""
        if not text or not isinstance(text, str):
            return EMPTY_RESULT

        if self.config.enable_cache:
            cached = self._cache.get(text)
            if cached is not None:
                return self._result(cached)

        score = self.raw_score(text)
        if self.config.enable_cache:
            self._cache.put(text, score)
        return self._result(score)

    def analyze_many(self, texts: Iterable[Any]) -> List[SentimentResult]:
        return [self.analyze(t) for t in (texts or [])]

    def raw_score(self, text: str) -> float:
        """Uncached raw combined score: sum of enabled signals times the irony factor."""
        return self._breakdown(text, tokenize(text))["raw_score"]

    def explain(self, text: Any) -> Dict[str, Any]:
        """Return a debug dictionary with every intermediate contribution.

        Does not read or populate the cache.
        """
        if not text or not isinstance(text, str):
            return {
                "text": text,
                "tokens": [],
                "contributions": {},
                "irony_multiplier": 1.0,
                "raw_score": 0.0,
                "result": EMPTY_RESULT.to_dict(),
            }
        tokens = tokenize(text)
        trace = self._breakdown(text, tokens)
        return {
            "text": text,
            "tokens": tokens,
            "contributions": trace["contributions"],
            "irony_multiplier": trace["irony_multiplier"],
            "raw_score": trace["raw_score"],
            "result": self._result(trace["raw_score"]).to_dict(),
        }

    def clear_cache(self) -> None:
        size = len(self._cache)
        self._cache.clear()
        log.debug("SentimentEngine cache cleared (%d entries dropped)", size)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    # ---- Internals ----

    def _breakdown(self, text: str, tokens: List[str]) -> Dict[str, Any]:
        cfg = self.config
        res = self.resources

        contributions: Dict[str, float] = {
            "lexicon": score_tokens(tokens, res, use_connectors=cfg.enable_connectors_analysis),
        }
        if cfg.enable_emoji_analysis:
            contributions["emoji"] = signals.emoji_score(text, res.emoji_scores)
        if cfg.enable_punctuation_analysis:
            contributions["punctuation"] = signals.punctuation_score(text)
        if cfg.enable_repetition_analysis:
            contributions["repetition"] = signals.repetition_score(
                text, res.negative_stems, res.positive_stems
            )
        if cfg.enable_context_analysis:
            contributions["structure"] = signals.structure_score(tokens, res.lexicon)

        irony = signals.irony_multiplier(text, res.irony_indicators) if cfg.enable_irony_detection else 1.0

        score = 0.0
        for value in contributions.values():
            score += value
        score *= irony

        return {
            "contributions": contributions,
            "irony_multiplier": irony,
            "raw_score": score,
        }

    @staticmethod
    def _result(score: float) -> SentimentResult:
        intensity, label = classify(score)
        return SentimentResult(intensity=intensity, sentiment=label)
