"""Output formatting helpers."""
from __future__ import annotations

from typing import Dict, Iterable, List

from .classifier import NEGATIVE, NEUTRAL, POSITIVE
from .engine import SentimentResult

# Suggested emoji keyed by label
EMOJI_SUGGEST = {
    POSITIVE: "🙂",
    NEGATIVE: "🙁",
    NEUTRAL: "😐",
}


def format_sentiment(result: SentimentResult) -> Dict[str, object]:
    """Return a dict in the shape served over HTTP.

    Example shape:
    {
        "intensity": 0.55,
        "sentiment": "positive",
        "magnitude": 0.55,
        "emoji": "🙂",
    }
    """
    out: Dict[str, object] = result.to_dict()
    out["magnitude"] = abs(result.intensity)
    out["emoji"] = EMOJI_SUGGEST.get(result.sentiment, EMOJI_SUGGEST[NEUTRAL])
    return out


def format_many(results: Iterable[SentimentResult]) -> List[Dict[str, object]]:
    return [format_sentiment(r) for r in results]
