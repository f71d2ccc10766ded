"""Map a raw combined score to a discrete label and a bounded intensity.

The label is decided on the raw, unbounded score. The intensity is a separate
saturating transform of the same score, so a neutral text with a raw score of
exactly zero still reports an intensity of 0.4.
"""
from __future__ import annotations

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"

LABEL_THRESHOLD = 0.05
MIN_INTENSITY = 0.1
MAX_INTENSITY = 0.9


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def label_for(score: float) -> str:
    if score > LABEL_THRESHOLD:
        return POSITIVE
    if score < -LABEL_THRESHOLD:
        return NEGATIVE
    return NEUTRAL


def normalize_intensity(score: float) -> float:
    """Squash a raw score into [-0.9, 0.9], never inside (-0.1, 0.1)."""
    if abs(score) <= 1:
        if score >= 0:
            return _clamp(0.4 + score * 0.5, MIN_INTENSITY, MAX_INTENSITY)
        return _clamp(-0.4 + score * 0.5, -MAX_INTENSITY, -MIN_INTENSITY)

    # Past +/-1 the score is compressed hyperbolically.
    if score > 0:
        return _clamp(1 - 1 / (1 + score), MIN_INTENSITY, MAX_INTENSITY)
    return _clamp(-(1 / (1 + abs(score))), -MAX_INTENSITY, -MIN_INTENSITY)


def classify(score: float) -> "tuple[float, str]":
    """Return ``(intensity, label)`` for a raw score."""
    return round(normalize_intensity(score), 3), label_for(score)
