"""Independent signal analyzers.

Each analyzer returns an additive contribution to the raw score, except the
irony detector which returns a multiplier. Emoji, punctuation, repetition and
irony read the raw text; the structural analyzer reads tokens.
"""
from __future__ import annotations

import re
from functools import lru_cache
from itertools import groupby
from typing import Iterable, Mapping, Sequence

from .tokenizer import fold_accents

# =============================================================================
# Tunables
# =============================================================================

EXCLAMATION_STEP = 0.12
EXCLAMATION_CAP = 0.5
QUESTION_STEP = 0.026
QUESTION_CAP = 0.15
CAPS_RATIO_THRESHOLD = 0.3
CAPS_BONUS = 0.21

NEGATIVE_REPEAT_STEP = 0.15
NEGATIVE_REPEAT_CAP = 0.4
POSITIVE_REPEAT_STEP = 0.12
POSITIVE_REPEAT_CAP = 0.5

STRUCTURE_FACTOR = 0.1

_RUN_RE = re.compile(r"(.)\1{2,}")


# =============================================================================
# Emoji
# =============================================================================

def emoji_score(text: str, emoji_scores: Mapping[str, float]) -> float:
    """Sum of glyph weights, each scaled by its number of occurrences."""
    score = 0.0
    for glyph, weight in emoji_scores.items():
        hits = text.count(glyph)
        if hits:
            score += weight * hits
    return score


# =============================================================================
# Punctuation and shouting
# =============================================================================

def caps_ratio(text: str) -> float:
    letters = [c for c in text if c.isalpha()]
    if not letters:
        return 0.0
    return sum(1 for c in letters if c.isupper()) / len(letters)


def punctuation_score(text: str) -> float:
    """Unsigned emphasis from '!', '?' and all-caps writing."""
    score = 0.0
    bangs = text.count("!")
    if bangs:
        score += min(bangs * EXCLAMATION_STEP, EXCLAMATION_CAP)
    qmarks = text.count("?")
    if qmarks:
        score += min(qmarks * QUESTION_STEP, QUESTION_CAP)
    if caps_ratio(text) > CAPS_RATIO_THRESHOLD:
        score += CAPS_BONUS
    return score


# =============================================================================
# Character repetition
# =============================================================================

@lru_cache(maxsize=256)
def _stem_pattern(stem: str) -> "re.Pattern[str]":
    # terrivel -> t+e+r{2,}i+v+e+l+ so any letter may be stretched.
    parts = []
    for ch, group in groupby(stem):
        quantifier = "{2,}" if len(list(group)) > 1 else "+"
        parts.append(re.escape(ch) + quantifier)
    return re.compile("".join(parts))


def _squeeze_runs(text: str) -> str:
    """Shorten every run of three or more characters to two."""
    return _RUN_RE.sub(r"\1\1", text)


def _matches_any(text: str, stems: Iterable[str]) -> bool:
    return any(_stem_pattern(stem).search(text) for stem in stems)


def repeated_runs(text: str) -> list:
    """Every run of three or more identical consecutive characters."""
    return [m.group(0) for m in _RUN_RE.finditer(text)]


def repetition_score(
    text: str,
    negative_stems: Sequence[str],
    positive_stems: Sequence[str],
) -> float:
    """Signed bonus for stretched words such as 'bommmm' or 'terrrrivel'.

    The polarity comes from the whole text, not from the run itself; the
    negative family wins when both families match.
    """
    runs = repeated_runs(text)
    if not runs:
        return 0.0

    # Stem patterns run on squeezed text so a long run costs one pass.
    folded = _squeeze_runs(fold_accents(text.lower()))
    negative = _matches_any(folded, negative_stems)
    positive = not negative and _matches_any(folded, positive_stems)

    score = 0.0
    for run in runs:
        extra = len(run) - 2
        if negative:
            score -= min(extra * NEGATIVE_REPEAT_STEP, NEGATIVE_REPEAT_CAP)
        elif positive:
            score += min(extra * POSITIVE_REPEAT_STEP, POSITIVE_REPEAT_CAP)
    return score


# =============================================================================
# Sentence structure
# =============================================================================

def structure_score(tokens: Sequence[str], lexicon: Mapping[str, float]) -> float:
    """Reinforcement for adjacent pairs of sentiment-bearing words."""
    score = 0.0
    for current, following in zip(tokens, tokens[1:]):
        a = lexicon.get(current)
        b = lexicon.get(following)
        if a is not None and b is not None:
            score += abs(a + b) * STRUCTURE_FACTOR
    return score


# =============================================================================
# Irony
# =============================================================================

def has_irony(text: str, indicators: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(indicator.lower() in lowered for indicator in indicators)


def irony_multiplier(text: str, indicators: Iterable[str]) -> float:
    """0.0 vetoes the whole score when any irony marker is present."""
    return 0.0 if has_irony(text, indicators) else 1.0
