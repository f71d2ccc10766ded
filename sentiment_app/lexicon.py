"""Lexicon-weighted base score.

Walks the token stream once, carrying three pieces of running state:

* ``intensity``  product of the intensifiers seen since the last scored word
* ``negations``  count of negation words since the last scored word
* ``context``    connector modifier since the last scored word

Modifiers only reach the *next* word found in the lexicon; the state resets
to neutral right after that word is scored. Unknown tokens leave the state
untouched, so in "nao achei o produto bom" the negation still reaches "bom".
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial, reduce
from typing import Iterable

from .resources import SentimentResources


@dataclass(frozen=True)
class _State:
    total: float = 0.0
    intensity: float = 1.0
    negations: int = 0
    context: float = 1.0


def _step(resources: SentimentResources, use_connectors: bool, state: _State, token: str) -> _State:
    factor = resources.intensity_words.get(token)
    if factor is not None and factor < 0:
        return _State(state.total, state.intensity, state.negations + 1, state.context)
    if factor is not None and factor > 0:
        return _State(state.total, state.intensity * factor, state.negations, state.context)

    if use_connectors:
        multiplier = resources.connectors.get(token)
        if multiplier is not None:
            if token in resources.adversative:
                # Adversatives discard whatever context was accumulated before them.
                context = multiplier
            else:
                context = state.context * multiplier
            return _State(state.total, state.intensity, state.negations, context)

    weight = resources.lexicon.get(token)
    if weight is None:
        return state

    word_score = weight * state.intensity
    if state.negations % 2 == 1:
        word_score = -word_score
    word_score *= state.context
    return _State(total=state.total + word_score)


def score_tokens(
    tokens: Iterable[str],
    resources: SentimentResources,
    use_connectors: bool = True,
) -> float:
    """Return the base sentiment score of ``tokens``, rounded to 3 decimals."""
    final = reduce(partial(_step, resources, use_connectors), tokens, _State())
    return round(final.total, 3)
