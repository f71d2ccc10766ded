"""Normalization and tokenization helpers."""
from __future__ import annotations

import re
from typing import List

# Fixed substitution table, not locale aware.
_ACCENTS = str.maketrans(
    "áàãâäéèêëíìîïóòôõöúùûüçñ",
    "aaaaaeeeeiiiiooooouuuucn",
)

# ASCII-only classes: emoji and any letter the table does not fold become separators.
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)
_SPACE_RE = re.compile(r"\s+", re.ASCII)


def fold_accents(text: str) -> str:
    return text.translate(_ACCENTS)


def tokenize(text: str) -> List[str]:
    """Lowercase, fold accents, strip punctuation and split into words."""
    if not text:
        return []
    # Lowercase first so uppercase accented letters fold too (PÉSSIMO -> pessimo).
    text = fold_accents(text.lower())
    text = _NON_WORD_RE.sub(" ", text)
    return [t for t in _SPACE_RE.split(text) if t]
