"""Term-frequency cosine similarity engine for resume-JD matching.

Raw term counts are compared directly, without IDF weighting.
"""

import re
from collections import Counter
from collections.abc import Iterable

import numpy as np

from services.stopwords import STOPWORDS


_NON_WORD_RE = re.compile(r"[^\w\s]")
_MIN_TOKEN_LENGTH = 3


def tokenize(text: str) -> list[str]:
    """Normalize raw text into index terms.

    Lowercases, strips punctuation, splits on whitespace and drops short
    tokens and stop words.
    """
    cleaned = _NON_WORD_RE.sub("", text.lower())
    return [
        token
        for token in cleaned.split()
        if len(token) >= _MIN_TOKEN_LENGTH and token not in STOPWORDS
    ]


def term_frequency(tokens: Iterable[str]) -> Counter[str]:
    """Count occurrences of each token."""
    return Counter(tokens)


def _aligned_vectors(
    tf_a: Counter[str], tf_b: Counter[str]
) -> tuple[np.ndarray, np.ndarray]:
    """Project two frequency maps onto their shared (union) vocabulary."""
    vocabulary = sorted(tf_a.keys() | tf_b.keys())
    vec_a = np.array([tf_a[term] for term in vocabulary], dtype=float)
    vec_b = np.array([tf_b[term] for term in vocabulary], dtype=float)
    return vec_a, vec_b


def cosine_similarity(text_a: str, text_b: str) -> float:
    """Compute cosine similarity between two texts, scaled to 0-100.

    Returns 0.0 when either text has no usable tokens or the vectors share
    no terms.
    """
    tokens_a = tokenize(text_a)
    tokens_b = tokenize(text_b)
    if not tokens_a or not tokens_b:
        return 0.0

    vec_a, vec_b = _aligned_vectors(term_frequency(tokens_a), term_frequency(tokens_b))
    norm_a = np.linalg.norm(vec_a)
    norm_b = np.linalg.norm(vec_b)
    if norm_a == 0 or norm_b == 0:
        return 0.0

    score = (vec_a @ vec_b) / (norm_a * norm_b)
    # Float error can push identical documents a hair past 100
    return float(np.clip(score * 100, 0.0, 100.0))
