"""
Random word sampling for game rounds and hints.
"""

import random
from typing import Sequence

from .config import WORDS_PER_ROUND


def sample(words: Sequence[str], k: int = WORDS_PER_ROUND) -> list[str]:
    """
    Draw up to ``k`` distinct positions from ``words`` uniformly at random.

    Uses the process-wide random generator. The input is not modified.

    Args:
        words: Word list to draw from
        k: Number of words wanted

    Returns:
        ``min(k, len(words))`` words in random order
    """
    return random.sample(words, min(k, len(words)))


__all__ = ["sample"]
