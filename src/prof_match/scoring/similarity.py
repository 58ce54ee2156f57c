"""Token-overlap similarity between two short phrases.

A Dice-like coefficient where two tokens match when either contains the
other, and an exact match earns an extra half point. It is cheap and
order-independent but not clamped: phrases with many mutually-containing
tokens can score above 1. With ``n`` and ``m`` tokens the upper bound is
``3 * n * m / (n + m)``, reached when every token is identical.
"""

import re

_NON_WORD = re.compile(r"[^\w\s]")

EXACT_MATCH_BONUS = 0.5


def tokenize(text: str) -> list[str]:
    """Lower-case, replace punctuation with spaces and split on whitespace."""
    return _NON_WORD.sub(" ", text.lower()).split()


def similarity(a: str, b: str) -> float:
    """Score how much two phrases overlap.

    Args:
        a: First phrase.
        b: Second phrase.

    Returns:
        0 when either phrase has no tokens, otherwise
        ``2 * matches / (len(tokens_a) + len(tokens_b))``.
    """
    if not a or not b:
        return 0.0

    tokens_a = tokenize(a)
    tokens_b = tokenize(b)
    if not tokens_a or not tokens_b:
        return 0.0

    matches = 0.0
    for token_a in tokens_a:
        for token_b in tokens_b:
            if token_a in token_b or token_b in token_a:
                matches += 1
                if token_a == token_b:
                    matches += EXACT_MATCH_BONUS

    return (2.0 * matches) / (len(tokens_a) + len(tokens_b))


def best_similarity(left: list[str], right: list[str]) -> float:
    """Highest pairwise similarity between two phrase lists, 0 if either is empty."""
    return max((similarity(a, b) for a in left for b in right), default=0.0)
