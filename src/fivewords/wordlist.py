"""Module for reading word lists and encoding words as letter masks."""

from collections.abc import Iterable, Iterator
from typing import TextIO

from fivewords.registry import CandidateRegistry

WORD_LENGTH = 5
"""Number of letters in every candidate word."""


def is_valid_token(token: str) -> bool:
    """Returns whether the token is exactly `WORD_LENGTH` lowercase ASCII letters."""
    return len(token) == WORD_LENGTH and all("a" <= ch <= "z" for ch in token)


def word_mask(token: str) -> int | None:
    """Encode a token as a letter mask.

    Bit `i` of the mask is set if the letter `'a' + i` appears in the token.

    Args:
        token: The token to encode.

    Returns:
        The mask, or None if the token is not exactly five lowercase letters or repeats a letter.
        A returned mask always has exactly five bits set.
    """
    if not is_valid_token(token):
        return None
    mask = 0
    for ch in token:
        bit = 1 << (ord(ch) - ord("a"))
        if mask & bit:
            return None
        mask |= bit
    return mask


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Yield whitespace-separated tokens from a text stream until it is exhausted."""
    for line in stream:
        yield from line.split()


def load_candidates(
    tokens: Iterable[str], registry: CandidateRegistry | None = None
) -> CandidateRegistry:
    """Register every acceptable token in a candidate registry.

    Tokens that are not five distinct lowercase letters are skipped silently.  The registry is
    finalized before it is returned.

    Args:
        tokens: Tokens to consider, in input order.
        registry: Registry to fill.  A new one is created if None.
    """
    if registry is None:
        registry = CandidateRegistry()
    for token in tokens:
        mask = word_mask(token)
        if mask is None:
            continue
        registry.register(token, mask)
    registry.finalize()
    return registry
