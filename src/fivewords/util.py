"""Utility functions for the five-words search."""

ALPHABET_SIZE = 26
ALPHABET_MASK = (1 << ALPHABET_SIZE) - 1
"""Letter mask with all 26 letters available."""


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def popcount(mask: int) -> int:
    """Return the number of set bits in a letter mask."""
    return bin(mask).count("1")


def mask_to_letters(mask: int) -> str:
    """Render a letter mask as its letters, in alphabetical order.

    Bits above the 26th are ignored.
    """
    return "".join(chr(ord("a") + i) for i in range(ALPHABET_SIZE) if mask >> i & 1)
