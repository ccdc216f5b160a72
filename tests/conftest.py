"""Shared fixtures for the five-words tests."""

import pytest

DISJOINT_WORDS = ["abcde", "fghij", "klmno", "pqrst", "uvwxy"]
"""Five words covering a..y without repeats, leaving 'z' unused."""


@pytest.fixture
def disjoint_words() -> list[str]:
    return list(DISJOINT_WORDS)


@pytest.fixture
def four_disjoint_words() -> list[str]:
    return DISJOINT_WORDS[:4]


@pytest.fixture
def anagram_words() -> list[str]:
    return ["abcde", "aecdb", *DISJOINT_WORDS[1:]]


@pytest.fixture
def shared_letter_words() -> list[str]:
    """Two different pairs of groups that together consume the same ten letters."""
    return ["abcde", "fghij", "abcdf", "eghij", "klmno", "pqrst", "uvwxy"]
