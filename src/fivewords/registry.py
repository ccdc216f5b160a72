"""Deduplication of candidate words into anagram groups."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from fivewords.util import mask_to_letters, popcount

LETTERS_PER_WORD = 5


@dataclass
class AnagramGroup:
    """The words of the input that share one letter mask."""

    index: int
    """Stable index of the group, assigned in order of first appearance."""

    mask: int
    """Letter mask shared by every word in the group."""

    words: list[str] = field(default_factory=list)
    """Words with this mask, in input order."""

    def __str__(self) -> str:
        """Return the words of the group joined by '/'."""
        return "/".join(self.words)

    @property
    def letters(self) -> str:
        """The letters of the group, in alphabetical order."""
        return mask_to_letters(self.mask)


class CandidateRegistry:
    """Collects candidate words into anagram groups keyed by letter mask.

    Groups are kept in first-seen order.  Once `finalize` has been called the registry is frozen.
    """

    def __init__(self) -> None:
        self.groups: list[AnagramGroup] = []
        """Group table, indexed by `AnagramGroup.index`."""

        self.n_words = 0
        """Number of words registered."""

        self._by_mask: dict[int, AnagramGroup] = {}
        self._finalized = False

    def __len__(self) -> int:
        return len(self.groups)

    def __iter__(self) -> Iterator[AnagramGroup]:
        return iter(self.groups)

    def __getitem__(self, index: int) -> AnagramGroup:
        return self.groups[index]

    @property
    def finalized(self) -> bool:
        """Whether registration has been closed."""
        return self._finalized

    @property
    def masks(self) -> list[int]:
        """Group masks, in group index order."""
        return [group.mask for group in self.groups]

    def register(self, word: str, mask: int) -> AnagramGroup:
        """Add a word to the group for its mask, creating the group if the mask is new.

        Args:
            word: The word to add.
            mask: The word's letter mask, as computed by `fivewords.wordlist.word_mask`.

        Returns:
            The group the word was added to.

        Raises:
            RuntimeError: If the registry has been finalized.
            ValueError: If the mask does not have exactly five bits set.
        """
        if self._finalized:
            raise RuntimeError("Cannot register words after the registry has been finalized.")
        if popcount(mask) != LETTERS_PER_WORD:
            raise ValueError(
                f"Mask for '{word}' must have {LETTERS_PER_WORD} letters, got {mask:#x}."
            )

        group = self._by_mask.get(mask)
        if group is None:
            group = AnagramGroup(index=len(self.groups), mask=mask)
            self.groups.append(group)
            self._by_mask[mask] = group
        group.words.append(word)
        self.n_words += 1
        return group

    def finalize(self) -> list[AnagramGroup]:
        """Close registration and return the group table."""
        self._finalized = True
        return self.groups

    def group_for_mask(self, mask: int) -> AnagramGroup | None:
        """Return the group with the given mask, or None if there is none."""
        return self._by_mask.get(mask)
