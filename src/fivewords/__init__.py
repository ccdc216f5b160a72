"""Five-words solver.

Finds every set of five words, each made of five distinct letters, that together use 25 different
letters of the alphabet.  Words with the same letters are grouped as anagrams, and the search is a
memoized depth-first search over the letters still available.
"""

import sys

from .solver import solver


def main() -> None:
    """Main entry point for the five-words solver."""
    # Expect at most one argument: path to the word list
    if len(sys.argv) > 2:
        print("Usage: python -m fivewords [path_to_word_list]")
        sys.exit(1)
    word_list_path = sys.argv[1] if len(sys.argv) == 2 else None

    try:
        solver.run(word_list_path)
    except FileNotFoundError as e:
        print(e, file=sys.stderr)
        sys.exit(1)
