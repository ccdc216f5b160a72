"""Collection and reporting of complete selections."""

from collections.abc import Iterable, Iterator, Sequence
from itertools import product
from typing import NamedTuple, TextIO

from fivewords.registry import AnagramGroup
from fivewords.solver.search import SearchEdge, SearchNode
from fivewords.util import mask_to_letters


class Selection(NamedTuple):
    """One combination of disjoint groups, as the path that reaches its leaf."""

    steps: tuple[SearchEdge, ...]
    """Edges from the root to the leaf, in the order the groups were chosen."""

    @property
    def leaf(self) -> SearchNode:
        """The node reached by the last chosen group."""
        return self.steps[-1].node

    @property
    def group_indices(self) -> tuple[int, ...]:
        """Indices of the chosen groups, in increasing order."""
        return tuple(edge.group_index for edge in self.steps)

    @property
    def unused_letter(self) -> str:
        """The letter of the alphabet that the combination does not use."""
        return mask_to_letters(self.leaf.remaining)


class ResultCollector:
    """Accumulates leaf nodes during the search and turns them into selections afterwards.

    Leaf nodes are shared between every combination that covers the same letters, so a leaf does not
    identify a combination on its own.  `collect` walks the DAG with the active path as an explicit
    parameter, taking groups in increasing index order, so every unordered combination is found
    exactly once.
    """

    def __init__(self) -> None:
        self.leaves: list[SearchNode] = []
        """Distinct leaf nodes, in discovery order."""

        self.selections: list[Selection] = []
        """Complete combinations, in increasing group index order."""

    def __len__(self) -> int:
        return len(self.selections)

    def add_leaf(self, node: SearchNode) -> None:
        """Record a leaf node created by the search."""
        self.leaves.append(node)

    def collect(self, root: SearchNode) -> list[Selection]:
        """Enumerate every combination reachable from the root.

        Args:
            root (SearchNode): Root of a fully built search DAG.

        Returns:
            The list of selections, also kept in `self.selections`.
        """
        self.selections = []
        if root.reaches_leaf:
            self._walk(root, [], -1)
        return self.selections

    def _walk(self, node: SearchNode, steps: list[SearchEdge], last_index: int) -> None:
        if node.is_leaf:
            self.selections.append(Selection(tuple(steps)))
            return
        for edge in node.children:
            if edge.group_index <= last_index or not edge.node.reaches_leaf:
                continue
            steps.append(edge)
            self._walk(edge.node, steps, edge.group_index)
            steps.pop()


class Reporter:
    """Formats selections as lines of words.

    Each line lists the chosen groups from the last chosen to the first, separated by " -> ".
    A group is shown as its words joined by "/".
    """

    def __init__(self, groups: Sequence[AnagramGroup], *, expand_anagrams: bool = False) -> None:
        """Initialize the reporter.

        Args:
            groups (Sequence[AnagramGroup]): The group table the selections refer to.
            expand_anagrams (bool): Print one line for each choice of word within the groups,
                instead of one line per selection.
        """
        self.groups = groups
        self.expand_anagrams = expand_anagrams

    def levels(self, selection: Selection) -> list[AnagramGroup]:
        """Return the groups of a selection, from the leaf back towards the root."""
        return [self.groups[edge.group_index] for edge in reversed(selection.steps)]

    def format_selection(self, selection: Selection) -> str:
        """Return the line for a selection, with each group as a slash-separated word list."""
        return " -> ".join(str(group) for group in self.levels(selection))

    def expand_selection(self, selection: Selection) -> Iterator[str]:
        """Yield one line for every way of picking a single word from each group."""
        for words in product(*(group.words for group in self.levels(selection))):
            yield " -> ".join(words)

    def lines(self, selections: Sequence[Selection]) -> Iterator[str]:
        """Yield the output lines for the selections, in order."""
        for selection in selections:
            if self.expand_anagrams:
                yield from self.expand_selection(selection)
            else:
                yield self.format_selection(selection)

    def write(self, selections: Sequence[Selection], out: TextIO) -> int:
        """Write one line per selection (or per word choice) to `out`.

        Returns:
            The number of lines written.
        """
        return self.write_lines(self.lines(selections), out)

    def write_lines(self, lines: Iterable[str], out: TextIO) -> int:
        """Write already formatted lines to `out` and return how many were written."""
        n_lines = 0
        for line in lines:
            print(line, file=out)
            n_lines += 1
        out.flush()
        return n_lines
