"""Memoized depth-first search for five pairwise-disjoint anagram groups.

The search starts from the full alphabet and, at each level, consumes the letters of every group
that still fits in the remaining letters.  Nodes are keyed by their remaining-letter mask: two paths
that consume the same letters (in any order, or with different groups that happen to cover the same
letters) end up at the same node, so each subtree is built only once.  The result is a DAG rather
than a tree.
"""

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, NamedTuple, TextIO

from sortedcontainers import SortedDict

from fivewords.registry import AnagramGroup
from fivewords.util import ALPHABET_MASK, int_comma, mask_to_letters

if TYPE_CHECKING:
    from fivewords.solver.results import ResultCollector

N_WORDS = 5
"""Number of groups in a complete selection (the depth of a leaf)."""


class SearchEdge(NamedTuple):
    """An edge of the search DAG: choosing a group leads to a child node."""

    group_index: int
    """Index of the chosen AnagramGroup."""

    node: "SearchNode"
    """The node reached by choosing the group."""


class SearchNode:
    """A partial or complete selection of disjoint groups.

    Nodes are shared between every path that leaves the same letters remaining.  `group_index` and
    `parent` only record the path that first created the node; use the edges for anything that
    depends on how the node was reached.
    """

    __slots__ = ("remaining", "depth", "group_index", "parent", "children", "reaches_leaf")

    def __init__(
        self,
        remaining: int,
        depth: int,
        group_index: int | None = None,
        parent: "SearchNode | None" = None,
    ) -> None:
        self.remaining = remaining
        """Mask of the letters not consumed on the way to this node."""

        self.depth = depth
        """Number of groups chosen to reach this node (0 at the root)."""

        self.group_index = group_index
        """Group chosen on the edge that first created this node; None for the root."""

        self.parent = parent
        """Node that first created this node; None for the root."""

        self.children: list[SearchEdge] = []
        """Edges to child nodes, in group index order."""

        self.reaches_leaf = False
        """Whether a complete selection can be reached from this node."""

    def __repr__(self) -> str:
        return (
            f"SearchNode(remaining={mask_to_letters(self.remaining)!r}, depth={self.depth}, "
            f"children={len(self.children)})"
        )

    @property
    def is_leaf(self) -> bool:
        """Whether this node is a complete selection."""
        return self.depth == N_WORDS

    def ancestry(self) -> list[int]:
        """Return the group indices along the first-creation path, from this node up to the root.

        The root itself records no group, so a leaf yields `N_WORDS` indices.
        """
        indices: list[int] = []
        node = self
        while node.parent is not None:
            indices.append(node.group_index)
            node = node.parent
        return indices


class SearchEngine:
    """Builds the memoized search DAG over a frozen group table.

    The engine owns the node cache for the duration of the run.  Every node is inserted into the
    cache as soon as it is created, so the cache never holds more than one node per remaining mask.
    """

    def __init__(
        self,
        groups: Sequence[AnagramGroup],
        collector: "ResultCollector",
        *,
        report_interval: int = 0,
        logf: TextIO | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            groups (Sequence[AnagramGroup]): The group table, in group index order.
            collector (ResultCollector): Receives each leaf node as it is created.
            report_interval (int): Print a progress line every time this many nodes have been
                cached.  0 disables progress lines.
            logf: File object for progress lines.  If None, nothing is printed.
        """
        self.groups = groups
        self.masks = [group.mask for group in groups]
        self.collector = collector
        self.report_interval = report_interval
        self.logf = logf

        self.cache: SortedDict = SortedDict()
        """Maps remaining masks to nodes."""

        self.root: SearchNode | None = None

    @property
    def n_nodes(self) -> int:
        """Number of distinct nodes created so far."""
        return len(self.cache)

    def run(self) -> SearchNode:
        """Build the search DAG and return its root.  Calling this again returns the same root."""
        if self.root is None:
            self.root = self._new_node(ALPHABET_MASK, 0)
            self._expand(self.root)
        return self.root

    def lookup(self, remaining: int) -> SearchNode | None:
        """Return the node for a remaining mask, or None if no path has reached it."""
        return self.cache.get(remaining)

    def edges(self) -> Iterator[tuple[SearchNode, SearchEdge]]:
        """Yield every (parent, edge) pair of the DAG, in remaining mask order of the parents."""
        for node in self.cache.values():
            for edge in node.children:
                yield node, edge

    def _new_node(
        self,
        remaining: int,
        depth: int,
        group_index: int | None = None,
        parent: SearchNode | None = None,
    ) -> SearchNode:
        node = SearchNode(remaining, depth, group_index, parent)
        self.cache[remaining] = node

        n_nodes = len(self.cache)
        if self.logf is not None and self.report_interval and n_nodes % self.report_interval == 0:
            print(
                f"Cached {int_comma(n_nodes)} search nodes "
                f"({int_comma(len(self.collector.leaves))} leaves so far).",
                file=self.logf,
                flush=True,
            )
        return node

    def _resolve(self, parent: SearchNode, group_index: int) -> SearchNode:
        """Return the child of `parent` reached by choosing a group, building it if it is new."""
        remaining = parent.remaining ^ self.masks[group_index]
        child = self.cache.get(remaining)
        if child is None:
            child = self._new_node(remaining, parent.depth + 1, group_index, parent)
            self._expand(child)
        return child

    def _expand(self, node: SearchNode) -> None:
        """Populate the children of a newly created node."""
        if node.is_leaf:
            node.reaches_leaf = True
            self.collector.add_leaf(node)
            return

        remaining = node.remaining
        fits = [i for i, mask in enumerate(self.masks) if remaining & mask == mask]
        node.children = [SearchEdge(i, self._resolve(node, i)) for i in fits]
        node.reaches_leaf = any(edge.node.reaches_leaf for edge in node.children)
