import io

from fivewords.solver.results import Reporter, ResultCollector, Selection
from fivewords.solver.search import SearchEngine
from fivewords.wordlist import load_candidates


def find(words: list[str]):
    registry = load_candidates(words)
    collector = ResultCollector()
    root = SearchEngine(registry.groups, collector).run()
    return registry, collector.collect(root)


def test_disjoint_groups_give_one_combination(disjoint_words):
    registry, selections = find(disjoint_words)
    assert len(selections) == 1
    selection = selections[0]
    assert selection.group_indices == (0, 1, 2, 3, 4)
    assert selection.unused_letter == "z"
    assert selection.leaf.is_leaf
    assert Reporter(registry.groups).format_selection(selection) == (
        "uvwxy -> pqrst -> klmno -> fghij -> abcde"
    )


def test_four_groups_give_no_combination(four_disjoint_words):
    _, selections = find(four_disjoint_words)
    assert selections == []


def test_anagrams_are_listed_together(anagram_words):
    registry, selections = find(anagram_words)
    assert len(selections) == 1
    line = Reporter(registry.groups).format_selection(selections[0])
    assert line == "uvwxy -> pqrst -> klmno -> fghij -> abcde/aecdb"


def test_repeated_letter_token_never_reported(disjoint_words):
    registry, selections = find(["aabcd", *disjoint_words])
    out = io.StringIO()
    Reporter(registry.groups).write(selections, out)
    assert "aabcd" not in out.getvalue()


def test_combinations_sharing_letters_are_all_found(shared_letter_words):
    registry, selections = find(shared_letter_words)
    assert sorted(s.group_indices for s in selections) == [(0, 1, 4, 5, 6), (2, 3, 4, 5, 6)]
    # Both combinations end at the same leaf
    assert selections[0].leaf is selections[1].leaf
    lines = list(Reporter(registry.groups).lines(selections))
    assert "uvwxy -> pqrst -> klmno -> fghij -> abcde" in lines
    assert "uvwxy -> pqrst -> klmno -> eghij -> abcdf" in lines


def test_each_unordered_combination_once():
    words = ["abcde", "fghij", "klmno", "pqrst", "uvwxy", "vwxyz", "bcdeu"]
    _, selections = find(words)
    keys = [frozenset(s.group_indices) for s in selections]
    assert len(keys) == len(set(keys))
    # abcde+vwxyz, and bcdeu+vwxyz (leaving 'a'), alongside the plain a..y set
    assert sorted(s.unused_letter for s in selections) == ["a", "u", "z"]


def test_selection_steps_follow_edges(shared_letter_words):
    registry, selections = find(shared_letter_words)
    for selection in selections:
        assert len(selection.steps) == 5
        indices = selection.group_indices
        assert list(indices) == sorted(indices)
        mask = 0
        for edge in selection.steps:
            group_mask = registry[edge.group_index].mask
            assert mask & group_mask == 0
            mask |= group_mask


def test_collect_is_deterministic(shared_letter_words):
    _, first = find(shared_letter_words)
    _, second = find(shared_letter_words)
    assert [s.group_indices for s in first] == [s.group_indices for s in second]


def test_collect_resets_selections(disjoint_words):
    registry = load_candidates(disjoint_words)
    collector = ResultCollector()
    root = SearchEngine(registry.groups, collector).run()
    collector.collect(root)
    collector.collect(root)
    assert len(collector) == 1


def test_expand_anagrams(anagram_words):
    registry, selections = find(anagram_words)
    reporter = Reporter(registry.groups, expand_anagrams=True)
    out = io.StringIO()
    assert reporter.write(selections, out) == 2
    assert out.getvalue().splitlines() == [
        "uvwxy -> pqrst -> klmno -> fghij -> abcde",
        "uvwxy -> pqrst -> klmno -> fghij -> aecdb",
    ]


def test_write_counts_lines(disjoint_words):
    registry, selections = find(disjoint_words)
    out = io.StringIO()
    assert Reporter(registry.groups).write(selections, out) == 1
    assert out.getvalue() == "uvwxy -> pqrst -> klmno -> fghij -> abcde\n"


def test_public_members_are_documented():
    members = [
        Selection.leaf,
        Selection.group_indices,
        Selection.unused_letter,
        ResultCollector.add_leaf,
        ResultCollector.collect,
        Reporter.format_selection,
        Reporter.lines,
        Reporter.write,
        Reporter.write_lines,
    ]
    for member in members:
        assert member.__doc__
