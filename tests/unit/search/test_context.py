import pytest

from grab.options.search import ContextConfig, ContextKind
from grab.search.context import assemble_groups, compute_window, find_anchors
from grab.search.highlight import HighlightCategory, highlight
from grab.search.matcher import PatternMatcher

TEN_LINES = [f"line {i}" for i in range(10)]


def _indices(groups) -> list[list[int]]:
    return [group.indices for group in groups]


@pytest.mark.unit
@pytest.mark.parametrize(
    ("anchor", "kind", "length", "expected"),
    [
        (5, ContextKind.AFTER, 2, (5, 7)),
        (5, ContextKind.BEFORE, 2, (3, 5)),
        (5, ContextKind.BOTH, 2, (3, 7)),
        (1, ContextKind.BEFORE, 3, (0, 1)),
        (1, ContextKind.BOTH, 3, (0, 4)),
        (4, ContextKind.BOTH, 0, (4, 4)),
    ],
)
def test_compute_window(anchor: int, kind: ContextKind, length: int, expected: tuple[int, int]) -> None:
    assert compute_window(anchor, kind, length) == expected


@pytest.mark.unit
def test_find_anchors_in_ascending_order(sample_lines: list[str]) -> None:
    anchors = find_anchors(sample_lines, PatternMatcher("b"))

    assert [anchor.index for anchor in anchors] == [1, 2]
    assert anchors[1].spans[0].start == 2


@pytest.mark.unit
def test_after_context_overlapping_windows_repeat_lines(sample_lines: list[str]) -> None:
    config = ContextConfig(kind=ContextKind.AFTER, length=1)
    groups = assemble_groups(sample_lines, PatternMatcher("b"), config)

    assert _indices(groups) == [[1, 2], [2, 3]]
    assert [list(group) for group in groups] == [[(1, "b"), (2, "c b")], [(2, "c b"), (3, "d")]]
    assert [group.anchor for group in groups] == [1, 2]


@pytest.mark.unit
def test_after_context_is_clipped_at_end_of_input() -> None:
    config = ContextConfig(kind=ContextKind.AFTER, length=5)
    groups = assemble_groups(TEN_LINES, PatternMatcher("line 8"), config)

    assert _indices(groups) == [[8, 9]]


@pytest.mark.unit
def test_before_context_saturates_at_first_line() -> None:
    config = ContextConfig(kind=ContextKind.BEFORE, length=3)
    groups = assemble_groups(TEN_LINES, PatternMatcher("line 1$"), config)

    assert _indices(groups) == [[0, 1]]


@pytest.mark.unit
def test_both_context_window() -> None:
    config = ContextConfig(kind=ContextKind.BOTH, length=2)
    groups = assemble_groups(TEN_LINES, PatternMatcher("line [05]"), config)

    assert _indices(groups) == [[0, 1, 2], [3, 4, 5, 6, 7]]


@pytest.mark.unit
def test_zero_length_window_contains_only_anchor(sample_lines: list[str]) -> None:
    config = ContextConfig(kind=ContextKind.BOTH, length=0)
    groups = assemble_groups(sample_lines, PatternMatcher("b"), config)

    assert _indices(groups) == [[1], [2]]


@pytest.mark.unit
def test_no_matches_yields_no_groups(sample_lines: list[str]) -> None:
    config = ContextConfig(kind=ContextKind.AFTER, length=2)

    assert assemble_groups(sample_lines, PatternMatcher("zzz"), config) == []


@pytest.mark.unit
def test_empty_input_yields_no_groups() -> None:
    config = ContextConfig(kind=ContextKind.BOTH, length=2)

    assert assemble_groups([], PatternMatcher(""), config) == []


@pytest.mark.unit
def test_colorize_highlights_only_the_anchor_line() -> None:
    lines = ["b first", "b second"]
    config = ContextConfig(kind=ContextKind.AFTER, length=1)
    groups = assemble_groups(lines, PatternMatcher("b"), config, colorize=True)

    marked = highlight(HighlightCategory.MATCH, "b")
    first, second = groups
    # Line 1 is an anchor in its own group but plain context in the first group
    assert list(first) == [(0, f"{marked} first"), (1, "b second")]
    assert list(second) == [(1, f"{marked} second")]


@pytest.mark.unit
def test_merge_coalesces_overlapping_windows(sample_lines: list[str]) -> None:
    config = ContextConfig(kind=ContextKind.AFTER, length=1, merge=True)
    groups = assemble_groups(sample_lines, PatternMatcher("b"), config)

    assert len(groups) == 1
    assert groups[0].anchors == (1, 2)
    assert groups[0].indices == [1, 2, 3]


@pytest.mark.unit
def test_merge_coalesces_adjacent_windows_only() -> None:
    config = ContextConfig(kind=ContextKind.BOTH, length=1, merge=True)
    groups = assemble_groups(TEN_LINES, PatternMatcher("line [036]|line 9"), config)

    # Windows 0-1, 2-4, 5-7 and 8-9 are each adjacent to the next
    assert _indices(groups) == [list(range(10))]

    spaced = assemble_groups(TEN_LINES, PatternMatcher("line [07]"), config)
    assert _indices(spaced) == [[0, 1], [6, 7, 8]]
