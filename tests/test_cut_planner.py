import pytest

from CutPlanner import dedent_edits, extract_text, find_dependent_block, is_block_header_cut, plan_cut
from EditModel import Position, Range, Selection, TextEdit
from MemoryDocument import MemoryDocument

UNIT = "    "
SCENARIO = ["if cond:", "    do_a()", "    do_b()", "next()"]


def _selection(start_line: int, start_char: int, end_line: int, end_char: int) -> Selection:
    return Selection(Position(start_line, start_char), Position(end_line, end_char))


def test_extract_text_single_and_multi_line():
    lines = ["alpha", "beta", "gamma"]
    assert extract_text(lines.__getitem__, _selection(0, 1, 0, 3)) == "lp"
    assert extract_text(lines.__getitem__, _selection(0, 3, 2, 2)) == "ha\nbeta\nga"


@pytest.mark.parametrize(
    "selection, text, expected",
    [
        (_selection(0, 0, 0, 8), "if cond:", True),
        (_selection(0, 0, 1, 0), "if cond:\n", True),
        (_selection(0, 4, 0, 14), "if a:  # c", True),
        (_selection(0, 0, 0, 5), "x = 1", False),
        (_selection(0, 0, 1, 5), "if a:\n    b", False),
        (_selection(0, 0, 0, 7), "# if x:", False),
        (Selection.caret(0, 0), "", False),
    ],
)
def test_is_block_header_cut(selection: Selection, text: str, expected: bool) -> None:
    assert is_block_header_cut(selection, text) is expected


def test_find_dependent_block_stops_at_sibling():
    assert find_dependent_block(len(SCENARIO), SCENARIO.__getitem__, 0, UNIT) == [1, 2]


def test_find_dependent_block_skips_blank_lines():
    lines = ["if a:", "    b", "", "    c", "d"]
    assert find_dependent_block(len(lines), lines.__getitem__, 0, UNIT) == [1, 3]


def test_find_dependent_block_nested_header():
    lines = ["def f():", "    if a:", "        b()", "    c()"]
    assert find_dependent_block(len(lines), lines.__getitem__, 1, UNIT) == [2]


def test_dedent_edits_skip_lines_shorter_than_unit():
    lines = ["  x", "    y", "\t\tz"]
    edits = dedent_edits(lines.__getitem__, [0, 1], UNIT)
    assert edits == [TextEdit(Range(Position(1, 0), Position(1, 4)))]


def test_plan_cut_block_header():
    doc = MemoryDocument("\n".join(SCENARIO), selection=_selection(0, 0, 0, 8))
    plan = plan_cut(doc)
    assert plan is not None
    assert plan.cut_text == "if cond:"
    assert [edit.range.start.line for edit in plan.dedent_edits] == [1, 2]
    assert all(edit.range.end.char == len(UNIT) for edit in plan.dedent_edits)
    assert plan.result_cursor == Position(0, 0)


def test_plan_cut_plain_text_has_no_dedent():
    doc = MemoryDocument("x = 1\n    y = 2", selection=_selection(0, 0, 0, 5))
    plan = plan_cut(doc)
    assert plan is not None
    assert plan.cut_text == "x = 1"
    assert plan.dedent_edits == []


def test_plan_cut_empty_selection_returns_none():
    doc = MemoryDocument("if a:\n    b")
    assert plan_cut(doc) is None
