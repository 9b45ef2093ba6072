from __future__ import annotations

import pytest

from editor_engine.buffer import Position, Selection, TrueSelection


def cursor_at(line: int, column: int) -> Selection:
    position = Position(line, column)
    return Selection(anchor=position, active=position)


def range_of(anchor: tuple[int, int], active: tuple[int, int]) -> Selection:
    return Selection(anchor=Position(*anchor), active=Position(*active))


def test_min_max_order_independent_of_direction() -> None:
    lines = ["abcd", "ef", "ghi"]
    forward = range_of((0, 3), (2, 1))
    backward = range_of((2, 1), (0, 3))

    for selection in (forward, backward):
        assert selection.min(lines) == Position(0, 3)
        assert selection.max(lines) == Position(2, 1)
        assert selection.min(lines) <= selection.max(lines)


def test_true_endpoints_follow_anchor_and_active() -> None:
    lines = ["abc"]
    selection = range_of((0, 9), (4, 0))

    assert selection.true_start(lines) == Position(0, 3)
    assert selection.true_end(lines) == Position(1, 0)


def test_reads_never_rewrite_raw_endpoints() -> None:
    selection = range_of((3, 40), (0, 1))

    selection.resolve(["ab"])
    selection.min(["ab"])
    selection.length(["ab"])

    assert selection.anchor == Position(3, 40)
    assert selection.active == Position(0, 1)


def test_resolve_returns_frozen_snapshot() -> None:
    snapshot = cursor_at(0, 1).resolve(["abc"])

    assert snapshot == TrueSelection(start=Position(0, 1), end=Position(0, 1))
    assert snapshot.is_empty
    with pytest.raises(AttributeError):
        snapshot.start = Position(0, 0)  # type: ignore[misc]


def test_move_left_within_line() -> None:
    selection = cursor_at(0, 3)

    selection.move_left(["hello"])

    assert selection.anchor == selection.active == Position(0, 2)


def test_move_left_at_buffer_start_is_noop() -> None:
    selection = cursor_at(0, 0)

    selection.move_left(["hello"])

    assert selection.resolve(["hello"]).start == Position(0, 0)


def test_move_left_and_right_wrap_symmetrically_across_lines() -> None:
    lines = ["ab", "cd"]
    selection = cursor_at(1, 0)

    selection.move_left(lines)
    assert selection.true_end(lines) == Position(0, 2)

    selection.move_right(lines)
    assert selection.true_end(lines) == Position(1, 0)


def test_move_left_then_right_is_identity_mid_line() -> None:
    lines = ["hello", "world"]
    selection = cursor_at(1, 2)

    selection.move_left(lines)
    selection.move_right(lines)

    assert selection.resolve(lines).start == Position(1, 2)
    assert selection.resolve(lines).is_empty


def test_move_right_saturates_at_virtual_line() -> None:
    lines = ["ab"]
    selection = cursor_at(0, 2)

    selection.move_right(lines)
    assert selection.true_end(lines) == Position(1, 0)

    selection.move_right(lines)
    assert selection.true_end(lines) == Position(1, 0)


def test_horizontal_moves_start_from_clamped_column() -> None:
    lines = ["abc"]
    selection = cursor_at(0, 50)

    selection.move_left(lines)

    assert selection.active == Position(0, 2)


def test_vertical_moves_keep_sticky_column() -> None:
    lines = ["a long line", "ab", "another line"]
    selection = cursor_at(0, 8)

    selection.move_down(lines)
    assert selection.true_end(lines) == Position(1, 2)
    assert selection.active.column == 8

    selection.move_down(lines)
    assert selection.true_end(lines) == Position(2, 8)

    selection.move_up(lines)
    selection.move_up(lines)
    assert selection.true_end(lines) == Position(0, 8)


def test_vertical_moves_saturate_at_buffer_edges() -> None:
    lines = ["a", "b"]
    selection = cursor_at(0, 0)

    selection.move_up(lines)
    assert selection.true_end(lines) == Position(0, 0)

    for _ in range(4):
        selection.move_down(lines)
    assert selection.true_end(lines) == Position(2, 0)


def test_extend_end_moves_only_active() -> None:
    lines = ["hello"]
    selection = cursor_at(0, 1)

    selection.extend_end_right(lines)
    selection.extend_end_right(lines)

    assert selection.anchor == Position(0, 1)
    assert selection.active == Position(0, 3)
    assert selection.length(lines) == 2

    selection.extend_end_left(lines)
    assert selection.active == Position(0, 2)


def test_extend_end_vertically() -> None:
    lines = ["abc", "def", "ghi"]
    selection = cursor_at(1, 2)

    selection.extend_end_down(lines)
    assert selection.resolve(lines) == TrueSelection(Position(1, 2), Position(2, 2))

    selection.extend_end_up(lines)
    selection.extend_end_up(lines)
    assert selection.resolve(lines) == TrueSelection(Position(1, 2), Position(0, 2))


def test_extend_start_moves_only_anchor() -> None:
    lines = ["abc", "def", "ghi"]
    selection = cursor_at(1, 2)

    selection.extend_start_left(lines)
    assert selection.anchor == Position(1, 1)
    assert selection.active == Position(1, 2)

    selection.extend_start_up(lines)
    assert selection.anchor == Position(0, 1)

    selection.extend_start_down(lines)
    selection.extend_start_down(lines)
    assert selection.anchor == Position(2, 1)

    selection.extend_start_right(lines)
    assert selection.anchor == Position(2, 2)
    assert selection.active == Position(1, 2)


def test_move_selection_preserves_shape() -> None:
    lines = ["hello", "world"]
    selection = range_of((0, 1), (0, 3))

    selection.move_selection_right(lines)
    assert selection.resolve(lines) == TrueSelection(Position(0, 2), Position(0, 4))

    selection.move_selection_down(lines)
    assert selection.resolve(lines) == TrueSelection(Position(1, 2), Position(1, 4))

    selection.move_selection_left(lines)
    selection.move_selection_up(lines)
    assert selection.resolve(lines) == TrueSelection(Position(0, 1), Position(0, 3))


def test_length_of_multi_line_span() -> None:
    lines = ["hello", "big", "world"]

    assert range_of((0, 3), (2, 2)).length(lines) == 7
    assert range_of((2, 2), (0, 3)).length(lines) == 7
    assert cursor_at(1, 1).length(lines) == 0


def test_length_counts_code_points() -> None:
    lines = ["héllo", "🌍🌍"]

    assert range_of((0, 0), (0, 5)).length(lines) == 5
    assert range_of((0, 4), (1, 1)).length(lines) == 2


def test_collapse_copies_raw_endpoints() -> None:
    selection = range_of((5, 9), (0, 1))

    selection.collapse_to_start()
    assert selection.active == Position(5, 9)

    selection = range_of((5, 9), (0, 1))
    selection.collapse_to_end()
    assert selection.anchor == Position(0, 1)


def test_collapse_to_true_endpoint_writes_clamped_value() -> None:
    lines = ["ab"]
    selection = range_of((5, 9), (0, 1))

    selection.collapse_to_true_start(lines)
    assert selection.anchor == selection.active == Position(1, 0)

    selection = range_of((5, 9), (0, 40))
    selection.collapse_to_true_end(lines)
    assert selection.anchor == selection.active == Position(0, 2)
