"""Tests for MoveEngine."""

import logging

import pytest

from transfer_list.engine.move import MoveEngine, MoveResult


class TestMoveRight:
    def test_disabled_key_excluded(self, small_dataset):
        result = MoveEngine.move_to("right", ["1", "2"], [], small_dataset, [])
        assert result.new_target_keys == ["1"]
        assert result.moved_keys == ["1"]
        assert result.direction == "right"

    def test_newest_first_ordering(self, ten_items):
        result = MoveEngine.move_to("right", ["5", "2"], [], ten_items, ["0", "9"])
        assert result.new_target_keys == ["5", "2", "0", "9"]

    def test_clears_origin_pane(self, ten_items):
        result = MoveEngine.move_to("right", ["1"], [], ten_items, [])
        assert result.cleared_pane == "left"

    def test_target_selection_ignored(self, ten_items):
        result = MoveEngine.move_to("right", [], ["3"], ten_items, ["3"])
        assert result.moved_keys == []
        assert result.new_target_keys == ["3"]

    def test_disabled_skip_logged(self, small_dataset, caplog):
        with caplog.at_level(logging.DEBUG, logger="transfer_list.engine.move"):
            MoveEngine.move_to("right", ["2"], [], small_dataset, [])
        records = [r for r in caplog.records if "disabled" in r.getMessage()]
        assert [r.levelno for r in records] == [logging.DEBUG]


class TestMoveLeft:
    def test_removes_selected_target_keys(self, small_dataset):
        result = MoveEngine.move_to("left", [], ["3"], small_dataset, ["3", "1"])
        assert result.new_target_keys == ["1"]
        assert result.moved_keys == ["3"]
        assert result.cleared_pane == "right"

    def test_remaining_order_preserved(self, ten_items):
        result = MoveEngine.move_to("left", [], ["4"], ten_items, ["7", "4", "2", "9"])
        assert result.new_target_keys == ["7", "2", "9"]

    def test_disabled_target_item_stays(self, small_dataset):
        result = MoveEngine.move_to("left", [], ["2", "3"], small_dataset, ["2", "3"])
        assert result.new_target_keys == ["2"]
        assert result.moved_keys == ["3"]


class TestMoveEdgeCases:
    def test_all_disabled_is_noop(self, small_dataset):
        result = MoveEngine.move_to("right", ["2"], [], small_dataset, ["3"])
        assert result.moved_keys == []
        assert result.new_target_keys == ["3"]

    def test_inputs_not_mutated(self, ten_items):
        target = ["1"]
        selected = ["2"]
        MoveEngine.move_to("right", selected, [], ten_items, target)
        assert target == ["1"]
        assert selected == ["2"]

    def test_invalid_direction_raises(self, ten_items):
        with pytest.raises(ValueError, match="Unknown direction"):
            MoveEngine.move_to("down", [], [], ten_items, [])

    def test_row_key_used_for_disabled(self):
        items = [{"id": 1, "disabled": True}, {"id": 2}]
        result = MoveEngine.move_to(
            "right", [1, 2], [], items, [], row_key=lambda r: r["id"]
        )
        assert result.moved_keys == [2]

    @pytest.mark.parametrize("direction", ["left", "right"])
    def test_disabled_never_moved(self, small_dataset, direction):
        result = MoveEngine.move_to(
            direction, ["1", "2", "3"], ["1", "2", "3"], small_dataset, ["1", "2", "3"]
        )
        assert "2" not in result.moved_keys


class TestRemove:
    def test_remove_reports_left(self):
        result = MoveEngine.remove(["b"], ["a", "b", "c"])
        assert result == MoveResult(
            new_target_keys=["a", "c"],
            direction="left",
            moved_keys=["b"],
            cleared_pane="right",
        )

    def test_to_dict(self):
        result = MoveEngine.remove(["a"], ["a"])
        assert result.to_dict() == {
            "targetKeys": [],
            "direction": "left",
            "movedKeys": ["a"],
        }
