import pytest

from battlegroup.game.core.board import BoardState
from battlegroup.game.core.models import Coord, Orientation, ShipPlacement, ShotOutcome


def test_board_can_place_and_reject_overlap_or_oob() -> None:
    board = BoardState()
    carrier = ShipPlacement(5, Coord(0, 0), Orientation.HORIZONTAL)
    assert board.can_place(carrier)
    board.place_ship(1, carrier)
    assert not board.can_place(ShipPlacement(2, Coord(0, 4), Orientation.VERTICAL))
    assert not board.can_place(ShipPlacement(5, Coord(3, 8), Orientation.HORIZONTAL))
    with pytest.raises(ValueError):
        board.place_ship(2, ShipPlacement(2, Coord(0, 0), Orientation.VERTICAL))


def test_board_apply_shot_reports_hit_and_sunk_length() -> None:
    board = BoardState()
    board.place_ship(1, ShipPlacement(2, Coord(1, 1), Orientation.HORIZONTAL))

    assert board.apply_shot(Coord(0, 0)) == ShotOutcome(hit=False)
    assert board.apply_shot(Coord(1, 1)) == ShotOutcome(hit=True)
    assert not board.all_ships_sunk()
    assert board.apply_shot(Coord(1, 2)) == ShotOutcome(hit=True, sunk_length=2)
    assert board.all_ships_sunk()


def test_board_rejects_repeat_and_off_board_shots() -> None:
    board = BoardState()
    board.apply_shot(Coord(4, 4))
    with pytest.raises(ValueError):
        board.apply_shot(Coord(4, 4))
    with pytest.raises(ValueError):
        board.apply_shot(Coord(10, 0))
