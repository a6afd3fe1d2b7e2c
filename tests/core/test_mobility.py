"""Tests for the mobility catalog."""

import pytest

from premovable.core import mobility as m
from premovable.core.enums import Color

SYMMETRIC = [
    m.knight,
    m.bishop,
    m.rook,
    m.queen,
    m.valet,
    m.elephant,
    m.fool,
    m.warden,
    m.monk,
    m.goshawk,
    m.cannon,
    m.zebra,
    m.unicorn,
]

_SQUARES = [(x, y) for x in range(8) for y in range(8)]


def _targets(mobility: m.Mobility, x: int, y: int) -> set[tuple[int, int]]:
    return {
        (x2, y2)
        for x2, y2 in _SQUARES
        if (x2, y2) != (x, y) and mobility(x, y, x2, y2)
    }


class TestSymmetry:
    @pytest.mark.parametrize("mobility", SYMMETRIC, ids=lambda f: f.__name__)
    def test_swap_source_and_destination(self, mobility: m.Mobility) -> None:
        for x1, y1 in _SQUARES:
            for x2, y2 in _SQUARES:
                assert mobility(x1, y1, x2, y2) == mobility(x2, y2, x1, y1)


class TestLeapers:
    def test_knight_from_d4(self) -> None:
        assert len(_targets(m.knight, 3, 3)) == 8

    def test_knight_from_corner(self) -> None:
        assert _targets(m.knight, 0, 0) == {(1, 2), (2, 1)}

    def test_elephant(self) -> None:
        assert _targets(m.elephant, 3, 3) == {(1, 1), (1, 5), (5, 1), (5, 5)}

    def test_fool(self) -> None:
        assert _targets(m.fool, 3, 3) == {(2, 2), (2, 4), (4, 2), (4, 4)}

    def test_warden(self) -> None:
        assert _targets(m.warden, 3, 3) == {(2, 3), (4, 3), (3, 2), (3, 4)}

    def test_monk(self) -> None:
        assert _targets(m.monk, 3, 3) == {(1, 3), (5, 3), (3, 1), (3, 5)}

    def test_goshawk(self) -> None:
        assert _targets(m.goshawk, 0, 0) == {(1, 3), (3, 1)}

    def test_cannon(self) -> None:
        assert _targets(m.cannon, 3, 3) == {(0, 3), (6, 3), (3, 0), (3, 6)}

    def test_zebra_adds_sideways_step(self) -> None:
        assert _targets(m.zebra, 3, 3) == _targets(m.knight, 3, 3) | {(2, 3), (4, 3)}

    def test_valet_is_king_step(self) -> None:
        assert len(_targets(m.valet, 3, 3)) == 8
        assert len(_targets(m.valet, 0, 0)) == 3


class TestRiders:
    def test_bishop_ignores_occupancy(self) -> None:
        assert m.bishop(0, 0, 7, 7)
        assert not m.bishop(0, 0, 1, 2)

    def test_rook(self) -> None:
        assert len(_targets(m.rook, 3, 3)) == 14

    def test_queen_is_bishop_or_rook(self) -> None:
        assert _targets(m.queen, 3, 3) == _targets(m.bishop, 3, 3) | _targets(m.rook, 3, 3)

    def test_junk_whole_rank(self) -> None:
        assert _targets(m.junk, 3, 3) == {(x, 3) for x in range(8)} - {(3, 3)}
        assert m.junk(3, 3, 3, 3)


class TestCompositions:
    def test_prince(self) -> None:
        assert _targets(m.prince, 3, 3) == _targets(m.valet, 3, 3) | _targets(m.knight, 3, 3)

    def test_lady(self) -> None:
        assert _targets(m.lady, 3, 3) == _targets(m.bishop, 3, 3) | _targets(m.warden, 3, 3)

    def test_dragon(self) -> None:
        assert _targets(m.dragon, 3, 3) == _targets(m.knight, 3, 3) | _targets(m.queen, 3, 3)

    def test_arma(self) -> None:
        assert _targets(m.arma, 3, 3) == _targets(m.rook, 3, 3) | _targets(m.fool, 3, 3)

    def test_either(self) -> None:
        combined = m.either(m.fool, m.warden)
        assert _targets(combined, 3, 3) == _targets(m.valet, 3, 3)


class TestUnicorn:
    def test_scaled_knight_vector(self) -> None:
        assert m.unicorn(0, 0, 2, 4)
        assert m.unicorn(0, 0, 3, 6)
        assert m.unicorn(7, 7, 1, 4)

    def test_plain_knight_vector(self) -> None:
        assert m.unicorn(0, 0, 1, 2)

    def test_other_ratios(self) -> None:
        assert not m.unicorn(0, 0, 1, 1)
        assert not m.unicorn(0, 0, 2, 3)
        assert not m.unicorn(0, 0, 1, 3)

    def test_axis_aligned_no_division_by_zero(self) -> None:
        assert not m.unicorn(0, 0, 0, 5)
        assert not m.unicorn(0, 0, 5, 0)
        assert not m.unicorn(2, 2, 2, 2)


class TestStandard:
    def test_never_moves(self) -> None:
        assert _targets(m.standard, 3, 3) == set()


class TestPawn:
    def test_white_forward(self) -> None:
        white = m.pawn(Color.WHITE)
        assert _targets(white, 4, 3) == {(3, 4), (4, 4), (5, 4)}

    def test_white_double_step_from_second_rank(self) -> None:
        white = m.pawn(Color.WHITE)
        assert _targets(white, 4, 1) == {(3, 2), (4, 2), (5, 2), (4, 3)}

    def test_white_double_step_from_back_rank(self) -> None:
        white = m.pawn(Color.WHITE)
        assert white(4, 0, 4, 2)
        assert not white(4, 0, 5, 2)

    def test_black_mirrors_white(self) -> None:
        black = m.pawn(Color.BLACK)
        assert _targets(black, 4, 6) == {(3, 5), (4, 5), (5, 5), (4, 4)}
        assert black(4, 7, 4, 5)

    def test_no_double_step_mid_board(self) -> None:
        assert not m.pawn(Color.WHITE)(4, 3, 4, 5)
        assert not m.pawn(Color.BLACK)(4, 4, 4, 2)


class TestKing:
    def test_steps_without_castling(self) -> None:
        king = m.king(Color.WHITE, [0, 7], False)
        assert _targets(king, 4, 0) == {(3, 0), (5, 0), (3, 1), (4, 1), (5, 1)}

    def test_castling_targets(self) -> None:
        king = m.king(Color.WHITE, [0, 7], True)
        targets = _targets(king, 4, 0)
        assert {(2, 0), (6, 0), (0, 0), (7, 0)} <= targets

    def test_castling_needs_corner_rook(self) -> None:
        king = m.king(Color.WHITE, [7], True)
        assert king(4, 0, 6, 0)
        assert not king(4, 0, 2, 0)

    def test_castling_only_on_back_rank(self) -> None:
        king = m.king(Color.BLACK, [0, 7], True)
        assert king(4, 7, 6, 7)
        assert not king(4, 6, 6, 6)

    def test_castle_onto_rook_file(self) -> None:
        # Chess960 style: king on b1, rook on g1
        king = m.king(Color.WHITE, [6], True)
        assert king(1, 0, 6, 0)
        assert not king(1, 0, 5, 0)
