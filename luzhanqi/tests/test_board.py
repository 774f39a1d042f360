"""
Tests for the static board model.

Tests:
- Terrain table and square names
- Grid geometry and neighbors
- Per-side regions
- Piece taxonomy
"""

import pytest

from ..board.terrain import (
    NUM_SQUARES,
    TERRAIN,
    Terrain,
    terrain_of,
    squares_of,
    square_name,
    parse_square,
)
from ..board.topology import (
    REGIONS,
    index_to_rc,
    rc_to_index,
    up,
    down,
    left,
    right,
    up_left,
    up_right,
    down_left,
    down_right,
    neighbors,
    orthogonal_neighbors,
    diagonal_neighbors,
    owner_of,
)
from ..board.pieces import Piece, PieceKind, Side, QUOTAS, PIECES_PER_SIDE


class TestTerrain:
    """Tests for the terrain table."""

    def test_table_covers_board(self):
        """Every square has a terrain."""
        assert len(TERRAIN) == NUM_SQUARES == 65

    def test_special_squares(self):
        """HQ, mountains and frontline sit where the board has them."""
        assert squares_of(Terrain.HQ) == (1, 3, 61, 63)
        assert squares_of(Terrain.MOUNTAIN) == (31, 33)
        assert squares_of(Terrain.FRONTLINE) == (30, 32, 34)
        assert squares_of(Terrain.CAMP) == (11, 13, 17, 21, 23, 41, 43, 47, 51, 53)

    def test_sample_squares(self):
        """Spot-check individual squares."""
        assert terrain_of(0) == Terrain.EMPTY
        assert terrain_of(5) == Terrain.RAILROAD
        assert terrain_of(12) == Terrain.EMPTY
        assert terrain_of(30) == Terrain.FRONTLINE
        assert terrain_of(64) == Terrain.EMPTY

    def test_table_is_symmetric(self):
        """The two halves mirror each other across the frontline."""
        for index in range(NUM_SQUARES):
            row, col = divmod(index, 5)
            mirrored = (12 - row) * 5 + col
            assert TERRAIN[index] == TERRAIN[mirrored]

    def test_out_of_range(self):
        """Out-of-range indices are rejected."""
        with pytest.raises(ValueError):
            terrain_of(65)
        with pytest.raises(ValueError):
            terrain_of(-1)


class TestSquareNames:
    """Tests for algebraic square names."""

    def test_corners(self):
        assert square_name(0) == "m1"
        assert square_name(4) == "m5"
        assert square_name(60) == "a1"
        assert square_name(64) == "a5"

    def test_frontline_row(self):
        assert [square_name(i) for i in range(30, 35)] == ["g1", "g2", "g3", "g4", "g5"]

    def test_parse_every_square(self):
        """Names convert back to their index."""
        for index in range(NUM_SQUARES):
            assert parse_square(square_name(index)) == index

    def test_parse_is_case_insensitive(self):
        assert parse_square("A2") == 61

    @pytest.mark.parametrize("name", ["z1", "a0", "a6", "", "a", "a12", "11"])
    def test_parse_unknown(self, name):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError):
            parse_square(name)


class TestGeometry:
    """Tests for index conversion and neighbors."""

    def test_index_to_rc(self):
        assert index_to_rc(0) == (0, 0)
        assert index_to_rc(7) == (1, 2)
        assert index_to_rc(64) == (12, 4)

    def test_rc_to_index(self):
        assert rc_to_index(12, 4) == 64
        assert rc_to_index(6, 0) == 30
        assert rc_to_index(-1, 0) is None
        assert rc_to_index(13, 0) is None
        assert rc_to_index(0, 5) is None

    def test_directions(self):
        """Single steps, with None at the edges."""
        assert up(0) is None
        assert down(0) == 5
        assert left(5) is None
        assert right(4) is None
        assert right(3) == 4
        assert up_left(6) == 0
        assert up_right(6) == 2
        assert down_left(6) == 10
        assert down_right(58) == 64
        assert down_right(64) is None
        assert down(62) is None

    def test_corner_neighbors(self):
        assert set(neighbors(0)) == {1, 5, 6}
        assert set(neighbors(64)) == {63, 59, 58}

    def test_center_neighbors(self):
        assert orthogonal_neighbors(32) == (27, 37, 31, 33)
        assert set(diagonal_neighbors(32)) == {26, 28, 36, 38}
        assert len(neighbors(32)) == 8

    def test_neighbors_are_mutual(self):
        for index in range(NUM_SQUARES):
            for other in neighbors(index):
                assert index in neighbors(other)


class TestRegions:
    """Tests for per-side square subsets."""

    def test_red_region(self):
        region = REGIONS[Side.RED]
        assert region.hq == {61, 63}
        assert region.first_row == set(range(35, 40))
        assert region.back_rows == set(range(55, 65))
        assert len(region.playable) == 25

    def test_black_region(self):
        region = REGIONS[Side.BLACK]
        assert region.hq == {1, 3}
        assert region.first_row == set(range(25, 30))
        assert region.back_rows == set(range(0, 10))
        assert len(region.playable) == 25

    def test_playable_excludes_camps_and_frontline(self):
        for region in REGIONS.values():
            for sq in region.playable:
                assert TERRAIN[sq] in (Terrain.EMPTY, Terrain.RAILROAD, Terrain.HQ)

    def test_halves_are_disjoint(self):
        assert not REGIONS[Side.RED].playable & REGIONS[Side.BLACK].playable

    def test_owner_of(self):
        assert owner_of(0) == Side.BLACK
        assert owner_of(29) == Side.BLACK
        assert owner_of(30) is None
        assert owner_of(34) is None
        assert owner_of(35) == Side.RED
        assert owner_of(41) == Side.RED


class TestPieces:
    """Tests for the piece taxonomy."""

    def test_quotas(self):
        expected = [1, 1, 2, 2, 2, 2, 3, 3, 3, 2, 3, 1]
        assert [kind.quota for kind in PieceKind] == expected
        assert sum(QUOTAS.values()) == PIECES_PER_SIDE == 25

    def test_ranks_strictly_descend(self):
        ranked = list(PieceKind)[:9]
        ranks = [kind.rank for kind in ranked]
        assert ranks == sorted(ranks, reverse=True)
        assert len(set(ranks)) == 9
        assert PieceKind.ENGINEER.rank > 0

    def test_special_pieces_have_no_rank(self):
        assert PieceKind.BOMB.rank == 0
        assert PieceKind.LANDMINE.rank == 0
        assert PieceKind.FLAG.rank == 0

    def test_side_other(self):
        assert Side.RED.other() == Side.BLACK
        assert Side.BLACK.other() == Side.RED

    def test_piece_is_value_object(self):
        """Pieces compare by value and can be hashed."""
        a = Piece(PieceKind.FLAG, Side.RED)
        b = Piece(PieceKind.FLAG, Side.RED)
        assert a == b
        assert len({a, b}) == 1
        with pytest.raises(AttributeError):
            a.kind = PieceKind.BOMB

    def test_piece_codes(self):
        assert Piece(PieceKind.BATTALION, Side.RED).code == "T"
        assert Piece(PieceKind.BATTALION, Side.BLACK).code == "t"
