import pytest

from debug_console.position import (
    Position,
    end_position_of,
    origin_row_of,
    position_of,
    rows_spanned,
)


class TestPositionOf:
    def test_offset_zero_is_after_prompt(self):
        assert position_of(0, 80, 7, 5) == Position(7, 5)

    def test_no_wrap(self):
        assert position_of(9, 80, 7, 3) == Position(16, 3)

    def test_wraps_to_second_row(self):
        # first row holds W - L = 7 cells
        assert position_of(9, 10, 3, 0) == Position(2, 1)

    def test_last_cell_of_first_row(self):
        assert position_of(6, 10, 3, 0) == Position(9, 0)

    def test_exactly_full_first_row_moves_to_next_row(self):
        assert position_of(7, 10, 3, 4) == Position(0, 5)

    def test_third_row(self):
        assert position_of(7 + 10 + 4, 10, 3, 0) == Position(4, 2)

    def test_exactly_full_second_row(self):
        assert position_of(17, 10, 3, 0) == Position(0, 2)

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError):
            position_of(-1, 10, 3, 0)

    def test_zero_width_rejected(self):
        with pytest.raises(ValueError):
            position_of(0, 0, 3, 0)


class TestOriginRowOf:
    def test_single_row(self):
        assert origin_row_of(4, 5, 80, 7) == 4

    def test_wrapped(self):
        assert origin_row_of(3, 9, 10, 3) == 2

    @pytest.mark.parametrize("offset", [0, 1, 6, 7, 8, 16, 17, 18, 40])
    def test_inverts_position_of(self, offset):
        pos = position_of(offset, 10, 3, 2)
        assert origin_row_of(pos.row, offset, 10, 3) == 2


class TestEndPosition:
    def test_empty_buffer(self):
        assert end_position_of(0, 80, 7, 1) == Position(7, 1)

    def test_matches_position_of_length(self):
        assert end_position_of(23, 10, 3, 0) == position_of(23, 10, 3, 0)


class TestRowsSpanned:
    def test_empty(self):
        assert rows_spanned(0, 10, 3) == 1

    def test_fits_first_row(self):
        assert rows_spanned(6, 10, 3) == 1

    def test_full_first_row_puts_end_on_next_row(self):
        assert rows_spanned(7, 10, 3) == 2

    def test_two_rows(self):
        assert rows_spanned(9, 10, 3) == 2
