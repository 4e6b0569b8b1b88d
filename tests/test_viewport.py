"""Unit tests for vaultwalk.domain.viewport scroll arithmetic."""

import pytest

from vaultwalk.domain.viewport import scroll_offset_for, visible_slice


def _holds(selected: int, offset: int, height: int) -> bool:
    return offset <= selected < offset + height - 1


class TestScrollOffsetFor:
    def test_short_list_never_scrolls(self):
        """
        Given a list that fits in the viewport
        When any row is selected
        Then the offset stays at 0
        """
        for selected in range(5):
            assert scroll_offset_for(selected, 0, 20, 5) == 0

    def test_moving_down_past_bottom_scrolls(self):
        """
        Given a 10-row viewport at offset 0 over 50 items
        When the selection reaches row 8
        Then the offset advances and the selection stays visible
        """
        offset = scroll_offset_for(8, 0, 10, 50)
        assert offset > 0
        assert _holds(8, offset, 10)

    def test_moving_up_keeps_one_row_of_context(self):
        """
        Given a scrolled viewport
        When the selection moves onto the top row
        Then the offset moves up so one row above the selection is visible
        """
        assert scroll_offset_for(20, 20, 10, 50) == 19

    def test_first_item_scrolls_to_top(self):
        assert scroll_offset_for(0, 15, 10, 50) == 0

    def test_last_item_sits_on_last_usable_row(self):
        """
        Given the last item is selected in a long list
        When the offset is computed
        Then the selection is on the lowest row the invariant allows
        """
        offset = scroll_offset_for(49, 30, 10, 50)
        assert offset == 49 - 8
        assert _holds(49, offset, 10)

    def test_empty_list_offset_is_zero(self):
        assert scroll_offset_for(0, 7, 10, 0) == 0

    def test_walking_down_and_up_keeps_invariant(self):
        """
        Given a long list
        When the selection walks to the bottom and back one row at a time
        Then the invariant holds after every step
        """
        height, total, offset = 7, 40, 0
        for selected in list(range(total)) + list(reversed(range(total))):
            offset = scroll_offset_for(selected, offset, height, total)
            assert _holds(selected, offset, height)

    @pytest.mark.parametrize("height", [2, 3, 4, 10, 25])
    @pytest.mark.parametrize("total", [1, 2, 9, 30])
    @pytest.mark.parametrize("prior", [0, 5, 29])
    def test_invariant_for_any_valid_selection(self, height, total, prior):
        """
        Given any viewport height, list length and prior offset
        When the offset is computed for every valid selection
        Then offset <= selected < offset + height - 1
        """
        for selected in range(total):
            offset = scroll_offset_for(selected, prior, height, total)
            assert _holds(selected, offset, height)


class TestVisibleSlice:
    def test_slice_covers_viewport(self):
        assert visible_slice(5, 10, 50) == range(5, 15)

    def test_slice_stops_at_list_end(self):
        assert visible_slice(45, 10, 50) == range(45, 50)

    def test_zero_height_renders_nothing(self):
        assert len(visible_slice(0, 0, 50)) == 0
