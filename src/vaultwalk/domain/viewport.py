"""Pure scroll arithmetic for the listing pane.

No I/O and no widget state: the listing widget calls these before every
render with its current height, so the selected row is always on screen.
"""


def scroll_offset_for(
    selected_index: int, scroll_offset: int, visible_height: int, total_items: int
) -> int:
    """Return the scroll offset that keeps ``selected_index`` rendered.

    The selection is kept strictly above the last visible row, i.e.
    ``offset <= selected_index < offset + visible_height - 1``.  Scrolling up
    leaves one row of context above the selection; scrolling down parks the
    selection one row above the bottom, or on the bottom row when it is the
    last item so no blank trailing row is shown.
    """
    if total_items <= 0:
        return 0
    selected_index = min(max(selected_index, 0), total_items - 1)
    offset = scroll_offset

    if selected_index <= offset:
        offset = max(selected_index - 1, 0)
    elif selected_index - offset >= visible_height - 2:
        if selected_index == total_items - 1:
            offset = selected_index - visible_height + 2
        else:
            offset = selected_index - visible_height + 3

    offset = min(max(offset, 0), selected_index)
    if selected_index - offset > visible_height - 2:
        offset = selected_index - max(visible_height - 2, 0)
    return offset


def visible_slice(scroll_offset: int, visible_height: int, total_items: int) -> range:
    """Indices of the rows rendered for the given offset."""
    return range(scroll_offset, min(total_items, scroll_offset + max(visible_height, 0)))
