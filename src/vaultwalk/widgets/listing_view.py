"""Scrolled directory listing widget."""

from rich.text import Text
from textual.widget import Widget

from vaultwalk.constants import NEW_ENTRY_PLACEHOLDER
from vaultwalk.controller import NavigationController
from vaultwalk.domain.viewport import scroll_offset_for, visible_slice

_CURSOR = ">"


class ListingView(Widget):
    """Renders the current directory the way ``ls`` would, one entry per row.

    The first rendered row carries the current path in bold; every other row
    is indented by the path's width so names line up under it.  The selected
    leaf shows its secret after an arrow.  While a key is being created a
    placeholder row is drawn after the last entry.

    The scroll offset is recomputed from the widget's height on every render,
    so resizes and list-length changes never leave the selection off screen.
    """

    can_focus = True

    def __init__(
        self,
        controller: NavigationController,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._controller = controller

    def render(self) -> Text:
        controller = self._controller
        listing = controller.listing
        total = controller.total_items
        height = self.size.height

        listing.scroll_offset = scroll_offset_for(
            listing.selected_index, listing.scroll_offset, height, total
        )

        header = Text(controller.path.joined() + " ", style="bold")
        margin = controller.path.display_width() + 1

        if total == 0:
            return header + Text("(empty)", style="dim italic")

        lines: list[Text] = []
        for i in visible_slice(listing.scroll_offset, height, total):
            line = header.copy() if not lines else Text(" " * margin)
            selected = i == listing.selected_index
            line.append(f"{_CURSOR if selected else ' '} ")
            if i < len(listing):
                entry = listing.entries[i]
                line.append(entry.encode(), style="bold blue" if entry.is_directory else "")
                if selected and listing.selected_secret is not None:
                    line.append(" -> ")
                    line.append(listing.selected_secret, style="bold")
            else:
                name = controller.machine.buffered_key or NEW_ENTRY_PLACEHOLDER
                line.append(name, style="italic green")
            lines.append(line)
        return Text("\n").join(lines)
