"""Protocol definitions for widgets driven by ColumnSelectionController."""

from typing import Callable, Protocol


class GridHost(Protocol):
    """What the column selection controller needs from its grid widget."""

    def row_count(self) -> int:
        """Return the number of rows currently present."""
        ...

    def column_count(self) -> int:
        """Return the number of columns currently present."""
        ...

    def is_cell_selected(self, column: int, row: int) -> bool:
        """Return the selected flag of one cell."""
        ...

    def set_cell_selected(self, column: int, row: int, selected: bool) -> None:
        """Change the selected flag of one cell (goes through the veto hook)."""
        ...

    def is_left_button_down(self) -> bool:
        """Return True while the left mouse button is held."""
        ...

    def is_control_held(self) -> bool:
        """Return True if the Control modifier was held for the current event."""
        ...

    def defer(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` after the current event has finished dispatching."""
        ...


__all__ = ["GridHost"]
