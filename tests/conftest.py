"""
Shared fixtures for Column Select Grid tests.

Provides a pure-Python grid host for controller tests, a shown
ColumnSelectTable over the demo records, and mouse event helpers.
"""
import sys
import os
import pytest

# Ensure grid/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'grid', 'src'))

# Widgets must be creatable without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Fake host ───────────────────────────────────────────────────────────

class FakeGrid:
    """In-memory GridHost: a set of selected (column, row) cells.

    Every write goes through the controller's veto hook, like a real widget.
    Deferred callbacks queue up until run_deferred() is called.
    """

    def __init__(self, columns=3, rows=10):
        self.columns = columns
        self.rows = rows
        self.selected = set()
        self.left_down = False
        self.control = False
        self.pending = []
        self.writes = []
        self.controller = None

    def row_count(self):
        return self.rows

    def column_count(self):
        return self.columns

    def is_cell_selected(self, column, row):
        return (column, row) in self.selected

    def set_cell_selected(self, column, row, selected):
        self.writes.append((column, row, selected))
        if self.controller is not None and not self.controller.veto_or_allow_selection_change(column, row, selected):
            return
        if selected:
            self.selected.add((column, row))
        else:
            self.selected.discard((column, row))

    def is_left_button_down(self):
        return self.left_down

    def is_control_held(self):
        return self.control

    def defer(self, callback):
        self.pending.append(callback)

    def run_deferred(self):
        while self.pending:
            self.pending.pop(0)()

    # Helpers mimicking the toolkit's own behaviour

    def toolkit_click_select(self, column, row):
        """Default press handling: clear everything, select the clicked cell"""
        for cell in sorted(self.selected):
            self.set_cell_selected(cell[0], cell[1], False)
        self.set_cell_selected(column, row, True)

    def toolkit_rect_select(self, col_from, row_from, col_to, row_to):
        """Default drag handling: select every cell of the rectangle"""
        for column in range(min(col_from, col_to), max(col_from, col_to) + 1):
            for row in range(min(row_from, row_to), max(row_from, row_to) + 1):
                self.set_cell_selected(column, row, True)


@pytest.fixture
def grid():
    """3 columns x 10 rows fake grid wired to a controller"""
    from components.column_selection_controller import ColumnSelectionController
    host = FakeGrid()
    host.controller = ColumnSelectionController(host)
    return host


@pytest.fixture
def controller(grid):
    return grid.controller


# ── Qt fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def record_model(qtbot):
    """Demo model with 10 records of 3 columns"""
    from models.record import RecordTableModel
    model = RecordTableModel()
    for _ in range(10):
        model.add_new()
    return model


@pytest.fixture
def table(qtbot, record_model):
    """Shown ColumnSelectTable over the demo model"""
    from components.column_select_table import ColumnSelectTable
    view = ColumnSelectTable()
    qtbot.addWidget(view)
    view.setModel(record_model)
    view.resize(400, 400)
    view.show()
    qtbot.waitExposed(view)
    return view


# ── Mouse helpers ───────────────────────────────────────────────────────

def cell_center(view, column, row):
    """Viewport position of a cell's centre"""
    return view.visualRect(view.model().index(row, column)).center()


def send_mouse(view, event_type, pos, button=None, buttons=None, modifiers=None):
    """Deliver a synthesized mouse event to the view's viewport"""
    from PyQt5.QtCore import Qt, QPointF
    from PyQt5.QtGui import QMouseEvent
    from PyQt5.QtWidgets import QApplication
    event = QMouseEvent(
        event_type,
        QPointF(pos),
        Qt.NoButton if button is None else button,
        Qt.NoButton if buttons is None else buttons,
        Qt.NoModifier if modifiers is None else modifiers,
    )
    QApplication.sendEvent(view.viewport(), event)
