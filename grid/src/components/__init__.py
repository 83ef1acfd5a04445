"""UI components for Column Select Grid

- column_selection_controller.py: toolkit-independent selection state machine
- column_select_table.py: QTableView hosting the controller
- table_widgets: router, selection model and host protocol the table is built from
"""

from .column_selection_controller import ColumnSelectionController
from .column_select_table import ColumnSelectTable

__all__ = [
    'ColumnSelectionController',
    'ColumnSelectTable',
]
