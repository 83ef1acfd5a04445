"""
Column Select Grid - Column Select Table

QTableView whose mouse-drag selection stays inside one column and covers a
single cell: the one last indicated by the pointer.

Wiring:
- a CellMouseRouter on the viewport feeds mouse notifications to the controller
- a VetoingSelectionModel asks the controller before any cell changes state
- the table itself is the controller's GridHost
"""

import logging

from PyQt5.QtWidgets import QTableView, QAbstractItemView, QHeaderView
from PyQt5.QtCore import QItemSelectionModel, QTimer

from components.column_selection_controller import ColumnSelectionController
from components.table_widgets import CellMouseRouter, VetoingSelectionModel
from constants import DEFERRED_SELECT_DELAY_MS


class ColumnSelectTable(QTableView):
	"""Table view with column-constrained drag selection"""

	def __init__(self, parent=None, constrained=True):
		super().__init__(parent)
		self._logger = logging.getLogger('ColumnSelectTable')
		self._constrained = constrained

		self.setSelectionMode(QAbstractItemView.ExtendedSelection)
		self.setSelectionBehavior(QAbstractItemView.SelectItems)
		self.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)

		self.controller = ColumnSelectionController(self)
		self.router = CellMouseRouter(self, self.controller)
		self.router.enabled = constrained
		self.viewport().installEventFilter(self.router)

	# ========================================
	# Model / constraint wiring
	# ========================================

	def setModel(self, model):
		"""Set the model and install a vetoing selection model over it"""
		if model is self.model():
			return
		previous_selection_model = self.selectionModel()
		super().setModel(model)
		if previous_selection_model is not None:
			previous_selection_model.deleteLater()
		if model is None:
			return

		# setModel() created a plain selection model; replace it
		default_selection_model = self.selectionModel()
		self.setSelectionModel(VetoingSelectionModel(model, self))
		default_selection_model.deleteLater()

		self._apply_constraint_hook()
		self.controller.reset()

	def is_constrained(self) -> bool:
		return self._constrained

	def set_constrained(self, constrained: bool):
		"""Turn the column constraint on or off"""
		if constrained == self._constrained:
			return
		self._constrained = constrained
		self.router.enabled = constrained
		self.controller.reset()
		self._apply_constraint_hook()
		self._logger.debug(f"Column constraint {'enabled' if constrained else 'disabled'}")

	def _apply_constraint_hook(self):
		selection_model = self.selectionModel()
		if isinstance(selection_model, VetoingSelectionModel):
			selection_model.interceptor = (
				self.controller.veto_or_allow_selection_change if self._constrained else None
			)

	# ========================================
	# GridHost
	# ========================================

	def row_count(self) -> int:
		model = self.model()
		return model.rowCount() if model is not None else 0

	def column_count(self) -> int:
		model = self.model()
		return model.columnCount() if model is not None else 0

	def is_cell_selected(self, column: int, row: int) -> bool:
		model = self.model()
		selection_model = self.selectionModel()
		if model is None or selection_model is None:
			return False
		return selection_model.isSelected(model.index(row, column))

	def set_cell_selected(self, column: int, row: int, selected: bool):
		model = self.model()
		selection_model = self.selectionModel()
		if model is None or selection_model is None:
			return
		command = QItemSelectionModel.Select if selected else QItemSelectionModel.Deselect
		selection_model.select(model.index(row, column), command)

	def is_left_button_down(self) -> bool:
		return self.router.left_button_down

	def is_control_held(self) -> bool:
		return self.router.control_held

	def defer(self, callback):
		"""Run callback once the current event has been dispatched.

		The timer is parented to the table so pending calls die with it.
		"""
		timer = QTimer(self)
		timer.setSingleShot(True)
		timer.timeout.connect(callback)
		timer.timeout.connect(timer.deleteLater)
		timer.start(DEFERRED_SELECT_DELAY_MS)

	# ========================================
	# Queries
	# ========================================

	def selected_cells(self):
		"""Return the selected cells as a sorted list of (column, row) tuples"""
		selection_model = self.selectionModel()
		if selection_model is None:
			return []
		return sorted((index.column(), index.row()) for index in selection_model.selectedIndexes())
