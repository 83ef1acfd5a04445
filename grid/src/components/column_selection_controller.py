"""
Column Select Grid - Column Selection Controller

Keeps mouse-drag selection in a grid to a single cell of a single column.

The controller receives cell-level mouse notifications from its host (see
table_widgets.grid_host.GridHost), tracks which column may currently change
selection, and answers the host's veto hook before every selection change.

The single-in-column reassertion always runs on the host's deferred path so
it lands after the toolkit's own press/drag selection handling.
"""

import logging
from contextlib import contextmanager

from models.selection_constraint import SelectionConstraint
from components.table_widgets.grid_host import GridHost


class ColumnSelectionController:
	"""State machine for column-constrained drag selection.

	States: unrestricted, restricted to one column, blocked.
	One controller per grid; all calls happen on the UI thread.
	"""

	def __init__(self, host: GridHost):
		self._logger = logging.getLogger('ColumnSelection')
		self.host = host
		self._constraint = SelectionConstraint.unrestricted()
		self._applying = False  # True while the controller writes selection itself

		# Callbacks (set by owner)
		self.on_constraint_changed = None

	# ========================================
	# State
	# ========================================

	@property
	def constraint(self) -> SelectionConstraint:
		return self._constraint

	@property
	def allowed_column(self):
		"""Column selection is restricted to, or None when not restricted to one"""
		return self._constraint.column

	def _set_constraint(self, constraint: SelectionConstraint):
		if constraint == self._constraint:
			return
		self._logger.debug(f"Constraint: {self._constraint} -> {constraint}")
		self._constraint = constraint
		if self.on_constraint_changed:
			self.on_constraint_changed(constraint)

	def reset(self):
		"""Drop any restriction (used when the host's model changes)"""
		self._set_constraint(SelectionConstraint.unrestricted())

	@contextmanager
	def _own_writes(self):
		self._applying = True
		try:
			yield
		finally:
			self._applying = False

	# ========================================
	# Mouse notifications
	# ========================================

	def on_cell_mouse_down(self, column: int, row: int) -> bool:
		"""Left button pressed over a cell.

		Returns:
			True if the press was fully handled here (Control-click toggle-off)
			and the host should not run its own press handling.
		"""
		if column < 0 or row < 0:
			return False

		if self.host.is_control_held() and self.host.is_cell_selected(column, row):
			with self._own_writes():
				self.host.set_cell_selected(column, row, False)
			self._logger.debug(f"Toggled off cell ({column}, {row})")
			return True

		self._set_constraint(SelectionConstraint.restricted_to(column))
		self.host.defer(lambda: self.select_single_in_column(column, row))
		return False

	def on_cell_mouse_enter(self, column: int, row: int):
		"""Pointer entered a cell"""
		if column < 0 or row < 0:
			return

		if self.host.is_left_button_down():
			self._set_constraint(SelectionConstraint.restricted_to(column))
			self.host.defer(lambda: self.select_single_in_column(column, row))
		else:
			self._set_constraint(SelectionConstraint.unrestricted())

	def on_cell_mouse_leave(self, column: int = -1, row: int = -1):
		"""Pointer left a cell, or the grid altogether"""
		if self.host.is_left_button_down():
			self._set_constraint(SelectionConstraint.blocked())

	def on_mouse_up(self):
		"""Button released; ends the gesture whatever happened during it"""
		self._set_constraint(SelectionConstraint.unrestricted())

	# ========================================
	# Selection
	# ========================================

	def select_single_in_column(self, column: int, row: int):
		"""Select only the cell at (column, row); deselect every other cell.

		Cells already holding their target flag are left alone so no redundant
		change notifications go out. Skipped while blocked, and for cells no
		longer inside the grid.
		"""
		if column < 0 or row < 0:
			return
		if self._constraint.is_blocked:
			self._logger.debug(f"Blocked, skipping reassertion of ({column}, {row})")
			return

		row_count = self.host.row_count()
		column_count = self.host.column_count()
		if column >= column_count or row >= row_count:
			return

		with self._own_writes():
			for r in range(row_count):
				target = r == row
				if self.host.is_cell_selected(column, r) != target:
					self.host.set_cell_selected(column, r, target)

			for c in range(column_count):
				if c == column:
					continue
				for r in range(row_count):
					if self.host.is_cell_selected(c, r):
						self.host.set_cell_selected(c, r, False)

		if self._constraint.is_restricted:
			self._set_constraint(SelectionConstraint.unrestricted())

	def veto_or_allow_selection_change(self, column: int, row: int, proposed_selected: bool) -> bool:
		"""Pre-commit hook for every selection change of the host.

		Returns:
			True to let the change through, False to drop it
		"""
		if self._applying:
			return True
		allowed = self._constraint.allows(column)
		if not allowed:
			self._logger.debug(
				f"Vetoed {'select' if proposed_selected else 'deselect'} of ({column}, {row}): {self._constraint}")
		return allowed
