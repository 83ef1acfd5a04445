"""Event filter turning raw viewport mouse events into cell notifications.

Installed on the viewport of a QAbstractItemView. Presses (single or double),
releases and moves with the left button held are translated into the controller's
on_cell_mouse_down / on_cell_mouse_enter / on_cell_mouse_leave / on_mouse_up
calls. Move events during a gesture are consumed so the view's own
rectangular drag selection never runs.
"""

from PyQt5.QtCore import QObject, QEvent, Qt


class CellMouseRouter(QObject):
	"""Composition-based mouse listener for a table view"""

	def __init__(self, view, controller, parent=None):
		super().__init__(parent if parent is not None else view)
		self.view = view
		self.controller = controller
		self.enabled = True

		# Input state as seen through the filtered events
		self.left_button_down = False
		self.control_held = False
		self._hover_cell = None  # (column, row) under the pointer while pressed

	def eventFilter(self, obj, event):
		if not self.enabled:
			return False

		etype = event.type()

		# A double-click delivers its second press as MouseButtonDblClick
		if etype in (QEvent.MouseButtonPress, QEvent.MouseButtonDblClick) and event.button() == Qt.LeftButton:
			self.left_button_down = True
			self.control_held = bool(event.modifiers() & Qt.ControlModifier)
			self._hover_cell = self._cell_at(event.pos())
			if self._hover_cell is None:
				return False
			return self.controller.on_cell_mouse_down(*self._hover_cell)

		if etype == QEvent.MouseMove and self.left_button_down:
			self.control_held = bool(event.modifiers() & Qt.ControlModifier)
			if not event.buttons() & Qt.LeftButton:
				# Release happened somewhere we never saw it
				self._end_gesture()
				return False
			self._track(self._cell_at(event.pos()))
			return True

		if etype == QEvent.MouseButtonRelease and event.button() == Qt.LeftButton:
			self.control_held = bool(event.modifiers() & Qt.ControlModifier)
			self._end_gesture()
			return False

		if etype == QEvent.Leave and self.left_button_down:
			self._track(None)

		return False

	def _track(self, cell):
		"""Report leave/enter when the pointer crosses into a different cell"""
		if cell == self._hover_cell:
			return
		if self._hover_cell is not None:
			self.controller.on_cell_mouse_leave(*self._hover_cell)
		self._hover_cell = cell
		if cell is not None:
			self.controller.on_cell_mouse_enter(*cell)

	def _end_gesture(self):
		self.left_button_down = False
		self._hover_cell = None
		self.controller.on_mouse_up()

	def _cell_at(self, pos):
		index = self.view.indexAt(pos)
		if not index.isValid():
			return None
		return (index.column(), index.row())
