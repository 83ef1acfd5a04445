"""Selection model that asks an interceptor before any cell changes state.

Every call to select() (mouse, keyboard or programmatic, index or range
overload) is resolved into per-cell outcomes first. Cells whose selected flag
would change are offered to the interceptor; refused cells keep their current
state and the rest of the command still applies.

Commands flagged Current (Shift-extend) replace the previous current
selection instead of adding to it, so they are resolved against the cells
committed before that selection started. After a partial veto the result is
committed as a whole and the next Current command starts from it.
"""

import logging

from PyQt5.QtCore import QItemSelection, QItemSelectionModel, QModelIndex


class VetoingSelectionModel(QItemSelectionModel):
    """QItemSelectionModel with a pre-commit interceptor.

    ``interceptor(column, row, proposed_selected) -> bool`` returns True to
    allow a change. With no interceptor set this is a plain QItemSelectionModel.
    """

    def __init__(self, model=None, parent=None):
        super().__init__(model, parent)
        self._logger = logging.getLogger('SelectionModel')
        self.interceptor = None
        # Cells committed outside the current selection; None once unknown
        self._committed = set()

        if model is not None:
            for signal in (model.modelReset, model.layoutChanged,
                           model.rowsInserted, model.rowsRemoved,
                           model.columnsInserted, model.columnsRemoved):
                signal.connect(self._forget_committed)

    def _forget_committed(self, *args):
        self._committed = None

    def select(self, selection, command):
        if isinstance(selection, QModelIndex):
            selection = QItemSelection(selection, selection) if selection.isValid() else QItemSelection()

        model = self.model()
        if self.interceptor is None or model is None:
            self._committed = None
            super().select(selection, command)
            return

        flags = int(command)
        current = {(index.row(), index.column()) for index in self.selectedIndexes()}
        proposed = self._expand(selection, flags)

        if flags & QItemSelectionModel.Clear:
            base = set()
        elif flags & QItemSelectionModel.Current and self._committed is not None:
            base = set(self._committed)
        else:
            base = set(current)

        if flags & QItemSelectionModel.Select:
            target = base | proposed
        elif flags & QItemSelectionModel.Deselect:
            target = base - proposed
        elif flags & QItemSelectionModel.Toggle:
            target = base ^ proposed
        else:
            target = base

        vetoed = {
            (row, column) for row, column in current ^ target
            if not self.interceptor(column, row, (row, column) in target)
        }
        if not vetoed:
            # Without Current, Qt folds the previous current selection into
            # the committed cells before applying the command
            if flags & QItemSelectionModel.Clear:
                self._committed = set()
            elif not flags & QItemSelectionModel.Current:
                self._committed = set(current)
            super().select(selection, command)
            return

        # Refused cells keep the state they had before the command
        final = target ^ vetoed
        self._logger.debug(f"Dropped {len(vetoed)} of {len(current ^ target)} selection change(s)")
        if final == current:
            return

        committed = QItemSelection()
        for row, column in sorted(final):
            index = model.index(row, column)
            committed.select(index, index)
        super().select(committed, QItemSelectionModel.ClearAndSelect)
        # An empty non-Current command folds the result into the committed cells
        super().select(QItemSelection(), QItemSelectionModel.Select)
        self._committed = final

    def _expand(self, selection, flags):
        """Cells covered by ``selection``, widened to whole rows/columns if asked"""
        cells = {(index.row(), index.column()) for index in selection.indexes()}
        model = self.model()
        if flags & QItemSelectionModel.Rows:
            cells = {(row, column) for row, _ in cells for column in range(model.columnCount())}
        if flags & QItemSelectionModel.Columns:
            cells = {(row, column) for _, column in cells for row in range(model.rowCount())}
        return cells
