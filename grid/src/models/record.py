"""Demo record model shown in the grid.

Each record carries three integer columns. Records made by a RecordFactory
take sequential debug values so rows are easy to tell apart on screen.
"""

import logging
from dataclasses import dataclass, astuple
from typing import List

from PyQt5.QtCore import Qt, QAbstractTableModel, QModelIndex

from constants import RECORD_FIELDS, FIRST_DEBUG_VALUE


@dataclass
class Record:
    col1: int = 0
    col2: int = 0
    col3: int = 0


class RecordFactory:
    """Hands out records whose fields all equal a running counter"""

    def __init__(self, start: int = FIRST_DEBUG_VALUE):
        self._next_value = start

    def new_record(self) -> Record:
        value = self._next_value
        self._next_value += 1
        return Record(value, value, value)


class RecordTableModel(QAbstractTableModel):
    """Read-only table model over a list of Records"""

    def __init__(self, records: List[Record] = None, factory: RecordFactory = None, parent=None):
        super().__init__(parent)
        self._logger = logging.getLogger('RecordTableModel')
        self._records = list(records) if records else []
        self._factory = factory or RecordFactory()

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._records)

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(RECORD_FIELDS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        if role in (Qt.DisplayRole, Qt.EditRole):
            return astuple(self._records[index.row()])[index.column()]
        if role == Qt.TextAlignmentRole:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            if 0 <= section < len(RECORD_FIELDS):
                return RECORD_FIELDS[section]
            return None
        return section + 1

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable

    def add_new(self) -> Record:
        """Append a factory-made record and return it"""
        record = self._factory.new_record()
        row = len(self._records)
        self.beginInsertRows(QModelIndex(), row, row)
        self._records.append(record)
        self.endInsertRows()
        self._logger.debug(f"Added record at row {row}: {record}")
        return record

    def clear(self):
        """Remove all records"""
        self.beginResetModel()
        self._records.clear()
        self.endResetModel()
