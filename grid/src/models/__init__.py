"""
Column Select Grid - Data Models

Public API:
- SelectionConstraint / ConstraintKind: column restriction state of a grid
- Record / RecordFactory / RecordTableModel: demo data shown in the grid
"""

from .selection_constraint import SelectionConstraint, ConstraintKind
from .record import Record, RecordFactory, RecordTableModel

__all__ = ['SelectionConstraint', 'ConstraintKind', 'Record', 'RecordFactory', 'RecordTableModel']
