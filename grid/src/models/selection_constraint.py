"""Selection constraint state for column-restricted drag selection.

Tagged state instead of a nullable column index with a magic "blocked" value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConstraintKind(Enum):
    """Which cells may change their selected flag right now"""
    UNRESTRICTED = 'unrestricted'  # anything goes
    RESTRICTED = 'restricted'      # only cells in one column
    BLOCKED = 'blocked'            # nothing until a new gesture starts


@dataclass(frozen=True)
class SelectionConstraint:
    """Current column restriction of a grid.

    Use the constructors below rather than building instances directly;
    ``column`` is only meaningful for RESTRICTED.
    """
    kind: ConstraintKind = ConstraintKind.UNRESTRICTED
    column: Optional[int] = None

    @classmethod
    def unrestricted(cls) -> 'SelectionConstraint':
        return cls(ConstraintKind.UNRESTRICTED)

    @classmethod
    def restricted_to(cls, column: int) -> 'SelectionConstraint':
        if column is None or column < 0:
            raise ValueError(f"Cannot restrict selection to column {column}")
        return cls(ConstraintKind.RESTRICTED, column)

    @classmethod
    def blocked(cls) -> 'SelectionConstraint':
        return cls(ConstraintKind.BLOCKED)

    @property
    def is_unrestricted(self) -> bool:
        return self.kind is ConstraintKind.UNRESTRICTED

    @property
    def is_restricted(self) -> bool:
        return self.kind is ConstraintKind.RESTRICTED

    @property
    def is_blocked(self) -> bool:
        return self.kind is ConstraintKind.BLOCKED

    def allows(self, column: int) -> bool:
        """Return True if a cell in ``column`` may change its selected flag"""
        if self.kind is ConstraintKind.UNRESTRICTED:
            return True
        if self.kind is ConstraintKind.BLOCKED:
            return False
        return column == self.column

    def __str__(self):
        if self.kind is ConstraintKind.RESTRICTED:
            return f"restricted to column {self.column}"
        return self.kind.value
