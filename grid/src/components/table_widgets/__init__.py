"""
Column Select Grid - Table Widget Components

Pieces the column-select table is assembled from:
- grid_host.py: protocol the selection controller drives
- mouse_router.py: viewport event filter producing cell mouse notifications
- vetoing_selection_model.py: selection model with a pre-commit interceptor
"""

from .grid_host import GridHost
from .mouse_router import CellMouseRouter
from .vetoing_selection_model import VetoingSelectionModel

__all__ = ['GridHost', 'CellMouseRouter', 'VetoingSelectionModel']
