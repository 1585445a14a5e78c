"""transfer-list: selection and partition engine for dual-pane transfer lists."""

from ._version import __version__
from .api import Transfer
from .core.direction import LEFT, RIGHT, SOURCE, TARGET
from .core.partition import Partition, Partitioner
from .engine.move import MoveEngine, MoveResult
from .engine.operators import SelectionOperators
from .widget.selection import SelectionStore

__all__ = [
    "__version__",
    "Transfer",
    "LEFT",
    "RIGHT",
    "SOURCE",
    "TARGET",
    "Partition",
    "Partitioner",
    "MoveEngine",
    "MoveResult",
    "SelectionOperators",
    "SelectionStore",
]
