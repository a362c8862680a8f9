import logging as _logging

from ._runtime import (
    get_max_result_cells,
    get_preview_limit,
    set_max_result_cells,
    set_preview_limit,
)
from .errors import (
    DimensionMismatchError,
    MatrixLoadError,
    OperationError,
    RowChainError,
    SizeGuardExceededError,
)
from .io import dumps, load, loads, save
from .ops import add, multiply, subtract
from .sparse import RowListMatrix

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "RowListMatrix",
    "load",
    "loads",
    "save",
    "dumps",
    "add",
    "subtract",
    "multiply",
    "RowChainError",
    "MatrixLoadError",
    "OperationError",
    "DimensionMismatchError",
    "SizeGuardExceededError",
    "set_max_result_cells",
    "get_max_result_cells",
    "set_preview_limit",
    "get_preview_limit",
]

# Library stays quiet unless the application configures logging.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())
