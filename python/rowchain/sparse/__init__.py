from .base import SparseMatrix
from .rowlist import RowListMatrix

__all__ = [
    "SparseMatrix",
    "RowListMatrix",
]
