"""Base class for sparse integer matrices.

Holds the shape bookkeeping shared by concrete storage types in
`rowchain.sparse` and the dense materialization used for display and tests.
"""

import numpy as np


class SparseMatrix:
    """Abstract base class for 2D sparse integer matrices.

    Parameters
    ----------
    shape : tuple[int, int]
        Matrix shape ``(nrows, ncols)``. Both dimensions must be non-negative.

    Attributes
    ----------
    shape : tuple[int, int]
        Matrix shape.
    ndim : int
        Always 2.
    dtype : numpy.dtype
        ``np.int64``; values are exact integers.

    Raises
    ------
    ValueError
        If ``shape`` is not 2D or has a negative dimension.
    """

    dtype = np.dtype(np.int64)

    def __init__(self, shape):
        shape = tuple(int(n) for n in shape)
        if len(shape) != 2:
            raise ValueError("SparseMatrix requires 2D shape")
        if shape[0] < 0 or shape[1] < 0:
            raise ValueError("matrix dimensions must be non-negative")
        self.shape = shape
        self.ndim = 2

    @property
    def nrows(self):
        """Number of rows (int)."""
        return self.shape[0]

    @property
    def ncols(self):
        """Number of columns (int)."""
        return self.shape[1]

    def items(self):
        """Iterate stored ``(row, col, value)`` triples. Subclasses override."""
        return iter(())

    def toarray(self):
        """Return a dense ``numpy.ndarray`` of shape ``(nrows, ncols)``.

        Notes
        -----
        Meant for inspection of small matrices. Arithmetic never densifies.
        The result is ``int64`` unless a stored value falls outside that
        range, in which case an ``object`` array of Python ints is returned.
        """
        out = np.zeros(self.shape, dtype=self.dtype)
        try:
            for r, c, v in self.items():
                out[r, c] = v
        except OverflowError:
            out = np.zeros(self.shape, dtype=object)
            for r, c, v in self.items():
                out[r, c] = v
        return out
