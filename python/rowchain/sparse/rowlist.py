"""Row-ordered sparse integer matrix.

Each row owns a chain of ``(column, value)`` pairs kept in two parallel
lists sorted by column. Rows without entries hold no chain at all.

Invariants
----------
- columns inside a chain are strictly increasing;
- no stored value is 0;
- ``nnz`` equals the number of stored pairs across all rows.
"""

import operator
from bisect import bisect_left
from itertools import islice

import numpy as np

from .._runtime import get_preview_limit
from .base import SparseMatrix


def _as_int(value):
    try:
        return operator.index(value)
    except TypeError:
        pass
    as_int = int(value)
    if as_int != value:
        raise ValueError(f"matrix values must be integers, got {value!r}")
    return as_int


class _RowChain:
    __slots__ = ("cols", "vals")

    def __init__(self, cols=None, vals=None):
        self.cols = [] if cols is None else cols
        self.vals = [] if vals is None else vals

    def __len__(self):
        return len(self.cols)

    def find(self, col):
        pos = bisect_left(self.cols, col)
        if pos < len(self.cols) and self.cols[pos] == col:
            return pos, True
        return pos, False


class RowListMatrix(SparseMatrix):
    """Sparse integer matrix stored as one sorted entry chain per row.

    Parameters
    ----------
    nrows, ncols : int
        Matrix dimensions. Must be non-negative.

    Attributes
    ----------
    shape : tuple[int, int]
        Matrix shape ``(nrows, ncols)``.
    nnz : int
        Number of stored (non-zero) entries.

    Notes
    -----
    Setting an element to 0 removes it, so a stored zero can never be
    observed. Coordinates outside the shape are ignored by :meth:`set` and
    read as 0 by :meth:`get`.

    Examples
    --------
    >>> from rowchain.sparse import RowListMatrix
    >>> a = RowListMatrix(2, 3)
    >>> a.set(0, 2, 5)
    >>> a.set(1, 0, -1)
    >>> a.nnz
    2
    >>> a.get(0, 2), a.get(0, 1)
    (5, 0)
    >>> list(a.items())
    [(0, 2, 5), (1, 0, -1)]
    """

    def __init__(self, nrows, ncols):
        super().__init__((nrows, ncols))
        self._rows = [None] * self.shape[0]
        self._nnz = 0

    @classmethod
    def from_entries(cls, shape, entries):
        """Build a matrix from an iterable of ``(row, col, value)`` triples.

        Later triples overwrite earlier ones at the same coordinate; zero
        values and out-of-range coordinates follow :meth:`set` semantics.
        """
        out = cls(*shape)
        for r, c, v in entries:
            out.set(r, c, v)
        return out

    @classmethod
    def from_dense(cls, array):
        """Build a matrix from a dense 2D array-like of integers, dropping zeros."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError("from_dense expects a 2D array")
        if not (np.issubdtype(arr.dtype, np.integer) or arr.dtype == np.bool_):
            raise ValueError(f"from_dense expects an integer array, got dtype {arr.dtype}")
        out = cls(*arr.shape)
        for r in range(arr.shape[0]):
            nz = np.flatnonzero(arr[r])
            if nz.size:
                out._set_row(r, [int(c) for c in nz], [int(v) for v in arr[r, nz]])
        return out

    @classmethod
    def eye(cls, n):
        """Identity matrix of size ``n``."""
        out = cls(n, n)
        for i in range(n):
            out._set_row(i, [i], [1])
        return out

    @property
    def nnz(self):
        """Number of stored non-zero entries (int)."""
        return self._nnz

    def _in_bounds(self, r, c):
        return 0 <= r < self.shape[0] and 0 <= c < self.shape[1]

    def _set_row(self, r, cols, vals):
        # cols must be strictly increasing and vals free of zeros
        old = self._rows[r]
        if old is not None:
            self._nnz -= len(old)
        self._rows[r] = _RowChain(cols, vals) if cols else None
        self._nnz += len(cols)

    def _chain_parts(self, r):
        chain = self._rows[r]
        if chain is None:
            return (), ()
        return chain.cols, chain.vals

    def set(self, r, c, value):
        """Store ``value`` at ``(r, c)``.

        Out-of-bounds coordinates are ignored. A value of 0 removes any
        existing entry at that position. Integral floats such as ``3.0`` are
        accepted; ``ValueError`` is raised for values like ``2.7``.
        """
        if not self._in_bounds(r, c):
            return
        r, c, value = int(r), int(c), _as_int(value)
        chain = self._rows[r]
        if value == 0:
            if chain is None:
                return
            pos, found = chain.find(c)
            if found:
                del chain.cols[pos]
                del chain.vals[pos]
                self._nnz -= 1
                if not chain.cols:
                    self._rows[r] = None
            return
        if chain is None:
            self._rows[r] = _RowChain([c], [value])
            self._nnz += 1
            return
        pos, found = chain.find(c)
        if found:
            chain.vals[pos] = value
            return
        chain.cols.insert(pos, c)
        chain.vals.insert(pos, value)
        self._nnz += 1

    def get(self, r, c):
        """Return the value at ``(r, c)``, or 0 if absent or out of bounds."""
        if not self._in_bounds(r, c):
            return 0
        chain = self._rows[r]
        if chain is None:
            return 0
        pos, found = chain.find(c)
        return chain.vals[pos] if found else 0

    def __getitem__(self, key):
        """Scalar read ``A[i, j]``.

        Raises
        ------
        IndexError
            If ``(i, j)`` is out of bounds.
        NotImplementedError
            For anything other than an integer pair.
        """
        if isinstance(key, tuple) and len(key) == 2:
            i, j = key
            if isinstance(i, int) and isinstance(j, int):
                if not self._in_bounds(i, j):
                    raise IndexError("index out of bounds")
                return self.get(i, j)
        raise NotImplementedError("only scalar (i, j) indexing is supported")

    def __setitem__(self, key, value):
        if isinstance(key, tuple) and len(key) == 2:
            i, j = key
            if isinstance(i, int) and isinstance(j, int):
                self.set(i, j, value)
                return
        raise NotImplementedError("only scalar (i, j) indexing is supported")

    def row(self, r):
        """Return row ``r`` as a list of ``(col, value)`` pairs, ascending by col."""
        if not 0 <= r < self.shape[0]:
            raise IndexError("row index out of bounds")
        cols, vals = self._chain_parts(r)
        return list(zip(cols, vals))

    def items(self):
        """Iterate ``(row, col, value)`` in row-major, ascending-column order."""
        for r, chain in enumerate(self._rows):
            if chain is None:
                continue
            for c, v in zip(chain.cols, chain.vals):
                yield r, c, v

    def preview(self, limit=None):
        """Return the first ``limit`` stored entries (default 10) as a list."""
        if limit is None:
            limit = get_preview_limit()
        return list(islice(self.items(), limit))

    def copy(self):
        """Return an independent copy."""
        out = RowListMatrix(*self.shape)
        for r, chain in enumerate(self._rows):
            if chain is not None:
                out._set_row(r, list(chain.cols), list(chain.vals))
        return out

    def __add__(self, other):
        if isinstance(other, RowListMatrix):
            from ..ops import add

            return add(self, other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, RowListMatrix):
            from ..ops import subtract

            return subtract(self, other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, RowListMatrix):
            from ..ops import multiply

            return multiply(self, other)
        return NotImplemented

    def __repr__(self):
        return f"RowListMatrix(shape={self.shape}, nnz={self._nnz})"
