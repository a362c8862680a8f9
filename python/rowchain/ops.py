"""Exact integer arithmetic on :class:`~rowchain.sparse.RowListMatrix`.

All functions read their operands and return a new matrix. Incompatible
operands raise an :class:`~rowchain.errors.OperationError` subclass.
"""

import logging

from ._runtime import get_max_result_cells
from .errors import DimensionMismatchError, SizeGuardExceededError
from .sparse.rowlist import RowListMatrix

logger = logging.getLogger(__name__)

_PROGRESS_EVERY = 100


def _merge_rows(a_cols, a_vals, b_cols, b_vals, sign):
    cols, vals = [], []
    i = j = 0
    na, nb = len(a_cols), len(b_cols)
    while i < na and j < nb:
        ca, cb = a_cols[i], b_cols[j]
        if ca < cb:
            cols.append(ca)
            vals.append(a_vals[i])
            i += 1
        elif cb < ca:
            cols.append(cb)
            vals.append(sign * b_vals[j])
            j += 1
        else:
            v = a_vals[i] + sign * b_vals[j]
            if v != 0:
                cols.append(ca)
                vals.append(v)
            i += 1
            j += 1
    if i < na:
        cols.extend(a_cols[i:])
        vals.extend(a_vals[i:])
    if j < nb:
        cols.extend(b_cols[j:])
        vals.extend(sign * v for v in b_vals[j:])
    return cols, vals


def _elementwise(a, b, sign, operation):
    if a.shape != b.shape:
        raise DimensionMismatchError(operation, a.shape, b.shape)
    result = RowListMatrix(*a.shape)
    for r in range(a.nrows):
        a_cols, a_vals = a._chain_parts(r)
        b_cols, b_vals = b._chain_parts(r)
        if not a_cols and not b_cols:
            continue
        cols, vals = _merge_rows(a_cols, a_vals, b_cols, b_vals, sign)
        if cols:
            result._set_row(r, cols, vals)
    return result


def add(a, b):
    """Elementwise sum ``a + b``.

    Parameters
    ----------
    a, b : RowListMatrix
        Operands of identical shape.

    Returns
    -------
    RowListMatrix
        New matrix; entries that cancel to 0 are not stored.

    Raises
    ------
    DimensionMismatchError
        If the shapes differ.
    """
    return _elementwise(a, b, 1, "addition")


def subtract(a, b):
    """Elementwise difference ``a - b``. Same contract as :func:`add`."""
    return _elementwise(a, b, -1, "subtraction")


def _contraction_length(a, b):
    if a.ncols == b.nrows:
        return a.ncols
    if abs(a.ncols - b.nrows) == 1:
        inner = min(a.ncols, b.nrows)
        logger.warning(
            "Dimension mismatch by 1 (A cols: %d, B rows: %d); using compatible dimension %d",
            a.ncols,
            b.nrows,
            inner,
        )
        return inner
    raise DimensionMismatchError(
        "multiplication",
        a.shape,
        b.shape,
        message=(
            f"matrix dimensions don't match for multiplication: columns of A ({a.ncols}) "
            f"must equal rows of B ({b.nrows})"
        ),
    )


def multiply(a, b):
    """Matrix product ``a @ b``.

    Parameters
    ----------
    a : RowListMatrix
        Left operand, shape ``(m, k)``.
    b : RowListMatrix
        Right operand, shape ``(k, n)``.

    Returns
    -------
    RowListMatrix
        New matrix of shape ``(m, n)``.

    Raises
    ------
    DimensionMismatchError
        If ``a.ncols`` and ``b.nrows`` differ by more than 1.
    SizeGuardExceededError
        If ``m * n`` exceeds :func:`rowchain.get_max_result_cells`.

    Notes
    -----
    When ``a.ncols`` and ``b.nrows`` differ by exactly 1 the product is
    still computed, contracting over ``min(a.ncols, b.nrows)`` and logging a
    warning. Terms of ``a`` at columns past that length are ignored.

    Each output cell is a dot product of ``a``'s row chain against ``b``
    looked up with :meth:`RowListMatrix.get`, so work is bounded by
    ``m * n * nnz_per_row``; the size guard keeps that finite.
    """
    inner = _contraction_length(a, b)
    limit = get_max_result_cells()
    if a.nrows * b.ncols > limit:
        raise SizeGuardExceededError((a.nrows, b.ncols), limit)

    result = RowListMatrix(a.nrows, b.ncols)
    logger.debug("Multiplying %dx%d by %dx%d", a.nrows, a.ncols, b.nrows, b.ncols)
    for i in range(a.nrows):
        a_cols, a_vals = a._chain_parts(i)
        if not a_cols:
            continue
        if i % _PROGRESS_EVERY == 0 and i > 0:
            logger.debug("Processed %d/%d rows (%d%%)", i, a.nrows, i * 100 // a.nrows)
        terms = [(k, v) for k, v in zip(a_cols, a_vals) if k < inner]
        if not terms:
            continue
        cols, vals = [], []
        for j in range(b.ncols):
            dot = 0
            for k, v in terms:
                bv = b.get(k, j)
                if bv != 0:
                    dot += v * bv
            if dot != 0:
                cols.append(j)
                vals.append(dot)
        if cols:
            result._set_row(i, cols, vals)
    logger.info("Multiplication completed: %d non-zero elements", result.nnz)
    return result
