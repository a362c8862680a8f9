"""Exception types raised by rowchain.

Only a failed load aborts work. Arithmetic refuses incompatible operands with
an :class:`OperationError` subclass and never returns a partial result.
Malformed lines in a matrix file are not errors at all; the parser degrades
them to zero and the loader drops what cannot be stored.
"""


class RowChainError(Exception):
    """Base class for all rowchain errors."""


class MatrixLoadError(RowChainError, OSError):
    """The matrix source could not be opened, read or decoded."""

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"cannot load matrix from {source!r}: {reason}")


class OperationError(RowChainError, ValueError):
    """An arithmetic operation refused its operands.

    Attributes
    ----------
    kind : str
        ``"dimension_mismatch"`` or ``"too_large"``.
    """

    kind = None


class DimensionMismatchError(OperationError):
    """Operand shapes are incompatible for the requested operation."""

    kind = "dimension_mismatch"

    def __init__(self, operation, left_shape, right_shape, message=None):
        self.operation = operation
        self.left_shape = tuple(left_shape)
        self.right_shape = tuple(right_shape)
        if message is None:
            message = (
                f"matrix dimensions don't match for {operation}: "
                f"{_fmt(self.left_shape)} vs {_fmt(self.right_shape)}"
            )
        super().__init__(message)


class SizeGuardExceededError(OperationError):
    """A multiplication result would have more cells than allowed."""

    kind = "too_large"

    def __init__(self, shape, limit):
        self.shape = tuple(shape)
        self.cells = self.shape[0] * self.shape[1]
        self.limit = limit
        super().__init__(
            f"result matrix would be too large ({_fmt(self.shape)} = {self.cells} "
            f"elements, maximum supported size is {limit})"
        )


def _fmt(shape):
    return f"{shape[0]}x{shape[1]}"
