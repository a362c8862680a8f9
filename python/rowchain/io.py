"""Reading and writing matrices in the coordinate-list text format.

The loader is deliberately lenient: headers that understate the data are
grown to fit, malformed numbers read as 0, and entries that cannot be stored
are skipped. Only an unreadable source is an error.
"""

import logging
import os

from .errors import MatrixLoadError
from .parsing import parse_entry, parse_header, strip_whitespace
from .sparse.rowlist import RowListMatrix

logger = logging.getLogger(__name__)

# non-blank lines before this index are the rows=/cols= headers
_HEADER_LINES = 2


def _decode(line):
    if isinstance(line, bytes):
        return line.decode("utf-8")
    return line


def _read_lines(source):
    if isinstance(source, (str, os.PathLike)):
        try:
            with open(source, "r", encoding="utf-8") as f:
                raw = f.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise MatrixLoadError(os.fspath(source), exc) from exc
    else:
        try:
            raw = [_decode(line) for line in source]
        except (OSError, UnicodeDecodeError) as exc:
            raise MatrixLoadError(getattr(source, "name", source), exc) from exc
    stripped = (strip_whitespace(line) for line in raw)
    return [line for line in stripped if line]


def _scan_dimensions(lines):
    declared_rows = declared_cols = 0
    actual_rows = actual_cols = 0
    for index, line in enumerate(lines):
        if index == 0 and line.startswith("rows="):
            declared_rows = parse_header(line, "rows")
            continue
        if index == 1 and line.startswith("cols="):
            declared_cols = parse_header(line, "cols")
            continue
        entry = parse_entry(line)
        if entry is not None:
            actual_rows = max(actual_rows, entry.row + 1)
            actual_cols = max(actual_cols, entry.col + 1)
    return (declared_rows, declared_cols), (actual_rows, actual_cols)


def _build(lines, name):
    declared, actual = _scan_dimensions(lines)
    nrows = max(declared[0], actual[0])
    ncols = max(declared[1], actual[1])
    logger.info(
        "Matrix dimensions for %s: %dx%d (declared: %dx%d, actual: %dx%d)",
        name,
        nrows,
        ncols,
        declared[0],
        declared[1],
        actual[0],
        actual[1],
    )

    matrix = RowListMatrix(nrows, ncols)
    dropped = 0
    for index, line in enumerate(lines):
        if index < _HEADER_LINES:
            continue
        entry = parse_entry(line)
        if entry is None:
            continue
        row, col, value = entry
        if value != 0 and 0 <= row < nrows and 0 <= col < ncols:
            matrix.set(row, col, value)
        else:
            dropped += 1
            logger.debug("Dropping entry %r from %s", entry, name)
    logger.info("Loaded %d non-zero elements from %s (%d dropped)", matrix.nnz, name, dropped)
    return matrix


def load(source):
    """Load a matrix from a file path, text stream or iterable of lines.

    Parameters
    ----------
    source : str, os.PathLike, or iterable of str
        Where to read the matrix from.

    Returns
    -------
    RowListMatrix
        Matrix whose shape is the larger of the declared header and the
        extent of the data lines.

    Raises
    ------
    MatrixLoadError
        If the source cannot be opened, read or decoded.
    """
    lines = _read_lines(source)
    if isinstance(source, (str, os.PathLike)):
        name = os.fspath(source)
    else:
        name = getattr(source, "name", "<stream>")
    return _build(lines, name)


def loads(text):
    """Load a matrix from a string in the coordinate-list format."""
    return _build(_read_lines(text.splitlines()), "<string>")


def _format_lines(matrix):
    yield f"rows={matrix.nrows}\n"
    yield f"cols={matrix.ncols}\n"
    for r, c, v in matrix.items():
        yield f"({r}, {c}, {v})\n"


def dumps(matrix):
    """Return ``matrix`` serialized in the coordinate-list format."""
    return "".join(_format_lines(matrix))


def save(matrix, sink):
    """Write ``matrix`` to a file path or writable text stream.

    Entries are written in row-major, ascending-column order, one
    ``(row, col, value)`` per line, after the ``rows=`` and ``cols=``
    headers. ``OSError`` from the sink propagates.
    """
    if isinstance(sink, (str, os.PathLike)):
        with open(sink, "w", encoding="utf-8") as f:
            f.writelines(_format_lines(matrix))
        logger.info("Saved %r to %s", matrix, os.fspath(sink))
        return
    sink.writelines(_format_lines(matrix))
