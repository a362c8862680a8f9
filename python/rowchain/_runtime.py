import os

_DEFAULT_MAX_RESULT_CELLS = 1_000_000
_DEFAULT_PREVIEW_LIMIT = 10

_current_max_result_cells = _DEFAULT_MAX_RESULT_CELLS
_current_preview_limit = _DEFAULT_PREVIEW_LIMIT


def _env_int(name: str, fallback: int) -> int:
    env = os.environ.get(name)
    if env:
        try:
            value = int(env)
        except ValueError:
            return fallback
        if value > 0:
            return value
    return fallback


def set_max_result_cells(n: int) -> None:
    """Set the largest ``nrows * ncols`` a multiplication result may have."""
    global _current_max_result_cells
    n = int(n)
    if n <= 0:
        raise ValueError("max_result_cells must be positive")
    _current_max_result_cells = n
    os.environ.pop("ROWCHAIN_MAX_RESULT_CELLS", None)


def get_max_result_cells() -> int:
    # If user set env externally, honor it
    return _env_int("ROWCHAIN_MAX_RESULT_CELLS", _current_max_result_cells)


def set_preview_limit(n: int) -> None:
    """Set how many entries :meth:`RowListMatrix.preview` returns by default."""
    global _current_preview_limit
    n = int(n)
    if n <= 0:
        raise ValueError("preview_limit must be positive")
    _current_preview_limit = n
    os.environ.pop("ROWCHAIN_PREVIEW_LIMIT", None)


def get_preview_limit() -> int:
    return _env_int("ROWCHAIN_PREVIEW_LIMIT", _current_preview_limit)
