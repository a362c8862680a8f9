import pytest

from rowchain import set_max_result_cells, set_preview_limit


@pytest.fixture(autouse=True)
def _reset_runtime(monkeypatch):
    monkeypatch.delenv("ROWCHAIN_MAX_RESULT_CELLS", raising=False)
    monkeypatch.delenv("ROWCHAIN_PREVIEW_LIMIT", raising=False)
    yield
    set_max_result_cells(1_000_000)
    set_preview_limit(10)
