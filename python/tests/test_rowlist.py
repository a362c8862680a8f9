import numpy as np
import pytest

from rowchain import set_preview_limit
from rowchain.sparse import RowListMatrix


def make_simple():
    # A = [[1,0,2],[0,3,0]]
    A = RowListMatrix(2, 3)
    A.set(0, 2, 2)
    A.set(1, 1, 3)
    A.set(0, 0, 1)
    return A


def test_shape_and_counts():
    A = make_simple()
    assert A.shape == (2, 3)
    assert A.nrows == 2
    assert A.ncols == 3
    assert A.nnz == 3
    assert repr(A) == "RowListMatrix(shape=(2, 3), nnz=3)"


def test_empty_matrix():
    A = RowListMatrix(0, 0)
    assert A.nnz == 0
    assert list(A.items()) == []
    assert A.toarray().shape == (0, 0)


def test_negative_shape_rejected():
    with pytest.raises(ValueError):
        RowListMatrix(-1, 3)


def test_get_values():
    A = make_simple()
    assert A.get(0, 0) == 1
    assert A.get(0, 1) == 0
    assert A.get(0, 2) == 2
    assert A.get(1, 1) == 3
    assert A.get(1, 2) == 0


def test_get_out_of_bounds_is_zero():
    A = make_simple()
    assert A.get(-1, 0) == 0
    assert A.get(2, 0) == 0
    assert A.get(0, 3) == 0


def test_row_chain_sorted_by_column():
    A = RowListMatrix(1, 10)
    for c in [7, 2, 9, 0, 5]:
        A.set(0, c, c + 1)
    assert A.row(0) == [(0, 1), (2, 3), (5, 6), (7, 8), (9, 10)]


def test_overwrite_keeps_nnz():
    A = make_simple()
    A.set(0, 2, 42)
    assert A.get(0, 2) == 42
    assert A.nnz == 3


def test_set_out_of_bounds_is_noop():
    A = make_simple()
    A.set(5, 0, 1)
    A.set(0, -1, 1)
    assert A.nnz == 3


def test_set_zero_removes_entry():
    A = make_simple()
    A.set(0, 0, 0)
    assert A.get(0, 0) == 0
    assert A.nnz == 2
    assert A.row(0) == [(2, 2)]


def test_set_zero_on_absent_entry():
    A = make_simple()
    before = A.nnz
    A.set(1, 0, 0)
    assert A.nnz == before
    assert A.get(1, 0) == 0


def test_set_zero_empties_row():
    A = make_simple()
    A.set(1, 1, 0)
    assert A.row(1) == []
    assert A.nnz == 2


def test_indexing():
    A = make_simple()
    assert A[0, 2] == 2
    assert A[1, 0] == 0
    A[1, 0] = -4
    assert A.get(1, 0) == -4
    with pytest.raises(IndexError):
        A[2, 0]
    with pytest.raises(NotImplementedError):
        A[0]


def test_row_out_of_bounds():
    A = make_simple()
    with pytest.raises(IndexError):
        A.row(2)


def test_items_row_major():
    A = RowListMatrix(3, 3)
    A.set(2, 0, 1)
    A.set(0, 2, 2)
    A.set(0, 1, 3)
    A.set(1, 1, 4)
    assert list(A.items()) == [(0, 1, 3), (0, 2, 2), (1, 1, 4), (2, 0, 1)]


def test_preview_limits():
    A = RowListMatrix(4, 4)
    for r in range(4):
        for c in range(4):
            A.set(r, c, r * 4 + c + 1)
    assert len(A.preview()) == 10
    assert A.preview()[0] == (0, 0, 1)
    assert A.preview(3) == [(0, 0, 1), (0, 1, 2), (0, 2, 3)]
    set_preview_limit(5)
    assert len(A.preview()) == 5


def test_toarray_and_from_dense():
    A = make_simple()
    dense = np.array([[1, 0, 2], [0, 3, 0]])
    np.testing.assert_array_equal(A.toarray(), dense)
    B = RowListMatrix.from_dense(dense)
    assert B.nnz == 3
    assert list(B.items()) == list(A.items())


def test_from_dense_requires_2d():
    with pytest.raises(ValueError):
        RowListMatrix.from_dense([1, 2, 3])


def test_from_entries_and_eye():
    A = RowListMatrix.from_entries((2, 2), [(0, 0, 5), (1, 1, 0), (0, 0, 6), (3, 3, 1)])
    assert list(A.items()) == [(0, 0, 6)]
    I = RowListMatrix.eye(3)
    assert I.nnz == 3
    np.testing.assert_array_equal(I.toarray(), np.eye(3, dtype=np.int64))


def test_copy_is_independent():
    A = make_simple()
    B = A.copy()
    B.set(0, 0, 9)
    B.set(1, 2, 1)
    assert A.get(0, 0) == 1
    assert A.get(1, 2) == 0
    assert A.nnz == 3
    assert B.nnz == 4


def test_from_dense_rejects_float_array():
    with pytest.raises(ValueError):
        RowListMatrix.from_dense(np.array([[0.5, 0.0]]))


def test_from_dense_accepts_bool_array():
    A = RowListMatrix.from_dense(np.array([[True, False], [False, True]]))
    assert list(A.items()) == [(0, 0, 1), (1, 1, 1)]


def test_set_rejects_non_integral_value():
    A = RowListMatrix(1, 1)
    with pytest.raises(ValueError):
        A.set(0, 0, 2.7)
    assert A.nnz == 0


def test_set_accepts_integral_values():
    A = RowListMatrix(1, 3)
    A.set(0, 0, 3.0)
    A.set(0, 1, np.int64(-4))
    A.set(0, 2, 0.0)
    assert list(A.items()) == [(0, 0, 3), (0, 1, -4)]
    assert all(type(v) is int for _, _, v in A.items())


def test_toarray_values_beyond_int64():
    A = RowListMatrix(2, 2)
    big = 99999999999999999999
    A.set(0, 0, big)
    A.set(1, 1, 2)
    dense = A.toarray()
    assert dense.dtype == object
    assert dense[0, 0] == big
    assert dense[1, 1] == 2
    assert dense[0, 1] == 0
