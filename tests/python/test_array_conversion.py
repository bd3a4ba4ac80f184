import warnings

import pytest

np = pytest.importorskip("numpy")

from fixedmatrix import FixedMatrixDTypeWarning, matrix_from_rows, matrix_of


def test_to_numpy_integers():
    m = matrix_of(2, 3, lambda r, c: r * 3 + c)
    arr = m.to_numpy()
    assert arr.shape == (2, 3)
    assert np.issubdtype(arr.dtype, np.integer)
    np.testing.assert_array_equal(arr, [[0, 1, 2], [3, 4, 5]])


def test_to_numpy_is_a_snapshot():
    m = matrix_of(2, 2, lambda r, c: 0.0)
    arr = m.to_numpy()
    m.set(0, 0, 1.0)
    arr[1, 1] = 7.0
    assert arr[0, 0] == 0.0
    assert m.get(1, 1) == 0.0


def test_asarray_with_dtype():
    m = matrix_of(2, 2, lambda r, c: r + c)
    arr = np.asarray(m, dtype=np.float32)
    assert arr.dtype == np.float32
    np.testing.assert_allclose(arr, [[0, 1], [1, 2]])


def test_to_numpy_empty_keeps_shape():
    assert matrix_of(0, 3, lambda r, c: 1).to_numpy().shape == (0, 3)
    assert matrix_of(2, 0, lambda r, c: 1).to_numpy().shape == (2, 0)


def test_mixed_cells_fall_back_to_object_with_warning():
    m = matrix_of(1, 2, lambda r, c: [1, None][c])
    with pytest.warns(FixedMatrixDTypeWarning):
        arr = m.to_numpy()
    assert arr.dtype == object
    assert arr.shape == (1, 2)
    assert arr[0, 1] is None


def test_sequence_cells_stay_cells():
    m = matrix_of(1, 2, lambda r, c: [r, c])
    with pytest.warns(FixedMatrixDTypeWarning):
        arr = m.to_numpy()
    assert arr.shape == (1, 2)
    assert arr[0, 1] == [0, 1]


def test_explicit_object_dtype_does_not_warn():
    m = matrix_of(1, 2, lambda r, c: [r, c])
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        arr = m.to_numpy(dtype=object)
    assert arr[0, 0] == [0, 0]


def test_explicit_dtype_mismatch_raises():
    m = matrix_of(1, 1, lambda r, c: "not a number")
    with pytest.raises(ValueError):
        m.to_numpy(dtype=np.float64)


def test_from_numpy_array():
    arr = np.arange(6).reshape(2, 3)
    m = matrix_from_rows(arr)
    assert m.shape == (2, 3)
    assert list(m) == [0, 1, 2, 3, 4, 5]
    assert type(m.get(0, 0)) is int

    arr[0, 0] = 100
    assert m.get(0, 0) == 0


def test_from_numpy_rejects_non_2d():
    with pytest.raises(ValueError):
        matrix_from_rows(np.zeros(3))
    with pytest.raises(ValueError):
        matrix_from_rows(np.zeros((2, 2, 2)))


def test_numpy_integer_subscripts():
    m = matrix_of(2, 2, lambda r, c: r * 2 + c)
    assert m[np.int64(1), np.int32(0)] == 2


def test_preview_formats_numpy_scalars():
    m = matrix_of(1, 2, lambda r, c: np.float32(0.5) if c else np.int16(3))
    assert m.preview() == "Matrix(shape=(1, 2))\n[\n [3 0.5]\n]"


def test_asarray_refuses_copy_free_view():
    m = matrix_of(2, 2, lambda r, c: r + c)
    with pytest.raises(ValueError):
        m.__array__(copy=False)
    if int(np.__version__.split(".")[0]) >= 2:
        with pytest.raises(ValueError):
            np.asarray(m, copy=False)


def test_asarray_copy_true_still_converts():
    m = matrix_of(1, 2, lambda r, c: c)
    np.testing.assert_array_equal(m.__array__(copy=True), [[0, 1]])


def test_from_list_of_numpy_rows():
    m = matrix_from_rows([np.array([1, 2]), np.array([3, 4])])
    assert m.shape == (2, 2)
    assert list(m) == [1, 2, 3, 4]
    assert type(m.get(1, 0)) is int


def test_from_numpy_rows_rejects_ragged_and_nested():
    with pytest.raises(ValueError):
        matrix_from_rows([np.array([1, 2]), np.array([3])])
    with pytest.raises(ValueError):
        matrix_from_rows([np.zeros((2, 2))])
