"""
Tests for the generic algorithms in matrix/ops.py.

Each algorithm is exercised on owning matrices and on strided views
(leading dimension larger than the row count), since the whole point of
the library is that both behave identically.
"""

from fractions import Fraction
import warnings

import numpy as np
import pytest

from pylibmat import (
    Matrix,
    MatrixConstView,
    MatrixView,
    add,
    col_copy,
    col_set,
    copy_lower_to_upper,
    copy_upper_to_lower,
    get_col,
    get_row,
    is_diff,
    is_diff_sym,
    negate,
    nrminf,
    row_copy,
    set_identity,
    sub,
    transpose,
)
from pylibmat.core.config import ROUNDOFF
from pylibmat.core.exceptions import (
    DimensionError,
    IndexBoundsError,
    ReadOnlyError,
    ValidationError,
)


def padded(values):
    """(parent, view): values copied into a view of a larger NaN-filled parent."""
    values = np.asarray(values, dtype=np.float64)
    rows, cols = values.shape
    parent = Matrix(rows + 3, cols + 2)
    parent.set_all(np.nan)
    view = MatrixView(parent, 2, 1, rows, cols)
    view.data[...] = values
    return parent, view


def embedded(values):
    """MatrixView over a copy of values with ld > rows."""
    return padded(values)[1]


# ═══════════════════════════════════════════════════════════════════════
# get_col / get_row
# ═══════════════════════════════════════════════════════════════════════


class TestRowColAccess:

    def test_get_col_is_view(self, counting_matrix):
        m = counting_matrix(3, 4)
        col = get_col(m, 2)
        np.testing.assert_array_equal(col, [2, 12, 22])
        col[0] = -5.0
        assert m[0, 2] == -5.0

    def test_get_row_stride_is_ld(self, counting_matrix):
        m = counting_matrix(3, 4)
        row = get_row(m, 1)
        np.testing.assert_array_equal(row, [10, 11, 12, 13])
        assert row.strides == (3 * 8,)

    def test_get_row_from_strided_view(self, counting_matrix):
        view = MatrixView(counting_matrix(5, 5), 1, 1, 2, 3)
        np.testing.assert_array_equal(get_row(view, 1), [21, 22, 23])

    def test_const_source_gives_readonly_vector(self):
        view = MatrixConstView(Matrix(3), 0, 0, 3, 3)
        assert not get_col(view, 0).flags.writeable
        assert not get_row(view, 0).flags.writeable

    def test_index_out_of_range(self):
        with pytest.raises(IndexBoundsError):
            get_col(Matrix(3, 2), 2)
        with pytest.raises(IndexBoundsError):
            get_row(Matrix(3, 2), 3)


# ═══════════════════════════════════════════════════════════════════════
# col_copy / row_copy / col_set
# ═══════════════════════════════════════════════════════════════════════


class TestColCopy:

    def test_whole_column(self, counting_matrix):
        src = counting_matrix(3, 3)
        dest = Matrix(3, 2)
        col_copy(src, 2, dest, 0)
        np.testing.assert_array_equal(dest.data[:, 0], [2, 12, 22])
        np.testing.assert_array_equal(dest.data[:, 1], 0.0)

    def test_whole_column_into_view(self, counting_matrix):
        dest = embedded(np.zeros((3, 2)))
        col_copy(counting_matrix(3, 3), 1, dest, 1)
        np.testing.assert_array_equal(dest.data[:, 1], [1, 11, 21])

    def test_whole_column_row_mismatch(self):
        with pytest.raises(DimensionError):
            col_copy(Matrix(3, 1), 0, Matrix(4, 1), 0)

    def test_sub_range(self, counting_matrix):
        src = counting_matrix(4, 2)
        dest = Matrix(5, 3)
        col_copy(src, 1, dest, 2, row_offset_src=1, row_nb=2, row_offset_dest=3)
        np.testing.assert_array_equal(dest.data[:, 2], [0, 0, 0, 11, 21])

    def test_sub_range_overrun(self):
        with pytest.raises(IndexBoundsError):
            col_copy(Matrix(4, 1), 0, Matrix(4, 1), 0,
                     row_offset_src=0, row_nb=2, row_offset_dest=3)

    def test_offsets_without_count(self):
        with pytest.raises(ValidationError, match="require row_nb"):
            col_copy(Matrix(4, 1), 0, Matrix(4, 1), 0, row_offset_src=1)

    def test_column_index_checked(self):
        with pytest.raises(IndexBoundsError):
            col_copy(Matrix(2, 2), 2, Matrix(2, 2), 0)

    def test_readonly_destination(self):
        ro = MatrixConstView(Matrix(2), 0, 0, 2, 2)
        with pytest.raises(ReadOnlyError):
            col_copy(Matrix(2), 0, ro, 0)


class TestRowCopy:

    def test_copies_row(self, counting_matrix):
        src = counting_matrix(3, 4)
        dest = embedded(np.zeros((2, 4)))
        row_copy(src, 2, dest, 1)
        np.testing.assert_array_equal(dest.data, [[0, 0, 0, 0], [20, 21, 22, 23]])

    def test_column_mismatch(self):
        with pytest.raises(DimensionError):
            row_copy(Matrix(2, 3), 0, Matrix(2, 4), 0)

    def test_row_index_checked(self):
        with pytest.raises(IndexBoundsError):
            row_copy(Matrix(2, 3), 0, Matrix(2, 3), 2)


class TestColSet:

    def test_fills_range(self):
        m = Matrix(5, 2)
        col_set(m, 1, 1, 3, 4.0)
        np.testing.assert_array_equal(m.data[:, 1], [0, 4, 4, 4, 0])
        np.testing.assert_array_equal(m.data[:, 0], 0.0)

    def test_range_checked(self):
        with pytest.raises(IndexBoundsError):
            col_set(Matrix(3, 1), 0, 2, 2, 1.0)


# ═══════════════════════════════════════════════════════════════════════
# Triangles, identity, transpose
# ═══════════════════════════════════════════════════════════════════════


class TestSymmetrise:

    def test_upper_to_lower(self, random_matrix):
        m = random_matrix(4)
        upper = np.triu(m.to_numpy())
        copy_upper_to_lower(m)
        np.testing.assert_array_equal(m.data, upper + np.triu(upper, 1).T)

    def test_lower_to_upper(self, random_matrix):
        m = random_matrix(4)
        lower = np.tril(m.to_numpy())
        copy_lower_to_upper(m)
        np.testing.assert_array_equal(m.data, lower + np.tril(lower, -1).T)

    def test_round_trip_idempotent_on_symmetric(self, random_matrix):
        a = random_matrix(5).to_numpy()
        m = Matrix.from_array(a + a.T)
        before = m.to_numpy()
        copy_upper_to_lower(m)
        copy_lower_to_upper(m)
        np.testing.assert_array_equal(m.data, before)

    def test_round_trip_on_asymmetric_keeps_upper(self, random_matrix):
        m = random_matrix(4)
        original = m.to_numpy()
        copy_upper_to_lower(m)
        copy_lower_to_upper(m)
        lower = np.tril_indices(4, -1)
        np.testing.assert_array_equal(m.data[lower], original.T[lower])
        np.testing.assert_array_equal(m.data, m.data.T)

    def test_rectangular_uses_leading_block(self, counting_matrix):
        m = counting_matrix(2, 4)
        copy_upper_to_lower(m)
        np.testing.assert_array_equal(m.data, [[0, 1, 2, 3], [1, 11, 12, 13]])

    def test_strided_view(self, random_matrix):
        values = random_matrix(3).to_numpy()
        parent, view = padded(values)
        copy_upper_to_lower(view)
        np.testing.assert_array_equal(view.data, np.triu(values) + np.triu(values, 1).T)
        assert np.isnan(parent.data).sum() == 6 * 5 - 9


class TestSetIdentity:

    def test_wide_matrix(self, random_matrix):
        m = random_matrix(3, 4)
        set_identity(m)
        expected = np.zeros((3, 4))
        expected[0, 0] = expected[1, 1] = expected[2, 2] = 1.0
        np.testing.assert_array_equal(m.data, expected)
        np.testing.assert_array_equal(m.data[:, 3], 0.0)

    def test_tall_view(self):
        view = embedded(np.full((4, 2), 7.0))
        set_identity(view)
        np.testing.assert_array_equal(view.data, np.eye(4, 2))


class TestTranspose:

    def test_in_place_twice_restores(self, random_matrix):
        m = random_matrix(5)
        original = m.to_numpy()
        transpose(m)
        np.testing.assert_array_equal(m.data, original.T)
        transpose(m)
        np.testing.assert_array_equal(m.data, original)

    def test_in_place_on_view(self, counting_matrix):
        parent = counting_matrix(4, 4)
        view = MatrixView(parent, 1, 1, 3, 3)
        transpose(view)
        np.testing.assert_array_equal(view.data, [[11, 21, 31], [12, 22, 32], [13, 23, 33]])
        assert parent[0, 0] == 0.0

    def test_in_place_requires_square(self):
        with pytest.raises(DimensionError, match="square"):
            transpose(Matrix(2, 3))

    def test_out_of_place_rectangular(self, random_matrix):
        src = random_matrix(2, 5)
        dest = Matrix(5, 2)
        transpose(dest, src)
        np.testing.assert_array_equal(dest.data, src.data.T)

    def test_out_of_place_from_const_view(self, counting_matrix):
        src = MatrixConstView(counting_matrix(4, 4), 0, 1, 2, 3)
        dest = embedded(np.zeros((3, 2)))
        transpose(dest, src)
        np.testing.assert_array_equal(dest.data, [[1, 11], [2, 12], [3, 13]])

    def test_out_of_place_shape_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            transpose(Matrix(2, 5), Matrix(2, 5))
        assert exc_info.value.expected == (5, 2)


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_matrix_different_ld(self, random_matrix):
        a = random_matrix(3, 4)
        b_values = random_matrix(3, 4).to_numpy()
        expected = a.to_numpy() + b_values
        add(a, embedded(b_values))
        np.testing.assert_array_equal(a.data, expected)

    def test_sub_matrix(self, random_matrix):
        a = random_matrix(3, 2)
        b = random_matrix(3, 2)
        expected = a.to_numpy() - b.to_numpy()
        sub(a, b)
        np.testing.assert_array_equal(a.data, expected)

    def test_add_then_sub_scalar_restores(self, random_matrix):
        m = random_matrix(4, 3)
        original = m.to_numpy()
        add(m, 3.7)
        sub(m, 3.7)
        assert not is_diff(m, Matrix.from_array(original), ROUNDOFF.atol)

    def test_scalar_on_view_leaves_padding(self):
        parent, view = padded(np.zeros((2, 2)))
        add(view, 1.0)
        np.testing.assert_array_equal(view.data, 1.0)
        assert np.isnan(parent.data).sum() == 5 * 4 - 4

    def test_numpy_scalar(self):
        m = Matrix(2)
        add(m, np.float64(2.0))
        np.testing.assert_array_equal(m.data, 2.0)

    def test_rational_scalar(self):
        m = Matrix(2, 3)
        add(m, Fraction(1, 2))
        np.testing.assert_array_equal(m.data, 0.5)
        sub(m, Fraction(3, 4))
        np.testing.assert_array_equal(m.data, -0.25)
        assert m.data.dtype == np.float64

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            add(Matrix(2, 3), Matrix(3, 2))
        with pytest.raises(DimensionError):
            sub(Matrix(2, 3), Matrix(2, 2))

    def test_readonly_target(self):
        ro = MatrixConstView(Matrix(2), 0, 0, 2, 2)
        with pytest.raises(ReadOnlyError):
            add(ro, 1.0)
        with pytest.raises(ReadOnlyError):
            sub(ro, Matrix(2))

    def test_rejects_non_matrix_operand(self):
        with pytest.raises(ValidationError):
            add(Matrix(2), np.ones((2, 2)))

    def test_negate(self, random_matrix):
        m = random_matrix(3, 3)
        original = m.to_numpy()
        negate(m)
        np.testing.assert_array_equal(m.data, -original)


# ═══════════════════════════════════════════════════════════════════════
# nrminf
# ═══════════════════════════════════════════════════════════════════════


class TestNrminf:

    @pytest.mark.parametrize("rows,cols", [(1, 1), (3, 7), (8, 2), (6, 6)])
    def test_matches_brute_force(self, random_matrix, rows, cols):
        m = random_matrix(rows, cols)
        expected = max(abs(m[i, j]) for i in range(rows) for j in range(cols))
        assert nrminf(m) == expected

    def test_negative_entry_dominates(self):
        m = Matrix.from_array([[1.0, -9.0], [3.0, 2.0]])
        assert nrminf(m) == 9.0

    def test_ignores_padding(self):
        # padding is NaN; must neither warn nor leak into the result
        view = embedded([[1.0, -2.0]])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert nrminf(view) == 2.0

    def test_empty_matrix(self):
        assert nrminf(Matrix(0, 3)) == 0.0

    def test_nan_skipped_with_warning(self):
        m = Matrix.from_array([[np.nan, -4.0], [1.0, 2.0]])
        with pytest.warns(RuntimeWarning, match="1 NaN"):
            assert nrminf(m) == 4.0

    def test_returns_python_float(self):
        assert type(nrminf(Matrix(2))) is float


# ═══════════════════════════════════════════════════════════════════════
# is_diff / is_diff_sym
# ═══════════════════════════════════════════════════════════════════════


class TestIsDiff:

    def test_identical(self, random_matrix):
        m = random_matrix(4, 3)
        assert not is_diff(m, m, 0.0)
        assert not is_diff(m, m.copy())

    @pytest.mark.parametrize("delta,tol,expected", [
        (1e-3, 0.0, True),
        (1e-3, 1e-2, False),
        (1e-3, 1e-4, True),
        (0.5, 0.5, False),
    ])
    def test_single_entry(self, delta, tol, expected):
        m = Matrix.from_array([[0.0, 1.0], [2.0, 3.0]])
        m2 = m.copy()
        m2[1, 0] += delta
        assert is_diff(m, m2, tol) is expected

    def test_view_vs_matrix(self, random_matrix):
        m = random_matrix(3, 2)
        view = embedded(m.to_numpy())
        assert not is_diff(m, view)
        view[2, 1] += 1.0
        assert is_diff(view, m)

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            is_diff(Matrix(2, 3), Matrix(3, 2))


class TestIsDiffSym:

    def test_identical(self, random_matrix):
        m = random_matrix(4)
        assert not is_diff_sym(m, m.copy())

    @pytest.mark.parametrize("i,j", [(0, 0), (2, 2), (0, 3), (1, 2), (3, 3)])
    def test_upper_triangle_and_diagonal_detected(self, i, j):
        a = Matrix(4)
        b = Matrix(4)
        b[i, j] = 1.0
        assert is_diff_sym(a, b)
        assert not is_diff_sym(a, b, tol=1.0)

    @pytest.mark.parametrize("i,j", [(1, 0), (3, 0), (3, 2)])
    def test_lower_triangle_ignored(self, i, j):
        a = Matrix(4)
        b = Matrix(4)
        b[i, j] = 1.0
        assert not is_diff_sym(a, b)

    def test_exactly_upper_triangle_compared(self):
        n = 5
        for i in range(n):
            for j in range(n):
                b = Matrix(n)
                b[i, j] = 1.0
                assert is_diff_sym(Matrix(n), b) is (j >= i), (i, j)

    def test_strided_operands(self, random_matrix):
        m = random_matrix(3)
        view = embedded(m.to_numpy())
        assert not is_diff_sym(view, m)
        view[0, 2] += 1e-6
        assert is_diff_sym(m, view)
        assert not is_diff_sym(m, view, tol=1e-5)

    def test_requires_square(self):
        with pytest.raises(DimensionError, match="square"):
            is_diff_sym(Matrix(2, 3), Matrix(2, 3))

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError):
            is_diff_sym(Matrix(3), Matrix(2))
