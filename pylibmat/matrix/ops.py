"""
Generic algorithms over the matrix concept.

Every function accepts any mix of Matrix, MatrixView and MatrixConstView
(anything satisfying MatrixLike / MutableMatrixLike) and works on the
strided ``data`` arrays, so differing leading dimensions between operands
are handled transparently. Results are written in place into the
destination argument; only norms and predicates return a value.

All shape and index contracts are checked on every call and raise
DimensionError / IndexBoundsError / ReadOnlyError (see core.exceptions).

Functions:
    get_col, get_row: 1-D numpy views over a column or row
    col_copy, row_copy, col_set: column/row primitives
    copy_upper_to_lower, copy_lower_to_upper: symmetrise
    set_identity: zero then unit diagonal
    transpose: in place (square) or into another matrix
    add, sub, negate: elementwise arithmetic
    nrminf: largest absolute entry
    is_diff, is_diff_sym: tolerance-based difference tests
"""

from __future__ import annotations

import numbers
import warnings

import numpy as np
from numpy.typing import NDArray

from pylibmat.core.config import DEFAULT_DIFF_TOL
from pylibmat.core.exceptions import DimensionError, ValidationError
from pylibmat.core.protocols import MatrixLike, MutableMatrixLike
from pylibmat.core.validation import (
    check_index,
    check_matrix,
    check_mutable,
    check_range,
    check_same_cols,
    check_same_rows,
    check_same_shape,
    check_square,
)


# ═══════════════════════════════════════════════════════════════════════
# Row / column access
# ═══════════════════════════════════════════════════════════════════════


def get_col(m: MatrixLike, j: int) -> NDArray[np.float64]:
    """
    1-D view over column j (unit stride).

    The view is writeable exactly when m is.
    """
    check_matrix(m, "m")
    j = check_index(j, m.cols, "col", "j")
    return m.data[:, j]


def get_row(m: MatrixLike, i: int) -> NDArray[np.float64]:
    """
    1-D view over row i (stride ld).

    The view is writeable exactly when m is.
    """
    check_matrix(m, "m")
    i = check_index(i, m.rows, "row", "i")
    return m.data[i, :]


def col_copy(
    src: MatrixLike,
    col_src: int,
    dest: MutableMatrixLike,
    col_dest: int,
    *,
    row_offset_src: int = 0,
    row_nb: int | None = None,
    row_offset_dest: int = 0,
) -> None:
    """
    Copy a column, or a contiguous run of rows within a column.

    Without row_nb the whole column is copied and both matrices must have
    the same number of rows. With row_nb, rows
    [row_offset_src, row_offset_src + row_nb) of src column col_src go to
    rows [row_offset_dest, row_offset_dest + row_nb) of dest column col_dest.

    Raises:
        DimensionError: Whole-column copy between different row counts
        IndexBoundsError: Column index or row range out of bounds
        ValidationError: Row offsets given without row_nb
    """
    check_matrix(src, "src")
    check_mutable(dest, "dest")
    col_src = check_index(col_src, src.cols, "col", "col_src")
    col_dest = check_index(col_dest, dest.cols, "col", "col_dest")

    if row_nb is None:
        if row_offset_src or row_offset_dest:
            raise ValidationError(
                f"col_copy: row offsets ({row_offset_src}, {row_offset_dest}) "
                f"require row_nb"
            )
        check_same_rows(src, dest, ("src", "dest"))
        dest.data[:, col_dest] = src.data[:, col_src]
        return

    r_src, n = check_range(row_offset_src, row_nb, src.rows, "row", "src")
    r_dest, n = check_range(row_offset_dest, n, dest.rows, "row", "dest")
    dest.data[r_dest:r_dest + n, col_dest] = src.data[r_src:r_src + n, col_src]


def row_copy(
    src: MatrixLike,
    row_src: int,
    dest: MutableMatrixLike,
    row_dest: int,
) -> None:
    """
    Copy row row_src of src into row row_dest of dest.

    Raises:
        DimensionError: If column counts differ
        IndexBoundsError: If a row index is out of range
    """
    check_matrix(src, "src")
    check_mutable(dest, "dest")
    check_same_cols(src, dest, ("src", "dest"))
    row_src = check_index(row_src, src.rows, "row", "row_src")
    row_dest = check_index(row_dest, dest.rows, "row", "row_dest")
    dest.data[row_dest, :] = src.data[row_src, :]


def col_set(
    m: MutableMatrixLike,
    col: int,
    row_offset: int,
    row_nb: int,
    value: float,
) -> None:
    """Set rows [row_offset, row_offset + row_nb) of column col to value."""
    check_mutable(m, "m")
    col = check_index(col, m.cols, "col", "col")
    row_offset, row_nb = check_range(row_offset, row_nb, m.rows, "row", "m")
    m.data[row_offset:row_offset + row_nb, col] = value


# ═══════════════════════════════════════════════════════════════════════
# Structural
# ═══════════════════════════════════════════════════════════════════════


def copy_upper_to_lower(m: MutableMatrixLike) -> None:
    """
    Copy the strict upper triangle onto the strict lower triangle.

    Works on the leading min(rows, cols) square block; used to restore
    exact symmetry after a numerically noisy update.
    """
    check_mutable(m, "m")
    d = min(m.rows, m.cols)
    block = m.data[:d, :d]
    lower = np.tril_indices(d, -1)
    block[lower] = block.T[lower]


def copy_lower_to_upper(m: MutableMatrixLike) -> None:
    """Copy the strict lower triangle onto the strict upper triangle."""
    check_mutable(m, "m")
    d = min(m.rows, m.cols)
    block = m.data[:d, :d]
    upper = np.triu_indices(d, 1)
    block[upper] = block.T[upper]


def set_identity(m: MutableMatrixLike) -> None:
    """Zero m, then put ones on the leading min(rows, cols) diagonal."""
    check_mutable(m, "m")
    m.set_all(0.0)
    diag = np.arange(min(m.rows, m.cols))
    m.data[diag, diag] = 1.0


def transpose(m: MutableMatrixLike, src: MatrixLike | None = None) -> None:
    """
    Transpose in place, or write a transpose into m.

    transpose(m) swaps m(i, j) and m(j, i); m must be square.
    transpose(m, src) sets m(i, j) = src(j, i); m must have shape
    (src.cols, src.rows). Either matrix may be rectangular.

    Raises:
        DimensionError: Non-square in-place transpose, or shape mismatch
    """
    check_mutable(m, "m")
    if src is None:
        check_square(m, "m")
        m.data[...] = m.data.T.copy()
        return

    check_matrix(src, "src")
    if m.rows != src.cols or m.cols != src.rows:
        raise DimensionError(
            f"m: shape {m.shape} cannot hold the transpose of src shape {src.shape}",
            expected=(src.cols, src.rows),
            actual=m.shape,
            invariant='transposed_shape',
        )
    m.data[...] = src.data.T


# ═══════════════════════════════════════════════════════════════════════
# Elementwise arithmetic
# ═══════════════════════════════════════════════════════════════════════


def add(m: MutableMatrixLike, other: MatrixLike | float) -> None:
    """
    m += other, where other is a same-shape matrix or a scalar.

    Operands may have different leading dimensions.
    """
    check_mutable(m, "m")
    if isinstance(other, numbers.Real):
        np.add(m.data, float(other), out=m.data)
        return
    check_matrix(other, "other")
    check_same_shape(m, other, ("m", "other"))
    np.add(m.data, other.data, out=m.data)


def sub(m: MutableMatrixLike, other: MatrixLike | float) -> None:
    """m -= other, where other is a same-shape matrix or a scalar."""
    if isinstance(other, numbers.Real):
        add(m, -float(other))
        return
    check_mutable(m, "m")
    check_matrix(other, "other")
    check_same_shape(m, other, ("m", "other"))
    np.subtract(m.data, other.data, out=m.data)


def negate(m: MutableMatrixLike) -> None:
    """m = -m."""
    check_mutable(m, "m")
    np.negative(m.data, out=m.data)


# ═══════════════════════════════════════════════════════════════════════
# Reductions and comparisons
# ═══════════════════════════════════════════════════════════════════════


def nrminf(m: MatrixLike) -> float:
    """
    Largest absolute entry of m (0.0 for an empty matrix).

    NaN entries never compare greater than the running maximum, so they
    are skipped; a RuntimeWarning reports how many.
    """
    check_matrix(m, "m")
    magnitudes = np.abs(m.data)
    nan_mask = np.isnan(magnitudes)
    if nan_mask.any():
        warnings.warn(
            f"nrminf: {int(nan_mask.sum())} NaN entries ignored",
            RuntimeWarning,
            stacklevel=2,
        )
    return float(np.max(magnitudes, initial=0.0, where=~nan_mask))


def is_diff(a: MatrixLike, b: MatrixLike, tol: float = DEFAULT_DIFF_TOL) -> bool:
    """
    True if any |a(i, j) - b(i, j)| > tol.

    Scans column by column and stops at the first column holding a
    violation. With the default tol of 0 this is exact inequality.
    """
    check_matrix(a, "a")
    check_matrix(b, "b")
    check_same_shape(a, b, ("a", "b"))
    for j in range(a.cols):
        if np.any(np.abs(a.data[:, j] - b.data[:, j]) > tol):
            return True
    return False


def is_diff_sym(a: MatrixLike, b: MatrixLike, tol: float = DEFAULT_DIFF_TOL) -> bool:
    """
    is_diff restricted to the upper triangle, main diagonal included.

    Both matrices must be square with the same order. The triangle is
    walked one diagonal at a time, offset k = 0 .. n-1 covering the
    entries (j, j + k), so every upper entry is visited exactly once and
    the largest changes in a covariance update (near the diagonal) are
    seen first.
    """
    check_matrix(a, "a")
    check_matrix(b, "b")
    check_square(a, "a")
    check_same_shape(a, b, ("a", "b"))
    for k in range(a.cols):
        if np.any(np.abs(np.diagonal(a.data, k) - np.diagonal(b.data, k)) > tol):
            return True
    return False
