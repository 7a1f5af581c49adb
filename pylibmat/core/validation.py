"""
Precondition checks for pylibmat.

These validators follow the "fail fast, fail loud" principle. Every
cross-object contract of the matrix algorithms (shape equality, index
bounds, view offsets, writability) goes through one of these functions,
which raise immediately with the offending values.

Design principles:
    - No silent correction of shapes or indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylibmat.core.config import DTYPE
from pylibmat.core.exceptions import (
    DimensionError,
    IndexBoundsError,
    ReadOnlyError,
    ValidationError,
    ViewBoundsError,
)
from pylibmat.core.protocols import MatrixLike, MutableMatrixLike


def check_array(array: ArrayLike, name: str) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype} not supported")

    return result.astype(DTYPE, copy=False)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row/column count or extent is a non-negative integer.

    Returns:
        The value as a Python int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return int(value)


def check_matrix(obj: Any, name: str) -> None:
    """
    Verify an object satisfies the matrix concept.

    Raises:
        ValidationError: If obj lacks rows/cols/ld/data/element access
    """
    if not isinstance(obj, MatrixLike):
        raise ValidationError(
            f"{name}: expected a matrix (Matrix, MatrixView, MatrixConstView), "
            f"got {type(obj).__name__}"
        )


def check_mutable(obj: Any, name: str) -> None:
    """
    Verify an object satisfies the mutable matrix concept.

    Raises:
        ValidationError: If obj is not a matrix at all
        ReadOnlyError: If obj is a matrix whose storage cannot be written
    """
    check_matrix(obj, name)
    if not isinstance(obj, MutableMatrixLike) or not obj.data.flags.writeable:
        raise ReadOnlyError(
            f"{name}: {type(obj).__name__} is read-only, a mutable matrix is required"
        )


def check_same_shape(a: MatrixLike, b: MatrixLike, names: tuple[str, str]) -> None:
    """
    Verify two matrices have identical (rows, cols).

    Leading dimensions may differ.

    Raises:
        DimensionError: If shapes differ
    """
    if a.rows != b.rows or a.cols != b.cols:
        raise DimensionError(
            f"{names[1]}: shape {b.shape} does not match {names[0]} shape {a.shape}",
            expected=a.shape,
            actual=b.shape,
            invariant='same_shape',
        )


def check_same_rows(a: MatrixLike, b: MatrixLike, names: tuple[str, str]) -> None:
    """
    Verify two matrices have the same number of rows.

    Raises:
        DimensionError: If row counts differ
    """
    if a.rows != b.rows:
        raise DimensionError(
            f"{names[1]}: has {b.rows} rows but {names[0]} has {a.rows}",
            expected=a.rows,
            actual=b.rows,
            invariant='same_rows',
        )


def check_same_cols(a: MatrixLike, b: MatrixLike, names: tuple[str, str]) -> None:
    """
    Verify two matrices have the same number of columns.

    Raises:
        DimensionError: If column counts differ
    """
    if a.cols != b.cols:
        raise DimensionError(
            f"{names[1]}: has {b.cols} columns but {names[0]} has {a.cols}",
            expected=a.cols,
            actual=b.cols,
            invariant='same_cols',
        )


def check_square(m: MatrixLike, name: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    if m.rows != m.cols:
        raise DimensionError(
            f"{name}: expected a square matrix, got shape {m.shape}",
            expected=(m.rows, m.rows),
            actual=m.shape,
            invariant='square',
        )


def check_index(index: Any, bound: int, axis: str, name: str) -> int:
    """
    Verify a single row or column index lies in [0, bound).

    Negative indices are rejected rather than wrapped.

    Returns:
        The index as a Python int

    Raises:
        ValidationError: If index is not an integer
        IndexBoundsError: If index is out of range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected an integer {axis} index, got {type(index).__name__}"
        )
    if index < 0 or index >= bound:
        raise IndexBoundsError(
            f"{name}: {axis} index {index} out of range [0, {bound})",
            index=int(index),
            bound=bound,
            axis=axis,
            invariant='index_in_range',
        )
    return int(index)


def check_range(
    offset: Any,
    count: Any,
    bound: int,
    axis: str,
    name: str,
) -> tuple[int, int]:
    """
    Verify the half-open range [offset, offset + count) fits in [0, bound].

    Returns:
        (offset, count) as Python ints

    Raises:
        ValidationError: If offset or count is not a non-negative integer
        IndexBoundsError: If the range runs past bound
    """
    offset = check_dimension(offset, f"{name} offset")
    count = check_dimension(count, f"{name} count")
    if offset + count > bound:
        raise IndexBoundsError(
            f"{name}: {axis} range [{offset}, {offset + count}) exceeds extent {bound}",
            index=offset + count - 1,
            bound=bound,
            axis=axis,
            invariant='range_in_extent',
        )
    return offset, count


def check_view_bounds(
    parent: MatrixLike,
    row_offset: Any,
    col_offset: Any,
    rows: Any,
    cols: Any,
) -> tuple[int, int, int, int]:
    """
    Verify a sub-rectangle lies inside its parent.

    Requires 0 <= row_offset, row_offset + rows <= parent.rows,
    0 <= col_offset and col_offset + cols <= parent.cols.

    Returns:
        (row_offset, col_offset, rows, cols) as Python ints

    Raises:
        ValidationError: If any argument is not a non-negative integer
        ViewBoundsError: If the rectangle escapes the parent
    """
    row_offset = check_dimension(row_offset, "row_offset")
    col_offset = check_dimension(col_offset, "col_offset")
    rows = check_dimension(rows, "rows")
    cols = check_dimension(cols, "cols")

    if row_offset + rows > parent.rows or col_offset + cols > parent.cols:
        raise ViewBoundsError(
            f"view at offset ({row_offset}, {col_offset}) with shape ({rows}, {cols}) "
            f"does not fit in parent of shape {parent.shape}",
            offset=(row_offset, col_offset),
            extent=(rows, cols),
            parent_shape=parent.shape,
        )
    return row_offset, col_offset, rows, cols


def check_buffer(
    buffer: Any,
    rows: int,
    cols: int,
    ld: int,
    offset: int,
    name: str,
) -> NDArray[np.float64]:
    """
    Verify a flat buffer can hold a (rows, cols) block with leading dimension ld.

    The last element addressed is offset + (cols - 1)*ld + rows - 1.

    Returns:
        The buffer as a 1-D contiguous float64 numpy array (never copied)

    Raises:
        ValidationError: If buffer is not a 1-D contiguous float64 array
        DimensionError: If ld < rows or the block runs past the buffer end
    """
    if not isinstance(buffer, np.ndarray):
        raise ValidationError(
            f"{name}: expected a numpy array, got {type(buffer).__name__}"
        )
    if buffer.dtype != DTYPE:
        raise ValidationError(f"{name}: expected dtype {np.dtype(DTYPE)}, got {buffer.dtype}")
    if buffer.ndim != 1 or not buffer.flags.c_contiguous:
        raise ValidationError(
            f"{name}: expected a contiguous 1D buffer, got {buffer.ndim}D "
            f"(contiguous={buffer.flags.c_contiguous})"
        )
    if ld < rows:
        raise DimensionError(
            f"{name}: leading dimension {ld} is smaller than row count {rows}",
            expected=rows,
            actual=ld,
            invariant='ld_at_least_rows',
        )
    needed = offset + (cols - 1) * ld + rows if rows and cols else offset
    if needed > buffer.size:
        raise DimensionError(
            f"{name}: block needs {needed} elements, buffer has {buffer.size}",
            expected=needed,
            actual=buffer.size,
            invariant='block_within_buffer',
        )
    return buffer
