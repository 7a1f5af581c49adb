"""
Owning matrix and non-owning views, all in column-major order.

Three storage kinds implement the matrix concept:

    Matrix           owns a packed buffer (ld == rows), mutable
    MatrixView       aliases a rectangle of another matrix's buffer, mutable
    MatrixConstView  same as MatrixView but read-only

Every kind exposes its storage as ``data``: a 2-D numpy array with
strides (itemsize, ld*itemsize) aliasing the buffer. Views are numpy
views of their parent, so a view keeps the parent's memory alive; whether
the parent is still *meaningful* is the caller's business, as with any
aliasing reference.

Usage:
    from pylibmat import Matrix, MatrixView, MatrixConstView

    M = Matrix(4, 5)
    M.set_all(1.0)
    block = MatrixView(M, 1, 2, 3, 3)   # rows 1..3, cols 2..4
    block.set_all(0.0)                  # touches only the block
    ro = MatrixConstView(M, 0, 0, 2, 2)
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.lib.stride_tricks import as_strided
from numpy.typing import ArrayLike, NDArray

from pylibmat.core.config import DTYPE, ITEMSIZE
from pylibmat.core.exceptions import DimensionError, ReadOnlyError
from pylibmat.core.protocols import MatrixLike
from pylibmat.core.validation import (
    check_array,
    check_buffer,
    check_dimension,
    check_matrix,
    check_mutable,
    check_same_shape,
    check_view_bounds,
)
from pylibmat.matrix.formatting import format_matrix

logger = logging.getLogger(__name__)


class _MatrixBase:
    """Shared read-only accessor surface of all storage kinds."""

    def __init__(self, array: NDArray[np.float64], ld: int):
        self._array = array
        self._ld = ld

    @classmethod
    def _wrap(cls, array: NDArray[np.float64], ld: int):
        """Build an instance around an existing strided array, skipping __init__."""
        obj = cls.__new__(cls)
        _MatrixBase.__init__(obj, array, ld)
        return obj

    @property
    def rows(self) -> int:
        return self._array.shape[0]

    @property
    def cols(self) -> int:
        return self._array.shape[1]

    @property
    def ld(self) -> int:
        return self._ld

    @property
    def shape(self) -> tuple[int, int]:
        return self._array.shape

    @property
    def data(self) -> NDArray[np.float64]:
        return self._array

    def __getitem__(self, key: Any) -> Any:
        return self._array[key]

    def to_numpy(self) -> NDArray[np.float64]:
        """Independent copy of the elements as a Fortran-ordered array."""
        return self._array.copy(order='F')

    def __str__(self) -> str:
        return format_matrix(self)

    def __copy__(self):
        # Another alias over the same storage, same ld
        return type(self)._wrap(self._array, self._ld)

    def __deepcopy__(self, memo: dict):
        raise TypeError(
            f"{type(self).__name__} does not own storage and cannot be deep-copied; "
            f"use Matrix.from_array(view.data)"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, ld={self.ld})"


class _MutableMatrixBase(_MatrixBase):
    """Adds the mutable matrix concept: set_all, assign, element writes."""

    def __setitem__(self, key: Any, value: Any) -> None:
        self._array[key] = value

    def set_all(self, value: float) -> None:
        """Set every element of the (possibly strided) block to value."""
        self._array[...] = value

    def assign(self, other: MatrixLike) -> None:
        """
        Copy all elements of other into self.

        Leading dimensions may differ; overlapping storage is handled by numpy.

        Raises:
            ValidationError: If other is not a matrix
            DimensionError: If shapes differ
        """
        check_matrix(other, "other")
        check_same_shape(self, other, ("self", "other"))
        self._array[...] = other.data


class Matrix(_MutableMatrixBase):
    """
    A full matrix owning its storage.

    Elements are zero-initialised and stored packed in column-major
    order, so ld == rows and element (i, j) sits at offset i + j*rows.
    Copies (copy(), copy.copy, copy.deepcopy) always allocate a new buffer.

    Args:
        rows: Number of rows
        cols: Number of columns; None builds a square rows x rows matrix
    """

    def __init__(self, rows: int, cols: int | None = None):
        rows = check_dimension(rows, "rows")
        cols = rows if cols is None else check_dimension(cols, "cols")
        self._buffer = np.zeros(rows * cols, dtype=DTYPE)
        super().__init__(self._buffer.reshape((rows, cols), order='F'), rows)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build an owning matrix holding a copy of a 2-D array-like.

        Raises:
            ValidationError: If array is not numeric
            DimensionError: If array is not 2-D
        """
        values = check_array(array, "array")
        if values.ndim != 2:
            raise DimensionError(
                f"array: expected 2D array, got {values.ndim}D with shape {values.shape}",
                expected=2,
                actual=values.ndim,
                invariant='ndim',
            )
        result = cls(*values.shape)
        result._array[...] = values
        return result

    def set_all(self, value: float) -> None:
        # Packed buffer: one contiguous fill
        self._buffer.fill(value)

    def copy(self) -> Matrix:
        """Deep copy with a freshly allocated buffer."""
        result = Matrix(self.rows, self.cols)
        result._buffer[:] = self._buffer
        return result

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Matrix:
        return self.copy()

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"


class MatrixView(_MutableMatrixBase):
    """
    A mutable rectangular alias into another matrix's storage.

    The view keeps its parent's leading dimension, so it can alias any
    sub-rectangle; its columns are generally not contiguous with one
    another.

    Args:
        parent: Mutable matrix to alias
        row_offset: First parent row included
        col_offset: First parent column included
        rows: Number of rows of the view
        cols: Number of columns of the view

    Raises:
        ReadOnlyError: If parent is read-only
        ViewBoundsError: If the rectangle does not fit in parent
    """

    def __init__(
        self,
        parent: MatrixLike,
        row_offset: int,
        col_offset: int,
        rows: int,
        cols: int,
    ):
        check_mutable(parent, "parent")
        row_offset, col_offset, rows, cols = check_view_bounds(
            parent, row_offset, col_offset, rows, cols
        )
        block = parent.data[row_offset:row_offset + rows, col_offset:col_offset + cols]
        super().__init__(block, parent.ld)
        logger.debug(
            "MatrixView %dx%d at (%d, %d) of %r",
            rows, cols, row_offset, col_offset, parent,
        )

    @classmethod
    def from_buffer(
        cls,
        buffer: NDArray[np.float64],
        rows: int,
        cols: int,
        ld: int | None = None,
        offset: int = 0,
    ) -> MatrixView:
        """
        Alias a (rows, cols) block of a flat float64 buffer.

        Element (i, j) maps to buffer[offset + i + j*ld].

        Args:
            buffer: 1-D contiguous float64 array, writeable
            rows: Number of rows
            cols: Number of columns
            ld: Leading dimension, defaults to rows
            offset: Index in buffer of element (0, 0)

        Raises:
            ValidationError: If buffer has the wrong type or layout
            DimensionError: If ld < rows or the block overruns the buffer
            ReadOnlyError: If buffer is not writeable
        """
        array, ld = _strided_block(buffer, rows, cols, ld, offset, writeable=True)
        return cls._wrap(array, ld)


class MatrixConstView(_MatrixBase):
    """
    A read-only rectangular alias into another matrix's storage.

    Same construction as MatrixView, but any matrix (including another
    const view) may be the parent, and the exposed ``data`` array is
    not writeable.
    """

    def __init__(
        self,
        parent: MatrixLike,
        row_offset: int,
        col_offset: int,
        rows: int,
        cols: int,
    ):
        check_matrix(parent, "parent")
        row_offset, col_offset, rows, cols = check_view_bounds(
            parent, row_offset, col_offset, rows, cols
        )
        block = parent.data[row_offset:row_offset + rows, col_offset:col_offset + cols]
        block.flags.writeable = False
        super().__init__(block, parent.ld)
        logger.debug(
            "MatrixConstView %dx%d at (%d, %d) of %r",
            rows, cols, row_offset, col_offset, parent,
        )

    @classmethod
    def from_buffer(
        cls,
        buffer: NDArray[np.float64],
        rows: int,
        cols: int,
        ld: int | None = None,
        offset: int = 0,
    ) -> MatrixConstView:
        """Read-only counterpart of MatrixView.from_buffer."""
        array, ld = _strided_block(buffer, rows, cols, ld, offset, writeable=False)
        return cls._wrap(array, ld)


def _strided_block(
    buffer: NDArray[np.float64],
    rows: int,
    cols: int,
    ld: int | None,
    offset: int,
    writeable: bool,
) -> tuple[NDArray[np.float64], int]:
    rows = check_dimension(rows, "rows")
    cols = check_dimension(cols, "cols")
    ld = rows if ld is None else check_dimension(ld, "ld")
    offset = check_dimension(offset, "offset")
    buffer = check_buffer(buffer, rows, cols, ld, offset, "buffer")
    if writeable and not buffer.flags.writeable:
        raise ReadOnlyError("buffer: not writeable, cannot build a mutable view")

    array = as_strided(
        buffer[offset:],
        shape=(rows, cols),
        strides=(ITEMSIZE, ld * ITEMSIZE),
        writeable=writeable,
    )
    return array, ld
