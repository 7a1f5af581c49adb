"""
MATLAB-style indexed reordering and assignment.

    reorder_columns_by_vectors(A, b, B, d)      A(:, b) = B(:, d)
    reorder_rows_by_vectors(A, a, B, c)         A(a, :) = B(c, :)
    assign_by_vectors(A, a, b, B, c, d)         A(a, b) = B(c, d)
    repmat(B, v, h, A)                          A = repmat(B, v, h)

Each index argument is a Selection. ``ALL`` (or None) stands for MATLAB's
``:`` and expands to 0..n-1 for the axis it indexes; anything else is an
explicit list of 0-based indices. An explicit empty list selects nothing,
which is always rejected.

Usage:
    from pylibmat import ALL, Matrix, reorder_columns_by_vectors

    reorder_columns_by_vectors(A, [2, 0], B, ALL)   # A(:, [3 1]) = B(:, :)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

from pylibmat.core.exceptions import DimensionError, ValidationError
from pylibmat.core.protocols import MatrixLike, MutableMatrixLike
from pylibmat.core.validation import (
    check_dimension,
    check_index,
    check_matrix,
    check_mutable,
    check_same_cols,
    check_same_rows,
)
from pylibmat.matrix.ops import col_copy, row_copy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    """
    Indices picked along one axis.

    Attributes:
        indices: Explicit 0-based indices, or None for "every index in order"

    Construct via ``ALL`` or ``Selection.of(...)``.
    """
    indices: tuple[int, ...] | None = None

    @classmethod
    def of(cls, indices: Iterable[int]) -> Selection:
        """Explicit selection, in the given order (duplicates allowed)."""
        return cls(tuple(indices))

    @property
    def is_all(self) -> bool:
        return self.indices is None

    def resolve(self, extent: int, axis: str, name: str) -> NDArray[np.intp]:
        """
        Expand to a concrete index array for an axis of the given extent.

        Raises:
            DimensionError: Explicit list longer than the axis
            IndexBoundsError: An explicit index outside [0, extent)
        """
        if self.indices is None:
            return np.arange(extent, dtype=np.intp)

        if len(self.indices) > extent:
            raise DimensionError(
                f"{name}: {len(self.indices)} {axis} indices for an axis of length {extent}",
                expected=extent,
                actual=len(self.indices),
                invariant='selection_fits_axis',
            )
        return np.array(
            [check_index(k, extent, axis, name) for k in self.indices],
            dtype=np.intp,
        )


ALL = Selection()


def as_selection(value: Any, name: str) -> Selection:
    """
    Normalise an index argument.

    None and ALL mean every index; a Selection passes through; any other
    iterable of integers becomes an explicit selection.

    Raises:
        ValidationError: If value is not iterable
    """
    if value is None:
        return ALL
    if isinstance(value, Selection):
        return value
    if isinstance(value, (str, bytes)):
        raise ValidationError(f"{name}: expected a sequence of indices, got {type(value).__name__}")
    try:
        return Selection.of(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a sequence of indices, got {type(value).__name__}"
        ) from e


def _check_paired(
    to_idx: NDArray[np.intp],
    from_idx: NDArray[np.intp],
    axis: str,
) -> None:
    if len(to_idx) != len(from_idx):
        raise DimensionError(
            f"{axis} selections differ in length: dest has {len(to_idx)}, "
            f"src has {len(from_idx)}",
            expected=len(to_idx),
            actual=len(from_idx),
            invariant='selection_lengths_match',
        )


def _check_nonempty(count: int, what: str) -> None:
    if count == 0:
        raise DimensionError(
            f"{what}: selection is empty, nothing to assign",
            expected='>0',
            actual=0,
            invariant='nonempty_selection',
        )


# ═══════════════════════════════════════════════════════════════════════
# Indexed reordering
# ═══════════════════════════════════════════════════════════════════════


def reorder_columns_by_vectors(
    dest: MutableMatrixLike,
    dest_cols: Selection | Iterable[int] | None,
    src: MatrixLike,
    src_cols: Selection | Iterable[int] | None,
) -> None:
    """
    dest(:, dest_cols) = src(:, src_cols).

    Both matrices must have the same number of rows. If both selections
    are ALL the whole of src replaces dest (identical shapes required).
    Otherwise column src_cols[k] is copied to dest_cols[k], in order.

    Raises:
        DimensionError: Row counts differ, selection lengths differ, or
            the selections are empty
        IndexBoundsError: An explicit index is out of range
    """
    check_mutable(dest, "dest")
    check_matrix(src, "src")
    dest_sel = as_selection(dest_cols, "dest_cols")
    src_sel = as_selection(src_cols, "src_cols")
    check_same_rows(dest, src, ("dest", "src"))

    if dest_sel.is_all and src_sel.is_all:
        dest.assign(src)
        return

    to_cols = dest_sel.resolve(dest.cols, "col", "dest_cols")
    from_cols = src_sel.resolve(src.cols, "col", "src_cols")
    _check_paired(to_cols, from_cols, "col")
    _check_nonempty(len(from_cols), "reorder_columns_by_vectors")

    for to_j, from_j in zip(to_cols, from_cols):
        col_copy(src, from_j, dest, to_j)


def reorder_rows_by_vectors(
    dest: MutableMatrixLike,
    dest_rows: Selection | Iterable[int] | None,
    src: MatrixLike,
    src_rows: Selection | Iterable[int] | None,
) -> None:
    """
    dest(dest_rows, :) = src(src_rows, :).

    Both matrices must have the same number of columns. Same ALL rule as
    reorder_columns_by_vectors; rows are copied in list order.
    """
    check_mutable(dest, "dest")
    check_matrix(src, "src")
    dest_sel = as_selection(dest_rows, "dest_rows")
    src_sel = as_selection(src_rows, "src_rows")
    check_same_cols(dest, src, ("dest", "src"))

    if dest_sel.is_all and src_sel.is_all:
        dest.assign(src)
        return

    to_rows = dest_sel.resolve(dest.rows, "row", "dest_rows")
    from_rows = src_sel.resolve(src.rows, "row", "src_rows")
    _check_paired(to_rows, from_rows, "row")
    _check_nonempty(len(from_rows), "reorder_rows_by_vectors")

    for to_i, from_i in zip(to_rows, from_rows):
        row_copy(src, from_i, dest, to_i)


def assign_by_vectors(
    dest: MutableMatrixLike,
    dest_rows: Selection | Iterable[int] | None,
    dest_cols: Selection | Iterable[int] | None,
    src: MatrixLike,
    src_rows: Selection | Iterable[int] | None,
    src_cols: Selection | Iterable[int] | None,
) -> None:
    """
    dest(dest_rows, dest_cols) = src(src_rows, src_cols).

    Dispatch:
        all four ALL            full replacement (identical shapes)
        both row selections ALL reorder_columns_by_vectors
        both col selections ALL reorder_rows_by_vectors
        otherwise               elementwise over the resolved index grid

    In the general case the two row selections must resolve to the same
    length, as must the two column selections, and the grid must not be
    empty.
    """
    check_mutable(dest, "dest")
    check_matrix(src, "src")
    dr = as_selection(dest_rows, "dest_rows")
    dc = as_selection(dest_cols, "dest_cols")
    sr = as_selection(src_rows, "src_rows")
    sc = as_selection(src_cols, "src_cols")

    if dr.is_all and dc.is_all and sr.is_all and sc.is_all:
        logger.debug("assign_by_vectors: full replacement %r <- %r", dest, src)
        dest.assign(src)
    elif dr.is_all and sr.is_all:
        logger.debug("assign_by_vectors: column reorder %r <- %r", dest, src)
        reorder_columns_by_vectors(dest, dc, src, sc)
    elif dc.is_all and sc.is_all:
        logger.debug("assign_by_vectors: row reorder %r <- %r", dest, src)
        reorder_rows_by_vectors(dest, dr, src, sr)
    else:
        to_rows = dr.resolve(dest.rows, "row", "dest_rows")
        to_cols = dc.resolve(dest.cols, "col", "dest_cols")
        from_rows = sr.resolve(src.rows, "row", "src_rows")
        from_cols = sc.resolve(src.cols, "col", "src_cols")
        _check_paired(to_rows, from_rows, "row")
        _check_paired(to_cols, from_cols, "col")
        _check_nonempty(len(from_rows) * len(from_cols), "assign_by_vectors")

        dest.data[np.ix_(to_rows, to_cols)] = src.data[np.ix_(from_rows, from_cols)]


# ═══════════════════════════════════════════════════════════════════════
# Tiling
# ═══════════════════════════════════════════════════════════════════════


def repmat(
    src: MatrixLike,
    v_tiles: int,
    h_tiles: int,
    dest: MutableMatrixLike,
) -> None:
    """
    Tile src v_tiles times vertically and h_tiles times horizontally into dest.

    dest must have shape (v_tiles * src.rows, h_tiles * src.cols); afterwards
    dest(i, j) == src(i mod src.rows, j mod src.cols).
    """
    check_matrix(src, "src")
    check_mutable(dest, "dest")
    v_tiles = check_dimension(v_tiles, "v_tiles")
    h_tiles = check_dimension(h_tiles, "h_tiles")

    expected = (v_tiles * src.rows, h_tiles * src.cols)
    if dest.shape != expected:
        raise DimensionError(
            f"dest: shape {dest.shape} does not match {v_tiles}x{h_tiles} tiling "
            f"of src shape {src.shape}",
            expected=expected,
            actual=dest.shape,
            invariant='tiled_shape',
        )

    rows, cols = src.shape
    for i in range(v_tiles):
        for j in range(h_tiles):
            for k in range(cols):
                col_copy(
                    src, k, dest, j * cols + k,
                    row_offset_src=0, row_nb=rows, row_offset_dest=i * rows,
                )
