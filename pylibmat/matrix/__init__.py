"""
Column-major matrix storage and the generic algorithms over it.

Submodules:
    storage: Matrix, MatrixView, MatrixConstView
    ops: column/row primitives, triangles, transpose, arithmetic, norms
    indexing: Selection, reorder/assign by index vectors, repmat
    formatting: fixed-width textual dump
"""

from pylibmat.matrix.storage import Matrix, MatrixConstView, MatrixView
from pylibmat.matrix.formatting import format_matrix, print_matrix
from pylibmat.matrix.ops import (
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
from pylibmat.matrix.indexing import (
    ALL,
    Selection,
    as_selection,
    assign_by_vectors,
    reorder_columns_by_vectors,
    reorder_rows_by_vectors,
    repmat,
)

__all__ = [
    # Storage
    "Matrix",
    "MatrixView",
    "MatrixConstView",
    # Formatting
    "format_matrix",
    "print_matrix",
    # Elementwise / structural
    "add",
    "col_copy",
    "col_set",
    "copy_lower_to_upper",
    "copy_upper_to_lower",
    "get_col",
    "get_row",
    "is_diff",
    "is_diff_sym",
    "negate",
    "nrminf",
    "row_copy",
    "set_identity",
    "sub",
    "transpose",
    # Indexed assignment
    "ALL",
    "Selection",
    "as_selection",
    "assign_by_vectors",
    "reorder_columns_by_vectors",
    "reorder_rows_by_vectors",
    "repmat",
]
