"""
pylibmat: dense column-major matrices and views for statistical code.

The numeric substrate underneath likelihood evaluation, filtering and
convergence checks: an owning matrix, mutable and read-only views that
alias sub-blocks of it, and generic in-place algorithms that work on any
mix of the three.

Submodules:
    core: protocols, exceptions, validation, constants
    matrix: storage types and algorithms
"""

import logging

__version__ = "0.1.0"

from pylibmat.core import (
    MatrixLike,
    MutableMatrixLike,
    PyLibmatError,
    ValidationError,
    PreconditionError,
    DimensionError,
    IndexBoundsError,
    ViewBoundsError,
    ReadOnlyError,
)
from pylibmat.matrix import (
    ALL,
    Matrix,
    MatrixConstView,
    MatrixView,
    Selection,
    add,
    assign_by_vectors,
    col_copy,
    col_set,
    copy_lower_to_upper,
    copy_upper_to_lower,
    format_matrix,
    get_col,
    get_row,
    is_diff,
    is_diff_sym,
    negate,
    nrminf,
    print_matrix,
    reorder_columns_by_vectors,
    reorder_rows_by_vectors,
    repmat,
    row_copy,
    set_identity,
    sub,
    transpose,
)

# Applications choose where library logging goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Protocols
    "MatrixLike",
    "MutableMatrixLike",
    # Exceptions
    "PyLibmatError",
    "ValidationError",
    "PreconditionError",
    "DimensionError",
    "IndexBoundsError",
    "ViewBoundsError",
    "ReadOnlyError",
    # Storage
    "Matrix",
    "MatrixView",
    "MatrixConstView",
    # Algorithms
    "ALL",
    "Selection",
    "add",
    "assign_by_vectors",
    "col_copy",
    "col_set",
    "copy_lower_to_upper",
    "copy_upper_to_lower",
    "format_matrix",
    "get_col",
    "get_row",
    "is_diff",
    "is_diff_sym",
    "negate",
    "nrminf",
    "print_matrix",
    "reorder_columns_by_vectors",
    "reorder_rows_by_vectors",
    "repmat",
    "row_copy",
    "set_identity",
    "sub",
    "transpose",
]
