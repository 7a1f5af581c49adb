"""
Core infrastructure for pylibmat.

Shared abstractions used by the storage types and every algorithm.

Key components:
    protocols: MatrixLike, MutableMatrixLike structural contracts
    exceptions: Exception hierarchy
    validation: Precondition checkers
    config: dtype, print format and tolerance constants
"""

from pylibmat.core.protocols import MatrixLike, MutableMatrixLike
from pylibmat.core.exceptions import (
    PyLibmatError,
    ValidationError,
    PreconditionError,
    DimensionError,
    IndexBoundsError,
    ViewBoundsError,
    ReadOnlyError,
)

__all__ = [
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
]
