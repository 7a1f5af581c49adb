"""
Exception hierarchy for pylibmat.

All exceptions inherit from PyLibmatError to allow catching any
library-specific error. Cross-object contracts (shape equality, index
bounds, view offsets) are checked on every call and reported through
PreconditionError and its subclasses.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import Any


class PyLibmatError(Exception):
    """Base exception for all pylibmat errors."""
    pass


class ValidationError(PyLibmatError):
    """
    Input validation failed.

    Raised when an argument is unusable on its own: wrong type,
    non-numeric data, negative dimensions.
    """
    pass


class PreconditionError(ValidationError):
    """
    A contract between arguments was violated.

    Attributes:
        invariant: Short name of the violated contract (e.g. 'same_shape')
        details: Offending dimensions or indices, keyed by name
    """

    def __init__(
        self,
        message: str,
        invariant: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.invariant = invariant
        self.details = dict(details) if details else {}


class DimensionError(PreconditionError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Attributes:
        expected: Expected (rows, cols) or extent
        actual: Actual (rows, cols) or extent
    """

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
        invariant: str | None = None,
    ):
        super().__init__(
            message,
            invariant=invariant,
            details={'expected': expected, 'actual': actual},
        )
        self.expected = expected
        self.actual = actual


class IndexBoundsError(PreconditionError, IndexError):
    """
    An index lies outside [0, bound).

    Also an IndexError, so generic callers catching IndexError keep working.

    Attributes:
        index: The offending index
        bound: Exclusive upper bound it was checked against
        axis: 'row' or 'col'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
        invariant: str | None = None,
    ):
        super().__init__(
            message,
            invariant=invariant,
            details={'index': index, 'bound': bound, 'axis': axis},
        )
        self.index = index
        self.bound = bound
        self.axis = axis


class ViewBoundsError(PreconditionError):
    """
    A requested sub-rectangle does not fit inside its parent.

    Attributes:
        offset: (row_offset, col_offset) requested
        extent: (rows, cols) requested
        parent_shape: (rows, cols) of the parent
    """

    def __init__(
        self,
        message: str,
        offset: tuple[int, int] | None = None,
        extent: tuple[int, int] | None = None,
        parent_shape: tuple[int, int] | None = None,
    ):
        super().__init__(
            message,
            invariant='view_within_parent',
            details={
                'offset': offset,
                'extent': extent,
                'parent_shape': parent_shape,
            },
        )
        self.offset = offset
        self.extent = extent
        self.parent_shape = parent_shape


class ReadOnlyError(PreconditionError):
    """Mutation was requested on storage that is read-only."""

    def __init__(self, message: str):
        super().__init__(message, invariant='mutable_storage')
