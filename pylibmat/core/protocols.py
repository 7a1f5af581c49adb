"""
Core protocols for pylibmat.

These define the structural "matrix concept" every storage kind satisfies.
We use Protocol (structural typing) rather than ABC (nominal typing) so the
generic algorithms accept any object exposing the right shape, owning or
not, without forcing a common base class.

Design Principles:
    - Minimal contracts: shape, stride, raw buffer, element access
    - Mutability is a separate, wider contract
    - Algorithms never look at the concrete storage kind
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class MatrixLike(Protocol):
    """
    Read access to a dense column-major matrix.

    Element (i, j) is stored at offset i + j*ld of the underlying buffer.
    ``data`` exposes that buffer as a 2-D strided numpy array of shape
    (rows, cols) aliasing the storage (no copy). For read-only kinds the
    array is not writeable.

    Element access ``m[i, j]`` is passed straight to numpy: no additional
    validation happens on this path.
    """

    @property
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def cols(self) -> int:
        """Number of columns."""
        ...

    @property
    def ld(self) -> int:
        """Leading dimension: distance in elements between two columns."""
        ...

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        ...

    @property
    def data(self) -> NDArray[np.float64]:
        """Strided 2-D view over the storage."""
        ...

    def __getitem__(self, key: Any) -> Any:
        ...


@runtime_checkable
class MutableMatrixLike(MatrixLike, Protocol):
    """
    Read/write access to a dense column-major matrix.

    Adds whole-matrix assignment from any same-shape MatrixLike,
    per-element writes, and a fill-all operation.
    """

    def assign(self, other: MatrixLike) -> None:
        """Copy every element of ``other`` (same shape) into self."""
        ...

    def set_all(self, value: float) -> None:
        """Set every element to ``value``."""
        ...

    def __setitem__(self, key: Any, value: Any) -> None:
        ...
