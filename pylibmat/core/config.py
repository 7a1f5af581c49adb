"""
Library-wide numeric and formatting constants.

Storage is always double precision. The print format reproduces the
default C stream formatting of a double inside a fixed-width,
right-justified field, which is what downstream log scrapers expect.
"""

from dataclasses import dataclass

import numpy as np


# Element type of every buffer
DTYPE = np.float64

# Bytes per element
ITEMSIZE: int = np.dtype(DTYPE).itemsize


@dataclass(frozen=True)
class PrintFormat:
    """Layout of the textual matrix dump."""
    width: int
    precision: int
    separator: str

    def render(self, value: float) -> str:
        """One field, right-justified, followed by the separator."""
        return f"{value:>{self.width}.{self.precision}g}{self.separator}"


PRINT_FORMAT = PrintFormat(width=13, precision=6, separator=' ')


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute tolerance used when comparing two matrices elementwise."""
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    atol=0.0,
    name='exact',
    description='Bitwise-equal values only',
)

# Enough slack to absorb a handful of float64 round-offs on O(1) entries
ROUNDOFF = ToleranceTier(
    atol=1e-12,
    name='roundoff',
    description='Differences attributable to float64 round-off',
)

# is_diff / is_diff_sym default: exact inequality
DEFAULT_DIFF_TOL: float = EXACT.atol
