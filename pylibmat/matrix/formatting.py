"""
Textual dump of a matrix.

One output line per matrix row; every element is written right-justified
in a 13-character field with 6 significant digits (``%g``), followed by a
single space.
"""

from __future__ import annotations

import sys
from typing import TextIO

from pylibmat.core.config import PRINT_FORMAT, PrintFormat
from pylibmat.core.protocols import MatrixLike
from pylibmat.core.validation import check_matrix


def format_matrix(m: MatrixLike, fmt: PrintFormat = PRINT_FORMAT) -> str:
    """Render m as text, one newline-terminated line per row."""
    check_matrix(m, "m")
    data = m.data
    return ''.join(
        ''.join(fmt.render(value) for value in data[i, :]) + '\n'
        for i in range(m.rows)
    )


def print_matrix(
    m: MatrixLike,
    out: TextIO | None = None,
    fmt: PrintFormat = PRINT_FORMAT,
) -> None:
    """Write the textual dump of m to out (stdout by default)."""
    if out is None:
        out = sys.stdout
    out.write(format_matrix(m, fmt))
