"""
Plain-text rendering of matrices.

Output is meant for eyeballing in a terminal, not for parsing back:

    | 0  1  55  66.33 |
    | 1  0  1  2 |

with a blank line before and after the block.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def format_element(value: float) -> str:
    """Format one entry: whole numbers without a fractional part, no exponents."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return format(value, ".0f")
    # Shortest round-tripping digits, never in exponent notation
    return np.format_float_positional(value, trim="-")


def render(data: NDArray[np.float64]) -> str:
    """Render a 2-D array as a block of `|`-delimited rows."""
    lines = ["\n"]
    for row in data:
        cells = "".join(f" {format_element(x)} " for x in row)
        lines.append(f"|{cells}|\n")
    lines.append("\n")
    return "".join(lines)
