"""Scalar helpers with IEEE-754 semantics. No engine imports."""

from __future__ import annotations

import numpy as np


def ieee_divide(numerator: float, denominator: float) -> float:
    """Float division that never raises: x/0 -> ±inf, 0/0 -> nan."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
