from typing import Sequence

import numpy as np

from polyfit.errors import check_float_dtype


def evaluate(
    coefficients: Sequence[float] | np.ndarray,
    x_values: Sequence[float] | np.ndarray,
    dtype=np.float64,
) -> np.ndarray:
    """Evaluate a polynomial at each x.

    ## parameters
    - coefficients (sequence): index j is the coefficient of x^j.
    - x_values (sequence): query points.
    - dtype: floating point type, integer types raise `InvalidArgument`.

    ## returns
    - y (ndarray): same length and order as `x_values`.

    Note: sums low to high powers, with `x_powered` multiplied by x each
    step (not Horner). Empty coefficients give zeros.
    """

    dtype = check_float_dtype(dtype)
    x = np.array(x_values, dtype=dtype).ravel()
    coefficients = np.asarray(coefficients, dtype=dtype).ravel()

    y = np.zeros_like(x)
    x_powered = np.ones_like(x)
    for c in coefficients:
        y += c * x_powered
        x_powered *= x

    return y


def residuals(
    coefficients: Sequence[float] | np.ndarray,
    x_values: Sequence[float] | np.ndarray,
    y_values: Sequence[float] | np.ndarray,
    dtype=np.float64,
) -> np.ndarray:
    """Observed minus fitted values."""
    return np.asarray(y_values, dtype=dtype) - evaluate(coefficients, x_values, dtype)
