"""Weighted least squares polynomial fitting."""

from typing import Sequence

import numpy as np

from polyfit.errors import InvalidArgument, check_float_dtype
from polyfit.solvers import DEFAULT_METHOD, LeastSquaresSolver, get_solver, method_type


def fit(
    x_values: Sequence[float] | np.ndarray,
    y_values: Sequence[float] | np.ndarray,
    degree: int,
    weights: Sequence[float] | np.ndarray | None = None,
    method: method_type | LeastSquaresSolver = DEFAULT_METHOD,
    dtype=np.float64,
) -> np.ndarray:
    """Fit a polynomial of given degree by weighted least squares.

    Minimizes sum(w_i^2 * (y_i - p(x_i))^2), where every row of the
    system is scaled by its weight.

    ## parameters
    - x_values, y_values (sequence): samples, same length N >= 1.
    - degree (int): polynomial degree d >= 0, gives d + 1 coefficients.
    - weights (sequence | None): one weight per sample.
        - Note: ignored (no error) unless the length is exactly N.
    - method (str | LeastSquaresSolver): `"jacobi_svd"` (default) or `"col_piv_qr"`.
    - dtype: floating point type used for the whole computation.

    ## returns
    - coefficients (ndarray): shape (d + 1,), index j is the coefficient of x^j.

    Note: underdetermined and ill-conditioned systems are not rejected,
    the solver returns its best least squares answer. Non-finite samples or
    weights raise `InvalidArgument`, powers that overflow give nan coefficients.
    """

    dtype = check_float_dtype(dtype)
    x, y = _check_samples(x_values, y_values, dtype)
    _check_degree(degree)
    solver = get_solver(method)

    w = None
    if weights_active(weights, len(x)):
        w = np.array(weights, dtype=dtype)
        if not np.isfinite(w).all():
            raise InvalidArgument("Weights must be finite")

    X = vandermonde(x, degree, w, dtype=dtype)
    Y = y if w is None else y * w

    coefficients = solver.solve(X, Y)

    return np.asarray(coefficients[: degree + 1], dtype=dtype)


def vandermonde(
    x_values: Sequence[float] | np.ndarray,
    degree: int,
    weights: Sequence[float] | np.ndarray | None = None,
    dtype=np.float64,
) -> np.ndarray:
    """Design matrix with ascending powers, shape (N, degree + 1).

    Row i is `[1, x_i, x_i^2, ..., x_i^d]`, scaled by `weights[i]` if
    weighting is active.
    """

    x = np.array(x_values, dtype=dtype).ravel()
    X = np.empty((x.shape[0], degree + 1), dtype=dtype)

    # power accumulation, column by column
    val = np.ones_like(x)
    for col in range(degree + 1):
        X[:, col] = val
        val = val * x

    if weights_active(weights, x.shape[0]):
        X *= np.asarray(weights, dtype=dtype)[:, None]

    return X


def weights_active(weights: Sequence[float] | np.ndarray | None, n: int) -> bool:
    """Weighting is used only for a non-empty sequence of length n.

    Any other length silently disables weighting.
    """
    if weights is None:
        return False
    size = len(weights)
    return size > 0 and size == n


def _check_samples(x_values, y_values, dtype) -> tuple[np.ndarray, np.ndarray]:
    # copies, the caller's buffers are never touched
    x = np.array(x_values, dtype=dtype)
    y = np.array(y_values, dtype=dtype)

    if x.ndim != 1 or y.ndim != 1:
        raise InvalidArgument(
            f"Expects 1D samples, got shapes {x.shape} and {y.shape}"
        )
    if x.shape[0] != y.shape[0]:
        raise InvalidArgument(
            f"Inconsistent sample count: {x.shape[0]} x-values, {y.shape[0]} y-values"
        )
    if x.shape[0] == 0:
        raise InvalidArgument("Needs at least one sample")
    if not (np.isfinite(x).all() and np.isfinite(y).all()):
        raise InvalidArgument("Samples must be finite (no inf or nan)")

    return x, y


def _check_degree(degree):
    if isinstance(degree, bool) or not isinstance(degree, (int, np.integer)):
        raise InvalidArgument(f"Degree must be an integer, not {type(degree)}")
    if degree < 0:
        raise InvalidArgument(f"Degree must be non-negative: {degree}")
