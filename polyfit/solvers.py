"""
Least squares solvers

- thin SVD (robust, default)
- column pivoting QR (faster, needs a well conditioned system)
"""

from typing import Literal

import numpy as np
import scipy.linalg

from polyfit.errors import InvalidArgument

method_type = Literal["jacobi_svd", "col_piv_qr"]

DEFAULT_METHOD: method_type = "jacobi_svd"


class LeastSquaresSolver:
    """Solves X c = Y in the least squares sense.

    Note: rank deficient systems never raise, the solver returns its best answer.
    A non-finite X or Y (e.g. overflowed powers) gives an all nan solution.
    """

    name = "base"

    def solve(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        """Solve for c.
        ## parameters
        - X (ndarray): design matrix, shape (N, k)
        - Y (ndarray): target vector, shape (N,)
        ## returns
        - c (ndarray): solution, shape (k,)
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @staticmethod
    def _finite(X: np.ndarray, Y: np.ndarray) -> bool:
        return bool(np.isfinite(X).all() and np.isfinite(Y).all())

    @staticmethod
    def _threshold(X: np.ndarray) -> float:
        # relative cutoff below which a singular value / pivot counts as zero
        return np.finfo(X.dtype).eps * max(X.shape)


class JacobiSVDSolver(LeastSquaresSolver):
    """Thin SVD. Gives the minimum norm solution for rank deficient X.

    Note: the name follows the robust SVD option of the fitting API. The
    factorization itself is `numpy.linalg.svd`, i.e. LAPACK divide and
    conquer (gesdd), not one-sided Jacobi.
    """

    name = "jacobi_svd"

    def solve(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        if not self._finite(X, Y):
            # overflow while building X propagates as nan
            return np.full(X.shape[1], np.nan, dtype=X.dtype)

        U, s, Vt = np.linalg.svd(X, full_matrices=False)

        if s.size == 0 or s[0] == 0:
            return np.zeros(X.shape[1], dtype=X.dtype)

        keep = s > self._threshold(X) * s[0]

        # project Y on the kept left singular vectors, scale, map back
        UtY = U[:, keep].T @ Y
        return Vt[keep].T @ (UtY / s[keep])


class ColPivQRSolver(LeastSquaresSolver):
    """Householder QR with column pivoting.

    Unknowns beyond the numerical rank are set to zero (basic solution).
    """

    name = "col_piv_qr"

    def solve(self, X: np.ndarray, Y: np.ndarray) -> np.ndarray:
        if not self._finite(X, Y):
            return np.full(X.shape[1], np.nan, dtype=X.dtype)

        Q, R, P = scipy.linalg.qr(X, mode="economic", pivoting=True)

        c = np.zeros(X.shape[1], dtype=X.dtype)

        diag = np.abs(np.diag(R))
        if diag.size == 0 or diag[0] == 0:
            return c

        rank = int(np.count_nonzero(diag > self._threshold(X) * diag[0]))

        QtY = Q[:, :rank].T @ Y
        z = scipy.linalg.solve_triangular(R[:rank, :rank], QtY, lower=False)
        c[P[:rank]] = z

        return c


SOLVERS: dict[str, type[LeastSquaresSolver]] = {
    JacobiSVDSolver.name: JacobiSVDSolver,
    ColPivQRSolver.name: ColPivQRSolver,
}


def get_solver(method: method_type | LeastSquaresSolver = DEFAULT_METHOD):
    """Get a solver by name, or pass an existing solver through."""

    if isinstance(method, LeastSquaresSolver):
        return method

    if not isinstance(method, str) or method not in SOLVERS:
        raise InvalidArgument(
            f"Unsupported method: {method} (expected one of {list(SOLVERS)})"
        )

    return SOLVERS[method]()
