import unittest

import numpy as np

from polyfit.errors import InvalidArgument
from polyfit.solvers import (
    DEFAULT_METHOD,
    SOLVERS,
    ColPivQRSolver,
    JacobiSVDSolver,
    LeastSquaresSolver,
    get_solver,
)


class TestGetSolver(unittest.TestCase):
    def test_default(self):
        self.assertEqual(DEFAULT_METHOD, "jacobi_svd")
        self.assertIsInstance(get_solver(), JacobiSVDSolver)

    def test_by_name(self):
        self.assertIsInstance(get_solver("col_piv_qr"), ColPivQRSolver)
        self.assertListEqual(sorted(SOLVERS), ["col_piv_qr", "jacobi_svd"])

    def test_instance_passthrough(self):
        solver = ColPivQRSolver()
        self.assertIs(get_solver(solver), solver)

    def test_unknown(self):
        for method in ("svd", None, 3):
            with self.subTest(method=method):
                with self.assertRaises(InvalidArgument):
                    get_solver(method)

    def test_base_not_implemented(self):
        with self.assertRaises(NotImplementedError):
            LeastSquaresSolver().solve(np.eye(2), np.ones(2))


class TestSolve(unittest.TestCase):
    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.X = rng.normal(size=(12, 4))
        self.Y = rng.normal(size=12)
        self.reference, _, _, _ = np.linalg.lstsq(self.X, self.Y, rcond=None)

    def test_full_rank(self):
        for solver in (JacobiSVDSolver(), ColPivQRSolver()):
            with self.subTest(solver=solver):
                c = solver.solve(self.X, self.Y)
                self.assertEqual(c.shape, (4,))
                self.assertTrue(np.allclose(c, self.reference))

    def test_zero_matrix(self):
        X = np.zeros((3, 2))
        for solver in (JacobiSVDSolver(), ColPivQRSolver()):
            with self.subTest(solver=solver):
                c = solver.solve(X, np.ones(3))
                self.assertListEqual(c.tolist(), [0, 0])

    def test_duplicate_column(self):
        # second and third columns identical: rank 2
        X = np.column_stack([np.ones(5), np.arange(5.0), np.arange(5.0)])
        Y = 1 + 4 * np.arange(5.0)

        svd = JacobiSVDSolver().solve(X, Y)
        self.assertTrue(np.allclose(svd, [1, 2, 2]), f"not minimum norm: {svd}")

        qr = ColPivQRSolver().solve(X, Y)
        self.assertTrue(np.allclose(X @ qr, Y))
        self.assertAlmostEqual(qr[1] + qr[2], 4.0)

    def test_non_finite_matrix(self):
        X = np.array([[1.0, np.inf], [1.0, 2.0], [1.0, 3.0]])
        for solver in (JacobiSVDSolver(), ColPivQRSolver()):
            with self.subTest(solver=solver):
                c = solver.solve(X, np.ones(3))
                self.assertEqual(c.shape, (2,))
                self.assertTrue(np.isnan(c).all(), f"expected nan, got {c}")

    def test_repr(self):
        self.assertEqual(repr(JacobiSVDSolver()), "JacobiSVDSolver()")


if __name__ == "__main__":
    unittest.main()
