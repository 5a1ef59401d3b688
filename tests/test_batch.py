import unittest

import numpy as np
import polars as pl

from polyfit.batch import fit_groups


class TestFitGroups(unittest.TestCase):
    def setUp(self) -> None:
        x = np.arange(5.0)
        self.samples = pl.concat(
            [
                pl.DataFrame({"group": ["b"] * 5, "x": x, "value": -x + 0.5 * x**2}),
                pl.DataFrame({"group": ["a"] * 5, "x": x, "value": 1 + 2 * x}),
            ]
        )

    def test_coefficients(self):
        coefs = fit_groups(self.samples, "group", 2, verbose=0)

        self.assertEqual(coefs.columns, ["group", "c0", "c1", "c2", "n_samples"])
        self.assertEqual(coefs["group"].to_list(), ["a", "b"], "not sorted by group")
        self.assertEqual(coefs["n_samples"].to_list(), [5, 5])

        a = coefs.row(0, named=True)
        b = coefs.row(1, named=True)
        self.assertTrue(np.allclose([a["c0"], a["c1"], a["c2"]], [1, 2, 0], atol=1e-9))
        self.assertTrue(np.allclose([b["c0"], b["c1"], b["c2"]], [0, -1, 0.5], atol=1e-9))

    def test_weight_column(self):
        samples = self.samples.with_columns(w=pl.lit(3.0))
        plain = fit_groups(self.samples, "group", 1, verbose=0)
        weighted = fit_groups(samples, "group", 1, weight="w", verbose=0)

        for col in ("c0", "c1"):
            self.assertTrue(np.allclose(plain[col].to_numpy(), weighted[col].to_numpy()))

    def test_progress(self):
        coefs = fit_groups(
            self.samples, "group", 1, method="col_piv_qr", verbose=2
        )
        self.assertEqual(len(coefs), 2)

    def test_missing_column(self):
        with self.assertRaises(ValueError):
            fit_groups(self.samples, "dataset", 1, verbose=0)

    def test_empty(self):
        coefs = fit_groups(self.samples.clear(), "group", 1, verbose=0)
        self.assertEqual(coefs.columns, ["group", "c0", "c1", "n_samples"])
        self.assertTrue(coefs.is_empty())


if __name__ == "__main__":
    unittest.main()
