import numpy as np
import polars as pl

import polyfit.utility_functions as util
from polyfit.evaluate import evaluate
from polyfit.fitting import fit
from polyfit.solvers import DEFAULT_METHOD, LeastSquaresSolver, method_type
from polyfit.stats import summarize


class PolynomialModel:
    """Polynomial regression on a polars frame of samples"""

    def __init__(
        self,
        samples: pl.DataFrame,
        degree: int = 1,
        feature: str = "x",
        target: str = "value",
        weight: str | None = None,
        method: method_type | LeastSquaresSolver = DEFAULT_METHOD,
        verbose=True,
    ) -> None:
        missing = [c for c in (feature, target, weight) if c and c not in samples.columns]
        if missing:
            raise ValueError(f"Missing columns: {missing}")

        if samples.is_empty():
            raise ValueError("Needs at least one sample")

        self.degree = degree
        self.feature = feature
        self.target = target
        self.method = method

        self.x = samples[feature].to_numpy().astype(float)
        self.y = samples[target].to_numpy().astype(float)
        self.weights = None if weight is None else samples[weight].to_numpy()

        self.x_range = (float(self.x.min()), float(self.x.max()))

        self._fit(verbose=verbose)

    def __str__(self) -> str:
        lines = [
            f"Polynomial model (degree: {self.degree})",
            f"{len(self.x)} samples",
            f"coefficients: {self.beta.tolist()}",
        ]
        return "\n".join(lines)

    def _fit(self, verbose=True):
        """Fit model by weighted least squares."""
        M, N = len(self.x), self.degree + 1

        if verbose:
            print(f"{M} samples\n{N} coefficients")

            if M < N:
                print("Note: under-determined system")

            if self.weights is not None:
                print(f"weighted by {self.weights.shape[0]} weights")

        self.beta = fit(
            self.x,
            self.y,
            self.degree,
            weights=self.weights,
            method=self.method,
        )

        if verbose:
            print(f"coefficients: {self.beta}, rms: {self.rms:.4g}")

    @property
    def polynomial(self) -> np.polynomial.Polynomial:
        return np.polynomial.Polynomial(self.beta)

    @property
    def yhat(self) -> np.ndarray:
        """Prediction of training data"""
        return evaluate(self.beta, self.x)

    @property
    def residuals(self) -> np.ndarray:
        return self.y - self.yhat

    @property
    def rms(self) -> float:
        return float(np.sqrt(np.mean(self.residuals**2)))

    def residual_stats(self) -> pl.DataFrame:
        return summarize(self.residuals)

    def predict(
        self,
        samples: pl.DataFrame,
    ) -> pl.DataFrame:
        """Predict new samples."""
        y_pred = evaluate(self.beta, samples[self.feature].to_numpy())

        return samples.with_columns(y_pred=pl.Series(y_pred))

    def minimum_numeric(self, steps=100):
        """Evaluate polynomial on a grid over the fitted range, and find minimum"""

        high_res = util.get_grid(steps, self.x_range, self.feature)
        high_res = self.predict(high_res)

        minimum = high_res.filter(pl.col("y_pred") == pl.col("y_pred").min())
        return minimum, high_res
