"""
Utilities

- grid of query points
"""

import numpy as np
import polars as pl


def get_grid(
    steps: int,
    x_range: tuple[float, float],
    feature: str = "x",
) -> pl.DataFrame:
    """Get evenly spaced query points.

    ## Parameters
    - steps (int): number of points
    - x_range (tuple): (min, max), both included

    ## Returns
    - grid (DataFrame): single column `feature`.
    """

    if len(x_range) != 2:
        raise ValueError(f"Expects range as (min,max), not {x_range}")

    if steps < 2:
        print(f"WARNING: {steps} < 2 steps for {feature}, gives only minimum value")

    grid = np.linspace(x_range[0], x_range[1], max(steps, 1), dtype=float)

    return pl.DataFrame({feature: grid})
