from timeit import default_timer
from typing import Literal

import polars as pl
from tqdm import tqdm

from polyfit.fitting import fit
from polyfit.solvers import DEFAULT_METHOD, LeastSquaresSolver, method_type


def fit_groups(
    samples: pl.DataFrame,
    by: str,
    degree: int,
    feature: str = "x",
    target: str = "value",
    weight: str | None = None,
    method: method_type | LeastSquaresSolver = DEFAULT_METHOD,
    verbose: Literal[0, 1, 2] = 1,
) -> pl.DataFrame:
    """Fit one polynomial per group of samples.

    ## parameters
    - samples (DataFrame): long format, one row per sample.
    - by (str): column identifying the group.
    - degree (int): same degree for every group.
    - weight (str | None): optional column of per-sample weights.
    - verbose (int): 0 silent, 1 progress bar, 2 also per-group notes.

    ## returns
    - coefficients (DataFrame): `by`, `c0` ... `c{degree}`, `n_samples`,
        sorted by group.
    """

    missing = [c for c in (by, feature, target, weight) if c and c not in samples.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}")

    t_start = default_timer()

    groups = samples.partition_by(by, maintain_order=True, as_dict=True)
    items = groups.items()

    if verbose >= 1:
        print(f"Fitting {len(groups)} groups (degree {degree})")
        items = tqdm(items, total=len(groups))

    rows = []
    for key, group in items:
        group_key = key[0] if isinstance(key, tuple) else key
        weights = None if weight is None else group[weight].to_numpy()

        if verbose >= 2 and len(group) < degree + 1:
            print(f"Note: under-determined system for {by}={group_key}")

        coefficients = fit(
            group[feature].to_numpy(),
            group[target].to_numpy(),
            degree,
            weights=weights,
            method=method,
        )

        row = {by: group_key}
        row.update({f"c{j}": float(c) for j, c in enumerate(coefficients)})
        row["n_samples"] = len(group)
        rows.append(row)

    if verbose >= 1:
        print(f"Elapsed time {default_timer() - t_start:.2f} s.")

    schema = {by: samples.schema[by]}
    schema.update({f"c{j}": pl.Float64 for j in range(degree + 1)})
    schema["n_samples"] = pl.Int64

    return pl.DataFrame(rows, schema=schema, orient="row").sort(by)
