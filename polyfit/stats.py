from typing import Literal, Sequence

import numpy as np
import polars as pl

stat_type = Literal["all", "mean", "std", "median", "min", "max", "rms"]


def _aggs(target: str, stat: stat_type | list[stat_type]) -> list[pl.Expr]:
    if stat == "all":
        stat = ["mean", "std", "median", "min", "max", "rms"]
    elif isinstance(stat, str):
        stat = [stat]

    aggs = {
        "mean": pl.col(target).mean().alias("mean"),
        "std": pl.col(target).std().alias("std"),
        "median": pl.col(target).median().alias("median"),
        "min": pl.col(target).min().alias("min"),
        "max": pl.col(target).max().alias("max"),
        "rms": (pl.col(target) ** 2).mean().sqrt().alias("rms"),
    }

    unknown = set(stat) - aggs.keys()
    if unknown:
        raise ValueError(f"Unsupported statistic: {sorted(unknown)}")

    return [aggs[k] for k in stat]


def summarize(
    values: Sequence[float] | np.ndarray | pl.Series,
    stat: stat_type | list[stat_type] = "all",
) -> pl.DataFrame:
    """Aggregate a sequence (e.g. fit residuals) into a single row.

    ## Returns
    - summary (DataFrame): one row, one column per statistic.
    """
    frame = pl.DataFrame({"value": np.asarray(values, dtype=float)})
    return frame.select(*_aggs("value", stat))


def group_summaries(
    samples: pl.DataFrame,
    by: str,
    target: str,
    stat: stat_type | list[stat_type] = "all",
) -> pl.DataFrame:
    """Same aggregates, per unique value of `by`."""
    return samples.group_by(by).agg(*_aggs(target, stat)).sort(by)
