"""
Univariate statistics of training columns.

Computes the PMML UnivariateStats record for one column of data, as
continuous (NumericInfo) or categorical (DiscrStats) summaries.
"""

import numpy as np
import pandas as pd

from skpmml.pmml.stats import Counts, DiscrStats, NumericInfo, UnivariateStats


def _counts(series: pd.Series, n_invalid: int = 0) -> Counts:
    n_missing = int(series.isna().sum())
    return Counts(
        total_freq=len(series),
        missing_freq=n_missing,
        invalid_freq=n_invalid,
    )


def continuous_stats(name: str, series: pd.Series) -> UnivariateStats:
    """
    Compute counts and numeric summaries of a continuous column.

    Values that cannot be parsed as numbers count as invalid. Summaries
    use the valid non-missing values only; standard deviation is the
    population value (ddof=0) and the interquartile range uses linear
    interpolation.

    Args:
        name: Field name to record in the statistics.
        series: Column values.

    Returns:
        UnivariateStats with Counts and NumericInfo. NumericInfo is None
        if no valid value exists.
    """
    numeric = pd.to_numeric(series, errors="coerce")
    n_invalid = int((numeric.isna() & series.notna()).sum())
    counts = _counts(series, n_invalid=n_invalid)

    values = numeric.dropna().to_numpy(dtype=float)
    if values.size == 0:
        return UnivariateStats(field=name, counts=counts)

    q1, median, q3 = np.percentile(values, [25, 50, 75])
    numeric_info = NumericInfo(
        minimum=float(values.min()),
        maximum=float(values.max()),
        mean=float(values.mean()),
        standard_deviation=float(values.std(ddof=0)),
        median=float(median),
        inter_quartile_range=float(q3 - q1),
    )
    return UnivariateStats(field=name, counts=counts, numeric_info=numeric_info)


def categorical_stats(name: str, series: pd.Series) -> UnivariateStats:
    """
    Compute counts and value frequencies of a categorical column.

    Args:
        name: Field name to record in the statistics.
        series: Column values. Values are compared by their string form.

    Returns:
        UnivariateStats with Counts and DiscrStats, values sorted.
    """
    counts = _counts(series)

    frequencies = series.dropna().astype(str).value_counts().sort_index()
    discr_stats = DiscrStats(
        values=[str(v) for v in frequencies.index],
        counts=[int(c) for c in frequencies.to_numpy()],
    )
    return UnivariateStats(field=name, counts=counts, discr_stats=discr_stats)
