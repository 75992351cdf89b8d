"""Descriptive statistics containers (ModelStats and its children)."""

from dataclasses import dataclass, field


@dataclass
class Counts:
    """Frequency counts for a single field."""

    total_freq: float
    missing_freq: float | None = None
    invalid_freq: float | None = None


@dataclass
class NumericInfo:
    """Summary statistics of a continuous field."""

    minimum: float | None = None
    maximum: float | None = None
    mean: float | None = None
    standard_deviation: float | None = None
    median: float | None = None
    inter_quartile_range: float | None = None


@dataclass
class DiscrStats:
    """Value frequencies of a categorical field.

    Attributes:
        values: Distinct values, aligned with counts.
        counts: Occurrence count of each value.
    """

    values: list[str] = field(default_factory=list)
    counts: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.values) != len(self.counts):
            raise ValueError(
                f"DiscrStats values and counts differ in length "
                f"({len(self.values)} != {len(self.counts)})"
            )


@dataclass
class UnivariateStats:
    """Statistics for one field, computed in isolation."""

    field: str
    counts: Counts | None = None
    numeric_info: NumericInfo | None = None
    discr_stats: DiscrStats | None = None


@dataclass
class ModelStats:
    """Statistics section of a model."""

    univariate_stats: list[UnivariateStats] = field(default_factory=list)

    def add_univariate_stats(self, *univariate_stats: UnivariateStats) -> "ModelStats":
        self.univariate_stats.extend(univariate_stats)
        return self
