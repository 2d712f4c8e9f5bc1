"""Internal utilities for beda."""

from typing import Union

from beda.enums import Metric
from beda.exceptions import MetricError

# Valid metric names (lowercase)
VALID_METRICS = frozenset(m.value for m in Metric)


def normalize_metric(metric: Union[str, Metric]) -> str:
    """Convert Metric enum to string, or validate string metric name.

    Args:
        metric: Either a Metric enum value or a string metric name.

    Returns:
        Lowercase string metric name.

    Raises:
        MetricError: If the metric name is not recognized.
        TypeError: If metric is not a string or Metric enum.

    Example:
        >>> normalize_metric(Metric.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_metric("Levenshtein")
        'levenshtein'
    """
    if isinstance(metric, Metric):
        return metric.value

    if isinstance(metric, str):
        metric_lower = metric.lower()
        if metric_lower in VALID_METRICS:
            return metric_lower
        raise MetricError(
            f"Unknown metric: '{metric}'. Valid options: {sorted(VALID_METRICS)}"
        )

    raise TypeError(f"metric must be str or Metric enum, got {type(metric).__name__}")


__all__ = ["normalize_metric", "VALID_METRICS"]
