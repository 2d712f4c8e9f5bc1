"""Enums for beda API."""

from enum import Enum


class Metric(str, Enum):
    """Available string pair metrics.

    This enum provides type-safe metric selection for :func:`beda.compare`.
    String values are accepted wherever a Metric is.

    Example:
        >>> from beda import Metric, compare
        >>> compare("martha", "marhta", Metric.JARO_WINKLER, prefix_scale=0.1)
        0.961...
    """

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including adjacent swaps, with configurable costs"""

    DAMERAU = "damerau"
    """Alias for DAMERAU_LEVENSHTEIN"""

    TRIGRAM = "trigram"
    """Trigram overlap ratio over space-padded strings"""

    JARO = "jaro"
    """Jaro distance, simplified matching rule"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro distance boosted by a common prefix"""


__all__ = ["Metric"]
