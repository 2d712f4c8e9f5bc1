"""
beda - string pair similarity and distance metrics

A small pure-Python library scoring two strings with Levenshtein,
Damerau-Levenshtein (with configurable operation costs), trigram overlap,
Jaro and Jaro-Winkler. Strings are compared as raw bytes.

Example usage:
    >>> import beda

    # Free functions
    >>> beda.levenshtein_distance("abc", "abd")
    1
    >>> round(beda.trigram_compare("Twitter v1", "Twitter v2"), 4)
    0.6667

    # Weighted Damerau-Levenshtein
    >>> beda.damerau_levenshtein_distance("ab", "ba", 1, 1, 1, 1)
    1

    # Pair object, for several metrics over the same strings
    >>> sd = beda.StringDiff("martha", "marhta")
    >>> round(sd.jaro_distance(), 4)
    0.9444
"""

from importlib.metadata import version as _get_version

from beda._core import (
    DEFAULT_PREFIX_SCALE,
    MAX_PREFIX_LENGTH,
    # Cost model for Damerau-Levenshtein
    CostModel,
    # Dispatch by metric name
    compare,
    # Distance functions
    damerau_levenshtein_distance,
    extract_trigrams,
    jaro_distance,
    jaro_winkler_distance,
    levenshtein_distance,
    trigram_compare,
)
from beda.enums import Metric
from beda.exceptions import (
    # Custom exceptions
    BedaError,
    CostModelError,
    MetricError,
    UndefinedScoreError,
    ValidationError,
)
from beda.string_diff import StringDiff, new_string_diff

__version__ = _get_version("beda")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "BedaError",
    "ValidationError",
    "CostModelError",
    "MetricError",
    "UndefinedScoreError",
    # Enums
    "Metric",
    # Configuration
    "CostModel",
    "DEFAULT_PREFIX_SCALE",
    "MAX_PREFIX_LENGTH",
    # Distance/similarity functions
    "levenshtein_distance",
    "damerau_levenshtein_distance",
    "trigram_compare",
    "extract_trigrams",
    "jaro_distance",
    "jaro_winkler_distance",
    "compare",
    # Pair object
    "StringDiff",
    "new_string_diff",
]


# Convenience aliases
edit_distance = levenshtein_distance
similarity = jaro_winkler_distance
