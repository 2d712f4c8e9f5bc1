"""StringDiff: a pair of strings scored by any beda metric.

This module provides a small value object holding two strings, so that
several metrics can be computed over the same pair without passing the
strings again. The algorithms themselves live in :mod:`beda._core`; every
method here delegates to the matching free function.
"""

from dataclasses import dataclass
from typing import Optional, Union

from beda._core import (
    DEFAULT_PREFIX_SCALE,
    MAX_PREFIX_LENGTH,
    CostModel,
    StrOrBytes,
    compare,
    damerau_levenshtein_distance,
    jaro_distance,
    jaro_winkler_distance,
    levenshtein_distance,
    trigram_compare,
)
from beda.enums import Metric


@dataclass(frozen=True)
class StringDiff:
    """
    An immutable pair of strings to compare.

    Both sides are compared as raw bytes (``str`` is encoded as UTF-8).
    Instances hold no cached state, so they are safe to share between
    threads and repeated calls always return the same result.

    Example:
        >>> from beda import StringDiff
        >>>
        >>> sd = StringDiff("martha", "marhta")
        >>> sd.levenshtein_distance()
        2
        >>> sd.damerau_levenshtein_distance()
        1
        >>> round(sd.jaro_winkler_distance(0.1), 4)
        0.9611
    """

    s1: StrOrBytes
    s2: StrOrBytes

    def levenshtein_distance(self) -> int:
        """Minimum number of single-byte edits turning s1 into s2."""
        return levenshtein_distance(self.s1, self.s2)

    def damerau_levenshtein_distance(
        self,
        delete_cost: Optional[float] = None,
        insert_cost: Optional[float] = None,
        replace_cost: Optional[float] = None,
        swap_cost: Optional[float] = None,
        *,
        costs: Optional[CostModel] = None,
    ) -> float:
        """
        Damerau-Levenshtein distance from s1 to s2.

        See :func:`beda.damerau_levenshtein_distance` for the cost arguments.
        """
        return damerau_levenshtein_distance(
            self.s1,
            self.s2,
            delete_cost,
            insert_cost,
            replace_cost,
            swap_cost,
            costs=costs,
        )

    def trigram_compare(self) -> float:
        """Trigram overlap ratio of the pair."""
        return trigram_compare(self.s1, self.s2)

    def jaro_distance(self) -> float:
        """Jaro distance of the pair, simplified matching rule."""
        return jaro_distance(self.s1, self.s2)

    def jaro_winkler_distance(
        self,
        prefix_scale: float = DEFAULT_PREFIX_SCALE,
        max_prefix_length: int = MAX_PREFIX_LENGTH,
    ) -> float:
        """Jaro distance boosted by the common prefix, see :func:`beda.jaro_winkler_distance`."""
        return jaro_winkler_distance(self.s1, self.s2, prefix_scale, max_prefix_length)

    def compare(self, metric: Union[str, Metric] = Metric.LEVENSHTEIN, **options) -> float:
        """Score the pair with the named metric, see :func:`beda.compare`."""
        return compare(self.s1, self.s2, metric, **options)


def new_string_diff(s1: StrOrBytes, s2: StrOrBytes) -> StringDiff:
    """Create a StringDiff for ``s1`` and ``s2``."""
    return StringDiff(s1, s2)


__all__ = ["StringDiff", "new_string_diff"]
