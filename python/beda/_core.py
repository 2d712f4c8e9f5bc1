"""Core string metric algorithms for beda.

Every metric works on raw bytes: ``str`` input is encoded as UTF-8, while
``bytes``-like input is used as-is. No grapheme or locale handling is done.
"""

import warnings
from collections import Counter
from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Optional, Tuple, Union

from beda._utils import normalize_metric
from beda.enums import Metric
from beda.exceptions import CostModelError, UndefinedScoreError, ValidationError

StrOrBytes = Union[str, bytes, bytearray, memoryview]

DEFAULT_PREFIX_SCALE = 0.1
MAX_PREFIX_LENGTH = 4

# =============================================================================
# Cost model
# =============================================================================


@dataclass(frozen=True)
class CostModel:
    """Operation costs for :func:`damerau_levenshtein_distance`.

    Example:
        >>> CostModel(delete=1, insert=1, replace=1, swap=1)
        CostModel(delete=1, insert=1, replace=1, swap=1)
        >>> CostModel(delete=1, insert=1, replace=1, swap=0)
        Traceback (most recent call last):
        ...
        beda.exceptions.CostModelError: swap cost 0 is too low: ...
    """

    delete: float = 1
    insert: float = 1
    replace: float = 1
    swap: float = 1

    def __post_init__(self) -> None:
        for name in ("delete", "insert", "replace", "swap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise CostModelError(
                    f"{name} cost must be a real number, got {type(value).__name__}"
                )
            # NaN fails this comparison too
            if not value >= 0:
                raise CostModelError(f"{name} cost must be non-negative, got {value}")
        if 2 * self.swap < self.insert + self.delete:
            raise CostModelError(
                f"swap cost {self.swap} is too low: 2 * swap must be >= insert + delete "
                f"({self.insert} + {self.delete})"
            )

    @classmethod
    def unit(cls) -> "CostModel":
        """Cost model where every operation costs 1."""
        return cls(1, 1, 1, 1)


def _resolve_costs(
    costs: Optional[CostModel],
    delete_cost: Optional[float],
    insert_cost: Optional[float],
    replace_cost: Optional[float],
    swap_cost: Optional[float],
) -> CostModel:
    individual = (delete_cost, insert_cost, replace_cost, swap_cost)
    if costs is not None:
        if any(c is not None for c in individual):
            raise ValidationError(
                "pass either costs=CostModel(...) or individual costs, not both"
            )
        if not isinstance(costs, CostModel):
            raise TypeError(f"costs must be a CostModel, got {type(costs).__name__}")
        return costs
    if all(c is None for c in individual):
        return CostModel.unit()
    return CostModel(
        delete=1 if delete_cost is None else delete_cost,
        insert=1 if insert_cost is None else insert_cost,
        replace=1 if replace_cost is None else replace_cost,
        swap=1 if swap_cost is None else swap_cost,
    )


def as_bytes(value: StrOrBytes) -> bytes:
    """Coerce a metric argument to the byte sequence it is compared as."""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def _order_by_length(a: bytes, b: bytes) -> Tuple[bytes, bytes]:
    """Return ``(shorter, longer)``; on a tie the first argument is the shorter."""
    if len(a) > len(b):
        return b, a
    return a, b


# =============================================================================
# Levenshtein
# =============================================================================


def levenshtein_distance(s1: StrOrBytes, s2: StrOrBytes) -> int:
    """
    Compute Levenshtein (edit) distance between two strings.

    Args:
        s1: First string
        s2: Second string

    Returns:
        The minimum number of single-byte insertions, deletions and
        substitutions needed to transform s1 into s2.

    Complexity:
        Time: O(m*n) where m, n are byte lengths.
        Space: O(n) using two-row optimization.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("abc", "")
        3
    """
    a = as_bytes(s1)
    b = as_bytes(s2)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (ca != cb),  # substitution
                )
            )
        previous = current
    return previous[-1]


# =============================================================================
# Damerau-Levenshtein
# =============================================================================


def damerau_levenshtein_distance(
    s1: StrOrBytes,
    s2: StrOrBytes,
    delete_cost: Optional[float] = None,
    insert_cost: Optional[float] = None,
    replace_cost: Optional[float] = None,
    swap_cost: Optional[float] = None,
    *,
    costs: Optional[CostModel] = None,
) -> float:
    """
    Compute Damerau-Levenshtein distance (includes transpositions).

    Like Levenshtein but also allows swapping two adjacent characters. Each
    operation has its own cost; omitted costs default to 1, so with no costs
    at all the result is the plain distance as an int.

    Args:
        s1: Source string
        s2: Target string
        delete_cost: Cost of deleting a byte from s1
        insert_cost: Cost of inserting a byte from s2
        replace_cost: Cost of replacing a byte
        swap_cost: Cost of swapping two adjacent bytes
        costs: A CostModel, instead of the individual costs

    Returns:
        The minimum total cost, in the unit of the costs.

    Raises:
        CostModelError: If ``2 * swap_cost < insert_cost + delete_cost`` or a
            cost is negative. Raised before any computation.
        ValidationError: If both ``costs`` and individual costs are given.

    Complexity:
        Time: O(m*n) where m, n are byte lengths.
        Space: O(m*n) for the full DP matrix (transposition tracking requires it).

    Example:
        >>> damerau_levenshtein_distance("ca", "ac")  # One transposition
        1
        >>> levenshtein_distance("ca", "ac")  # Two edits without transposition
        2
    """
    model = _resolve_costs(costs, delete_cost, insert_cost, replace_cost, swap_cost)
    a = as_bytes(s1)
    b = as_bytes(s2)

    if not a:
        return len(b) * model.insert
    if not b:
        return len(a) * model.delete

    delete = model.delete
    insert = model.insert
    replace = model.replace
    swap = model.swap

    # table[i][j] is the distance between a[:i + 1] and b[:j + 1]
    table: List[List[float]] = [[0] * len(b) for _ in range(len(a))]
    if a[0] != b[0]:
        table[0][0] = min(replace, delete + insert)
    for i in range(1, len(a)):
        table[i][0] = min(
            table[i - 1][0] + delete,
            (i + 1) * delete + insert,
            i * delete + (0 if a[i] == b[0] else replace),
        )
    for j in range(1, len(b)):
        table[0][j] = min(
            (j + 1) * insert + delete,
            table[0][j - 1] + insert,
            j * insert + (0 if a[0] == b[j] else replace),
        )

    last_row_for_char: Dict[int, int] = {a[0]: 0}
    for i in range(1, len(a)):
        # Latest target column (so far in this row) holding a[i]
        last_col_match = 0 if a[i] == b[0] else -1
        for j in range(1, len(b)):
            i_swap = last_row_for_char.get(b[j])
            j_swap = last_col_match

            best = min(table[i - 1][j] + delete, table[i][j - 1] + insert)
            if a[i] == b[j]:
                match = table[i - 1][j - 1]
                last_col_match = j
            else:
                match = table[i - 1][j - 1] + replace
            if match < best:
                best = match

            if i_swap is not None and j_swap != -1:
                if i_swap == 0 and j_swap == 0:
                    pre_swap = 0
                else:
                    pre_swap = table[max(0, i_swap - 1)][max(0, j_swap - 1)]
                transposed = (
                    pre_swap
                    + (i - i_swap - 1) * delete
                    + (j - j_swap - 1) * insert
                    + swap
                )
                if transposed < best:
                    best = transposed

            table[i][j] = best
        last_row_for_char[a[i]] = i

    return table[-1][-1]


# =============================================================================
# Trigram
# =============================================================================


def extract_trigrams(s: StrOrBytes) -> List[bytes]:
    """
    Cut a string into its space-padded 3-byte windows, in order.

    A non-empty string of length n yields n trigrams; an empty string
    yields none.

    Example:
        >>> extract_trigrams("ab")
        [b' ab', b'ab ']
        >>> extract_trigrams("")
        []
    """
    data = as_bytes(s)
    if not data:
        return []
    padded = b" " + data + b" "
    return [padded[i : i + 3] for i in range(len(padded) - 2)]


def trigram_compare(s1: StrOrBytes, s2: StrOrBytes) -> float:
    """
    Compare two strings by trigram overlap.

    The numerator counts every equal (s1 trigram, s2 trigram) pair, so
    repeated trigrams count more than once; the denominator is the number of
    distinct trigrams across both strings. The ratio can therefore exceed 1.0
    for strings with many repeated trigrams.

    Raises:
        UndefinedScoreError: If both strings are empty.

    Example:
        >>> round(trigram_compare("Twitter v1", "Twitter v2"), 6)
        0.666667
    """
    s_trigrams = Counter(extract_trigrams(s1))
    t_trigrams = Counter(extract_trigrams(s2))

    matching = sum(count * t_trigrams[tg] for tg, count in s_trigrams.items())
    unique = len(s_trigrams.keys() | t_trigrams.keys())
    if unique == 0:
        raise UndefinedScoreError("trigram comparison of two empty strings is undefined")
    return matching / unique


# =============================================================================
# Jaro / Jaro-Winkler
# =============================================================================


def _matching(a: bytes, b: bytes) -> int:
    short, long = _order_by_length(a, b)
    present = set(long)
    return sum(1 for c in short if c in present)


def _nonmatching(a: bytes, b: bytes) -> int:
    short, long = _order_by_length(a, b)
    mismatches = sum(1 for cs, cl in zip(short, long) if cs != cl)
    return len(long) - len(short) + mismatches


def _jaro(a: bytes, b: bytes) -> float:
    m = _matching(a, b)
    if m == 0:
        raise UndefinedScoreError(
            "Jaro distance is undefined for strings without matching characters"
        )
    half_transposes = _nonmatching(a, b) / 2
    return (m / len(a) + m / len(b) + (m - half_transposes) / m) / 3


def jaro_distance(s1: StrOrBytes, s2: StrOrBytes) -> float:
    """
    Compute Jaro distance.

    Uses a simplified matching rule: a byte of the shorter string matches if
    it occurs anywhere in the longer one, and transpositions are
    approximated by position-wise mismatches plus the length difference. The
    result is not the textbook windowed Jaro value.

    Raises:
        UndefinedScoreError: If no byte matches (including empty input).

    Example:
        >>> round(jaro_distance("martha", "marhta"), 6)
        0.944444
    """
    return _jaro(as_bytes(s1), as_bytes(s2))


def jaro_winkler_distance(
    s1: StrOrBytes,
    s2: StrOrBytes,
    prefix_scale: float = DEFAULT_PREFIX_SCALE,
    max_prefix_length: int = MAX_PREFIX_LENGTH,
) -> float:
    """
    Compute Jaro-Winkler distance.

    Extends :func:`jaro_distance` by giving extra weight to a common prefix.

    Args:
        s1: First string
        s2: Second string
        prefix_scale: Weight given to each common prefix byte (default 0.1).
            Values outside [0, 0.25] are accepted but can push the result
            out of [0, 1]; a RuntimeWarning is emitted.
        max_prefix_length: Maximum prefix length to consider (default 4)

    Raises:
        UndefinedScoreError: If no byte matches (including empty input).
        ValidationError: If max_prefix_length is negative.

    Example:
        >>> round(jaro_winkler_distance("martha", "marhta", 0.1), 6)
        0.961111
    """
    if isinstance(max_prefix_length, bool) or not isinstance(max_prefix_length, int):
        raise ValidationError("max_prefix_length must be an int")
    if max_prefix_length < 0:
        raise ValidationError(
            f"max_prefix_length must be non-negative, got {max_prefix_length}"
        )
    if not 0.0 <= prefix_scale <= 0.25:
        warnings.warn(
            f"prefix_scale={prefix_scale} is outside [0, 0.25]; "
            "the result may fall outside [0, 1]",
            RuntimeWarning,
            stacklevel=2,
        )

    a = as_bytes(s1)
    b = as_bytes(s2)
    dj = _jaro(a, b)

    short, long = _order_by_length(a, b)
    prefix = 0
    for cs, cl in zip(short[:max_prefix_length], long):
        if cs != cl:
            break
        prefix += 1

    return dj + (prefix_scale * prefix) * (1.0 - dj)


# =============================================================================
# Dispatch
# =============================================================================

_METRICS = {
    Metric.LEVENSHTEIN.value: levenshtein_distance,
    Metric.DAMERAU_LEVENSHTEIN.value: damerau_levenshtein_distance,
    Metric.DAMERAU.value: damerau_levenshtein_distance,
    Metric.TRIGRAM.value: trigram_compare,
    Metric.JARO.value: jaro_distance,
    Metric.JARO_WINKLER.value: jaro_winkler_distance,
}


def compare(
    s1: StrOrBytes,
    s2: StrOrBytes,
    metric: Union[str, Metric] = Metric.LEVENSHTEIN,
    **options,
) -> float:
    """
    Score a pair of strings with the named metric.

    Args:
        s1: First string
        s2: Second string
        metric: A Metric member or its name (case-insensitive)
        **options: Forwarded to the metric, e.g. ``prefix_scale`` for
            Jaro-Winkler or ``costs`` for Damerau-Levenshtein

    Raises:
        MetricError: If the metric name is not recognized.

    Example:
        >>> compare("ab", "ba", "damerau")
        1
        >>> compare("ab", "ba", Metric.LEVENSHTEIN)
        2
    """
    return _METRICS[normalize_metric(metric)](s1, s2, **options)


__all__ = [
    "CostModel",
    "DEFAULT_PREFIX_SCALE",
    "MAX_PREFIX_LENGTH",
    "as_bytes",
    "levenshtein_distance",
    "damerau_levenshtein_distance",
    "extract_trigrams",
    "trigram_compare",
    "jaro_distance",
    "jaro_winkler_distance",
    "compare",
]
