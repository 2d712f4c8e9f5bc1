"""Exception hierarchy for beda."""


class BedaError(Exception):
    """Base exception for all beda errors."""


class ValidationError(BedaError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class CostModelError(ValidationError):
    """Raised when a Damerau-Levenshtein cost model is not usable.

    The recurrence is only optimal when ``2 * swap >= insert + delete``.
    """


class MetricError(BedaError, ValueError):
    """Raised when an unknown or unsupported metric is specified."""


class UndefinedScoreError(BedaError, ZeroDivisionError):
    """Raised when a ratio metric has a zero denominator.

    This happens for the trigram comparison of two empty strings and for Jaro
    (and Jaro-Winkler) when the strings share no byte at all.
    """


__all__ = [
    "BedaError",
    "ValidationError",
    "CostModelError",
    "MetricError",
    "UndefinedScoreError",
]
