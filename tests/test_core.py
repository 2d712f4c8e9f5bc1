"""Tests for the public beda API surface.

Covers the StringDiff pair object, metric dispatch through compare(),
the Metric enum, module aliases and byte-level input handling.
"""

import dataclasses

import pytest

import beda
from beda import Metric, StringDiff
from beda._utils import VALID_METRICS, normalize_metric


class TestStringDiff:
    """StringDiff methods give the same results as the free functions."""

    def test_levenshtein(self):
        sd = StringDiff("abc", "abcabc")
        assert sd.levenshtein_distance() == 3
        assert sd.levenshtein_distance() == beda.levenshtein_distance("abc", "abcabc")

    def test_damerau_levenshtein(self):
        sd = StringDiff("ab", "ba")
        assert sd.damerau_levenshtein_distance() == 1
        assert sd.damerau_levenshtein_distance(1, 1, 5, 3) == 2
        assert sd.damerau_levenshtein_distance(costs=beda.CostModel(1, 1, 5, 1)) == 1

    def test_damerau_levenshtein_invalid_costs(self):
        sd = StringDiff("ab", "ba")
        with pytest.raises(beda.CostModelError):
            sd.damerau_levenshtein_distance(1, 1, 1, 0)

    def test_trigram(self):
        sd = StringDiff("Twitter v1", "Twitter v2")
        assert sd.trigram_compare() == pytest.approx(0.6666667, abs=1e-6)

    def test_jaro(self):
        sd = StringDiff("martha", "marhta")
        assert sd.jaro_distance() == pytest.approx(0.9444444, abs=1e-6)

    def test_jaro_winkler(self):
        sd = StringDiff("martha", "marhta")
        assert sd.jaro_winkler_distance(0.1) == pytest.approx(0.96111107, abs=1e-6)
        assert sd.jaro_winkler_distance() == sd.jaro_winkler_distance(0.1)

    def test_repeated_calls_are_stable(self):
        sd = StringDiff("martha", "marhta")
        first = (
            sd.levenshtein_distance(),
            sd.damerau_levenshtein_distance(),
            sd.trigram_compare(),
            sd.jaro_distance(),
            sd.jaro_winkler_distance(0.1),
        )
        second = (
            sd.levenshtein_distance(),
            sd.damerau_levenshtein_distance(),
            sd.trigram_compare(),
            sd.jaro_distance(),
            sd.jaro_winkler_distance(0.1),
        )
        assert first == second

    def test_immutable(self):
        sd = StringDiff("a", "b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            sd.s1 = "c"

    def test_value_equality(self):
        assert StringDiff("a", "b") == StringDiff("a", "b")
        assert hash(StringDiff("a", "b")) == hash(StringDiff("a", "b"))
        assert StringDiff("a", "b") != StringDiff("b", "a")

    def test_new_string_diff(self):
        sd = beda.new_string_diff("abc", "abd")
        assert isinstance(sd, StringDiff)
        assert sd.levenshtein_distance() == 1

    @pytest.mark.parametrize(
        "name",
        [
            "levenshtein_distance",
            "damerau_levenshtein_distance",
            "trigram_compare",
            "jaro_distance",
            "jaro_winkler_distance",
            "compare",
        ],
    )
    def test_methods_documented(self, name):
        assert getattr(StringDiff, name).__doc__

    def test_compare_method(self):
        sd = StringDiff("ab", "ba")
        assert sd.compare() == 2
        assert sd.compare("damerau") == 1
        assert sd.compare(Metric.TRIGRAM) == 0.0


class TestCompare:
    """Tests for metric dispatch."""

    @pytest.mark.parametrize(
        "metric,func",
        [
            (Metric.LEVENSHTEIN, beda.levenshtein_distance),
            (Metric.DAMERAU_LEVENSHTEIN, beda.damerau_levenshtein_distance),
            (Metric.DAMERAU, beda.damerau_levenshtein_distance),
            (Metric.TRIGRAM, beda.trigram_compare),
            (Metric.JARO, beda.jaro_distance),
            (Metric.JARO_WINKLER, beda.jaro_winkler_distance),
        ],
    )
    def test_dispatch_matches_function(self, metric, func):
        assert beda.compare("martha", "marhta", metric) == func("martha", "marhta")
        assert beda.compare("martha", "marhta", metric.value) == func("martha", "marhta")

    def test_default_metric_is_levenshtein(self):
        assert beda.compare("kitten", "sitting") == 3

    def test_case_insensitive_name(self):
        assert beda.compare("ab", "ba", "Damerau_Levenshtein") == 1

    def test_options_forwarded(self):
        assert beda.compare("martha", "marhta", "jaro_winkler", prefix_scale=0.2) == pytest.approx(
            beda.jaro_winkler_distance("martha", "marhta", 0.2)
        )
        assert beda.compare("ab", "ba", "damerau", costs=beda.CostModel(1, 1, 5, 3)) == 2


class TestMetricEnum:
    """Tests for the Metric enum and name normalization."""

    def test_string_values(self):
        assert Metric.JARO_WINKLER == "jaro_winkler"
        assert Metric("trigram") is Metric.TRIGRAM

    def test_normalize_enum(self):
        assert normalize_metric(Metric.JARO) == "jaro"

    def test_normalize_string(self):
        assert normalize_metric("LEVENSHTEIN") == "levenshtein"

    def test_valid_metrics(self):
        assert VALID_METRICS == {m.value for m in Metric}


class TestByteSemantics:
    """Strings are compared as their UTF-8 bytes."""

    def test_bytes_and_str_agree(self):
        assert beda.levenshtein_distance(b"kitten", b"sitting") == beda.levenshtein_distance("kitten", "sitting")
        assert beda.trigram_compare(b"Twitter v1", "Twitter v2") == beda.trigram_compare("Twitter v1", "Twitter v2")
        assert beda.jaro_distance(bytearray(b"martha"), memoryview(b"marhta")) == beda.jaro_distance("martha", "marhta")

    def test_multibyte_character_counts_bytes(self):
        # "é" is two bytes in UTF-8: one substitution and one deletion
        assert beda.levenshtein_distance("café", "cafe") == 2
        assert beda.levenshtein_distance("café", b"caf\xc3\xa9") == 0


class TestModule:
    """Tests for module-level exports."""

    def test_version(self):
        assert isinstance(beda.__version__, str)

    def test_aliases(self):
        assert beda.edit_distance is beda.levenshtein_distance
        assert beda.similarity is beda.jaro_winkler_distance

    def test_all_exports_exist(self):
        for name in beda.__all__:
            assert hasattr(beda, name), name

    def test_defaults(self):
        assert beda.DEFAULT_PREFIX_SCALE == 0.1
        assert beda.MAX_PREFIX_LENGTH == 4


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
