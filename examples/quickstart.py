# %% [markdown]
# # beda: a quick tour
#
# Five ways to score how close two strings are:
#
# | Metric | Kind | Good for |
# |--------|------|----------|
# | Levenshtein | edit count | typos, short codes |
# | Damerau-Levenshtein | weighted edit cost | typos with swapped letters |
# | Trigram | overlap ratio | names and titles with suffix changes |
# | Jaro | ratio | short strings |
# | Jaro-Winkler | ratio with prefix boost | person names |
#
# Every metric compares raw bytes; `str` input is encoded as UTF-8.

# %%
import warnings

import beda

# %% [markdown]
# ## Part 1: Edit distances

# %%
print("Levenshtein")
for a, b in [("abc", "abd"), ("abc", "def"), ("kitten", "sitting"), ("ab", "ba")]:
    print(f"  {a!r:10} -> {b!r:10} {beda.levenshtein_distance(a, b)}")

print("\nDamerau-Levenshtein counts an adjacent swap as one edit")
for a, b in [("ab", "ba"), ("martha", "marhta"), ("ca", "abc")]:
    print(f"  {a!r:10} -> {b!r:10} {beda.damerau_levenshtein_distance(a, b)}")

# %% [markdown]
# ## Part 2: Operation costs
#
# Costs can be passed one by one or as a `CostModel`. A swap must cost at
# least half of a delete plus an insert, otherwise the model is rejected.

# %%
keyboard = beda.CostModel(delete=1, insert=1, replace=2, swap=1)
print(beda.damerau_levenshtein_distance("recieve", "receive", costs=keyboard))
print(beda.damerau_levenshtein_distance("recieve", "receive", 1, 1, 2, 3))

try:
    beda.CostModel(delete=1, insert=1, replace=1, swap=0)
except beda.CostModelError as exc:
    print(f"rejected: {exc}")

# %% [markdown]
# ## Part 3: Ratios

# %%
print(f"trigram      {beda.trigram_compare('Twitter v1', 'Twitter v2'):.4f}")
print(f"jaro         {beda.jaro_distance('martha', 'marhta'):.4f}")
print(f"jaro-winkler {beda.jaro_winkler_distance('martha', 'marhta', 0.1):.4f}")

# Repeated trigrams count once per matching pair, so the ratio can pass 1.0
print(f"trigram with repeats {beda.trigram_compare('aaaa', 'aaa'):.4f}")

# %% [markdown]
# ## Part 4: Degenerate input
#
# Ratios without a denominator raise `UndefinedScoreError` instead of
# returning NaN.

# %%
for a, b in [("", ""), ("abc", "xyz")]:
    try:
        beda.jaro_distance(a, b)
    except beda.UndefinedScoreError as exc:
        print(f"{a!r} vs {b!r}: {exc}")

# %% [markdown]
# ## Part 5: One pair, many metrics

# %%
sd = beda.StringDiff("martha", "marhta")
for metric in beda.Metric:
    print(f"{metric.value:20} {sd.compare(metric)}")

# prefix_scale outside [0, 0.25] is allowed but warned about
with warnings.catch_warnings(record=True) as caught:
    warnings.simplefilter("always")
    print(sd.jaro_winkler_distance(0.5), caught[0].message)
