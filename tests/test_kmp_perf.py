import pytest

from algorithms.kmp import kmp_build_lps, kmp_find_all


class Counter:
    def __init__(self):
        self.n = 0


class Sym:
    """Symbol that counts every equality comparison made against it."""

    __slots__ = ("ch", "counter")

    def __init__(self, ch, counter):
        self.ch = ch
        self.counter = counter

    def __eq__(self, other):
        self.counter.n += 1
        return self.ch == other.ch

    __hash__ = None


def wrap(s, counter):
    return [Sym(ch, counter) for ch in s]


@pytest.mark.parametrize("k", [10, 100, 500])
def test_build_lps_is_linear(k):
    counter = Counter()
    pat = wrap("a" * k + "b" + "a" * k, counter)
    kmp_build_lps(pat)
    assert counter.n <= 2 * len(pat)


@pytest.mark.parametrize("n", [1_000, 4_000, 16_000])
def test_scan_is_linear_on_pathological_pattern(n):
    # naive search would make about n * k comparisons here
    k = 200
    counter = Counter()
    text = wrap("a" * n, counter)
    pat = wrap("a" * k + "b", counter)
    assert kmp_find_all(text, pat) == []
    assert counter.n <= 2 * len(text) + 2 * len(pat)


def test_scan_comparisons_grow_linearly():
    counts = []
    for n in (2_000, 4_000, 8_000):
        counter = Counter()
        kmp_find_all(wrap("ab" * n, counter), wrap("abababac", counter))
        counts.append(counter.n)
    assert counts[1] <= 2.2 * counts[0]
    assert counts[2] <= 2.2 * counts[1]


def test_match_count_scales_with_repeats():
    counts = [len(kmp_find_all("abcde" * r, "cdeab")) for r in (10_000, 20_000, 40_000)]
    assert counts == [9_999, 19_999, 39_999]
