import logging
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)

_BYTES_TYPES = (bytes, bytearray, memoryview)


def _check_symbol_types(t: Sequence, p: Sequence):
    # "a" == 97 is just False, so str vs bytes would silently never match
    if (isinstance(t, str) and isinstance(p, _BYTES_TYPES)) or \
       (isinstance(t, _BYTES_TYPES) and isinstance(p, str)):
        raise TypeError(
            f"cannot search {type(t).__name__} text for {type(p).__name__} pattern"
        )


def kmp_build_lps(p: Sequence) -> List[int]:
    """
    Failure function of `p`: lps[k] is the length of the longest proper
    prefix of p[0..k] that is also a suffix of it. lps[0] is always 0.
    """
    m = len(p)
    lps = [0] * m
    length, i = 0, 1
    while i < m:
        if p[i] == p[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_find_all(t: Sequence, p: Sequence) -> List[int]:
    """
    Start index of every occurrence of `p` in `t`, overlapping ones included,
    in increasing order. An empty pattern matches nowhere.
    """
    _check_symbol_types(t, p)
    n, m = len(t), len(p)
    if m == 0:
        return []
    lps, res = kmp_build_lps(p), []
    i = j = 0
    while i < n:
        if t[i] == p[j]:
            i += 1
            j += 1
            if j == m:
                res.append(i - j)
                j = lps[j - 1]
        elif j:
            j = lps[j - 1]
        else:
            i += 1
    logger.debug("kmp search n=%d m=%d matches=%d", n, m, len(res))
    return res


def kmp_count(t: Sequence, p: Sequence) -> int:
    return len(kmp_find_all(t, p))


def kmp_first(t: Sequence, p: Sequence) -> int:
    """First match start, or -1 (also for the empty pattern)."""
    res = kmp_find_all(t, p)
    return res[0] if res else -1


def kmp_match_spans(t: Sequence, p: Sequence) -> List[Tuple[int, int]]:
    m = len(p)
    return [(i, m) for i in kmp_find_all(t, p)]
