# ==================================================
# seqsearch/search.py
# ==================================================
"""
Range counting over a step-bounded sequence file.

Every stored value satisfies ``index <= value <= 2 * index`` because each
record adds 1 or 2 to the previous one. That bound turns a value into a
position estimate, so a bound is located with a handful of probes instead of
a scan: from a probe holding ``v <= t`` the first value above ``t`` cannot be
closer than ``(t - v) // 2`` records ahead.
"""
import os
from dataclasses import dataclass
from typing import Optional

from .errors import check_bound
from .reader import SequenceFile


@dataclass(frozen=True)
class Cursor:
    """Where a bound search stopped; ``value`` is None past the last record."""
    position: int
    value: Optional[int]

    @property
    def exhausted(self) -> bool:
        return self.value is None


def first_above(seq: SequenceFile, threshold: int, seed: int) -> Cursor:
    """
    Smallest index whose value is > ``threshold``, or ``len(seq)`` if none.

    ``seed`` must be an index whose value is <= threshold, or the answer
    itself; ``(threshold + 1) // 2`` and anything below it always qualify.
    """
    end = len(seq)
    pos = seed
    if pos >= end:
        return Cursor(end, None)
    value = seq.read(pos)
    while value <= threshold:
        gap = threshold - value
        # the record before the next probe holds at most value + 2*(gap>>1) <= threshold
        pos += (gap >> 1) + 1 if gap > 2 else 1
        if pos >= end:
            return Cursor(end, None)
        value = seq.read(pos)
    return Cursor(pos, value)


class RangeSearcher:
    """Counts stored values strictly between two bounds without a full scan."""
    def __init__(self):
        self.last_reads = 0          # record reads spent on the latest query

    # ------------------------------------------------------------------
    def count_in_range(self, path: str | os.PathLike, a: int, b: int) -> int:
        a, b = check_bound(a), check_bound(b)
        self.last_reads = 0
        if a == b:
            return 0
        with SequenceFile(path) as seq:
            return self._count(seq, a, b)

    def count_in_file(self, seq: SequenceFile, a: int, b: int) -> int:
        return self._count(seq, check_bound(a), check_bound(b))

    def _count(self, seq: SequenceFile, a: int, b: int) -> int:
        lo, hi = min(a, b), max(a, b)
        start  = seq.reads
        try:
            if lo == hi:
                return 0
            # count of values <= lo
            lower = first_above(seq, lo, lo >> 1)
            if lower.exhausted:
                return 0
            # count of values < hi, i.e. values <= hi - 1
            upper = first_above(seq, hi - 1, hi >> 1)
            return upper.position - lower.position
        finally:
            self.last_reads = seq.reads - start


def count_in_range(path: str | os.PathLike, a: int, b: int) -> int:
    """Number of stored values v with min(a, b) < v < max(a, b)."""
    return RangeSearcher().count_in_range(path, a, b)
