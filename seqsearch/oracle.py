# ==================================================
# seqsearch/oracle.py
# ==================================================
"""Exhaustive reference implementations used to cross-check the searcher."""
import os
from typing import Iterator, Optional

import numpy as np

from .const  import MAX_VALUE, RECORD_DTYPE, RECORD_SIZE, STEP_VALUES
from .errors import InvalidSequenceError, check_bound
from .       import config


def _chunks(path, chunk: Optional[int]) -> Iterator[np.ndarray]:
    chunk = chunk or config.scan_chunk()
    with open(path, "rb") as f:
        if os.fstat(f.fileno()).st_size % RECORD_SIZE:
            raise ValueError("Invalid sequence file")
        while True:
            block = np.fromfile(f, dtype=RECORD_DTYPE, count=chunk)
            if not block.size:
                return
            yield block


def scan_count_in_range(path: str | os.PathLike, a: int, b: int,
                        chunk: Optional[int] = None) -> int:
    """Count values strictly between min(a, b) and max(a, b) by reading every record."""
    a, b   = check_bound(a), check_bound(b)
    lo, hi = min(a, b), max(a, b)
    n = 0
    for block in _chunks(path, chunk):
        if lo >= MAX_VALUE:
            continue                  # nothing stored can exceed lo
        mask = block > np.uint64(lo)
        if hi <= MAX_VALUE:
            mask &= block < np.uint64(hi)
        n += int(np.count_nonzero(mask))
    return n


def validate_sequence(path: str | os.PathLike, chunk: Optional[int] = None) -> int:
    """Check P(0) == 0 and every step in {1, 2}; return the record count."""
    length = 0
    prev   = None
    for block in _chunks(path, chunk):
        if prev is None:
            if block[0] != 0:
                raise InvalidSequenceError(0, f"first value is {int(block[0])}, expected 0")
            joined = block
            first  = 1                # steps[i] leads into record length + i + 1
        else:
            joined = np.concatenate((prev, block))
            first  = 0                # steps[i] leads into record length + i
        steps = np.diff(joined)       # uint64, so a decrease wraps to a huge step
        bad   = np.flatnonzero(~np.isin(steps, STEP_VALUES))
        if bad.size:
            i = int(bad[0])
            raise InvalidSequenceError(length + i + first,
                                       f"{int(joined[i + 1])} follows {int(joined[i])}")
        prev    = block[-1:]
        length += block.size
    if not length:
        raise InvalidSequenceError(0, "file holds no records")
    return length
