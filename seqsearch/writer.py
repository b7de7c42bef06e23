# ==================================================
# seqsearch/writer.py
# ==================================================
import os
from typing import Callable, Optional

import numpy as np

from .const  import MAX_VALUE, RECORD_DTYPE
from .steps  import check_step
from .       import config


def write_sequence(path: str | os.PathLike,
                   count: int,
                   step_fn: Callable[[], int],
                   chunk: Optional[int] = None) -> None:
    """
    Write P(0)=0, P(i)=P(i-1)+step_fn() as ``count`` fixed-width records.

    Existing content at ``path`` is truncated. Records are staged in a numpy
    buffer of ``chunk`` entries; if a step is rejected the records produced
    so far are still flushed, so the file always holds a valid prefix.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    chunk = chunk or config.write_chunk()
    buf   = np.empty(min(count, chunk), dtype=RECORD_DTYPE)
    fill  = 0
    value = 0

    with open(path, "wb") as f:
        try:
            for i in range(count):
                if i:
                    value += check_step(step_fn())
                    if value > MAX_VALUE:
                        raise OverflowError(f"Record {i} exceeds {MAX_VALUE}")
                buf[fill] = value
                fill += 1
                if fill == len(buf):
                    buf.tofile(f)
                    fill = 0
        finally:
            if fill:
                buf[:fill].tofile(f)
