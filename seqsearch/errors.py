# ==================================================
# seqsearch/errors.py
# ==================================================
import operator


class SequenceError(ValueError):
    """Base class for malformed sequence input."""


class InvalidStepError(SequenceError):
    """A step generator produced something other than 1 or 2."""
    def __init__(self, step):
        super().__init__(f"Step must be 1 or 2, got {step!r}")
        self.step = step


class InvalidSequenceError(SequenceError):
    """A stored sequence breaks the step-bounded growth invariant."""
    def __init__(self, index: int, reason: str):
        super().__init__(f"Record {index}: {reason}")
        self.index = index


def check_bound(x) -> int:
    """A query bound as a non-negative int; floats and bools are refused."""
    # bool is an int subclass; True would silently pass as 1
    if isinstance(x, bool):
        raise TypeError(f"Bounds must be integers, got {x!r}")
    x = operator.index(x)
    if x < 0:
        raise ValueError(f"Bounds must be non-negative, got {x}")
    return x
