# ==================================================
# seqsearch/steps.py
# ==================================================
from itertools import cycle
from typing import Iterable, Optional

import numpy as np

from .const  import STEP_VALUES
from .errors import InvalidStepError


def check_step(step) -> int:
    # bool is an int subclass; True would silently pass as 1
    if isinstance(step, bool) or step not in STEP_VALUES:
        raise InvalidStepError(step)
    return int(step)


class RandomStep:
    """Seeded pseudo-random step source, yields 1 or 2 per call."""
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def __call__(self) -> int:
        return int(self._rng.integers(1, 3))

    # ------------------------------------------------------------------
    def randint(self, low: int, span: int) -> int:
        """``low + draw % span`` for a raw 63-bit draw (span > 0)."""
        if span <= 0:
            raise ValueError("span must be positive")
        return low + int(self._rng.integers(0, 2**63)) % span


class FixedSteps:
    """Replays a fixed list of steps, starting over when exhausted."""
    def __init__(self, steps: Iterable[int]):
        self.steps = [check_step(s) for s in steps]
        if not self.steps:
            raise ValueError("FixedSteps needs at least one step")
        self._it = cycle(self.steps)

    def __call__(self) -> int:
        return next(self._it)
