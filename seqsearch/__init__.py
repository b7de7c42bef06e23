from .errors import InvalidSequenceError, InvalidStepError, SequenceError, check_bound
from .oracle import scan_count_in_range, validate_sequence
from .reader import SequenceFile
from .search import Cursor, RangeSearcher, count_in_range, first_above
from .steps  import FixedSteps, RandomStep, check_step
from .writer import write_sequence

__all__ = [
    "write_sequence", "count_in_range", "scan_count_in_range", "validate_sequence",
    "RangeSearcher", "SequenceFile", "Cursor", "first_above",
    "RandomStep", "FixedSteps", "check_step", "check_bound",
    "SequenceError", "InvalidStepError", "InvalidSequenceError",
]
