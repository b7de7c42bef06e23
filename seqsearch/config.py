# ==================================================
# seqsearch/config.py
# ==================================================
import os
from dataclasses import dataclass
from typing import Optional

# ───────────────────────── configuration ──────────────────────
# Environment values are parsed on use, never at import, so a bad
# variable surfaces as a ValueError from the call that needs it.
ENV_FILE         = "SEQSEARCH_FILE"
ENV_MAX_COUNT    = "SEQSEARCH_MAX_COUNT"
ENV_SEED         = "SEQSEARCH_SEED"            # unset → fresh entropy
ENV_WRITE_CHUNK  = "SEQSEARCH_WRITE_CHUNK"     # records per tofile()
ENV_SCAN_CHUNK   = "SEQSEARCH_SCAN_CHUNK"      # records per fromfile()


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def seq_file() -> str:     return os.getenv(ENV_FILE) or "_file_.bin"
def max_count() -> int:    return _int_env(ENV_MAX_COUNT,   1_000_000)
def seed() -> Optional[int]: return _int_env(ENV_SEED,      None)
def write_chunk() -> int:  return _int_env(ENV_WRITE_CHUNK, 65_536)
def scan_chunk() -> int:   return _int_env(ENV_SCAN_CHUNK,  65_536)


@dataclass(frozen=True)
class Settings:
    seq_file: str
    max_count: int
    seed: Optional[int]
    write_chunk: int
    scan_chunk: int


def load() -> Settings:
    """Parse every variable at once; raises ValueError on the first bad one."""
    return Settings(seq_file(), max_count(), seed(), write_chunk(), scan_chunk())
