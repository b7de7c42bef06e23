# ==================================================
# seqsearch/reader.py
# ==================================================
import mmap, os, struct
from pathlib import Path

from .const import RECORD_FMT, RECORD_SIZE


class SequenceFile:
    """Read-only, memory-mapped random access to a sequence file."""
    def __init__(self, path: str | os.PathLike):
        self.path  = Path(path)
        self.reads = 0                      # records fetched through read()
        self.file  = open(self.path, "rb")
        try:
            size = os.fstat(self.file.fileno()).st_size
            if size % RECORD_SIZE:
                raise ValueError("Invalid sequence file")
            self.length = size // RECORD_SIZE
            # mmap refuses zero-length files
            self.mm = (mmap.mmap(self.file.fileno(), 0, access=mmap.ACCESS_READ)
                       if size else None)
        except Exception:
            self.file.close()
            raise

    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.length

    def __getitem__(self, index: int) -> int:
        return self.read(index)

    def read(self, index: int) -> int:
        if not 0 <= index < self.length:
            raise IndexError(f"record {index} out of range 0..{self.length - 1}")
        self.reads += 1
        return struct.unpack_from(RECORD_FMT, self.mm, index * RECORD_SIZE)[0]

    # ------------------------------------------------------------------
    def close(self):
        if self.mm is not None:
            self.mm.close()
            self.mm = None
        self.file.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
