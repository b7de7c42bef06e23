# ==================================================
# seqsearch/const.py
# ==================================================
RECORD_FMT   = "<Q"          # one unsigned 64-bit little-endian value per record
RECORD_SIZE  = 8             # bytes, no header, no padding
RECORD_DTYPE = "<u8"         # numpy view of RECORD_FMT
MAX_VALUE    = 2**64 - 1
STEP_VALUES  = (1, 2)        # P(i) - P(i-1) must be one of these
