# ==================================================
# seqsearch/cli.py
# ==================================================
import argparse, os, sys, tempfile

from .         import config
from .oracle   import scan_count_in_range, validate_sequence
from .search   import RangeSearcher, count_in_range
from .steps    import FixedSteps, RandomStep
from .writer   import write_sequence

# reference sequence 0,1,2,4,5,7,8,9,10,12 and the bound pairs checked against it
SELFTEST_STEPS = [1, 1, 2, 1, 2, 1, 1, 1, 2]
SELFTEST_PAIRS = [(0, 3), (1, 5), (6, 2), (9, 12), (3, 20), (13, 23), (0, 13),
                  (1, 2), (3, 7), (8, 10), (15, 19), (1, 9), (2, 14), (11, 13),
                  (101, 230), (5, 5)]


def _err(msg: str):
    print(msg, file=sys.stderr)


# ── sub-commands ─────────────────────────────────────────────
def selftest() -> bool:
    """Compare the searcher with the full scan on the reference sequence."""
    fd, path = tempfile.mkstemp(suffix=".bin")
    os.close(fd)
    try:
        write_sequence(path, len(SELFTEST_STEPS) + 1, FixedSteps(SELFTEST_STEPS))
        return all(count_in_range(path, a, b) == scan_count_in_range(path, a, b)
                   for a, b in SELFTEST_PAIRS)
    finally:
        os.remove(path)


def _seed(args, settings):
    return args.seed if args.seed is not None else settings.seed


def cmd_write(args, settings) -> int:
    write_sequence(args.path, args.count, RandomStep(_seed(args, settings)),
                   chunk=settings.write_chunk)
    print(f"  ⋄ wrote {args.count} records → {args.path}")
    return 0


def cmd_count(args, settings) -> int:
    if args.oracle:
        print(scan_count_in_range(args.path, args.a, args.b, chunk=settings.scan_chunk))
        return 0
    searcher = RangeSearcher()
    print(searcher.count_in_range(args.path, args.a, args.b))
    if args.verbose:
        print(f"  ⋄ {searcher.last_reads} record reads", file=sys.stderr)
    return 0


def cmd_check(args, settings) -> int:
    n = validate_sequence(args.path, chunk=settings.scan_chunk)
    print(f"✓ {args.path}: {n} records, steps all in {{1, 2}}")
    return 0


def cmd_selftest(args, settings) -> int:
    if not selftest():
        _err("Program is broken")
        return 1
    print("✓ self-test passed")
    return 0


def cmd_demo(args, settings) -> int:
    if not selftest():
        _err("Program is broken")
        return 1
    path      = args.path or settings.seq_file
    max_count = args.max_count if args.max_count is not None else settings.max_count
    rnd = RandomStep(_seed(args, settings))
    n   = rnd.randint(1, max_count)
    write_sequence(path, n, rnd, chunk=settings.write_chunk)
    a   = rnd.randint(0, n)
    b   = rnd.randint(n, 2 * max_count)
    print(f"Total numbers in the file: {n}")
    print(f"Count of numbers in the range ({a}, {b}): {count_in_range(path, a, b)}")
    return 0


# ── entry point ──────────────────────────────────────────────
def build_parser() -> argparse.ArgumentParser:
    p   = argparse.ArgumentParser(prog="seqsearch",
                                  description="Step-bounded sequence files and range counts")
    sub = p.add_subparsers(dest="command", required=True)

    w = sub.add_parser("write", help="write a random sequence file")
    w.add_argument("path")
    w.add_argument("count", type=int)
    w.add_argument("--seed", type=int, default=None, help=f"RNG seed (default ${config.ENV_SEED})")
    w.set_defaults(func=cmd_write)

    c = sub.add_parser("count", help="count values strictly between A and B")
    c.add_argument("path")
    c.add_argument("a", type=int)
    c.add_argument("b", type=int)
    c.add_argument("--oracle", action="store_true", help="use the full linear scan")
    c.add_argument("-v", "--verbose", action="store_true", help="report record reads")
    c.set_defaults(func=cmd_count)

    k = sub.add_parser("check", help="verify the step-bounded growth invariant")
    k.add_argument("path")
    k.set_defaults(func=cmd_check)

    t = sub.add_parser("selftest", help="compare search and scan on a fixed sequence")
    t.set_defaults(func=cmd_selftest)

    d = sub.add_parser("demo", help="self-test, write a random file, run one query")
    d.add_argument("--path", help=f"sequence file (default ${config.ENV_FILE} or _file_.bin)")
    d.add_argument("--seed", type=int, default=None, help=f"RNG seed (default ${config.ENV_SEED})")
    d.add_argument("--max-count", type=int, help=f"upper bound on N (default ${config.ENV_MAX_COUNT})")
    d.set_defaults(func=cmd_demo)
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args, config.load())
    except (OSError, ValueError, OverflowError) as e:
        _err(f"seqsearch: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
