#!/usr/bin/env python3
"""
Set Calculator

Reads sets from element files (one element per line) and applies set algebra.

Usage:
    python setcalc.py <op> <left> [right] [--config FILE] [--int] [--trace-level N]

Examples:
    python setcalc.py show a.txt                  # Print the set in a.txt
    python setcalc.py union a.txt b.txt           # Elements in a or b
    python setcalc.py intersection a.txt b.txt    # Elements in both
    python setcalc.py complement a.txt b.txt      # Elements in a but not b
    python setcalc.py difference a.txt b.txt      # Elements in exactly one
    python setcalc.py subset a.txt b.txt          # true / false
    python setcalc.py union a.txt b.txt --int     # Treat lines as integers
    python setcalc.py hash a.txt --int            # Hash, stable across runs for ints
"""

import sys
import argparse

from hashset import Set, SetDiagnostics, SetError, InputError
from hashset.config import SetCalcConfig, load_config, parse_lines
from hashset.diagnostics import TRACE_OPS, TRACE_DETAIL


SET_OPS = {
    "union": Set.union,
    "intersection": Set.intersection,
    "complement": Set.complement,
    "difference": Set.difference,
}

PREDICATE_OPS = {
    "subset": Set.subset,
    "strict-subset": Set.strict_subset,
    "superset": Set.superset,
    "strict-superset": Set.strict_superset,
    "equal": Set.__eq__,
}

UNARY_OPS = ("show", "hash", "stats")


def read_set(path: str, config: SetCalcConfig, diagnostics: SetDiagnostics) -> Set:
    """Read an element file into a Set"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.readlines()
    except OSError as e:
        raise InputError(f"Cannot read {path}: {e}")
    except UnicodeDecodeError as e:
        raise InputError(f"{path} is not valid UTF-8: {e}")

    elements = parse_lines(lines, config)
    result = Set(elements)
    diagnostics.trace(TRACE_OPS, f"read {len(elements)} line(s) from {path}, {result.count} unique")
    for each in result:
        diagnostics.trace(TRACE_DETAIL, f"  {path}: {each!r}")
    return result


def run(op: str, left_path: str, right_path: str = None,
        config: SetCalcConfig = None, diagnostics: SetDiagnostics = None) -> str:
    """
    Apply op to the sets read from the given files.

    Returns:
        The text to print: a rendered set, "true"/"false", or a hash value.
    """
    if config is None:
        config = SetCalcConfig()
    if diagnostics is None:
        diagnostics = SetDiagnostics(config.trace_level)

    left = read_set(left_path, config, diagnostics)

    if op in UNARY_OPS:
        if right_path is not None:
            raise InputError(f"'{op}' takes a single file")
        if op == "hash":
            return str(hash(left))
        if op == "stats":
            diagnostics.dump_stats(left, left_path)
        return left.description

    if right_path is None:
        raise InputError(f"'{op}' needs two files")
    right = read_set(right_path, config, diagnostics)

    diagnostics.trace(TRACE_OPS, f"{op}: {left.count} x {right.count} element(s)")
    if op in SET_OPS:
        result = SET_OPS[op](left, right)
        diagnostics.trace(TRACE_OPS, f"{op}: result has {result.count} element(s)")
        return result.description
    return "true" if PREDICATE_OPS[op](left, right) else "false"


def main():
    parser = argparse.ArgumentParser(
        description="Set Calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s show a.txt                   Print the set in a.txt
  %(prog)s union a.txt b.txt            Elements in a or b
  %(prog)s difference a.txt b.txt       Elements in exactly one of a, b
  %(prog)s subset a.txt b.txt --int     Subset test on integer elements
  %(prog)s hash a.txt --int             Hash of the set

Note: 'hash' output for string elements varies between runs unless
PYTHONHASHSEED is fixed. Integer elements hash the same in every run.
        """
    )

    ops = list(UNARY_OPS) + list(SET_OPS) + list(PREDICATE_OPS)
    parser.add_argument("op", choices=ops, help="Operation to apply")
    parser.add_argument("left", help="Element file")
    parser.add_argument("right", nargs="?", help="Second element file (binary ops)")
    parser.add_argument("--config", help="TOML config file with a [setcalc] table")
    parser.add_argument("--int", action="store_true",
                        help="Parse elements as integers")
    parser.add_argument("--trace-level", type=int,
                        help="Diagnostics verbosity (0-2)")

    args = parser.parse_args()
    if args.trace_level is not None and args.trace_level < 0:
        parser.error("--trace-level must be non-negative")

    try:
        config = load_config(args.config)
        # CLI flags override the config file
        if args.int:
            config.element_type = "int"
        if args.trace_level is not None:
            config.trace_level = args.trace_level
        diagnostics = SetDiagnostics(config.trace_level)

        print(run(args.op, args.left, args.right, config, diagnostics))
    except SetError as e:
        print(f"setcalc failed: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Internal error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(2)


if __name__ == "__main__":
    main()
