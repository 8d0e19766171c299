from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .api import dump_tape, read_source
from .errors import VMError
from .lexer import tokenize
from .state import DEFAULT_TAPE_SIZE
from .vm import VM


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _print_trace(line: str) -> None:
    print(line, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Run a tape-and-pointer program (> < + - . , [ ]).",
    )
    parser.add_argument("file", nargs="?", help="Program file to run")
    parser.add_argument("-e", "--eval", dest="source", help="Program text to run instead of a file")
    parser.add_argument(
        "--tape-size", type=_positive_int, default=DEFAULT_TAPE_SIZE,
        help=f"Number of cells on the tape (default {DEFAULT_TAPE_SIZE})",
    )
    parser.add_argument("--trace", action="store_true", help="Print one line per executed step to stderr")
    parser.add_argument("--stats", action="store_true", help="Print timing, step count and a tape dump to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.file is None) == (args.source is None):
        parser.error("give exactly one of FILE or -e/--eval")

    if args.source is not None:
        code = args.source
    else:
        try:
            code = read_source(args.file)
        except OSError as e:
            print(f"Couldn't read {args.file}: {e.strerror or e}", file=sys.stderr)
            return 1

    program = tokenize(code)
    vm = VM(args.tape_size, trace_sink=_print_trace if args.trace else None)

    start = time.perf_counter()
    try:
        vm.run(program)
    except VMError as e:
        sys.stdout.flush()
        print(f"\n{e}", file=sys.stderr)
        return 1
    finally:
        elapsed = time.perf_counter() - start
        if args.stats:
            print("\n================", file=sys.stderr)
            print(f"Execution took {elapsed * 1000:.2f} ms, {vm.state.step_count} steps", file=sys.stderr)
            print(f"Data pointer: {vm.state.data_pointer}", file=sys.stderr)
            print(dump_tape(vm.state.tape), file=sys.stderr)

    return 0
