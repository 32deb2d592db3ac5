"""Command-line entry point: ``rinha [PATH]`` / ``python -m rinha_core``."""

from __future__ import annotations

import argparse
import logging
import sys
import threading
from typing import IO, Sequence

from .errors import RinhaError
from .evaluator import run
from .reader import load_program

DEFAULT_PATH = "./files/test.json"

# Evaluation and decoding recurse once per tree level.
RECURSION_LIMIT = 50_000
STACK_SIZE = 512 * 1024 * 1024

logger = logging.getLogger(__name__)


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rinha",
        description="Evaluate a Rinha program from its JSON AST.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_PATH,
        help=f"JSON AST file to run (default: {DEFAULT_PATH})",
    )
    parser.add_argument(
        "--show-result",
        action="store_true",
        help="print the value of the root expression after the run",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="enable debug logging on stderr",
    )
    return parser


def _run_file(path: str, show_result: bool, dest: IO[str]) -> int:
    try:
        program = load_program(path)
    except OSError as exc:
        print(f"error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1
    except RinhaError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: expression nested too deeply", file=sys.stderr)
        return 1

    try:
        result = run(program, dest)
    except RinhaError as exc:
        logger.debug("Evaluation of %r aborted", program.name, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print("error: expression nested too deeply", file=sys.stderr)
        return 1

    if show_result:
        print(repr(result), file=dest)
    return 0


def _run_deep(path: str, show_result: bool, dest: IO[str]) -> int:
    """Run *path* on a worker thread with a raised recursion limit and stack."""
    status: list[int] = []
    old_limit = sys.getrecursionlimit()
    old_stack = threading.stack_size(STACK_SIZE)
    sys.setrecursionlimit(RECURSION_LIMIT)
    try:
        worker = threading.Thread(
            target=lambda: status.append(_run_file(path, show_result, dest)),
            name="rinha-eval",
        )
        worker.start()
        worker.join()
    finally:
        sys.setrecursionlimit(old_limit)
        threading.stack_size(old_stack)
    return status[0] if status else 1


def main(argv: Sequence[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    return _run_deep(args.path, args.show_result, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
