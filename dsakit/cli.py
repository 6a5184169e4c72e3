"""Command-line entry point for the expression, stack and queue tools."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from dsakit.expressions import (
    ExpressionError,
    evaluate_infix,
    infix_to_postfix,
    infix_to_prefix,
)
from dsakit.queues import first_negative_in_windows
from dsakit.stacks import prime_factors_descending, reverse_string

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Small stack and queue tools."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    postfix = commands.add_parser("postfix", help="convert infix to postfix")
    postfix.add_argument("expression")

    prefix = commands.add_parser("prefix", help="convert infix to prefix")
    prefix.add_argument("expression")

    evaluate = commands.add_parser("eval", help="evaluate an infix expression")
    evaluate.add_argument("expression")

    factors = commands.add_parser(
        "factors", help="prime factors in descending order"
    )
    factors.add_argument("number", type=int)

    reverse = commands.add_parser("reverse", help="reverse a string")
    reverse.add_argument("text")

    windows = commands.add_parser(
        "windows", help="first negative number in every window of size K"
    )
    windows.add_argument("k", type=int)
    windows.add_argument("values", type=int, nargs="+")

    return parser


def _run(args: argparse.Namespace) -> str:
    if args.command == "postfix":
        return infix_to_postfix(args.expression)
    if args.command == "prefix":
        return infix_to_prefix(args.expression)
    if args.command == "eval":
        return str(evaluate_infix(args.expression))
    if args.command == "factors":
        return " ".join(map(str, prime_factors_descending(args.number)))
    if args.command == "reverse":
        return reverse_string(args.text)
    return " ".join(map(str, first_negative_in_windows(args.values, args.k)))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv``; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        output = _run(args)
    except (ExpressionError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())