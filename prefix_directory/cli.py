"""CLI entrypoint for exercising the autocomplete system and phone directory."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .autocomplete import AutocompleteSystem
from .directory import PhoneDirectory
from .errors import PrefixDirectoryError
from .models import AutocompleteConfig


def parse_seed(value: str) -> tuple[str, int]:
    sentence, sep, count = value.rpartition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected SENTENCE=COUNT, got {value!r}")
    try:
        return sentence, int(count)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid count in {value!r}") from exc


def _parse_op(value: str) -> tuple[str, int | None]:
    if value == "get":
        return "get", None
    name, sep, number = value.partition("=")
    if not sep or name not in ("check", "release"):
        raise argparse.ArgumentTypeError(
            f"expected get, check=<n> or release=<n>, got {value!r}"
        )
    try:
        return name, int(number)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number in {value!r}") from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefix-directory", description="Autocomplete and phone directory playground."
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    complete = sub.add_parser("complete", help="Type text into the autocomplete system.")
    complete.add_argument("text", help="Characters to type; '#' commits the sentence.")
    complete.add_argument(
        "--seed",
        action="append",
        type=parse_seed,
        default=[],
        metavar="SENTENCE=COUNT",
        help="Historical sentence with its count (repeatable).",
    )
    complete.add_argument("--top-k", type=int, default=3, help="Suggestions per keystroke.")
    complete.add_argument(
        "--lenient", action="store_true", help="Ignore unsupported characters instead of failing."
    )

    directory = sub.add_parser("directory", help="Run operations against a phone directory.")
    directory.add_argument("--max-numbers", type=int, required=True, help="Directory size.")
    directory.add_argument(
        "ops",
        nargs="+",
        type=_parse_op,
        metavar="OP",
        help="get, check=<n> or release=<n>.",
    )

    return parser


def _run_complete(args: argparse.Namespace) -> None:
    config = AutocompleteConfig(top_k=args.top_k, strict=not args.lenient)
    system = AutocompleteSystem(
        [sentence for sentence, _ in args.seed],
        [count for _, count in args.seed],
        config=config,
    )
    for char in args.text:
        if char == config.commit_char:
            sentence = system.pending
            system.input(char)
            print(f"{sentence!r} committed")
            continue
        suggestions = system.input(char)
        shown = " | ".join(suggestions) if suggestions else "(no suggestions)"
        print(f"{system.pending!r} -> {shown}")


def _run_directory(args: argparse.Namespace) -> None:
    directory = PhoneDirectory(args.max_numbers)
    for name, number in args.ops:
        if name == "get":
            print(f"get -> {directory.get()}")
        elif name == "check":
            print(f"check {number} -> {str(directory.check(number)).lower()}")
        else:
            directory.release(number)
            print(f"release {number}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "complete":
            _run_complete(args)
            return 0
        if args.command == "directory":
            _run_directory(args)
            return 0
    except (PrefixDirectoryError, ValueError) as exc:
        parser.error(str(exc))
    parser.error(f"Unsupported command {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
