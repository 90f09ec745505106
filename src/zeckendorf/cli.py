# src/zeckendorf/cli.py
"""
Zeckendorf integer calculator.

usage: zeckendorf [--profile NAME] [--debug] [--overflow {raise,saturate}] COMMAND ...

commands:
  encode N [N ...]          show the Zeckendorf digits and decomposition of each N
  add N [N ...]             sum the values with Zeckendorf arithmetic
  compare A B               order two values
  convert N --to TYPE       narrow N to int32, int64 or float
  fib K                     print the Fibonacci number F(K)
  profiles                  list the available profiles
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback

from colorama import Fore
from colorama import init as colorama_init

from zeckendorf import __version__ as _ver
from zeckendorf.adder import add_all
from zeckendorf.config import OVERFLOW_POLICIES, list_profiles_with_descriptions, load_settings
from zeckendorf.fibonacci import fibonacci
from zeckendorf.fmt import format_decomposition, format_value, paint
from zeckendorf.runtime import APPLY, current
from zeckendorf.utility import UserInputError, ZeckendorfOverflowError, stringify_guarded
from zeckendorf.value import ZeckendorfValue

logger = logging.getLogger("zeckendorf.cli")

EXIT_OK = 0
EXIT_USAGE = 2


def setup_logging(debug: bool = False) -> None:
    """Route library loggers to stderr; DEBUG with --debug, WARNING otherwise."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("zeckendorf")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    root.propagate = False


def _print_user_error(msg: str) -> None:
    """Uniform, one-line friendly error."""
    if not (msg.startswith("Invalid input:") or msg.startswith("Error:")):
        msg = f"{paint('Error:', Fore.RED)} {msg}"
    else:
        head, _, rest = msg.partition(":")
        msg = f"{paint(head + ':', Fore.RED)}{rest}"
    print(msg, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zeckendorf",
        description="Arbitrary-precision integers in the Zeckendorf (Fibonacci) numeral system.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_ver}")
    parser.add_argument("--profile", help="profile name under <workspace>/profiles")
    parser.add_argument("--debug", action="store_true", help="debug logging and tracebacks")
    parser.add_argument("--overflow", choices=OVERFLOW_POLICIES,
                        help="narrowing overflow policy (overrides the profile)")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("encode", help="show Zeckendorf digits of each number")
    p.add_argument("numbers", nargs="+")

    p = sub.add_parser("add", help="sum numbers with Zeckendorf arithmetic")
    p.add_argument("numbers", nargs="+")

    p = sub.add_parser("compare", help="order two numbers")
    p.add_argument("a")
    p.add_argument("b")

    p = sub.add_parser("convert", help="narrow a number to a fixed-width type")
    p.add_argument("number")
    p.add_argument("--to", choices=("int32", "int64", "float"), default="int64")

    p = sub.add_parser("fib", help="print F(K)")
    p.add_argument("k", type=int)

    sub.add_parser("profiles", help="list profiles in the workspace")

    return parser


def _apply_profile(args: argparse.Namespace) -> None:
    APPLY(load_settings(args.profile))
    rt = current()
    if args.debug:
        rt.debug = True
    if args.overflow:
        rt.settings.setdefault("CONVERSION", {})["OVERFLOW"] = args.overflow


def _cmd_encode(args: argparse.Namespace) -> int:
    for text in args.numbers:
        v = ZeckendorfValue.parse(text)
        print(format_value(v))
        print(f"  {format_decomposition(v)}")
        logger.debug("%r", v)
    return EXIT_OK


def _cmd_add(args: argparse.Namespace) -> int:
    values = [ZeckendorfValue.parse(t) for t in args.numbers]
    total = add_all(values)
    print(format_value(total))
    return EXIT_OK


def _cmd_compare(args: argparse.Namespace) -> int:
    a = ZeckendorfValue.parse(args.a)
    b = ZeckendorfValue.parse(args.b)
    rel = {-1: "<", 0: "=", 1: ">"}[a.compare(b)]
    print(f"{a} {paint(rel, Fore.YELLOW, bright=True)} {b}")
    return EXIT_OK


def _cmd_convert(args: argparse.Namespace) -> int:
    v = ZeckendorfValue.parse(args.number)
    if args.to == "float":
        print(repr(v.to_float()))
    elif args.to == "int32":
        print(v.to_int32())
    else:
        print(v.to_int64())
    return EXIT_OK


def _cmd_fib(args: argparse.Namespace) -> int:
    if args.k < 0:
        raise UserInputError(f"Invalid input: Fibonacci index must be >= 0, got {args.k}.")
    print(stringify_guarded(fibonacci(args.k), f"F({args.k})"))
    return EXIT_OK


def _cmd_profiles(args: argparse.Namespace) -> int:
    for name, desc in list_profiles_with_descriptions():
        marker = "*" if name == current().profile_name else " "
        print(f"{marker} {paint(name, Fore.CYAN)}  {desc}")
    return EXIT_OK


COMMANDS = {
    "encode": _cmd_encode,
    "add": _cmd_add,
    "compare": _cmd_compare,
    "convert": _cmd_convert,
    "fib": _cmd_fib,
    "profiles": _cmd_profiles,
}


def main(argv: list[str] | None = None) -> int:
    colorama_init()
    args = build_parser().parse_args(argv)

    try:
        _apply_profile(args)
    except (UserInputError, FileNotFoundError) as e:
        _print_user_error(str(e))
        return EXIT_USAGE

    debug = current().debug
    setup_logging(debug)

    try:
        return COMMANDS[args.command](args)
    except (UserInputError, ZeckendorfOverflowError) as e:
        if debug:
            traceback.print_exc()
        _print_user_error(str(e))
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
