"""Console front-end for the encoder and the numeric exercises.

Usage::

    binary-encoder binary 6                 # both encoders
    binary-encoder binary --method tail     # prompts for the number
    binary-encoder binary --bounds uint8 300
    binary-encoder even 5
    binary-encoder factorial 5
    binary-encoder prime 7
    binary-encoder temperature 21.5
    binary-encoder divide 10 0

Operands left off the command line are prompted for.  Bad input and
arithmetic errors print ``Error: ...`` and exit with status 1.
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, TypeVar

from pydantic import ValidationError

from bounds import PRESETS
from calculator import divide
from converter import celsius_to_fahrenheit, encode_binary, encode_binary_tail
from factory import EncoderFactory
from models import (
    ConversionResult,
    EncodingMethod,
    IntegerInput,
    NaturalInput,
    TemperatureInput,
)
from runner import UNARY_FUNCTIONS, run

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InputError(Exception):
    """Raised when console input cannot be used."""


# ---------------------------------------------------------------------------
# Console reading
# ---------------------------------------------------------------------------

def _read(prompt: str, given: str | None) -> str:
    if given is not None:
        return given
    print(prompt)
    try:
        return input()
    except EOFError:
        raise InputError("no input") from None


def _parse(parser: Callable[[str], T], text: str) -> T:
    try:
        return parser(text)
    except ValidationError as e:
        raise InputError(e.errors()[0]["msg"]) from None


def _fmt_bool(value: bool) -> str:
    return "true" if value else "false"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_binary(args: argparse.Namespace) -> int:
    n = _parse(NaturalInput.parse, _read("Enter number:", args.number))

    if args.bounds == "unbounded":
        encoders = {
            EncodingMethod.RECURSIVE: encode_binary,
            EncodingMethod.TAIL: encode_binary_tail,
        }
    else:
        encoder = EncoderFactory.create(PRESETS[args.bounds])
        encoders = {
            EncodingMethod.RECURSIVE: encoder.encode,
            EncodingMethod.TAIL: encoder.encode_tail,
        }

    methods = list(EncodingMethod) if args.method == "both" else [EncodingMethod(args.method)]
    too_deep = False
    for method in methods:
        try:
            encoded = run(n, encoders[method])
        except RecursionError:
            logger.debug("recursion limit hit encoding %d", n)
            too_deep = True
            continue
        logger.debug("encoded %d with %s encoder", n, method.value)
        print(ConversionResult(n=n, encoded=encoded, method=method).render())

    if too_deep:
        raise InputError(
            f"{n.bit_length()}-bit input is too large for the recursive encoder; "
            "use --method tail"
        )
    return 0


def cmd_even(args: argparse.Namespace) -> int:
    n = _parse(IntegerInput.parse, _read("Enter number:", args.number))
    print(f"{n} is even: {_fmt_bool(run(n, UNARY_FUNCTIONS['even']))}")
    return 0


def cmd_factorial(args: argparse.Namespace) -> int:
    n = _parse(NaturalInput.parse, _read("Enter number:", args.number))
    print(f"factorial of {n} is: {run(n, UNARY_FUNCTIONS['factorial'])}")
    return 0


def cmd_prime(args: argparse.Namespace) -> int:
    n = _parse(IntegerInput.parse, _read("Enter number to check:", args.number))
    print(f"{n} is prime: {_fmt_bool(run(n, UNARY_FUNCTIONS['prime']))}")
    return 0


def cmd_temperature(args: argparse.Namespace) -> int:
    celsius = _parse(TemperatureInput.parse, _read("Enter temperature:", args.celsius))
    print(f"{celsius} C° = {celsius_to_fahrenheit(celsius)} F°")
    return 0


def cmd_divide(args: argparse.Namespace) -> int:
    a = _parse(IntegerInput.parse, _read("Enter dividend:", args.a))
    b = _parse(IntegerInput.parse, _read("Enter divisor:", args.b))
    print(f"{a} / {b} = {divide(a, b)}")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="binary-encoder",
        description="Binary encoding and small numeric exercises",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="logging level",
    )
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("binary", help="write a number in binary")
    b.add_argument("number", nargs="?")
    b.add_argument(
        "--method",
        choices=[m.value for m in EncodingMethod] + ["both"],
        default="both",
    )
    b.add_argument(
        "--bounds",
        choices=["unbounded", *PRESETS],
        default="unbounded",
        help="reject inputs outside a fixed-width domain",
    )
    b.set_defaults(func=cmd_binary)

    for name, func, help_text in (
        ("even", cmd_even, "check whether a number is even"),
        ("factorial", cmd_factorial, "compute n!"),
        ("prime", cmd_prime, "check whether a number is prime"),
    ):
        c = sub.add_parser(name, help=help_text)
        c.add_argument("number", nargs="?")
        c.set_defaults(func=func)

    t = sub.add_parser("temperature", help="convert Celsius to Fahrenheit")
    t.add_argument("celsius", nargs="?")
    t.set_defaults(func=cmd_temperature)

    d = sub.add_parser("divide", help="integer division, truncating toward zero")
    d.add_argument("a", nargs="?")
    d.add_argument("b", nargs="?")
    d.set_defaults(func=cmd_divide)

    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level)

    try:
        return args.func(args)
    except InputError as e:
        print(f"Error: {e}")
    except ValueError as e:
        print(f"Error: {e}")
    except ArithmeticError as e:
        logger.debug("arithmetic error in %s", args.command, exc_info=True)
        print(f"Error: {e}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
