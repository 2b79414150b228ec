from __future__ import annotations
import argparse
import sys
from getpass import getpass

from pa55_core.engine import derive
from pa55_core.errors import InvalidParameter, Pa55Error
from pa55_core.params import DerivationParameters, HMACHashFunction
from pa55_core.presets import (
    ALGORITHM_PRESETS,
    ITERATION_PRESETS,
    LENGTH_PRESETS,
    Defaults,
    bytes_for_length,
)

APP_VERSION = "1.0"

# Known answer printed by --self-test.
SELF_TEST = DerivationParameters(
    master_secret="test1234",
    password_hint="1234test",
    prf=HMACHashFunction.SHA512,
    iterations=500_000,
    output_length=9,
)


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1 (got {value})")
    return value


def build_parser(defaults: Defaults = Defaults()) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pa55",
        description="pa55 - derive a reproducible password from a master secret and a password hint "
                    "with PBKDF2-HMAC.",
    )
    parser.add_argument(
        "-a", "--algorithm",
        choices=[h.name for h in ALGORITHM_PRESETS],
        default=defaults.algorithm.name,
        help=f"HMAC hash function (default: {defaults.algorithm.name})",
    )
    parser.add_argument(
        "-i", "--iterations",
        type=positive_int,
        default=defaults.iterations,
        help="PBKDF2 iterations (default: %(default)s; presets: "
             + ", ".join(str(n) for n in ITERATION_PRESETS) + ")",
    )
    size = parser.add_mutually_exclusive_group()
    size.add_argument(
        "-l", "--length",
        type=int,
        choices=list(LENGTH_PRESETS),
        default=None,
        help=f"Password length in characters (default: {defaults.length})",
    )
    size.add_argument(
        "-b", "--bytes",
        type=positive_int,
        help="Raw derived byte count instead of a preset length (Base64 output is ~4/3 as long)",
    )
    parser.add_argument(
        "--show-input",
        action="store_true",
        help="Echo the master secret and password hint while typing",
    )
    parser.add_argument(
        "--self-test",
        action="store_true",
        help="Derive the built-in reference vector and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def prompt_secret(label: str, show_input: bool) -> str:
    # Entered text is used verbatim: the derived password depends on every byte,
    # so no whitespace is trimmed in either mode.
    notice = " (your input will be visible as you type)" if show_input else " (your input will NOT be visible as you type)"
    read = input if show_input else getpass
    value = read(f"Enter {label}{notice}: ")
    while len(value) == 0:
        value = read(f"Please enter a non-empty {label}{notice}: ")
    return value


def main(argv: list[str] | None = None, defaults: Defaults = Defaults()) -> int:
    args = build_parser(defaults).parse_args(argv)
    if args.bytes is not None:
        output_length = args.bytes
    else:
        output_length = bytes_for_length(args.length if args.length is not None else defaults.length)

    if args.self_test:
        try:
            print(derive(SELF_TEST).encoded_password)
            return 0
        except Pa55Error as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(
        f"**** pa55 reference implementation version {APP_VERSION} ****",
        file=sys.stderr,
    )
    try:
        master_secret = prompt_secret("master secret", args.show_input)
        password_hint = prompt_secret("password hint", args.show_input)
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.", file=sys.stderr)
        return 2

    try:
        params = DerivationParameters(
            master_secret=master_secret,
            password_hint=password_hint,
            prf=args.algorithm,
            iterations=args.iterations,
            output_length=output_length,
        )
    except InvalidParameter as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print("Generating password...", file=sys.stderr)
    try:
        result = derive(params)
    except Pa55Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.encoded_password)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
