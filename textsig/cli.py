# MIT License © 2025 Motohiro Suzuki
"""textsig: sign / verify text with blake3 or ed25519, generate keys and passwords."""
from __future__ import annotations

import argparse
import logging
import sys

from textsig.config import STDIN_TOKEN, SignerConfig
from textsig.errors import TextSigError
from textsig.keysources.genpass import GenPassOptions, generate_password, password_strength
from textsig.process import (
    process_text_generate,
    process_text_sign,
    process_text_verify,
    write_generated_keys,
)

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "blake3"


def _cmd_sign(args: argparse.Namespace, config: SignerConfig) -> None:
    print(process_text_sign(args.input, args.key, args.format, config))


def _cmd_verify(args: argparse.Namespace, config: SignerConfig) -> None:
    ok = process_text_verify(args.input, args.key, args.format, args.sig, config)
    print("true" if ok else "false")


def _cmd_generate(args: argparse.Namespace, config: SignerConfig) -> None:
    keys = process_text_generate(args.format, config)
    for path in write_generated_keys(args.format, keys, args.output):
        print(path)


def _cmd_genpass(args: argparse.Namespace, config: SignerConfig) -> None:
    opts = GenPassOptions(
        length=args.length,
        uppercase=not args.no_uppercase,
        lowercase=not args.no_lowercase,
        number=not args.no_number,
        symbol=not args.no_symbol,
    )
    password = generate_password(opts)
    print(password)
    # strength goes to stderr
    print(f"Password strength: {password_strength(password)}", file=sys.stderr)


COMMANDS = {
    "sign": _cmd_sign,
    "verify": _cmd_verify,
    "generate": _cmd_generate,
    "genpass": _cmd_genpass,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textsig", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sign = subparsers.add_parser("sign", help="Sign a message with a private/shared key")
    sign.add_argument("-i", "--input", default=STDIN_TOKEN, help="input file, '-' for stdin")
    sign.add_argument("-k", "--key", required=True)
    sign.add_argument("--format", default=DEFAULT_FORMAT)

    verify = subparsers.add_parser("verify", help="Verify a signed message")
    verify.add_argument("-i", "--input", default=STDIN_TOKEN, help="input file, '-' for stdin")
    verify.add_argument("-k", "--key", required=True)
    verify.add_argument("-s", "--sig", required=True, help="URL-safe base64 signature")
    verify.add_argument("--format", default=DEFAULT_FORMAT)

    gen = subparsers.add_parser("generate", help="Generate a new key")
    gen.add_argument("-f", "--format", default=DEFAULT_FORMAT)
    gen.add_argument("-o", "--output", required=True, help="output directory")

    gp = subparsers.add_parser("genpass", help="Generate a random password")
    gp.add_argument("-l", "--length", type=int, default=16)
    gp.add_argument("--no-uppercase", action="store_true")
    gp.add_argument("--no-lowercase", action="store_true")
    gp.add_argument("--no-number", action="store_true")
    gp.add_argument("--no-symbol", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = SignerConfig.from_env()
        COMMANDS[args.command](args, config)
    except TextSigError as e:
        logger.debug("command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
