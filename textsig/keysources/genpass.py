# MIT License © 2025 Motohiro Suzuki
"""
textsig/keysources/genpass.py

Random password generator.

- Letter alphabets drop visually ambiguous characters (I, O, l, o).
- password_strength(): zxcvbn score 0 (weak) .. 4 (strong).
- One character from every enabled class is placed first, the rest is drawn
  from the union, then the whole password is shuffled.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from zxcvbn import zxcvbn

from textsig.errors import ConfigurationError

UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghijkmnpqrstuvwxyz"
NUMBER = "0123456789"
SYMBOL = "!@#$%^&*()_"

MAX_LENGTH = 255
# zxcvbn refuses longer inputs
STRENGTH_MAX_INPUT = 72

_rng = secrets.SystemRandom()


@dataclass(frozen=True)
class GenPassOptions:
    length: int = 16
    uppercase: bool = True
    lowercase: bool = True
    number: bool = True
    symbol: bool = True

    def classes(self) -> list[str]:
        out = []
        if self.uppercase:
            out.append(UPPER)
        if self.lowercase:
            out.append(LOWER)
        if self.number:
            out.append(NUMBER)
        if self.symbol:
            out.append(SYMBOL)
        return out


def generate_password(opts: GenPassOptions | None = None) -> str:
    opts = opts or GenPassOptions()
    classes = opts.classes()

    if not classes:
        raise ConfigurationError("at least one character class must be enabled")
    if not (1 <= opts.length <= MAX_LENGTH):
        raise ConfigurationError(f"length must be in 1..{MAX_LENGTH}, got {opts.length}")
    if opts.length < len(classes):
        raise ConfigurationError(
            f"length {opts.length} cannot hold {len(classes)} character classes"
        )

    chars = "".join(classes)
    password = [secrets.choice(c) for c in classes]
    password += [secrets.choice(chars) for _ in range(opts.length - len(password))]
    _rng.shuffle(password)
    return "".join(password)


def password_strength(password: str) -> int:
    return int(zxcvbn(password[:STRENGTH_MAX_INPUT])["score"])
