# MIT License © 2025 Motohiro Suzuki
"""
textsig/config.py

SignerConfig:
- blake3_keygen: "random" (uniform bytes) or "password" (the bytes of a
  32-char printable password, opt-in)
- strict_key_length: reject key files that are not exactly 32 bytes
- stdin_token: input designator meaning "read stdin"

Environment overrides (from_env):
    TEXTSIG_BLAKE3_KEYGEN      = random | password
    TEXTSIG_STRICT_KEY_LENGTH  = 1 | true | yes | on
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from textsig.errors import ConfigurationError

ENV_BLAKE3_KEYGEN = "TEXTSIG_BLAKE3_KEYGEN"
ENV_STRICT_KEY_LENGTH = "TEXTSIG_STRICT_KEY_LENGTH"

KEYGEN_RANDOM = "random"
KEYGEN_PASSWORD = "password"
KEYGEN_MODES = (KEYGEN_RANDOM, KEYGEN_PASSWORD)

STDIN_TOKEN = "-"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("", "0", "false", "no", "off")


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class SignerConfig:
    blake3_keygen: str = KEYGEN_RANDOM
    strict_key_length: bool = False
    stdin_token: str = STDIN_TOKEN

    def __post_init__(self) -> None:
        if self.blake3_keygen not in KEYGEN_MODES:
            raise ConfigurationError(
                f"blake3_keygen must be one of {KEYGEN_MODES}, got {self.blake3_keygen!r}"
            )
        if not self.stdin_token:
            raise ConfigurationError("stdin_token must not be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SignerConfig":
        env = os.environ if environ is None else environ
        keygen = env.get(ENV_BLAKE3_KEYGEN, "").strip().lower() or KEYGEN_RANDOM
        return cls(
            blake3_keygen=keygen,
            strict_key_length=_env_bool(env, ENV_STRICT_KEY_LENGTH, False),
        )
