# MIT License © 2025 Motohiro Suzuki
"""
textsig/keysources/base.py

KeyMaterial is the same 32-byte shape for both algorithms:
- blake3: the MAC key
- ed25519: a seed; whether it acts as the signing (private) or verifying
  (public) key depends only on which backend consumes it

Length rule (from_bytes):
- fewer than 32 bytes -> KeyFormatError
- more than 32 bytes  -> first 32 used (lenient), or KeyFormatError (strict)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from textsig.crypto.algorithms import SignAlgorithm
from textsig.errors import KeyFormatError

logger = logging.getLogger(__name__)

KEY_LEN = 32


@dataclass(frozen=True)
class KeyMaterial:
    algorithm: SignAlgorithm
    raw: bytes = field(repr=False)

    def __post_init__(self) -> None:
        if len(self.raw) != KEY_LEN:
            raise KeyFormatError(
                f"{self.algorithm} key must be {KEY_LEN} bytes, got {len(self.raw)}"
            )

    @classmethod
    def from_bytes(
        cls,
        algorithm: SignAlgorithm,
        data: bytes,
        *,
        strict: bool = False,
    ) -> "KeyMaterial":
        n = len(data)
        if n < KEY_LEN:
            raise KeyFormatError(f"{algorithm} key needs {KEY_LEN} bytes, got {n}")
        if n > KEY_LEN:
            if strict:
                raise KeyFormatError(f"{algorithm} key must be exactly {KEY_LEN} bytes, got {n}")
            logger.warning("%s key is %d bytes; only the first %d are used", algorithm, n, KEY_LEN)
        return cls(algorithm=algorithm, raw=bytes(data[:KEY_LEN]))


class KeySource:
    name: str

    def provide(self, algorithm: SignAlgorithm) -> KeyMaterial:
        raise NotImplementedError
