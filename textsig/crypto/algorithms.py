# MIT License © 2025 Motohiro Suzuki
"""
textsig/crypto/algorithms.py

Closed set of signing algorithms. Every call site selects its backend by
SignAlgorithm; unknown names fail before any I/O happens.
"""

from __future__ import annotations

from enum import Enum

from textsig.errors import UnsupportedAlgorithmError


class SignAlgorithm(str, Enum):
    BLAKE3 = "blake3"  # keyed hash (MAC), shared secret
    ED25519 = "ed25519"  # asymmetric signature

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | SignAlgorithm") -> "SignAlgorithm":
        if isinstance(name, cls):
            return name
        n = str(name).strip().lower()
        for alg in cls:
            if alg.value == n:
                return alg
        raise UnsupportedAlgorithmError(f"Unsupported format: {n}")

    @property
    def signature_size(self) -> int:
        return _SIG_SIZES[self]


_SIG_SIZES = {
    SignAlgorithm.BLAKE3: 32,
    SignAlgorithm.ED25519: 64,
}
