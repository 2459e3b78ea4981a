# MIT License © 2025 Motohiro Suzuki
"""
textsig/keysources/keygen.py

Fresh key material per algorithm, returned as raw buffers (never written here):
- blake3  -> [key]
- ed25519 -> [public_key, private_key]
"""

from __future__ import annotations

import logging
import secrets

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from textsig.config import KEYGEN_PASSWORD, SignerConfig
from textsig.crypto.algorithms import SignAlgorithm
from textsig.keysources.base import KEY_LEN
from textsig.keysources.genpass import GenPassOptions, generate_password

logger = logging.getLogger(__name__)


def _blake3_key(config: SignerConfig) -> bytes:
    if config.blake3_keygen == KEYGEN_PASSWORD:
        # all classes are ASCII, so 32 chars -> 32 bytes
        pw = generate_password(GenPassOptions(length=KEY_LEN))
        return pw.encode("ascii")
    return secrets.token_bytes(KEY_LEN)


def _blake3_keys(config: SignerConfig) -> list[bytes]:
    return [_blake3_key(config)]


def _ed25519_pair(config: SignerConfig) -> list[bytes]:
    sk = Ed25519PrivateKey.generate()
    pk = sk.public_key()
    return [pk.public_bytes_raw(), sk.private_bytes_raw()]


_GENERATORS = {
    SignAlgorithm.BLAKE3: _blake3_keys,
    SignAlgorithm.ED25519: _ed25519_pair,
}


def generate_keys(algorithm: SignAlgorithm, config: SignerConfig | None = None) -> list[bytes]:
    config = config or SignerConfig()
    keys = _GENERATORS[algorithm](config)
    logger.debug("generated %d %s key artifact(s)", len(keys), algorithm)
    return keys
