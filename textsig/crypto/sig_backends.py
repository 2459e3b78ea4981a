# MIT License © 2025 Motohiro Suzuki
"""
textsig/crypto/sig_backends.py

Signing backends behind one surface:
- TextSigner.sign(reader) -> raw signature bytes
- TextVerifier.verify(reader, sig) -> bool
- load(key, strict=) classmethod builds the backend from a KeySource or a key
  path; strict only applies to paths (a KeySource carries its own rule)

blake3:
- keyed hash over the whole input, 32-byte tag
- one object signs and verifies (shared key)
- tag comparison is constant-time

ed25519:
- Ed25519Signer loads the private seed, Ed25519Verifier the public key
- 64-byte signatures; shorter input is a SignatureFormatError raised before the
  data is read, any extra bytes past 64 are ignored
- every library-level rejection on verify maps to False, including public
  key bytes that are not a valid curve point (cryptography does not check the
  point when loading)

NOTE:
- input is read fully into memory before hashing/signing.
"""

from __future__ import annotations

import hmac
import logging
import os
from typing import BinaryIO, Union

import blake3
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from textsig.crypto.algorithms import SignAlgorithm
from textsig.errors import SignatureFormatError
from textsig.keysources.base import KeyMaterial, KeySource
from textsig.keysources.file_source import FileKeySource
from textsig.transport.input_source import read_all

logger = logging.getLogger(__name__)

KeyRef = Union[KeySource, str, os.PathLike]

ED25519_SIG_LEN = SignAlgorithm.ED25519.signature_size


def as_key_source(key: KeyRef, *, strict: bool = False) -> KeySource:
    """Paths become FileKeySource(strict=strict); KeySource objects keep their own rule."""
    if isinstance(key, KeySource):
        return key
    return FileKeySource(key, strict=strict)


class TextSigner:
    algorithm: SignAlgorithm

    def sign(self, reader: BinaryIO) -> bytes:
        raise NotImplementedError

    @classmethod
    def load(cls, key: KeyRef, *, strict: bool = False) -> "TextSigner":
        return cls(as_key_source(key, strict=strict).provide(cls.algorithm))


class TextVerifier:
    algorithm: SignAlgorithm

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        raise NotImplementedError

    @classmethod
    def load(cls, key: KeyRef, *, strict: bool = False) -> "TextVerifier":
        return cls(as_key_source(key, strict=strict).provide(cls.algorithm))


class Blake3Sig(TextSigner, TextVerifier):
    algorithm = SignAlgorithm.BLAKE3

    def __init__(self, key: KeyMaterial) -> None:
        self._key = key.raw

    def _tag(self, data: bytes) -> bytes:
        return blake3.blake3(data, key=self._key).digest()

    def sign(self, reader: BinaryIO) -> bytes:
        data = read_all(reader)
        logger.debug("blake3 sign: %d bytes", len(data))
        return self._tag(data)

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        data = read_all(reader)
        ok = hmac.compare_digest(self._tag(data), bytes(sig))
        logger.debug("blake3 verify: %d bytes -> %s", len(data), ok)
        return ok


class Ed25519Signer(TextSigner):
    algorithm = SignAlgorithm.ED25519

    def __init__(self, key: KeyMaterial) -> None:
        self._sk = Ed25519PrivateKey.from_private_bytes(key.raw)

    def sign(self, reader: BinaryIO) -> bytes:
        data = read_all(reader)
        logger.debug("ed25519 sign: %d bytes", len(data))
        return self._sk.sign(data)


class Ed25519Verifier(TextVerifier):
    algorithm = SignAlgorithm.ED25519

    def __init__(self, key: KeyMaterial) -> None:
        # 32 bytes always load; an invalid curve point only shows up as a
        # failed verify (False), not as a KeyFormatError here.
        self._pk = Ed25519PublicKey.from_public_bytes(key.raw)

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        if len(sig) < ED25519_SIG_LEN:
            raise SignatureFormatError(
                f"ed25519 signature must be {ED25519_SIG_LEN} bytes, got {len(sig)}"
            )
        data = read_all(reader)
        try:
            self._pk.verify(bytes(sig[:ED25519_SIG_LEN]), data)
            ok = True
        except (InvalidSignature, ValueError):
            ok = False
        logger.debug("ed25519 verify: %d bytes -> %s", len(data), ok)
        return ok


_SIGNERS: dict[SignAlgorithm, type[TextSigner]] = {
    SignAlgorithm.BLAKE3: Blake3Sig,
    SignAlgorithm.ED25519: Ed25519Signer,
}

_VERIFIERS: dict[SignAlgorithm, type[TextVerifier]] = {
    SignAlgorithm.BLAKE3: Blake3Sig,
    SignAlgorithm.ED25519: Ed25519Verifier,
}


def get_signer(algorithm: SignAlgorithm, key: KeyRef, *, strict: bool = False) -> TextSigner:
    return _SIGNERS[algorithm].load(key, strict=strict)


def get_verifier(algorithm: SignAlgorithm, key: KeyRef, *, strict: bool = False) -> TextVerifier:
    return _VERIFIERS[algorithm].load(key, strict=strict)
