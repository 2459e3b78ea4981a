# MIT License © 2025 Motohiro Suzuki
"""
textsig/process.py

End-to-end text sign / verify / generate.

Every call is single-shot:
- parse algorithm (before any I/O)
- [verify] decode the URL-safe base64 signature
- open input, load key through the matching backend, run it
Raw signature bytes never leave this module; callers see the encoded text.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from textsig.config import SignerConfig
from textsig.crypto.algorithms import SignAlgorithm
from textsig.crypto.encoding import decode_signature, encode_signature
from textsig.crypto.sig_backends import KeyRef, get_signer, get_verifier
from textsig.errors import ConfigurationError, InputError
from textsig.keysources.keygen import generate_keys
from textsig.transport.input_source import open_input

logger = logging.getLogger(__name__)

Designator = Union[str, os.PathLike]

BLAKE3_KEY_FILE = "blake3.txt"
ED25519_PUBLIC_FILE = "ed25519.pk"
ED25519_PRIVATE_FILE = "ed25519.sk"


def process_text_sign(
    input_file: Designator,
    key: KeyRef,
    algorithm: Union[str, SignAlgorithm],
    config: SignerConfig | None = None,
) -> str:
    config = config or SignerConfig()
    alg = SignAlgorithm.parse(algorithm)

    with open_input(input_file, stdin_token=config.stdin_token) as reader:
        signer = get_signer(alg, key, strict=config.strict_key_length)
        raw = signer.sign(reader)

    logger.debug("signed %s with %s", input_file, alg)
    return encode_signature(raw)


def process_text_verify(
    input_file: Designator,
    key: KeyRef,
    algorithm: Union[str, SignAlgorithm],
    sig: str,
    config: SignerConfig | None = None,
) -> bool:
    config = config or SignerConfig()
    alg = SignAlgorithm.parse(algorithm)
    raw = decode_signature(sig)

    with open_input(input_file, stdin_token=config.stdin_token) as reader:
        verifier = get_verifier(alg, key, strict=config.strict_key_length)
        ok = verifier.verify(reader, raw)

    logger.debug("verified %s with %s -> %s", input_file, alg, ok)
    return ok


def process_text_generate(
    algorithm: Union[str, SignAlgorithm],
    config: SignerConfig | None = None,
) -> list[bytes]:
    """
    Returns raw key artifacts; for ed25519 the order is [public, private].
    Nothing is written to disk.
    """
    return generate_keys(SignAlgorithm.parse(algorithm), config)


def write_generated_keys(
    algorithm: Union[str, SignAlgorithm],
    keys: list[bytes],
    output_dir: Union[str, os.PathLike],
) -> list[Path]:
    alg = SignAlgorithm.parse(algorithm)
    out = Path(output_dir)
    if not out.is_dir():
        raise InputError(f"output path does not exist or is not a directory: {out}")

    expected = 1 if alg is SignAlgorithm.BLAKE3 else 2
    if len(keys) != expected:
        raise ConfigurationError(f"{alg} expects {expected} key artifact(s), got {len(keys)}")

    if alg is SignAlgorithm.BLAKE3:
        targets = [(out / BLAKE3_KEY_FILE, keys[0], True)]
    else:
        targets = [
            (out / ED25519_PUBLIC_FILE, keys[0], False),
            (out / ED25519_PRIVATE_FILE, keys[1], True),
        ]

    written = []
    for path, data, secret in targets:
        try:
            path.write_bytes(data)
        except OSError as e:
            raise InputError(f"cannot write key file {path}: {e}") from e
        if secret:
            try:
                path.chmod(0o600)
            except OSError as e:
                logger.warning("failed to restrict permissions on %s: %s", path, e)
        written.append(path)
        logger.info("wrote %s", path)
    return written
