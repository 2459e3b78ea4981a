# MIT License © 2025 Motohiro Suzuki
"""
textsig: text signing / verification with BLAKE3 keyed hash or Ed25519.
"""

from textsig.config import SignerConfig
from textsig.crypto.algorithms import SignAlgorithm
from textsig.errors import (
    ConfigurationError,
    DecodeError,
    InputError,
    InputNotFoundError,
    KeyFormatError,
    SignatureFormatError,
    TextSigError,
    UnsupportedAlgorithmError,
)
from textsig.process import (
    process_text_generate,
    process_text_sign,
    process_text_verify,
    write_generated_keys,
)

__all__ = [
    "SignerConfig",
    "SignAlgorithm",
    "TextSigError",
    "ConfigurationError",
    "UnsupportedAlgorithmError",
    "SignatureFormatError",
    "InputError",
    "InputNotFoundError",
    "KeyFormatError",
    "DecodeError",
    "process_text_sign",
    "process_text_verify",
    "process_text_generate",
    "write_generated_keys",
]
