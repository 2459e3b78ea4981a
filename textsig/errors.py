# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations


class TextSigError(Exception):
    pass


class ConfigurationError(TextSigError):
    pass


class UnsupportedAlgorithmError(ConfigurationError):
    pass


class SignatureFormatError(ConfigurationError):
    """Signature bytes have the wrong shape for the selected algorithm."""
    pass


class InputError(TextSigError):
    pass


class InputNotFoundError(InputError):
    pass


class KeyFormatError(TextSigError):
    pass


class DecodeError(TextSigError):
    pass
