# MIT License © 2025 Motohiro Suzuki
import pytest

from textsig.crypto.algorithms import SignAlgorithm
from textsig.errors import ConfigurationError, UnsupportedAlgorithmError


def test_parse_is_case_insensitive():
    assert SignAlgorithm.parse("BLAKE3") is SignAlgorithm.BLAKE3
    assert SignAlgorithm.parse(" Ed25519 ") is SignAlgorithm.ED25519
    assert SignAlgorithm.parse(SignAlgorithm.ED25519) is SignAlgorithm.ED25519


def test_parse_unknown_name():
    with pytest.raises(UnsupportedAlgorithmError, match="Unsupported format: rsa"):
        SignAlgorithm.parse("rsa")
    assert issubclass(UnsupportedAlgorithmError, ConfigurationError)


def test_str_and_signature_size():
    assert str(SignAlgorithm.BLAKE3) == "blake3"
    assert str(SignAlgorithm.ED25519) == "ed25519"
    assert SignAlgorithm.BLAKE3.signature_size == 32
    assert SignAlgorithm.ED25519.signature_size == 64
