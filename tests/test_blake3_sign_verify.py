# MIT License © 2025 Motohiro Suzuki
import io

import blake3

from textsig.crypto.sig_backends import Blake3Sig, get_signer, get_verifier
from textsig.crypto.algorithms import SignAlgorithm
from textsig.keysources import StaticKeySource


def test_blake3_sign_verify(key32):
    b = Blake3Sig.load(key32)
    data = b"hello world"
    sig = b.sign(io.BytesIO(data))
    assert len(sig) == 32
    assert sig == blake3.blake3(data, key=bytes(range(32))).digest()
    assert b.verify(io.BytesIO(data), sig) is True


def test_blake3_other_data_fails(key32):
    b = Blake3Sig.load(key32)
    sig = b.sign(io.BytesIO(b"hello world"))
    assert b.verify(io.BytesIO(b"hello world!"), sig) is False


def test_blake3_changed_key_byte_fails():
    key = bytearray(range(32))
    sig = get_signer(SignAlgorithm.BLAKE3, StaticKeySource(bytes(key))).sign(io.BytesIO(b"hello world"))
    key[7] ^= 0x01
    v = get_verifier(SignAlgorithm.BLAKE3, StaticKeySource(bytes(key)))
    assert v.verify(io.BytesIO(b"hello world"), sig) is False


def test_blake3_wrong_length_signature_is_false(key32):
    b = Blake3Sig.load(key32)
    sig = b.sign(io.BytesIO(b"hello world"))
    assert b.verify(io.BytesIO(b"hello world"), sig[:16]) is False
    assert b.verify(io.BytesIO(b"hello world"), b"") is False
