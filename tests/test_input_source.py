# MIT License © 2025 Motohiro Suzuki
import io
import sys

import pytest

from textsig.crypto.sig_backends import Blake3Sig, Ed25519Signer
from textsig.errors import InputError, InputNotFoundError
from textsig.keysources import StaticKeySource
from textsig.transport.input_source import open_input, read_all


class BrokenReader(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("device gone")


def test_read_all_wraps_oserror():
    with pytest.raises(InputError, match="device gone"):
        read_all(BrokenReader())


def test_backend_read_failure_is_input_error():
    b = Blake3Sig.load(StaticKeySource(b"k" * 32))
    with pytest.raises(InputError):
        b.sign(BrokenReader())
    with pytest.raises(InputError):
        b.verify(BrokenReader(), b"\x00" * 32)
    with pytest.raises(InputError):
        Ed25519Signer.load(StaticKeySource(b"k" * 32)).sign(BrokenReader())


def test_open_input_file_closed_on_exit(tmp_path):
    p = tmp_path / "in.txt"
    p.write_bytes(b"abc")
    with open_input(p) as reader:
        assert read_all(reader) == b"abc"
    assert reader.closed


def test_open_input_stdin_left_open(feed_stdin):
    feed_stdin(b"abc")
    with open_input("-") as reader:
        assert reader is sys.stdin.buffer
    assert not sys.stdin.buffer.closed


def test_open_input_custom_stdin_token(feed_stdin):
    feed_stdin(b"abc")
    with open_input("STDIN", stdin_token="STDIN") as reader:
        assert read_all(reader) == b"abc"


def test_open_input_missing(tmp_path):
    with pytest.raises(InputNotFoundError):
        with open_input(tmp_path / "missing"):
            pass


def test_open_input_directory_is_input_error(tmp_path):
    with pytest.raises(InputError) as exc:
        with open_input(tmp_path):
            pass
    assert not isinstance(exc.value, InputNotFoundError)
