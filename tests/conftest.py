# MIT License © 2025 Motohiro Suzuki
import io
import sys

import pytest


@pytest.fixture
def key32(tmp_path):
    p = tmp_path / "blake3.txt"
    p.write_bytes(bytes(range(32)))
    return p


@pytest.fixture
def feed_stdin(monkeypatch):
    def _feed(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))

    return _feed
