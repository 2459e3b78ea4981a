# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from textsig.crypto.algorithms import SignAlgorithm
from textsig.errors import InputError, InputNotFoundError
from textsig.keysources.base import KeyMaterial, KeySource

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class FileKeySource(KeySource):
    """Raw key bytes on disk. Only the first 32 bytes are significant."""

    def __init__(self, path: PathLike, *, strict: bool = False) -> None:
        self.path = Path(path)
        self.name = str(self.path)
        self.strict = strict

    def read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError as e:
            raise InputNotFoundError(f"key file not found: {self.path}") from e
        except OSError as e:
            raise InputError(f"cannot read key file {self.path}: {e}") from e

    def provide(self, algorithm: SignAlgorithm) -> KeyMaterial:
        data = self.read_bytes()
        logger.debug("loaded %s key from %s (%d bytes)", algorithm, self.path, len(data))
        return KeyMaterial.from_bytes(algorithm, data, strict=self.strict)


class StaticKeySource(KeySource):
    """In-memory key bytes, same length rule as FileKeySource."""

    def __init__(self, data: bytes, *, strict: bool = False, name: str = "static") -> None:
        self._data = bytes(data)
        self.name = name
        self.strict = strict

    def provide(self, algorithm: SignAlgorithm) -> KeyMaterial:
        return KeyMaterial.from_bytes(algorithm, self._data, strict=self.strict)
