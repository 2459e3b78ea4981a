# MIT License © 2025 Motohiro Suzuki
from textsig.keysources.base import KEY_LEN, KeyMaterial, KeySource
from textsig.keysources.file_source import FileKeySource, StaticKeySource

__all__ = [
    "KEY_LEN",
    "KeyMaterial",
    "KeySource",
    "FileKeySource",
    "StaticKeySource",
]
