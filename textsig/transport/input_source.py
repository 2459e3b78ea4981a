# MIT License © 2025 Motohiro Suzuki
"""
textsig/transport/input_source.py

Input designator -> binary reader.
- stdin_token ("-") -> sys.stdin.buffer (never closed here)
- anything else     -> filesystem path, opened "rb" and closed on exit
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Union

from textsig.config import STDIN_TOKEN
from textsig.errors import InputError, InputNotFoundError

logger = logging.getLogger(__name__)


@contextmanager
def open_input(
    designator: Union[str, os.PathLike],
    *,
    stdin_token: str = STDIN_TOKEN,
) -> Iterator[BinaryIO]:
    if isinstance(designator, str) and designator == stdin_token:
        logger.debug("reading input from stdin")
        yield sys.stdin.buffer
        return

    try:
        f = open(designator, "rb")
    except FileNotFoundError as e:
        raise InputNotFoundError(f"input not found: {designator}") from e
    except OSError as e:
        raise InputError(f"cannot open input {designator}: {e}") from e

    with f:
        logger.debug("reading input from %s", designator)
        yield f


def read_all(reader: BinaryIO) -> bytes:
    try:
        return reader.read()
    except OSError as e:
        raise InputError(f"read failed: {e}") from e
