# MIT License © 2025 Motohiro Suzuki
import pytest

from textsig.errors import ConfigurationError
from textsig.keysources.genpass import (
    LOWER,
    NUMBER,
    SYMBOL,
    UPPER,
    GenPassOptions,
    generate_password,
    password_strength,
)


def test_default_password():
    pw = generate_password()
    assert len(pw) == 16
    assert any(c in UPPER for c in pw)
    assert any(c in LOWER for c in pw)
    assert any(c in NUMBER for c in pw)
    assert any(c in SYMBOL for c in pw)


def test_ambiguous_letters_excluded():
    pw = generate_password(GenPassOptions(length=255))
    assert not set(pw) & set("IOlo")
    assert "0" in NUMBER


def test_single_class():
    pw = generate_password(GenPassOptions(length=20, uppercase=False, lowercase=False, symbol=False))
    assert len(pw) == 20
    assert set(pw) <= set(NUMBER)


@pytest.mark.parametrize(
    "opts",
    [
        GenPassOptions(uppercase=False, lowercase=False, number=False, symbol=False),
        GenPassOptions(length=0),
        GenPassOptions(length=256),
        GenPassOptions(length=3),
    ],
)
def test_invalid_options(opts):
    with pytest.raises(ConfigurationError):
        generate_password(opts)


def test_password_strength_score():
    assert password_strength("password") <= 1
    assert password_strength(generate_password(GenPassOptions(length=32))) == 4
    assert 0 <= password_strength(generate_password(GenPassOptions(length=255))) <= 4
