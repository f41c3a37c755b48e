import numpy as np
import pytest

from quantpdf.alphabet import BYTE_ALPHABET, ByteAlphabet
from quantpdf.errors import IndexOutOfRange


def test_byte_alphabet_size():
    """The byte alphabet has 256 symbols, 0 through 255."""

    assert BYTE_ALPHABET.size == 256
    assert BYTE_ALPHABET.max_symbol == 255
    assert list(BYTE_ALPHABET.symbols) == list(range(256))


def test_byte_log2_size():
    """log2(256) is exactly 8 bits/symbol."""

    assert BYTE_ALPHABET.log2_size == 8.0


def test_is_valid_symbol():
    assert BYTE_ALPHABET.is_valid_symbol(0) is True
    assert BYTE_ALPHABET.is_valid_symbol(255) is True
    assert BYTE_ALPHABET.is_valid_symbol(np.int64(7)) is True
    assert BYTE_ALPHABET.is_valid_symbol(256) is False
    assert BYTE_ALPHABET.is_valid_symbol(-1) is False
    assert BYTE_ALPHABET.is_valid_symbol(3.0) is False
    assert BYTE_ALPHABET.is_valid_symbol("3") is False
    assert BYTE_ALPHABET.is_valid_symbol(False) is False


def test_check_symbol():
    assert BYTE_ALPHABET.check_symbol(np.uint8(200)) == 200
    with pytest.raises(IndexOutOfRange) as excinfo:
        BYTE_ALPHABET.check_symbol(999)
    assert excinfo.value.symbol == 999


def test_alphabet_is_frozen():
    with pytest.raises(Exception):
        BYTE_ALPHABET.size = 10  # type: ignore[misc]
    assert ByteAlphabet(size=256, name="Byte-256") == BYTE_ALPHABET
