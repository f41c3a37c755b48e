"""Byte-oriented range coder driven by an integer frequency model.

The coder keeps a 64-bit interval so that totals up to ``MAX_UINT32`` still
leave at least 24 bits of resolution in ``range // total``. Output bytes are
emitted through a one-byte cache plus a run counter of pending ``0xFF``
bytes, so carries out of ``low`` propagate into already-decided bytes.

The decoder mirrors the encoder: it tracks ``code`` relative to ``low`` and
hands ``code // (range // total)`` to ``model.locate`` as the residual.

Example
-------
>>> from quantpdf.table import QuantizedFrequencyTable
>>> model = QuantizedFrequencyTable.from_frequencies([1] * 256)
>>> data = encode_symbols(model, [1, 2, 3])
>>> decode_symbols(model, data, 3)
[1, 2, 3]
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from quantpdf.config import Config
from quantpdf.errors import RangeCoderError


_BITS = Config.RANGE_BITS
_MASK = (1 << _BITS) - 1
_TOP = 1 << Config.RANGE_TOP_BITS
_SHIFT = _BITS - 8


class ProbabilityModel(Protocol):
    """Integer frequency model consumed by the range coder."""

    def count(self, symbol: int) -> int:  # pragma: no cover - protocol
        ...

    def cumulative(self, symbol: int) -> int:  # pragma: no cover - protocol
        ...

    def total(self) -> int:  # pragma: no cover - protocol
        ...

    def locate(self, residual: int) -> int:  # pragma: no cover - protocol
        ...


class RangeEncoder:
    """Encode symbols into bytes under a `ProbabilityModel`."""

    def __init__(self) -> None:
        self._low = 0
        self._range = _MASK
        self._cache = 0
        self._cache_size = 1
        self._out = bytearray()
        self._finished = False

    def encode(self, model: ProbabilityModel, symbol: int) -> None:
        """Narrow the interval to ``symbol``'s slice of ``model``."""

        if self._finished:
            raise RuntimeError("RangeEncoder.finish() was already called.")
        r = self._range // model.total()
        self._low += r * model.cumulative(symbol)
        self._range = r * model.count(symbol)
        while self._range < _TOP:
            self._range <<= 8
            self._shift_low()

    def finish(self) -> bytes:
        """Flush the interval and return the encoded bytes."""

        if not self._finished:
            for _ in range(_BITS // 8 + 1):
                self._shift_low()
            self._finished = True
        return bytes(self._out)

    def _shift_low(self) -> None:
        if self._low < (0xFF << _SHIFT) or self._low > _MASK:
            carry = self._low >> _BITS
            temp = self._cache
            while True:
                self._out.append((temp + carry) & 0xFF)
                temp = 0xFF
                self._cache_size -= 1
                if self._cache_size == 0:
                    break
            self._cache = (self._low >> _SHIFT) & 0xFF
        self._cache_size += 1
        self._low = (self._low << 8) & _MASK


class RangeDecoder:
    """Decode symbols from bytes produced by `RangeEncoder`.

    Parameters
    ----------
    data:
        The complete encoded stream.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0
        self._range = _MASK
        self._code = 0
        for _ in range(_BITS // 8 + 1):
            self._code = ((self._code << 8) | self._next_byte()) & _MASK

    def decode(self, model: ProbabilityModel) -> int:
        """Recover the next symbol and advance past its interval."""

        r = self._range // model.total()
        symbol = model.locate(self._code // r)
        self._code -= r * model.cumulative(symbol)
        self._range = r * model.count(symbol)
        while self._range < _TOP:
            self._code = ((self._code << 8) | self._next_byte()) & _MASK
            self._range <<= 8
        return symbol

    def _next_byte(self) -> int:
        if self._pos >= len(self._data):
            raise RangeCoderError(f"Unexpected end of range coded data at byte {self._pos}")
        byte = self._data[self._pos]
        self._pos += 1
        return byte


def encode_symbols(model: ProbabilityModel, symbols: Iterable[int]) -> bytes:
    """Encode every symbol of ``symbols`` and return the flushed stream."""

    encoder = RangeEncoder()
    for symbol in symbols:
        encoder.encode(model, symbol)
    return encoder.finish()


def decode_symbols(model: ProbabilityModel, data: bytes, n: int) -> list[int]:
    """Decode ``n`` symbols from ``data``."""

    decoder = RangeDecoder(data)
    return [decoder.decode(model) for _ in range(n)]
