"""Frozen integer frequency table implementing the range coder model contract.

A `QuantizedFrequencyTable` holds one strictly positive count per byte
symbol together with the exclusive prefix sums of those counts. The encoder
narrows its interval with ``count``/``cumulative``/``total``; the decoder maps
its residual back to a symbol with ``locate``.

Example
-------
>>> table = QuantizedFrequencyTable.from_frequencies([1] * 256)
>>> table.total(), table.cumulative(10), table.locate(10)
(256, 10, 10)
"""

from __future__ import annotations

from collections.abc import Iterable
from operator import index as _as_index
from typing import Any

import numpy as np

from quantpdf.alphabet import BYTE_ALPHABET
from quantpdf.config import MAX_UINT32
from quantpdf.errors import ProtocolViolation


class QuantizedFrequencyTable:
    """Immutable per-symbol counts with cumulative lookup and inversion.

    Parameters
    ----------
    frequencies:
        Exactly 256 integer counts, each ``>= 1``, summing to at most
        ``MAX_UINT32``.

    Notes
    -----
    The backing numpy arrays are marked read-only, so one table can be
    shared by any number of encoders and decoders without locking.
    """

    __slots__ = ("_freq", "_cum_freq", "_total")

    def __init__(self, frequencies: Iterable[int]) -> None:
        counts = [_as_index(f) for f in frequencies]
        if len(counts) != BYTE_ALPHABET.size:
            raise ValueError(
                f"Expected {BYTE_ALPHABET.size} frequencies, got {len(counts)}"
            )
        low = min(counts)
        if low < 1:
            raise ValueError(f"Every frequency must be >= 1, found {low}")
        total = sum(counts)
        if total > MAX_UINT32:
            raise ValueError(f"Total frequency {total} exceeds {MAX_UINT32}")

        freq = np.asarray(counts, dtype=np.uint64)
        cum_freq = np.zeros(BYTE_ALPHABET.size, dtype=np.uint64)
        cum_freq[1:] = np.cumsum(freq[:-1])
        freq.setflags(write=False)
        cum_freq.setflags(write=False)

        self._freq = freq
        self._cum_freq = cum_freq
        self._total = total

    @classmethod
    def from_frequencies(cls, frequencies: Iterable[int]) -> "QuantizedFrequencyTable":
        """Build a table from caller-supplied counts, validating invariants."""

        return cls(frequencies)

    # Model contract -----------------------------------------------------------
    def count(self, symbol: int) -> int:
        """Quantized frequency of ``symbol``."""

        return int(self._freq[BYTE_ALPHABET.check_symbol(symbol)])

    def cumulative(self, symbol: int) -> int:
        """Sum of the counts of all symbols strictly below ``symbol``."""

        return int(self._cum_freq[BYTE_ALPHABET.check_symbol(symbol)])

    def total(self) -> int:
        """Sum of all counts."""

        return self._total

    def locate(self, residual: int) -> int:
        """Return the symbol whose interval contains ``residual``.

        Finds the unique ``i`` with
        ``cumulative(i) <= residual < cumulative(i) + count(i)`` by binary
        search over ``[0, 255]``. The probe ``mid + 1`` never exceeds 255.

        Raises
        ------
        ProtocolViolation
            If ``residual`` is outside ``[0, total())``.
        """

        residual = _as_index(residual)
        if residual < 0 or residual >= self._total:
            raise ProtocolViolation(residual, self._total)
        cum_freq = self._cum_freq
        left, right = 0, BYTE_ALPHABET.max_symbol
        while left < right:
            mid = (left + right) // 2
            if int(cum_freq[mid + 1]) <= residual:
                left = mid + 1
            else:
                right = mid
        return left

    # Inspection ---------------------------------------------------------------
    def frequencies(self) -> tuple[int, ...]:
        """All counts in symbol order."""

        return tuple(int(f) for f in self._freq)

    def cumulative_frequencies(self) -> tuple[int, ...]:
        """All exclusive prefix sums in symbol order."""

        return tuple(int(c) for c in self._cum_freq)

    def rows(self) -> list[tuple[int, int, int]]:
        """``(symbol, count, cumulative)`` for every symbol."""

        return list(zip(BYTE_ALPHABET.symbols, self.frequencies(), self.cumulative_frequencies()))

    def format_rows(self) -> str:
        """Return one ``"SSS: count"`` line per symbol."""

        return "\n".join(f"{sym:03}: {cnt}" for sym, cnt, _ in self.rows())

    def probability(self, symbol: int) -> float:
        """Model probability ``count(symbol) / total()``."""

        return self.count(symbol) / self._total

    def entropy(self) -> float:
        """Entropy of the quantized model in bits/symbol."""

        p = self._freq.astype(np.float64) / float(self._total)
        return float(-np.sum(p * np.log2(p)))

    def codelength(self, symbols: Iterable[int]) -> float:
        """Ideal code length in bits for coding ``symbols`` with this table."""

        total = float(self._total)
        bits = 0.0
        for sym in symbols:
            bits -= float(np.log2(self.count(sym) / total))
        return bits

    def to_dict(self) -> dict[str, Any]:
        """Return table metadata suitable for JSON serialization."""

        return {
            "alphabet_name": BYTE_ALPHABET.name,
            "alphabet_size": BYTE_ALPHABET.size,
            "total": self._total,
            "min_count": int(self._freq.min()),
            "max_count": int(self._freq.max()),
            "entropy_bits": self.entropy(),
        }

    # Value semantics ----------------------------------------------------------
    def __len__(self) -> int:
        return BYTE_ALPHABET.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantizedFrequencyTable):
            return NotImplemented
        return bool(np.array_equal(self._freq, other._freq))

    def __hash__(self) -> int:
        return hash(self._freq.tobytes())

    def __repr__(self) -> str:
        return (
            f"QuantizedFrequencyTable(total={self._total}, "
            f"min_count={int(self._freq.min())}, max_count={int(self._freq.max())})"
        )


__all__ = ["QuantizedFrequencyTable"]
