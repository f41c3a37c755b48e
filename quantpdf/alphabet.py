"""The fixed byte alphabet modeled by density sets and frequency tables.

Examples
--------
>>> from quantpdf.alphabet import BYTE_ALPHABET
>>> BYTE_ALPHABET.size
256
>>> BYTE_ALPHABET.log2_size
8.0
>>> BYTE_ALPHABET.is_valid_symbol(255), BYTE_ALPHABET.is_valid_symbol(256)
(True, False)
"""

from __future__ import annotations

from dataclasses import dataclass
from operator import index as _as_index
import math

from quantpdf.config import ALPHABET_SIZE
from quantpdf.errors import IndexOutOfRange


@dataclass(frozen=True)
class ByteAlphabet:
    """A contiguous integer symbol set ``0 .. size - 1``.

    Parameters
    ----------
    size:
        Number of symbols M in the alphabet.
    name:
        Human-friendly name, e.g., "Byte-256".
    """

    size: int
    name: str

    @property
    def max_symbol(self) -> int:
        """Largest valid symbol value."""

        return self.size - 1

    @property
    def log2_size(self) -> float:
        """log2(M): bits required to code one symbol uniformly."""

        return math.log2(self.size)

    @property
    def symbols(self) -> range:
        """All symbols in ascending order."""

        return range(self.size)

    def is_valid_symbol(self, symbol: object) -> bool:
        """Return True if ``symbol`` is an integer member of the alphabet.

        ``bool`` is rejected even though it subclasses ``int``.
        """

        if isinstance(symbol, bool):
            return False
        try:
            index = _as_index(symbol)  # type: ignore[arg-type]
        except TypeError:
            return False
        return 0 <= index < self.size

    def check_symbol(self, symbol: object) -> int:
        """Return ``symbol`` as a plain int or raise `IndexOutOfRange`."""

        if not self.is_valid_symbol(symbol):
            raise IndexOutOfRange(symbol)
        return _as_index(symbol)  # type: ignore[arg-type]


BYTE_ALPHABET = ByteAlphabet(size=ALPHABET_SIZE, name="Byte-256")
