"""Lookup-table density backed by 256 explicit weights.

Useful for empirical models: `TabulatedDensity.from_bytes` turns a byte
histogram into a density, which can then be mixed with parametric ones in a
`DensityFunctionSet`.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from quantpdf.alphabet import BYTE_ALPHABET


class TabulatedDensity:
    """Density defined by one weight per symbol.

    Parameters
    ----------
    weights:
        Exactly 256 non-negative finite values, indexed by symbol.
    """

    def __init__(self, weights: Iterable[float]) -> None:
        table = np.asarray(list(weights), dtype=np.float64)
        if table.shape != (BYTE_ALPHABET.size,):
            raise ValueError(
                f"TabulatedDensity needs {BYTE_ALPHABET.size} weights, got {table.size}"
            )
        if not np.all(np.isfinite(table)):
            raise ValueError("TabulatedDensity weights must be finite")
        if np.any(table < 0):
            raise ValueError("TabulatedDensity weights must be >= 0")
        table.setflags(write=False)
        self._weights = table

    def weight(self, symbol: int) -> float:
        return float(self._weights[symbol])

    @classmethod
    def from_bytes(cls, data: bytes, smoothing: float = 0.0) -> "TabulatedDensity":
        """Histogram of ``data`` plus ``smoothing`` added to every symbol."""

        if smoothing < 0:
            raise ValueError("smoothing must be >= 0")
        counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=BYTE_ALPHABET.size)
        return cls(counts.astype(np.float64) + smoothing)

    def __repr__(self) -> str:
        return f"TabulatedDensity(total={float(self._weights.sum())!r})"
