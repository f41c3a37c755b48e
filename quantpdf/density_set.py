"""Summation of density functions and quantization into integer counts.

A `DensityFunctionSet` collects densities over the byte alphabet and, once
finalized, turns their per-symbol sum into a `QuantizedFrequencyTable`:

1. ``raw[x]`` is the float64 sum of every density's weight at ``x``.
2. ``total_raw`` is the running sum of ``raw`` in ascending symbol order.
3. ``freq[x] = floor(CAPACITY * (raw[x] / total_raw)) + 1`` with
   ``CAPACITY = MAX_UINT32 - 256``.

Truncation keeps ``sum(freq) <= CAPACITY + 256 = MAX_UINT32`` and the ``+1``
floor keeps every symbol encodable. When one symbol carries essentially all
of the mass it ends up at ``CAPACITY + 1`` and every other symbol at 1.

Example
-------
>>> from quantpdf.densities.gaussian import GaussianDensity
>>> pdfs = DensityFunctionSet()
>>> pdfs.add(GaussianDensity(height=10.0, width=0.1, mean=128))
>>> table = pdfs.finalize()
>>> table.count(128) > table.count(0) >= 1
True
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
import math

import numpy as np

from quantpdf.alphabet import BYTE_ALPHABET
from quantpdf.config import CAPACITY, MAX_UINT32
from quantpdf.densities.base import DensityFunction, is_density_function
from quantpdf.errors import DegenerateDistribution, InvalidDensity
from quantpdf.table import QuantizedFrequencyTable


_LOGGER = logging.getLogger(__name__)


class DensityFunctionSet:
    """Ordered collection of densities that is quantized exactly once.

    Parameters
    ----------
    pdfs:
        Optional initial densities, added in iteration order.

    Notes
    -----
    Only the sum of the members matters, so order never changes the result
    beyond float64 rounding. After `finalize` the set is consumed: further
    `add` or `finalize` calls raise ``RuntimeError``.
    """

    def __init__(self, pdfs: Iterable[DensityFunction] | None = None) -> None:
        self._pdfs: list[DensityFunction] = []
        self._finalized: bool = False
        for pdf in pdfs or ():
            self.add(pdf)

    def add(self, pdf: DensityFunction) -> None:
        """Append ``pdf`` to the set."""

        self._ensure_open()
        if not is_density_function(pdf):
            raise TypeError(f"{type(pdf).__name__} has no callable weight(symbol) method")
        self._pdfs.append(pdf)

    def finalize(self) -> QuantizedFrequencyTable:
        """Consume the set and return its quantized frequency table.

        Raises
        ------
        InvalidDensity
            If any aggregated weight or the total is NaN or infinite, or an
            aggregated weight is negative.
        DegenerateDistribution
            If the total weight is not positive.
        """

        self._ensure_open()
        pdfs, self._pdfs = self._pdfs, []
        self._finalized = True

        raw, total_raw = _aggregate(pdfs)
        _LOGGER.debug("Aggregated %d densities, total weight %r", len(pdfs), total_raw)

        freq = _quantize(raw, total_raw)
        table = QuantizedFrequencyTable(freq)
        _LOGGER.debug("Quantized table total=%d (capacity %d)", table.total(), CAPACITY)
        return table

    @property
    def finalized(self) -> bool:
        """True once `finalize` has consumed the set."""

        return self._finalized

    def __len__(self) -> int:
        return len(self._pdfs)

    def __iter__(self) -> Iterator[DensityFunction]:
        return iter(self._pdfs)

    def _ensure_open(self) -> None:
        if self._finalized:
            raise RuntimeError("DensityFunctionSet was already finalized and cannot be reused.")


def _aggregate(pdfs: list[DensityFunction]) -> tuple[np.ndarray, float]:
    """Sum the weights of ``pdfs`` per symbol and over all symbols."""

    raw = np.zeros(BYTE_ALPHABET.size, dtype=np.float64)
    total_raw = 0.0
    for x in BYTE_ALPHABET.symbols:
        value = 0.0
        for pdf in pdfs:
            value += float(pdf.weight(x))
        if not math.isfinite(value) or value < 0:
            raise InvalidDensity(value, symbol=x)
        raw[x] = value
        total_raw += value

    if not math.isfinite(total_raw):
        raise InvalidDensity(total_raw)
    if total_raw <= 0:
        raise DegenerateDistribution(total_raw)
    return raw, total_raw


def _quantize(raw: np.ndarray, total_raw: float) -> np.ndarray:
    """Scale ``raw`` onto ``CAPACITY`` with truncation and a floor of one."""

    # raw[x] <= total_raw, so every share is within [0, 1]
    shares = raw / total_raw
    freq = np.floor(float(CAPACITY) * shares).astype(np.uint64) + np.uint64(1)

    total = int(freq.sum())
    if total > MAX_UINT32:
        excess = total - MAX_UINT32
        top = int(np.argmax(freq))
        _LOGGER.debug("Trimming %d rounding excess from symbol %d", excess, top)
        freq[top] -= np.uint64(excess)
    return freq
