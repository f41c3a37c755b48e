"""Gaussian-like peak over the byte alphabet.

The weight of symbol ``v`` for a peak at ``mean`` is

    height * width * exp(-(width * |v - mean|) ** 2)

so ``width`` acts as an inverse spread: larger values give narrower peaks.
Extreme parameters are allowed; for ``height`` near the float maximum and
``width`` near the smallest positive float the product stays finite while
the exponent underflows to zero, which flattens the peak.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from quantpdf.alphabet import BYTE_ALPHABET


@dataclass(frozen=True)
class GaussianDensity:
    """Unnormalized Gaussian-like density centered on ``mean``.

    Parameters
    ----------
    height:
        Peak scale. Must be non-negative.
    width:
        Inverse spread. Must be non-negative.
    mean:
        Symbol at which the peak is centered.
    """

    height: float
    width: float
    mean: int

    def __post_init__(self) -> None:
        if not BYTE_ALPHABET.is_valid_symbol(self.mean):
            raise ValueError(f"mean must be a symbol in [0, 255], got {self.mean!r}")
        if self.height < 0 or self.width < 0:
            raise ValueError("height and width must be >= 0 for GaussianDensity")

    def weight(self, symbol: int) -> float:
        d = float(abs(symbol - self.mean))
        return self.height * self.width * math.exp(-1.0 * self.width * self.width * d * d)

    @classmethod
    def parse(cls, spec: str) -> "GaussianDensity":
        """Build a density from a ``"height,width,mean"`` string.

        Raises
        ------
        ValueError
            If the string does not contain exactly three comma-separated
            numbers or the values are out of range.
        """

        parts = [p.strip() for p in spec.split(",")]
        if len(parts) != 3:
            raise ValueError(f"Expected 'height,width,mean', got {spec!r}")
        height, width = float(parts[0]), float(parts[1])
        mean = int(parts[2])
        return cls(height=height, width=width, mean=mean)
