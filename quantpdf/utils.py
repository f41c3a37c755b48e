"""Shared helpers for the CLI commands.

Parses density and symbol options and builds tables from them, and creates
output directories.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from quantpdf.alphabet import BYTE_ALPHABET
from quantpdf.config import DEFAULT_GAUSSIANS
from quantpdf.densities.gaussian import GaussianDensity
from quantpdf.density_set import DensityFunctionSet
from quantpdf.table import QuantizedFrequencyTable


def parse_gaussians(specs: Sequence[str]) -> list[GaussianDensity]:
    """Parse ``"height,width,mean"`` strings, falling back to the defaults."""

    if not specs:
        return [GaussianDensity(height=h, width=w, mean=m) for h, w, m in DEFAULT_GAUSSIANS]
    return [GaussianDensity.parse(s) for s in specs]


def parse_symbols(text: str) -> list[int]:
    """Parse a comma-separated list of byte symbols.

    Raises
    ------
    ValueError
        If an entry is not an integer in [0, 255].
    """

    symbols: list[int] = []
    for part in text.split(","):
        part = part.strip()
        if not part:
            continue
        value = int(part)
        if not BYTE_ALPHABET.is_valid_symbol(value):
            raise ValueError(f"Symbol out of range [0, 255]: {value}")
        symbols.append(value)
    return symbols


def build_table(specs: Sequence[str]) -> QuantizedFrequencyTable:
    """Finalize a `DensityFunctionSet` of the Gaussians described by ``specs``."""

    return DensityFunctionSet(parse_gaussians(specs)).finalize()


def ensure_dir(path: Path) -> None:
    """Create directory ``path`` and parents if they don't exist."""

    path.mkdir(parents=True, exist_ok=True)
