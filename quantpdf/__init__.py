"""
quantpdf: Quantize sums of density functions into range coder models.

Sums caller-supplied densities over the 256-symbol byte alphabet and turns
them into an overflow-safe, strictly positive integer frequency table with
cumulative lookup and binary-search inversion for decoding.
"""

__all__ = [
    "ByteAlphabet",
    "BYTE_ALPHABET",
    "Config",
    "get_config",
    "__version__",
    # Errors
    "QuantPDFError",
    "DegenerateDistribution",
    "InvalidDensity",
    "IndexOutOfRange",
    "ProtocolViolation",
    "RangeCoderError",
    # Core (lazy-imported via __getattr__)
    "DensityFunction",
    "DensityFunctionSet",
    "QuantizedFrequencyTable",
    # Densities and coding (lazy-imported via __getattr__)
    "GaussianDensity",
    "TabulatedDensity",
    "RangeEncoder",
    "RangeDecoder",
    "encode_symbols",
    "decode_symbols",
]

__version__ = "0.1.0"

from typing import Any

from quantpdf.alphabet import ByteAlphabet, BYTE_ALPHABET
from quantpdf.config import Config, get_config
from quantpdf.errors import (
    QuantPDFError,
    DegenerateDistribution,
    InvalidDensity,
    IndexOutOfRange,
    ProtocolViolation,
    RangeCoderError,
)


def __getattr__(name: str) -> Any:  # lazy attribute access to keep numpy out of plain imports
    if name == "DensityFunction":
        from quantpdf.densities.base import DensityFunction as _DF

        return _DF
    if name == "DensityFunctionSet":
        from quantpdf.density_set import DensityFunctionSet as _DFS

        return _DFS
    if name == "QuantizedFrequencyTable":
        from quantpdf.table import QuantizedFrequencyTable as _QFT

        return _QFT
    if name == "GaussianDensity":
        from quantpdf.densities.gaussian import GaussianDensity as _GD

        return _GD
    if name == "TabulatedDensity":
        from quantpdf.densities.tabulated import TabulatedDensity as _TD

        return _TD
    if name in {"RangeEncoder", "RangeDecoder", "encode_symbols", "decode_symbols"}:
        from quantpdf.coding import range_coder as _rc

        return getattr(_rc, name)
    raise AttributeError(f"module 'quantpdf' has no attribute {name!r}")
