"""Density functions over the byte alphabet: the capability protocol plus
Gaussian-like and tabulated implementations."""

from __future__ import annotations

from typing import Any

__all__ = [
    "DensityFunction",
    "GaussianDensity",
    "TabulatedDensity",
]


def __getattr__(name: str) -> Any:  # lazy imports keep numpy off the protocol import path
    if name == "DensityFunction":
        from quantpdf.densities.base import DensityFunction as _DF

        return _DF
    if name == "GaussianDensity":
        from quantpdf.densities.gaussian import GaussianDensity as _GD

        return _GD
    if name == "TabulatedDensity":
        from quantpdf.densities.tabulated import TabulatedDensity as _TD

        return _TD
    raise AttributeError(f"module 'quantpdf.densities' has no attribute {name!r}")
