"""Centralized numeric configuration for quantization and range coding.

Defines immutable defaults for the integer widths used by the frequency
table, the headroom reserved for the positivity floor, and the precision of
the companion range coder. Nothing here is read from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Alphabet
    ALPHABET_SIZE: int = 256

    # Integer width of frequency counts
    MAX_UINT32: int = 0xFFFF_FFFF
    # One unit per symbol is reserved for the +1 floor
    CAPACITY: int = 0xFFFF_FFFF - 256

    # A finalized table must use at least this share of MAX_UINT32
    HEADROOM_RATIO: float = 0.9999999

    # Range coder
    RANGE_BITS: int = 64
    RANGE_TOP_BITS: int = 56

    # CLI defaults
    DEFAULT_OUTPUT_FORMAT: str = "table"
    DEFAULT_SYMBOLS: str = "34,45,128,255,0"


# Convenience re-exports and constants
ALPHABET_SIZE: int = Config.ALPHABET_SIZE
MAX_UINT32: int = Config.MAX_UINT32
CAPACITY: int = Config.CAPACITY
HEADROOM_RATIO: float = Config.HEADROOM_RATIO

# Gaussian peaks used by the CLI when no --gaussian option is given.
# Each entry is (height, width, mean).
DEFAULT_GAUSSIANS: list[tuple[float, float, int]] = [
    (10.0, 5.0, 128),
    (10.0, 2.0, 30),
    (2.0, 5.0, 70),
]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
