"""Range coding against integer frequency models.

Exercises a `QuantizedFrequencyTable` end-to-end: the encoder consumes
``count``/``cumulative``/``total`` and the decoder inverts residuals with
``locate``.

Public API:
- ProbabilityModel
- RangeEncoder
- RangeDecoder
- encode_symbols
- decode_symbols
"""

from __future__ import annotations

from quantpdf.coding.range_coder import (
    ProbabilityModel,
    RangeEncoder,
    RangeDecoder,
    encode_symbols,
    decode_symbols,
)

__all__ = [
    "ProbabilityModel",
    "RangeEncoder",
    "RangeDecoder",
    "encode_symbols",
    "decode_symbols",
]
