"""Exception hierarchy for quantization, table lookups, and range coding.

Every condition is raised synchronously to the caller. The classes also
derive from the closest built-in exception so that callers catching
``ValueError`` or ``IndexError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class QuantPDFError(Exception):
    """Base class for all errors raised by quantpdf."""


class DegenerateDistribution(QuantPDFError, ValueError):
    """The aggregate weight over all symbols is not positive."""

    def __init__(self, total_raw: float) -> None:
        super().__init__(
            f"Aggregate density weight must be positive to normalize, got {total_raw!r}."
        )
        self.total_raw = total_raw


class InvalidDensity(QuantPDFError, ValueError):
    """An aggregated per-symbol weight, or the total weight, is unusable.

    ``symbol`` is ``None`` when the total itself is non-finite.
    """

    def __init__(self, value: float, symbol: Optional[int] = None) -> None:
        where = "total weight" if symbol is None else f"weight of symbol {symbol}"
        super().__init__(f"Invalid {where}: {value!r}")
        self.value = value
        self.symbol = symbol


class IndexOutOfRange(QuantPDFError, IndexError):
    """A symbol outside the byte alphabet was passed to a table accessor."""

    def __init__(self, symbol: object) -> None:
        super().__init__(f"Symbol must be an integer in [0, 255], got {symbol!r}")
        self.symbol = symbol


class ProtocolViolation(QuantPDFError, ValueError):
    """A decoder residual fell outside ``[0, total)``."""

    def __init__(self, residual: int, total: int) -> None:
        super().__init__(f"Residual {residual} is outside [0, {total}); decoder state is corrupt.")
        self.residual = residual
        self.total = total


class RangeCoderError(QuantPDFError):
    """The range decoder ran out of input."""


__all__ = [
    "QuantPDFError",
    "DegenerateDistribution",
    "InvalidDensity",
    "IndexOutOfRange",
    "ProtocolViolation",
    "RangeCoderError",
]
