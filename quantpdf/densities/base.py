"""Structural interface for per-symbol weight functions.

Any object with a ``weight(symbol) -> float`` method qualifies; there is no
base class to inherit from.

Example
-------
```python
class Flat:
    def weight(self, symbol: int) -> float:
        return 1.0

assert isinstance(Flat(), DensityFunction)
```
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DensityFunction(Protocol):
    """Protocol for unnormalized densities over the byte alphabet.

    ``weight`` must return a non-negative real for every symbol in
    ``0..255``. The weights need not sum to one and may be zero for some
    symbols. Non-negativity is the implementer's obligation.
    """

    def weight(self, symbol: int) -> float:  # pragma: no cover - protocol
        ...


def is_density_function(obj: object) -> bool:
    """Return True if ``obj`` exposes a callable ``weight`` attribute."""

    return callable(getattr(obj, "weight", None))
