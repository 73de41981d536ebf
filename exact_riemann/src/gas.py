"""
Gas states for the Riemann problem of a calorically perfect gas.
"""

import numpy as np
from dataclasses import dataclass

from .exceptions import PhysicalStateError


@dataclass(frozen=True)
class GasState:
    """Constant primitive state on one side of the initial discontinuity."""
    gamma: float        # Ratio of specific heats
    p: float            # Pressure
    rho: float          # Density
    u: float = 0.0      # Velocity

    def __post_init__(self):
        # All solver arithmetic runs in double precision
        for name in ('gamma', 'p', 'rho', 'u'):
            value = float(getattr(self, name))
            if not np.isfinite(value):
                raise PhysicalStateError(f"{name} must be finite, got {value!r}")
            object.__setattr__(self, name, value)
        if self.gamma <= 1.0:
            raise PhysicalStateError(f"gamma must be > 1, got {self.gamma!r}")
        if self.p <= 0.0:
            raise PhysicalStateError(f"Pressure must be positive, got {self.p!r}")
        if self.rho <= 0.0:
            raise PhysicalStateError(f"Density must be positive, got {self.rho!r}")

    @property
    def a(self) -> float:
        """Speed of sound."""
        return float(np.sqrt(self.gamma * self.p / self.rho))


def check_precision(*values):
    """
    Return the numpy floating type shared by the arguments of one call.

    Python floats and ints carry no precision of their own and are accepted
    alongside any single numpy floating type. Returns None when no argument
    is a numpy floating scalar.

    Raises:
        TypeError: If numpy floating scalars of different precision are mixed.
    """
    kinds = {type(v) for v in values if isinstance(v, np.floating)}
    if len(kinds) > 1:
        names = ', '.join(sorted(k.__name__ for k in kinds))
        raise TypeError(f"Mixed floating-point precision in one call: {names}")
    return kinds.pop() if kinds else None


def as_precision(value: float, precision=None):
    """Cast a double precision result back to the precision of the call."""
    return float(value) if precision is None else precision(value)
