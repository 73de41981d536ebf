"""
Rankine-Hugoniot jump relations for a normal shock moving into a gas at rest
(in the frame of the undisturbed gas).

The shock strength is given as the pressure ratio across the shock,
pi = p_behind / p_ahead. Both relations follow from the mass, momentum and
energy jump conditions for a calorically perfect gas.
"""

import numpy as np

from .exceptions import PhysicalStateError


def _check_ratio(gamma: float, pressure_ratio: float):
    if gamma <= 1.0:
        raise PhysicalStateError(f"gamma must be > 1, got {gamma!r}")
    if not pressure_ratio > 0.0:
        raise PhysicalStateError(f"Pressure ratio must be positive, got {pressure_ratio!r}")


def density_ratio_across_moving_shock(gamma: float, pressure_ratio: float) -> float:
    """
    Density ratio rho_behind / rho_ahead across a moving shock.

    Args:
        gamma: Ratio of specific heats of the gas the shock moves into
        pressure_ratio: p_behind / p_ahead

    Returns:
        rho_behind / rho_ahead. Equals 1 for pressure_ratio == 1 and tends to
        (gamma + 1) / (gamma - 1) in the strong-shock limit.
    """
    _check_ratio(gamma, pressure_ratio)
    mu2 = (gamma - 1) / (gamma + 1)
    return (pressure_ratio + mu2) / (mu2 * pressure_ratio + 1)


def shock_mach_number(gamma: float, pressure_ratio: float) -> float:
    """Mach number of the shock relative to the gas ahead of it."""
    _check_ratio(gamma, pressure_ratio)
    g1 = (gamma - 1) / (2 * gamma)
    g2 = (gamma + 1) / (2 * gamma)
    return float(np.sqrt(g2 * pressure_ratio + g1))
