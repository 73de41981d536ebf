"""
Pressure functions of the exact Riemann solver (Toro, Ch. 4).

The star pressure p* is the root of

    Phi(p0) = psi(p0, W_L) + psi(p0, W_R) + (u_R - u_L)

where psi is the change in velocity across the wave connecting a side's
initial state W = (gamma, p, rho) to the star region. A side emits a shock
when p0 > p and a rarefaction otherwise; `is_shock` is the one place that
decision is made.
"""

import numpy as np
from enum import Enum

from .gas import GasState


class WaveKind(Enum):
    """Type of the nonlinear wave emitted into one side."""
    SHOCK = 'shock'
    RAREFACTION = 'rarefaction'


def is_shock(p0: float, p: float) -> bool:
    """True when star pressure p0 drives a shock into gas at pressure p."""
    return p0 > p


def wave_kind(p0: float, p: float) -> WaveKind:
    return WaveKind.SHOCK if is_shock(p0, p) else WaveKind.RAREFACTION


def constant_a(gamma: float, rho: float) -> float:
    """Shock constant A = 2 / ((gamma + 1) rho)."""
    return 2.0 / ((gamma + 1.0) * rho)


def constant_b(gamma: float, p: float) -> float:
    """Shock constant B = (gamma - 1) p / (gamma + 1)."""
    return (gamma - 1.0) * p / (gamma + 1.0)


def wave_function(p0: float, gamma: float, p: float, rho: float) -> float:
    """
    Contribution psi of one side to the pressure function.

    Args:
        p0: Trial pressure
        gamma: Ratio of specific heats of the side
        p: Initial pressure of the side
        rho: Initial density of the side

    Returns:
        (p0 - p) sqrt(A / (p0 + B))                          for a shock
        2a / (gamma - 1) [(p0 / p)^((gamma - 1) / 2 gamma) - 1]  for a rarefaction
    """
    if is_shock(p0, p):
        A = constant_a(gamma, rho)
        B = constant_b(gamma, p)
        return float((p0 - p) * np.sqrt(A / (p0 + B)))
    a = np.sqrt(gamma * p / rho)
    return float(2.0 * a / (gamma - 1.0) * ((p0 / p)**((gamma - 1.0) / (2.0 * gamma)) - 1.0))


def wave_function_derivative(p0: float, gamma: float, p: float, rho: float) -> float:
    """Derivative d(psi)/d(p0), branching on the same predicate as `wave_function`."""
    if is_shock(p0, p):
        A = constant_a(gamma, rho)
        B = constant_b(gamma, p)
        return float(np.sqrt(A / (B + p0)) * (1.0 - (p0 - p) / (2.0 * (B + p0))))
    a = np.sqrt(gamma * p / rho)
    return float(1.0 / (rho * a) * (p0 / p)**(-(gamma + 1.0) / (2.0 * gamma)))


def pressure_function(p0: float, left: GasState, right: GasState) -> float:
    """Phi(p0); strictly increasing, its positive root is the star pressure."""
    return (wave_function(p0, left.gamma, left.p, left.rho)
            + wave_function(p0, right.gamma, right.p, right.rho)
            + (right.u - left.u))


def pressure_function_derivative(p0: float, left: GasState, right: GasState) -> float:
    """d(Phi)/d(p0)."""
    return (wave_function_derivative(p0, left.gamma, left.p, left.rho)
            + wave_function_derivative(p0, right.gamma, right.p, right.rho))
