"""
Star region of the exact Riemann solver: pressure, velocity and the
post-wave densities either side of the contact surface.

The star pressure is found by bracketing the root of the pressure function
from its sign at the two initial pressures and then iterating inside the
bracket. Because the pressure function is monotone increasing, the sign
pattern at min(p_L, p_R) and max(p_L, p_R) decides the bracket directly:

    Phi(p_min) > 0, Phi(p_max) > 0   ->  [p_floor, p_min]
    Phi(p_min) <= 0 <= Phi(p_max)    ->  [p_min, p_max]
    Phi(p_min) < 0, Phi(p_max) < 0   ->  [p_max, p_ceiling]

The floor is kept below p_min and the ceiling above p_max, and either one
is moved outwards by BRACKET_GROWTH_FACTOR until Phi changes sign across the
bracket.

Failure to converge is not an error: a warning is logged and the midpoint of
the last bracket is returned.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple

from .exceptions import PhysicalStateError, RiemannSolverError, VacuumStateError
from .gas import GasState, as_precision, check_precision
from .shock_relations import density_ratio_across_moving_shock
from .wave_functions import (
    is_shock, wave_function, pressure_function, pressure_function_derivative,
)

logger = logging.getLogger(__name__)

ROOT_FINDING_METHODS = ('bisection', 'newton')
# Factor by which the floor or ceiling moves until Phi changes sign
BRACKET_GROWTH_FACTOR = 10.0


@dataclass
class RootFinderConfig:
    """Configuration for the star pressure root finder."""
    tol: float = 1e-10          # Absolute tolerance on |Phi(p*)|
    max_iter: int = 100
    p_floor: float = 1e-10      # Lower bracket when p* < min(p_L, p_R)
    p_ceiling: float = 1e10     # Upper bracket when p* > max(p_L, p_R)
    method: str = 'bisection'   # Options: 'bisection', 'newton'

    def __post_init__(self):
        if self.method not in ROOT_FINDING_METHODS:
            raise ValueError(f"Unknown root finding method: {self.method}. "
                             "Options: 'bisection', 'newton'")
        if self.tol <= 0:
            raise ValueError(f"tol must be positive, got {self.tol}")
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be at least 1, got {self.max_iter}")
        if not 0 < self.p_floor < self.p_ceiling:
            raise ValueError("Require 0 < p_floor < p_ceiling")


@dataclass(frozen=True)
class StarPressureResult:
    """Outcome of the star pressure iteration."""
    p_star: float
    converged: bool
    iterations: int
    residual: float                 # |Phi| at the last iterate
    bracket: Tuple[float, float]    # Final (lower, upper) bracket


@dataclass(frozen=True)
class StarState:
    """Pressure and velocity in the star region."""
    p_star: float
    u_star: float


def check_pressure_positivity(left: GasState, right: GasState):
    """
    Raise VacuumStateError when the initial states generate vacuum.

    A positive star pressure exists only if
    2 a_L / (gamma_L - 1) + 2 a_R / (gamma_R - 1) > u_R - u_L.
    """
    critical_du = 2.0 * left.a / (left.gamma - 1.0) + 2.0 * right.a / (right.gamma - 1.0)
    du = right.u - left.u
    if critical_du <= du:
        raise VacuumStateError(
            f"Initial states generate vacuum: u_R - u_L = {du:.6g} "
            f">= critical velocity difference {critical_du:.6g}")


def select_bracket(left: GasState, right: GasState,
                   config: RootFinderConfig) -> Tuple[float, float]:
    """Choose the initial (lower, upper) bracket from the sign of Phi at the initial pressures."""
    p_min = min(left.p, right.p)
    p_max = max(left.p, right.p)

    f_min = pressure_function(p_min, left, right)
    f_max = pressure_function(p_max, left, right)

    if f_min > 0.0 and f_max > 0.0:
        # Two rarefactions
        lower = min(config.p_floor, 0.5 * p_min)
        while pressure_function(lower, left, right) > 0.0:
            lower /= BRACKET_GROWTH_FACTOR
            if lower < np.finfo(float).tiny:
                raise RiemannSolverError(
                    f"No lower bracket for the star pressure below p_min = {p_min:.6e}")
        return lower, p_min
    if f_min <= 0.0 and f_max >= 0.0:
        return p_min, p_max
    # Two shocks
    upper = max(config.p_ceiling, 2.0 * p_max)
    while pressure_function(upper, left, right) < 0.0:
        upper *= BRACKET_GROWTH_FACTOR
        if not np.isfinite(upper):
            raise RiemannSolverError(
                f"No upper bracket for the star pressure above p_max = {p_max:.6e}")
    return p_max, upper


def _next_trial_pressure(p0: float, f0: float, p_lo: float, p_hi: float,
                         left: GasState, right: GasState, method: str) -> float:
    midpoint = 0.5 * (p_lo + p_hi)
    if method == 'bisection':
        return midpoint

    # Newton step, falling back to bisection when it leaves the bracket
    df0 = pressure_function_derivative(p0, left, right)
    if df0 <= 0.0 or not np.isfinite(df0):
        return midpoint
    p_new = p0 - f0 / df0
    if not p_lo < p_new < p_hi:
        return midpoint
    return p_new


def solve_star_pressure(left: GasState, right: GasState,
                        config: Optional[RootFinderConfig] = None) -> StarPressureResult:
    """
    Find the star region pressure.

    Args:
        left: State left of the discontinuity
        right: State right of the discontinuity
        config: Root finder configuration

    Returns:
        StarPressureResult. If the iteration cap is reached, `converged` is
        False and `p_star` is the midpoint of the final bracket.

    Raises:
        VacuumStateError: If no positive star pressure exists.
    """
    config = config if config is not None else RootFinderConfig()
    check_pressure_positivity(left, right)

    p_lo, p_hi = select_bracket(left, right, config)
    logger.debug("Star pressure bracket [%.6e, %.6e]", p_lo, p_hi)

    p0 = 0.5 * (p_lo + p_hi)
    residual = np.inf
    converged = False
    iteration = 0

    while True:
        if iteration >= config.max_iter:
            logger.warning("Failed to converge after %d iterations in star pressure "
                           "(p_lo: %.10e p_hi: %.10e residual: %.4e)",
                           iteration, p_lo, p_hi, residual)
            break
        iteration += 1

        f0 = pressure_function(p0, left, right)
        # Root lies left of p0 when Phi(p0) > 0
        if f0 > 0.0:
            p_hi = p0
        else:
            p_lo = p0
        residual = abs(f0)

        if residual < config.tol:
            p_lo = p_hi = p0
            converged = True
            break

        p0 = _next_trial_pressure(p0, f0, p_lo, p_hi, left, right, config.method)

    if converged:
        logger.debug("Star pressure converged in %d iterations (%s)", iteration, config.method)

    return StarPressureResult(
        p_star=0.5 * (p_lo + p_hi),
        converged=converged,
        iterations=iteration,
        residual=residual,
        bracket=(p_lo, p_hi),
    )


def star_pressure(gamma_l: float, p_l: float, rho_l: float, u_l: float,
                  gamma_r: float, p_r: float, rho_r: float, u_r: float,
                  config: Optional[RootFinderConfig] = None) -> float:
    """
    Star region pressure p* for the given left and right states.

    Arithmetic runs in double precision. The result is returned in the numpy
    floating type of the arguments when one is used, otherwise as a float.
    """
    precision = check_precision(gamma_l, p_l, rho_l, u_l, gamma_r, p_r, rho_r, u_r)
    left = GasState(gamma_l, p_l, rho_l, u_l)
    right = GasState(gamma_r, p_r, rho_r, u_r)
    return as_precision(solve_star_pressure(left, right, config).p_star, precision)


def _check_star_pressure(p_star: float):
    if not (np.isfinite(p_star) and p_star > 0.0):
        raise PhysicalStateError(f"Star pressure must be positive and finite, got {p_star!r}")


def contact_velocity(p_star: float, left: GasState, right: GasState) -> float:
    """Star region velocity for a known star pressure."""
    _check_star_pressure(p_star)
    return (0.5 * (left.u + right.u)
            + 0.5 * (wave_function(p_star, right.gamma, right.p, right.rho)
                     - wave_function(p_star, left.gamma, left.p, left.rho)))


def star_velocity(p_star: float,
                  gamma_l: float, p_l: float, rho_l: float, u_l: float,
                  gamma_r: float, p_r: float, rho_r: float, u_r: float) -> float:
    """
    Star region (contact surface) velocity.

    u* = (u_L + u_R) / 2 + (psi_R(p*) - psi_L(p*)) / 2

    Returned in the precision of the arguments, as for `star_pressure`.
    """
    precision = check_precision(p_star, gamma_l, p_l, rho_l, u_l, gamma_r, p_r, rho_r, u_r)
    left = GasState(gamma_l, p_l, rho_l, u_l)
    right = GasState(gamma_r, p_r, rho_r, u_r)
    return as_precision(contact_velocity(float(p_star), left, right), precision)


def solve_star_velocity(gamma_l: float, p_l: float, rho_l: float, u_l: float,
                        gamma_r: float, p_r: float, rho_r: float, u_r: float,
                        config: Optional[RootFinderConfig] = None) -> float:
    """
    Star region velocity, computing the star pressure first.

    Convenience only: the root finding is repeated on every call. When both
    p* and u* are needed, call `star_pressure` once and pass the result to
    `star_velocity`.
    """
    p_star = star_pressure(gamma_l, p_l, rho_l, u_l, gamma_r, p_r, rho_r, u_r, config)
    return star_velocity(p_star, gamma_l, p_l, rho_l, u_l, gamma_r, p_r, rho_r, u_r)


def star_density(p_star: float, state: GasState) -> float:
    """Density between the wave emitted into `state` and the contact surface."""
    _check_star_pressure(p_star)
    if is_shock(p_star, state.p):
        return state.rho * density_ratio_across_moving_shock(state.gamma, p_star / state.p)
    return state.rho * (p_star / state.p)**(1.0 / state.gamma)


def edge_density(p_star: float, gamma: float, p: float, rho: float, u: float) -> float:
    """
    Density on one side after the passage of the emitted wave.

    Args:
        p_star: Star region pressure
        gamma: Ratio of specific heats of the side
        p: Initial pressure of the side
        rho: Initial density of the side
        u: Initial velocity of the side (unused)

    Returns:
        rho * (rho_behind / rho_ahead) from the shock relations when
        p_star > p, otherwise the isentropic rho * (p_star / p)^(1 / gamma),
        in the precision of the arguments.
    """
    precision = check_precision(p_star, gamma, p, rho, u)
    return as_precision(star_density(float(p_star), GasState(gamma, p, rho, u)), precision)
