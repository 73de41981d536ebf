"""
Exact Riemann Solver Package
============================

Exact solution of the 1D Riemann problem for the compressible Euler
equations of a calorically perfect gas (Toro, Ch. 4).

Features:
- Star region pressure by sign-pattern bracketing and bisection
  (optional bracketed Newton iteration)
- Star region velocity and post-wave densities
- Rankine-Hugoniot shock relations
- Vacuum detection
- Self-similar sampling of the full wave structure

State representation (primitive variables):
    gamma - ratio of specific heats
    p     - pressure
    rho   - density
    u     - velocity

Example:
    p_star = star_pressure(1.4, 1.0, 1.0, 0.0, 1.4, 0.1, 0.125, 0.0)
    u_star = star_velocity(p_star, 1.4, 1.0, 1.0, 0.0, 1.4, 0.1, 0.125, 0.0)
    rho_l = edge_density(p_star, 1.4, 1.0, 1.0, 0.0)

    # Or solve the whole problem at once
    solution = solve(GasState(1.4, 1.0, 1.0), GasState(1.4, 0.1, 0.125))
    rho, u, p = solution.sample(x, t=0.25)
"""

from .exceptions import RiemannSolverError, PhysicalStateError, VacuumStateError
from .gas import GasState
from .shock_relations import density_ratio_across_moving_shock, shock_mach_number
from .wave_functions import (
    WaveKind, is_shock, wave_kind, constant_a, constant_b,
    wave_function, wave_function_derivative,
    pressure_function, pressure_function_derivative,
)
from .star_region import (
    RootFinderConfig, StarPressureResult, StarState,
    solve_star_pressure, star_pressure, star_velocity, solve_star_velocity,
    edge_density,
)
from .solution import RiemannSolution, WaveSpeeds, solve
from .visualization import plot_solution

__all__ = [
    # Errors
    'RiemannSolverError',
    'PhysicalStateError',
    'VacuumStateError',

    # Gas state
    'GasState',

    # Shock relations
    'density_ratio_across_moving_shock',
    'shock_mach_number',

    # Pressure functions
    'WaveKind',
    'is_shock',
    'wave_kind',
    'constant_a',
    'constant_b',
    'wave_function',
    'wave_function_derivative',
    'pressure_function',
    'pressure_function_derivative',

    # Star region
    'RootFinderConfig',
    'StarPressureResult',
    'StarState',
    'solve_star_pressure',
    'star_pressure',
    'star_velocity',
    'solve_star_velocity',
    'edge_density',

    # Full solution
    'RiemannSolution',
    'WaveSpeeds',
    'solve',
    'plot_solution',
]

__version__ = '1.0.0'
