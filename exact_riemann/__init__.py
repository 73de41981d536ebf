"""
Exact Riemann Solver
====================

Re-exports all public components from exact_riemann.src
"""

from exact_riemann.src import (
    # Errors
    RiemannSolverError,
    PhysicalStateError,
    VacuumStateError,
    # Gas state
    GasState,
    # Shock relations
    density_ratio_across_moving_shock,
    shock_mach_number,
    # Pressure functions
    WaveKind,
    is_shock,
    wave_kind,
    constant_a,
    constant_b,
    wave_function,
    wave_function_derivative,
    pressure_function,
    pressure_function_derivative,
    # Star region
    RootFinderConfig,
    StarPressureResult,
    StarState,
    solve_star_pressure,
    star_pressure,
    star_velocity,
    solve_star_velocity,
    edge_density,
    # Full solution
    RiemannSolution,
    WaveSpeeds,
    solve,
    plot_solution,
)
from exact_riemann.src import __version__

__all__ = [
    'RiemannSolverError',
    'PhysicalStateError',
    'VacuumStateError',
    'GasState',
    'density_ratio_across_moving_shock',
    'shock_mach_number',
    'WaveKind',
    'is_shock',
    'wave_kind',
    'constant_a',
    'constant_b',
    'wave_function',
    'wave_function_derivative',
    'pressure_function',
    'pressure_function_derivative',
    'RootFinderConfig',
    'StarPressureResult',
    'StarState',
    'solve_star_pressure',
    'star_pressure',
    'star_velocity',
    'solve_star_velocity',
    'edge_density',
    'RiemannSolution',
    'WaveSpeeds',
    'solve',
    'plot_solution',
]
