"""
Reference Riemann problems from Toro, "Riemann Solvers and Numerical Methods
for Fluid Dynamics", Tables 4.1 (initial data) and 4.3 (exact star values).

1. Sod's shock tube: left rarefaction, contact, right shock
2. 123 problem: two strong rarefactions, near-vacuum star region
3. Left half of Woodward-Colella blast wave: left rarefaction, strong right shock
4. Right half of Woodward-Colella blast wave: left shock, right rarefaction
5. Collision of the shocks from tests 3 and 4: two shocks

Tolerances follow the number of digits tabulated. Where a tabulated value
cannot be reproduced from the tabulated p* to its last digit, that digit is
dropped (u* of test 5, edge densities of test 2).
"""

from dataclasses import dataclass
from typing import List

from exact_riemann import GasState, RootFinderConfig, RiemannSolution, solve


@dataclass(frozen=True)
class ToroCase:
    name: str
    left: GasState
    right: GasState
    p_star: float
    p_star_tol: float
    u_star: float
    u_star_tol: float
    rho_star_l: float
    rho_star_l_tol: float
    rho_star_r: float
    rho_star_r_tol: float
    t_end: float
    x0: float = 0.5


TORO_CASES: List[ToroCase] = [
    ToroCase('sod',
             GasState(1.4, 1.0, 1.0, 0.0), GasState(1.4, 0.1, 0.125, 0.0),
             0.30313, 1e-5, 0.92745, 1e-5, 0.42632, 1e-5, 0.26557, 1e-5,
             t_end=0.25),
    ToroCase('123',
             GasState(1.4, 0.4, 1.0, -2.0), GasState(1.4, 0.4, 1.0, 2.0),
             0.00189, 1e-5, 0.0, 1e-5, 0.0218, 1e-4, 0.0218, 1e-4,
             t_end=0.15),
    ToroCase('blast_left',
             GasState(1.4, 1000.0, 1.0, 0.0), GasState(1.4, 0.01, 1.0, 0.0),
             460.894, 1e-3, 19.5975, 1e-4, 0.57506, 1e-5, 5.99924, 1e-5,
             t_end=0.012),
    ToroCase('blast_right',
             GasState(1.4, 0.01, 1.0, 0.0), GasState(1.4, 100.0, 1.0, 0.0),
             46.0950, 1e-4, -6.19633, 1e-5, 5.99242, 1e-5, 0.57511, 1e-5,
             t_end=0.035),
    ToroCase('shock_collision',
             GasState(1.4, 460.894, 5.99924, 19.5975), GasState(1.4, 46.095, 5.99242, -6.19633),
             1691.64, 1e-2, 8.6897, 1e-4, 14.2823, 1e-4, 31.0426, 1e-4,
             t_end=0.035, x0=0.4),
]


def get_case(name: str) -> ToroCase:
    for case in TORO_CASES:
        if case.name == name:
            return case
    raise KeyError(f"Unknown Toro case: {name}")


def run_toro_tests(config: RootFinderConfig = None) -> List[RiemannSolution]:
    """
    Solve every reference problem and print the star region values.

    Returns:
        Solutions in the order of TORO_CASES
    """
    print("\n" + "=" * 80)
    print("EXACT RIEMANN SOLVER - TORO TEST SUITE")
    print("=" * 80)
    print(f"{'case':<16} {'p*':>14} {'u*':>12} {'rho*_L':>10} {'rho*_R':>10} "
          f"{'iter':>5} {'converged':>10}")

    solutions = []
    for case in TORO_CASES:
        solution = solve(case.left, case.right, config)
        solutions.append(solution)
        print(f"{case.name:<16} {solution.p_star:14.6f} {solution.u_star:12.6f} "
              f"{solution.rho_star_l:10.6f} {solution.rho_star_r:10.6f} "
              f"{solution.root.iterations:5d} {str(solution.root.converged):>10}")

    return solutions
