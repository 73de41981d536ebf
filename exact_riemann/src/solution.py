"""
Complete exact solution of a Riemann problem.

The solution is self-similar in S = (x - x0) / t and consists of:
1. Left state (undisturbed)
2. Left wave (shock or rarefaction fan)
3. Left star state, up to the contact surface
4. Right star state
5. Right wave (shock or rarefaction fan)
6. Right state (undisturbed)
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .gas import GasState
from .shock_relations import shock_mach_number
from .star_region import (
    RootFinderConfig, StarPressureResult, StarState,
    solve_star_pressure, contact_velocity, star_density,
)
from .wave_functions import WaveKind, wave_kind


@dataclass(frozen=True)
class WaveSpeeds:
    """
    Speeds of the waves bounding the star region.

    For a shock, head and tail coincide with the shock speed.
    """
    left_head: float
    left_tail: float
    contact: float
    right_tail: float
    right_head: float


@dataclass(frozen=True)
class RiemannSolution:
    """Star state, post-wave densities and wave structure of one Riemann problem."""
    left: GasState
    right: GasState
    star: StarState
    rho_star_l: float
    rho_star_r: float
    left_wave: WaveKind
    right_wave: WaveKind
    speeds: WaveSpeeds
    root: StarPressureResult

    @property
    def p_star(self) -> float:
        return self.star.p_star

    @property
    def u_star(self) -> float:
        return self.star.u_star

    def sample(self, x, t: float, x0: float = 0.5) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Sample the exact solution at position(s) x and time t.

        Args:
            x: Position or array of positions
            t: Time; the initial condition is returned for t <= 0
            x0: Position of the initial discontinuity

        Returns:
            rho, u, p arrays with the shape of np.atleast_1d(x)
        """
        x = np.atleast_1d(np.asarray(x, dtype=float))

        if t <= 0:
            rho = np.where(x < x0, self.left.rho, self.right.rho)
            u = np.where(x < x0, self.left.u, self.right.u)
            p = np.where(x < x0, self.left.p, self.right.p)
            return rho, u, p

        S = (x - x0) / t
        rho = np.zeros_like(S)
        u = np.zeros_like(S)
        p = np.zeros_like(S)

        for i, s in enumerate(S):
            rho[i], u[i], p[i] = self._sample_point(s)

        return rho, u, p

    def _sample_point(self, S: float) -> Tuple[float, float, float]:
        """Sample at a single value of the similarity variable S."""
        if S < self.speeds.contact:
            return self._sample_side(S, self.left, self.rho_star_l, self.left_wave,
                                     self.speeds.left_head, self.speeds.left_tail, sign=-1.0)
        return self._sample_side(S, self.right, self.rho_star_r, self.right_wave,
                                 self.speeds.right_head, self.speeds.right_tail, sign=1.0)

    def _sample_side(self, S, state, rho_star, kind, head, tail, sign):
        # sign is -1 for the left-running wave and +1 for the right-running wave
        outside = sign * (S - head) >= 0.0
        if kind is WaveKind.SHOCK:
            if outside:
                return state.rho, state.u, state.p
            return rho_star, self.u_star, self.p_star

        if outside:
            return state.rho, state.u, state.p
        if sign * (S - tail) <= 0.0:
            return rho_star, self.u_star, self.p_star

        # Inside the rarefaction fan
        gamma = state.gamma
        g5 = 2 / (gamma + 1)
        g7 = (gamma - 1) / 2
        c = g5 * (state.a - sign * g7 * (state.u - S))
        u = g5 * (-sign * state.a + g7 * state.u + S)
        rho = state.rho * (c / state.a)**(2 / (gamma - 1))
        p = state.p * (c / state.a)**(2 * gamma / (gamma - 1))
        return rho, u, p

    def wave_positions(self, t: float, x0: float = 0.5) -> Dict[str, float]:
        """
        Positions of all waves at time t.

        Returns:
            dict with 'left_shock' or 'left_rarefaction_head'/'left_rarefaction_tail',
            'contact', and 'right_shock' or 'right_rarefaction_tail'/'right_rarefaction_head'
        """
        positions = {}

        if self.left_wave is WaveKind.SHOCK:
            positions['left_shock'] = x0 + self.speeds.left_head * t
        else:
            positions['left_rarefaction_head'] = x0 + self.speeds.left_head * t
            positions['left_rarefaction_tail'] = x0 + self.speeds.left_tail * t

        positions['contact'] = x0 + self.speeds.contact * t

        if self.right_wave is WaveKind.SHOCK:
            positions['right_shock'] = x0 + self.speeds.right_head * t
        else:
            positions['right_rarefaction_tail'] = x0 + self.speeds.right_tail * t
            positions['right_rarefaction_head'] = x0 + self.speeds.right_head * t

        return positions


def _wave_speeds(left: GasState, right: GasState, p_star: float, u_star: float) -> WaveSpeeds:
    if wave_kind(p_star, left.p) is WaveKind.SHOCK:
        left_head = left_tail = left.u - left.a * shock_mach_number(left.gamma, p_star / left.p)
    else:
        left_head = left.u - left.a
        left_tail = u_star - left.a * (p_star / left.p)**((left.gamma - 1) / (2 * left.gamma))

    if wave_kind(p_star, right.p) is WaveKind.SHOCK:
        right_head = right_tail = right.u + right.a * shock_mach_number(right.gamma, p_star / right.p)
    else:
        right_head = right.u + right.a
        right_tail = u_star + right.a * (p_star / right.p)**((right.gamma - 1) / (2 * right.gamma))

    return WaveSpeeds(left_head=left_head, left_tail=left_tail, contact=u_star,
                      right_tail=right_tail, right_head=right_head)


def solve(left: GasState, right: GasState,
          config: Optional[RootFinderConfig] = None) -> RiemannSolution:
    """
    Solve the Riemann problem between two states.

    The star pressure is found once and reused for every derived quantity.
    """
    root = solve_star_pressure(left, right, config)
    p_star = root.p_star
    u_star = contact_velocity(p_star, left, right)

    return RiemannSolution(
        left=left,
        right=right,
        star=StarState(p_star=p_star, u_star=u_star),
        rho_star_l=star_density(p_star, left),
        rho_star_r=star_density(p_star, right),
        left_wave=wave_kind(p_star, left.p),
        right_wave=wave_kind(p_star, right.p),
        speeds=_wave_speeds(left, right, p_star, u_star),
        root=root,
    )
