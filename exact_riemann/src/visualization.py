"""
Plotting of exact Riemann solution profiles.
"""

import logging
import numpy as np
import matplotlib.pyplot as plt

from .solution import RiemannSolution

logger = logging.getLogger(__name__)


def plot_solution(solution: RiemannSolution, t: float, x: np.ndarray = None,
                  x0: float = 0.5, title: str = None, filename: str = None):
    """
    Plot density, velocity, pressure and internal energy at time t.

    Args:
        solution: Solved Riemann problem
        t: Sampling time
        x: Sampling positions (default: 1000 points on [0, 1])
        x0: Position of the initial discontinuity
        title: Figure title
        filename: Save the figure to this path if given

    Returns:
        The matplotlib figure
    """
    if x is None:
        x = np.linspace(0.0, 1.0, 1000)
    x = np.asarray(x, dtype=float)

    rho, u, p = solution.sample(x, t, x0=x0)
    # Each side keeps its own gamma across the contact
    gamma = np.where(x < x0 + solution.u_star * t, solution.left.gamma, solution.right.gamma)
    e = p / ((gamma - 1) * rho)

    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    if title is None:
        title = f'Exact Riemann solution: t = {t:.4g}'
    fig.suptitle(title, fontsize=14, fontweight='bold')

    panels = [
        (axes[0, 0], rho, 'Density', 'b-'),
        (axes[0, 1], u, 'Velocity', 'r-'),
        (axes[1, 0], p, 'Pressure', 'g-'),
        (axes[1, 1], e, 'Specific Internal Energy', 'm-'),
    ]

    positions = solution.wave_positions(t, x0=x0) if t > 0 else {}

    for ax, values, name, style in panels:
        ax.plot(x, values, style, linewidth=2)
        for xw in positions.values():
            ax.axvline(x=xw, color='gray', linestyle=':', alpha=0.5)
        ax.set_xlabel('x')
        ax.set_ylabel(name)
        ax.set_title(name)
        ax.grid(True, alpha=0.3)
        ax.set_xlim([x[0], x[-1]])

    plt.tight_layout()

    if filename:
        plt.savefig(filename, dpi=150, bbox_inches='tight')
        logger.info("Saved plot to %s", filename)

    return fig
