"""Exception types for the exact Riemann solver."""


class RiemannSolverError(RuntimeError):
    """Base class for errors raised by the exact Riemann solver."""


class PhysicalStateError(RiemannSolverError, ValueError):
    """Raised when a gas state or pressure ratio is not physical (gamma <= 1, p <= 0, rho <= 0)."""


class VacuumStateError(RiemannSolverError):
    """Raised when the initial states generate vacuum, so no positive star pressure exists."""
