"""Convergence controls for the inverse solver"""

__all__ = ['SolverConfig']

from vincenty._const import DEFAULT_MAX_ITER, DEFAULT_TOL


class SolverConfig:
    """
    Controls when the iteration on lambda stops.

    Args:
        tol: (Default 1e-12)
            Convergence threshold on the change in lambda between iterations, in radians.
            Must be greater than 0.

        max_iter: (Default 200)
            The maximum number of iterations before giving up. Must be a positive integer.
    """

    def __init__(self, tol: float = DEFAULT_TOL, max_iter: int = DEFAULT_MAX_ITER):
        if not tol > 0:
            raise ValueError(f'tol {tol!r} must be greater than 0')

        if isinstance(max_iter, bool) or not isinstance(max_iter, int) or max_iter < 1:
            raise ValueError(f'max_iter {max_iter!r} must be a positive integer')

        self._tol = float(tol)
        self._max_iter = max_iter

    @property
    def tol(self) -> float:
        return self._tol

    @property
    def max_iter(self) -> int:
        return self._max_iter

    def __eq__(self, other):
        if not isinstance(other, SolverConfig):
            return False

        return self.tol == other.tol and self.max_iter == other.max_iter

    def __hash__(self):
        return hash((self.tol, self.max_iter))

    def __repr__(self):
        return f'<SolverConfig(tol={self.tol}, max_iter={self.max_iter})>'
