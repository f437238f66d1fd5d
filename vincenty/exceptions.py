"""Exceptions raised by the inverse solver"""

__all__ = ['ConvergenceError']


class ConvergenceError(ArithmeticError):
    """
    Raised when the iteration on lambda does not settle below the requested tolerance
    within the permitted number of iterations.

    This is an expected outcome for nearly antipodal points, where Vincenty's formulae are
    known not to converge. Callers may retry with a looser tolerance or more iterations, or
    fall back to a different algorithm.

    Attributes:
        max_iter:
            The iteration cap that was exhausted

        tol:
            The requested tolerance

        eps:
            The residual |lambda_new - lambda_old| reached on the final iteration
    """

    def __init__(self, max_iter: int, tol: float, eps: float):
        self.max_iter = max_iter
        self.tol = tol
        self.eps = eps
        super().__init__(
            f'Failed to converge within {max_iter} iterations '
            f'(tol={tol!r}, eps={eps!r})'
        )

    def __reduce__(self):
        return self.__class__, (self.max_iter, self.tol, self.eps)
