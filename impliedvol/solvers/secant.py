"""
Secant method for scalar root finding.

This module implements the textbook secant iteration, which approximates
the derivative with the slope through the two most recent iterates. It knows
nothing about option pricing: any callable float -> float can be solved.

Failures are raised as RootFindingError subclasses so callers can choose
their own retry or reporting policy.
"""

import logging
from typing import Callable

from impliedvol.utils.types import ConvergenceReason, SecantResult

logger = logging.getLogger(__name__)


class RootFindingError(Exception):
    """Base class for root-finding failures."""


class MaxIterationsExceededError(RootFindingError):
    """Raised when neither tolerance is met within max_iter iterations."""

    def __init__(self, max_iter: int, last_estimate: float) -> None:
        self.max_iter = max_iter
        self.last_estimate = last_estimate
        super().__init__(
            f"Secant method did not converge within {max_iter} iterations "
            f"(last estimate {last_estimate:.6g})"
        )


class StagnationError(RootFindingError):
    """
    Raised when f(x1) - f(x0) is within ftol of zero.

    The secant slope is then degenerate (flat residual, repeated root or two
    indistinguishable evaluations) and the update would divide by ~zero.
    """

    def __init__(self, iteration: int, x0: float, x1: float, f0: float, f1: float) -> None:
        self.iteration = iteration
        self.x0 = x0
        self.x1 = x1
        self.f0 = f0
        self.f1 = f1
        super().__init__(
            f"Secant slope degenerate at iteration {iteration}: "
            f"f({x0:.6g}) = {f0:.6g}, f({x1:.6g}) = {f1:.6g}"
        )


DivisionByZeroError = StagnationError


def secant(
    f: Callable[[float], float],
    x0: float,
    x1: float,
    xtol: float,
    ftol: float,
    max_iter: int,
) -> SecantResult:
    """
    Find a root of f using the secant method.

    The update is:
        x2 = x1 - f(x1) · (x1 - x0) / (f(x1) - f(x0))

    Each iteration checks, in this order:
        1. |f(x1)| <= ftol        → converged at x1 (F_TOLERANCE)
        2. |f(x1) - f(x0)| <= ftol → StagnationError
        3. |x2 - x1| <= xtol       → converged at x2 (X_TOLERANCE)

    The initial estimates need not bracket a sign change. There is no
    divergence guard other than max_iter.

    Args:
        f: Function whose root is sought
        x0, x1: Initial estimates
        xtol: Absolute tolerance on successive estimates (>= 0)
        ftol: Absolute tolerance on the function value (>= 0)
        max_iter: Maximum number of iterations (>= 1)

    Returns:
        SecantResult with root, zero-based iteration count and convergence reason

    Raises:
        StagnationError: If the secant slope becomes degenerate
        MaxIterationsExceededError: If max_iter iterations pass without convergence
        ValueError: If a tolerance is negative or max_iter < 1

    Examples:
        >>> result = secant(lambda x: x * x - 4.0, 1.0, 3.0, 1e-12, 1e-12, 50)
        >>> abs(result.root - 2.0) < 1e-9
        True
    """
    if xtol < 0 or ftol < 0:
        raise ValueError(f"Tolerances must be non-negative, got xtol={xtol}, ftol={ftol}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")

    for i in range(max_iter):
        f0 = f(x0)
        f1 = f(x1)

        if abs(f1) <= ftol:
            logger.debug(f"Secant converged on f tolerance at iteration {i}: x={x1:.10g}")
            return SecantResult(
                root=x1,
                iterations=i,
                convergence_reason=ConvergenceReason.F_TOLERANCE,
            )

        if abs(f1 - f0) <= ftol:
            logger.debug(f"Secant stagnated at iteration {i}: f0={f0:.6g}, f1={f1:.6g}")
            raise StagnationError(i, x0, x1, f0, f1)

        x2 = x1 - f1 * (x1 - x0) / (f1 - f0)

        if abs(x2 - x1) <= xtol:
            logger.debug(f"Secant converged on x tolerance at iteration {i}: x={x2:.10g}")
            return SecantResult(
                root=x2,
                iterations=i,
                convergence_reason=ConvergenceReason.X_TOLERANCE,
            )

        x0, x1 = x1, x2

    logger.debug(f"Secant exhausted {max_iter} iterations at x={x1:.10g}")
    raise MaxIterationsExceededError(max_iter, x1)
