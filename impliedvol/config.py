from __future__ import annotations

import math
from dataclasses import dataclass, replace

from impliedvol.utils.constants import (
    IV_INITIAL_GUESS_HIGH,
    IV_INITIAL_GUESS_LOW,
    IV_MAX_ITERATIONS,
    IV_PRICE_TOLERANCE,
    IV_VOL_TOLERANCE,
)


@dataclass(frozen=True)
class SolverConfig:
    """Numerics used by the implied volatility solver.

    Defaults reproduce the standard behaviour: secant started from 10% and
    30% volatility, 1e-6 tolerances on sigma and on price, 50 iterations.
    """

    initial_guesses: tuple[float, float] = (IV_INITIAL_GUESS_LOW, IV_INITIAL_GUESS_HIGH)
    xtol: float = IV_VOL_TOLERANCE
    ftol: float = IV_PRICE_TOLERANCE
    max_iterations: int = IV_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if len(self.initial_guesses) != 2:
            raise ValueError("initial_guesses must hold exactly two values")
        x0, x1 = self.initial_guesses
        if not (math.isfinite(x0) and math.isfinite(x1)):
            raise ValueError("initial_guesses must be finite")
        if x0 == x1:
            raise ValueError("initial_guesses must be distinct")
        if self.xtol < 0 or self.ftol < 0:
            raise ValueError("xtol and ftol must be >= 0")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")

    def replace(self, **changes) -> SolverConfig:
        return replace(self, **changes)


DEFAULT_SOLVER_CONFIG = SolverConfig()
