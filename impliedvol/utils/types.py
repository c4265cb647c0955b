"""
Data types and structures for the implied volatility engine.

This module defines the immutable value types passed between the pricer,
the root finder and the volatility solver.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, NamedTuple

OptionType = Literal["call", "put"]


class PriceResult(NamedTuple):
    """Call and put prices produced by one Black-Scholes evaluation."""

    call: float
    put: float


@dataclass(frozen=True)
class MarketParameters:
    """
    Immutable container for the free variables of the pricing formula.

    Attributes:
        spot: Current spot price of the underlying asset
        strike: Strike price
        time: Time to expiration in years
        rate: Risk-free interest rate (annualized, continuous compounding)
        sigma: Volatility (annualized standard deviation)
    """
    spot: float
    strike: float
    time: float
    rate: float
    sigma: float = 0.0

    def __post_init__(self) -> None:
        """Validate parameters are positive where required."""
        if self.spot <= 0:
            raise ValueError(f"Spot price must be positive, got spot={self.spot}")
        if self.strike <= 0:
            raise ValueError(f"Strike price must be positive, got strike={self.strike}")
        if self.time < 0:
            raise ValueError(f"Time to expiration must be non-negative, got time={self.time}")
        if self.sigma < 0:
            raise ValueError(f"Volatility must be non-negative, got sigma={self.sigma}")

    def prices(self) -> PriceResult:
        """Price both legs at the stored volatility."""
        from impliedvol.core.black_scholes import black_scholes

        return black_scholes(self.spot, self.strike, self.time, self.rate, self.sigma)


class ConvergenceReason(Enum):
    """Which stopping criterion ended a successful secant run."""

    X_TOLERANCE = "reached-x-tolerance"
    F_TOLERANCE = "reached-f-tolerance"


@dataclass(frozen=True)
class SecantResult:
    """
    Result of a converged secant iteration.

    Attributes:
        root: Estimated root
        iterations: Zero-based index of the iteration that converged
        convergence_reason: Criterion that triggered termination
    """
    root: float
    iterations: int
    convergence_reason: ConvergenceReason


@dataclass(frozen=True)
class ImpliedVolResult:
    """
    Result from the implied volatility solver.

    Attributes:
        volatility: Solved implied volatility (annualized)
        iterations: Zero-based secant iteration at which the solve converged
        convergence_reason: Criterion that ended the secant iteration
        option_type: Leg of the price pair that was inverted
        message: Additional information about convergence
    """
    volatility: float
    iterations: int
    convergence_reason: ConvergenceReason
    option_type: OptionType
    message: str = ""


@dataclass
class ParityCheck:
    """
    Result from a put-call parity validation.

    Attributes:
        is_valid: Whether C - P matches S - K·e^(-rT) within tolerance
        gap: Signed difference (C - P) - (S - K·e^(-rT))
        message: Human-readable description of a violation, empty if valid
    """
    is_valid: bool
    gap: float
    message: str = ""
