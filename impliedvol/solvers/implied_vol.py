"""
Implied volatility solver.

This module inverts the Black-Scholes formula: it builds the residual
σ ↦ price(σ) - market_price for the requested leg and drives it to zero
with the secant method.
"""

import logging
from typing import Callable, Optional

from impliedvol.config import DEFAULT_SOLVER_CONFIG, SolverConfig
from impliedvol.core.black_scholes import black_scholes
from impliedvol.solvers.secant import secant
from impliedvol.utils.types import ImpliedVolResult, OptionType

logger = logging.getLogger(__name__)


def _resolve_option_type(is_call: bool, option_type: Optional[OptionType]) -> OptionType:
    if option_type is None:
        return "call" if is_call else "put"
    if option_type not in ("call", "put"):
        raise ValueError(f"option_type must be 'call' or 'put', got '{option_type}'")
    return option_type


def make_residual(
    market_price: float,
    spot: float,
    strike: float,
    time: float,
    rate: float,
    option_type: OptionType,
) -> Callable[[float], float]:
    """
    Build the objective function BS(σ) - market_price for one leg.

    Only the requested leg of the call/put pair enters the residual.
    """
    if option_type == "call":

        def residual(sigma: float) -> float:
            return black_scholes(spot, strike, time, rate, sigma).call - market_price

    else:

        def residual(sigma: float) -> float:
            return black_scholes(spot, strike, time, rate, sigma).put - market_price

    return residual


def solve_implied_volatility(
    market_price: float,
    spot: float,
    strike: float,
    time: float,
    rate: float,
    is_call: bool = True,
    config: Optional[SolverConfig] = None,
    option_type: Optional[OptionType] = None,
) -> ImpliedVolResult:
    """
    Solve for implied volatility and report how the solve converged.

    Args:
        market_price: Observed market price of the option
        spot: Spot price
        strike: Strike price
        time: Time to expiration in years
        rate: Risk-free rate (annualized, continuous)
        is_call: True to invert the call price, False for the put
        config: Secant numerics; defaults to SolverConfig()
        option_type: "call" or "put"; overrides is_call when given

    Returns:
        ImpliedVolResult with volatility, iteration count and convergence reason

    Raises:
        StagnationError: If the residual is flat between consecutive iterates
        MaxIterationsExceededError: If the secant iteration cap is reached
        ValueError: If spot/strike is not positive or option_type is invalid

    Notes:
        The recovered volatility is not range-checked. A non-positive result
        is returned as-is and logged at WARNING level.
    """
    option_type = _resolve_option_type(is_call, option_type)
    if config is None:
        config = DEFAULT_SOLVER_CONFIG

    residual = make_residual(market_price, spot, strike, time, rate, option_type)
    x0, x1 = config.initial_guesses

    result = secant(
        residual,
        x0,
        x1,
        xtol=config.xtol,
        ftol=config.ftol,
        max_iter=config.max_iterations,
    )

    sigma = result.root
    if sigma <= 0:
        logger.warning(
            f"Recovered non-positive volatility {sigma:.6g} for {option_type} "
            f"price {market_price} (S={spot}, K={strike}, T={time}, r={rate})"
        )

    message = (
        f"Converged at iteration {result.iterations} "
        f"({result.convergence_reason.value})"
    )
    logger.debug(f"Implied {option_type} volatility {sigma:.8f}: {message}")

    return ImpliedVolResult(
        volatility=sigma,
        iterations=result.iterations,
        convergence_reason=result.convergence_reason,
        option_type=option_type,
        message=message,
    )


def implied_volatility(
    market_price: float,
    spot: float,
    strike: float,
    time: float,
    rate: float,
    is_call: bool = True,
    config: Optional[SolverConfig] = None,
    option_type: Optional[OptionType] = None,
) -> float:
    """
    Solve for the Black-Scholes volatility that reproduces market_price.

    This is the main entry point for implied volatility calculation.
    Solver failures propagate unchanged so callers can tell a numerically
    unstable problem (StagnationError) from a slow one
    (MaxIterationsExceededError).

    Examples:
        >>> from impliedvol.core.black_scholes import black_scholes_call
        >>> price = black_scholes_call(100, 100, 1.0, 0.05, 0.20)
        >>> round(implied_volatility(price, 100, 100, 1.0, 0.05, is_call=True), 4)
        0.2
    """
    return solve_implied_volatility(
        market_price,
        spot,
        strike,
        time,
        rate,
        is_call=is_call,
        config=config,
        option_type=option_type,
    ).volatility
