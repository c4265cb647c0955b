"""
Black-Scholes option pricing model for European options.

This module implements the closed-form Black-Scholes formula without
dividends. Call and put are always produced together from one d1/d2
evaluation so the pair satisfies put-call parity.

Mathematical Background:
    The Black-Scholes formula prices European options under assumptions:
    - Log-normal asset price distribution
    - Constant volatility and interest rate
    - No transaction costs or taxes
    - Continuous trading possible

References:
    Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
    Journal of Political Economy, 81(3), 637-654.
"""

import math

from impliedvol.core.distributions import normal_cdf
from impliedvol.utils.types import OptionType, PriceResult


def _validate_inputs(spot: float, strike: float) -> None:
    """
    Validate option pricing inputs.

    Time and volatility are not checked: non-positive values select the
    intrinsic-value branch, which secant iterates below zero may reach.

    Raises:
        ValueError: If spot or strike is not positive
    """
    if spot <= 0:
        raise ValueError(f"Spot price must be positive, got spot={spot}")
    if strike <= 0:
        raise ValueError(f"Strike price must be positive, got strike={strike}")


def d1(spot: float, strike: float, time: float, rate: float, sigma: float) -> float:
    """
    Calculate d1 parameter in Black-Scholes formula.

    Args:
        spot: Current spot price
        strike: Strike price
        time: Time to expiration in years (must be > 0)
        rate: Risk-free interest rate (annualized, continuous)
        sigma: Volatility (annualized standard deviation, must be > 0)

    Returns:
        The d1 parameter

    Formula:
        d1 = [ln(S/K) + (r + σ²/2)T] / (σ√T)

    Notes:
        Uses log-space arithmetic (log(S) - log(K)) to prevent overflow
        for extreme values of S/K.
    """
    log_moneyness = math.log(spot) - math.log(strike)
    drift = (rate + 0.5 * sigma * sigma) * time
    diffusion = sigma * math.sqrt(time)

    return (log_moneyness + drift) / diffusion


def d2(spot: float, strike: float, time: float, rate: float, sigma: float) -> float:
    """
    Calculate d2 = d1 - σ√T.

    For a call, N(d2) is the risk-neutral probability of exercise.
    """
    return d1(spot, strike, time, rate, sigma) - sigma * math.sqrt(time)


def intrinsic_value(spot: float, strike: float) -> PriceResult:
    """Immediate-exercise payoff of the call and the put."""
    return PriceResult(call=max(spot - strike, 0.0), put=max(strike - spot, 0.0))


def black_scholes(
    spot: float, strike: float, time: float, rate: float, sigma: float
) -> PriceResult:
    """
    Calculate European call and put prices using the Black-Scholes formula.

    Args:
        spot: Current spot price
        strike: Strike price
        time: Time to expiration in years
        rate: Risk-free interest rate (annualized, continuous)
        sigma: Volatility (annualized standard deviation)

    Returns:
        PriceResult(call, put)

    Formula:
        C = S·N(d1) - K·e^(-rT)·N(d2)
        P = K·e^(-rT)·N(-d2) - S·N(-d1)

    Examples:
        >>> call, put = black_scholes(100, 100, 1.0, 0.05, 0.20)
        >>> abs(call - 10.4506) < 0.01 and abs(put - 5.5735) < 0.01
        True

    Edge Cases:
        - T <= 0 or σ <= 0: Returns max(S - K, 0) and max(K - S, 0)
          exactly, whatever the rate
    """
    _validate_inputs(spot, strike)

    # No time value or no volatility: nothing but the payoff is left
    if time <= 0 or sigma <= 0:
        return intrinsic_value(spot, strike)

    d1_value = d1(spot, strike, time, rate, sigma)
    d2_value = d1_value - sigma * math.sqrt(time)

    discount_strike = strike * math.exp(-rate * time)

    call = spot * normal_cdf(d1_value) - discount_strike * normal_cdf(d2_value)
    put = discount_strike * normal_cdf(-d2_value) - spot * normal_cdf(-d1_value)

    return PriceResult(call=call, put=put)


def black_scholes_call(
    spot: float, strike: float, time: float, rate: float, sigma: float
) -> float:
    """European call price; see black_scholes()."""
    return black_scholes(spot, strike, time, rate, sigma).call


def black_scholes_put(
    spot: float, strike: float, time: float, rate: float, sigma: float
) -> float:
    """European put price; see black_scholes()."""
    return black_scholes(spot, strike, time, rate, sigma).put


def black_scholes_price(
    spot: float,
    strike: float,
    time: float,
    rate: float,
    sigma: float,
    option_type: OptionType = "call",
) -> float:
    """
    Calculate European option price (call or put).

    Raises:
        ValueError: If option_type is not "call" or "put"
    """
    if option_type == "call":
        return black_scholes_call(spot, strike, time, rate, sigma)
    elif option_type == "put":
        return black_scholes_put(spot, strike, time, rate, sigma)
    else:
        raise ValueError(f"option_type must be 'call' or 'put', got '{option_type}'")
