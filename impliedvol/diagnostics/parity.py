"""
Put-call parity diagnostics.

Black-Scholes call and put prices computed from the same d1/d2 must satisfy
    C - P = S - K·e^(-rT)
This module checks that identity for any pair of prices.
"""

import math

from impliedvol.utils.constants import PARITY_TOLERANCE
from impliedvol.utils.types import ParityCheck


def parity_gap(
    call_price: float,
    put_price: float,
    spot: float,
    strike: float,
    time: float,
    rate: float,
) -> float:
    """Signed deviation (C - P) - (S - K·e^(-rT))."""
    return (call_price - put_price) - (spot - strike * math.exp(-rate * time))


def check_put_call_parity(
    call_price: float,
    put_price: float,
    spot: float,
    strike: float,
    time: float,
    rate: float,
    tolerance: float = PARITY_TOLERANCE,
) -> ParityCheck:
    """
    Validate put-call parity relationship.

    The tolerance is relative to the larger of spot and strike, which bound
    both option prices.

    Args:
        call_price, put_price: Option prices
        spot, strike, time, rate: Market parameters
        tolerance: Relative tolerance for the parity check

    Returns:
        ParityCheck with validation result and signed gap
    """
    gap = parity_gap(call_price, put_price, spot, strike, time, rate)
    is_valid = abs(gap) <= tolerance * max(spot, strike)

    message = ""
    if not is_valid:
        message = (
            f"Put-call parity violated: C - P = {call_price - put_price:.6f}, "
            f"S - K·e^(-rT) = {spot - strike * math.exp(-rate * time):.6f}, "
            f"gap = {gap:.2e}"
        )

    return ParityCheck(is_valid=is_valid, gap=gap, message=message)
