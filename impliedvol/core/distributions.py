"""
Standard normal distribution with numerical safeguards.

The Black-Scholes formula weights payoffs by the standard normal CDF. This
module wraps scipy's implementation and clamps the far tails.
"""

from scipy.stats import norm

from impliedvol.utils.constants import MAX_STANDARD_DEVIATIONS


def normal_cdf(x: float) -> float:
    """
    Standard normal cumulative distribution function with bounds clamping.

    For |x| > 8, the CDF is effectively 0 (x < -8) or 1 (x > 8) due to
    floating point precision limits. We clamp to these values to prevent
    underflow and improve numerical stability.

    Args:
        x: Value at which to evaluate the CDF

    Returns:
        Probability that a standard normal random variable is less than x

    Examples:
        >>> normal_cdf(0.0)  # Median
        0.5
        >>> normal_cdf(10.0)  # Deep in tail
        1.0
    """
    if x > MAX_STANDARD_DEVIATIONS:
        return 1.0
    if x < -MAX_STANDARD_DEVIATIONS:
        return 0.0

    return float(norm.cdf(x))
