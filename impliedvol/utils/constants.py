"""
Numerical constants and default tolerances for the implied volatility engine.

These values define the out-of-the-box behaviour of the volatility solver.
Callers needing different numerics should build a SolverConfig instead of
editing them.
"""

# Normal distribution bounds
MAX_STANDARD_DEVIATIONS = 8.0  # Beyond ±8σ, CDF is effectively 0 or 1

# Implied volatility solver defaults
IV_INITIAL_GUESS_LOW = 0.1  # First secant estimate (10% vol)
IV_INITIAL_GUESS_HIGH = 0.3  # Second secant estimate (30% vol)
IV_VOL_TOLERANCE = 1e-6  # Stop when successive sigmas differ by less
IV_PRICE_TOLERANCE = 1e-6  # Stop when |model - market| is below this
IV_MAX_ITERATIONS = 50  # Secant iteration cap

# Diagnostics tolerances
PARITY_TOLERANCE = 1e-9  # Relative put-call parity tolerance
