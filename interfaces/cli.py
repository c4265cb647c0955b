"""
Command-line interface for the implied volatility engine.

This CLI provides access to:
- Option pricing (Black-Scholes call and put)
- Implied volatility solving (secant method)
"""

import logging
import sys

import click

from impliedvol.config import SolverConfig
from impliedvol.core.black_scholes import black_scholes
from impliedvol.diagnostics.parity import check_put_call_parity
from impliedvol.solvers.implied_vol import solve_implied_volatility
from impliedvol.solvers.secant import MaxIterationsExceededError, StagnationError
from impliedvol.utils.constants import (
    IV_INITIAL_GUESS_HIGH,
    IV_INITIAL_GUESS_LOW,
    IV_MAX_ITERATIONS,
    IV_PRICE_TOLERANCE,
    IV_VOL_TOLERANCE,
)


@click.group()
@click.version_option(version="0.1.0")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Implied Volatility Engine - Black-Scholes pricing and inversion."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )


@cli.command()
@click.option("--spot", "-S", type=float, required=True, help="Spot price")
@click.option("--strike", "-K", type=float, required=True, help="Strike price")
@click.option("--time", "-T", type=float, required=True, help="Time to expiry (years)")
@click.option("--rate", "-r", type=float, required=True, help="Risk-free rate")
@click.option("--vol", "-s", type=float, required=True, help="Volatility (annualized)")
def price(spot, strike, time, rate, vol):
    """Calculate call and put prices using Black-Scholes."""
    try:
        prices = black_scholes(spot, strike, time, rate, vol)
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    parity = check_put_call_parity(prices.call, prices.put, spot, strike, time, rate)

    click.echo(f"\nCall Option Price: ${prices.call:.4f}")
    click.echo(f"Put Option Price:  ${prices.put:.4f}")
    click.echo(f"Put-call parity gap: {parity.gap:.2e}")


@cli.command()
@click.option("--market-price", "-p", type=float, required=True, help="Market price")
@click.option("--spot", "-S", type=float, required=True, help="Spot price")
@click.option("--strike", "-K", type=float, required=True, help="Strike price")
@click.option("--time", "-T", type=float, required=True, help="Time to expiry (years)")
@click.option("--rate", "-r", type=float, required=True, help="Risk-free rate")
@click.option("--type", "-t", type=click.Choice(["call", "put"]), default="call")
@click.option("--x0", type=float, default=IV_INITIAL_GUESS_LOW, show_default=True, help="First volatility guess")
@click.option("--x1", type=float, default=IV_INITIAL_GUESS_HIGH, show_default=True, help="Second volatility guess")
@click.option("--xtol", type=float, default=IV_VOL_TOLERANCE, show_default=True, help="Volatility tolerance")
@click.option("--ftol", type=float, default=IV_PRICE_TOLERANCE, show_default=True, help="Price tolerance")
@click.option("--max-iter", type=int, default=IV_MAX_ITERATIONS, show_default=True, help="Iteration cap")
def iv(market_price, spot, strike, time, rate, type, x0, x1, xtol, ftol, max_iter):
    """Solve for implied volatility."""
    try:
        config = SolverConfig(
            initial_guesses=(x0, x1), xtol=xtol, ftol=ftol, max_iterations=max_iter
        )
        result = solve_implied_volatility(
            market_price, spot, strike, time, rate, config=config, option_type=type
        )
    except StagnationError as e:
        click.echo(f"\nCould not determine implied volatility - numerically unstable: {e}", err=True)
        sys.exit(1)
    except MaxIterationsExceededError as e:
        click.echo(f"\nCould not determine implied volatility - did not converge in time: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        sys.exit(1)

    click.echo(f"\nImplied Volatility: {result.volatility:.4f} ({result.volatility*100:.2f}%)")
    click.echo(f"Iterations: {result.iterations}")
    click.echo(f"Convergence: {result.convergence_reason.value}")


if __name__ == "__main__":
    cli()
