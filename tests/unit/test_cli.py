"""Unit tests for the command-line interface."""

from click.testing import CliRunner

from impliedvol.core.black_scholes import black_scholes_call
from interfaces.cli import cli

MARKET_ARGS = ["-S", "100", "-K", "100", "-T", "1", "-r", "0.05"]


def test_price_command():
    """price prints both legs and the parity gap."""
    runner = CliRunner()
    result = runner.invoke(cli, ["price", *MARKET_ARGS, "--vol", "0.2"])

    assert result.exit_code == 0
    assert "Call Option Price: $10.45" in result.output
    assert "Put Option Price:  $5.57" in result.output
    assert "Put-call parity gap" in result.output


def test_price_command_invalid_spot():
    """Non-positive spot is reported as an error."""
    runner = CliRunner()
    result = runner.invoke(cli, ["price", "-S", "0", "-K", "100", "-T", "1", "-r", "0.05", "--vol", "0.2"])

    assert result.exit_code == 1
    assert "Spot price must be positive" in result.output


def test_iv_command_roundtrip():
    """iv recovers the volatility used to generate the price."""
    market_price = black_scholes_call(100.0, 100.0, 1.0, 0.05, 0.2)
    runner = CliRunner()
    result = runner.invoke(cli, ["iv", "-p", repr(market_price), *MARKET_ARGS])

    assert result.exit_code == 0
    assert "Implied Volatility: 0.2000 (20.00%)" in result.output
    assert "Convergence: reached-" in result.output


def test_iv_command_stagnation():
    """A flat residual is reported as numerically unstable."""
    runner = CliRunner()
    result = runner.invoke(
        cli, ["iv", "-p", "1.0", "-S", "50", "-K", "100", "-T", "0.01", "-r", "0.05"]
    )

    assert result.exit_code == 1
    assert "numerically unstable" in result.output


def test_iv_command_max_iterations():
    """An exhausted iteration cap is reported as non-convergence."""
    runner = CliRunner()
    result = runner.invoke(cli, ["iv", "-p", "10.4506", *MARKET_ARGS, "--max-iter", "1"])

    assert result.exit_code == 1
    assert "did not converge in time" in result.output


def test_iv_command_invalid_config():
    """Identical starting guesses are rejected."""
    runner = CliRunner()
    result = runner.invoke(cli, ["iv", "-p", "10.0", *MARKET_ARGS, "--x0", "0.2", "--x1", "0.2"])

    assert result.exit_code == 1
    assert "initial_guesses must be distinct" in result.output
