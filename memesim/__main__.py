#!/usr/bin/env python3
"""
Headless market runner.

Runs the simulator for a fixed number of ticks without a renderer, logging
one line per tick. Useful for eyeballing the price model and the ledger.
"""

import argparse
import asyncio
import sys

from loguru import logger

from memesim.core.constants import STARTING_BALANCE, TICK_INTERVAL_MS
from memesim.core.exceptions.market import ConfigurationError
from memesim.core.models.config import SimulationConfig
from memesim.core.models.events import ShockEvent
from memesim.core.models.market import MarketSimulator
from memesim.core.models.snapshot import MarketSnapshot
from memesim.core.types.financial import format_price, format_usd
from memesim.infrastructure.history_frame import history_summary
from memesim.infrastructure.scheduler import TickScheduler


class ShockLogger:
    """Observer that logs shock events as warnings."""

    def notify(self, event: ShockEvent) -> None:
        logger.warning(f"SHOCK ({event.reason.value}): {format_usd(event.magnitude)}")


def setup_logging(debug: bool = False) -> None:
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def format_snapshot(snapshot: MarketSnapshot) -> str:
    """Render one snapshot as a single log line."""
    prices = "  ".join(
        f"{asset.ticker} {format_price(asset.price)} ({asset.percent_change:+.2f}%)"
        for asset in snapshot.assets
    )
    return (
        f"tick {snapshot.tick:>4} | {prices} | cash {format_usd(snapshot.cash_balance)}"
        f" | value {format_usd(snapshot.portfolio_value)}"
        f" | lost {format_usd(snapshot.unrealized_loss)} [{snapshot.rekt_level.label}]"
    )


async def run(args: argparse.Namespace) -> int:
    config = SimulationConfig(
        starting_balance=args.balance,
        tick_interval_ms=args.interval_ms,
        seed=args.seed,
    )
    simulator = MarketSimulator(config)
    shock_logger = ShockLogger()
    simulator.add_observer(shock_logger)

    if args.buy:
        asset_id, amount = args.buy
        if not simulator.buy(asset_id, amount):
            logger.error(f"Opening buy rejected: {asset_id} {amount}")

    scheduler = TickScheduler(simulator, config.tick_interval_ms)
    for _ in range(args.ticks):
        await scheduler.run_for(1)
        logger.info(format_snapshot(simulator.snapshot()))

    if args.sell_at_end:
        for holding in list(simulator.ledger.holdings.values()):
            simulator.sell(holding.asset_id)

    for entry in simulator.get_recent_log():
        logger.info(f"[{entry.kind.value:>4}] {entry.message}")
    logger.info(f"Price summary:\n{history_summary(simulator.get_assets()).to_string()}")
    logger.success(f"Final balance {format_usd(simulator.get_balance())}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the meme coin market simulator headless",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m memesim --ticks 20
  python -m memesim --ticks 50 --interval-ms 10 --seed 42 --buy clawstr 100 --sell-at-end
        """,
    )

    parser.add_argument("--ticks", type=int, default=25, help="Number of ticks to run (default: 25)")
    parser.add_argument(
        "--interval-ms",
        type=int,
        default=TICK_INTERVAL_MS,
        help=f"Tick cadence in milliseconds (default: {TICK_INTERVAL_MS})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument(
        "--balance",
        type=float,
        default=STARTING_BALANCE,
        help=f"Starting cash balance (default: {STARTING_BALANCE:.0f})",
    )
    parser.add_argument(
        "--buy",
        nargs=2,
        metavar=("ASSET_ID", "AMOUNT"),
        help="Buy an asset before the first tick, e.g. --buy clawstr 100",
    )
    parser.add_argument(
        "--sell-at-end", action="store_true", help="Liquidate every holding after the last tick"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    setup_logging(args.debug)

    try:
        return asyncio.run(run(args))
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
