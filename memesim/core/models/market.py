"""
Main MarketSimulator class - orchestrates all simulation components.

This module provides the command/query surface used by presentation
adapters by composing the focused components: price engine, portfolio
ledger and transaction log.
"""

from collections.abc import Iterable
from typing import Any

import numpy as np
from loguru import logger

from memesim.core.exceptions.market import MemesimException
from memesim.core.models.asset import Asset
from memesim.core.models.config import DEFAULT_LISTINGS, AssetListing, SimulationConfig
from memesim.core.models.events import MarketEventObserver, MarketEventSubject
from memesim.core.models.holding import Holding
from memesim.core.models.ledger import PortfolioLedger
from memesim.core.models.log_entry import LogEntry
from memesim.core.models.price_engine import PriceEngine
from memesim.core.models.snapshot import MarketSnapshot
from memesim.core.models.transaction_log import TransactionLog
from memesim.core.protocols import RandomSource


class MarketSimulator:
    """Main simulator implementation.

    Orchestrates the simulation by composing focused components:
    - PriceEngine: asset prices and history
    - PortfolioLedger: balance, holdings and loss tracking
    - TransactionLog: user-facing event log

    Commands never raise for rejected input: they return False and leave the
    ledger untouched (an insufficient-funds buy still records a rekt entry).
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        listings: Iterable[AssetListing] = DEFAULT_LISTINGS,
        rng: RandomSource | None = None,
    ) -> None:
        """Initialize the simulator.

        Args:
            config: Simulation parameters (defaults to the reference market)
            listings: Assets to list at startup
            rng: Random source; defaults to numpy's generator seeded from config.seed
        """
        self.config = (config or SimulationConfig()).validate()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.events = MarketEventSubject()
        self.log = TransactionLog(self.config.log_retention)
        self.engine = PriceEngine(listings, self.rng, self.config)
        self.ledger = PortfolioLedger(
            self.engine,
            starting_balance=self.config.starting_balance,
            log=self.log,
            events=self.events,
            shock_threshold=self.config.shock_threshold,
        )

    # Queries
    def get_assets(self) -> tuple[Asset, ...]:
        """Get current assets in listing order."""
        return self.engine.get_assets()

    def get_holding(self, asset_id: str) -> Holding | None:
        """Get the open holding for an asset, if any."""
        return self.ledger.get_holding(asset_id)

    def get_balance(self) -> float:
        """Get current cash balance."""
        return self.ledger.cash_balance

    def get_unrealized_loss_metric(self) -> float:
        """Get the displayed unrealized loss figure."""
        return self.ledger.unrealized_loss

    def get_recent_log(self) -> tuple[LogEntry, ...]:
        """Get retained log entries, oldest first."""
        return self.log.entries()

    def snapshot(self) -> MarketSnapshot:
        """Capture the full state for one rendered frame."""
        return MarketSnapshot(
            tick=self.engine.ticks,
            assets=self.engine.get_assets(),
            cash_balance=self.ledger.cash_balance,
            holdings=tuple(self.ledger.holdings.values()),
            portfolio_value=self.ledger.portfolio_value(),
            unrealized_loss=self.ledger.unrealized_loss,
            rekt_level=self.ledger.rekt_level,
            log=self.log.entries(),
        )

    # Commands
    def tick(self) -> tuple[Asset, ...]:
        """Advance all assets one step and refresh the loss figure."""
        assets = self.engine.tick()
        self.ledger.recompute_loss()
        return assets

    def buy(self, asset_id: str, dollar_amount: Any) -> bool:
        """Buy an asset for a dollar amount.

        Returns:
            True if the buy executed
        """
        return self._run_command(self.ledger.buy, asset_id, dollar_amount)

    def sell(self, asset_id: str) -> bool:
        """Sell the whole position in an asset.

        Returns:
            True if the sell executed
        """
        return self._run_command(self.ledger.sell, asset_id)

    def announce(self, message: str) -> None:
        """Record an informational log entry."""
        self.ledger.note(message)

    def add_observer(self, observer: MarketEventObserver) -> None:
        """Subscribe to shock events."""
        self.events.add_observer(observer)

    def remove_observer(self, observer: MarketEventObserver) -> None:
        """Unsubscribe from shock events."""
        self.events.remove_observer(observer)

    def _run_command(self, command: Any, *args: Any) -> bool:
        try:
            command(*args)
        except MemesimException as e:
            logger.debug(f"{command.__name__} rejected: {type(e).__name__}")
            return False
        return True
