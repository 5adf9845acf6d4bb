"""
Portfolio ledger: cash balance, holdings and loss tracking.

The ledger executes buy/sell commands against the current prices of a
PriceSource, writes user-facing events into its TransactionLog and publishes
shock events when losses spike.
"""

from collections.abc import Mapping
from types import MappingProxyType

from loguru import logger

from memesim.core.constants import SHOCK_THRESHOLD, STARTING_BALANCE
from memesim.core.enums import LogKind, RektLevel, ShockReason
from memesim.core.exceptions.market import InsufficientFundsError
from memesim.core.models.events import MarketEventSubject, ShockEvent
from memesim.core.models.holding import Holding, SaleResult
from memesim.core.models.loss_tracker import UnrealizedLossTracker, current_value
from memesim.core.models.transaction_log import TransactionLog
from memesim.core.protocols import PriceSource
from memesim.core.types.financial import (
    format_price,
    format_units,
    format_usd,
    weighted_average_cost,
)
from memesim.core.utils.decorators import log_command, require_holding, validate_inputs
from memesim.core.utils.validation import validate_positive


class PortfolioLedger:
    """Single-user portfolio ledger.

    Invariants:
        - ``cash_balance`` never drops below zero; a buy larger than the
          balance is rejected before anything is mutated.
        - At most one Holding per asset, and only while its quantity is positive.
        - Sells always liquidate the whole position.
    """

    def __init__(
        self,
        price_source: PriceSource,
        starting_balance: float = STARTING_BALANCE,
        log: TransactionLog | None = None,
        events: MarketEventSubject | None = None,
        shock_threshold: float = SHOCK_THRESHOLD,
    ) -> None:
        """Initialize an empty portfolio.

        Args:
            price_source: Read-only access to current prices
            starting_balance: Initial cash
            log: Transaction log to write to (a new one by default)
            events: Subject used to publish shock events (a new one by default)
            shock_threshold: Loss jump that raises a shock
        """
        self.price_source = price_source
        self.log = log if log is not None else TransactionLog()
        self.events = events if events is not None else MarketEventSubject()
        self._cash_balance = float(validate_positive(starting_balance, "starting_balance"))
        self._holdings: dict[str, Holding] = {}
        self._loss_tracker = UnrealizedLossTracker(shock_threshold)

    @property
    def cash_balance(self) -> float:
        """Current cash."""
        return self._cash_balance

    @property
    def holdings(self) -> Mapping[str, Holding]:
        """Read-only view of open holdings keyed by asset id."""
        return MappingProxyType(self._holdings)

    @property
    def unrealized_loss(self) -> float:
        """Last positive unrealized loss figure."""
        return self._loss_tracker.value

    @property
    def rekt_level(self) -> RektLevel:
        """Status tier for the current loss figure."""
        return RektLevel.from_loss(self.unrealized_loss)

    def get_holding(self, asset_id: str) -> Holding | None:
        """Get the open holding for an asset, if any."""
        return self._holdings.get(asset_id)

    def portfolio_value(self) -> float:
        """Market value of all open holdings at current prices."""
        return current_value(self._holdings.values(), self.price_source.prices())

    @log_command
    @validate_inputs
    def buy(self, asset_id: str, dollar_amount: float) -> Holding:
        """Spend dollars on an asset at its current price.

        Args:
            asset_id: Asset to buy
            dollar_amount: Dollars to spend; numbers and numeric strings accepted

        Returns:
            The resulting holding

        Raises:
            InvalidAmountError: If the amount is not a finite positive number
            UnknownAssetError: If the asset is not listed
            InsufficientFundsError: If the amount exceeds the cash balance
        """
        asset = self.price_source.get_asset(asset_id)

        if dollar_amount > self._cash_balance:
            self.log.append(f"INSUFFICIENT FUNDS for {asset.ticker}", LogKind.REKT)
            raise InsufficientFundsError(
                required=dollar_amount, available=self._cash_balance, ticker=asset.ticker
            )

        units = dollar_amount / asset.price
        self._cash_balance -= dollar_amount

        existing = self._holdings.get(asset_id)
        if existing is not None:
            holding = Holding(
                asset_id=asset_id,
                quantity=existing.quantity + units,
                average_cost_basis=weighted_average_cost(
                    existing.average_cost_basis, existing.quantity, dollar_amount, units
                ),
            )
        else:
            holding = Holding(asset_id=asset_id, quantity=units, average_cost_basis=asset.price)
        self._holdings[asset_id] = holding

        self.log.append(
            f"BOUGHT {format_units(units)} {asset.ticker} @ {format_price(asset.price)}",
            LogKind.BUY,
        )
        self.recompute_loss()
        return holding

    @log_command
    @validate_inputs
    @require_holding()
    def sell(self, asset_id: str) -> SaleResult:
        """Liquidate the whole position in an asset at its current price.

        Raises:
            EmptyHoldingError: If there is no open holding
            UnknownAssetError: If the asset is not listed
        """
        asset = self.price_source.get_asset(asset_id)
        holding = self._holdings[asset_id]

        proceeds = holding.market_value(asset.price)
        result = SaleResult(
            asset_id=asset_id,
            quantity=holding.quantity,
            price=asset.price,
            proceeds=proceeds,
            cost_basis=holding.cost_basis,
            pnl=proceeds - holding.cost_basis,
        )

        self._cash_balance += proceeds
        del self._holdings[asset_id]

        summary = f"SOLD {format_units(result.quantity)} {asset.ticker} for {format_usd(proceeds)}"
        if result.is_rekt:
            self.log.append(f"{summary} [REKT: -{format_usd(abs(result.pnl))}]", LogKind.REKT)
            self.events.notify_observers(ShockEvent.create(ShockReason.REKT_SELL, abs(result.pnl)))
        else:
            self.log.append(f"{summary} [+{format_usd(result.pnl)}]", LogKind.SELL)

        self.recompute_loss()
        return result

    def recompute_loss(self) -> float:
        """Refresh the unrealized loss figure from current prices.

        Called after every tick, buy and sell. Publishes a LOSS_JUMP shock
        when the figure rises by more than the shock threshold.

        Returns:
            The loss figure after recomputation
        """
        jump = self._loss_tracker.recompute(self._holdings.values(), self.price_source.prices())
        if jump is not None:
            logger.info(f"Loss jumped by {format_usd(jump)} to {format_usd(self.unrealized_loss)}")
            self.events.notify_observers(ShockEvent.create(ShockReason.LOSS_JUMP, jump))
        return self.unrealized_loss

    def note(self, message: str) -> None:
        """Append an informational entry to the transaction log."""
        self.log.append(message, LogKind.INFO)

    def __repr__(self) -> str:
        return (
            f"PortfolioLedger(cash={self._cash_balance:.2f}, "
            f"holdings={len(self._holdings)}, loss={self.unrealized_loss:.2f})"
        )
