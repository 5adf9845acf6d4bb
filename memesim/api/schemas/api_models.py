"""
Pydantic schemas for API request/response models.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from memesim.core.enums import LogKind, RektLevel
from memesim.core.models.asset import Asset
from memesim.core.models.holding import Holding
from memesim.core.models.log_entry import LogEntry


class AssetResponse(BaseModel):
    """Response model for one listed asset."""

    id: str
    display_name: str
    ticker: str
    price: float
    percent_change: float
    price_history: list[float]

    @classmethod
    def from_asset(cls, asset: Asset) -> "AssetResponse":
        return cls(**asset.to_dict())


class HoldingResponse(BaseModel):
    """Response model for an open holding valued at the current price."""

    asset_id: str
    quantity: float
    average_cost_basis: float
    cost_basis: float
    market_value: float
    unrealized_pnl: float

    @classmethod
    def from_holding(cls, holding: Holding, price: float) -> "HoldingResponse":
        return cls(
            **holding.to_dict(),
            market_value=holding.market_value(price),
            unrealized_pnl=holding.unrealized_pnl(price),
        )


class LogEntryResponse(BaseModel):
    """Response model for a transaction log entry."""

    sequence_id: int
    message: str
    kind: LogKind
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: LogEntry) -> "LogEntryResponse":
        return cls(
            sequence_id=entry.sequence_id,
            message=entry.message,
            kind=entry.kind,
            created_at=entry.created_at,
        )


class PortfolioResponse(BaseModel):
    """Response model for the portfolio overview."""

    cash_balance: float
    portfolio_value: float
    total_value: float
    unrealized_loss: float
    rekt_level: RektLevel
    rekt_label: str
    shock_active: bool
    holdings: list[HoldingResponse]


class BuyRequest(BaseModel):
    """Request model for a buy command.

    ``amount`` is kept as typed by the user; non-numeric or non-positive
    amounts are rejected by the ledger, not by the schema.
    """

    asset_id: str = Field(..., min_length=1, description="Asset id, e.g. 'clawstr'")
    amount: float | str = Field(..., description="Dollars to spend")


class SellRequest(BaseModel):
    """Request model for a sell command (always the whole position)."""

    asset_id: str = Field(..., min_length=1, description="Asset id, e.g. 'clawstr'")


class CommandResponse(BaseModel):
    """Response model for buy/sell commands."""

    executed: bool
    cash_balance: float
    holding: HoldingResponse | None = None
    last_log: LogEntryResponse | None = None


class TickResponse(BaseModel):
    """Response model for a manual tick."""

    tick: int
    assets: list[AssetResponse]
