"""
Portfolio API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from memesim.api.deps import get_shock_monitor, get_simulator, require_listed_asset
from memesim.api.schemas.api_models import (
    BuyRequest,
    CommandResponse,
    HoldingResponse,
    LogEntryResponse,
    PortfolioResponse,
    SellRequest,
)
from memesim.core.models.events import ShockMonitor
from memesim.core.models.market import MarketSimulator

router = APIRouter()

SimulatorDep = Annotated[MarketSimulator, Depends(get_simulator)]


def _holding_response(simulator: MarketSimulator, asset_id: str) -> HoldingResponse | None:
    holding = simulator.get_holding(asset_id)
    if holding is None:
        return None
    return HoldingResponse.from_holding(holding, simulator.engine.get_price(asset_id))


def _command_response(simulator: MarketSimulator, asset_id: str, executed: bool) -> CommandResponse:
    last = simulator.log.latest()
    return CommandResponse(
        executed=executed,
        cash_balance=simulator.get_balance(),
        holding=_holding_response(simulator, asset_id),
        last_log=LogEntryResponse.from_entry(last) if last is not None else None,
    )


@router.get("")
async def get_portfolio(
    simulator: SimulatorDep,
    monitor: Annotated[ShockMonitor, Depends(get_shock_monitor)],
) -> PortfolioResponse:
    """Get balance, holdings and loss status."""
    snapshot = simulator.snapshot()
    prices = simulator.engine.prices()
    return PortfolioResponse(
        cash_balance=snapshot.cash_balance,
        portfolio_value=snapshot.portfolio_value,
        total_value=snapshot.total_value,
        unrealized_loss=snapshot.unrealized_loss,
        rekt_level=snapshot.rekt_level,
        rekt_label=snapshot.rekt_level.label,
        shock_active=monitor.is_active(),
        holdings=[
            HoldingResponse.from_holding(holding, prices[holding.asset_id])
            for holding in snapshot.holdings
        ],
    )


@router.get("/holdings/{asset_id}")
async def get_holding(asset_id: str, simulator: SimulatorDep) -> HoldingResponse:
    """Get the open holding for one asset."""
    require_listed_asset(simulator, asset_id)
    holding = _holding_response(simulator, asset_id)
    if holding is None:
        raise HTTPException(status_code=404, detail=f"No holding for asset: {asset_id}")
    return holding


@router.post("/buy")
async def buy(request: BuyRequest, simulator: SimulatorDep) -> CommandResponse:
    """Spend dollars on an asset; rejected buys return executed=false."""
    require_listed_asset(simulator, request.asset_id)
    executed = simulator.buy(request.asset_id, request.amount)
    return _command_response(simulator, request.asset_id, executed)


@router.post("/sell")
async def sell(request: SellRequest, simulator: SimulatorDep) -> CommandResponse:
    """Sell the whole position in an asset."""
    require_listed_asset(simulator, request.asset_id)
    executed = simulator.sell(request.asset_id)
    return _command_response(simulator, request.asset_id, executed)


@router.get("/log")
async def get_log(simulator: SimulatorDep) -> list[LogEntryResponse]:
    """Get retained transaction log entries, oldest first."""
    return [LogEntryResponse.from_entry(entry) for entry in simulator.get_recent_log()]
