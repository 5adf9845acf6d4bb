"""
Market API endpoints.
"""

from typing import Annotated, Any

import pandas as pd
from fastapi import APIRouter, Depends

from memesim.api.deps import get_simulator
from memesim.api.schemas.api_models import AssetResponse, TickResponse
from memesim.core.models.market import MarketSimulator
from memesim.infrastructure.history_frame import price_history_frame

router = APIRouter()

SimulatorDep = Annotated[MarketSimulator, Depends(get_simulator)]


@router.get("/assets")
async def get_assets(simulator: SimulatorDep) -> list[AssetResponse]:
    """Get listed assets with current price and history."""
    return [AssetResponse.from_asset(asset) for asset in simulator.get_assets()]


@router.get("/history")
async def get_price_history(simulator: SimulatorDep) -> dict[str, Any]:
    """Get retained price histories for charting, one series per ticker."""
    frame = price_history_frame(simulator.get_assets())
    # JSON has no NaN; padded steps become null
    series = {
        str(column): [None if pd.isna(value) else float(value) for value in frame[column]]
        for column in frame.columns
    }
    return {"steps": frame.index.tolist(), "series": series}


@router.post("/tick")
async def tick(simulator: SimulatorDep) -> TickResponse:
    """Advance the market one step manually."""
    assets = simulator.tick()
    return TickResponse(
        tick=simulator.engine.ticks,
        assets=[AssetResponse.from_asset(asset) for asset in assets],
    )
