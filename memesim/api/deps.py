"""
Dependency injection for API routes.
"""

from fastapi import HTTPException, Request

from memesim.core.models.events import ShockMonitor
from memesim.core.models.market import MarketSimulator


def get_simulator(request: Request) -> MarketSimulator:
    """Get the simulator owned by the application."""
    return request.app.state.simulator


def get_shock_monitor(request: Request) -> ShockMonitor:
    """Get the shock monitor subscribed to the simulator."""
    return request.app.state.shock_monitor


def require_listed_asset(simulator: MarketSimulator, asset_id: str) -> None:
    """Raise 404 for asset ids that are not listed."""
    if not simulator.engine.has_asset(asset_id):
        raise HTTPException(status_code=404, detail=f"Unknown asset: {asset_id}")
