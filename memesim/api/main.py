"""
FastAPI main application for the meme coin market simulator.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from memesim import __version__
from memesim.core.models.config import SimulationConfig
from memesim.core.models.events import ShockMonitor
from memesim.core.models.market import MarketSimulator
from memesim.infrastructure.scheduler import TickScheduler

from .routers import market, portfolio


def create_app(config: SimulationConfig | None = None, autostart: bool = True) -> FastAPI:
    """Build an application owning one simulator and its tick scheduler.

    Args:
        config: Simulation parameters
        autostart: Start ticking when the application starts up
    """
    simulator = MarketSimulator(config)
    shock_monitor = ShockMonitor()
    simulator.add_observer(shock_monitor)
    scheduler = TickScheduler(simulator, simulator.config.tick_interval_ms)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if autostart:
            scheduler.start()
        yield
        await scheduler.stop()

    app = FastAPI(
        title="Meme Coin Simulator API",
        version=__version__,
        description="Loss-biased fictional market with a single-user portfolio",
        lifespan=lifespan,
    )
    app.state.simulator = simulator
    app.state.shock_monitor = shock_monitor
    app.state.scheduler = scheduler

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",  # Development frontend
            "http://localhost:5173",  # Vite dev server
        ],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    app.include_router(market.router, prefix="/api/market", tags=["market"])
    app.include_router(portfolio.router, prefix="/api/portfolio", tags=["portfolio"])

    @app.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint returning API information."""
        return {"message": "Meme Coin Simulator API", "version": __version__, "status": "running"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "scheduler": "running" if scheduler.is_running else "stopped"}

    return app


app = create_app()
