"""
Simulation configuration models.
"""

from dataclasses import asdict, dataclass

from memesim.core.constants import (
    DRIFT_CENTER,
    DRIFT_SPREAD,
    HISTORY_WINDOW,
    LOG_RETENTION,
    PRICE_FLOOR,
    PUMP_MAX_GAIN,
    PUMP_PROBABILITY,
    SEED_BIAS,
    SEED_FLOOR_RATIO,
    SEED_SPREAD,
    SEED_START_MULTIPLIER,
    SHOCK_THRESHOLD,
    STARTING_BALANCE,
    TICK_INTERVAL_MS,
)
from memesim.core.exceptions.market import ConfigurationError, ValidationError
from memesim.core.utils.validation import validate_positive, validate_probability


@dataclass(frozen=True)
class AssetListing:
    """Static description of an asset supplied at engine construction."""

    id: str
    display_name: str
    ticker: str
    starting_price: float


DEFAULT_LISTINGS: tuple[AssetListing, ...] = (
    AssetListing(id="clawstr", display_name="CLAWSTR", ticker="$CLAWSTR", starting_price=0.00420),
    AssetListing(id="clawnch", display_name="CLAWNCH", ticker="$CLAWNCH", starting_price=0.00069),
    AssetListing(id="clawd", display_name="CLAWD", ticker="$CLAWD", starting_price=0.01337),
)


@dataclass(frozen=True)
class SimulationConfig:
    """Tunable parameters of one simulation run.

    Defaults reproduce the reference market; tests override individual
    fields. ``seed`` makes the random walk reproducible.
    """

    starting_balance: float = STARTING_BALANCE
    tick_interval_ms: int = TICK_INTERVAL_MS
    pump_probability: float = PUMP_PROBABILITY
    pump_max_gain: float = PUMP_MAX_GAIN
    drift_center: float = DRIFT_CENTER
    drift_spread: float = DRIFT_SPREAD
    price_floor: float = PRICE_FLOOR
    seed_start_multiplier: float = SEED_START_MULTIPLIER
    seed_bias: float = SEED_BIAS
    seed_spread: float = SEED_SPREAD
    seed_floor_ratio: float = SEED_FLOOR_RATIO
    history_window: int = HISTORY_WINDOW
    log_retention: int = LOG_RETENTION
    shock_threshold: float = SHOCK_THRESHOLD
    seed: int | None = None

    def validate(self) -> "SimulationConfig":
        """Check every parameter, returning self for chaining.

        Raises:
            ConfigurationError: If any parameter is out of range
        """
        try:
            validate_positive(self.starting_balance, "starting_balance")
            validate_positive(self.tick_interval_ms, "tick_interval_ms")
            validate_probability(self.pump_probability, "pump_probability")
            validate_positive(self.pump_max_gain, "pump_max_gain")
            validate_positive(self.price_floor, "price_floor")
            validate_positive(self.seed_start_multiplier, "seed_start_multiplier")
            validate_positive(self.seed_floor_ratio, "seed_floor_ratio")
            validate_positive(self.history_window, "history_window")
            validate_positive(self.log_retention, "log_retention")
            validate_positive(self.shock_threshold, "shock_threshold")
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

        if self.drift_spread < 0 or self.drift_center - self.drift_spread <= 0:
            raise ConfigurationError(
                f"Drift multiplier range must stay positive, got "
                f"{self.drift_center} +/- {self.drift_spread}"
            )
        if self.seed_spread < 0 or self.seed_bias - self.seed_spread <= 0:
            raise ConfigurationError(
                f"Seed multiplier range must stay positive, got "
                f"{self.seed_bias} +/- {self.seed_spread}"
            )
        return self

    @property
    def tick_interval_seconds(self) -> float:
        """Tick cadence in seconds."""
        return self.tick_interval_ms / 1000

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return asdict(self)
