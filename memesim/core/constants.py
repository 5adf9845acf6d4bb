"""
Core constants and limits.

Defines the fixed parameters of the market simulation and the portfolio
ledger. They are exposed as named values so tests and the configuration
layer can refer to them.
"""

# Simulation Cadence
TICK_INTERVAL_MS = 800  # Reference cadence of the external tick trigger

# Tick Model
PUMP_PROBABILITY = 0.08  # 8% chance of an upward spike per asset per tick
PUMP_MAX_GAIN = 0.3  # Pump multiplier is 1 + U(0, 0.3)
DRIFT_CENTER = 0.985  # Downward-biased multiplier centre
DRIFT_SPREAD = 0.04  # Drift multiplier is DRIFT_CENTER + U(-0.04, 0.04)
PRICE_FLOOR = 1e-8  # Prices never fall below this

# Seeded Backstory
SEED_START_MULTIPLIER = 1.5  # History starts 50% above the listing price
SEED_BIAS = 0.97  # Per-step decline applied while seeding
SEED_SPREAD = 0.075  # Seed multiplier is SEED_BIAS + U(-0.075, 0.075)
SEED_FLOOR_RATIO = 0.1  # Seeded values never drop below 10% of the listing price

# Retention Limits
HISTORY_WINDOW = 50  # Price points kept per asset
LOG_RETENTION = 50  # Transaction log entries kept

# Ledger
STARTING_BALANCE = 1000.0

# Shock Signal
SHOCK_THRESHOLD = 10.0  # Loss jump that triggers a shock
LOSS_SHOCK_DURATION_MS = 500
REKT_SELL_SHOCK_DURATION_MS = 800

# Rekt Tiers
GETTING_REKT_THRESHOLD = 100.0
MEGA_REKT_THRESHOLD = 500.0
