"""
Price history export for charting adapters.
"""

from collections.abc import Iterable

import pandas as pd

from memesim.core.models.asset import Asset


def price_history_frame(assets: Iterable[Asset]) -> pd.DataFrame:
    """Build a DataFrame of retained price histories.

    Args:
        assets: Assets to export

    Returns:
        DataFrame indexed by step (0 = oldest retained point) with one column
        per ticker. Shorter histories are aligned to the most recent step and
        padded with NaN at the front.
    """
    assets = list(assets)
    if not assets:
        return pd.DataFrame()

    length = max(len(asset.price_history) for asset in assets)
    columns = {}
    for asset in assets:
        history = list(asset.price_history)
        columns[asset.ticker] = [float("nan")] * (length - len(history)) + history

    return pd.DataFrame(columns, index=pd.RangeIndex(length, name="step"))


def history_summary(assets: Iterable[Asset]) -> pd.DataFrame:
    """Summarize each asset's retained history (min, max, last, percent change)."""
    assets = list(assets)
    frame = price_history_frame(assets)
    if frame.empty:
        return pd.DataFrame(columns=["min", "max", "last", "percent_change"])

    summary = pd.DataFrame(
        {
            "min": frame.min(),
            "max": frame.max(),
            "last": pd.Series({asset.ticker: asset.price for asset in assets}),
            "percent_change": pd.Series({asset.ticker: asset.percent_change for asset in assets}),
        }
    )
    summary.index.name = "ticker"
    return summary
