"""
Unit tests for core enumerations.
"""

import pytest

from memesim.core.enums import LogKind, RektLevel, ShockReason


class TestLogKind:
    """Test LogKind enum."""

    def test_should_have_four_kinds(self) -> None:
        assert {kind.value for kind in LogKind} == {"buy", "sell", "rekt", "info"}

    def test_should_be_string_compatible(self) -> None:
        assert LogKind.REKT == "rekt"
        assert LogKind("buy") is LogKind.BUY

    def test_should_classify_trade_kinds(self) -> None:
        assert LogKind.BUY.is_trade
        assert LogKind.SELL.is_trade
        assert LogKind.REKT.is_trade
        assert not LogKind.INFO.is_trade


class TestRektLevel:
    """Test RektLevel enum."""

    @pytest.mark.parametrize(
        ("loss", "expected"),
        [
            (0.0, RektLevel.NOT_YET_REKT),
            (100.0, RektLevel.NOT_YET_REKT),
            (100.01, RektLevel.GETTING_REKT),
            (500.0, RektLevel.GETTING_REKT),
            (500.01, RektLevel.MEGA_REKT),
        ],
    )
    def test_should_classify_loss(self, loss: float, expected: RektLevel) -> None:
        assert RektLevel.from_loss(loss) is expected

    def test_should_render_label(self) -> None:
        assert RektLevel.MEGA_REKT.label == "MEGA REKT"
        assert RektLevel.NOT_YET_REKT.label == "NOT YET REKT"


class TestShockReason:
    """Test ShockReason enum."""

    def test_should_map_durations(self) -> None:
        assert ShockReason.duration_ms(ShockReason.LOSS_JUMP) == 500
        assert ShockReason.duration_ms(ShockReason.REKT_SELL) == 800
