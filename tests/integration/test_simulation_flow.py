"""
Integration tests for complete simulation runs.

Exercises the simulator with numpy's seeded generator over many ticks and
the headless runner end to end.
"""

import math

import pytest

import memesim.__main__ as cli
from memesim.core.enums import LogKind
from memesim.core.models.config import SimulationConfig
from memesim.core.models.events import ShockMonitor
from memesim.core.models.market import MarketSimulator


class TestSimulationFlow:
    """Integration tests for long-running simulations."""

    @pytest.fixture
    def simulator(self):
        return MarketSimulator(SimulationConfig(seed=1234))

    def test_should_keep_ledger_consistent_over_many_ticks(self, simulator):
        """Test cash conservation across a buy, a long run and a full liquidation."""
        # Arrange
        simulator.buy("clawstr", 300)
        simulator.buy("clawd", 200)
        invested = {h.asset_id: h.cost_basis for h in simulator.ledger.holdings.values()}

        # Act
        for _ in range(200):
            simulator.tick()
        values = {
            asset_id: holding.market_value(simulator.engine.get_price(asset_id))
            for asset_id, holding in simulator.ledger.holdings.items()
        }
        for asset_id in list(invested):
            assert simulator.sell(asset_id)

        # Assert
        assert simulator.get_balance() == pytest.approx(500.0 + sum(values.values()))
        assert dict(simulator.ledger.holdings) == {}
        for asset in simulator.get_assets():
            assert asset.price >= 1e-8
            assert len(asset.price_history) == 50
            assert math.isfinite(asset.percent_change)

    def test_should_keep_log_ordered_over_many_commands(self, simulator):
        for _ in range(40):
            simulator.buy("clawnch", 1)
            simulator.tick()
        simulator.buy("clawnch", 10_000)

        entries = simulator.get_recent_log()

        assert len(entries) == 41
        assert entries[-1].kind is LogKind.REKT
        ids = [entry.sequence_id for entry in entries]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    def test_should_trend_downward_on_average(self):
        """Test that the drift outweighs pumps over a long run."""
        sim = MarketSimulator(SimulationConfig(seed=99))
        start = {asset.id: asset.price for asset in sim.get_assets()}

        for _ in range(2000):
            sim.tick()

        end = sim.engine.prices()
        assert sum(end[asset_id] < start[asset_id] for asset_id in start) >= 2

    def test_should_shock_on_crash(self, halving_config):
        sim = MarketSimulator(halving_config)
        monitor = ShockMonitor()
        sim.add_observer(monitor)

        sim.buy("clawd", 500)
        sim.tick()

        assert monitor.total_shocks == 1
        assert monitor.last_event.magnitude == pytest.approx(250.0)


class TestHeadlessRunner:
    """Integration tests for the command line runner."""

    @pytest.fixture(autouse=True)
    def keep_test_logging(self, monkeypatch):
        """Leave loguru sinks alone while the runner executes."""
        monkeypatch.setattr(cli, "setup_logging", lambda debug=False: None)

    def test_should_run_and_liquidate(self):
        exit_code = cli.main(
            [
                "--ticks", "5",
                "--interval-ms", "1",
                "--seed", "42",
                "--buy", "clawstr", "100",
                "--sell-at-end",
            ]
        )
        assert exit_code == 0

    def test_should_reject_invalid_configuration(self):
        assert cli.main(["--ticks", "1", "--balance", "-10"]) == 2

    def test_should_format_snapshot_line(self, halving_config):
        sim = MarketSimulator(halving_config)
        sim.buy("clawstr", 100)
        sim.tick()

        line = cli.format_snapshot(sim.snapshot())

        assert line.startswith("tick    1 |")
        assert "$CLAWSTR $0.00210000" in line
        assert "cash $900.00" in line
        assert "lost $50.00 [NOT YET REKT]" in line
