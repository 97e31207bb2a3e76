"""
Tests for crisis detection

Checks:
1. Each crisis type triggers on its own threshold
2. Priority order when several conditions hold
3. Inactive state carries no type or timestamp
4. Zero baselines disable the ratio checks
5. Thresholds come from MechanismConfig
"""

import logging

import pytest

from lexjusticia.config import MechanismConfig
from lexjusticia.core.domain import CrisisType, MarketSnapshot
from lexjusticia.mechanism.crisis_detection import detect_crisis

TS = 1_700_000_000_000


def make_snapshot(**overrides) -> MarketSnapshot:
    """Calm market unless overridden."""
    fields = dict(
        ts_utc_ms=TS,
        volatility_bps=500.0,
        avg_spread_bps=15.0,
        total_liquidity_usd=1_000_000.0,
        baseline_liquidity_usd=1_000_000.0,
        volume_24h_usd=2_000_000.0,
        baseline_volume_24h_usd=2_000_000.0,
    )
    fields.update(overrides)
    return MarketSnapshot(**fields)


class TestDetectCrisis:
    def test_calm_market_inactive(self):
        state = detect_crisis(make_snapshot())
        assert not state.active
        assert state.crisis_type is None
        assert state.triggered_at_ms is None
        assert state.liquidity_remaining_frac == pytest.approx(1.0)
        assert state.volume_multiple == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({"volatility_bps": 3000.0}, CrisisType.VOLATILITY_SPIKE),
            ({"volatility_bps": 4500.0}, CrisisType.VOLATILITY_SPIKE),
            ({"total_liquidity_usd": 400_000.0}, CrisisType.LIQUIDITY_DRAIN),
            ({"avg_spread_bps": 200.0}, CrisisType.SPREAD_WIDENING),
            ({"volume_24h_usd": 6_000_000.0}, CrisisType.VOLUME_SURGE),
        ],
    )
    def test_each_trigger(self, overrides, expected):
        state = detect_crisis(make_snapshot(**overrides))
        assert state.active
        assert state.crisis_type is expected
        assert state.triggered_at_ms == TS

    @pytest.mark.parametrize(
        "overrides",
        [
            {"volatility_bps": 2999.9},
            {"total_liquidity_usd": 500_000.0},
            {"avg_spread_bps": 199.9},
            {"volume_24h_usd": 5_999_999.0},
        ],
    )
    def test_just_below_thresholds(self, overrides):
        assert not detect_crisis(make_snapshot(**overrides)).active

    def test_volatility_takes_priority(self):
        state = detect_crisis(
            make_snapshot(
                volatility_bps=5000.0,
                total_liquidity_usd=100_000.0,
                avg_spread_bps=500.0,
                volume_24h_usd=10_000_000.0,
            )
        )
        assert state.crisis_type is CrisisType.VOLATILITY_SPIKE

    def test_liquidity_before_spread(self):
        state = detect_crisis(
            make_snapshot(total_liquidity_usd=100_000.0, avg_spread_bps=500.0)
        )
        assert state.crisis_type is CrisisType.LIQUIDITY_DRAIN

    def test_spread_before_volume(self):
        state = detect_crisis(
            make_snapshot(avg_spread_bps=500.0, volume_24h_usd=10_000_000.0)
        )
        assert state.crisis_type is CrisisType.SPREAD_WIDENING

    def test_zero_baselines_disable_ratio_checks(self):
        state = detect_crisis(
            make_snapshot(
                total_liquidity_usd=0.0,
                baseline_liquidity_usd=0.0,
                baseline_volume_24h_usd=0.0,
            )
        )
        assert not state.active
        assert state.liquidity_remaining_frac == 1.0
        assert state.volume_multiple == 1.0

    def test_config_thresholds(self):
        strict = MechanismConfig(volatility_threshold_bps=400.0)
        state = detect_crisis(make_snapshot(), config=strict)
        assert state.crisis_type is CrisisType.VOLATILITY_SPIKE

    def test_activation_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="lexjusticia.mechanism.crisis_detection"):
            detect_crisis(make_snapshot(avg_spread_bps=250.0))
        assert "crisis detected: type=SPREAD_WIDENING" in caplog.text

    def test_snapshot_figures_carried(self):
        state = detect_crisis(make_snapshot(volatility_bps=1234.0, avg_spread_bps=42.0))
        assert state.volatility_bps == 1234.0
        assert state.avg_spread_bps == 42.0
