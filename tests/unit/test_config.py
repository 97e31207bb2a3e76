"""
Tests for MechanismConfig defaults, validation and environment overrides
"""

import dataclasses

import pytest

from lexjusticia.config import MechanismConfig
from lexjusticia.core.math.integration import DEFAULT_SEGMENTS
from lexjusticia.core.math.root_finding import DEFAULT_MAX_ITERATIONS, DEFAULT_ROOT_TOLERANCE


class TestDefaults:
    def test_protocol_defaults(self):
        cfg = MechanismConfig()
        assert cfg.adverse_selection_param == 0.05
        assert cfg.crisis_cost_param == 0.1
        assert cfg.root_tolerance == 0.1
        assert cfg.root_max_iterations == 100
        assert cfg.reward_segments == 100
        assert cfg.martyr_max_spread_bps == 40.0
        assert cfg.citizen_max_spread_bps == 100.0
        assert cfg.max_slash_fraction == 0.5
        assert cfg.belief_update_weight == 0.7
        assert cfg.volatility_threshold_bps == 3000.0
        assert cfg.spread_widening_threshold_bps == 200.0
        assert cfg.liquidity_drain_fraction == 0.5
        assert cfg.volume_surge_multiple == 3.0

    def test_solver_defaults_follow_math_layer(self):
        cfg = MechanismConfig()
        assert cfg.root_tolerance == DEFAULT_ROOT_TOLERANCE
        assert cfg.root_max_iterations == DEFAULT_MAX_ITERATIONS
        assert cfg.reward_segments == DEFAULT_SEGMENTS

    def test_frozen(self):
        cfg = MechanismConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.max_slash_fraction = 1.0


class TestValidation:
    @pytest.mark.parametrize(
        "overrides, message",
        [
            ({"root_tolerance": 0.0}, "root_tolerance must be positive"),
            ({"root_max_iterations": 0}, "root_max_iterations must be >= 1"),
            ({"reward_segments": 99}, "reward_segments must be a positive even integer"),
            ({"reward_segments": 0}, "reward_segments must be a positive even integer"),
            ({"max_slash_fraction": 1.5}, "max_slash_fraction"),
            ({"belief_update_weight": -0.1}, "belief_update_weight"),
            ({"adverse_selection_param": -0.05}, "adverse_selection_param"),
            ({"martyr_max_spread_bps": -1.0}, "martyr_max_spread_bps"),
            ({"liquidity_drain_fraction": 2.0}, "liquidity_drain_fraction"),
            ({"volume_surge_multiple": 0.0}, "volume_surge_multiple"),
        ],
    )
    def test_invalid_values_rejected(self, overrides, message):
        with pytest.raises(ValueError, match=message):
            MechanismConfig(**overrides)


class TestFromEnv:
    def test_empty_environment_gives_defaults(self):
        assert MechanismConfig.from_env({}) == MechanismConfig()

    def test_overrides(self):
        cfg = MechanismConfig.from_env(
            {
                "LEXJ_VOLATILITY_THRESHOLD_BPS": "2500",
                "LEXJ_MARTYR_MAX_SPREAD_BPS": "35",
                "LEXJ_REWARD_SEGMENTS": "200",
            }
        )
        assert cfg.volatility_threshold_bps == 2500.0
        assert cfg.martyr_max_spread_bps == 35.0
        assert cfg.reward_segments == 200
        assert isinstance(cfg.reward_segments, int)

    def test_blank_values_ignored(self):
        cfg = MechanismConfig.from_env({"LEXJ_MAX_SLASH_FRACTION": "  "})
        assert cfg.max_slash_fraction == 0.5

    def test_unrelated_variables_ignored(self):
        cfg = MechanismConfig.from_env({"MAX_SLASH_FRACTION": "0.9", "LEXJ_UNKNOWN": "1"})
        assert cfg == MechanismConfig()

    def test_non_numeric_rejected(self):
        with pytest.raises(ValueError, match="LEXJ_BELIEF_UPDATE_WEIGHT must be numeric"):
            MechanismConfig.from_env({"LEXJ_BELIEF_UPDATE_WEIGHT": "high"})

    def test_integer_field_rejects_float_text(self):
        with pytest.raises(ValueError, match="LEXJ_ROOT_MAX_ITERATIONS must be numeric"):
            MechanismConfig.from_env({"LEXJ_ROOT_MAX_ITERATIONS": "10.5"})

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError, match="max_slash_fraction"):
            MechanismConfig.from_env({"LEXJ_MAX_SLASH_FRACTION": "1.2"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("LEXJ_CRISIS_COST_PARAM", "0.2")
        assert MechanismConfig.from_env().crisis_cost_param == 0.2
