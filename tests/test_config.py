"""Tests for simulation configuration."""

import json

import pytest

from bank_queue.config import (
    ConfigurationError,
    SIMULATION_MINUTES,
    SimulationConfig,
    load_config,
    parse_arrival_rate,
    parse_num_tellers,
)
from bank_queue.distributions import MAX_POISSON_LAMBDA


class TestSimulationConfig:

    def test_defaults(self):
        config = SimulationConfig(arrival_rate=1.2, num_tellers=2).validate()
        assert config.minutes == SIMULATION_MINUTES == 480
        assert (config.min_service_time, config.max_service_time) == (2, 3)
        assert config.seed is None

    @pytest.mark.parametrize("kwargs", [
        {'arrival_rate': 0, 'num_tellers': 1},
        {'arrival_rate': -0.5, 'num_tellers': 1},
        {'arrival_rate': float('nan'), 'num_tellers': 1},
        {'arrival_rate': float('inf'), 'num_tellers': 1},
        {'arrival_rate': 1000.0, 'num_tellers': 1},
        {'arrival_rate': 1.0, 'num_tellers': 0},
        {'arrival_rate': 1.0, 'num_tellers': 2.0},
        {'arrival_rate': 1.0, 'num_tellers': 1, 'minutes': 0},
        {'arrival_rate': 1.0, 'num_tellers': 1, 'min_service_time': 4},
        {'arrival_rate': 1.0, 'num_tellers': 1, 'seed': -1},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ConfigurationError):
            SimulationConfig(**kwargs).validate()

    def test_from_dict(self):
        config = SimulationConfig.from_dict({'arrival_rate': 2, 'num_tellers': 3, 'seed': 9})
        assert config.to_dict()['seed'] == 9

    def test_from_dict_rejects_unknown_and_missing(self):
        with pytest.raises(ConfigurationError, match="unknown"):
            SimulationConfig.from_dict({'arrival_rate': 1, 'num_tellers': 1, 'lanes': 2})
        with pytest.raises(ConfigurationError, match="missing"):
            SimulationConfig.from_dict({'arrival_rate': 1})


class TestLoadConfig:

    def test_load(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text(json.dumps({'arrival_rate': 0.9, 'num_tellers': 2, 'minutes': 60}))
        config = load_config(str(path))
        assert config.minutes == 60

    def test_bad_json(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_config(str(tmp_path / "missing.json"))

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "bank.json"
        path.write_text("[1, 2]")
        with pytest.raises(ConfigurationError):
            load_config(str(path))


class TestOperatorInput:

    def test_parse_valid(self):
        assert parse_arrival_rate(" 1.5 ") == 1.5
        assert parse_num_tellers("3") == 3

    @pytest.mark.parametrize("text", ["abc", "0", "-2", "", "nan", "inf", "1e6"])
    def test_parse_bad_rate(self, text):
        with pytest.raises(ConfigurationError):
            parse_arrival_rate(text)

    @pytest.mark.parametrize("text", ["two", "0", "2.5", "-1"])
    def test_parse_bad_tellers(self, text):
        with pytest.raises(ConfigurationError):
            parse_num_tellers(text)


class TestArrivalRateRange:

    def test_largest_rate_accepted(self):
        config = SimulationConfig(arrival_rate=MAX_POISSON_LAMBDA, num_tellers=1).validate()
        assert parse_arrival_rate(str(MAX_POISSON_LAMBDA)) == config.arrival_rate
