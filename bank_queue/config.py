"""Simulation parameters and their validation."""

import json
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional

from .distributions import MIN_SERVICE_TIME, MAX_SERVICE_TIME, MAX_POISSON_LAMBDA

SIMULATION_MINUTES = 480  # 8 hours * 60 minutes


class ConfigurationError(ValueError):
    """Raised when simulation parameters are missing or invalid."""


def require_positive(name: str, value: float) -> None:
    if value is None or value <= 0:
        raise ConfigurationError(f"{name} must be > 0")


def require_int_at_least(name: str, value: int, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ConfigurationError(f"{name} must be an integer >= {minimum}")


def require_arrival_rate(value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError("arrival rate must be a number")
    if not math.isfinite(value):
        raise ConfigurationError(f"arrival rate must be a finite number, got {value}")
    require_positive("arrival rate", value)
    if value > MAX_POISSON_LAMBDA:
        raise ConfigurationError(f"arrival rate must be <= {MAX_POISSON_LAMBDA:g}, got {value}")


def parse_arrival_rate(text: str) -> float:
    """Parse an operator-supplied lambda."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise ConfigurationError(f"arrival rate must be a number, got {text!r}") from None
    require_arrival_rate(value)
    return value


def parse_num_tellers(text: str) -> int:
    """Parse an operator-supplied teller count."""
    try:
        value = int(str(text).strip())
    except (TypeError, ValueError):
        raise ConfigurationError(f"number of tellers must be an integer, got {text!r}") from None
    require_int_at_least("number of tellers", value, 1)
    return value


@dataclass
class SimulationConfig:
    """Parameters for one simulated bank day."""
    arrival_rate: float                   # average customers per minute (lambda)
    num_tellers: int
    minutes: int = SIMULATION_MINUTES
    min_service_time: int = MIN_SERVICE_TIME
    max_service_time: int = MAX_SERVICE_TIME
    seed: Optional[int] = None            # None = different every run

    def validate(self) -> "SimulationConfig":
        require_arrival_rate(self.arrival_rate)
        require_int_at_least("number of tellers", self.num_tellers, 1)
        require_int_at_least("minutes", self.minutes, 1)
        require_int_at_least("minimum service time", self.min_service_time, 1)
        require_int_at_least("maximum service time", self.max_service_time, self.min_service_time)
        if self.seed is not None:
            require_int_at_least("seed", self.seed, 0)
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {', '.join(sorted(unknown))}")
        missing = {'arrival_rate', 'num_tellers'} - set(data)
        if missing:
            raise ConfigurationError(f"missing configuration keys: {', '.join(sorted(missing))}")
        return cls(**data).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: str) -> SimulationConfig:
    """Load a SimulationConfig from a JSON file."""
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"config file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {path} must contain a JSON object")
    return SimulationConfig.from_dict(data)
