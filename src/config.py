"""
Employee Name Statistics - Generator Configuration
==================================================

Typed configuration for one generation run.

Input shape
-----------
The generator accepts the same structure whether it arrives as a mapping
or from YAML::

    count: 250
    age:
      min: 19
      max: 35
    seed: 2024          # optional
    max_attempts: 1000  # optional, resampling budget per birthdate

Every field is checked before generation begins; failures raise
ConfigError naming the offending field.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional
from pathlib import Path
import yaml


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "configs" / "employee_config.yaml"
DEFAULT_MAX_ATTEMPTS = 1000


# =============================================================================
# ERRORS
# =============================================================================

class ConfigError(ValueError):
    """Invalid generator configuration. `field` is the dotted key at fault."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class BirthdateSpaceExhausted(ConfigError):
    """More employees requested than distinct birthdates in the window"""


# =============================================================================
# CONFIG DATACLASSES
# =============================================================================

def _require_int(value: Any, field: str) -> int:
    # bool is an int subclass but never a meaningful count or age
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(field, f"expected an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class AgeRange:
    """Age window in whole years. min is the youngest allowed age."""
    min: int
    max: int

    def __post_init__(self):
        _require_int(self.min, "age.min")
        _require_int(self.max, "age.max")
        if self.min < 0:
            raise ConfigError("age.min", f"must be >= 0, got {self.min}")
        if self.max < 0:
            raise ConfigError("age.max", f"must be >= 0, got {self.max}")
        if self.min > self.max:
            raise ConfigError(
                "age.min", f"must be <= age.max ({self.min} > {self.max})"
            )

    @property
    def is_degenerate(self) -> bool:
        return self.min == self.max


@dataclass(frozen=True)
class GeneratorConfig:
    count: int
    age: AgeRange
    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self):
        _require_int(self.count, "count")
        if self.count < 0:
            raise ConfigError("count", f"must be >= 0, got {self.count}")
        if not isinstance(self.age, AgeRange):
            raise ConfigError("age", f"expected AgeRange, got {type(self.age).__name__}")
        if self.seed is not None:
            _require_int(self.seed, "seed")
        _require_int(self.max_attempts, "max_attempts")
        if self.max_attempts < 1:
            raise ConfigError(
                "max_attempts", f"must be >= 1, got {self.max_attempts}"
            )

    @classmethod
    def from_dict(cls, data: Mapping) -> "GeneratorConfig":
        """Build from the input DTO shape {count, age: {min, max}}"""
        missing = [k for k in ('count', 'age') if k not in data]
        if missing:
            raise ConfigError(missing[0], "missing required key")

        age = data['age']
        if not isinstance(age, Mapping):
            raise ConfigError("age", f"expected a mapping, got {age!r}")
        for key in ('min', 'max'):
            if key not in age:
                raise ConfigError(f"age.{key}", "missing required key")

        return cls(
            count=data['count'],
            age=AgeRange(min=age['min'], max=age['max']),
            seed=data.get('seed'),
            max_attempts=data.get('max_attempts', DEFAULT_MAX_ATTEMPTS),
        )

    def to_dict(self) -> dict:
        return {
            'count': self.count,
            'age': {'min': self.age.min, 'max': self.age.max},
            'seed': self.seed,
            'max_attempts': self.max_attempts,
        }


def load_config(config_path: Optional[Path] = None) -> GeneratorConfig:
    """Load and validate configuration from YAML"""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, Mapping):
        raise ConfigError("<root>", f"expected a mapping in {config_path}")

    return GeneratorConfig.from_dict(data)


def coerce_config(config: Any) -> GeneratorConfig:
    """Accept a GeneratorConfig or a raw input mapping"""
    if isinstance(config, GeneratorConfig):
        return config
    if isinstance(config, Mapping):
        return GeneratorConfig.from_dict(config)
    raise ConfigError("<root>", f"unsupported config type {type(config).__name__}")
