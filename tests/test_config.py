"""
Employee Name Statistics - Configuration Tests
==============================================
"""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import (
    AgeRange, ConfigError, GeneratorConfig, DEFAULT_MAX_ATTEMPTS,
    coerce_config, load_config,
)


class TestFromDict:
    """Test the input DTO shape"""

    def test_valid(self):
        cfg = GeneratorConfig.from_dict({'count': 10, 'age': {'min': 18, 'max': 60}})
        assert cfg.count == 10
        assert cfg.age == AgeRange(min=18, max=60)
        assert cfg.seed is None
        assert cfg.max_attempts == DEFAULT_MAX_ATTEMPTS

    def test_optional_keys(self):
        cfg = GeneratorConfig.from_dict(
            {'count': 1, 'age': {'min': 0, 'max': 1}, 'seed': 7, 'max_attempts': 3}
        )
        assert cfg.seed == 7
        assert cfg.max_attempts == 3

    @pytest.mark.parametrize("data, field", [
        ({'age': {'min': 0, 'max': 1}}, "count"),
        ({'count': 1}, "age"),
        ({'count': 1, 'age': {'max': 1}}, "age.min"),
        ({'count': 1, 'age': [0, 1]}, "age"),
        ({'count': -1, 'age': {'min': 0, 'max': 1}}, "count"),
        ({'count': 1, 'age': {'min': -1, 'max': 1}}, "age.min"),
        ({'count': 1, 'age': {'min': 0, 'max': -1}}, "age.max"),
        ({'count': 1, 'age': {'min': 30, 'max': 20}}, "age.min"),
        ({'count': 2.5, 'age': {'min': 0, 'max': 1}}, "count"),
        ({'count': True, 'age': {'min': 0, 'max': 1}}, "count"),
        ({'count': 1, 'age': {'min': 0, 'max': 1}, 'max_attempts': 0}, "max_attempts"),
    ])
    def test_invalid_field_reported(self, data, field):
        """Test each invalid input names the offending field"""
        with pytest.raises(ConfigError) as exc:
            GeneratorConfig.from_dict(data)
        assert exc.value.field == field
        assert field in str(exc.value)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            AgeRange(min=5, max=1)

    def test_degenerate_flag(self):
        assert AgeRange(min=3, max=3).is_degenerate
        assert not AgeRange(min=3, max=4).is_degenerate

    def test_to_dict(self):
        cfg = GeneratorConfig.from_dict({'count': 4, 'age': {'min': 1, 'max': 2}})
        assert cfg.to_dict()['age'] == {'min': 1, 'max': 2}


class TestLoadConfig:
    """Test YAML loading"""

    def test_default_file(self):
        """Test the shipped config loads"""
        cfg = load_config()
        assert cfg.count == 250
        assert cfg.age == AgeRange(min=19, max=35)
        assert cfg.seed == 2024

    def test_custom_file(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("count: 3\nage:\n  min: 0\n  max: 0\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg.count == 3
        assert cfg.age.is_degenerate

    def test_missing_keys(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("age:\n  min: 0\n  max: 5\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc:
            load_config(path)
        assert exc.value.field == "count"

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(path)


class TestCoerce:

    def test_passthrough(self):
        cfg = GeneratorConfig(count=1, age=AgeRange(min=0, max=1))
        assert coerce_config(cfg) is cfg

    def test_mapping(self):
        assert coerce_config({'count': 0, 'age': {'min': 0, 'max': 0}}).count == 0

    def test_unsupported(self):
        with pytest.raises(ConfigError):
            coerce_config(42)
