"""
Unit tests for EngineConfig.
"""

import json
from pathlib import Path

import pytest

from trivia_toolkit.builder.config import EngineConfig, load_config


class TestEngineConfig:
    """Tests for EngineConfig dataclass."""

    def test_init_defaults(self):
        config = EngineConfig()

        assert config.seed is None
        assert config.time_limit_seconds == 30
        assert config.lock_dir is None
        assert config.default_distribution is None

    def test_init_when_zero_time_limit_then_raises(self):
        with pytest.raises(ValueError, match="time_limit_seconds must be positive"):
            EngineConfig(time_limit_seconds=0)

    def test_init_when_unknown_distribution_then_raises(self):
        with pytest.raises(ValueError, match="distribution"):
            EngineConfig(default_distribution="custom")

    def test_init_coerces_lock_dir_to_path(self):
        assert EngineConfig(lock_dir="locks").lock_dir == Path("locks")

    def test_from_dict_accepts_camel_case(self):
        config = EngineConfig.from_dict({"seed": 3, "lockTimeout": 2.5, "defaultDistribution": "even"})

        assert config.seed == 3
        assert config.lock_timeout == 2.5
        assert config.default_distribution == "even"

    def test_load_config_reads_json(self, tmp_path):
        path = tmp_path / "engine.json"
        path.write_text(json.dumps({"seed": 11, "lock_dir": str(tmp_path / "locks")}))

        config = load_config(path)

        assert config.seed == 11
        assert config.lock_dir == tmp_path / "locks"

    def test_load_config_when_not_json_then_raises(self, tmp_path):
        path = tmp_path / "engine.json"
        path.write_text("seed = 11")

        with pytest.raises(ValueError, match="Invalid config file"):
            load_config(path)
