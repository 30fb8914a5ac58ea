"""Tests for configuration management system."""

import pytest
from pathlib import Path
from omegaconf import DictConfig, OmegaConf

from aoc_solver.config import (
    ConfigManager, load_config, get_config, get_parameter, default_config,
    validate_config, ConfigValidationError
)
from aoc_solver.config.config_manager import DEFAULTS, default_config_dir


class TestConfigManager:
    """Test ConfigManager functionality."""

    @pytest.fixture
    def temp_config_dir(self, tmp_path):
        """Create temporary configuration directory."""
        config_dir = tmp_path / "conf"
        config_dir.mkdir()

        config_content = """
solver:
  name: "test-solver"
  data_dir: "inputs"

search:
  queue: sorted
  max_nodes_expanded: 1000
  log_interval: 0

puzzles:
  chiton:
    tile_factor: 3
    heuristic: zero
  amphipod:
    use_heuristic: false

logging:
  level: INFO
"""
        (config_dir / "config.yaml").write_text(config_content)
        return config_dir

    def test_config_manager_initialization(self, temp_config_dir):
        """Test ConfigManager initialization."""
        manager = ConfigManager(temp_config_dir)
        assert manager.config_dir == temp_config_dir.resolve()
        assert manager.config is None

    def test_missing_config_dir(self, tmp_path):
        """Test a missing directory raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "nope")

    def test_load_config_basic(self, temp_config_dir):
        """Test basic configuration loading."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config()

        assert isinstance(config, DictConfig)
        assert config.solver.name == "test-solver"
        assert config.search.queue == "sorted"
        assert config.search.max_nodes_expanded == 1000
        assert config.puzzles.chiton.heuristic == "zero"
        assert config.puzzles.amphipod.use_heuristic is False

    def test_load_config_with_overrides(self, temp_config_dir):
        """Test configuration loading with overrides."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config(overrides=[
            "search.queue=heap",
            "puzzles.chiton.tile_factor=5",
        ])

        assert config.search.queue == "heap"
        assert config.puzzles.chiton.tile_factor == 5

    def test_invalid_override_fails_validation(self, temp_config_dir):
        """Test overrides that break validation raise."""
        manager = ConfigManager(temp_config_dir)
        with pytest.raises(ConfigValidationError):
            manager.load_config(overrides=["search.queue=fibonacci"])

    def test_get_and_set_parameter(self, temp_config_dir):
        """Test parameter access with dot notation."""
        manager = ConfigManager(temp_config_dir)

        with pytest.raises(RuntimeError):
            manager.get_parameter("search.queue")

        manager.load_config()
        assert manager.get_parameter("search.log_interval") == 0
        assert manager.get_parameter("search.missing", "fallback") == "fallback"

        manager.set_parameter("search.log_interval", 10)
        assert manager.get_parameter("search.log_interval") == 10

    def test_set_new_parameter_on_composed_config(self, temp_config_dir):
        """Test keys missing from the composed config can still be added."""
        manager = ConfigManager(temp_config_dir)
        manager.load_config()

        manager.set_parameter("search.extra_limit", 25)
        assert manager.get_parameter("search.extra_limit") == 25
        assert manager.get_parameter("search.queue") == "sorted"

    def test_global_config(self, temp_config_dir):
        """Test loading sets the global configuration."""
        config = load_config(config_dir=temp_config_dir)
        assert get_config() is config
        assert get_parameter("solver.data_dir") == "inputs"
        assert get_parameter("solver.nothing", 7) == 7


class TestDefaultConfig:
    """Test the packaged and built-in defaults."""

    def test_project_config_loads(self):
        """Test conf/config.yaml loads and validates."""
        config = load_config(config_dir=default_config_dir())
        assert config.search.queue == "heap"
        assert config.puzzles.chiton.tile_factor == 5

    def test_defaults_mirror_yaml(self):
        """Test the built-in defaults match conf/config.yaml."""
        on_disk = OmegaConf.to_container(OmegaConf.load(default_config_dir() / "config.yaml"))
        assert on_disk == DEFAULTS

    def test_default_config_overrides(self):
        """Test dotlist overrides on the built-in defaults."""
        config = default_config(["search.queue=sorted", "search.max_nodes_expanded=100"])
        assert config.search.queue == "sorted"
        assert config.search.max_nodes_expanded == 100
        assert config.solver.data_dir == "data"

    def test_default_config_invalid_override(self):
        """Test invalid overrides on defaults raise."""
        with pytest.raises(ConfigValidationError):
            default_config(["puzzles.chiton.tile_factor=0"])


class TestConfigValidation:
    """Test configuration validation."""

    @pytest.fixture
    def valid_config(self):
        return OmegaConf.create(DEFAULTS)

    def test_valid_config(self, valid_config):
        """Test a valid configuration passes."""
        validate_config(valid_config)

    @pytest.mark.parametrize('key, value', [
        ("solver.data_dir", ""),
        ("search.queue", "fibonacci"),
        ("search.max_nodes_expanded", -5),
        ("search.log_interval", "often"),
        ("puzzles.chiton.tile_factor", 0),
        ("puzzles.chiton.heuristic", "euclidean"),
        ("puzzles.amphipod.use_heuristic", "maybe"),
        ("logging.level", "LOUD"),
        ("search.max_nodes_expanded", True),
        ("search.log_interval", False),
        ("puzzles.chiton.tile_factor", True),
    ])
    def test_invalid_values(self, valid_config, key, value):
        """Test each invalid value is reported."""
        OmegaConf.update(valid_config, key, value, merge=False)
        with pytest.raises(ConfigValidationError):
            validate_config(valid_config)

    def test_missing_sections_allowed(self):
        """Test sections that are absent fall back to defaults."""
        validate_config(OmegaConf.create({'search': {'queue': 'sorted'}}))
