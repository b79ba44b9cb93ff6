"""
Tests for the configuration module.
"""

import logging

from openrg.config import OpenRGConfig, setup_logging


class TestOpenRGConfig:
    """Tests for OpenRGConfig."""

    def test_defaults(self, monkeypatch):
        """Test default values."""
        monkeypatch.delenv("OPENRG_SEED", raising=False)
        monkeypatch.delenv("OPENRG_LOG_LEVEL", raising=False)
        cfg = OpenRGConfig()

        assert cfg.log_level == "INFO"
        assert cfg.default_strategy == "max"
        assert cfg.seed is None
        assert cfg.get_tolerance("violation") == 1e-6

    def test_environment(self, monkeypatch):
        """Test that environment variables set defaults."""
        monkeypatch.setenv("OPENRG_SEED", "42")
        monkeypatch.setenv("OPENRG_LOG_LEVEL", "debug")
        cfg = OpenRGConfig()

        assert cfg.seed == 42
        assert cfg.log_level == "DEBUG"

    def test_tolerances(self):
        """Test tolerance accessors."""
        cfg = OpenRGConfig()
        cfg.set_tolerance("violation", 1e-4)

        assert cfg.get_tolerance("violation") == 1e-4
        assert cfg.get_tolerance("unknown") == 1e-6

    def test_dict_roundtrip(self):
        """Test to_dict / from_dict."""
        cfg = OpenRGConfig(log_level="warning", default_strategy="random", seed=7)
        restored = OpenRGConfig.from_dict(cfg.to_dict())

        assert restored == cfg
        assert restored.log_level == "WARNING"

    def test_from_dict_keeps_default_tolerances(self):
        """Test that partial tolerances are merged with the defaults."""
        cfg = OpenRGConfig.from_dict({"tolerances": {"violation": 0.01}})

        assert cfg.get_tolerance("violation") == 0.01
        assert cfg.get_tolerance("integrality") == 1e-6

    def test_save_and_load(self, tmp_path):
        """Test writing and reading a config file."""
        path = tmp_path / "openrg.toml"
        cfg = OpenRGConfig(default_strategy="first", seed=3)
        cfg.set_tolerance("violation", 1e-5)
        cfg.save(path)

        loaded = OpenRGConfig.load(path)
        assert loaded.default_strategy == "first"
        assert loaded.seed == 3
        assert loaded.get_tolerance("violation") == 1e-5

    def test_load_missing_file(self, tmp_path, monkeypatch):
        """Test that a missing file gives the defaults."""
        monkeypatch.delenv("OPENRG_SEED", raising=False)
        cfg = OpenRGConfig.load(tmp_path / "absent.toml")
        assert cfg == OpenRGConfig()


def test_setup_logging(monkeypatch):
    """Test that setup_logging forwards the level to basicConfig."""
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: captured.update(kw))

    setup_logging("debug")
    assert captured["level"] == logging.DEBUG
