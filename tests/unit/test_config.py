"""
Unit tests for configuration loading.
"""

import pytest

from noconflict.config import NoConflictConfig, load_config
from noconflict.errors import ConfigurationError


class TestLoadConfig:
    """Test YAML configuration handling."""

    def test_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        cfg = load_config()
        assert cfg.options.use_native is True
        assert cfg.options.ensure_defined is False
        assert cfg.preload == []

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "noconflict.yaml"
        path.write_text("options:\n  ensure_defined: true\npreload:\n  - jQuery\n  - $.fn\n")
        cfg = load_config(str(path))
        assert cfg.options.ensure_defined is True
        assert cfg.preload == ["jQuery", "$.fn"]

    def test_standard_location(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "noconflict.yaml").write_text("log_level: DEBUG\n")
        assert load_config().log_level == "DEBUG"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "out.yaml"
        NoConflictConfig(preload=["a"]).save_to_file(path)
        assert NoConflictConfig.load_from_file(path).preload == ["a"]

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_invalid_value_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("options:\n  use_native: [1, 2]\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))
