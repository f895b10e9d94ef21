"""Tests for the settings model."""

import pytest
import yaml
from pydantic import ValidationError

from ieltsmark.config.settings import MarkingConfig, Settings


class TestSettings:
    def test_defaults(self, tmp_path):
        settings = Settings.load(tmp_path / "missing.yaml")
        assert settings.marking.enforce_word_limits is True
        assert settings.marking.default_max_words is None

    def test_load_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("IELTSMARK_LOG_LEVEL", raising=False)
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"marking": {"default_max_words": 3}, "log_level": "debug"}))
        settings = Settings.load(path)
        assert settings.marking.default_max_words == 3
        assert settings.get_log_level() == "DEBUG"

    def test_env_overrides_log_level(self, monkeypatch):
        monkeypatch.setenv("IELTSMARK_LOG_LEVEL", "info")
        assert Settings().get_log_level() == "INFO"

    def test_save(self, tmp_path):
        settings = Settings(data_dir=tmp_path / "data", marking=MarkingConfig(default_max_numbers=1))
        path = settings.save()
        assert path == tmp_path / "data" / "config.yaml"
        assert Settings.load(path).marking.default_max_numbers == 1

    def test_rejects_negative_limit(self):
        with pytest.raises(ValidationError):
            MarkingConfig(default_max_words=-1)
