"""Tests for config loading and get/set."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tourweather.config.loader import get_config_value, load_config, set_config_value
from tourweather.config.schema import AppConfig
from tourweather.models.common import Language


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.geocoder.user_agent == "test-agent/1.0"
        assert config.forecast.api_key == "test-key"
        assert config.forecast.max_days == 5
        assert config.pipeline.default_language == Language.ENGLISH

    def test_unset_sections_keep_defaults(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.geocoder.country_codes == "vn"
        assert config.pipeline.max_cities == 3
        assert config.pipeline.fallback_city == "da-nang"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == AppConfig()

    def test_no_path_uses_defaults(self):
        assert load_config(None) == AppConfig()

    def test_unknown_key_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("pipeline:\n  bogus: 1\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_city_cap_above_three_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        path.write_text("pipeline:\n  max_cities: 5\n")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_repo_default_config(self):
        path = Path(__file__).parents[3] / "ops" / "configs" / "default.yaml"
        config = load_config(path)
        assert config.forecast.max_days == 6
        assert config.pipeline.default_language == Language.VIETNAMESE


class TestGetConfigValue:
    def test_dotted_key(self, default_config: AppConfig):
        assert get_config_value(default_config, "pipeline.max_cities") == 3

    def test_top_level(self, default_config: AppConfig):
        val = get_config_value(default_config, "geocoder")
        assert val.country_codes == "vn"

    def test_invalid_key(self, default_config: AppConfig):
        with pytest.raises(KeyError):
            get_config_value(default_config, "nonexistent.key")


class TestSetConfigValue:
    def test_set_and_revalidate(self, default_config: AppConfig):
        new_config = set_config_value(default_config, "forecast.units", "imperial")
        assert new_config.forecast.units == "imperial"
        assert default_config.forecast.units == "metric"

    def test_set_string_coercion(self, default_config: AppConfig):
        new_config = set_config_value(default_config, "pipeline.max_cities", "2")
        assert new_config.pipeline.max_cities == 2

    def test_invalid_value_raises(self, default_config: AppConfig):
        with pytest.raises(ValidationError):
            set_config_value(default_config, "forecast.max_days", "0")

    def test_unknown_leaf_raises(self, default_config: AppConfig):
        with pytest.raises(KeyError):
            set_config_value(default_config, "pipeline.nope", "1")
