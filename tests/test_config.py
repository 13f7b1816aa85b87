"""
Tests for configuration defaults and environment overrides.
"""

import os

import pytest

from featurescout.config import DiscoveryConfig, get_config
from featurescout.utils import ValidationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Removes FEATURESCOUT_* variables set outside the test."""
    for key in list(os.environ):
        if key.startswith("FEATURESCOUT_"):
            monkeypatch.delenv(key)


class TestDefaults:
    def test_defaults(self):
        config = DiscoveryConfig()

        assert config.visibility_timeout_ms == 1000
        assert config.settle_delay_ms == 500
        assert config.revealed_timeout_ms == 500
        assert config.dynamic_probe_limit == 5
        assert config.tooltip_probe_limit == 10
        assert config.step_delay_ms == 100
        assert config.fallback_locator == "button:first-of-type"
        assert config.text_selector_max_length == 30
        assert config.navigation_text_max_length == 50
        assert config.concurrent_discovery is False

    def test_to_dict(self):
        data = DiscoveryConfig(step_delay_ms=0).to_dict()

        assert data["step_delay_ms"] == 0
        assert data["screenshot_dir"] == "test-screenshots"

    @pytest.mark.parametrize("kwargs", [
        {"visibility_timeout_ms": 0},
        {"settle_delay_ms": -1},
        {"dynamic_probe_limit": -5},
        {"text_selector_max_length": 0},
        {"fallback_locator": "  "},
        {"screenshot_dir": ""},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValidationError):
            DiscoveryConfig(**kwargs)


class TestFromEnv:
    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("FEATURESCOUT_VISIBILITY_TIMEOUT_MS", "2500")
        monkeypatch.setenv("FEATURESCOUT_CONCURRENT_DISCOVERY", "yes")
        monkeypatch.setenv("FEATURESCOUT_SCREENSHOT_DIR", str(tmp_path))

        config = get_config()

        assert config.visibility_timeout_ms == 2500
        assert config.concurrent_discovery is True
        assert config.screenshot_dir == str(tmp_path)
        assert config.settle_delay_ms == 500

    def test_env_file(self, monkeypatch, tmp_path):
        env_file = tmp_path / ".env"
        # load_dotenv writes straight into os.environ; monkeypatch clears these on teardown
        monkeypatch.delenv("FEATURESCOUT_DYNAMIC_PROBE_LIMIT", raising=False)
        monkeypatch.delenv("FEATURESCOUT_HEADLESS", raising=False)
        env_file.write_text("FEATURESCOUT_DYNAMIC_PROBE_LIMIT=2\nFEATURESCOUT_HEADLESS=false\n")

        config = DiscoveryConfig.from_env(str(env_file))

        assert config.dynamic_probe_limit == 2
        assert config.headless is False

    def test_bad_integer(self, monkeypatch):
        monkeypatch.setenv("FEATURESCOUT_STEP_DELAY_MS", "fast")

        with pytest.raises(ValidationError, match="FEATURESCOUT_STEP_DELAY_MS"):
            DiscoveryConfig.from_env()

    def test_bad_boolean(self, monkeypatch):
        monkeypatch.setenv("FEATURESCOUT_HEADLESS", "maybe")

        with pytest.raises(ValidationError, match="boolean"):
            DiscoveryConfig.from_env()

    def test_out_of_range_value(self, monkeypatch):
        monkeypatch.setenv("FEATURESCOUT_TOOLTIP_PROBE_LIMIT", "-1")

        with pytest.raises(ValidationError):
            DiscoveryConfig.from_env()
