"""Discovery pipeline configuration.

Centralized defaults for timeouts, probe limits and output paths.
Every value can be overridden through FEATURESCOUT_* environment
variables (a .env file is honored).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv

from featurescout.utils import (
    ValidationError,
    validate_in_range,
    validate_not_empty,
    validate_positive,
)

# =============================================================================
# TIMEOUTS & DELAYS (milliseconds)
# =============================================================================

# Per-element visibility check during discovery
VISIBILITY_TIMEOUT_MS = 1000

# Pause after hovering a navigation element
SETTLE_DELAY_MS = 500

# Visibility check for elements revealed by a hover
REVEALED_TIMEOUT_MS = 500

# Pause between executed test steps
STEP_DELAY_MS = 100

# Page navigation timeout
NAVIGATION_TIMEOUT_MS = 30000

# =============================================================================
# PROBE LIMITS
# =============================================================================

# Navigation features hovered during dynamic discovery
DYNAMIC_PROBE_LIMIT = 5

# Buttons hovered while looking for tooltips
TOOLTIP_PROBE_LIMIT = 10

# =============================================================================
# SELECTORS & NAMING
# =============================================================================

FALLBACK_LOCATOR = "button:first-of-type"
TEXT_SELECTOR_MAX_LENGTH = 30
NAVIGATION_TEXT_MAX_LENGTH = 50

# =============================================================================
# OUTPUT
# =============================================================================

SCREENSHOT_DIR = "test-screenshots"

ENV_PREFIX = "FEATURESCOUT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class DiscoveryConfig:
    """Runtime configuration for discovery and execution."""

    # Discovery
    visibility_timeout_ms: int = VISIBILITY_TIMEOUT_MS
    settle_delay_ms: int = SETTLE_DELAY_MS
    revealed_timeout_ms: int = REVEALED_TIMEOUT_MS
    dynamic_probe_limit: int = DYNAMIC_PROBE_LIMIT
    tooltip_probe_limit: int = TOOLTIP_PROBE_LIMIT
    concurrent_discovery: bool = False

    # Selectors
    fallback_locator: str = FALLBACK_LOCATOR
    text_selector_max_length: int = TEXT_SELECTOR_MAX_LENGTH
    navigation_text_max_length: int = NAVIGATION_TEXT_MAX_LENGTH

    # Execution
    step_delay_ms: int = STEP_DELAY_MS
    screenshot_dir: str = SCREENSHOT_DIR

    # Browser (used only when the runner launches its own browser)
    headless: bool = True
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS

    def __post_init__(self):
        """Validates fields after initialization."""
        validate_positive(self.visibility_timeout_ms, "visibility_timeout_ms")
        validate_positive(self.revealed_timeout_ms, "revealed_timeout_ms")
        validate_positive(self.navigation_timeout_ms, "navigation_timeout_ms")
        validate_in_range(self.settle_delay_ms, "settle_delay_ms", min_value=0)
        validate_in_range(self.step_delay_ms, "step_delay_ms", min_value=0)
        validate_in_range(self.dynamic_probe_limit, "dynamic_probe_limit", min_value=0)
        validate_in_range(self.tooltip_probe_limit, "tooltip_probe_limit", min_value=0)
        validate_positive(self.text_selector_max_length, "text_selector_max_length")
        validate_positive(self.navigation_text_max_length, "navigation_text_max_length")
        validate_not_empty(self.fallback_locator, "fallback_locator")
        validate_not_empty(self.screenshot_dir, "screenshot_dir")

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "DiscoveryConfig":
        """Build a config from FEATURESCOUT_* variables, falling back to defaults."""
        load_dotenv(env_file)
        overrides = {}
        for f in fields(cls):
            raw = os.environ.get(f"{ENV_PREFIX}{f.name.upper()}")
            if raw is None:
                continue
            overrides[f.name] = _parse_value(f.name, raw, f.type)
        return cls(**overrides)

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _parse_value(name: str, raw: str, type_name) -> object:
    # annotations are strings under `from __future__ import annotations`
    type_name = getattr(type_name, "__name__", type_name)
    if type_name == "bool":
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ValidationError(f"{ENV_PREFIX}{name.upper()} must be a boolean, got '{raw}'")
    if type_name == "int":
        try:
            return int(raw)
        except ValueError:
            raise ValidationError(f"{ENV_PREFIX}{name.upper()} must be an integer, got '{raw}'")
    return raw


def get_config() -> DiscoveryConfig:
    """Get the configuration for the current environment."""
    return DiscoveryConfig.from_env()
