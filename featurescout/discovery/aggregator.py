"""
Aggregation of category discoverers.

Runs every discoverer against the page, concatenates their features
in a fixed category order and removes duplicates by locator.
"""

from typing import Optional

from featurescout.config import DiscoveryConfig
from featurescout.discovery.base_discoverer import BaseDiscoverer
from featurescout.discovery.buttons import ButtonDiscoverer
from featurescout.discovery.components import (
    ChartDiscoverer,
    CustomComponentDiscoverer,
    ModalDiscoverer,
    PanelDiscoverer,
    TableDiscoverer,
)
from featurescout.discovery.inputs import InputDiscoverer
from featurescout.discovery.navigation import (
    DropdownDiscoverer,
    MenuDiscoverer,
    TabDiscoverer,
)
from featurescout.driver import PageDriver
from featurescout.models import (
    ActionKind,
    DiscoveryPass,
    ElementOutcome,
    Feature,
    FeatureCategory,
)
from featurescout.utils import gather_with_errors, get_logger

logger = get_logger(__name__)

# Elements that typically appear only after hovering navigation
REVEALED_PATTERNS = (
    ".dropdown-menu:visible",
    ".submenu:visible",
    '[class*="popup"]:visible',
    '[class*="overlay"]:visible',
    '[class*="modal"]:visible',
)

DYNAMIC_NAME_MAX_LENGTH = 50


def default_discoverers(config: Optional[DiscoveryConfig] = None) -> list[BaseDiscoverer]:
    """Discoverers in the order their features are merged."""
    return [
        ButtonDiscoverer(config),
        InputDiscoverer(config),
        MenuDiscoverer(config),
        PanelDiscoverer(config),
        ChartDiscoverer(config),
        ModalDiscoverer(config),
        TableDiscoverer(config),
        CustomComponentDiscoverer(config),
        DropdownDiscoverer(config),
        TabDiscoverer(config),
    ]


def is_well_formed(feature) -> bool:
    """True for a Feature carrying name, category, locator and actions."""
    if not isinstance(feature, Feature):
        return False
    return bool(
        feature.name
        and feature.name.strip()
        and feature.category
        and feature.locator
        and feature.allowed_actions
    )


def is_navigation_like(feature: Feature) -> bool:
    return (
        feature.category == FeatureCategory.MENU
        or "nav" in feature.locator
        or "nav" in feature.attributes.get("class", "")
    )


class DiscoveryAggregator:
    """
    Combines the output of all category discoverers.

    Merge logic:
    1. Discoverers run in a fixed order (concurrently only on request)
    2. Outputs are concatenated in that same order
    3. The first feature seen for a locator wins, so an element keeps
       the category of whichever discoverer found it first
    4. Malformed entries are dropped
    """

    def __init__(
        self,
        discoverers: Optional[list[BaseDiscoverer]] = None,
        config: Optional[DiscoveryConfig] = None,
    ):
        self.config = config or DiscoveryConfig()
        self.discoverers = discoverers if discoverers is not None else default_discoverers(self.config)
        self.last_skipped: list[ElementOutcome] = []

    async def discover(self, page: PageDriver, concurrent: Optional[bool] = None) -> list[Feature]:
        """
        Runs every discoverer and returns the deduplicated features.

        Args:
            page: Page to inspect
            concurrent: Run discoverers concurrently; defaults to the config

        Raises:
            Any error raised by a discoverer's base queries.
        """
        if concurrent is None:
            concurrent = self.config.concurrent_discovery

        logger.info(f"Starting feature discovery with {len(self.discoverers)} discoverer(s)")

        if concurrent:
            passes = await gather_with_errors(
                *(d.discover(page) for d in self.discoverers),
                return_exceptions=False,
            )
        else:
            passes = []
            for discoverer in self.discoverers:
                passes.append(await discoverer.discover(page))

        features = self.merge(passes)
        logger.info(f"Discovery complete: {len(features)} feature(s)")
        return features

    def merge(self, passes: list[DiscoveryPass]) -> list[Feature]:
        """Concatenates passes in order, keeping the first feature per locator."""
        merged = []
        seen_locators = set()
        skipped = []

        for discovery_pass in passes:
            skipped.extend(discovery_pass.skipped)
            for feature in discovery_pass.features:
                if not is_well_formed(feature):
                    logger.debug(f"Dropped malformed feature from {discovery_pass.category.value}")
                    continue
                if feature.locator in seen_locators:
                    continue
                seen_locators.add(feature.locator)
                merged.append(feature)

        self.last_skipped = skipped
        return merged

    async def discover_dynamic_features(
        self,
        page: PageDriver,
        features: list[Feature],
    ) -> list[Feature]:
        """
        Reveals features that only appear on interaction.

        Adds tooltip text to buttons, then hovers the first few
        navigation-like features and looks for dropdowns, submenus,
        popups and overlays that became visible. Hovers run one at a
        time; a failure on one item does not stop the others.
        """
        logger.info("Discovering dynamic features through interaction")

        button_discoverer = self._button_discoverer()
        buttons = [f for f in features if f.category == FeatureCategory.BUTTON]
        if buttons:
            await button_discoverer.discover_tooltips(page, buttons)

        seen_locators = {f.locator for f in features}
        dynamic_features = []

        nav_items = [f for f in features if is_navigation_like(f)]
        for nav in nav_items[:self.config.dynamic_probe_limit]:
            try:
                element = page.query(nav.locator)
                if not await element.is_visible():
                    continue
                await element.hover()
                await page.wait(self.config.settle_delay_ms)
            except Exception as e:
                logger.warning(f"Hover probe failed for {nav.locator}: {e}")
                continue

            for feature in await self._check_revealed(page):
                if feature.locator in seen_locators:
                    continue
                seen_locators.add(feature.locator)
                dynamic_features.append(feature)

        logger.info(f"Found {len(dynamic_features)} dynamic feature(s)")
        return dynamic_features

    async def _check_revealed(self, page: PageDriver) -> list[Feature]:
        revealed = []

        for pattern in REVEALED_PATTERNS:
            try:
                element = page.query(pattern).first()
                if not await element.is_visible(timeout_ms=self.config.revealed_timeout_ms):
                    continue
                text = (await element.text_content() or "").strip()
            except Exception as e:
                logger.debug(f"Revealed-element check failed for {pattern}: {e}")
                continue

            logger.debug(f"Discovered dynamic element: {text[:DYNAMIC_NAME_MAX_LENGTH]}")
            revealed.append(Feature(
                name=text[:DYNAMIC_NAME_MAX_LENGTH] or "Dynamic Element",
                category=FeatureCategory.OTHER,
                locator=pattern,
                sample_text=text or None,
                allowed_actions=[ActionKind.CLICK, ActionKind.SCREENSHOT],
            ))

        return revealed

    def _button_discoverer(self) -> ButtonDiscoverer:
        for discoverer in self.discoverers:
            if isinstance(discoverer, ButtonDiscoverer):
                return discoverer
        return ButtonDiscoverer(self.config)
