"""
Base class for category discoverers.

Defines the contract every discoverer follows: run its query
patterns against the page, analyse each match, and report a
DiscoveryPass with the features found and the elements skipped.
"""

from abc import ABC, abstractmethod
from typing import Optional

from featurescout.config import DiscoveryConfig
from featurescout.discovery.selector import SelectorSynthesizer
from featurescout.driver import ElementHandle, PageDriver
from featurescout.models import (
    DiscoveryPass,
    ElementOutcome,
    Feature,
    FeatureCategory,
    actions_for,
)
from featurescout.utils import get_logger

logger = get_logger(__name__)

SKIP_DUPLICATE = "duplicate locator"
SKIP_NOT_VISIBLE = "not visible"


class BaseDiscoverer(ABC):
    """
    Abstract discoverer for one feature category.

    Discoverers keep no state between runs: the set of locators
    already emitted lives only for the duration of one discover() call.
    """

    category: FeatureCategory = FeatureCategory.OTHER
    patterns: tuple[str, ...] = ()
    default_name: str = "Element"

    def __init__(self, config: Optional[DiscoveryConfig] = None):
        """
        Initializes the discoverer.

        Args:
            config: Timeouts and limits; defaults are used if omitted
        """
        self.config = config or DiscoveryConfig()

    @property
    def name(self) -> str:
        """Identifier used in logs."""
        return self.category.value

    async def discover(self, page: PageDriver) -> DiscoveryPass:
        """
        Runs every pattern against the page.

        Errors building a pattern's result set propagate; errors on a
        single element are recorded as skips.
        """
        synthesizer = SelectorSynthesizer(page, self.config)
        result = DiscoveryPass(category=self.category)
        emitted: set[str] = set()

        for pattern in self.patterns:
            elements = await page.query(pattern).all()
            for element in elements:
                outcome = await self._analyze(page, synthesizer, element, emitted)
                result.record(outcome)
                if outcome.is_ok:
                    logger.debug(f"Found {self.name}: {outcome.feature.name}")
                else:
                    logger.debug(f"Skipped {self.name} element ({outcome.skip_reason})")

        await self.enrich(page, synthesizer, result.features)
        logger.info(f"Found {len(result.features)} {self.name} feature(s), skipped {len(result.skipped)}")
        return result

    async def _analyze(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        emitted: set[str],
    ) -> ElementOutcome:
        locator = await synthesizer.synthesize(element)
        if locator in emitted:
            return ElementOutcome.skip(SKIP_DUPLICATE, locator)

        if not await self.is_visible(element):
            return ElementOutcome.skip(SKIP_NOT_VISIBLE, locator)

        try:
            feature = await self.build_feature(page, synthesizer, element, locator)
        except Exception as e:
            return ElementOutcome.skip(f"analysis failed: {e}", locator)

        emitted.add(locator)
        return ElementOutcome.ok(feature)

    async def is_visible(self, element: ElementHandle) -> bool:
        """Visibility with the configured timeout; errors count as hidden."""
        try:
            return await element.is_visible(timeout_ms=self.config.visibility_timeout_ms)
        except Exception:
            return False

    @abstractmethod
    async def build_feature(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        locator: str,
    ) -> Feature:
        """Turns a visible element into a Feature."""
        pass

    async def enrich(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        features: list[Feature],
    ) -> None:
        """
        Post-processing hook run after all patterns.

        May add attributes; must not change locators.
        """
        pass

    def default_actions(self) -> list:
        return actions_for(self.category)


def non_empty(**attributes: Optional[str]) -> dict[str, str]:
    """Keeps only attributes with a non-empty value."""
    return {k.replace("_", "-"): v for k, v in attributes.items() if v}
