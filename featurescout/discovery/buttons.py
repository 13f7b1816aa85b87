"""Button discovery and tooltip enrichment."""

from typing import Optional

from featurescout.discovery.base_discoverer import BaseDiscoverer, non_empty
from featurescout.discovery.selector import SelectorSynthesizer
from featurescout.driver import ElementHandle, PageDriver
from featurescout.models import Feature, FeatureCategory
from featurescout.utils import get_logger

logger = get_logger(__name__)

TOOLTIP_PATTERN = '[role="tooltip"], .tooltip, [class*="tooltip"]'
TOOLTIP_TIMEOUT_MS = 500


def button_name(
    text: Optional[str],
    title: Optional[str],
    aria_label: Optional[str],
    default: str = "Button",
) -> str:
    """First non-empty of text, title, aria-label, else default."""
    for candidate in (text, title, aria_label):
        if candidate and candidate.strip():
            return candidate.strip()
    return default


class ButtonDiscoverer(BaseDiscoverer):
    """Finds clickable buttons, including links and inputs styled as buttons."""

    category = FeatureCategory.BUTTON
    default_name = "Button"
    patterns = (
        "button",
        '[role="button"]',
        "a.btn",
        "a.button",
        '[class*="button"]',
        '[class*="btn"]',
        'input[type="button"]',
        'input[type="submit"]',
        "[onclick]",
    )

    async def build_feature(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        locator: str,
    ) -> Feature:
        text = (await element.text_content() or "").strip()
        title = await element.get_attribute("title")
        aria_label = await element.get_attribute("aria-label")
        class_name = await element.get_attribute("class")

        return Feature(
            name=button_name(text, title, aria_label, self.default_name),
            category=self.category,
            locator=locator,
            sample_text=text or None,
            attributes=non_empty(title=title, aria_label=aria_label, **{"class": class_name}),
            allowed_actions=self.default_actions(),
        )

    async def discover_tooltips(self, page: PageDriver, buttons: list[Feature]) -> None:
        """
        Hovers buttons and records any tooltip that appears.

        Bounded by tooltip_probe_limit. The text is stored under
        attributes["tooltip"]; failures on one button are skipped.
        """
        for button in buttons[:self.config.tooltip_probe_limit]:
            try:
                element = page.query(button.locator)
                if not await element.is_visible():
                    continue
                await element.hover()

                tooltip = page.query(TOOLTIP_PATTERN).first()
                if await tooltip.is_visible(timeout_ms=TOOLTIP_TIMEOUT_MS):
                    text = (await tooltip.text_content() or "").strip()
                    button.attributes["tooltip"] = text
                    logger.debug(f"Found tooltip for {button.name}: {text}")
            except Exception as e:
                logger.warning(f"Tooltip probe failed for {button.locator}: {e}")
