"""
Navigation discovery: menus, dropdowns and tab groups.
"""

from featurescout.discovery.base_discoverer import BaseDiscoverer, non_empty
from featurescout.discovery.selector import SelectorSynthesizer
from featurescout.driver import ElementHandle, PageDriver
from featurescout.models import ActionKind, Feature, FeatureCategory
from featurescout.utils import get_logger, truncate_string

logger = get_logger(__name__)

MENU_ITEM_PATTERNS = ("li", "a", '[role="menuitem"]', ".menu-item", '[class*="item"]')
OPTION_PATTERN = 'option, [role="option"]'
TAB_LABEL_PATTERN = '[role="tab"], li, a'
SUMMARY_MAX_LENGTH = 100


class MenuDiscoverer(BaseDiscoverer):
    """
    Finds navigation containers and their items.

    Containers are always named "Navigation"; their text is kept
    separately as sample_text.
    """

    category = FeatureCategory.MENU
    default_name = "Navigation"
    patterns = (
        '[role="menu"]',
        '[role="menubar"]',
        '[role="menuitem"]',
        "nav",
        ".menu",
        ".navbar",
        '[class*="menu"]',
        '[class*="nav"]',
        "ul.dropdown",
        ".dropdown-menu",
    )

    async def build_feature(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        locator: str,
    ) -> Feature:
        text = (await element.text_content() or "").strip()
        class_name = await element.get_attribute("class")
        items = await self._discover_items(synthesizer, element)

        return Feature(
            name=self.default_name,
            category=self.category,
            locator=locator,
            sample_text=text[:self.config.navigation_text_max_length] or None,
            attributes=non_empty(**{"class": class_name}),
            children=items,
            allowed_actions=self.default_actions(),
        )

    async def _discover_items(
        self,
        synthesizer: SelectorSynthesizer,
        menu: ElementHandle,
    ) -> list[Feature]:
        items = []
        seen = set()

        for pattern in MENU_ITEM_PATTERNS:
            for element in await menu.query(pattern).all():
                try:
                    locator = await synthesizer.synthesize(element)
                    if locator in seen:
                        continue
                    text = (await element.text_content() or "").strip()
                    href = await element.get_attribute("href")
                except Exception as e:
                    logger.debug(f"Skipped menu item: {e}")
                    continue

                seen.add(locator)
                items.append(Feature(
                    name=text[:self.config.navigation_text_max_length] or "Menu Item",
                    category=FeatureCategory.OTHER,
                    locator=locator,
                    sample_text=text or None,
                    attributes=non_empty(href=href),
                    allowed_actions=[ActionKind.CLICK],
                ))

        return items


class DropdownDiscoverer(BaseDiscoverer):
    """Finds native selects and ARIA comboboxes/listboxes."""

    category = FeatureCategory.DROPDOWN
    default_name = "Dropdown"
    patterns = (
        "select",
        '[role="combobox"]',
        '[role="listbox"]',
        ".dropdown",
        '[class*="dropdown"]',
        ".select",
        '[class*="select"]',
        '[aria-haspopup="listbox"]',
    )

    async def build_feature(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        locator: str,
    ) -> Feature:
        label = await synthesizer.find_label(element)
        tag = (await element.tag_name()).lower()
        options = []
        values = []
        for option in await element.query(OPTION_PATTERN).all():
            text = (await option.text_content() or "").strip()
            # an <option> without a value attribute submits its text
            value = await option.get_attribute("value")
            if text:
                options.append(text)
            values.append(text if value is None else value)

        return Feature(
            name=label or self.default_name,
            category=self.category,
            locator=locator,
            attributes=non_empty(
                tag=tag,
                options=truncate_string(", ".join(options), SUMMARY_MAX_LENGTH),
                option_values=truncate_string(", ".join(v for v in values if v), SUMMARY_MAX_LENGTH),
                option_value=next((v for v in values if v), None),
            ),
            allowed_actions=self.default_actions(),
        )


class TabDiscoverer(BaseDiscoverer):
    """Finds tab lists and tab-like navigation."""

    category = FeatureCategory.TAB
    default_name = "Tab Navigation"
    patterns = (
        '[role="tablist"]',
        '[role="tab"]',
        ".tabs",
        '[class*="tab"]',
        ".nav-tabs",
        '[data-toggle="tab"]',
    )

    async def build_feature(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        locator: str,
    ) -> Feature:
        labels = [t.strip() for t in await element.query(TAB_LABEL_PATTERN).all_text_contents()]
        labels = [t for t in labels if t]

        return Feature(
            name=self.default_name,
            category=self.category,
            locator=locator,
            attributes=non_empty(tabs=truncate_string(", ".join(labels), SUMMARY_MAX_LENGTH)),
            allowed_actions=self.default_actions(),
        )
