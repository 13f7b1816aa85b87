"""
Locator synthesis for discovered elements.

Turns an element handle into a selector string that re-selects it,
preferring attributes that survive re-renders over positional or
text-based forms.
"""

from typing import Optional

from featurescout.config import DiscoveryConfig
from featurescout.driver import ElementHandle, PageDriver
from featurescout.utils import css_escape, get_logger, is_css_identifier, quote_attribute

logger = get_logger(__name__)

TEXT_SELECTOR_TAGS = ("button", "a")


class SelectorSynthesizer:
    """
    Builds one locator per element through a fixed priority cascade.

    Order:
    1. data-testid
    2. id
    3. compound class selector (only if unique on the page)
    4. role + aria-label
    5. tag + text for buttons and links
    6. the driver's native selector
    Any lookup error yields the configured fallback locator.
    """

    def __init__(self, page: PageDriver, config: Optional[DiscoveryConfig] = None):
        self.page = page
        self.config = config or DiscoveryConfig()

    async def synthesize(self, element: ElementHandle) -> str:
        """Returns a locator for element. Never raises."""
        try:
            return await self._cascade(element)
        except Exception as e:
            logger.debug(f"Selector synthesis failed, using fallback: {e}")
            return self.config.fallback_locator

    async def is_unique(self, locator: str) -> bool:
        """True if locator matches exactly one element."""
        return await self.page.query(locator).count() == 1

    async def _cascade(self, element: ElementHandle) -> str:
        test_id = await element.get_attribute("data-testid")
        if test_id:
            return f'[data-testid="{quote_attribute(test_id)}"]'

        element_id = await element.get_attribute("id")
        if element_id:
            return self._id_selector(element_id)

        class_selector = await self._class_selector(element)
        if class_selector:
            return class_selector

        role_selector = await self._role_selector(element)
        if role_selector:
            return role_selector

        text_selector = await self._text_selector(element)
        if text_selector:
            return text_selector

        return element.native_selector()

    def _id_selector(self, element_id: str) -> str:
        if is_css_identifier(element_id):
            return f"#{element_id}"
        return f'[id="{quote_attribute(element_id)}"]'

    async def _class_selector(self, element: ElementHandle) -> Optional[str]:
        class_name = await element.get_attribute("class")
        if not class_name:
            return None

        # Tokens with a colon are utility/pseudo-state classes (hover:bg-blue-500)
        tokens = [c for c in class_name.split() if ":" not in c]
        if not tokens:
            return None

        selector = "." + ".".join(css_escape(c) for c in tokens)
        if await self.is_unique(selector):
            return selector
        return None

    async def _role_selector(self, element: ElementHandle) -> Optional[str]:
        role = await element.get_attribute("role")
        aria_label = await element.get_attribute("aria-label")

        if role and aria_label:
            return f'[role="{quote_attribute(role)}"][aria-label="{quote_attribute(aria_label)}"]'
        return None

    async def _text_selector(self, element: ElementHandle) -> Optional[str]:
        tag = (await element.tag_name()).lower()
        if tag not in TEXT_SELECTOR_TAGS:
            return None

        text = (await element.text_content() or "").strip()
        if not text:
            return None

        text = text[:self.config.text_selector_max_length]
        return f'{tag}:has-text("{quote_attribute(text)}")'

    async def find_label(self, element: ElementHandle) -> str:
        """
        Finds the human-readable label of a form control.

        Looks at, in order: <label for=id>, an ancestor <label>, the
        aria-label attribute, a preceding sibling <label>. Returns an
        empty string when none is found or a lookup fails.
        """
        try:
            element_id = await element.get_attribute("id")
            if element_id:
                label = await _first_text(self.page.query(f'label[for="{quote_attribute(element_id)}"]'))
                if label:
                    return label

            label = await _first_text(element.query("xpath=ancestor::label"))
            if label:
                return label

            aria_label = await element.get_attribute("aria-label")
            if aria_label and aria_label.strip():
                return aria_label.strip()

            label = await _first_text(element.query("xpath=preceding-sibling::label"))
            if label:
                return label

            return ""
        except Exception as e:
            logger.debug(f"Label lookup failed: {e}")
            return ""


async def _first_text(handle: ElementHandle) -> str:
    # count first so a missing element does not wait on a driver timeout
    if await handle.count() == 0:
        return ""
    return (await handle.first().text_content() or "").strip()
