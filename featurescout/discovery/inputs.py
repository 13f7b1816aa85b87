"""Form input discovery."""

from featurescout.discovery.base_discoverer import BaseDiscoverer, non_empty
from featurescout.discovery.selector import SelectorSynthesizer
from featurescout.driver import ElementHandle, PageDriver
from featurescout.models import Feature, FeatureCategory


class InputDiscoverer(BaseDiscoverer):
    """
    Finds text-like inputs, checkboxes, radios, ranges and textareas.

    Native <select> elements are left to the dropdown discoverer.
    """

    category = FeatureCategory.INPUT
    default_name = "Input"
    patterns = (
        'input[type="text"]',
        'input[type="email"]',
        'input[type="password"]',
        'input[type="number"]',
        'input[type="search"]',
        'input[type="tel"]',
        'input[type="url"]',
        'input[type="date"]',
        'input[type="time"]',
        'input[type="datetime-local"]',
        'input[type="checkbox"]',
        'input[type="radio"]',
        'input[type="range"]',
        "textarea",
        '[contenteditable="true"]',
    )

    async def build_feature(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        locator: str,
    ) -> Feature:
        placeholder = await element.get_attribute("placeholder")
        input_type = await element.get_attribute("type") or "text"
        name = await element.get_attribute("name")
        element_id = await element.get_attribute("id")
        editable = await element.get_attribute("contenteditable")

        label = ""
        if not (placeholder and placeholder.strip()):
            label = await synthesizer.find_label(element)

        return Feature(
            name=(placeholder or "").strip() or label or f"{self.default_name} ({input_type})",
            category=self.category,
            locator=locator,
            attributes=non_empty(
                type=input_type, placeholder=placeholder, name=name, id=element_id, contenteditable=editable
            ),
            allowed_actions=self.default_actions(),
        )
