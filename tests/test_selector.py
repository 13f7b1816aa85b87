"""
Tests for locator synthesis and label lookup.
"""

import pytest

from featurescout.config import DiscoveryConfig
from featurescout.discovery import SelectorSynthesizer
from tests.fakes import FakeNode, FakePage


async def synthesize(node: FakeNode, page: FakePage = None, config: DiscoveryConfig = None) -> str:
    page = page or FakePage()
    page.dom.setdefault("probe", [node])
    element = (await page.query("probe").all())[0]
    return await SelectorSynthesizer(page, config).synthesize(element)


class TestCascade:
    """Priority order of the locator cascade"""

    @pytest.mark.asyncio
    async def test_test_id_wins(self):
        node = FakeNode(tag="button", attrs={"data-testid": "save", "id": "save-btn", "class": "btn"})
        assert await synthesize(node) == '[data-testid="save"]'

    @pytest.mark.asyncio
    async def test_id_before_class(self):
        node = FakeNode(tag="button", attrs={"id": "login-modal", "class": "modal dialog"})
        assert await synthesize(node) == "#login-modal"

    @pytest.mark.asyncio
    async def test_id_that_is_not_an_identifier_uses_attribute_form(self):
        node = FakeNode(attrs={"id": "1st:item"})
        assert await synthesize(node) == '[id="1st:item"]'

    @pytest.mark.asyncio
    async def test_unique_class_selector_drops_colon_tokens(self):
        node = FakeNode(attrs={"class": "card hover:bg-blue-500 primary"})
        page = FakePage({".card.primary": [node]})
        assert await synthesize(node, page) == ".card.primary"

    @pytest.mark.asyncio
    async def test_ambiguous_class_falls_through_to_role(self):
        node = FakeNode(attrs={"class": "item", "role": "button", "aria-label": "Close"})
        page = FakePage({".item": [node, FakeNode(attrs={"class": "item"})]})
        assert await synthesize(node, page) == '[role="button"][aria-label="Close"]'

    @pytest.mark.asyncio
    async def test_only_colon_classes_are_ignored(self):
        node = FakeNode(tag="a", attrs={"class": "hover:underline"}, text="Docs")
        assert await synthesize(node) == 'a:has-text("Docs")'

    @pytest.mark.asyncio
    async def test_role_requires_aria_label(self):
        node = FakeNode(tag="div", attrs={"role": "button"})
        assert await synthesize(node) == "probe >> nth=0"

    @pytest.mark.asyncio
    async def test_button_text_is_truncated(self):
        node = FakeNode(tag="button", text="  " + "X" * 40 + "  ")
        assert await synthesize(node) == f'button:has-text("{"X" * 30}")'

    @pytest.mark.asyncio
    async def test_text_truncation_follows_config(self):
        node = FakeNode(tag="button", text="Submit order")
        config = DiscoveryConfig(text_selector_max_length=6)
        assert await synthesize(node, config=config) == 'button:has-text("Submit")'

    @pytest.mark.asyncio
    async def test_text_quotes_are_escaped(self):
        node = FakeNode(tag="a", text='Say "hi"')
        assert await synthesize(node) == 'a:has-text("Say \\"hi\\"")'

    @pytest.mark.asyncio
    async def test_text_tier_only_for_buttons_and_links(self):
        node = FakeNode(tag="span", text="Hello")
        assert await synthesize(node) == "probe >> nth=0"

    @pytest.mark.asyncio
    async def test_empty_button_uses_native_selector(self):
        node = FakeNode(tag="button", text="   ")
        assert await synthesize(node) == "probe >> nth=0"


class TestFallback:
    """Lookup errors never escape synthesis"""

    @pytest.mark.asyncio
    async def test_attribute_error_gives_fallback(self):
        node = FakeNode(tag="button", errors={"get_attribute": RuntimeError("detached")})
        assert await synthesize(node) == "button:first-of-type"

    @pytest.mark.asyncio
    async def test_fallback_is_configurable(self):
        node = FakeNode(errors={"tag_name": RuntimeError("detached")})
        config = DiscoveryConfig(fallback_locator="body")
        assert await synthesize(node, config=config) == "body"


class TestUniqueness:
    """is_unique counts matches on the page"""

    @pytest.mark.asyncio
    async def test_is_unique(self):
        page = FakePage({"#one": [FakeNode()], ".many": [FakeNode(), FakeNode()]})
        synthesizer = SelectorSynthesizer(page)

        assert await synthesizer.is_unique("#one") is True
        assert await synthesizer.is_unique(".many") is False
        assert await synthesizer.is_unique(".none") is False

    @pytest.mark.asyncio
    async def test_id_locator_reselects_element(self):
        node = FakeNode(attrs={"id": "search"})
        page = FakePage({"#search": [node]})

        locator = await synthesize(node, page)

        assert await page.query(locator).count() == 1


class TestFindLabel:
    """Label lookup order for form controls"""

    async def label_of(self, node: FakeNode, page: FakePage = None) -> str:
        page = page or FakePage()
        page.dom["probe"] = [node]
        element = (await page.query("probe").all())[0]
        return await SelectorSynthesizer(page).find_label(element)

    @pytest.mark.asyncio
    async def test_label_for_id(self):
        node = FakeNode(tag="input", attrs={"id": "email"})
        page = FakePage({'label[for="email"]': [FakeNode(tag="label", text=" Email address ")]})
        assert await self.label_of(node, page) == "Email address"

    @pytest.mark.asyncio
    async def test_ancestor_label(self):
        node = FakeNode(
            tag="input",
            children={"xpath=ancestor::label": [FakeNode(tag="label", text="Remember me")]},
        )
        assert await self.label_of(node) == "Remember me"

    @pytest.mark.asyncio
    async def test_aria_label_before_sibling(self):
        node = FakeNode(
            tag="input",
            attrs={"aria-label": "Quantity"},
            children={"xpath=preceding-sibling::label": [FakeNode(tag="label", text="Qty")]},
        )
        assert await self.label_of(node) == "Quantity"

    @pytest.mark.asyncio
    async def test_preceding_sibling(self):
        node = FakeNode(
            tag="input",
            children={"xpath=preceding-sibling::label": [FakeNode(tag="label", text="Qty")]},
        )
        assert await self.label_of(node) == "Qty"

    @pytest.mark.asyncio
    async def test_missing_or_failing_label_is_empty(self):
        assert await self.label_of(FakeNode(tag="input")) == ""
        failing = FakeNode(tag="input", errors={"get_attribute": RuntimeError("gone")})
        assert await self.label_of(failing) == ""
