"""
Structural component discovery: charts, panels, modals, tables and
custom widgets.

All components share one naming rule: the text of a contained
heading, else the element id, else the category's literal name.
"""

from featurescout.discovery.base_discoverer import BaseDiscoverer, non_empty
from featurescout.discovery.selector import SelectorSynthesizer
from featurescout.driver import ElementHandle, PageDriver
from featurescout.models import Feature, FeatureCategory
from featurescout.utils import get_logger

logger = get_logger(__name__)

HEADING_PATTERN = 'h1, h2, h3, h4, h5, h6, [class*="title"], [class*="header"]'


class ComponentDiscoverer(BaseDiscoverer):
    """Base for structural components named by heading or id."""

    heading_pattern: str = HEADING_PATTERN

    async def build_feature(
        self,
        page: PageDriver,
        synthesizer: SelectorSynthesizer,
        element: ElementHandle,
        locator: str,
    ) -> Feature:
        element_id = await element.get_attribute("id")
        class_name = await element.get_attribute("class")
        heading = await self.find_heading(element)

        feature = Feature(
            name=heading or (element_id or "").strip() or self.default_name,
            category=self.category,
            locator=locator,
            sample_text=heading or None,
            attributes=non_empty(id=element_id, **{"class": class_name}),
            allowed_actions=self.default_actions(),
        )
        await self.describe(element, feature)
        return feature

    async def find_heading(self, element: ElementHandle) -> str:
        """Text of the first contained heading, or empty."""
        try:
            headings = element.query(self.heading_pattern)
            if await headings.count() == 0:
                return ""
            return (await headings.first().text_content() or "").strip()
        except Exception as e:
            logger.debug(f"Heading lookup failed: {e}")
            return ""

    async def describe(self, element: ElementHandle, feature: Feature) -> None:
        """Adds category-specific attributes."""
        pass


class ChartDiscoverer(ComponentDiscoverer):
    category = FeatureCategory.CHART
    default_name = "Chart"
    patterns = (
        "canvas",
        "svg.chart",
        '[class*="chart"]',
        '[class*="graph"]',
        '[id*="chart"]',
        '[id*="graph"]',
        ".tradingview-widget-container",
        'iframe[src*="tradingview"]',
        "[data-chart]",
        ".highcharts-container",
    )


class PanelDiscoverer(ComponentDiscoverer):
    category = FeatureCategory.PANEL
    default_name = "Panel"
    patterns = (
        '[role="region"]',
        ".panel",
        ".card",
        ".widget",
        '[class*="panel"]',
        '[class*="card"]',
        '[class*="widget"]',
        "aside",
        "section",
        '[class*="sidebar"]',
        '[class*="drawer"]',
    )


class ModalDiscoverer(ComponentDiscoverer):
    category = FeatureCategory.MODAL
    default_name = "Modal"
    heading_pattern = 'h1, h2, h3, h4, h5, h6, [class*="title"]'
    patterns = (
        '[role="dialog"]',
        ".modal",
        ".dialog",
        '[class*="modal"]',
        '[class*="dialog"]',
        ".popup",
        '[class*="popup"]',
        ".overlay",
        '[aria-modal="true"]',
    )


class TableDiscoverer(ComponentDiscoverer):
    """Tables and grids; records column headers and row count."""

    category = FeatureCategory.TABLE
    default_name = "Table"
    patterns = (
        "table",
        '[role="table"]',
        '[role="grid"]',
        ".table",
        '[class*="table"]',
        ".grid",
        '[class*="grid"]',
        ".data-table",
        ".list-view",
    )

    async def describe(self, element: ElementHandle, feature: Feature) -> None:
        try:
            headers = [h.strip() for h in await element.query('th, [role="columnheader"]').all_text_contents()]
            rows = await element.query('tr, [role="row"]').count()
        except Exception as e:
            logger.debug(f"Table structure lookup failed for {feature.locator}: {e}")
            return

        headers = [h for h in headers if h]
        if headers:
            feature.attributes["headers"] = ", ".join(headers)
        feature.attributes["rows"] = str(rows)


class CustomComponentDiscoverer(ComponentDiscoverer):
    """Elements tagged for testing or marked as components/widgets."""

    category = FeatureCategory.OTHER
    default_name = "Custom Component"
    patterns = (
        "[data-testid]",
        "[data-test]",
        "[data-cy]",
        "[data-component]",
        "[data-widget]",
        '*[class*="component"]',
        '*[class*="widget"]',
        '*[id*="component"]',
        '*[id*="widget"]',
    )

    async def describe(self, element: ElementHandle, feature: Feature) -> None:
        test_id = await element.get_attribute("data-testid")
        if test_id:
            feature.attributes["data-testid"] = test_id
