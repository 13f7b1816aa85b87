"""
Page structure and accessibility analysis.

Counts landmark and interactive elements and computes a rough
accessibility score from ARIA and alt-text usage.
"""

from dataclasses import dataclass, field

from featurescout.driver import PageDriver
from featurescout.utils import get_logger

logger = get_logger(__name__)

LAYOUT_PATTERNS = {
    "headers": 'header, [role="banner"], .header',
    "navs": 'nav, [role="navigation"], .nav',
    "main_content": 'main, [role="main"], #main, .main',
    "asides": 'aside, [role="complementary"], .sidebar',
    "footers": 'footer, [role="contentinfo"], .footer',
}

INTERACTIVE_PATTERNS = {
    "forms": "form",
    "buttons": 'button, [role="button"], input[type="button"]',
    "links": "a[href]",
    "inputs": "input, textarea, select",
}

ACCESSIBILITY_PATTERNS = {
    "aria_labels": "[aria-label]",
    "aria_roles": "[role]",
    "alt_texts": "img[alt]",
    "tabindex_elements": "[tabindex]",
}


@dataclass
class PageStructure:
    """Landmark and interactive element counts for a page."""
    title: str
    layout: dict[str, int] = field(default_factory=dict)
    interactive: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {"title": self.title, "layout": self.layout, "interactive": self.interactive}

    @classmethod
    def from_dict(cls, data: dict) -> "PageStructure":
        return cls(
            title=data.get("title", "Unknown"),
            layout=dict(data.get("layout", {})),
            interactive=dict(data.get("interactive", {})),
        )


@dataclass
class AccessibilitySummary:
    """ARIA / alt-text counts and the derived 0-100 score."""
    aria_labels: int = 0
    aria_roles: int = 0
    alt_texts: int = 0
    tabindex_elements: int = 0

    @property
    def score(self) -> int:
        return accessibility_score(self.aria_labels, self.aria_roles, self.alt_texts)

    def to_dict(self) -> dict:
        return {
            "aria_labels": self.aria_labels,
            "aria_roles": self.aria_roles,
            "alt_texts": self.alt_texts,
            "tabindex_elements": self.tabindex_elements,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AccessibilitySummary":
        # score is derived, not stored
        return cls(
            aria_labels=data.get("aria_labels", 0),
            aria_roles=data.get("aria_roles", 0),
            alt_texts=data.get("alt_texts", 0),
            tabindex_elements=data.get("tabindex_elements", 0),
        )


def _tiered(count: int, tiers: tuple[tuple[int, int], ...]) -> int:
    for threshold, points in tiers:
        if count > threshold:
            return points
    return 0


def accessibility_score(aria_labels: int, aria_roles: int, alt_texts: int) -> int:
    """
    Simple heuristic score.

    Starts at 50 and rewards ARIA labels, roles and image alt text.
    """
    score = 50
    score += _tiered(aria_labels, ((10, 15), (5, 10), (0, 5)))
    score += _tiered(aria_roles, ((10, 15), (5, 10), (0, 5)))
    score += _tiered(alt_texts, ((5, 20), (0, 10)))
    return min(score, 100)


class PageAnalyzer:
    """Read-only analysis of page structure."""

    async def analyze_structure(self, page: PageDriver) -> PageStructure:
        """Counts landmarks and interactive elements."""
        try:
            title = await page.title()
        except Exception as e:
            logger.debug(f"Could not read page title: {e}")
            title = "Unknown"

        structure = PageStructure(
            title=title,
            layout=await self._count_all(page, LAYOUT_PATTERNS),
            interactive=await self._count_all(page, INTERACTIVE_PATTERNS),
        )
        logger.info(f"Structure of '{title}': {structure.layout}, interactive {structure.interactive}")
        return structure

    async def analyze_accessibility(self, page: PageDriver) -> AccessibilitySummary:
        """Counts accessibility hooks and scores them."""
        summary = AccessibilitySummary(**await self._count_all(page, ACCESSIBILITY_PATTERNS))
        logger.info(f"Accessibility score: {summary.score}/100")
        return summary

    async def _count_all(self, page: PageDriver, patterns: dict[str, str]) -> dict[str, int]:
        counts = {}
        for key, selector in patterns.items():
            counts[key] = await page.query(selector).count()
        return counts
