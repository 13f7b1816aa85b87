"""
Data models for the discovery phase.

Holds the structures produced by the category discoverers before
they are handed to the aggregator.
"""

from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


class FeatureCategory(str, Enum):
    """Categories of discovered UI elements."""
    BUTTON = "button"
    MENU = "menu"
    PANEL = "panel"
    INPUT = "input"
    CHART = "chart"
    TABLE = "table"
    MODAL = "modal"
    DROPDOWN = "dropdown"
    TAB = "tab"
    OTHER = "other"


class ActionKind(str, Enum):
    """Interactions a feature supports and a test step can perform."""
    CLICK = "click"
    FILL = "fill"
    CLEAR = "clear"
    HOVER = "hover"
    FOCUS = "focus"
    BLUR = "blur"
    SELECT = "select"
    CHECK = "check"
    UNCHECK = "uncheck"
    PRESS = "press"
    SCREENSHOT = "screenshot"
    CLOSE = "close"


# Static action inference, keyed only by category
CATEGORY_ACTIONS: dict[FeatureCategory, tuple[ActionKind, ...]] = {
    FeatureCategory.BUTTON: (ActionKind.CLICK, ActionKind.HOVER),
    FeatureCategory.INPUT: (ActionKind.FILL, ActionKind.CLEAR, ActionKind.FOCUS, ActionKind.BLUR),
    FeatureCategory.MENU: (ActionKind.CLICK, ActionKind.HOVER),
    FeatureCategory.DROPDOWN: (ActionKind.SELECT, ActionKind.CLICK),
    FeatureCategory.TAB: (ActionKind.CLICK,),
    FeatureCategory.MODAL: (ActionKind.SCREENSHOT, ActionKind.CLOSE),
    FeatureCategory.CHART: (ActionKind.SCREENSHOT, ActionKind.HOVER),
    FeatureCategory.PANEL: (ActionKind.SCREENSHOT, ActionKind.HOVER),
    FeatureCategory.TABLE: (ActionKind.SCREENSHOT, ActionKind.HOVER),
    FeatureCategory.OTHER: (ActionKind.CLICK, ActionKind.HOVER, ActionKind.SCREENSHOT),
}


def actions_for(category: FeatureCategory) -> list[ActionKind]:
    """Allowed actions for a category, in priority order."""
    return list(CATEGORY_ACTIONS.get(FeatureCategory(category), ()))


@dataclass
class Feature:
    """
    An interactive or structural element found on the page.

    The locator is fixed at discovery time. Later enrichment (heading
    lookup, tooltip text) may add attributes but never touches it.
    """
    name: str
    category: FeatureCategory
    locator: str
    sample_text: Optional[str] = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Feature"] = field(default_factory=list)
    allowed_actions: list[ActionKind] = field(default_factory=list)
    screenshot_ref: Optional[str] = None

    def __post_init__(self):
        """Validates fields after initialization."""
        if not self.locator or not self.locator.strip():
            raise ValueError("Feature.locator cannot be empty")
        if isinstance(self.category, str):
            self.category = FeatureCategory(self.category)

        # ordered set
        actions = []
        for action in self.allowed_actions:
            action = ActionKind(action)
            if action not in actions:
                actions.append(action)
        self.allowed_actions = actions

    @property
    def first_action(self) -> Optional[ActionKind]:
        """Highest-priority allowed action, if any."""
        return self.allowed_actions[0] if self.allowed_actions else None

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        return {
            "name": self.name,
            "category": self.category.value,
            "locator": self.locator,
            "sample_text": self.sample_text,
            "attributes": dict(self.attributes),
            "children": [c.to_dict() for c in self.children],
            "allowed_actions": [a.value for a in self.allowed_actions],
            "screenshot_ref": self.screenshot_ref,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Feature":
        """Creates from a dictionary."""
        return cls(
            name=data["name"],
            category=FeatureCategory(data.get("category", "other")),
            locator=data["locator"],
            sample_text=data.get("sample_text"),
            attributes=data.get("attributes", {}),
            children=[cls.from_dict(c) for c in data.get("children", [])],
            allowed_actions=data.get("allowed_actions", []),
            screenshot_ref=data.get("screenshot_ref"),
        )


@dataclass
class ElementOutcome:
    """
    Result of analysing one matched element.

    Either carries a Feature or the reason the element was skipped.
    """
    feature: Optional[Feature] = None
    skip_reason: Optional[str] = None
    locator: Optional[str] = None

    @classmethod
    def ok(cls, feature: Feature) -> "ElementOutcome":
        return cls(feature=feature, locator=feature.locator)

    @classmethod
    def skip(cls, reason: str, locator: Optional[str] = None) -> "ElementOutcome":
        return cls(skip_reason=reason, locator=locator)

    @property
    def is_ok(self) -> bool:
        return self.feature is not None


@dataclass
class DiscoveryPass:
    """Everything one discoverer produced in a single run."""
    category: FeatureCategory
    features: list[Feature] = field(default_factory=list)
    skipped: list[ElementOutcome] = field(default_factory=list)

    def record(self, outcome: ElementOutcome) -> None:
        """Files an outcome under features or skipped."""
        if outcome.is_ok:
            self.features.append(outcome.feature)
        else:
            self.skipped.append(outcome)

    @property
    def skip_reasons(self) -> list[str]:
        return [o.skip_reason for o in self.skipped]
