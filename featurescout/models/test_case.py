"""
Data models for generated test cases.

A TestCase is derived from exactly one Feature by the
TestCaseGenerator and holds no reference into the page.
"""

from dataclasses import dataclass, field
from typing import Any, Optional
from enum import Enum

from featurescout.models.feature import ActionKind, Feature


class AssertionKind(str, Enum):
    """Checks an assertion can perform on its target."""
    VISIBLE = "visible"
    HIDDEN = "hidden"
    ENABLED = "enabled"
    DISABLED = "disabled"
    TEXT = "text"
    COUNT = "count"
    VALUE = "value"
    ATTRIBUTE = "attribute"
    CLASS = "class"
    CHECKED = "checked"


@dataclass
class TestStep:
    """
    A single step of a test case.

    Represents one atomic interaction such as click, fill or hover.
    """
    __test__ = False

    action: ActionKind
    target_locator: str
    value: Optional[str] = None
    description: str = ""

    def __post_init__(self):
        """Validates fields after initialization."""
        if isinstance(self.action, str):
            self.action = ActionKind(self.action)
        if not self.target_locator or not self.target_locator.strip():
            raise ValueError("TestStep.target_locator cannot be empty")

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        return {
            "action": self.action.value,
            "target_locator": self.target_locator,
            "value": self.value,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TestStep":
        """Creates from a dictionary."""
        return cls(
            action=ActionKind(data["action"]),
            target_locator=data["target_locator"],
            value=data.get("value"),
            description=data.get("description", ""),
        )


@dataclass
class Assertion:
    """A check verified after all steps of a test case ran."""
    kind: AssertionKind
    target_locator: str
    expected: Any = None
    description: str = ""
    attribute: Optional[str] = None  # attribute name, only for ATTRIBUTE

    def __post_init__(self):
        """Validates fields after initialization."""
        if isinstance(self.kind, str):
            self.kind = AssertionKind(self.kind)
        if not self.target_locator or not self.target_locator.strip():
            raise ValueError("Assertion.target_locator cannot be empty")
        if self.kind == AssertionKind.ATTRIBUTE and not self.attribute:
            raise ValueError("Assertion.attribute is required for attribute assertions")

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        return {
            "kind": self.kind.value,
            "target_locator": self.target_locator,
            "expected": self.expected,
            "description": self.description,
            "attribute": self.attribute,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Assertion":
        """Creates from a dictionary."""
        return cls(
            kind=AssertionKind(data["kind"]),
            target_locator=data["target_locator"],
            expected=data.get("expected"),
            description=data.get("description", ""),
            attribute=data.get("attribute"),
        )


@dataclass
class TestCase:
    """
    Steps and assertions derived from one Feature.

    A feature without any allowed action still yields a TestCase;
    its step list is simply empty.
    """
    __test__ = False

    feature: Feature
    steps: list[TestStep] = field(default_factory=list)
    assertions: list[Assertion] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.feature.name

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        return {
            "feature": self.feature.to_dict(),
            "steps": [s.to_dict() for s in self.steps],
            "assertions": [a.to_dict() for a in self.assertions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TestCase":
        """Creates from a dictionary."""
        return cls(
            feature=Feature.from_dict(data["feature"]),
            steps=[TestStep.from_dict(s) for s in data.get("steps", [])],
            assertions=[Assertion.from_dict(a) for a in data.get("assertions", [])],
        )
