"""
Tests for the data models.
"""

import pytest

from featurescout.models import (
    ActionKind,
    Assertion,
    AssertionKind,
    DiscoveryPass,
    ElementOutcome,
    ExecutionResult,
    ExecutionSummary,
    Feature,
    FeatureCategory,
    TestCase,
    TestStep,
)
from featurescout.models.feature import actions_for


class TestFeature:
    def test_empty_locator_rejected(self):
        with pytest.raises(ValueError):
            Feature(name="Save", category=FeatureCategory.BUTTON, locator="  ")

    def test_actions_are_an_ordered_set(self):
        feature = Feature(
            name="Save",
            category="button",
            locator="#save",
            allowed_actions=["hover", ActionKind.CLICK, ActionKind.HOVER],
        )

        assert feature.category == FeatureCategory.BUTTON
        assert feature.allowed_actions == [ActionKind.HOVER, ActionKind.CLICK]
        assert feature.first_action == ActionKind.HOVER

    def test_children_serialized(self):
        child = Feature(name="Home", category=FeatureCategory.OTHER, locator="a >> nth=0")
        menu = Feature(name="Navigation", category=FeatureCategory.MENU, locator="nav", children=[child])

        restored = Feature.from_dict(menu.to_dict())

        assert restored.children[0].name == "Home"
        assert restored.to_dict() == menu.to_dict()

    @pytest.mark.parametrize("category,first", [
        (FeatureCategory.BUTTON, ActionKind.CLICK),
        (FeatureCategory.INPUT, ActionKind.FILL),
        (FeatureCategory.DROPDOWN, ActionKind.SELECT),
        (FeatureCategory.MODAL, ActionKind.SCREENSHOT),
        (FeatureCategory.TABLE, ActionKind.SCREENSHOT),
        (FeatureCategory.TAB, ActionKind.CLICK),
    ])
    def test_category_actions(self, category, first):
        assert actions_for(category)[0] == first


class TestDiscoveryPass:
    def test_record(self):
        discovery_pass = DiscoveryPass(FeatureCategory.BUTTON)
        feature = Feature(name="Save", category=FeatureCategory.BUTTON, locator="#save")

        discovery_pass.record(ElementOutcome.ok(feature))
        discovery_pass.record(ElementOutcome.skip("not visible", "#hidden"))

        assert discovery_pass.features == [feature]
        assert discovery_pass.skip_reasons == ["not visible"]


class TestTestCaseModels:
    def test_step_requires_target(self):
        with pytest.raises(ValueError):
            TestStep(action=ActionKind.CLICK, target_locator="")

    def test_attribute_assertion_requires_name(self):
        with pytest.raises(ValueError):
            Assertion(kind=AssertionKind.ATTRIBUTE, target_locator="#x", expected="y")

    def test_summary(self):
        feature = Feature(name="Save", category=FeatureCategory.BUTTON, locator="#save")
        test_case = TestCase(feature=feature)
        results = [
            ExecutionResult(test_case=test_case, success=True),
            ExecutionResult(test_case=test_case, success=False, error_message="boom"),
        ]

        summary = ExecutionSummary.from_results(results)

        assert (summary.total, summary.passed, summary.failed) == (2, 1, 1)
        assert summary.pass_rate == 50.0
        assert ExecutionSummary().pass_rate == 0.0
