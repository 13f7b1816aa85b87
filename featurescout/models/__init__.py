"""
Data models for the discovery pipeline.

Exports:
- Feature, ElementOutcome, DiscoveryPass (feature.py)
- TestStep, Assertion, TestCase (test_case.py)
- ExecutionResult, ExecutionSummary, DiscoveryReport (results.py)
- Enums: FeatureCategory, ActionKind, AssertionKind, ExecutionStatus
"""

from .feature import (
    Feature,
    ElementOutcome,
    DiscoveryPass,
    FeatureCategory,
    ActionKind,
    CATEGORY_ACTIONS,
    actions_for,
)

from .test_case import (
    TestStep,
    Assertion,
    TestCase,
    AssertionKind,
)

from .results import (
    ExecutionResult,
    ExecutionSummary,
    DiscoveryReport,
    ExecutionStatus,
    SCREENSHOT_UNAVAILABLE,
)

__all__ = [
    # Enums
    "FeatureCategory",
    "ActionKind",
    "AssertionKind",
    "ExecutionStatus",
    # Discovery
    "Feature",
    "ElementOutcome",
    "DiscoveryPass",
    "CATEGORY_ACTIONS",
    "actions_for",
    # Test cases
    "TestStep",
    "Assertion",
    "TestCase",
    # Results
    "ExecutionResult",
    "ExecutionSummary",
    "DiscoveryReport",
    "SCREENSHOT_UNAVAILABLE",
]
