"""
Test case generation.

Exports:
- TestCaseGenerator: Feature -> TestCase
- example_value_for: example value for an input type
"""

from featurescout.generation.test_case_generator import (
    TestCaseGenerator,
    TEST_VALUES,
    DEFAULT_TEST_VALUE,
    example_value_for,
)

__all__ = [
    "TestCaseGenerator",
    "TEST_VALUES",
    "DEFAULT_TEST_VALUE",
    "example_value_for",
]
