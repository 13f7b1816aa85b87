"""
Test execution.

Exports:
- TestExecutor: fail-fast executor for generated test cases
"""

from featurescout.execution.test_executor import TestExecutor

__all__ = [
    "TestExecutor",
]
