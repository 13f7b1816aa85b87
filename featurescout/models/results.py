"""
Data models for test execution results and discovery reports.

Contains the structures the executor uses to record outcomes and
the report that bundles a full discovery run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from enum import Enum
from collections import Counter
import json

from featurescout.analysis import AccessibilitySummary, PageStructure
from featurescout.models.feature import Feature, FeatureCategory
from featurescout.models.test_case import TestCase

SCREENSHOT_UNAVAILABLE = "unavailable"

INTERACTIVE_CATEGORIES = frozenset({
    FeatureCategory.BUTTON,
    FeatureCategory.INPUT,
    FeatureCategory.MENU,
    FeatureCategory.DROPDOWN,
    FeatureCategory.TAB,
})


class ExecutionStatus(str, Enum):
    """Lifecycle of a test case during execution."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class ExecutionResult:
    """
    Outcome of executing one TestCase.

    Immutable once created.
    """
    test_case: TestCase
    success: bool
    duration_ms: int = 0
    error_message: Optional[str] = None
    screenshot_ref: Optional[str] = None

    @property
    def status(self) -> ExecutionStatus:
        return ExecutionStatus.PASSED if self.success else ExecutionStatus.FAILED

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        return {
            "test_case": self.test_case.to_dict(),
            "success": self.success,
            "status": self.status.value,
            "duration_ms": self.duration_ms,
            "error_message": self.error_message,
            "screenshot_ref": self.screenshot_ref,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExecutionResult":
        """Creates from a dictionary."""
        return cls(
            test_case=TestCase.from_dict(data["test_case"]),
            success=data["success"],
            duration_ms=data.get("duration_ms", 0),
            error_message=data.get("error_message"),
            screenshot_ref=data.get("screenshot_ref"),
        )


@dataclass
class ExecutionSummary:
    """Aggregated counts for a batch of results."""
    total: int = 0
    passed: int = 0
    failed: int = 0

    @property
    def pass_rate(self) -> float:
        """Pass rate (0-100)."""
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    @classmethod
    def from_results(cls, results: list[ExecutionResult]) -> "ExecutionSummary":
        passed = sum(1 for r in results if r.success)
        return cls(total=len(results), passed=passed, failed=len(results) - passed)

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "pass_rate": self.pass_rate,
        }


@dataclass
class DiscoveryReport:
    """
    Everything a discovery run produced.

    Bundles the features, generated test cases and (optionally)
    execution results for a single page. Structure and accessibility
    are only set when the run was asked to analyze the page.
    """
    url: str
    timestamp: datetime = field(default_factory=datetime.now)
    features: list[Feature] = field(default_factory=list)
    test_cases: list[TestCase] = field(default_factory=list)
    results: list[ExecutionResult] = field(default_factory=list)
    structure: Optional[PageStructure] = None
    accessibility: Optional[AccessibilitySummary] = None

    @property
    def statistics(self) -> dict:
        """Counts by category plus interactive/text/attribute totals."""
        by_type = Counter(f.category.value for f in self.features)
        return {
            "by_type": dict(by_type),
            "interactive": sum(1 for f in self.features if f.category in INTERACTIVE_CATEGORIES),
            "with_text": sum(1 for f in self.features if f.sample_text),
            "with_attributes": sum(1 for f in self.features if f.attributes),
        }

    @property
    def summary(self) -> ExecutionSummary:
        return ExecutionSummary.from_results(self.results)

    def to_dict(self) -> dict:
        """Converts to a dictionary."""
        data = {
            "timestamp": self.timestamp.isoformat(),
            "url": self.url,
            "features_discovered": len(self.features),
            "features": [f.to_dict() for f in self.features],
            "test_cases": [t.to_dict() for t in self.test_cases],
            "results": [r.to_dict() for r in self.results],
            "statistics": self.statistics,
            "summary": self.summary.to_dict(),
        }
        if self.structure is not None:
            data["structure"] = self.structure.to_dict()
        if self.accessibility is not None:
            data["accessibility"] = self.accessibility.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DiscoveryReport":
        """Creates from a dictionary."""
        return cls(
            url=data["url"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            features=[Feature.from_dict(f) for f in data.get("features", [])],
            test_cases=[TestCase.from_dict(t) for t in data.get("test_cases", [])],
            results=[ExecutionResult.from_dict(r) for r in data.get("results", [])],
            structure=PageStructure.from_dict(data["structure"]) if "structure" in data else None,
            accessibility=(
                AccessibilitySummary.from_dict(data["accessibility"]) if "accessibility" in data else None
            ),
        )

    def save(self, filepath: str) -> None:
        """Saves the report as a JSON file."""
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, filepath: str) -> "DiscoveryReport":
        """Loads a report from a JSON file."""
        with open(filepath, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))
