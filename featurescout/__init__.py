"""
featurescout - UI feature discovery and smoke-test generation

Inventories the interactive surface of a rendered page, synthesizes
a stable locator for every element found and turns the inventory
into executable interaction tests.

## Pipeline

- DiscoveryAggregator: runs the category discoverers and deduplicates
- TestCaseGenerator: one TestCase per discovered Feature
- TestExecutor: fail-fast execution with screenshots on failure
- FeatureDiscoveryRunner: all of the above in sequence

## Quick start

    from featurescout import FeatureDiscoveryRunner

    runner = FeatureDiscoveryRunner(output_dir="/tmp/discovery")
    report = await runner.run_full("http://localhost:3000")
    print(f"Pass rate: {report.summary.pass_rate:.1f}%")
"""

__version__ = "0.1.0"

from .runner import FeatureDiscoveryRunner

from .config import DiscoveryConfig, get_config

from .models import (
    Feature,
    ElementOutcome,
    DiscoveryPass,
    TestStep,
    Assertion,
    TestCase,
    ExecutionResult,
    ExecutionSummary,
    DiscoveryReport,
    FeatureCategory,
    ActionKind,
    AssertionKind,
    ExecutionStatus,
)

from .driver import (
    PageDriver,
    ElementHandle,
    PlaywrightPageDriver,
)

from .discovery import (
    SelectorSynthesizer,
    BaseDiscoverer,
    ButtonDiscoverer,
    InputDiscoverer,
    MenuDiscoverer,
    DropdownDiscoverer,
    TabDiscoverer,
    ChartDiscoverer,
    PanelDiscoverer,
    ModalDiscoverer,
    TableDiscoverer,
    CustomComponentDiscoverer,
    DiscoveryAggregator,
)

from .generation import TestCaseGenerator
from .execution import TestExecutor
from .analysis import PageAnalyzer

from .utils import (
    get_logger,
    FeatureScoutError,
    ValidationError,
    StepExecutionError,
    AssertionFailedError,
)

__all__ = [
    "__version__",
    # Pipeline
    "FeatureDiscoveryRunner",
    "DiscoveryAggregator",
    "TestCaseGenerator",
    "TestExecutor",
    "PageAnalyzer",
    # Config
    "DiscoveryConfig",
    "get_config",
    # Models
    "Feature",
    "ElementOutcome",
    "DiscoveryPass",
    "TestStep",
    "Assertion",
    "TestCase",
    "ExecutionResult",
    "ExecutionSummary",
    "DiscoveryReport",
    "FeatureCategory",
    "ActionKind",
    "AssertionKind",
    "ExecutionStatus",
    # Driver
    "PageDriver",
    "ElementHandle",
    "PlaywrightPageDriver",
    # Discovery
    "SelectorSynthesizer",
    "BaseDiscoverer",
    "ButtonDiscoverer",
    "InputDiscoverer",
    "MenuDiscoverer",
    "DropdownDiscoverer",
    "TabDiscoverer",
    "ChartDiscoverer",
    "PanelDiscoverer",
    "ModalDiscoverer",
    "TableDiscoverer",
    "CustomComponentDiscoverer",
    # Utils
    "get_logger",
    "FeatureScoutError",
    "ValidationError",
    "StepExecutionError",
    "AssertionFailedError",
]
