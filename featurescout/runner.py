"""
Main entry point of the discovery pipeline.

Coordinates discovery, test generation and execution against a page
supplied by the caller, or against a browser it launches itself.
"""

from typing import Optional
from pathlib import Path
from urllib.parse import urlparse

from featurescout.analysis import PageAnalyzer
from featurescout.config import DiscoveryConfig
from featurescout.discovery import DiscoveryAggregator
from featurescout.driver import PageDriver, PlaywrightPageDriver
from featurescout.execution import TestExecutor
from featurescout.generation import TestCaseGenerator
from featurescout.models import DiscoveryReport, ExecutionResult, Feature, TestCase
from featurescout.utils import get_logger, sanitize_filename

logger = get_logger(__name__)


class FeatureDiscoveryRunner:
    """
    Runs the discovery -> generation -> execution pipeline.

    Phases run strictly one after another. The page passed to each
    operation is borrowed and never closed here.
    """

    def __init__(
        self,
        config: Optional[DiscoveryConfig] = None,
        output_dir: Optional[str] = None,
        aggregator: Optional[DiscoveryAggregator] = None,
        generator: Optional[TestCaseGenerator] = None,
    ):
        """
        Initializes the runner.

        Args:
            config: Pipeline configuration (defaults if omitted)
            output_dir: Directory where run_full saves its JSON report
            aggregator: Custom aggregator (e.g. with a reduced discoverer set)
            generator: Custom test case generator
        """
        self.config = config or DiscoveryConfig()
        self.output_dir = output_dir
        self.aggregator = aggregator or DiscoveryAggregator(config=self.config)
        self.generator = generator or TestCaseGenerator()
        self.analyzer = PageAnalyzer()

        if self.output_dir:
            Path(self.output_dir).mkdir(parents=True, exist_ok=True)

    async def discover(self, page: PageDriver) -> list[Feature]:
        """Deduplicated features of every category."""
        return await self.aggregator.discover(page)

    async def discover_dynamic(self, page: PageDriver, features: list[Feature]) -> list[Feature]:
        """Features revealed by hovering navigation, plus tooltip enrichment."""
        return await self.aggregator.discover_dynamic_features(page, features)

    def generate_test_cases(self, features: list[Feature]) -> list[TestCase]:
        """One test case per feature."""
        return self.generator.generate(features)

    async def execute_test_cases(self, page: PageDriver, test_cases: list[TestCase]) -> list[ExecutionResult]:
        """Results in input order; never raises for a failing test."""
        return await TestExecutor(page, self.config).execute_all(test_cases)

    async def run(
        self,
        page: PageDriver,
        url: Optional[str] = None,
        include_dynamic: bool = True,
        execute: bool = True,
        analyze: bool = False,
    ) -> DiscoveryReport:
        """
        Full pipeline against a borrowed page.

        Args:
            page: Page to inspect
            url: If given, navigate there first
            include_dynamic: Also run the hover-based dynamic pass
            execute: Execute the generated test cases
            analyze: Attach page structure and accessibility to the report

        Returns:
            DiscoveryReport with features, test cases and results
        """
        if url:
            logger.info(f"Navigating to {url}")
            await page.navigate(url)

        structure = accessibility = None
        if analyze:
            # before execution, which may change the page
            structure = await self.analyzer.analyze_structure(page)
            accessibility = await self.analyzer.analyze_accessibility(page)

        features = await self.discover(page)
        if include_dynamic:
            features = features + await self.discover_dynamic(page, features)

        test_cases = self.generate_test_cases(features)

        results = []
        if execute:
            results = await self.execute_test_cases(page, test_cases)

        report = DiscoveryReport(
            url=page.current_url(),
            features=features,
            test_cases=test_cases,
            results=results,
            structure=structure,
            accessibility=accessibility,
        )
        logger.info(
            f"Run complete: {len(features)} feature(s), {len(test_cases)} test case(s), "
            f"{report.summary.passed}/{report.summary.total} passed"
        )
        return report

    async def run_full(
        self,
        base_url: str,
        include_dynamic: bool = True,
        execute: bool = True,
        analyze: bool = True,
    ) -> DiscoveryReport:
        """
        Launches Chromium, runs the pipeline against base_url and closes it.

        The report is saved as JSON when output_dir is set.
        """
        from playwright.async_api import async_playwright

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.config.headless)
            try:
                context = await browser.new_context()
                page = PlaywrightPageDriver(
                    await context.new_page(),
                    navigation_timeout_ms=self.config.navigation_timeout_ms,
                )
                report = await self.run(
                    page, url=base_url, include_dynamic=include_dynamic, execute=execute, analyze=analyze
                )
            finally:
                await browser.close()

        if self.output_dir:
            host = urlparse(base_url).netloc or "page"
            report_path = Path(self.output_dir) / f"{sanitize_filename(host)}_discovery.json"
            report.save(str(report_path))
            logger.info(f"Report saved to {report_path}")

        return report
