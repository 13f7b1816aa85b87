"""
Tests for the end-to-end runner against a fake page.
"""

import pytest

from featurescout import FeatureDiscoveryRunner
from featurescout.analysis import ACCESSIBILITY_PATTERNS, LAYOUT_PATTERNS
from featurescout.models import DiscoveryReport, FeatureCategory
from tests.fakes import FakeNode, FakePage


@pytest.fixture
def login_page(email_input):
    save = FakeNode(tag="button", attrs={"id": "save"}, text="Save")
    email_input.attrs["id"] = "email"
    broken = FakeNode(tag="button", attrs={"id": "broken"}, text="Broken", errors={"click": RuntimeError("detached")})
    nav = FakeNode(tag="nav", attrs={"id": "main-nav"}, text="Home Pricing")
    return FakePage({
        "button": [save, broken],
        'input[type="email"]': [email_input],
        "nav": [nav],
        "#save": [save],
        "#broken": [broken],
        "#email": [email_input],
        "#main-nav": [nav],
        ".dropdown-menu:visible": [FakeNode(text="Pricing plans")],
    })


class TestRun:
    @pytest.mark.asyncio
    async def test_full_pipeline(self, config, login_page):
        runner = FeatureDiscoveryRunner(config=config)

        report = await runner.run(login_page, url="http://test.local/login")

        assert login_page.visited == ["http://test.local/login"]
        assert report.url == "http://test.local/login"
        assert [f.locator for f in report.features] == [
            "#save", "#broken", "#email", "#main-nav", ".dropdown-menu:visible",
        ]
        assert len(report.test_cases) == len(report.features)
        assert [r.test_case.name for r in report.results] == [t.name for t in report.test_cases]

        by_locator = {r.test_case.feature.locator: r for r in report.results}
        assert by_locator["#save"].success is True
        assert by_locator["#email"].success is True
        assert by_locator["#broken"].success is False
        assert report.summary.failed == 1

    @pytest.mark.asyncio
    async def test_discovery_only(self, config, login_page):
        report = await FeatureDiscoveryRunner(config=config).run(login_page, include_dynamic=False, execute=False)

        assert report.results == []
        assert report.features[-1].category == FeatureCategory.MENU
        assert report.statistics["by_type"] == {"button": 2, "input": 1, "menu": 1}
        assert report.statistics["interactive"] == 4

    @pytest.mark.asyncio
    async def test_report_round_trips_through_json(self, config, login_page, tmp_path):
        report = await FeatureDiscoveryRunner(config=config).run(login_page)
        path = tmp_path / "report.json"

        report.save(str(path))
        loaded = DiscoveryReport.load(str(path))

        assert loaded.to_dict() == report.to_dict()

    @pytest.mark.asyncio
    async def test_analysis_attached_on_request(self, config, login_page, tmp_path):
        login_page.dom[LAYOUT_PATTERNS["navs"]] = login_page.dom["nav"]
        login_page.dom[ACCESSIBILITY_PATTERNS["alt_texts"]] = [FakeNode(tag="img", attrs={"alt": "Logo"})]
        path = tmp_path / "report.json"

        report = await FeatureDiscoveryRunner(config=config).run(login_page, execute=False, analyze=True)
        report.save(str(path))
        loaded = DiscoveryReport.load(str(path))

        assert report.structure.title == "Test Page"
        assert report.structure.layout["navs"] == 1
        assert report.accessibility.alt_texts == 1
        assert report.to_dict()["accessibility"]["score"] == 60
        assert loaded.structure == report.structure
        assert loaded.accessibility == report.accessibility

    @pytest.mark.asyncio
    async def test_no_analysis_by_default(self, config, login_page):
        report = await FeatureDiscoveryRunner(config=config).run(login_page, execute=False)

        assert report.structure is None
        assert "structure" not in report.to_dict()
        assert "accessibility" not in report.to_dict()

    def test_output_dir_created(self, config, tmp_path):
        output_dir = tmp_path / "reports" / "nested"

        FeatureDiscoveryRunner(config=config, output_dir=str(output_dir))

        assert output_dir.is_dir()
