"""Pytest fixtures for featurescout tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from featurescout.config import DiscoveryConfig
from tests.fakes import FakeNode, FakePage


@pytest.fixture
def config(tmp_path: Path) -> DiscoveryConfig:
    """Default config writing screenshots into a temporary directory."""
    return DiscoveryConfig(screenshot_dir=str(tmp_path / "screenshots"))


@pytest.fixture
def page() -> FakePage:
    """An empty fake page."""
    return FakePage()


@pytest.fixture
def login_modal() -> FakeNode:
    """<button id="login-modal" class="modal dialog"></button>"""
    return FakeNode(tag="button", attrs={"id": "login-modal", "class": "modal dialog"})


@pytest.fixture
def email_input() -> FakeNode:
    """<input type="email" placeholder="Enter email">"""
    return FakeNode(tag="input", attrs={"type": "email", "placeholder": "Enter email"})
