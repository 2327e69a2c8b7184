"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from node_template.adapters.mock import MockScaffolder
from node_template.adapters.registry import ScaffolderRegistry


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    """Run the test from an empty temporary working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def node_installed(monkeypatch):
    """Make the runtime and runner lookups succeed regardless of the host."""
    monkeypatch.setattr(
        "node_template.core.services.dependency_check.shutil.which",
        lambda name: f"/usr/bin/{name}",
    )


@pytest.fixture
def node_missing(monkeypatch):
    monkeypatch.setattr(
        "node_template.core.services.dependency_check.shutil.which",
        lambda name: None,
    )


@pytest.fixture
def mock_scaffolder() -> MockScaffolder:
    return MockScaffolder()


@pytest.fixture
def mock_registry(mock_scaffolder: MockScaffolder) -> ScaffolderRegistry:
    """Registry that routes every framework to one recording mock."""
    registry = ScaffolderRegistry()
    registry.set_mock_mode(True, mock_scaffolder=mock_scaffolder)
    return registry
