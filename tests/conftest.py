"""
Pytest configuration and shared fixtures for gtestwizard tests.
"""

import pytest
from unittest.mock import MagicMock

from gtestwizard.core.interfaces import ProjectGraphMutator
from gtestwizard.core.project import Project

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.projects import sample_workspace
from tests.fixtures.hosts import FakeHostVersionService, RecordingMutator


# ============================================================================
# Shared Test Fixtures
# ============================================================================


@pytest.fixture
def host_service() -> FakeHostVersionService:
    """Host version service returning v140."""
    return FakeHostVersionService()


@pytest.fixture
def mutator() -> RecordingMutator:
    """Project-graph mutator that records calls."""
    return RecordingMutator()


@pytest.fixture
def generated_project(tmp_path) -> Project:
    """The project produced by template generation."""
    return Project.from_path(tmp_path / "NewTests" / "NewTests.vcxproj")


@pytest.fixture
def mock_mutator() -> MagicMock:
    """MagicMock constrained to the ProjectGraphMutator interface."""
    return MagicMock(spec=ProjectGraphMutator)
