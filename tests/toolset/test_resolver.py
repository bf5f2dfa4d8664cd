"""
Unit tests for toolset resolution.

Tests cover:
- Selection of the most recent known toolset
- Host-version fallback
- Recovery from unreadable or malformed project files
"""

import logging
from unittest.mock import MagicMock

import pytest

from gtestwizard.core.project import Project
from gtestwizard.toolset.rank import ToolsetRank
from gtestwizard.toolset.resolver import ToolsetResolver
from tests.fixtures.hosts import HOST_TOOLSET
from tests.fixtures.projects import make_project


@pytest.fixture
def resolver(host_service):
    return ToolsetResolver(host_service)


class TestResolve:
    """Test ToolsetResolver.resolve()."""

    def test_empty_set_uses_host_fallback(self, resolver, host_service):
        assert resolver.resolve([]) == HOST_TOOLSET
        assert host_service.calls == 1

    def test_highest_known_toolset_wins(self, resolver, host_service, tmp_path):
        projects = [
            make_project(tmp_path, "P1", toolsets=["v100"]),
            make_project(tmp_path, "P2", toolsets=["v141", "v120_xp"]),
        ]
        assert resolver.resolve(projects) == "v141"
        assert host_service.calls == 0

    def test_only_unknown_toolsets_uses_host_fallback(self, resolver, tmp_path):
        projects = [make_project(tmp_path, "P1", toolsets=["bogus"])]
        assert resolver.resolve(projects) == HOST_TOOLSET

    def test_unknown_toolset_ignored_when_known_present(self, resolver, tmp_path):
        projects = [make_project(tmp_path, "P1", toolsets=["bogus", "v110"])]
        assert resolver.resolve(projects) == "v110"

    def test_project_without_toolset(self, resolver, tmp_path):
        projects = [make_project(tmp_path, "P1")]
        assert resolver.resolve(projects) == HOST_TOOLSET

    def test_file_without_namespace(self, resolver, tmp_path):
        projects = [make_project(tmp_path, "P1", toolsets=["v120"], namespace=None)]
        assert resolver.resolve(projects) == "v120"

    def test_missing_file_contributes_nothing(self, resolver, tmp_path):
        projects = [
            Project.from_path(tmp_path / "missing" / "missing.vcxproj"),
            make_project(tmp_path, "P2", toolsets=["v120"]),
        ]
        assert resolver.resolve(projects) == "v120"

    def test_malformed_file_contributes_nothing(self, resolver, tmp_path, caplog):
        broken = tmp_path / "broken.vcxproj"
        broken.write_text("<Project><PropertyGroup>")
        projects = [
            Project.from_path(broken),
            make_project(tmp_path, "P2", toolsets=["v140_xp"]),
        ]
        with caplog.at_level(logging.WARNING):
            assert resolver.resolve(projects) == "v140_xp"
        assert "broken" in caplog.text

    def test_all_files_unreadable_uses_host_fallback(self, resolver, tmp_path):
        projects = [Project.from_path(tmp_path / "nope.vcxproj")]
        assert resolver.resolve(projects) == HOST_TOOLSET

    def test_extended_ranking(self, host_service, tmp_path):
        resolver = ToolsetResolver(host_service, ToolsetRank(["v142"]))
        projects = [make_project(tmp_path, "P1", toolsets=["v141", "v142"])]
        assert resolver.resolve(projects) == "v142"

    def test_ranking_failure_uses_host_fallback(self, host_service, tmp_path):
        ranking = MagicMock(spec=ToolsetRank)
        ranking.order_descending.side_effect = RuntimeError("broken table")
        resolver = ToolsetResolver(host_service, ranking)
        projects = [make_project(tmp_path, "P1", toolsets=["v141"])]
        assert resolver.resolve(projects) == HOST_TOOLSET

    def test_injected_reader(self, host_service):
        reader = MagicMock(side_effect=[["v100"], OSError("locked"), ["v120"]])
        resolver = ToolsetResolver(host_service, reader=reader)
        projects = [Project(name=n, path=f"{n}.vcxproj") for n in ("A", "B", "C")]
        assert resolver.resolve(projects) == "v120"
        assert reader.call_count == 3


class TestDiagnostics:
    """Test debug diagnostics emitted during resolution."""

    def test_logs_projects_toolsets_and_selection(self, resolver, tmp_path, caplog):
        projects = [
            make_project(tmp_path, "Alpha", toolsets=["v120"]),
            make_project(tmp_path, "Beta", toolsets=["bogus"]),
        ]
        with caplog.at_level(logging.DEBUG, logger="gtestwizard.toolset.resolver"):
            resolver.resolve(projects)
        assert "Alpha, Beta" in caplog.text
        assert "v120(True), bogus(False)" in caplog.text
        assert "Toolset selected: 'v120'" in caplog.text

    def test_logs_fallback(self, resolver, caplog):
        with caplog.at_level(logging.DEBUG, logger="gtestwizard.toolset.resolver"):
            resolver.resolve([])
        assert "No toolset found in projects" in caplog.text
        assert f"Toolset from host version: '{HOST_TOOLSET}'" in caplog.text


class TestCollectToolsets:
    """Test ToolsetResolver.collect_toolsets()."""

    def test_duplicates_collapse(self, resolver, tmp_path):
        projects = [
            make_project(tmp_path, "P1", toolsets=["v141", "v141"]),
            make_project(tmp_path, "P2", toolsets=["v141", "v100"]),
        ]
        assert resolver.collect_toolsets(projects) == {"v141", "v100"}
