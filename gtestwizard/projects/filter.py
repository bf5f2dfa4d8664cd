"""
Classification of workspace projects.
"""

from typing import Iterable, List, Optional, Sequence, Tuple
import logging

from gtestwizard.core.interfaces import TestFrameworkDiscovery
from gtestwizard.core.project import Project, VC_PROJECT_KIND
from gtestwizard.projects.gtest import GtestDiscovery

logger = logging.getLogger(__name__)


def is_native_code_project(project: Project) -> bool:
    """Check whether a project is a Visual C++ project."""
    return project.kind.strip().upper() == VC_PROJECT_KIND


class ProjectFilter:
    """
    Splits workspace projects into test-framework projects and candidates.
    """

    def __init__(self, discovery: Optional[TestFrameworkDiscovery] = None):
        """
        Initialize filter.

        Args:
            discovery: Test-framework discovery service (default: Google Test)
        """
        self._discovery = discovery or GtestDiscovery()

    def native_projects(self, projects: Iterable[Project]) -> List[Project]:
        """Get the native-code projects, keeping order."""
        return [p for p in projects if is_native_code_project(p)]

    def find_test_framework_projects(self, projects: Sequence[Project]) -> List[Project]:
        """
        Find test-framework projects among the native-code projects.

        Returns:
            Test-framework projects in discovery order
        """
        return list(self._discovery.find(self.native_projects(projects)))

    def split(self, projects: Iterable[Project]) -> Tuple[List[Project], List[Project]]:
        """
        Split projects for the wizard.

        Returns:
            Tuple of (test-framework projects, candidate projects under test),
            both restricted to native-code projects
        """
        native = self.native_projects(projects)
        frameworks = list(self._discovery.find(native))
        candidates = [p for p in native if not any(p is f for f in frameworks)]
        logger.debug(
            f"{len(native)} native project(s), {len(frameworks)} test framework "
            f"project(s), {len(candidates)} candidate(s)"
        )
        return frameworks, candidates


__all__ = ["is_native_code_project", "ProjectFilter"]
