"""
Collaborator interfaces for gtestwizard.

The wizard core never talks to the IDE directly. Everything it needs from
the host (project discovery, the IDE version, user prompts, adding project
references) is expressed as one of the abstract interfaces below, so the
core can be driven by a real host integration or by test doubles.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from gtestwizard.core.project import Project


class TestFrameworkDiscovery(ABC):
    """
    Locates test-framework projects (e.g. Google Test) among a set of projects.
    """

    @abstractmethod
    def find(self, projects: Sequence[Project]) -> List[Project]:
        """
        Find test-framework projects.

        Args:
            projects: Native-code projects to search

        Returns:
            Matching projects in discovery order (possibly empty)
        """
        pass


class HostVersionService(ABC):
    """
    Derives a toolset identifier from the host IDE's own version.
    """

    @abstractmethod
    def toolset_from_host_version(self) -> str:
        """
        Get the toolset matching the running host.

        Returns:
            Toolset identifier (e.g., "v141")
        """
        pass


class UserInteraction(ABC):
    """
    Blocking user prompts presented by the host.
    """

    @abstractmethod
    def confirm(self, message: str, title: str) -> bool:
        """
        Ask a yes/no question.

        Args:
            message: Question text
            title: Dialog title

        Returns:
            True if the user agreed, False otherwise
        """
        pass

    @abstractmethod
    def select_projects(self, candidates: Sequence[Project]) -> Optional[List[Project]]:
        """
        Let the user pick a subset of candidate projects.

        Args:
            candidates: Projects offered for selection, in display order

        Returns:
            Selected projects in selection order (possibly empty), or None
            if the user cancelled the prompt
        """
        pass


class ProjectGraphMutator(ABC):
    """
    Adds build-dependency links between projects.
    """

    @abstractmethod
    def add_reference(self, project: Project, referenced_project: Project) -> None:
        """
        Add a reference from ``project`` to ``referenced_project``.

        Raises:
            Exception: Any fault reported by the host automation layer
        """
        pass


class ReplacementFiller(ABC):
    """
    Adds externally-owned placeholders to the replacement map.
    """

    @abstractmethod
    def fill(self, replacements: Dict[str, str], toolset: str) -> None:
        """
        Add placeholders to ``replacements`` in place.

        Args:
            replacements: Replacement map under construction
            toolset: Toolset resolved for the generated project
        """
        pass


__all__ = [
    "TestFrameworkDiscovery",
    "HostVersionService",
    "UserInteraction",
    "ProjectGraphMutator",
    "ReplacementFiller",
]
