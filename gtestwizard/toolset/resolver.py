"""
Platform toolset resolution.

Picks the toolset for a generated project from the toolsets already used
by the projects it will test, falling back to the host's default toolset
when none of them declares a known one.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional, Set
import logging

from gtestwizard.core.interfaces import HostVersionService
from gtestwizard.core.project import Project
from gtestwizard.projects.msbuild import read_platform_toolsets
from gtestwizard.toolset.rank import ToolsetRank

logger = logging.getLogger(__name__)

ToolsetReader = Callable[[Path], List[str]]


class ToolsetResolver:
    """
    Resolves a single toolset for a set of projects.

    Example:
        >>> resolver = ToolsetResolver(host_service)
        >>> resolver.resolve(selected_projects)
        'v141'
    """

    def __init__(
        self,
        host_service: HostVersionService,
        ranking: Optional[ToolsetRank] = None,
        reader: ToolsetReader = read_platform_toolsets,
    ):
        """
        Initialize resolver.

        Args:
            host_service: Supplies the fallback toolset
            ranking: Toolset order (default: built-in table)
            reader: Extracts toolset identifiers from a project file
        """
        self._host_service = host_service
        self.ranking = ranking or ToolsetRank()
        self._reader = reader

    def resolve(self, projects: Iterable[Project]) -> str:
        """
        Resolve the toolset for the given projects.

        Never fails because of project content: unreadable projects
        contribute nothing and the host fallback is used when no known
        toolset is found.

        Args:
            projects: Projects to scan

        Returns:
            Toolset identifier
        """
        projects = list(projects)
        try:
            toolset = self.resolve_from_projects(projects)
            if toolset is not None:
                return toolset
        except Exception as e:
            logger.debug(f"Toolset search in projects failed: {e}")

        toolset = self._host_service.toolset_from_host_version()
        logger.debug(f"Toolset from host version: '{toolset}'")
        return toolset

    def resolve_from_projects(self, projects: List[Project]) -> Optional[str]:
        """
        Get the most recent known toolset used by any of the projects.

        Returns:
            Toolset identifier, or None if no known toolset is in use
        """
        toolsets_in_use = self.collect_toolsets(projects)
        ordered = self.ranking.order_descending(toolsets_in_use)

        logger.debug(
            "Projects considered when searching toolsets: "
            f"{', '.join(p.name for p in projects)}"
        )
        logger.debug(
            "Toolsets found (known): "
            f"{', '.join(f'{ts}({self.ranking.is_known(ts)})' for ts in ordered)}"
        )

        result = next((ts for ts in ordered if self.ranking.is_known(ts)), None)
        if result is not None:
            logger.debug(f"Toolset selected: '{result}'")
        else:
            logger.debug("No toolset found in projects")
        return result

    def collect_toolsets(self, projects: Iterable[Project]) -> Set[str]:
        """Collect the distinct toolsets declared by the projects."""
        toolsets: Set[str] = set()
        for project in projects:
            try:
                toolsets.update(self._reader(project.path))
            except Exception as e:
                logger.warning(
                    f"Ignoring toolsets of project {project.name}: {e}"
                )
        return toolsets


__all__ = ["ToolsetResolver", "ToolsetReader"]
