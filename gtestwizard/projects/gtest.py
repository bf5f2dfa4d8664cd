"""
Google Test project support.

Finds Google Test projects in a workspace and derives the values the
generated test project needs from them.
"""

from pathlib import Path, PureWindowsPath
from typing import List, Optional, Sequence
import logging

from gtestwizard.core.exceptions import ProjectFileError
from gtestwizard.core.interfaces import TestFrameworkDiscovery
from gtestwizard.core.project import Project
from gtestwizard.projects.msbuild import (
    read_compiled_sources,
    read_configuration_types,
)

logger = logging.getLogger(__name__)

GTEST_ALL_SOURCE = "gtest-all.cc"
GTEST_HEADER = Path("gtest") / "gtest.h"
INCLUDE_SEARCH_DIRS = [Path("include"), Path("googletest") / "include"]
DYNAMIC_LIBRARY = "DynamicLibrary"


class GtestDiscovery(TestFrameworkDiscovery):
    """
    Identifies Google Test projects by the sources they compile.

    A project is a Google Test project if it compiles ``gtest-all.cc``.
    """

    def find(self, projects: Sequence[Project]) -> List[Project]:
        """Find Google Test projects, keeping input order."""
        return [p for p in projects if self.is_gtest_project(p)]

    def is_gtest_project(self, project: Project) -> bool:
        try:
            sources = read_compiled_sources(project.path)
        except ProjectFileError as e:
            logger.warning(f"Skipping project {project.name}: {e}")
            return False
        # vcxproj paths use backslashes regardless of platform
        return any(
            PureWindowsPath(source).name.lower() == GTEST_ALL_SOURCE
            for source in sources
        )


def get_link_gtest_as_dll(gtest_project: Optional[Project]) -> str:
    """
    Check whether Google Test is built as a DLL.

    Args:
        gtest_project: Google Test project, or None

    Returns:
        "true" if any configuration builds a dynamic library, else "false"
    """
    if gtest_project is None:
        return "false"
    try:
        types = read_configuration_types(gtest_project.path)
    except ProjectFileError as e:
        logger.warning(f"Cannot determine configuration type: {e}")
        return "false"
    return "true" if DYNAMIC_LIBRARY in types else "false"


def get_gtest_include(gtest_project: Optional[Project]) -> str:
    """
    Find the include directory of a Google Test project.

    Args:
        gtest_project: Google Test project, or None

    Returns:
        Absolute include directory, or "" if none was found
    """
    if gtest_project is None:
        return ""
    project_dir = gtest_project.path.parent
    for candidate in INCLUDE_SEARCH_DIRS:
        include_dir = project_dir / candidate
        if (include_dir / GTEST_HEADER).is_file():
            return str(include_dir.resolve())
    logger.debug(f"No gtest include directory below {project_dir}")
    return ""


__all__ = [
    "GtestDiscovery",
    "get_link_gtest_as_dll",
    "get_gtest_include",
]
