"""
Toolset fallback derived from the host IDE version.
"""

from typing import Callable, Dict, Optional
import logging

from gtestwizard.core.interfaces import HostVersionService

logger = logging.getLogger(__name__)

VISUAL_STUDIO_TOOLSETS: Dict[str, str] = {
    "10": "v100",  # Visual Studio 2010
    "11": "v110",  # Visual Studio 2012
    "12": "v120",  # Visual Studio 2013
    "14": "v140",  # Visual Studio 2015
    "15": "v141",  # Visual Studio 2017
}


def _major_version(version: str) -> str:
    return version.strip().split(".", 1)[0]


class VisualStudioToolsetProvider(HostVersionService):
    """
    Maps the running Visual Studio version to its default platform toolset.

    The version is obtained lazily through ``version_getter`` (typically
    reading ``DTE.Version``), so a host that is never asked for a fallback
    is never queried.
    """

    def __init__(
        self,
        version_getter: Callable[[], str],
        overrides: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize provider.

        Args:
            version_getter: Returns the host version, e.g. "15.0"
            overrides: Extra or replacing major-version -> toolset mappings
        """
        self._version_getter = version_getter
        self._toolsets = dict(VISUAL_STUDIO_TOOLSETS)
        if overrides:
            self._toolsets.update(
                {_major_version(k): v for k, v in overrides.items()}
            )

    def toolset_from_host_version(self) -> str:
        """Get the default toolset of the running host."""
        version = self._version_getter()
        toolset = self._toolsets.get(_major_version(version))
        if toolset is None:
            toolset = self._newest_toolset()
            logger.warning(
                f"Unknown host version '{version}', using toolset '{toolset}'"
            )
        return toolset

    def _newest_toolset(self) -> str:
        newest = max(self._toolsets, key=lambda major: int(major))
        return self._toolsets[newest]


__all__ = ["VISUAL_STUDIO_TOOLSETS", "VisualStudioToolsetProvider"]
