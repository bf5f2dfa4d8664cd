"""
Ordering of MSVC platform toolsets.

Toolsets are ranked through an ordered table rather than by parsing their
names: the identifiers are opaque tokens, and ``v141_xp`` must sort between
``v141`` and whatever comes next. Identifiers missing from the table are
valid data but rank below every known toolset and are never selected.
"""

from typing import Dict, Iterable, List, Optional
import logging

from gtestwizard.core.exceptions import ToolsetError

logger = logging.getLogger(__name__)

UNKNOWN_TOOLSET = -1
"""Rank of any identifier not in the table"""

XP_SUFFIX = "_xp"

RANK_STEP = 100

BASE_TOOLSETS = ["v100", "v110", "v120", "v140", "v141"]
"""Toolchain revisions in increasing recency"""


def xp_variant(toolset: str) -> str:
    """Get the extended-compatibility (Windows XP) variant of a toolset."""
    return f"{toolset}{XP_SUFFIX}"


class ToolsetRank:
    """
    Total order over known toolset identifiers.

    Every base toolset is followed by its ``_xp`` variant, ranked
    immediately above it.

    Example:
        >>> ranking = ToolsetRank()
        >>> ranking.rank("v120_xp") > ranking.rank("v120")
        True
        >>> ranking.is_known("bogus")
        False
    """

    def __init__(self, extra_toolsets: Optional[Iterable[str]] = None):
        """
        Initialize the rank table.

        Args:
            extra_toolsets: Additional base toolsets, in increasing recency,
                ranked above all built-in ones
        """
        self._ranks: Dict[str, int] = {}
        for toolset in BASE_TOOLSETS:
            self.register(toolset)
        for toolset in extra_toolsets or []:
            self.register(toolset)

    def register(self, toolset: str) -> None:
        """
        Append a toolset at the top of the table.

        Base toolsets get their ``_xp`` variant registered as well; an
        identifier that already ends in ``_xp`` is registered on its own.

        Raises:
            ToolsetError: If the identifier is empty or already registered
        """
        if not toolset:
            raise ToolsetError("Toolset identifier cannot be empty")

        names = [toolset]
        if not toolset.endswith(XP_SUFFIX):
            names.append(xp_variant(toolset))

        for name in names:
            if name in self._ranks:
                raise ToolsetError(f"Toolset already registered: {name}")

        for name in names:
            self._ranks[name] = (len(self._ranks) + 1) * RANK_STEP
            logger.debug(f"Registered toolset {name} with rank {self._ranks[name]}")

    def rank(self, toolset: str) -> int:
        """Get the rank of a toolset, or UNKNOWN_TOOLSET if not in the table."""
        return self._ranks.get(toolset, UNKNOWN_TOOLSET)

    def is_known(self, toolset: str) -> bool:
        """Check whether a toolset is in the table."""
        return self.rank(toolset) != UNKNOWN_TOOLSET

    def compare(self, a: str, b: str) -> int:
        """
        Compare two toolsets.

        Returns:
            Negative if ``a`` ranks below ``b``, zero if equal, positive otherwise
        """
        rank_a, rank_b = self.rank(a), self.rank(b)
        return (rank_a > rank_b) - (rank_a < rank_b)

    def order_descending(self, toolsets: Iterable[str]) -> List[str]:
        """
        Sort toolsets from most to least recent.

        Unknown toolsets end up last; ties among them keep alphabetical
        order so the result does not depend on set iteration order.
        """
        return sorted(sorted(toolsets), key=self.rank, reverse=True)

    def known_toolsets(self) -> List[str]:
        """List all known toolsets in increasing recency."""
        return sorted(self._ranks, key=self._ranks.__getitem__)

    def __contains__(self, toolset: str) -> bool:
        return self.is_known(toolset)


__all__ = [
    "UNKNOWN_TOOLSET",
    "BASE_TOOLSETS",
    "ToolsetRank",
    "xp_variant",
]
