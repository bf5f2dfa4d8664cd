"""
Replacement map assembly.

The replacement map holds template placeholders (``$name$``) and their
values. Keys are unique: adding a key twice is an error, as it would
silently change the generated project.
"""

from typing import Dict, Optional
import logging

from gtestwizard.core.exceptions import GtestWizardError
from gtestwizard.core.interfaces import ReplacementFiller
from gtestwizard.toolset.rank import ToolsetRank

logger = logging.getLogger(__name__)

GENERATE_DEBUG_INFORMATION_PLACEHOLDER = "$gta_generate_debug_information$"
FULL_PDB_TOOLSET = "v141"


def add_replacement(replacements: Dict[str, str], key: str, value: str) -> None:
    """
    Add a placeholder to the map.

    Raises:
        GtestWizardError: If the placeholder is already present
    """
    if key in replacements:
        raise GtestWizardError(f"Duplicate placeholder: {key}")
    replacements[key] = value
    logger.debug(f"Placeholder {key} = '{value}'")


class DefaultReplacementFiller(ReplacementFiller):
    """
    Fills the placeholders the wizard does not derive from projects.

    Adds the debug-information setting matching the resolved toolset
    (``/DEBUG:FULL`` needs to be explicit from v141 on) followed by any
    configured extra replacements.
    """

    def __init__(
        self,
        ranking: Optional[ToolsetRank] = None,
        extra_replacements: Optional[Dict[str, str]] = None,
    ):
        self._ranking = ranking or ToolsetRank()
        self._extra = dict(extra_replacements or {})

    def fill(self, replacements: Dict[str, str], toolset: str) -> None:
        add_replacement(
            replacements,
            GENERATE_DEBUG_INFORMATION_PLACEHOLDER,
            self.debug_information_setting(toolset),
        )
        for key, value in self._extra.items():
            add_replacement(replacements, key, value)

    def debug_information_setting(self, toolset: str) -> str:
        if self._ranking.rank(toolset) >= self._ranking.rank(FULL_PDB_TOOLSET):
            return "DebugFull"
        return "true"


__all__ = [
    "GENERATE_DEBUG_INFORMATION_PLACEHOLDER",
    "add_replacement",
    "DefaultReplacementFiller",
]
