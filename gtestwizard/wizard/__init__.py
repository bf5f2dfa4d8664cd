"""
Wizard workflow: user gates, replacements, reference wiring, orchestration.
"""

from .selection import (
    NO_GTEST_PROJECT_TITLE,
    NO_GTEST_PROJECT_MESSAGE,
    SelectionGate,
)

from .wiring import (
    WiringOutcome,
    ReferenceWirer,
)

from .replacements import (
    GENERATE_DEBUG_INFORMATION_PLACEHOLDER,
    add_replacement,
    DefaultReplacementFiller,
)

from .orchestrator import GtestProjectWizard

__all__ = [
    "NO_GTEST_PROJECT_TITLE",
    "NO_GTEST_PROJECT_MESSAGE",
    "SelectionGate",
    "WiringOutcome",
    "ReferenceWirer",
    "GENERATE_DEBUG_INFORMATION_PLACEHOLDER",
    "add_replacement",
    "DefaultReplacementFiller",
    "GtestProjectWizard",
]
