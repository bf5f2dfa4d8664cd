"""
User gates of the wizard: confirmation without a Google Test project and
selection of the projects under test.
"""

import os
from typing import List, Sequence
import logging

from gtestwizard.core.exceptions import WizardCancelledError
from gtestwizard.core.interfaces import UserInteraction
from gtestwizard.core.project import Project

logger = logging.getLogger(__name__)

NO_GTEST_PROJECT_TITLE = "No gtest project found"
NO_GTEST_PROJECT_MESSAGE = (
    "No gtest project has been found, and thus this project will need some "
    "extra steps before being compilable (e.g., add Google Test dependency "
    "via NuGet). Note that you can create a proper Google Test project by "
    "first executing project template 'Google Test DLL'. "
    + os.linesep
    + os.linesep
    + "Continue anyways?"
)


class SelectionGate:
    """
    Obtains the user's decisions, raising WizardCancelledError on refusal.
    """

    def __init__(self, interaction: UserInteraction):
        self._interaction = interaction

    def confirm_without_test_framework(self) -> None:
        """
        Ask whether to continue although no Google Test project exists.

        Raises:
            WizardCancelledError: If the user declines
        """
        if not self._interaction.confirm(NO_GTEST_PROJECT_MESSAGE, NO_GTEST_PROJECT_TITLE):
            logger.info("User declined to continue without gtest project")
            raise WizardCancelledError("No gtest project and user declined to continue")

    def select(self, candidates: Sequence[Project]) -> List[Project]:
        """
        Let the user pick the projects under test.

        Args:
            candidates: Projects offered for selection

        Returns:
            Selected projects in selection order (possibly empty)

        Raises:
            WizardCancelledError: If the user cancels the prompt
        """
        selection = self._interaction.select_projects(list(candidates))
        if selection is None:
            logger.info("Project selection cancelled by user")
            raise WizardCancelledError("Project selection cancelled")

        selected: List[Project] = []
        for project in selection:
            if not any(project is p for p in selected):
                selected.append(project)
        logger.debug(f"Projects under test: {', '.join(p.name for p in selected)}")
        return selected


__all__ = [
    "NO_GTEST_PROJECT_TITLE",
    "NO_GTEST_PROJECT_MESSAGE",
    "SelectionGate",
]
