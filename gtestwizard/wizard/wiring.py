"""
Project reference wiring.

Adding a project reference through the IDE automation layer sometimes
fails with a well-known COM error even though the reference is in place.
That single fault is absorbed; every other fault is logged and re-raised.
"""

from enum import Enum
from typing import Iterable, List
import logging

from gtestwizard.config.parser import KNOWN_TRANSIENT_FAULT
from gtestwizard.core.interfaces import ProjectGraphMutator
from gtestwizard.core.project import Project

logger = logging.getLogger(__name__)


class WiringOutcome(Enum):
    """Result of one reference attempt that did not fail."""

    ATTACHED = "attached"
    SKIPPED = "skipped"


class ReferenceWirer:
    """
    Adds references from a generated project to its dependencies.
    """

    def __init__(
        self,
        mutator: ProjectGraphMutator,
        known_transient_fault: str = KNOWN_TRANSIENT_FAULT,
    ):
        """
        Initialize wirer.

        Args:
            mutator: Host service that adds references
            known_transient_fault: Exact message of the fault to absorb
        """
        self._mutator = mutator
        self.known_transient_fault = known_transient_fault

    def wire(self, project: Project, referenced_project: Project) -> WiringOutcome:
        """
        Add a reference from ``project`` to ``referenced_project``.

        Returns:
            ATTACHED on success, SKIPPED if the reference could not be added
            for a known benign reason

        Raises:
            Exception: Any other fault of the mutator, unchanged
        """
        if not project.is_automation_object:
            logger.debug(
                f"Project {project.name}: not an automation object, "
                f"cannot add reference to project {referenced_project.name}"
            )
            return WiringOutcome.SKIPPED

        try:
            self._mutator.add_reference(project, referenced_project)
        except Exception as e:
            if str(e) != self.known_transient_fault:
                logger.error(
                    f"Exception while adding project {referenced_project.name} "
                    f"as reference to project {project.name}. "
                    f"Exception message: {e}"
                )
                raise
            logger.debug(
                f"Project {project.name}: ignoring known fault while adding "
                f"reference to project {referenced_project.name}: {e}"
            )
            return WiringOutcome.SKIPPED

        logger.debug(
            f"Project {project.name}: Added reference to project {referenced_project.name}"
        )
        return WiringOutcome.ATTACHED

    def wire_all(
        self, project: Project, referenced_projects: Iterable[Project]
    ) -> List[WiringOutcome]:
        """
        Wire references in order, stopping at the first fatal fault.

        References added before a fatal fault are left in place.
        """
        return [self.wire(project, target) for target in referenced_projects]


__all__ = ["WiringOutcome", "ReferenceWirer"]
