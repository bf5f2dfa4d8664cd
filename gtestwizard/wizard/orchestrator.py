"""
Google Test project wizard.

Drives the creation of a new Google Test project: finds the Google Test
project of the workspace, asks which projects are to be tested, resolves
the platform toolset and assembles the template replacements. Once the
host has generated the project, references to the Google Test project and
the projects under test are added.
"""

from typing import Callable, Dict, Iterable, List, Optional
import logging

from gtestwizard.config.parser import WizardConfig
from gtestwizard.core.exceptions import GtestWizardError
from gtestwizard.core.interfaces import (
    HostVersionService,
    ProjectGraphMutator,
    ReplacementFiller,
    TestFrameworkDiscovery,
    UserInteraction,
)
from gtestwizard.core.project import Project
from gtestwizard.projects.filter import ProjectFilter
from gtestwizard.projects.gtest import get_gtest_include, get_link_gtest_as_dll
from gtestwizard.toolset.host import VisualStudioToolsetProvider
from gtestwizard.toolset.rank import ToolsetRank
from gtestwizard.toolset.resolver import ToolsetResolver
from gtestwizard.wizard.replacements import DefaultReplacementFiller, add_replacement
from gtestwizard.wizard.selection import SelectionGate
from gtestwizard.wizard.wiring import ReferenceWirer, WiringOutcome

logger = logging.getLogger(__name__)


class GtestProjectWizard:
    """
    Orchestrates one run of the Google Test project wizard.

    The host calls ``run_started`` before generating the project from its
    template and ``project_finished_generating`` afterwards. A
    WizardCancelledError from ``run_started`` means the user backed out
    and nothing must be generated.

    Example:
        >>> wizard = GtestProjectWizard(interaction, mutator, host_service)
        >>> replacements = wizard.run_started(solution_projects, {})
        >>> # host generates the project from the template ...
        >>> wizard.project_finished_generating(new_project)
    """

    def __init__(
        self,
        interaction: UserInteraction,
        mutator: ProjectGraphMutator,
        host_service: HostVersionService,
        discovery: Optional[TestFrameworkDiscovery] = None,
        config: Optional[WizardConfig] = None,
        filler: Optional[ReplacementFiller] = None,
    ):
        """
        Initialize wizard.

        Args:
            interaction: User prompts
            mutator: Adds project references
            host_service: Supplies the fallback toolset
            discovery: Test-framework discovery (default: Google Test)
            config: Wizard configuration (default: built-in defaults)
            filler: Fills externally-owned placeholders
                (default: DefaultReplacementFiller)
        """
        self.config = config or WizardConfig()
        ranking = ToolsetRank(self.config.extra_toolsets)

        self.project_filter = ProjectFilter(discovery)
        self.gate = SelectionGate(interaction)
        self.resolver = ToolsetResolver(host_service, ranking)
        self.wirer = ReferenceWirer(mutator, self.config.known_transient_fault)
        self.filler = filler or DefaultReplacementFiller(
            ranking, self.config.extra_replacements
        )

        self.gtest_project: Optional[Project] = None
        self.projects_under_test: List[Project] = []

    @classmethod
    def for_visual_studio(
        cls,
        interaction: UserInteraction,
        mutator: ProjectGraphMutator,
        version_getter: Callable[[], str],
        config: Optional[WizardConfig] = None,
        **kwargs,
    ) -> "GtestProjectWizard":
        """
        Create a wizard whose toolset fallback comes from the Visual Studio version.

        Args:
            version_getter: Returns the running Visual Studio version ("15.0")
        """
        config = config or WizardConfig()
        host_service = VisualStudioToolsetProvider(version_getter, config.host_toolsets)
        return cls(interaction, mutator, host_service, config=config, **kwargs)

    def run_started(
        self,
        projects: Iterable[Project],
        replacements: Optional[Dict[str, str]] = None,
    ) -> Dict[str, str]:
        """
        Run the interactive part of the wizard.

        Args:
            projects: All projects of the workspace
            replacements: Host replacement map to extend (default: new map)

        Returns:
            The replacement map, extended with the wizard's placeholders

        Raises:
            WizardCancelledError: If the user cancelled; ``replacements``
                is left untouched
        """
        if replacements is None:
            replacements = {}
        self.gtest_project = None
        self.projects_under_test = []

        frameworks, candidates = self.project_filter.split(projects)
        gtest_project = frameworks[0] if frameworks else None
        logger.debug(
            f"gtest project found at '{gtest_project.path}'"
            if gtest_project is not None
            else "no gtest project found"
        )
        if len(frameworks) > 1:
            logger.info(
                f"{len(frameworks)} gtest projects found, using "
                f"'{gtest_project.name}'"
            )

        if gtest_project is None:
            self.gate.confirm_without_test_framework()

        self.projects_under_test = self.gate.select(candidates)
        self.gtest_project = gtest_project
        logger.info(
            f"Selected {len(self.projects_under_test)} project(s) under test"
        )

        # Built separately so that a failure leaves the host map untouched
        additions: Dict[str, str] = {}
        placeholders = self.config.placeholders

        toolset = self.resolver.resolve(self.projects_under_test)
        add_replacement(additions, placeholders.toolset, toolset)
        logger.debug(f"Platform toolset: '{toolset}'")

        value = get_link_gtest_as_dll(self.gtest_project)
        add_replacement(additions, placeholders.link_gtest_as_dll, value)
        logger.debug(f"Link gtest as DLL: '{value}'")

        value = get_gtest_include(self.gtest_project)
        add_replacement(additions, placeholders.gtest_include, value)
        logger.debug(f"Includes folder: '{value}'")

        self.filler.fill(additions, toolset)

        clashes = sorted(set(additions).intersection(replacements))
        if clashes:
            raise GtestWizardError(f"Duplicate placeholders: {', '.join(clashes)}")
        replacements.update(additions)
        return replacements

    def reference_targets(self) -> List[Project]:
        """Projects the generated project depends on, in wiring order."""
        targets = []
        if self.gtest_project is not None:
            targets.append(self.gtest_project)
        targets.extend(self.projects_under_test)
        return targets

    def project_finished_generating(self, project: Project) -> List[WiringOutcome]:
        """
        Add references from the generated project to its dependencies.

        The Google Test project comes first, then the projects under test
        in selection order. A fatal fault stops wiring and propagates;
        references added so far are kept.

        Args:
            project: The newly generated project

        Returns:
            One outcome per reference target
        """
        return self.wirer.wire_all(project, self.reference_targets())


__all__ = ["GtestProjectWizard"]
