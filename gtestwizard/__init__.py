"""
gtestwizard - decision core of a Google Test project wizard.

Wires a newly generated native test project into an existing Visual Studio
workspace: finds the Google Test project, lets the user pick the projects
under test, resolves the platform toolset and adds project references.
"""

__version__ = "0.1.0"

from gtestwizard.core.diagnostics import configure_logging
from gtestwizard.core.exceptions import GtestWizardError, WizardCancelledError
from gtestwizard.core.project import Project, Workspace
from gtestwizard.config.parser import WizardConfig, load_config
from gtestwizard.toolset.rank import ToolsetRank
from gtestwizard.toolset.resolver import ToolsetResolver
from gtestwizard.wizard.orchestrator import GtestProjectWizard
from gtestwizard.wizard.wiring import ReferenceWirer, WiringOutcome

__all__ = [
    "__version__",
    "configure_logging",
    "GtestWizardError",
    "WizardCancelledError",
    "Project",
    "Workspace",
    "WizardConfig",
    "load_config",
    "ToolsetRank",
    "ToolsetResolver",
    "GtestProjectWizard",
    "ReferenceWirer",
    "WiringOutcome",
]
