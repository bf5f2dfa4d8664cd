"""
Core functionality for gtestwizard.

This package contains the data model, collaborator interfaces and
exceptions that the other components depend on.
"""

from .exceptions import (
    GtestWizardError,
    WizardCancelledError,
    ProjectFileError,
    ToolsetError,
    ConfigError,
)

from .project import (
    Project,
    Workspace,
    VC_PROJECT_KIND,
)

from .interfaces import (
    TestFrameworkDiscovery,
    HostVersionService,
    UserInteraction,
    ProjectGraphMutator,
    ReplacementFiller,
)

__all__ = [
    "GtestWizardError",
    "WizardCancelledError",
    "ProjectFileError",
    "ToolsetError",
    "ConfigError",
    "Project",
    "Workspace",
    "VC_PROJECT_KIND",
    "TestFrameworkDiscovery",
    "HostVersionService",
    "UserInteraction",
    "ProjectGraphMutator",
    "ReplacementFiller",
]
