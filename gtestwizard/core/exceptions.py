"""
Centralized exception hierarchy for gtestwizard.

This module defines all custom exceptions raised by the wizard core.
Faults coming from host collaborators (for example the project-graph
mutator) are never wrapped in these types.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class GtestWizardError(Exception):
    """Base exception for all gtestwizard errors."""

    pass


# ============================================================================
# Workflow Exceptions
# ============================================================================


class WizardCancelledError(GtestWizardError):
    """Raised when the user aborts the wizard.

    This is a terminal user decision, not a failure. Hosts catch it and
    treat the invocation as a clean no-op.
    """

    def __init__(self, reason: str = "Wizard cancelled by user"):
        self.reason = reason
        super().__init__(reason)


# ============================================================================
# Project Exceptions
# ============================================================================


class ProjectFileError(GtestWizardError):
    """Raised when a project file cannot be opened or parsed."""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"Cannot read project file {path}: {message}")


# ============================================================================
# Toolset Exceptions
# ============================================================================


class ToolsetError(GtestWizardError):
    """Base exception for toolset table and toolset lookup errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(GtestWizardError):
    """Configuration parsing or validation error."""

    pass
