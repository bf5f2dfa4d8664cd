"""
Unit tests for the exception hierarchy.
"""

from pathlib import Path

from gtestwizard.core.exceptions import (
    ConfigError,
    GtestWizardError,
    ProjectFileError,
    ToolsetError,
    WizardCancelledError,
)


class TestExceptions:
    def test_cancelled_is_wizard_error(self):
        error = WizardCancelledError()
        assert isinstance(error, GtestWizardError)
        assert error.reason == "Wizard cancelled by user"

    def test_project_file_error_keeps_path(self):
        error = ProjectFileError(Path("A.vcxproj"), "locked")
        assert error.path == Path("A.vcxproj")
        assert "A.vcxproj" in str(error)
        assert "locked" in str(error)

    def test_all_derive_from_base(self):
        for error_type in (ProjectFileError, ToolsetError, ConfigError):
            assert issubclass(error_type, GtestWizardError)
