"""
Unit tests for the MSBuild project-file reader.
"""

from unittest.mock import patch

import pytest

from gtestwizard.core.exceptions import ProjectFileError
from gtestwizard.projects.msbuild import (
    load_project_file,
    read_compiled_sources,
    read_configuration_types,
    read_platform_toolsets,
)
from tests.fixtures.projects import write_vcxproj


class TestReadPlatformToolsets:
    """Test read_platform_toolsets()."""

    def test_reads_all_configurations(self, tmp_path):
        path = write_vcxproj(tmp_path, "P", toolsets=["v141", "v140_xp"])
        assert read_platform_toolsets(path) == ["v141", "v140_xp"]

    def test_without_namespace(self, tmp_path):
        path = write_vcxproj(tmp_path, "P", toolsets=["v120"], namespace=None)
        assert read_platform_toolsets(path) == ["v120"]

    def test_strips_whitespace_and_skips_empty(self, tmp_path):
        path = tmp_path / "P.vcxproj"
        path.write_text(
            "<Project>"
            "<PropertyGroup><PlatformToolset>  v110 \n</PlatformToolset></PropertyGroup>"
            "<PropertyGroup><PlatformToolset></PlatformToolset></PropertyGroup>"
            "</Project>"
        )
        assert read_platform_toolsets(path) == ["v110"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ProjectFileError) as exc_info:
            read_platform_toolsets(tmp_path / "missing.vcxproj")
        assert exc_info.value.path == tmp_path / "missing.vcxproj"

    def test_invalid_xml(self, tmp_path):
        path = tmp_path / "bad.vcxproj"
        path.write_text("not xml at all")
        with pytest.raises(ProjectFileError, match="invalid XML"):
            read_platform_toolsets(path)

    @pytest.mark.parametrize("encoding", ["x-bogus", "utf-32"])
    def test_unsupported_declared_encoding(self, tmp_path, encoding):
        path = tmp_path / "legacy.vcxproj"
        path.write_bytes(
            f'<?xml version="1.0" encoding="{encoding}"?><Project/>'.encode("ascii")
        )
        with pytest.raises(ProjectFileError, match="unsupported encoding"):
            read_platform_toolsets(path)


class TestFileHandles:
    """Test that project files are closed regardless of outcome."""

    def test_handle_closed_on_parse_error(self, tmp_path):
        path = tmp_path / "bad.vcxproj"
        path.write_text("<Project>")
        opened = []
        real_open = open

        def tracking_open(*args, **kwargs):
            f = real_open(*args, **kwargs)
            opened.append(f)
            return f

        with patch("builtins.open", side_effect=tracking_open):
            with pytest.raises(ProjectFileError):
                load_project_file(path)

        assert len(opened) == 1
        assert opened[0].closed

    def test_handle_closed_on_success(self, tmp_path):
        path = write_vcxproj(tmp_path, "P", toolsets=["v141"])
        opened = []
        real_open = open

        def tracking_open(*args, **kwargs):
            f = real_open(*args, **kwargs)
            opened.append(f)
            return f

        with patch("builtins.open", side_effect=tracking_open):
            load_project_file(path)

        assert opened and all(f.closed for f in opened)


class TestOtherProperties:
    """Test configuration type and source readers."""

    def test_configuration_types(self, tmp_path):
        path = write_vcxproj(
            tmp_path, "P", toolsets=["v141", "v141"], configuration_type="DynamicLibrary"
        )
        assert read_configuration_types(path) == ["DynamicLibrary", "DynamicLibrary"]

    def test_compiled_sources(self, tmp_path):
        path = write_vcxproj(tmp_path, "P", sources=["a.cpp", r"src\b.cpp"])
        assert read_compiled_sources(path) == ["a.cpp", r"src\b.cpp"]
