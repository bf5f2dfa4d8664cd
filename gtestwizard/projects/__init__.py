"""
Workspace project inspection: MSBuild files, classification, Google Test.
"""

from .msbuild import (
    load_project_file,
    read_platform_toolsets,
    read_configuration_types,
    read_compiled_sources,
)

from .filter import (
    is_native_code_project,
    ProjectFilter,
)

from .gtest import (
    GtestDiscovery,
    get_link_gtest_as_dll,
    get_gtest_include,
)

__all__ = [
    "load_project_file",
    "read_platform_toolsets",
    "read_configuration_types",
    "read_compiled_sources",
    "is_native_code_project",
    "ProjectFilter",
    "GtestDiscovery",
    "get_link_gtest_as_dll",
    "get_gtest_include",
]
