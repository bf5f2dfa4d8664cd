"""
Read-only access to MSBuild project files (.vcxproj).

Elements are matched by local name so that files with and without the
MSBuild XML namespace are handled alike.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, List
import logging

from gtestwizard.core.exceptions import ProjectFileError

logger = logging.getLogger(__name__)


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def load_project_file(path: Path) -> ET.Element:
    """
    Parse a project file.

    The file handle is closed before returning, whether parsing succeeds
    or not.

    Args:
        path: Path to the project file

    Returns:
        Root element of the document

    Raises:
        ProjectFileError: If the file cannot be read, is not valid XML or
            declares an unsupported encoding
    """
    try:
        with open(path, "rb") as f:
            return ET.parse(f).getroot()
    except OSError as e:
        raise ProjectFileError(path, e.strerror or str(e)) from e
    except ET.ParseError as e:
        raise ProjectFileError(path, f"invalid XML: {e}") from e
    except (LookupError, ValueError) as e:
        # expat rejects unknown and multi-byte declared encodings this way
        raise ProjectFileError(path, f"unsupported encoding: {e}") from e


def iter_elements(root: ET.Element, name: str) -> Iterator[ET.Element]:
    """Iterate over all elements with the given local name, in document order."""
    for element in root.iter():
        if _local_name(element.tag) == name:
            yield element


def element_texts(root: ET.Element, name: str) -> List[str]:
    """Get the stripped, non-empty text of all elements with the given local name."""
    texts = []
    for element in iter_elements(root, name):
        text = (element.text or "").strip()
        if text:
            texts.append(text)
    return texts


def read_platform_toolsets(path: Path) -> List[str]:
    """
    Get all PlatformToolset values declared in a project file.

    Raises:
        ProjectFileError: If the file cannot be read or parsed
    """
    toolsets = element_texts(load_project_file(path), "PlatformToolset")
    logger.debug(f"Toolsets declared in {path}: {toolsets}")
    return toolsets


def read_configuration_types(path: Path) -> List[str]:
    """
    Get all ConfigurationType values (Application, DynamicLibrary, ...).

    Raises:
        ProjectFileError: If the file cannot be read or parsed
    """
    return element_texts(load_project_file(path), "ConfigurationType")


def read_compiled_sources(path: Path) -> List[str]:
    """
    Get the Include attribute of every ClCompile item.

    Raises:
        ProjectFileError: If the file cannot be read or parsed
    """
    root = load_project_file(path)
    return [
        element.get("Include")
        for element in iter_elements(root, "ClCompile")
        if element.get("Include")
    ]


__all__ = [
    "load_project_file",
    "iter_elements",
    "element_texts",
    "read_platform_toolsets",
    "read_configuration_types",
    "read_compiled_sources",
]
