"""
Workspace data model.

Projects are owned by the host; the wizard only holds references to them
for the lifetime of one invocation.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

VC_PROJECT_KIND = "{8BC9CEB8-8B4A-11D0-8D11-00A0C91BC942}"
"""Project-kind GUID of Visual C++ projects"""


@dataclass(eq=False)
class Project:
    """A project in the host workspace.

    Identity is object identity: two entries pointing at the same file are
    still different projects from the host's point of view.
    """

    name: str
    path: Path
    kind: str = ""
    is_automation_object: bool = True
    handle: Any = None  # host-side object, opaque to the wizard

    def __post_init__(self):
        self.path = Path(self.path)

    @classmethod
    def from_path(cls, path: Path, name: Optional[str] = None, **kwargs) -> "Project":
        """
        Create a project from its file path.

        The name defaults to the file stem and ``.vcxproj`` files get the
        Visual C++ project kind.
        """
        path = Path(path)
        if "kind" not in kwargs and path.suffix.lower() == ".vcxproj":
            kwargs["kind"] = VC_PROJECT_KIND
        return cls(name=name or path.stem, path=path, **kwargs)

    def __repr__(self) -> str:
        return f"Project(name={self.name!r}, path={str(self.path)!r})"


@dataclass
class Workspace:
    """The set of projects currently loaded by the host."""

    projects: List[Project] = field(default_factory=list)

    def __iter__(self):
        return iter(self.projects)

    def __len__(self) -> int:
        return len(self.projects)
