"""
Platform toolset ranking and resolution.
"""

from .rank import (
    UNKNOWN_TOOLSET,
    BASE_TOOLSETS,
    ToolsetRank,
    xp_variant,
)

from .resolver import ToolsetResolver

from .host import (
    VISUAL_STUDIO_TOOLSETS,
    VisualStudioToolsetProvider,
)

__all__ = [
    "UNKNOWN_TOOLSET",
    "BASE_TOOLSETS",
    "ToolsetRank",
    "xp_variant",
    "ToolsetResolver",
    "VISUAL_STUDIO_TOOLSETS",
    "VisualStudioToolsetProvider",
]
