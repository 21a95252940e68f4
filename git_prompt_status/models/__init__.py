"""Value objects produced while computing a prompt status line."""

from .status import (
    RepoPaths,
    BranchInfo,
    RemoteTracking,
    StatusCounts,
    PromptStatus,
)

__all__ = [
    "RepoPaths",
    "BranchInfo",
    "RemoteTracking",
    "StatusCounts",
    "PromptStatus",
]
