"""Repository model and related enums"""
from enum import Enum
from dataclasses import dataclass


class PackageManagerKind(Enum):
    """Package manager detected from lockfile presence."""
    NONE = "none"
    YARN = "yarn"
    PYTHON = "python"


class FolderOutcome(Enum):
    """How processing of a single folder ended."""
    PUBLISHED = "published"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RepositoryInfo:
    """Snapshot of a folder's project type and git state."""
    folder: str
    kind: PackageManagerKind
    is_workspace: bool
    branch: str
    is_default_branch: bool
    is_clean: bool
    is_dirty: bool

    @property
    def is_recognized(self) -> bool:
        return self.kind is not PackageManagerKind.NONE
