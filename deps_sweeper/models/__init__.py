"""Data models for deps-sweeper."""

from .repository import FolderOutcome, PackageManagerKind, RepositoryInfo

__all__ = ["FolderOutcome", "PackageManagerKind", "RepositoryInfo"]
