"""Read-only inspection of a repository folder"""
import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

from deps_sweeper.constants import PACKAGE_MANIFEST, PYTHON_REQUIREMENTS, YARN_LOCKFILE
from deps_sweeper.logging_config import get_logger
from deps_sweeper.models.repository import PackageManagerKind, RepositoryInfo
from deps_sweeper.services.git_service import GitService

logger = get_logger(__name__)


class RepositoryInspector:
    """Determines a folder's project type and git state.

    Every query is independent and safe to run concurrently with the others.
    """

    def __init__(self, repo_path: Union[str, Path], git_service: Optional[GitService] = None):
        self.repo_path = Path(repo_path)
        self.git_service = git_service or GitService(self.repo_path)

    def package_manager_kind(self) -> PackageManagerKind:
        """Detect the package manager from lockfile presence."""
        if (self.repo_path / YARN_LOCKFILE).is_file():
            return PackageManagerKind.YARN
        if (self.repo_path / PYTHON_REQUIREMENTS).is_file():
            return PackageManagerKind.PYTHON
        return PackageManagerKind.NONE

    def read_package_manifest(self) -> Optional[dict]:
        """Parse package.json, returning None if it is missing or invalid."""
        try:
            data = json.loads((self.repo_path / PACKAGE_MANIFEST).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.debug(f"Could not read {PACKAGE_MANIFEST} in {self.repo_path.name}: {e}")
            return None
        return data if isinstance(data, dict) else None

    def is_workspace(self) -> bool:
        """Check whether the folder is a yarn workspace root."""
        if self.package_manager_kind() is not PackageManagerKind.YARN:
            return False

        manifest = self.read_package_manifest()
        return bool(manifest and manifest.get("workspaces"))

    def current_branch(self) -> str:
        return self.git_service.current_branch()

    def is_default_branch(self) -> bool:
        return self.git_service.is_default_branch()

    def is_clean(self) -> bool:
        return self.git_service.is_clean()

    def is_dirty(self) -> bool:
        return self.git_service.is_dirty()

    def get_info(self) -> RepositoryInfo:
        """Run every query concurrently and collect the results.

        Raises:
            GitOperationError: If the current branch cannot be determined
        """
        with ThreadPoolExecutor(max_workers=6) as executor:
            kind = executor.submit(self.package_manager_kind)
            workspace = executor.submit(self.is_workspace)
            branch = executor.submit(self.current_branch)
            default_branch = executor.submit(self.is_default_branch)
            clean = executor.submit(self.is_clean)
            dirty = executor.submit(self.is_dirty)

            info = RepositoryInfo(
                folder=self.repo_path.name,
                kind=kind.result(),
                is_workspace=workspace.result(),
                branch=branch.result(),
                is_default_branch=default_branch.result(),
                is_clean=clean.result(),
                is_dirty=dirty.result(),
            )

        logger.debug(f"Inspected {info.folder}: {info}")
        return info
