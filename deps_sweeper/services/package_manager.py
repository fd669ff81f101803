"""Dependency upgrades per package manager"""
from pathlib import Path
from typing import Union

from deps_sweeper.constants import YARN_UPGRADE_COMMAND
from deps_sweeper.exceptions import UnknownRepositoryTypeError
from deps_sweeper.logging_config import get_logger
from deps_sweeper.models.repository import PackageManagerKind
from deps_sweeper.services.command_runner import run_checked

logger = get_logger(__name__)


class DependencyUpdater:
    """Runs the upgrade tool appropriate to a folder's package manager."""

    def __init__(self, repo_path: Union[str, Path]):
        self.repo_path = Path(repo_path)

    def update(self, kind: PackageManagerKind) -> None:
        """Upgrade dependencies in place.

        Raises:
            CommandError: If the upgrade command fails
            UnknownRepositoryTypeError: If kind has no updater
        """
        if kind is PackageManagerKind.YARN:
            self.update_yarn()
        elif kind is PackageManagerKind.PYTHON:
            self.update_python()
        else:
            raise UnknownRepositoryTypeError(self.repo_path.name)

    def update_yarn(self) -> None:
        logger.info(f"Updating yarn deps: {self.repo_path.name}")
        # npm_config_yes lets npx install the upgrader without prompting
        run_checked(YARN_UPGRADE_COMMAND, cwd=self.repo_path, env={"npm_config_yes": "true"})

    def update_python(self) -> None:
        """Not implemented: logs the intent and leaves the folder untouched."""
        # TODO: bump pins in requirements.txt once a resolver is chosen
        logger.warning(f"TODO: Updating python deps is not implemented: {self.repo_path.name}")
