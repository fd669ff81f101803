"""Core functionality for deps-sweeper"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import date
from typing import Callable, Dict, Optional, Union

from rich.console import Console

from deps_sweeper.config import Config
from deps_sweeper.constants import (
    FEATURE_BRANCH,
    FEATURE_COMMIT_MESSAGE,
    MAX_CONCURRENT_FOLDERS,
    REQUIRED_TOOLS,
    RunMode,
)
from deps_sweeper.logging_config import get_logger
from deps_sweeper.models.repository import FolderOutcome
from deps_sweeper.naming import branch_name, commit_message
from deps_sweeper.services.command_runner import assert_tooling
from deps_sweeper.services.folder_scanner import list_folders
from deps_sweeper.services.git_service import GitService
from deps_sweeper.services.github_service import GitHubService
from deps_sweeper.services.inspector import RepositoryInspector
from deps_sweeper.services.package_manager import DependencyUpdater
from deps_sweeper.services.publisher import BranchPublisher

console = Console(stderr=True)
logger = get_logger(__name__)


class DepsSweeper:
    """Runs the per-folder update workflow across every subfolder of a root."""

    def __init__(self, config: Union[Config, dict, None] = None, today: Optional[Callable[[], date]] = None):
        """Initialize DepsSweeper.

        Args:
            config: Configuration dict or Config object
            today: Clock used to derive the update branch name, read once per run
        """
        if config is None:
            self.config = Config()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.root_path = self.config.root_path
        self.mode = self.config.get("mode", RunMode.UPDATE)
        self.debug_mode = self.config.get("debug", False)
        self._today = today or date.today

    def run(self) -> Dict[str, FolderOutcome]:
        """Process every folder under the root.

        Returns once every folder has settled, successfully or not.

        Raises:
            ToolingNotFoundError: If gh, git or yarn is missing
            OSError: If the root cannot be listed
        """
        assert_tooling(REQUIRED_TOOLS)

        folders = list_folders(self.root_path)
        logger.debug(f"Found {len(folders)} folders in {self.root_path}")

        if self.mode == RunMode.UPDATE:
            day = self._today()
            update_branch = branch_name(day)
            update_commit = commit_message(day)

            def handler(folder: str) -> FolderOutcome:
                return self.process_update(folder, update_branch, update_commit)
        else:
            def handler(folder: str) -> FolderOutcome:
                return self.process_pull_request(folder, FEATURE_BRANCH, FEATURE_COMMIT_MESSAGE)

        return self._process_folders_parallel(folders, handler)

    def _process_folders_parallel(
        self, folders: list, handler: Callable[[str], FolderOutcome]
    ) -> Dict[str, FolderOutcome]:
        """Run handler over folders with a fixed number of workers."""
        outcomes: Dict[str, FolderOutcome] = {}

        with ThreadPoolExecutor(max_workers=MAX_CONCURRENT_FOLDERS) as executor:
            future_to_folder = {
                executor.submit(handler, folder): folder
                for folder in folders
            }

            for future in as_completed(future_to_folder):
                folder = future_to_folder[future]
                try:
                    outcomes[folder] = future.result()
                except Exception as e:
                    logger.error(f"Error while updating folder: {folder}: {e}")
                    if self.debug_mode:
                        console.print_exception()
                    outcomes[folder] = FolderOutcome.FAILED

        logger.debug(f"Finished {len(outcomes)} folders")
        return outcomes

    def _services(self, folder: str):
        """Build the per-folder services; nothing is shared between folders."""
        path = self.root_path / folder
        git_service = GitService(path)
        github_service = GitHubService(path)
        inspector = RepositoryInspector(path, git_service)
        publisher = BranchPublisher(git_service, github_service)
        return path, git_service, inspector, publisher

    def process_update(self, folder: str, update_branch: str, update_commit: str) -> FolderOutcome:
        """Upgrade dependencies on the default branch and publish them as a PR."""
        path, git_service, inspector, publisher = self._services(folder)
        info = inspector.get_info()

        if info.is_workspace:
            logger.info(f"Cannot process yarn workspace: {folder}")
            return FolderOutcome.SKIPPED

        if not info.is_recognized:
            logger.info(f"Unknown folder: {folder}")
            return FolderOutcome.SKIPPED

        if not info.is_default_branch or not info.is_clean:
            logger.info(
                f"Not master / clean: {folder} "
                f"(branch={info.branch!r}, clean={info.is_clean})"
            )
            return FolderOutcome.SKIPPED

        if git_service.remote_branch_exists(update_branch):
            logger.info(f"Origin already has branch: {folder} ({update_branch})")
            return FolderOutcome.SKIPPED

        DependencyUpdater(path).update(info.kind)

        if not git_service.is_dirty():
            logger.info(f"No updates: {folder}")
            return FolderOutcome.SKIPPED

        publisher.publish_update(update_branch, update_commit, info.branch)
        logger.info(f"Published {update_branch}: {folder}")
        return FolderOutcome.PUBLISHED

    def process_pull_request(self, folder: str, feature_branch: str, message: str) -> FolderOutcome:
        """Publish a prepared feature branch and make sure it has a PR."""
        _, _, inspector, publisher = self._services(folder)
        info = inspector.get_info()

        if info.is_workspace:
            logger.info(f"Cannot process yarn workspace: {folder}")
            return FolderOutcome.SKIPPED

        if not info.is_recognized:
            logger.info(f"Unknown folder: {folder}")
            return FolderOutcome.SKIPPED

        if info.branch != feature_branch:
            logger.info(f"Not correct branch: {folder} ({info.branch})")
            return FolderOutcome.SKIPPED

        if publisher.publish_pull_request(feature_branch, message):
            return FolderOutcome.PUBLISHED
        return FolderOutcome.SKIPPED
