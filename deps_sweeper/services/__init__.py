"""Services used by the batch driver."""

from .command_runner import CommandResult, assert_tooling, run_command, run_checked
from .folder_scanner import list_folders
from .git_service import GitService
from .github_service import GitHubService
from .inspector import RepositoryInspector
from .package_manager import DependencyUpdater
from .publisher import BranchPublisher

__all__ = [
    "CommandResult",
    "assert_tooling",
    "run_command",
    "run_checked",
    "list_folders",
    "GitService",
    "GitHubService",
    "RepositoryInspector",
    "DependencyUpdater",
    "BranchPublisher",
]
