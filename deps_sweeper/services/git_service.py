"""Git operations service"""
from pathlib import Path
from typing import Union

import git

from deps_sweeper.constants import DEFAULT_BRANCHES, REMOTE_NAME
from deps_sweeper.exceptions import GitOperationError
from deps_sweeper.logging_config import get_logger

logger = get_logger(__name__)


class GitService:
    """Service for Git operations on a single folder.

    Commands go through GitPython's command wrapper with argument lists, so
    folder and branch names never pass through a shell.
    """

    def __init__(self, repo_path: Union[str, Path]):
        """Initialize the service.

        Args:
            repo_path: Path to the folder (not validated as a repository here)
        """
        self.repo_path = Path(repo_path)
        self.remote_name = REMOTE_NAME

    def _get_git(self) -> git.Git:
        """Get a command wrapper bound to the folder.

        A fresh wrapper per call keeps concurrent queries independent.
        """
        return git.Git(str(self.repo_path))

    def _execute(self, operation: str, *args: str) -> str:
        """Run a git subcommand that must succeed and return its stdout."""
        command = ["git", *args]
        try:
            return self._get_git().execute(command)
        except git.exc.GitCommandError as e:
            stderr = str(e.stderr).strip() if e.stderr else None
            raise GitOperationError(operation, command, e.status, stderr) from e

    def current_branch(self) -> str:
        """Name of the checked-out branch (empty in detached HEAD)."""
        return self._execute("current_branch", "branch", "--show-current").strip()

    def is_default_branch(self) -> bool:
        """Check whether the checked-out branch is master or main."""
        return self.current_branch() in DEFAULT_BRANCHES

    def is_clean(self) -> bool:
        """Check that the working tree has no pending changes."""
        try:
            status = self._get_git().execute(["git", "status", "--porcelain"])
        except git.exc.GitCommandError as e:
            logger.debug(f"git status failed in {self.repo_path}: {e}")
            return False
        return not status.strip()

    def is_dirty(self) -> bool:
        """Check that the working tree has pending changes."""
        return not self.is_clean()

    def remote_branch_exists(self, branch_name: str) -> bool:
        """Check if the remote lists a head named branch_name."""
        try:
            self._get_git().execute(
                ["git", "ls-remote", "--exit-code", "--heads", self.remote_name, branch_name]
            )
            return True
        except git.exc.GitCommandError as e:
            logger.debug(f"No remote head {branch_name} for {self.repo_path.name}: exit {e.status}")
            return False

    def checkout(self, branch_name: str) -> None:
        self._execute("checkout", "checkout", branch_name)

    def create_branch(self, branch_name: str) -> None:
        """Create and check out a new local branch."""
        self._execute("create_branch", "checkout", "-b", branch_name)

    def delete_branch(self, branch_name: str) -> None:
        """Delete a local branch, ignoring failures (usually: it does not exist)."""
        try:
            self._get_git().execute(["git", "branch", "-D", branch_name])
            logger.debug(f"Deleted local branch {branch_name} in {self.repo_path.name}")
        except git.exc.GitCommandError as e:
            logger.debug(f"Ignoring failed delete of {branch_name}: exit {e.status}")

    def commit_all(self, message: str) -> None:
        """Commit all tracked changes."""
        self._execute("commit", "commit", "-am", message)

    def push(self, branch_name: str) -> None:
        """Force-push a branch to the remote."""
        self._execute("push", "push", self.remote_name, branch_name, "--force")
