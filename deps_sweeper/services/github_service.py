"""GitHub pull request operations through the gh CLI"""
import json
from pathlib import Path
from typing import Optional, Union

from deps_sweeper.exceptions import CommandError
from deps_sweeper.logging_config import get_logger
from deps_sweeper.services.command_runner import run_checked

logger = get_logger(__name__)


class GitHubService:
    def __init__(self, repo_path: Union[str, Path]):
        """Initialize the service for one folder."""
        self.repo_path = Path(repo_path)

    def create_pr(self, title: str, body: str) -> str:
        """Open a pull request for the checked-out branch.

        Returns:
            Whatever gh prints, normally the PR URL
        """
        result = run_checked(
            ["gh", "pr", "create", "--title", title, "--body", body],
            cwd=self.repo_path,
        )
        logger.debug(f"[GitHub] Created PR in {self.repo_path.name}: {result.stdout}")
        return result.stdout

    def get_pr_status(self) -> dict:
        """Get gh's PR status summary (id and title per section)."""
        logger.info(f"Getting PR info: {self.repo_path.name}")
        command = ["gh", "pr", "status", "--json", "id,title"]
        result = run_checked(command, cwd=self.repo_path)
        try:
            return json.loads(result.stdout or "{}")
        except json.JSONDecodeError as e:
            raise CommandError(command, result.returncode, f"Invalid JSON output: {e}") from e

    def get_current_branch_pr_title(self) -> Optional[str]:
        """Title of the PR for the checked-out branch, or None if there is none."""
        status = self.get_pr_status()
        current = status.get("currentBranch") or {}
        return current.get("title") or None
