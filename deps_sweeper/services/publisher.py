"""Branch, commit, push and pull request publishing"""
from deps_sweeper.logging_config import get_logger
from deps_sweeper.services.git_service import GitService
from deps_sweeper.services.github_service import GitHubService

logger = get_logger(__name__)


class BranchPublisher:
    """Publishes local changes of one folder as a pull request."""

    def __init__(self, git_service: GitService, github_service: GitHubService):
        self.git_service = git_service
        self.github_service = github_service

    @property
    def folder(self) -> str:
        return self.git_service.repo_path.name

    def publish_update(self, branch_name: str, commit_message: str, original_branch: str) -> None:
        """Move the working tree changes onto a fresh branch and open a PR.

        The local branch is recreated from scratch, pushed with --force and
        the folder is switched back to original_branch afterwards. A failing
        step raises and leaves the folder where it stopped.
        """
        self.git_service.delete_branch(branch_name)
        self.git_service.create_branch(branch_name)

        logger.info(f"Committing... {self.folder}")
        self.git_service.commit_all(commit_message)

        logger.info(f"Pushing... {self.folder}")
        self.git_service.push(branch_name)

        logger.info(f"Creating PR {self.folder} {branch_name}")
        self.github_service.create_pr(branch_name, commit_message)

        self.git_service.checkout(original_branch)

    def publish_pull_request(self, branch_name: str, commit_message: str) -> bool:
        """Push the checked-out feature branch and open a PR unless one exists.

        Returns:
            True if a new pull request was created
        """
        if not self.git_service.remote_branch_exists(branch_name):
            if self.git_service.is_dirty():
                logger.info(f"Committing... {self.folder}")
                self.git_service.commit_all(commit_message)
            logger.info(f"Pushing... {self.folder}")
            self.git_service.push(branch_name)

        title = self.github_service.get_current_branch_pr_title()
        if title:
            logger.info(f"PR already open for {self.folder}: {title}")
            return False

        logger.info(f"Creating PR {self.folder} {branch_name}")
        self.github_service.create_pr(branch_name, commit_message)
        return True
