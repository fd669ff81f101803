"""Shared constants for deps-sweeper."""

from typing import List


# Branches treated as the repository's primary branch
DEFAULT_BRANCHES: List[str] = ["master", "main"]

REMOTE_NAME = "origin"

# Filesystem markers used to detect the project type
YARN_LOCKFILE = "yarn.lock"
PYTHON_REQUIREMENTS = "requirements.txt"
PACKAGE_MANIFEST = "package.json"

# Update mode: one branch per calendar day
UPDATE_BRANCH_PREFIX = "chore/update-dependencies"
UPDATE_COMMIT_PREFIX = "Updating dependencies"

# Pull-request mode: a fixed, hand-prepared feature branch
FEATURE_BRANCH = "feature/update-dependencies"
FEATURE_COMMIT_MESSAGE = "Update dependencies"

# Executables that must be on PATH before anything runs
REQUIRED_TOOLS: List[str] = ["gh", "git", "yarn"]

YARN_UPGRADE_COMMAND: List[str] = ["npx", "yarn-upgrade-all"]

# Fixed fan-out across folders
MAX_CONCURRENT_FOLDERS = 5


class RunMode:
    """Per-folder workflows."""

    UPDATE = "update"
    PULL_REQUEST = "pull-request"


RUN_MODES: List[str] = [RunMode.UPDATE, RunMode.PULL_REQUEST]
