"""Pytest fixtures for deps-sweeper tests"""
import json
import tempfile
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import Mock, patch

import git
import pytest

from deps_sweeper.models.repository import PackageManagerKind, RepositoryInfo
from deps_sweeper.services.git_service import GitService
from deps_sweeper.services.github_service import GitHubService
from deps_sweeper.services.inspector import RepositoryInspector
from deps_sweeper.services.package_manager import DependencyUpdater

# Calls that change a repository, its remote or GitHub
MUTATING_CALLS = {
    "updater.update",
    "git.delete_branch",
    "git.create_branch",
    "git.checkout",
    "git.commit_all",
    "git.push",
    "github.create_pr",
}


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def workspace_dir(temp_dir):
    """Directory holding the sibling checkouts."""
    path = temp_dir / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def bare_remote(temp_dir):
    """A bare repository standing in for origin."""
    repo = git.Repo.init(temp_dir / "remote.git", bare=True)
    yield repo
    repo.close()


@pytest.fixture
def git_repo(workspace_dir, bare_remote):
    """A yarn project on main, pushed to the bare remote."""
    repo_path = workspace_dir / "app"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")

    manifest = {"name": "app", "version": "1.0.0", "dependencies": {"left-pad": "^1.0.0"}}
    (repo_path / "package.json").write_text(json.dumps(manifest, indent=2) + "\n")
    (repo_path / "yarn.lock").write_text("# yarn lockfile v1\n\nleft-pad@^1.0.0:\n  version \"1.0.0\"\n")
    repo.index.add(["package.json", "yarn.lock"])
    repo.index.commit("Initial commit")

    repo.git.branch("-M", "main")
    repo.create_remote("origin", bare_remote.git_dir)
    repo.git.push("origin", "main")

    yield repo

    repo.close()


def bump_dependency(repo_path: Path, version: str = "^1.3.0") -> None:
    """Simulate an upgrade tool rewriting package.json."""
    manifest_path = Path(repo_path) / "package.json"
    manifest = json.loads(manifest_path.read_text())
    manifest["dependencies"]["left-pad"] = version
    manifest_path.write_text(json.dumps(manifest, indent=2) + "\n")


def make_info(folder, kind=PackageManagerKind.YARN, is_workspace=False, branch="main", clean=True):
    """Build a RepositoryInfo with consistent derived flags."""
    return RepositoryInfo(
        folder=folder,
        kind=kind,
        is_workspace=is_workspace,
        branch=branch,
        is_default_branch=branch in ("main", "master"),
        is_clean=clean,
        is_dirty=not clean,
    )


class FolderDoubles:
    """Mocked services for one folder, recording calls in order."""

    def __init__(self, root: Path, name: str, info: RepositoryInfo):
        path = root / name
        self.git = Mock(spec=GitService)
        self.git.repo_path = path
        self.git.remote_branch_exists.return_value = False
        self.git.is_dirty.return_value = True

        self.github = Mock(spec=GitHubService)
        self.github.repo_path = path
        self.github.get_current_branch_pr_title.return_value = None

        self.inspector = Mock(spec=RepositoryInspector)
        self.inspector.get_info.return_value = info

        self.updater = Mock(spec=DependencyUpdater)

        self.calls = Mock()
        self.calls.attach_mock(self.git, "git")
        self.calls.attach_mock(self.github, "github")
        self.calls.attach_mock(self.updater, "updater")

    def call_names(self):
        return [name for name, _args, _kwargs in self.calls.mock_calls]

    def mutating_calls(self):
        return [name for name in self.call_names() if name in MUTATING_CALLS]


@pytest.fixture
def fake_folders(temp_dir):
    """Patch the per-folder services used by DepsSweeper with FolderDoubles."""
    doubles = {}

    def add(name, **info_kwargs):
        (temp_dir / name).mkdir()
        doubles[name] = FolderDoubles(temp_dir, name, make_info(name, **info_kwargs))
        return doubles[name]

    def pick(attr):
        return lambda path, *args: getattr(doubles[Path(path).name], attr)

    with patch("deps_sweeper.core.assert_tooling") as mock_assert_tooling, \
            patch("deps_sweeper.core.GitService", side_effect=pick("git")), \
            patch("deps_sweeper.core.GitHubService", side_effect=pick("github")), \
            patch("deps_sweeper.core.RepositoryInspector", side_effect=pick("inspector")), \
            patch("deps_sweeper.core.DependencyUpdater", side_effect=pick("updater")):
        yield SimpleNamespace(
            root=temp_dir,
            add=add,
            doubles=doubles,
            assert_tooling=mock_assert_tooling,
        )


@pytest.fixture
def repo_info():
    """Factory for RepositoryInfo records."""
    return make_info


@pytest.fixture
def bump():
    """Function that rewrites package.json like an upgrade tool would."""
    return bump_dependency
