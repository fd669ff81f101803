"""Child process execution for non-git tooling (gh, yarn, npx)."""

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from deps_sweeper.exceptions import CommandError, ToolingNotFoundError
from deps_sweeper.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class CommandResult:
    """Outcome of a finished child process."""
    args: List[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(
    args: List[str],
    cwd: Union[str, Path, None] = None,
    env: Optional[Dict[str, str]] = None,
) -> CommandResult:
    """Run a command and capture its output.

    Args:
        args: Executable and arguments; never passed through a shell
        cwd: Working directory for the child process
        env: Extra environment variables layered over the current environment

    Uses stdin=DEVNULL so prompting tools fail instead of hanging.
    """
    child_env = None
    if env:
        child_env = {**os.environ, **env}

    logger.debug(f"Running {' '.join(args)} in {cwd or '.'}")
    completed = subprocess.run(
        args,
        capture_output=True,
        text=True,
        cwd=str(cwd) if cwd is not None else None,
        env=child_env,
        stdin=subprocess.DEVNULL,
    )
    return CommandResult(
        args=list(args),
        returncode=completed.returncode,
        stdout=completed.stdout.strip(),
        stderr=completed.stderr.strip(),
    )


def run_checked(
    args: List[str],
    cwd: Union[str, Path, None] = None,
    env: Optional[Dict[str, str]] = None,
) -> CommandResult:
    """Run a command that must succeed.

    Raises:
        CommandError: If the command exits non-zero
    """
    result = run_command(args, cwd=cwd, env=env)
    if not result.ok:
        logger.debug(f"Command failed ({result.returncode}): {result.stderr or result.stdout}")
        raise CommandError(args, result.returncode, result.stderr)
    return result


def assert_tooling(tools: Iterable[str]) -> None:
    """Ensure every tool resolves on PATH.

    Raises:
        ToolingNotFoundError: For the first tool that is missing
    """
    for tool in tools:
        if shutil.which(tool) is None:
            raise ToolingNotFoundError(tool)
        logger.debug(f"Found {tool}")
