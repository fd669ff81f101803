"""Custom exceptions for deps-sweeper"""

from typing import Optional, Sequence, Union


class DepsSweeperError(Exception):
    """Base exception for all deps-sweeper errors."""
    pass


class CommandError(DepsSweeperError):
    """Exception raised when a command that must succeed exits non-zero."""

    def __init__(
        self,
        command: Union[str, Sequence[str]],
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        if isinstance(command, str):
            self.command = command
        else:
            self.command = " ".join(str(part) for part in command)
        self.returncode = returncode
        self.stderr = stderr

        error_msg = f"Error executing command: {self.command}"
        if returncode is not None:
            error_msg += f" (exit code {returncode})"
        if stderr:
            error_msg += f": {stderr}"

        super().__init__(error_msg)


class GitOperationError(CommandError):
    """Exception raised for errors in Git operations."""

    def __init__(
        self,
        operation: str,
        command: Union[str, Sequence[str]],
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        self.operation = operation
        super().__init__(command, returncode, stderr)


class ToolingNotFoundError(DepsSweeperError):
    """Exception raised when a required executable is not on PATH."""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(f"Tooling not found: {tool}")


class UnknownRepositoryTypeError(DepsSweeperError):
    """Exception raised when a folder has no supported package manager."""

    def __init__(self, folder: str):
        self.folder = folder
        super().__init__(f"Unknown repo type: {folder}")
