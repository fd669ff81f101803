"""Discovery of candidate repository folders."""

from pathlib import Path
from typing import List, Union


def list_folders(root: Union[str, Path]) -> List[str]:
    """Return the names of the immediate subdirectories of root, sorted.

    Symlinks are skipped so a linked checkout is never processed twice.

    Raises:
        OSError: If root cannot be read
    """
    return sorted(
        entry.name for entry in Path(root).iterdir()
        if entry.is_dir() and not entry.is_symlink()
    )
