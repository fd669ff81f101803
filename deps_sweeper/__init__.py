"""
deps-sweeper - bulk dependency updates across sibling repositories
"""

from .__version__ import __version__
from .core import DepsSweeper
from .cli import main

__all__ = ["DepsSweeper", "main", "__version__"]
