"""Version information for deps-sweeper."""

__version__ = "0.1.0"
