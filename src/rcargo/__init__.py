"""rcargo - run cargo with a per-project target directory on fast storage."""

__version__ = "0.1.0"

__all__ = ["__version__"]
