"""
Summary: Public API for classifying and running cargo invocations.
Why: Keep the dispatcher decoupled from subprocess details.
"""

from rcargo.features.build.classifier import (
    NON_BUILD_SUBCOMMANDS,
    NON_BUILD_TOKENS,
    is_required_target_dir,
)
from rcargo.features.build.runner import CargoRunner, VersionQuery

__all__ = [
    "CargoRunner",
    "NON_BUILD_SUBCOMMANDS",
    "NON_BUILD_TOKENS",
    "VersionQuery",
    "is_required_target_dir",
]
