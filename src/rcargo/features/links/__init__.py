"""
Summary: Public API for maintaining the project's convenience target symlink.
Why: Expose the link manager and its result types from one import path.
"""

from rcargo.features.links.target_link import LinkResult, LinkStatus, create_target_symlink

__all__ = ["LinkResult", "LinkStatus", "create_target_symlink"]
