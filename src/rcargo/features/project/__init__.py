"""
Summary: Public API for deriving per-project cache identifiers.
Why: Let commands import identity helpers without reaching into modules.
"""

from rcargo.features.project.identifier import (
    MANIFEST_FILE_NAME,
    ProjectIdentifier,
    generate_project_hash,
    is_rust_project,
    resolve_project_name,
)

__all__ = [
    "MANIFEST_FILE_NAME",
    "ProjectIdentifier",
    "generate_project_hash",
    "is_rust_project",
    "resolve_project_name",
]
