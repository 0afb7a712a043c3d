"""
Summary: Derive a stable ``<name>-<hash>`` identifier for a project directory.
Why: Give every project its own cache slot that survives across runs.
"""

from __future__ import annotations

import hashlib
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from rcargo.platform.logging import logger

MANIFEST_FILE_NAME: Final[str] = "Cargo.toml"
FALLBACK_PROJECT_NAME: Final[str] = "unknown"
HASH_LENGTH: Final[int] = 7


def is_rust_project(project_path: Path) -> bool:
    """Return True when ``project_path`` holds a cargo manifest."""

    return (project_path / MANIFEST_FILE_NAME).exists()


def _lossy(text: str) -> str:
    """Replace undecodable filename bytes with U+FFFD."""

    return os.fsencode(text).decode("utf-8", "replace")


def _read_manifest_name(manifest_path: Path) -> str | None:
    """Return ``package.name`` from the manifest, or None on any failure."""

    try:
        with open(manifest_path, "rb") as f:
            manifest = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.debug("Ignoring unreadable manifest %s: %s", manifest_path, e)
        return None

    package = manifest.get("package")
    if not isinstance(package, dict):
        return None
    name = package.get("name")
    if isinstance(name, str) and name:
        return name
    return None


def resolve_project_name(project_path: Path) -> str:
    """Resolve a display name for ``project_path``.

    Prefers the manifest's declared package name, then the directory name,
    then a fixed placeholder. Never raises.
    """
    manifest_path = project_path / MANIFEST_FILE_NAME
    if manifest_path.exists():
        declared = _read_manifest_name(manifest_path)
        if declared is not None:
            return declared

    return _lossy(project_path.name) or FALLBACK_PROJECT_NAME


def generate_project_hash(project_path: Path) -> str:
    """Fingerprint the raw path string into ``HASH_LENGTH`` hex characters."""

    digest = hashlib.md5(_lossy(str(project_path)).encode("utf-8"), usedforsecurity=False)
    return digest.hexdigest()[:HASH_LENGTH]


@dataclass(frozen=True, slots=True)
class ProjectIdentifier:
    """Name and path fingerprint identifying one project's cache slot."""

    name: str
    hash: str

    @classmethod
    def from_path(cls, project_path: Path) -> "ProjectIdentifier":
        """Build the identifier for ``project_path``."""

        return cls(
            name=resolve_project_name(project_path),
            hash=generate_project_hash(project_path),
        )

    def identifier(self) -> str:
        """Return the cache directory name, ``<name>-<hash>``."""

        return f"{self.name}-{self.hash}"


__all__ = [
    "FALLBACK_PROJECT_NAME",
    "HASH_LENGTH",
    "MANIFEST_FILE_NAME",
    "ProjectIdentifier",
    "generate_project_hash",
    "is_rust_project",
    "resolve_project_name",
]
