"""
Summary: Check that feature modules open with a Summary/Why docstring.
Why: The features packages document intent in a fixed four-line header.
"""

from __future__ import annotations

from pathlib import Path

import pytest

REPO_ROOT: Path = Path(__file__).resolve().parent.parent

FEATURE_PACKAGES: tuple[str, ...] = ("project", "build", "links")


def _header_files() -> list[Path]:
    files: list[Path] = []
    for package in FEATURE_PACKAGES:
        files.extend(sorted((REPO_ROOT / "src/rcargo/features" / package).glob("*.py")))
        files.extend(sorted((REPO_ROOT / "tests/features" / package).glob("test_*.py")))
    return files


def _leading_lines(path: Path, count: int) -> list[str]:
    lines = path.read_text(encoding="utf-8").splitlines()
    while lines and not lines[0].strip():
        _ = lines.pop(0)
    return lines[:count]


@pytest.mark.parametrize(
    "path", _header_files(), ids=lambda path: str(path.relative_to(REPO_ROOT))
)
def test_feature_module_header(path: Path) -> None:
    header = _leading_lines(path, 4)
    assert len(header) == 4, f"{path.name} is too short for a header docstring"

    opening, summary, why, closing = header
    assert opening.strip() == '"""', f"{path.name} must open with a docstring"
    assert closing.strip() == '"""', f"{path.name} header must be exactly two lines"

    assert summary.startswith("Summary: ") and summary.removeprefix("Summary: ").strip(), (
        f"{path.name} needs a non-empty 'Summary:' line"
    )
    assert why.startswith("Why: ") and why.removeprefix("Why: ").strip(), (
        f"{path.name} needs a non-empty 'Why:' line"
    )
