"""Contains constant variables."""

from __future__ import annotations

from typing import Dict, Final, Literal, Tuple


FileKind = Literal["precise", "loose", "skip"]
IncrementKind = Literal["auto", "patch", "minor", "major", "strip", "pre"]

# Files that are not listed here are searched loosely.
FILE_NAME_TO_KIND_MAP: Final[Dict[str, FileKind]] = {
    "Cargo.toml": "precise",
    "pyproject.toml": "precise",
    "setup.py": "precise",
    "Cargo.lock": "skip",
    "Pipfile.lock": "skip",
    "pdm.lock": "skip",
    "poetry.lock": "skip",
    "uv.lock": "skip",
}

DEFAULT_VERSION_FILES: Final[Tuple[str, ...]] = (
    "pyproject.toml",
    "Cargo.toml",
    ".env",
)

PRERELEASE_LABEL: Final = "pre"

PROJECT_NAME: Final = "booper"
