"""Finds and rewrites the project files that mention the project version."""

from __future__ import annotations

from pathlib import Path
import re
from typing import Any, Iterable, List, Optional, Pattern

from eris import ErisError, Err, Ok, Result
from logrus import Logger
import proctor
from semver import Version
from typist import PathLike

from ._constants import FILE_NAME_TO_KIND_MAP, FileKind


logger = Logger(__name__)

# Matches assignments such as `version = "1.2.3"` or `__version__ = '1.2.3'`.
_ASSIGNMENT_PATTERN = (
    r"(?P<prefix>\b_*(?:VERSION|version)_* ?= ?)(?P<quote>[\"'])"
    r"(?P<version>{})(?P=quote)"
)


def file_kind(path: PathLike) -> FileKind:
    """Returns the FileKind that decides how `path` is searched."""
    return FILE_NAME_TO_KIND_MAP.get(Path(path).name, "loose")


def read_text(path: PathLike) -> Optional[str]:
    """Returns the contents of a text file or None if it cannot be read.

    Line endings are returned untranslated.
    """
    try:
        with Path(path).open(newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return None


def find_current_version(
    version_files: Iterable[PathLike],
) -> Result[Version, ErisError]:
    """Reads the current project version from the given version files.

    Arguments:
        version_files: Paths to the files which are expected to hold a
            `version = "X.Y.Z"` style assignment. Missing files are skipped.

    Returns:
        Ok(version) if every version file that holds a version agrees on it.
            OR
        Err(ErisError), otherwise.
    """
    version_files = list(version_files)
    assignment_re = re.compile(_ASSIGNMENT_PATTERN.format(r"[^\"']+"))

    versions: List[str] = []
    for path in version_files:
        contents = read_text(path)
        if contents is None:
            continue

        if m := assignment_re.search(contents):
            logger.info(
                "Found version %s in the %s file.", m.group("version"), path
            )
            versions.append(m.group("version"))

    if not versions:
        return Err(
            "no versions found (searched:"
            f" {[str(path) for path in version_files]})"
        )

    if any(version != versions[0] for version in versions[1:]):
        return Err(f"no consistent version found: {versions}")

    try:
        return Ok(Version.parse(versions[0]))
    except ValueError as e:
        return Err(
            f"The project version ({versions[0]!r}) is not a valid semantic"
            f" version: {e}"
        )


def list_project_files() -> Result[List[Path], ErisError]:
    """Returns the files git knows about in the current directory.

    Tracked files and untracked files which are not ignored are included.
    """
    out_err_r = proctor.safe_popen(
        [
            "git",
            "ls-files",
            "-z",
            "--cached",
            "--others",
            "--exclude-standard",
        ]
    )
    if isinstance(out_err_r, Err):
        err: Err[Any, ErisError] = Err(
            "Unable to list the project files using git."
        )
        return err.chain(out_err_r)

    out, _err = out_err_r.ok()
    result: List[Path] = []
    # NUL-separated so that paths are not C-quoted by git.
    for name in out.split("\0"):
        name = name.strip("\n")
        if not name:
            continue

        path = Path(name)
        if path not in result and path.is_file():
            result.append(path)

    return Ok(result)


class VersionRewriter:
    """Replaces one project version with another in project files."""

    def __init__(self, from_version: Version, to_version: Version) -> None:
        self.from_version = from_version
        self.to_version = to_version

        escaped_version = re.escape(str(from_version))
        self.precise_re = re.compile(
            _ASSIGNMENT_PATTERN.format(escaped_version)
        )
        self.loose_re = re.compile(
            r"\b(?P<version>{})\b".format(escaped_version)
        )

    def pattern_for(self, path: PathLike) -> Optional[Pattern[str]]:
        """Returns the regex used to search `path` (None means skip it)."""
        kind = file_kind(path)
        if kind == "precise":
            return self.precise_re
        elif kind == "loose":
            return self.loose_re
        else:
            return None

    def find_files_to_update(self, paths: Iterable[PathLike]) -> List[Path]:
        """Returns the files in `paths` which mention the old version."""
        result = []
        for path in paths:
            regexp = self.pattern_for(path)
            if regexp is None:
                logger.debug("Skipping the %s file.", path)
                continue

            contents = read_text(path)
            if contents is not None and regexp.search(contents):
                result.append(Path(path))

        return result

    def update_files(self, paths: Iterable[PathLike]) -> None:
        """Rewrites every mention of the old version in `paths`."""
        for path in paths:
            path = Path(path)
            regexp = self.pattern_for(path)
            if regexp is None:
                continue

            with path.open(newline="") as f:
                contents = f.read()

            new_contents = regexp.sub(self._replace, contents)
            logger.info("Updating the version in the %s file.", path)
            with path.open("w", newline="") as f:
                f.write(new_contents)

    def _replace(self, m: re.Match) -> str:
        start, end = m.span("version")
        offset = m.start()
        match = m.group(0)
        return (
            match[: start - offset]
            + str(self.to_version)
            + match[end - offset :]
        )
