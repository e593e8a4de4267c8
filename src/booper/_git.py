"""Wrappers around the git commands used to release a new version."""

from __future__ import annotations

import shlex
from typing import Any, List, Optional, Tuple

from eris import ErisError, Err, Ok, Result
from logrus import Logger
import proctor
from semver import Version


logger = Logger(__name__)


def _run(
    cmd_list: List[str], error_msg: str
) -> Result[Tuple[str, str], ErisError]:
    logger.info("Running command: %r", cmd_list)
    out_err_r = proctor.safe_popen(cmd_list)
    if isinstance(out_err_r, Err):
        err: Err[Any, ErisError] = Err(error_msg)
        return err.chain(out_err_r)

    return out_err_r


def is_clean() -> bool:
    """Returns True if the working tree has no unstaged changes."""
    return isinstance(
        proctor.safe_popen(["git", "diff", "--exit-code"]), Ok
    )


def get_last_tag() -> Optional[str]:
    """Returns the most recent tag reachable from HEAD (if one exists)."""
    out_err_r = proctor.safe_popen(["git", "describe", "--tags", "--abbrev=0"])
    if isinstance(out_err_r, Err):
        logger.info("No git tags found.")
        return None

    out, _err = out_err_r.ok()
    return out.strip()


def tag_name_for(version: Version, last_tag: Optional[str]) -> str:
    """Returns the tag name used to release `version`.

    The 'v' prefix is used unless the last tag was created without one.
    """
    if last_tag is not None and not last_tag.startswith("v"):
        return str(version)
    return f"v{version}"


def commit(message: str) -> Result[Tuple[str, str], ErisError]:
    """Commits all changes to tracked files."""
    return _run(["git", "commit", "-am", message], "commit failed")


def push() -> Result[Tuple[str, str], ErisError]:
    """Pushes the current branch."""
    return _run(["git", "push"], "push failed")


def tag(name: str) -> Result[Tuple[str, str], ErisError]:
    """Tags the HEAD commit."""
    return _run(["git", "tag", name], "tag failed")


def push_tag(name: str) -> Result[Tuple[str, str], ErisError]:
    """Pushes a single tag to the 'origin' remote."""
    return _run(["git", "push", "origin", name], "push tag failed")


def run_command(cmd: str) -> Result[Tuple[str, str], ErisError]:
    """Runs a user-provided shell-style command string."""
    return _run(shlex.split(cmd), f"command failed: {cmd!r}")
