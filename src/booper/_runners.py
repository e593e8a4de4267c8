"""Contains the clack runner functions."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from eris import ErisError, Err, Ok, Result
from logrus import Logger
from semver import Version

from . import _git as git
from ._config import BumpConfig, Config, InfoConfig
from ._files import VersionRewriter, find_current_version, list_project_files
from ._helpers import confirm, describe_git_ops
from ._increment import Increment


logger = Logger(__name__)


def run_bump(cfg: BumpConfig) -> int:
    """Clack runner for the 'bump' subcommand."""
    if not cfg.commit and (cfg.tag or cfg.push):
        logger.error(
            "Can't %s when -c / --commit is not enabled.",
            "tag" if cfg.tag else "push",
        )
        return 1

    increment_r = Increment.from_string(cfg.increment)
    if isinstance(increment_r, Err):
        logger.error(
            "Unable to parse the INCREMENT argument.",
            error=increment_r.err().to_json(),
        )
        return 1

    increment = increment_r.ok()

    if not git.is_clean():
        logger.error("uncommitted changes")
        return 1

    from_version_r = find_current_version(cfg.version_files)
    if isinstance(from_version_r, Err):
        logger.error(
            "An error occurred while attempting to find the current project"
            " version.",
            version_files=cfg.version_files,
            error=from_version_r.err().to_json(),
        )
        return 1

    from_version = from_version_r.ok()
    last_tag = git.get_last_tag()

    check_r = check_last_tag(from_version, last_tag)
    if isinstance(check_r, Err):
        logger.error(
            "last git tag does not match the detected version",
            error=check_r.err().to_json(),
        )
        return 1

    if from_version.build is not None:
        logger.error("build suffix unsupported", version=str(from_version))
        return 1

    to_version = increment.apply(from_version)
    logger.info(
        "Applied the '%s' increment to version %s.", increment, from_version
    )
    print(f"Upgrading version {from_version} to {to_version}", file=sys.stderr)

    project_files_r = list_project_files()
    if isinstance(project_files_r, Err):
        logger.error(
            "An error occurred while searching for files to update.",
            error=project_files_r.err().to_json(),
        )
        return 1

    rewriter = VersionRewriter(from_version, to_version)
    matching_files = rewriter.find_files_to_update(project_files_r.ok())

    ops_display = describe_git_ops(
        commit=cfg.commit, tag=cfg.tag, push=cfg.push
    )
    print(
        f"The following files will be changed{ops_display}:", file=sys.stderr
    )
    for path in matching_files:
        print(f"\t{path}", file=sys.stderr)

    if not cfg.force and not confirm("Do you want to continue?"):
        logger.warning("Aborting. No files were changed.")
        return 1

    rewriter.update_files(matching_files)

    if cfg.post_bump_cmd is not None:
        cmd_r = git.run_command(cfg.post_bump_cmd)
        if isinstance(cmd_r, Err):
            logger.error(
                "The post-bump command failed.",
                error=cmd_r.err().to_json(),
            )
            return 1

    print("Upgraded!", file=sys.stderr)

    if cfg.commit:
        release_r = release(
            to_version,
            last_tag,
            push_changes=cfg.push,
            tag_commit=cfg.tag,
        )
        if isinstance(release_r, Err):
            logger.error(
                "An error occurred while attempting to release the new"
                " version.",
                version=str(to_version),
                error=release_r.err().to_json(),
            )
            return 1

    return 0


def check_last_tag(
    version: Version, last_tag: Optional[str]
) -> Result[None, ErisError]:
    """Verifies that the last git tag agrees with the current version.

    Pre-release versions are not expected to have been tagged yet, so they
    always pass this check.
    """
    if last_tag is None or version.prerelease is not None:
        return Ok(None)

    stripped_last_tag = last_tag[1:] if last_tag.startswith("v") else last_tag
    if not stripped_last_tag:
        return Ok(None)

    try:
        tag_version = Version.parse(stripped_last_tag)
    except ValueError as e:
        return Err(
            f"The last git tag ({last_tag!r}) is not a semantic version: {e}"
        )

    if tag_version != version:
        return Err(
            f"The last git tag ({last_tag!r}) does not match the current"
            f" project version ({str(version)!r})."
        )

    return Ok(None)


def release(
    version: Version,
    last_tag: Optional[str],
    *,
    push_changes: bool = False,
    tag_commit: bool = False,
) -> Result[None, ErisError]:
    """Commits the version changes and (optionally) tags and pushes them."""
    results = [git.commit(f"Version {version}")]
    if push_changes and isinstance(results[-1], Ok):
        results.append(git.push())

    if tag_commit and isinstance(results[-1], Ok):
        tag_name = git.tag_name_for(version, last_tag)
        results.append(git.tag(tag_name))
        if push_changes and isinstance(results[-1], Ok):
            results.append(git.push_tag(tag_name))

    if isinstance(results[-1], Err):
        err: Err[Any, ErisError] = Err(f"Unable to release version {version}.")
        return err.chain(results[-1])

    return Ok(None)


def run_info(cfg: InfoConfig) -> int:
    """Clack runner for the 'info' subcommand."""
    data: Dict[str, Any] = {}

    data["current_version"] = None
    data["files"] = []
    data["last_tag"] = git.get_last_tag()

    version_r = find_current_version(cfg.version_files)
    if isinstance(version_r, Err):
        logger.warning(
            "No current version found.", error=version_r.err().to_json()
        )
    else:
        version = version_r.ok()
        data["current_version"] = str(version)

        project_files_r = list_project_files()
        if isinstance(project_files_r, Err):
            logger.warning(
                "Unable to list the project files.",
                error=project_files_r.err().to_json(),
            )
        else:
            rewriter = VersionRewriter(version, version)
            data["files"] = [
                str(path)
                for path in rewriter.find_files_to_update(
                    project_files_r.ok()
                )
            ]

    data["config"] = _config_to_json(cfg)

    print(json.dumps(data, sort_keys=True))
    return 0


def _config_to_json(cfg: Config) -> Dict[str, Any]:
    return {
        k: v if isinstance(v, (bool, int, list, type(None))) else str(v)
        for (k, v) in cfg.dict().items()
    }
