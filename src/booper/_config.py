"""Increments project version numbers and releases them using git.

Examples:
    # Bumps the patch version (or strips the pre-release label).
    booper bump

    # Bumps the minor version, then commits, tags and pushes the change.
    booper bump -ctp minor

    # Jumps to an exact version without asking for confirmation.
    booper bump -y 2.0.0

    # Only searches the given version files for the current version.
    booper --version-file src/foo/__init__.py bump

    # Print internal booper information to STDOUT as JSON data.
    booper info
"""

# NOTE: The above docstring is used by clack for the command-line --help
#   message. This module is used to define clack configuration classes and the
#   clack parser function.
from __future__ import annotations

from typing import Any, List, Literal, Optional, Sequence

import clack
from typist import literal_to_list

from ._constants import DEFAULT_VERSION_FILES, IncrementKind


BumpCommand = Literal["bump"]
InfoCommand = Literal["info"]
Command = Literal[BumpCommand, InfoCommand]  # available CLI sub-commands


class Config(clack.Config):
    """Base configuration class."""

    command: Command

    # --- OPTIONS
    version_files: List[str] = list(DEFAULT_VERSION_FILES)

    # --- CONFIG
    post_bump_cmd: Optional[str] = None


class BumpConfig(Config):
    """Config for the 'bump' subcommand."""

    command: BumpCommand

    # --- ARGS
    increment: str = "auto"

    # --- OPTIONS
    commit: bool = False
    force: bool = False
    push: bool = False
    tag: bool = False


class InfoConfig(Config):
    """Config for the 'info' subcommand."""

    command: InfoCommand


def clack_parser(argv: Sequence[str]) -> dict[str, Any]:
    """Parses booper's command-line arguments into clack config kwargs."""
    parser = clack.Parser()
    parser.add_argument(
        "--version-file",
        dest="version_files",
        action="append",
        help=(
            "A file which is searched for the current project version. This"
            " option can be given multiple times. Defaults to"
            f" {list(DEFAULT_VERSION_FILES)}."
        ),
    )
    parser.add_argument(
        "--post-bump-cmd",
        help=(
            "A command (e.g. 'uv lock') to run after the version is updated"
            " and before any changes are committed."
        ),
    )

    new_command = clack.new_command_factory(parser)

    ### setup the 'bump' subcommand...
    bump_parser = new_command(
        "bump",
        help=(
            "Increment the project version in every file that mentions it"
            " and (optionally) release it using git."
        ),
    )

    keywords = literal_to_list(IncrementKind)
    bump_parser.add_argument(
        "increment",
        metavar="INCREMENT",
        nargs="?",
        help=(
            f"Can be one of {keywords} or an exact version (e.g. '1.0.3')."
            " Defaults to 'patch' or to 'strip' for pre-release versions."
        ),
    )
    bump_parser.add_argument(
        "-c",
        "--commit",
        action="store_true",
        help="Commit the version changes using git.",
    )
    bump_parser.add_argument(
        "-t",
        "--tag",
        action="store_true",
        help="Tag the new commit. Requires -c / --commit.",
    )
    bump_parser.add_argument(
        "-p",
        "--push",
        action="store_true",
        help="Push the new commit and tag. Requires -c / --commit.",
    )
    bump_parser.add_argument(
        "-y",
        "--force",
        action="store_true",
        help="Skip the interactive confirmation step.",
    )

    ### setup the 'info' subcommand...
    new_command(
        "info", help="Print internal state to standard output as JSON."
    )

    args = parser.parse_args(argv[1:])
    kwargs = clack.filter_cli_args(args)

    return kwargs
