"""This file contains shared fixtures and pytest hooks.

https://docs.pytest.org/en/6.2.x/fixture.html#conftest-py-sharing-fixtures-across-multiple-files
"""

from __future__ import annotations

from pathlib import Path
import subprocess as sp
from typing import List

from pytest import MonkeyPatch, fixture


PYPROJECT_CONTENTS = """\
[project]
name = "foo"
version = "1.2.3"
dependencies = ["bar>=1.2.3"]
"""

README_CONTENTS = """\
# foo

Install foo 1.2.3 using pip.
"""

LOCK_CONTENTS = """\
[[package]]
name = "foo"
version = "1.2.3"
"""


def git(*args: str) -> str:
    """Runs a git command in the current directory and returns its output."""
    ps = sp.run(
        ["git", *args], check=True, stdout=sp.PIPE, stderr=sp.PIPE, text=True
    )
    return ps.stdout.strip()


def git_lines(*args: str) -> List[str]:
    """Like git() but splits the output into lines."""
    out = git(*args)
    return out.split("\n") if out else []


@fixture(name="project_dir")
def project_dir_fixture(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """Returns the path to a freshly committed git project.

    The current working directory is changed to the project directory.
    """
    result = tmp_path / "foo"
    result.mkdir()
    monkeypatch.chdir(result)

    (result / "pyproject.toml").write_text(PYPROJECT_CONTENTS)
    (result / "README.md").write_text(README_CONTENTS)
    (result / "uv.lock").write_text(LOCK_CONTENTS)
    (result / ".gitignore").write_text("ignored.txt\n")
    (result / "ignored.txt").write_text("1.2.3\n")

    git("init", "-q")
    git("config", "user.email", "user@example.com")
    git("config", "user.name", "User")
    git("config", "commit.gpgsign", "false")
    git("config", "tag.gpgsign", "false")
    git("add", ".")
    git("commit", "-q", "-m", "Initial commit")
    return result


@fixture(name="remote_dir")
def remote_dir_fixture(tmp_path: Path, project_dir: Path) -> Path:
    """Returns the path to a bare repository that the project pushes to."""
    result = tmp_path / "remote.git"
    git("init", "-q", "--bare", str(result))
    git("remote", "add", "origin", str(result))
    git("push", "-q", "-u", "origin", "HEAD")
    return result
