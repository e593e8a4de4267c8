"""Utility functions."""

from __future__ import annotations

import sys
from typing import List


def confirm(prompt: str) -> bool:
    """Asks the user a yes/no question. Anything but 'y' or 'yes' is a no.

    The question is written to STDERR so that STDOUT stays clean when piped.
    """
    print(f"{prompt} [y/N] ", end="", file=sys.stderr, flush=True)
    try:
        answer = input()
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def describe_git_ops(*, commit: bool, tag: bool, push: bool) -> str:
    """Returns the suffix used to announce which git operations will run.

    >>> describe_git_ops(commit=True, tag=True, push=True)
    ', committed, tagged and pushed'
    >>> describe_git_ops(commit=True, tag=False, push=False)
    ' and committed'
    >>> describe_git_ops(commit=False, tag=True, push=True)
    ''
    """
    ops: List[str] = []
    if commit:
        ops.append("committed")
        if tag:
            ops.append("tagged")
        if push:
            ops.append("pushed")

    if not ops:
        return ""

    last = ops.pop()
    return "".join(f", {op}" for op in ops) + f" and {last}"
