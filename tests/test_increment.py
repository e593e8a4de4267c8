"""Tests for the Increment class."""

from __future__ import annotations

from eris import Err
from pytest import mark, param
from semver import Version

from booper._increment import Increment


params = mark.parametrize


@params(
    "arg,current,expected",
    [
        param("patch", "1.2.3", "1.2.4", id="patch"),
        param("minor", "1.2.3", "1.3.0", id="minor"),
        param("major", "1.2.3", "2.0.0", id="major"),
        param("MAJOR", "1.2.3", "2.0.0", id="major-uppercase"),
        param("patch", "1.2.3-rc.1", "1.2.4-rc.1", id="patch-keeps-pre"),
        param("minor", "1.2.3-rc.1", "1.3.0-rc.1", id="minor-keeps-pre"),
        param("strip", "1.2.3-rc.1", "1.2.3", id="strip"),
        param("strip", "1.2.3", "1.2.3", id="strip-noop"),
        param("pre", "1.2.3", "1.2.3-pre", id="pre"),
        param("pre", "1.2.3-rc.1", "1.2.3-pre", id="pre-replaces-label"),
        param("auto", "1.2.3", "1.2.4", id="auto-release"),
        param("auto", "1.2.3-pre", "1.2.3", id="auto-prerelease"),
        param("0.9.0", "1.2.3", "0.9.0", id="exact-lower"),
        param("2.0.0-beta.2", "1.2.3", "2.0.0-beta.2", id="exact-pre"),
    ],
)
def test_apply(arg: str, current: str, expected: str) -> None:
    """Test that each increment produces the expected next version."""
    increment = Increment.from_string(arg).unwrap()
    assert str(increment.apply(Version.parse(current))) == expected


@params(
    "arg",
    [
        param("", id="empty"),
        param("patches", id="unknown-keyword"),
        param("1.2", id="partial-version"),
        param("v1.2.3", id="v-prefix"),
    ],
)
def test_from_string__error(arg: str) -> None:
    """Test that invalid INCREMENT arguments are rejected."""
    assert isinstance(Increment.from_string(arg), Err)


def test_str() -> None:
    """Test that an Increment prints the way it was given."""
    assert str(Increment.from_string("Minor").unwrap()) == "minor"
    assert str(Increment.from_string("3.0.0").unwrap()) == "3.0.0"
