"""Logic for bumping the project version on new releases."""

from __future__ import annotations

from typing import List, Optional, Type, TypeVar, Union, cast

from eris import ErisError, Err, Ok, Result
from pydantic.dataclasses import dataclass
from semver import Version
from typist import literal_to_list

from ._constants import PRERELEASE_LABEL, IncrementKind


Increment_T = TypeVar("Increment_T", bound="Increment")


class IncrementConfig:
    """Lets pydantic accept semver.Version fields."""

    arbitrary_types_allowed = True


@dataclass(frozen=True, config=IncrementConfig)
class Increment:
    """A requested change to the project version.

    Either one of the IncrementKind keywords or an exact version to jump to.
    """

    kind: Union[IncrementKind, None]
    exact: Optional[Version] = None

    @classmethod
    def from_string(
        cls: Type["Increment_T"], arg: str
    ) -> Result["Increment_T", ErisError]:
        """Parses an INCREMENT command-line argument."""
        keywords = cast(List[str], literal_to_list(IncrementKind))
        keyword = arg.strip().lower()
        if keyword in keywords:
            return Ok(cls(cast(IncrementKind, keyword)))

        try:
            exact = Version.parse(arg.strip())
        except ValueError as e:
            return Err(
                f"Invalid increment ({arg!r}). Use one of {keywords} or an"
                f" exact semantic version (e.g. '1.0.3'): {e}"
            )

        return Ok(cls(None, exact))

    def apply(self, current: Version) -> Version:
        """Returns the version that comes after `current`."""
        if self.exact is not None:
            return self.exact

        kind = self.kind
        if kind == "auto":
            kind = "patch" if current.prerelease is None else "strip"

        if kind == "patch":
            return current.replace(patch=current.patch + 1)
        elif kind == "minor":
            return current.replace(minor=current.minor + 1, patch=0)
        elif kind == "major":
            return current.replace(major=current.major + 1, minor=0, patch=0)
        elif kind == "strip":
            return current.replace(prerelease=None)
        elif kind == "pre":
            return current.replace(prerelease=PRERELEASE_LABEL)
        else:
            raise AssertionError(f"Logic Error! Unknown increment: {kind!r}")

    def __str__(self) -> str:
        return str(self.exact) if self.exact is not None else str(self.kind)
