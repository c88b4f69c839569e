"""
CMake version number model.

Versions have the form ``major.minor[.revision]`` where every component fits
in an unsigned byte. A revision of zero is the same as no revision at all, so
``3.5`` and ``3.5.0`` compare equal and format identically.
"""

import re
from typing import Optional, Tuple

from cbake.core.exceptions import MalformedVersionError

_SEGMENT = re.compile(r"[0-9]+")
_MAX_COMPONENT = 255


class Version:
    """
    Comparable cmake version value.

    Example:
        >>> Version.parse("3.5.1") > Version(3, 5)
        True
        >>> str(Version(3, 5, 0))
        '3.5'
    """

    __slots__ = ("_major", "_minor", "_revision")

    def __init__(self, major: int, minor: int, revision: Optional[int] = None):
        for name, value in (("major", major), ("minor", minor), ("revision", revision)):
            if value is None:
                continue
            if not 0 <= value <= _MAX_COMPONENT:
                raise MalformedVersionError(
                    f"{major}.{minor}" + ("" if revision is None else f".{revision}"),
                    f"{name} out of range 0..{_MAX_COMPONENT}",
                )

        self._major = major
        self._minor = minor
        self._revision = revision or None

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse ``major.minor`` or ``major.minor.revision``.

        Raises:
            MalformedVersionError: On any other shape, non-numeric segments
                or components above 255.
        """
        segments = text.strip().split(".")

        if not 2 <= len(segments) <= 3:
            raise MalformedVersionError(text, "expected 2 or 3 segments")

        numbers = []
        for segment in segments:
            if not _SEGMENT.fullmatch(segment):
                raise MalformedVersionError(
                    text, f"segment {segment!r} is not a number"
                )
            numbers.append(int(segment))

        return cls(*numbers)

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def revision(self) -> Optional[int]:
        return self._revision

    def _key(self) -> Tuple[int, int, int]:
        return (self._major, self._minor, self._revision or 0)

    def format(self) -> str:
        """Format back to text, dropping an absent revision."""
        if self._revision is None:
            return f"{self._major}.{self._minor}"
        return f"{self._major}.{self._minor}.{self._revision}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Version({self._major}, {self._minor}, {self._revision})"

    def __hash__(self) -> int:
        return hash(self._key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() >= other._key()


def parse(text: str) -> Version:
    """Module-level shorthand for :meth:`Version.parse`."""
    return Version.parse(text)


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 as ``a`` is older than, equal to or newer than ``b``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0
