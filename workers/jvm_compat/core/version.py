"""
Version — semantic platform versions and version ranges.

Grammar::

    MAJOR.MINOR.PATCH[(.|-)QUALIFIER[NUMBER]]

``MINOR`` and ``PATCH`` accept the ``x`` wildcard (compares as 999).
Qualifiers order as ``M < RC < BUILD-SNAPSHOT < SNAPSHOT < RELEASE``;
no qualifier means ``RELEASE``.  Unknown qualifiers sort before every
known one and compare lexically with each other.

Ranges are either a bare version (``"3.2.4"`` — at least that version)
or a bracketed interval (``"[3.2.0,3.3.0)"``).

Pure functions and immutable values, no IO, no state.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

from jvm_compat.core.errors import InvalidVersionError

WILDCARD = "x"
WILDCARD_VALUE = 999

RELEASE = "RELEASE"
KNOWN_QUALIFIERS: Tuple[str, ...] = ("M", "RC", "BUILD-SNAPSHOT", "SNAPSHOT", RELEASE)

_VERSION_RE = re.compile(
    r"^(\d+)\.(\d+|x)\.(\d+|x)(?:([.-])([^0-9]+)(\d+)?)?$"
)
_RANGE_RE = re.compile(r"^([(\[])(.*),(.*)([)\]])$")


# ── Version ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Qualifier:
    """Pre-release / release marker attached to a version."""

    id: str
    number: Optional[int] = None
    separator: str = "-"

    def __str__(self) -> str:
        return f"{self.separator}{self.id}{self.number if self.number is not None else ''}"


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """An immutable, totally ordered platform version."""

    major: int
    minor: int
    patch: int
    qualifier: Optional[Qualifier] = None

    def _key(self) -> tuple:
        return (self.major, self.minor, self.patch, _qualifier_key(self.qualifier))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        minor = WILDCARD if self.minor == WILDCARD_VALUE else str(self.minor)
        patch = WILDCARD if self.patch == WILDCARD_VALUE else str(self.patch)
        text = f"{self.major}.{minor}.{patch}"
        if self.qualifier is not None:
            text += str(self.qualifier)
        return text


def _qualifier_key(qualifier: Optional[Qualifier]) -> tuple:
    """Sort key for a qualifier.

    Known ids rank by their position in ``KNOWN_QUALIFIERS``; unknown ids
    rank below all of them (index -1) and tie-break on the id itself.
    """
    qid = qualifier.id if qualifier is not None else RELEASE
    number = qualifier.number if qualifier is not None and qualifier.number is not None else 0
    try:
        index = KNOWN_QUALIFIERS.index(qid)
        return (index, "", number)
    except ValueError:
        return (-1, qid, number)


def _component(raw: str) -> int:
    return WILDCARD_VALUE if raw == WILDCARD else int(raw)


def parse_version(text: str) -> Version:
    """Parse ``text`` into a :class:`Version`.

    Raises
    ------
    InvalidVersionError
        If ``text`` does not follow the version grammar.
    """
    if not isinstance(text, str):
        raise InvalidVersionError(repr(text), "Version must be a string")
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise InvalidVersionError(text)
    major, minor, patch, separator, qid, qnum = match.groups()
    qualifier = None
    if qid is not None:
        qualifier = Qualifier(
            id=qid,
            number=int(qnum) if qnum is not None else None,
            separator=separator,
        )
    return Version(
        major=int(major),
        minor=_component(minor),
        patch=_component(patch),
        qualifier=qualifier,
    )


# ── VersionRange ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class VersionRange:
    """An immutable predicate over versions.

    With no ``upper`` bound the range matches every version at or above
    ``lower`` (or strictly above it when ``lower_inclusive`` is False).
    """

    lower: Version
    lower_inclusive: bool = True
    upper: Optional[Version] = None
    upper_inclusive: bool = False

    def match(self, version: Version) -> bool:
        """True if ``version`` lies within this range."""
        if self.lower_inclusive:
            if version < self.lower:
                return False
        elif version <= self.lower:
            return False
        if self.upper is not None:
            if self.upper_inclusive:
                if version > self.upper:
                    return False
            elif version >= self.upper:
                return False
        return True

    def __contains__(self, version: Version) -> bool:
        return self.match(version)

    def __str__(self) -> str:
        if self.upper is None and self.lower_inclusive:
            return f">={self.lower}"
        left = "[" if self.lower_inclusive else "("
        right = "]" if self.upper_inclusive else ")"
        upper = str(self.upper) if self.upper is not None else ""
        return f"{left}{self.lower},{upper}{right}"


def parse_range(text: str) -> VersionRange:
    """Parse ``text`` into a :class:`VersionRange`.

    ``"3.2.4"`` yields ``>=3.2.4``; ``"[3.2.0,3.3.0)"`` yields a bounded
    range.  Raises :class:`InvalidVersionError` on malformed input or when
    the upper bound is below the lower bound.
    """
    if not isinstance(text, str):
        raise InvalidVersionError(repr(text), "Version range must be a string")
    stripped = text.strip()
    match = _RANGE_RE.match(stripped)
    if match is None:
        return VersionRange(lower=parse_version(stripped))

    left, low, high, right = match.groups()
    lower = parse_version(low.strip())
    upper = parse_version(high.strip()) if high.strip() else None
    if upper is not None and upper < lower:
        raise InvalidVersionError(text, f"Invalid version range: {text!r} (upper < lower)")
    return VersionRange(
        lower=lower,
        lower_inclusive=(left == "["),
        upper=upper,
        upper_inclusive=(right == "]"),
    )
