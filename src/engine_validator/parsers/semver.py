"""npm-style semver range handling built atop packaging.version.

Supported expressions:
- exact versions (e.g., "1.2.3", "v1.2.3", "=1.2.3")
- primitive comparators: <, <=, >, >=, =
- caret ranges ^x.y.z → >=x.y.z <x+1.0.0-0 (zero-major/minor aware)
- tilde ranges ~x.y.z → >=x.y.z <x.y+1.0-0
- x-ranges: "*", "", "1.x", "1.2.*", "1", "1.2"
- hyphen ranges "1.2.3 - 2.3.4"
- comparator sets split by spaces, e.g. ">=1.0.0 <2.0.0"
- unions joined by "||"

Pre-release versions only satisfy a set when one of its comparators carries a
pre-release on the same major.minor.patch tuple.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from packaging.version import InvalidVersion, Version

_IDENT = r"[0-9A-Za-z-]+"
_VERSION_RE = re.compile(
    r"^v?(\d+)\.(\d+)\.(\d+)"
    rf"(?:-({_IDENT}(?:\.{_IDENT})*))?"
    rf"(?:\+{_IDENT}(?:\.{_IDENT})*)?$"
)
_PARTIAL_RE = re.compile(
    r"^v?([xX*]|\d+)(?:\.([xX*]|\d+)(?:\.([xX*]|\d+)"
    rf"(?:-?({_IDENT}(?:\.{_IDENT})*))?"
    rf"(?:\+{_IDENT}(?:\.{_IDENT})*)?)?)?$"
)
_COMPARATOR_RE = re.compile(r"^(<=|>=|<|>|=|~>|~|\^)?\s*(.*)$")
_HYPHEN_RE = re.compile(r"^(\S+)\s+-\s+(\S+)$")
# ">= 1.2.3" is written loosely in plenty of manifests
_OPERATOR_GAP_RE = re.compile(r"(<=|>=|<|>|=|~>|~|\^)\s+")


@dataclass(frozen=True)
class SemVer:
    """A parsed semantic version."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[int | str, ...] = ()

    @property
    def release(self) -> Version:
        return Version(f"{self.major}.{self.minor}.{self.patch}")

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return base + "-" + ".".join(str(p) for p in self.prerelease)
        return base


def _split_prerelease(text: str | None) -> tuple[int | str, ...]:
    if not text:
        return ()
    return tuple(int(p) if p.isdigit() else p for p in text.split("."))


def parse_version(text: str) -> SemVer:
    """Parse a full version string; raise InvalidVersion when it is not one."""
    cleaned = text.strip().lstrip("=").strip()
    match = _VERSION_RE.match(cleaned)
    if not match:
        raise InvalidVersion(f"Invalid version: {text!r}")
    major, minor, patch, pre = match.groups()
    return SemVer(int(major), int(minor), int(patch), _split_prerelease(pre))


def _compare_prerelease(a: tuple[int | str, ...], b: tuple[int | str, ...]) -> int:
    # A release sorts after any of its pre-releases.
    if not a and not b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    for left, right in zip(a, b):
        if left == right:
            continue
        if isinstance(left, int) and isinstance(right, int):
            return -1 if left < right else 1
        # numeric identifiers have lower precedence than alphanumeric ones
        if isinstance(left, int):
            return -1
        if isinstance(right, int):
            return 1
        return -1 if left < right else 1
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1


def compare(a: SemVer, b: SemVer) -> int:
    if a.release != b.release:
        return -1 if a.release < b.release else 1
    return _compare_prerelease(a.prerelease, b.prerelease)


@dataclass(frozen=True)
class Comparator:
    """A single ``<op><version>`` test; ``version`` None means "any"."""

    operator: str
    version: SemVer | None

    def test(self, v: SemVer) -> bool:
        if self.version is None:
            return True
        cmp = compare(v, self.version)
        if self.operator == ">=":
            return cmp >= 0
        if self.operator == ">":
            return cmp > 0
        if self.operator == "<=":
            return cmp <= 0
        if self.operator == "<":
            return cmp < 0
        return cmp == 0


ANY = Comparator("", None)


def _is_wild(part: str | None) -> bool:
    return part is None or part in {"x", "X", "*"}


def _floor(major: int, minor: int = 0, patch: int = 0) -> SemVer:
    return SemVer(major, minor, patch)


def _ceiling(major: int, minor: int = 0, patch: int = 0) -> SemVer:
    # "-0" keeps pre-releases of the next version out of the range
    return SemVer(major, minor, patch, (0,))


def _parse_partial(text: str) -> tuple[str | None, str | None, str | None, tuple[int | str, ...]]:
    match = _PARTIAL_RE.match(text)
    if not match:
        raise InvalidVersion(f"Invalid version in range: {text!r}")
    major, minor, patch, pre = match.groups()
    major = None if _is_wild(major) else major
    minor = None if major is None or _is_wild(minor) else minor
    patch = None if minor is None or _is_wild(patch) else patch
    return major, minor, patch, _split_prerelease(pre) if patch is not None else ()


def _expand_tilde(text: str) -> list[Comparator]:
    major, minor, patch, pre = _parse_partial(text)
    if major is None:
        return [ANY]
    ma = int(major)
    if minor is None:
        return [Comparator(">=", _floor(ma)), Comparator("<", _ceiling(ma + 1))]
    mi = int(minor)
    lower = SemVer(ma, mi, int(patch) if patch is not None else 0, pre)
    return [Comparator(">=", lower), Comparator("<", _ceiling(ma, mi + 1))]


def _expand_caret(text: str) -> list[Comparator]:
    major, minor, patch, pre = _parse_partial(text)
    if major is None:
        return [ANY]
    ma = int(major)
    if minor is None:
        return [Comparator(">=", _floor(ma)), Comparator("<", _ceiling(ma + 1))]
    mi = int(minor)
    if patch is None:
        upper = _ceiling(ma + 1) if ma != 0 else _ceiling(0, mi + 1)
        return [Comparator(">=", _floor(ma, mi)), Comparator("<", upper)]
    pa = int(patch)
    lower = SemVer(ma, mi, pa, pre)
    if ma != 0:
        upper = _ceiling(ma + 1)
    elif mi != 0:
        upper = _ceiling(0, mi + 1)
    else:
        upper = _ceiling(0, 0, pa + 1)
    return [Comparator(">=", lower), Comparator("<", upper)]


def _expand_primitive(operator: str, text: str) -> list[Comparator]:
    major, minor, patch, pre = _parse_partial(text)
    if major is None:
        if operator in {"<", ">"}:
            # nothing is below or above everything
            return [Comparator("<", _floor(0, 0, 0))]
        return [ANY]
    ma = int(major)
    if patch is not None:
        version = SemVer(ma, int(minor), int(patch), pre)
        return [Comparator(operator or "=", version)]

    # partial version: translate into a range over the missing parts
    mi = int(minor) if minor is not None else None
    if operator in {"", "="}:
        if mi is None:
            return [Comparator(">=", _floor(ma)), Comparator("<", _ceiling(ma + 1))]
        return [Comparator(">=", _floor(ma, mi)), Comparator("<", _ceiling(ma, mi + 1))]
    if operator == ">":
        return [Comparator(">=", _floor(ma + 1) if mi is None else _floor(ma, mi + 1))]
    if operator == ">=":
        return [Comparator(">=", _floor(ma, mi or 0))]
    if operator == "<":
        return [Comparator("<", _ceiling(ma) if mi is None else _ceiling(ma, mi))]
    # "<="
    return [Comparator("<", _ceiling(ma + 1) if mi is None else _ceiling(ma, mi + 1))]


def _expand_hyphen(low: str, high: str) -> list[Comparator]:
    comparators: list[Comparator] = []
    l_major, l_minor, l_patch, l_pre = _parse_partial(low)
    if l_major is not None:
        lower = SemVer(int(l_major), int(l_minor or 0), int(l_patch or 0), l_pre)
        comparators.append(Comparator(">=", lower))

    h_major, h_minor, h_patch, h_pre = _parse_partial(high)
    if h_major is not None:
        if h_minor is None:
            comparators.append(Comparator("<", _ceiling(int(h_major) + 1)))
        elif h_patch is None:
            comparators.append(Comparator("<", _ceiling(int(h_major), int(h_minor) + 1)))
        else:
            upper = SemVer(int(h_major), int(h_minor), int(h_patch), h_pre)
            comparators.append(Comparator("<=", upper))
    return comparators or [ANY]


def _parse_set(expr: str) -> list[Comparator]:
    expr = expr.strip()
    hyphen = _HYPHEN_RE.match(expr)
    if hyphen:
        return _expand_hyphen(*hyphen.groups())

    expr = _OPERATOR_GAP_RE.sub(r"\1", expr)
    tokens: list[str] = expr.split()
    if not tokens:
        return [ANY]

    comparators: list[Comparator] = []
    for token in tokens:
        match = _COMPARATOR_RE.match(token)
        operator, rest = match.groups() if match else ("", token)
        operator = operator or ""
        if operator in {"~", "~>"}:
            comparators.extend(_expand_tilde(rest))
        elif operator == "^":
            comparators.extend(_expand_caret(rest))
        else:
            comparators.extend(_expand_primitive(operator, rest))
    return comparators


def parse_range(expr: str) -> list[list[Comparator]]:
    """Parse a range expression into a union of comparator sets."""
    return [_parse_set(part) for part in expr.split("||")]


def _test_set(comparators: list[Comparator], v: SemVer) -> bool:
    if not all(c.test(v) for c in comparators):
        return False
    if not v.prerelease:
        return True
    for c in comparators:
        if c.version is None or not c.version.prerelease:
            continue
        if c.version.release == v.release:
            return True
    return False


def satisfies(installed: str | None, expr: str) -> bool:
    """Return True when ``installed`` falls inside the range ``expr``.

    A missing or unparsable version, or an unparsable range, never satisfies.
    """
    if not isinstance(installed, str) or not isinstance(expr, str):
        return False
    try:
        v = parse_version(installed)
        sets = parse_range(expr)
    except InvalidVersion:
        return False
    return any(_test_set(comparators, v) for comparators in sets)
