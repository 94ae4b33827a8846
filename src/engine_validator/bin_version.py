"""Determine the version of an installed executable by running it."""

from __future__ import annotations

import asyncio
import logging
import re

logger = logging.getLogger(__name__)

# Loose match: "v20.11.1", "10.2.4", "pip 24.0 from ...", "1.2.3-beta.1"
_VERSION_IN_TEXT_RE = re.compile(
    r"(?<![0-9A-Za-z.])v?(\d+)\.(\d+)(?:\.(\d+))?"
    r"(-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
)


class BinVersionError(RuntimeError):
    """Raised when an executable fails or reports no recognisable version."""


def find_version(text: str) -> str | None:
    """Return the first version found in ``text``, padded to major.minor.patch."""
    match = _VERSION_IN_TEXT_RE.search(text)
    if not match:
        return None
    major, minor, patch, pre = match.groups()
    return f"{major}.{minor}.{patch or 0}{pre or ''}"


async def probe(tool: str, args: tuple[str, ...] = ("--version",)) -> str:
    """Run ``tool`` with ``args`` and return the version it reports.

    Stdout is searched first, then stderr (some tools print their version
    there). A missing executable raises FileNotFoundError.
    """
    logger.debug("Probing %s %s", tool, " ".join(args))
    process = await asyncio.create_subprocess_exec(
        tool,
        *args,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    out = stdout.decode("utf-8", errors="replace")
    err = stderr.decode("utf-8", errors="replace")

    if process.returncode != 0:
        raise BinVersionError(
            f"`{tool} {' '.join(args)}` exited with status {process.returncode}: {err.strip()}"
        )

    version = find_version(out) or find_version(err)
    if version is None:
        raise BinVersionError(f"Couldn't find version of `{tool}` in its output")

    logger.debug("%s reports version %s", tool, version)
    return version
