"""Manifest discovery utilities."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from .config import ENGINES_NAMESPACE, MANIFEST_NAME
from .parsers.package_json import parse as parse_package_json

logger = logging.getLogger(__name__)


def find_manifest(cwd: Path, name: str = MANIFEST_NAME) -> Path | None:
    """Return the nearest ``name`` file at or above ``cwd``, or None.

    The search walks parent directories up to the filesystem root. A ``cwd``
    pointing at a file starts the search from that file's directory.
    """
    start = cwd.resolve()
    if start.is_file():
        start = start.parent

    for directory in (start, *start.parents):
        candidate = directory / name
        if candidate.is_file():
            logger.debug("Found %s at %s", name, candidate)
            return candidate

    logger.debug("No %s found at or above %s", name, start)
    return None


def _locate_sync(namespace: str, cwd: Path) -> dict[str, Any]:
    manifest = find_manifest(cwd)
    if manifest is None:
        return {}
    return parse_package_json(manifest, namespace)


async def locate(namespace: str = ENGINES_NAMESPACE, *, cwd: Path | str) -> dict[str, Any]:
    """Return ``namespace`` from the nearest manifest above ``cwd``.

    An empty mapping comes back when there is no manifest or the field is
    absent. File access happens in a worker thread.
    """
    return await asyncio.to_thread(_locate_sync, namespace, Path(cwd))
