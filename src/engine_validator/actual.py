"""Fill in the actual engine versions a validation call needs."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping

from . import bin_version
from .config import INTERPRETER_ENGINES, PROBED_ENGINES
from .models import EngineMap

logger = logging.getLogger(__name__)


def interpreter_version() -> str:
    """Return the running interpreter's version in semver form."""
    v = sys.version_info
    version = f"{v.major}.{v.minor}.{v.micro}"
    if v.releaselevel != "final":
        version += f"-{v.releaselevel}.{v.serial}"
    return version


async def resolve_actual(
    expected: Mapping[str, str], known: Mapping[str, str | None] | None = None
) -> EngineMap:
    """Return ``known`` plus versions for expected engines it is missing.

    Interpreter engines take the running interpreter's version. Probed
    engines run ``<engine> --version``; probe failures propagate. Anything
    else expected but unknown stays ``None``.
    """
    actual: EngineMap = dict(known or {})

    for name in expected:
        if actual.get(name):
            continue
        if name in INTERPRETER_ENGINES:
            actual[name] = interpreter_version()
        elif name in PROBED_ENGINES:
            actual[name] = await bin_version.probe(name)
        else:
            continue
        logger.debug("Resolved %s to %s", name, actual[name])

    return actual
