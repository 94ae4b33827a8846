"""Resolve the expected engine ranges for a validation call."""

from __future__ import annotations

import logging
from pathlib import Path

from . import discovery
from .config import ENGINES_NAMESPACE
from .models import DefaultCwd, EngineMap, ExplicitExpectation, ManifestRoot, Wanted

logger = logging.getLogger(__name__)


async def resolve_expected(wanted: Wanted) -> EngineMap:
    """Return the engine name -> range mapping described by ``wanted``."""
    if isinstance(wanted, ExplicitExpectation):
        return dict(wanted.engines)

    if isinstance(wanted, ManifestRoot):
        root = wanted.path
    elif isinstance(wanted, DefaultCwd):
        root = Path.cwd()
    else:
        raise TypeError(f"Unsupported wanted variant: {wanted!r}")

    logger.debug("Reading expected engines from manifest at or above %s", root)
    return await discovery.locate(ENGINES_NAMESPACE, cwd=root)
