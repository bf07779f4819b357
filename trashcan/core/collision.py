"""Free-name probing for trash destinations."""

from __future__ import annotations

import os

from loguru import logger


def resolve_free_name(candidate: str) -> str:
    """Return `candidate`, or the first ``candidate.N`` (N >= 1) that is unused.

    Dangling symlinks count as used. The check is not atomic against other
    processes writing to the same directory.
    """
    if not os.path.lexists(candidate):
        return candidate
    n = 1
    while os.path.lexists(f"{candidate}.{n}"):
        n += 1
    logger.debug("Name collision for {}; using suffix .{}", candidate, n)
    return f"{candidate}.{n}"
