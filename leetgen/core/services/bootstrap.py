"""
Bootstrap coordinator — installs a language's support library on demand.

    Unknown ──check──▶ Present
       │
       └──────────────▶ Absent ──install──▶ Present | Failed

Only Testable generators take part. Installation is re-checked
afterwards; a library that is still incomplete counts as a failure,
and failures abort the dispatch before anything is generated.
"""

from __future__ import annotations

import logging
from enum import Enum

from leetgen.core.errors import BootstrapFailure
from leetgen.core.models.context import GenContext
from leetgen.lang.base import Generator, Testable, as_testable

logger = logging.getLogger(__name__)


class LibraryStatus(str, Enum):
    NOT_REQUIRED = "not_required"
    PRESENT = "present"
    INSTALLED = "installed"


def ensure_library(gen: Generator, ctx: GenContext) -> LibraryStatus:
    """Make sure the generator's support library is in the project.

    Returns:
        NOT_REQUIRED for non-Testable generators, PRESENT if the library
        was already there, INSTALLED if it was installed just now.

    Raises:
        BootstrapFailure: The check or the installation failed.
    """
    testable = as_testable(gen)
    if testable is None:
        return LibraryStatus.NOT_REQUIRED

    if _check(testable, gen, ctx):
        logger.debug("%s support library present", gen.slug)
        return LibraryStatus.PRESENT

    logger.info("%s support library missing — installing", gen.slug)
    try:
        testable.generate_library(ctx)
    except Exception as e:
        raise BootstrapFailure(f"failed to install {gen.name} support library: {e}") from e

    if not _check(testable, gen, ctx):
        raise BootstrapFailure(f"{gen.name} support library is incomplete after installation")
    return LibraryStatus.INSTALLED


def _check(testable: Testable, gen: Generator, ctx: GenContext) -> bool:
    try:
        return testable.check_library(ctx)
    except Exception as e:
        raise BootstrapFailure(f"cannot check {gen.name} support library: {e}") from e
