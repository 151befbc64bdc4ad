"""Usecase substitution for scaladoc member anchors.

Scaladoc documents some standard library members (``map``, ``flatMap`` and
other ``CanBuildFrom`` users) under a simplified "usecase" signature. The type
page writes the usecase anchor immediately before the full signature anchor::

    <a id="map[B](f:A=>B):List[B]"></a><a id="map[B,That](f:A=>B)(implicitbf:...):That"></a>

Linking to the full signature lands on a hidden element, so the resolver swaps
in the usecase anchor when one exists.
"""

from __future__ import annotations

import html
import re
import zipfile
from pathlib import Path
from typing import Optional, Protocol

from .flavors import scala_fqn_to_path
from .indexer import ARCHIVE_READ_ERRORS
from .logging import get_logger
from .models import DocSig

_LOGGER = get_logger("usecase")

_ANCHOR_PAIR = re.compile(r'<a id="([^"]*)"></a>\s*<a id="([^"]*)"></a>')


class UsecaseFinder(Protocol):
    def find(self, archive: Path, sig: DocSig) -> Optional[DocSig]:
        """Return the usecase signature documenting ``sig``, if any."""


class NullUsecaseFinder:
    """Never substitutes."""

    def find(self, archive: Path, sig: DocSig) -> Optional[DocSig]:
        return None


class ScaladocUsecaseFinder:
    """Looks up usecase anchors in the type page of a scaladoc archive."""

    def find(self, archive: Path, sig: DocSig) -> Optional[DocSig]:
        if sig.member is None or not sig.fqn.scala_std_lib:
            return None
        page = self._read_page(archive, scala_fqn_to_path(sig.fqn))
        if page is None:
            return None
        for match in _ANCHOR_PAIR.finditer(page):
            usecase = html.unescape(match.group(1))
            full = html.unescape(match.group(2))
            if full == sig.member and usecase != full:
                _LOGGER.debug("Using usecase %s for %s", usecase, full)
                return sig.with_member(usecase)
        return None

    @staticmethod
    def _read_page(archive: Path, path: str) -> Optional[str]:
        try:
            with zipfile.ZipFile(archive) as jar:
                return jar.read(path).decode("utf-8", errors="replace")
        except KeyError:
            return None
        except ARCHIVE_READ_ERRORS as exc:
            _LOGGER.debug("Unable to read %s from %s: %s", path, archive.name, exc)
            return None


def maybe_replace_with_usecase(
    finder: UsecaseFinder, archive: Path, sig: DocSig
) -> DocSig:
    return finder.find(archive, sig) or sig


__all__ = [
    "NullUsecaseFinder",
    "ScaladocUsecaseFinder",
    "UsecaseFinder",
    "maybe_replace_with_usecase",
]
