"""Resolve symbol signatures to documentation URIs."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Optional

from .config import ResolverConfig
from .flavors import (
    java_fqn_to_path,
    normalise_java_version,
    scala_fqn_to_path,
    to_android_anchor,
    to_java8_anchor,
)
from .indexer import ArchiveCatalog, ArchiveIndexer
from .logging import get_logger
from .models import DocSig, DocSigPair
from .usecase import ScaladocUsecaseFinder, UsecaseFinder, maybe_replace_with_usecase

_LOGGER = get_logger("resolver")

JAVASE_DOCS = "http://docs.oracle.com/javase"
ANDROID_DOCS = "http://developer.android.com/reference"

_JAVA_VERSION_LINE = re.compile(r'version "([^"]+)"')


def detect_java_version() -> Optional[str]:
    """Return the version reported by ``java -version``, or None without a JVM."""
    import subprocess

    try:
        completed = subprocess.run(
            ["java", "-version"],
            check=True,
            text=True,
            capture_output=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        _LOGGER.debug("Unable to determine host java version: %s", exc)
        return None
    # The JVM prints its banner on stderr.
    match = _JAVA_VERSION_LINE.search(completed.stderr or completed.stdout)
    return match.group(1) if match else None


class UriResolver:
    """Turns a :class:`DocSigPair` into a local or well-known documentation URI."""

    def __init__(
        self,
        catalog: ArchiveCatalog,
        *,
        prefix: str = "docs",
        java_version: Optional[str] = None,
        usecase_finder: UsecaseFinder | None = None,
        version_detector: Callable[[], Optional[str]] = detect_java_version,
    ) -> None:
        self._catalog = catalog
        self._prefix = prefix
        self._java_version = java_version if java_version is not None else version_detector()
        self._usecases = usecase_finder or ScaladocUsecaseFinder()

    @classmethod
    def from_config(
        cls,
        config: ResolverConfig,
        *,
        indexer: ArchiveIndexer | None = None,
        usecase_finder: UsecaseFinder | None = None,
    ) -> "UriResolver":
        """Scan the configured archives and return a resolver over the result."""
        catalog = (indexer or ArchiveIndexer()).scan(config.doc_jars)
        _LOGGER.info(
            "Indexed %d of %d doc archives", len(catalog), len(config.doc_jars)
        )
        return cls(
            catalog,
            prefix=config.prefix,
            java_version=config.java_version,
            usecase_finder=usecase_finder,
        )

    @property
    def catalog(self) -> ArchiveCatalog:
        return self._catalog

    @property
    def java_version(self) -> str:
        """The javase docs release used for standard library fallbacks."""
        return normalise_java_version(self._java_version)

    def resolve(self, sig: DocSigPair) -> Optional[str]:
        return self._resolve_local_uri(sig) or self._resolve_well_known_uri(sig)

    def resolve_sig(self, sig: DocSig) -> Optional[str]:
        return self.resolve(DocSigPair.symmetric(sig))

    # ------------------------------------------------------------------
    # Local archives

    def _guess_archive(self, sig: DocSigPair) -> Optional[Path]:
        archive = self._catalog.archive_for(scala_fqn_to_path(sig.scala.fqn))
        if archive is None:
            archive = self._catalog.archive_for(java_fqn_to_path(sig.java.fqn))
        return archive

    def _resolve_local_uri(self, sig: DocSigPair) -> Optional[str]:
        archive = self._guess_archive(sig)
        if archive is None:
            _LOGGER.debug("Failed to resolve doc archive for: %s", sig)
            return None
        _LOGGER.debug("Resolved to archive: %s", archive)
        return self._make_local_uri(archive, sig)

    def _make_local_uri(self, archive: Path, sig: DocSigPair) -> str:
        name = archive.name
        flavor = self._catalog.flavor(archive)
        if flavor.is_javadoc:
            path = flavor.page_path(sig.java.fqn)
            anchor = ""
            if sig.java.member is not None:
                anchor = f"#{flavor.format_anchor(sig.java.member)}"
            return f"{self._prefix}/{name}/{path}{anchor}"

        scala_sig = maybe_replace_with_usecase(self._usecases, archive, sig.scala)
        anchor = scala_sig.fqn.mk_string()
        if scala_sig.member is not None:
            anchor += f"@{scala_sig.member}"
        return f"{self._prefix}/{name}/index.html#{anchor}"

    # ------------------------------------------------------------------
    # Well-known hosts

    def _resolve_well_known_uri(self, sig: DocSigPair) -> Optional[str]:
        fqn = sig.java.fqn
        if fqn.java_std_lib:
            path = java_fqn_to_path(fqn)
            version = self.java_version
            anchor = ""
            if sig.java.member is not None:
                member = sig.java.member
                anchor = "#" + (to_java8_anchor(member) if version == "8" else member)
            return f"{JAVASE_DOCS}/{version}/docs/api/{path}{anchor}"

        if fqn.android_std_lib:
            path = java_fqn_to_path(fqn)
            anchor = ""
            if sig.java.member is not None:
                anchor = f"#{to_android_anchor(sig.java.member)}"
            return f"{ANDROID_DOCS}/{path}{anchor}"

        return None


__all__ = ["ANDROID_DOCS", "JAVASE_DOCS", "UriResolver", "detect_java_version"]
