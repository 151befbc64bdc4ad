"""One-time scan of documentation archives into an immutable catalog."""

from __future__ import annotations

import zipfile
import zlib
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from .flavors import INDEX_PAGE, DocFlavor
from .logging import get_logger

_LOGGER = get_logger("indexer")

# Errors zipfile raises for an archive or member it cannot read.
ARCHIVE_READ_ERRORS = (
    OSError,
    EOFError,
    NotImplementedError,
    RuntimeError,
    zipfile.BadZipFile,
    zlib.error,
)


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ArchiveCatalog:
    """Lookup tables produced by scanning documentation archives.

    ``path_to_archive`` maps every nested page path to the archive that holds
    it. When several archives contain the same path, the one scanned last wins.
    """

    path_to_archive: Mapping[str, Path] = field(default_factory=lambda: _frozen({}))
    archive_name_to_archive: Mapping[str, Path] = field(
        default_factory=lambda: _frozen({})
    )
    flavor_of: Mapping[str, DocFlavor] = field(default_factory=lambda: _frozen({}))

    def archive_for(self, path: str) -> Optional[Path]:
        return self.path_to_archive.get(path)

    def flavor(self, archive: Path) -> DocFlavor:
        return self.flavor_of.get(archive.name, DocFlavor.SCALADOC)

    def __len__(self) -> int:
        return len(self.archive_name_to_archive)


@dataclass
class _ArchiveScan:
    archive: Path
    flavor: DocFlavor = DocFlavor.SCALADOC
    paths: list[str] = field(default_factory=list)


class ArchiveIndexer:
    """Builds an :class:`ArchiveCatalog` from documentation jars on disk."""

    def scan(self, archives: Iterable[Path | str]) -> ArchiveCatalog:
        path_to_archive: Dict[str, Path] = {}
        name_to_archive: Dict[str, Path] = {}
        flavor_of: Dict[str, DocFlavor] = {}

        for raw in archives:
            archive = Path(raw)
            if not archive.exists():
                _LOGGER.debug("Skipping missing doc archive %s", archive)
                continue
            try:
                result = self._scan_archive(archive)
            except ARCHIVE_READ_ERRORS as exc:
                _LOGGER.error("Failed to process doc archive: %s (%s)", archive.name, exc)
                continue

            name_to_archive[archive.name] = archive
            flavor_of[archive.name] = result.flavor
            for path in result.paths:
                path_to_archive[path] = archive
            _LOGGER.debug(
                "Indexed %s: %d pages, %s", archive.name, len(result.paths), result.flavor.value
            )

        return ArchiveCatalog(
            path_to_archive=_frozen(path_to_archive),
            archive_name_to_archive=_frozen(name_to_archive),
            flavor_of=_frozen(flavor_of),
        )

    def _scan_archive(self, archive: Path) -> _ArchiveScan:
        result = _ArchiveScan(archive=archive)
        with zipfile.ZipFile(archive) as jar:
            for entry in jar.infolist():
                if entry.is_dir():
                    continue
                name = entry.filename
                if PurePosixPath(name).parent != PurePosixPath("."):
                    result.paths.append(name)
                if name == INDEX_PAGE:
                    content = jar.read(entry).decode("utf-8", errors="replace")
                    flavor = DocFlavor.classify_index(content)
                    if flavor is not None:
                        result.flavor = flavor
        return result


__all__ = ["ARCHIVE_READ_ERRORS", "ArchiveCatalog", "ArchiveIndexer"]
