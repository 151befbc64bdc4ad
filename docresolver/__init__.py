"""Resolve symbol signatures to documentation URIs."""

from .indexer import ArchiveCatalog, ArchiveIndexer
from .models import DocFqn, DocSig, DocSigPair
from .flavors import DocFlavor
from .resolver import UriResolver

__all__ = [
    "ArchiveCatalog",
    "ArchiveIndexer",
    "DocFlavor",
    "DocFqn",
    "DocSig",
    "DocSigPair",
    "UriResolver",
]
