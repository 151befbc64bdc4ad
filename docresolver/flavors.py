"""Documentation flavors and their page-path and anchor conventions."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from .models import DocFqn

INDEX_PAGE = "index.html"

# javadoc writes "<!-- Generated by javadoc (1.8.0_92) on ... -->" into index.html;
# older releases omit the version.
_JAVADOC_COMMENT = re.compile(r"Generated by javadoc (?:\(([0-9.]+))?")

# Javadoc 8 dropped characters that are illegal in URL fragments from its anchors.
_JAVA8_CHARS = re.compile(r", |\(|\)|\[\]")
_JAVA8_REPLACEMENTS = {", ": "-", "(": "-", ")": "-", "[]": ":A"}


class DocFlavor(Enum):
    """How an archive's pages are laid out and how member anchors are spelled."""

    JAVADOC = "javadoc"
    JAVADOC8 = "javadoc8"
    SCALADOC = "scaladoc"

    @property
    def is_javadoc(self) -> bool:
        return self is not DocFlavor.SCALADOC

    def page_path(self, fqn: DocFqn) -> str:
        if self.is_javadoc:
            return java_fqn_to_path(fqn)
        return scala_fqn_to_path(fqn)

    def format_anchor(self, member: str) -> str:
        if self is DocFlavor.JAVADOC8:
            return to_java8_anchor(member)
        return member

    @classmethod
    def classify_index(cls, content: str) -> Optional["DocFlavor"]:
        """Return the javadoc flavor announced by an index page, if any."""

        match = _JAVADOC_COMMENT.search(content)
        if match is None:
            return None
        version = match.group(1)
        if version is not None and version.startswith("1.8"):
            return cls.JAVADOC8
        return cls.JAVADOC


def _package_dir(fqn: DocFqn) -> str:
    return fqn.pack.replace(".", "/")


def java_fqn_to_path(fqn: DocFqn) -> str:
    if fqn.type_name == "package":
        return f"{_package_dir(fqn)}/package-summary.html"
    return f"{_package_dir(fqn)}/{fqn.type_name}.html"


def scala_fqn_to_path(fqn: DocFqn) -> str:
    if fqn.type_name == "package":
        return f"{_package_dir(fqn)}/package.html"
    return f"{_package_dir(fqn)}/{fqn.type_name}.html"


def to_java8_anchor(anchor: str) -> str:
    return _JAVA8_CHARS.sub(lambda match: _JAVA8_REPLACEMENTS[match.group(0)], anchor)


def to_android_anchor(anchor: str) -> str:
    return anchor.replace(",", ", ")


def normalise_java_version(raw: Optional[str]) -> str:
    """Map a JVM version string onto the javase docs release token."""

    if raw is not None:
        if raw.startswith("1.8"):
            return "8"
        if raw.startswith("1.7"):
            return "7"
    return "6"


__all__ = [
    "DocFlavor",
    "INDEX_PAGE",
    "java_fqn_to_path",
    "normalise_java_version",
    "scala_fqn_to_path",
    "to_android_anchor",
    "to_java8_anchor",
]
