"""Symbol signature models shared across docresolver components."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class DocFqn:
    """A package and type name, as used to locate a documentation page."""

    pack: str
    type_name: str

    def mk_string(self) -> str:
        return f"{self.pack}.{self.type_name}" if self.pack else self.type_name

    def in_package(self, prefix: str) -> bool:
        return self.pack == prefix or self.pack.startswith(prefix + ".")

    @property
    def java_std_lib(self) -> bool:
        return self.in_package("java") or self.in_package("javax")

    @property
    def android_std_lib(self) -> bool:
        return self.in_package("android")

    @property
    def scala_std_lib(self) -> bool:
        return self.in_package("scala")


@dataclass(frozen=True)
class DocSig:
    """One naming of a documented symbol: its type plus an optional member."""

    fqn: DocFqn
    member: Optional[str] = None

    def with_member(self, member: Optional[str]) -> "DocSig":
        return replace(self, member=member)


@dataclass(frozen=True)
class DocSigPair:
    """The same symbol named under scaladoc and javadoc conventions."""

    scala: DocSig
    java: DocSig

    @classmethod
    def symmetric(cls, sig: DocSig) -> "DocSigPair":
        return cls(scala=sig, java=sig)
