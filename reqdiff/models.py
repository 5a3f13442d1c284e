"""Data models for manifest parsing and diffing."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DiffStatus(Enum):
    """Classification of a package between two manifests."""

    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"
    UNCHANGED = "same"


@dataclass(frozen=True)
class PackageEntry:
    """A single requirement line: declared name plus optional constraint."""

    name: str
    constraint: str | None = None

    @property
    def key(self) -> str:
        """Case-folded lookup key; entries sharing a key are the same package."""
        return self.name.lower()


@dataclass(frozen=True)
class ChangedEntry:
    """A package present in both manifests with differing constraints."""

    name: str
    from_constraint: str | None
    to_constraint: str | None

    @property
    def key(self) -> str:
        return self.name.lower()


# key -> entry, built by reqdiff.parser.parse
Manifest = dict[str, PackageEntry]


@dataclass(frozen=True)
class DiffResult:
    """Partition of the union of two manifests' keys, each part sorted by name."""

    added: tuple[PackageEntry, ...] = field(default_factory=tuple)
    removed: tuple[PackageEntry, ...] = field(default_factory=tuple)
    changed: tuple[ChangedEntry, ...] = field(default_factory=tuple)
    unchanged: tuple[PackageEntry, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.added) + len(self.removed) + len(self.changed) + len(self.unchanged)

    @property
    def has_changes(self) -> bool:
        return bool(self.added or self.removed or self.changed)

    def __str__(self) -> str:
        parts = []
        if self.added:
            parts.append(f"{len(self.added)} added")
        if self.removed:
            parts.append(f"{len(self.removed)} removed")
        if self.changed:
            parts.append(f"{len(self.changed)} changed")
        if self.unchanged:
            parts.append(f"{len(self.unchanged)} unchanged")
        return "DiffResult: " + ", ".join(parts) if parts else "DiffResult: empty"
