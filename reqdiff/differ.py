"""Diff engine: classify packages across two manifests."""

from __future__ import annotations

import structlog

from reqdiff.models import ChangedEntry, DiffResult, Manifest, PackageEntry

log = structlog.get_logger("reqdiff.differ")


def diff(a: Manifest, b: Manifest) -> DiffResult:
    """Compare manifest ``a`` (original) against ``b`` (updated).

    Constraints are compared as plain strings, so ``None`` differs from any
    constraint and ``>=2.0`` differs from ``>= 2.0``. Each list in the result
    is sorted by package name.
    """
    added: list[PackageEntry] = []
    removed: list[PackageEntry] = []
    changed: list[ChangedEntry] = []
    unchanged: list[PackageEntry] = []

    for key in a.keys() | b.keys():
        old = a.get(key)
        new = b.get(key)
        if old is None:
            added.append(new)
        elif new is None:
            removed.append(old)
        elif old.constraint != new.constraint:
            changed.append(
                ChangedEntry(
                    name=old.name,
                    from_constraint=old.constraint,
                    to_constraint=new.constraint,
                )
            )
        else:
            unchanged.append(old)

    result = DiffResult(
        added=tuple(sorted(added, key=_by_name)),
        removed=tuple(sorted(removed, key=_by_name)),
        changed=tuple(sorted(changed, key=_by_name)),
        unchanged=tuple(sorted(unchanged, key=_by_name)),
    )
    log.debug(
        "differ.complete",
        added=len(result.added),
        removed=len(result.removed),
        changed=len(result.changed),
        unchanged=len(result.unchanged),
    )
    return result


def _by_name(entry: PackageEntry | ChangedEntry) -> str:
    return entry.name
