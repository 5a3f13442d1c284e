"""Flatten a DiffResult into display rows with status filtering."""

from __future__ import annotations

from dataclasses import dataclass

from reqdiff.exceptions import InvalidFilterError
from reqdiff.models import DiffResult, DiffStatus

ALL = "all"
ANY_VERSION = "any"
ABSENT = "—"

STATUS_NAMES: list[str] = [ALL] + [s.value for s in DiffStatus]


@dataclass(frozen=True)
class DiffRow:
    """One line of a rendered diff report."""

    status: DiffStatus
    name: str
    from_version: str
    to_version: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "status": self.status.value,
            "from": self.from_version,
            "to": self.to_version,
        }


def _display(constraint: str | None) -> str:
    return constraint or ANY_VERSION


def _resolve_status(status: str | DiffStatus) -> DiffStatus | None:
    """Map a filter name to a DiffStatus; ``None`` means all statuses."""
    if isinstance(status, DiffStatus):
        return status
    if status == ALL:
        return None
    try:
        return DiffStatus(status)
    except ValueError:
        raise InvalidFilterError(status, STATUS_NAMES) from None


def to_rows(result: DiffResult, status: str | DiffStatus = ALL) -> list[DiffRow]:
    """Build report rows for ``status`` (``"all"`` by default), sorted by name.

    A missing constraint is shown as ``any``; the side where the package
    does not exist is shown as ``—``.
    """
    wanted = _resolve_status(status)

    def include(s: DiffStatus) -> bool:
        return wanted is None or wanted is s

    rows: list[DiffRow] = []
    if include(DiffStatus.ADDED):
        rows.extend(
            DiffRow(DiffStatus.ADDED, p.name, ABSENT, _display(p.constraint))
            for p in result.added
        )
    if include(DiffStatus.REMOVED):
        rows.extend(
            DiffRow(DiffStatus.REMOVED, p.name, _display(p.constraint), ABSENT)
            for p in result.removed
        )
    if include(DiffStatus.CHANGED):
        rows.extend(
            DiffRow(
                DiffStatus.CHANGED,
                c.name,
                _display(c.from_constraint),
                _display(c.to_constraint),
            )
            for c in result.changed
        )
    if include(DiffStatus.UNCHANGED):
        rows.extend(
            DiffRow(
                DiffStatus.UNCHANGED,
                p.name,
                _display(p.constraint),
                _display(p.constraint),
            )
            for p in result.unchanged
        )

    rows.sort(key=lambda r: r.name)
    return rows


def summarize(result: DiffResult) -> dict[str, int]:
    """Entry counts per status name, plus ``all``."""
    return {
        ALL: result.total,
        DiffStatus.ADDED.value: len(result.added),
        DiffStatus.REMOVED.value: len(result.removed),
        DiffStatus.CHANGED.value: len(result.changed),
        DiffStatus.UNCHANGED.value: len(result.unchanged),
    }
