"""reqdiff: compare two requirements.txt-style dependency manifests."""

__version__ = "0.1.0"

from reqdiff.differ import diff
from reqdiff.exceptions import InvalidFilterError, ReqDiffError
from reqdiff.models import ChangedEntry, DiffResult, DiffStatus, Manifest, PackageEntry
from reqdiff.parser import parse
from reqdiff.report import DiffRow, summarize, to_rows

__all__ = [
    "ChangedEntry",
    "DiffResult",
    "DiffRow",
    "DiffStatus",
    "InvalidFilterError",
    "Manifest",
    "PackageEntry",
    "ReqDiffError",
    "diff",
    "parse",
    "summarize",
    "to_rows",
]
