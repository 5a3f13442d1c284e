"""Parser for requirements.txt-style manifests."""

from __future__ import annotations

import re

import structlog

from reqdiff.models import Manifest, PackageEntry

log = structlog.get_logger("reqdiff.parser")

# Matches: package name, optional whitespace, optional operator-led constraint
_REQ_RE = re.compile(
    r"^([A-Za-z0-9_\-.]+)"  # package name
    r"\s*"
    r"([=<>!~]+.*)?$",  # constraint_expr
)


def parse(text: str) -> Manifest:
    """Parse manifest text into a mapping of lower-cased name to entry.

    Blank lines, ``#`` comments and lines that do not look like
    ``name[constraint]`` (``-r base.txt``, ``--index-url ...``) are skipped.
    A name repeated later in the text replaces the earlier entry.
    """
    manifest: Manifest = {}

    for lineno, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        m = _REQ_RE.match(line)
        if not m:
            log.debug("parser.line_skipped", lineno=lineno, line=line)
            continue

        constraint = m.group(2)
        entry = PackageEntry(
            name=m.group(1),
            constraint=constraint.strip() if constraint is not None else None,
        )

        prev = manifest.get(entry.key)
        if prev is not None:
            log.debug(
                "parser.entry_overwritten",
                key=entry.key,
                old_constraint=prev.constraint,
                new_constraint=entry.constraint,
                lineno=lineno,
            )
        manifest[entry.key] = entry

    return manifest
