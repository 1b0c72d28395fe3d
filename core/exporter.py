"""ETS CSV export — overview in, Windows-1252 file content out.

This is the single entry point used by the API routes and the CLI:

    result = export_ets_csv(overview, project_name="Woning Jansen")
    result.filename    # → "Woning Jansen-ets.csv"
    result.content     # → b"Main;Middle;Sub;..."
    result.media_type  # → "text/csv;charset=windows-1252"

Nothing is written to disk here; callers persist or stream the bytes.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, NamedTuple

from .csv_rows import assemble, build_rows
from .overview import HierarchicalOverview
from .windows1252 import encode_with_report

logger = logging.getLogger("etscsv.export")

MEDIA_TYPE = "text/csv;charset=windows-1252"
FILENAME_SUFFIX = "-ets.csv"
DEFAULT_PROJECT_NAME = "Project"

# Characters Windows does not allow in file names
_UNSAFE_FILENAME_RE = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


class EtsCsvExport(NamedTuple):
    """Result of one export."""

    content: bytes
    filename: str
    media_type: str
    row_count: int
    replaced_characters: int
    rows: list[str]


def suggest_filename(project_name: str | None) -> str:
    """Return "<projectName>-ets.csv" with path-unsafe characters replaced."""
    name = (project_name or "").strip() or DEFAULT_PROJECT_NAME
    return _UNSAFE_FILENAME_RE.sub("_", name) + FILENAME_SUFFIX


def coerce_overview(overview: HierarchicalOverview | Mapping[str, Any]) -> HierarchicalOverview:
    """Accept an overview model or its JSON-like mapping.

    Raises ValueError for None and pydantic.ValidationError for mappings
    that do not have the overview shape.
    """
    if overview is None:
        raise ValueError("overview is required")
    if isinstance(overview, HierarchicalOverview):
        return overview
    if isinstance(overview, Mapping):
        return HierarchicalOverview.model_validate(dict(overview))
    raise ValueError(f"Unsupported overview type: {type(overview).__name__}")


def export_ets_csv(
    overview: HierarchicalOverview | Mapping[str, Any],
    project_name: str | None = DEFAULT_PROJECT_NAME,
    locale: str = "nl",
) -> EtsCsvExport:
    """Build the ETS group address CSV for an overview.

    Args:
        overview: Group address tree; names are expected to be translated
            into the target language already.
        project_name: Used for the suggested file name only.
        locale: Display language the names were generated in. Logged, not
            used for output.
    """
    tree = coerce_overview(overview)

    rows = build_rows(tree)
    content, replaced = encode_with_report(assemble(rows))
    filename = suggest_filename(project_name)

    mains, middles, addresses = tree.counts()
    logger.info(
        "Built %s (%s): %d main group(s), %d middle group(s), %d address(es), %d bytes",
        filename,
        locale,
        mains,
        middles,
        addresses,
        len(content),
    )
    if replaced:
        logger.warning(
            "%d character(s) not representable in Windows-1252 were written as '?' in %s",
            replaced,
            filename,
        )

    return EtsCsvExport(
        content=content,
        filename=filename,
        media_type=MEDIA_TYPE,
        row_count=len(rows),
        replaced_characters=replaced,
        rows=rows,
    )
