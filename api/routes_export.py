"""ETS CSV Export Routes.

Exports a hierarchical group address overview as the semicolon-separated,
Windows-1252 encoded CSV file that ETS imports into a project.
"""

from urllib.parse import quote

from fastapi import APIRouter
from fastapi.responses import Response

from core.exporter import export_ets_csv

from .models import EtsCsvExportRequest, EtsCsvPreviewResponse

router = APIRouter(prefix="/api/v1/export", tags=["export"])


def _export(data: EtsCsvExportRequest):
    defaults = router.app.state.config["export"]
    return export_ets_csv(
        data.overview,
        project_name=data.project_name or defaults["default_project_name"],
        locale=data.locale or defaults["default_locale"],
    )


def _content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""
    ascii_name = filename.encode("ascii", "replace").decode("ascii")
    header = f'attachment; filename="{ascii_name}"'
    if ascii_name != filename:
        header += f"; filename*=UTF-8''{quote(filename)}"
    return header


@router.post("/ets-csv")
def export_ets_csv_file(data: EtsCsvExportRequest):
    """Export the overview as an ETS-importable CSV file."""
    result = _export(data)
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={
            "Content-Disposition": _content_disposition(result.filename),
            "X-Row-Count": str(result.row_count),
            "X-Replaced-Characters": str(result.replaced_characters),
        },
    )


@router.post("/ets-csv/preview", response_model=EtsCsvPreviewResponse)
def preview_ets_csv(data: EtsCsvExportRequest):
    """Return the CSV rows as text, before Windows-1252 encoding."""
    result = _export(data)
    return EtsCsvPreviewResponse(
        filename=result.filename,
        row_count=result.row_count,
        replaced_characters=result.replaced_characters,
        rows=result.rows,
    )
