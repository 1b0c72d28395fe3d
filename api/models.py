"""Pydantic models for the ETS CSV export API.

Request bodies use the camelCase field names of the group address
generator; snake_case is accepted as well.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.overview import HierarchicalOverview

# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


class EtsCsvExportRequest(BaseModel):
    """Overview to export plus the project it belongs to."""

    model_config = ConfigDict(populate_by_name=True)

    project_name: str | None = Field(
        default=None, alias="projectName", max_length=128, description="Used for the file name"
    )
    locale: str | None = Field(
        default=None, max_length=16, description="Language the names were generated in"
    )
    overview: HierarchicalOverview


class EtsCsvPreviewResponse(BaseModel):
    filename: str
    row_count: int
    replaced_characters: int = 0
    rows: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# System
# ---------------------------------------------------------------------------


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
