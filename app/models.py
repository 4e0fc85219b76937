from __future__ import annotations

from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class ProgramRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    education_level: str = ""
    macrogroup_name: str = ""
    fgos_code: str = ""
    institution_name: str = ""
    program_name: str = ""
    city: str = ""
    district: str = ""
    base_education: str = ""
    budget_seat: str = ""
    url: str = Field(default="", alias="URL")
    description: str = ""
    search_index: str = Field(default="", alias="searchIndex")


class FilterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    query: str = ""
    format: Optional[str] = None
    direction: Optional[str] = None
    district: Optional[str] = None
    base_education: Optional[str] = None
    budget_only: bool = False

    @property
    def is_active(self) -> bool:
        return bool(
            self.query.strip()
            or self.format
            or self.direction
            or self.district
            or self.base_education
            or self.budget_only
        )


class ReportSummary(BaseModel):
    rows: int
    columns: int
    warnings: int = 0


class ReportItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class CatalogSnapshot(BaseModel):
    """Immutable result of one load: records plus what was learned about the file."""

    model_config = ConfigDict(frozen=True)

    programs: Tuple[ProgramRecord, ...] = ()
    headers: Tuple[str, ...] = ()
    # logical field -> resolved literal header, in resolution order
    columns: Tuple[Tuple[str, Optional[str]], ...] = ()
    warnings: Tuple[ReportItem, ...] = ()

    @property
    def column_map(self) -> Dict[str, Optional[str]]:
        return dict(self.columns)


class FacetOptions(BaseModel):
    formats: List[str] = Field(default_factory=list)
    directions: List[str] = Field(default_factory=list)
    districts: List[str] = Field(default_factory=list)
    base_educations: List[str] = Field(default_factory=list)
    district_available: bool = False
    base_education_available: bool = False


class ProgramOut(ProgramRecord):
    has_budget: bool = False
    university_url: str = ""


class ProgramsResponse(BaseModel):
    total: int
    count: int
    filtered: bool = False
    items: List[ProgramOut] = Field(default_factory=list)


class UniversityResponse(BaseModel):
    name: str
    count: int
    items: List[ProgramOut] = Field(default_factory=list)


class ParseReport(BaseModel):
    summary: ReportSummary
    headers: List[str] = Field(default_factory=list)
    columns: Dict[str, Optional[str]] = Field(default_factory=dict)
    warnings: List[ReportItem] = Field(default_factory=list)
    programs: List[ProgramRecord] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
