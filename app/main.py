import logging

from fastapi import Depends, FastAPI, File, HTTPException, Query, UploadFile

from .catalog import build_snapshot, load_catalog
from .config import Settings, get_settings, log_level
from .errors import CatalogError
from .filters import facet_options, filter_by_institution, filter_programs, to_output
from .models import (
    CatalogSnapshot,
    FacetOptions,
    FilterSpec,
    HealthResponse,
    ParseReport,
    ProgramsResponse,
    ReportSummary,
    UniversityResponse,
)
from .normalize import clean_text, decode_csv_bytes
from .rules import CATALOG_FIELDS, UNIVERSITY_FIELDS

logging.basicConfig(level=log_level(get_settings().log_level))
logger = logging.getLogger("program-catalog.api")

app = FastAPI(
    title="program-catalog",
    description="Searchable catalog of educational programs loaded from CSV",
    version="0.1.0",
)


async def _load(settings: Settings, fields=CATALOG_FIELDS) -> CatalogSnapshot:
    try:
        return await load_catalog(settings, fields=fields)
    except CatalogError as e:
        logger.error("catalog unavailable: %s", e.message)
        raise HTTPException(status_code=503, detail=e.message)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/programs", response_model=ProgramsResponse)
async def list_programs(
    q: str = "",
    format: str = "",
    direction: str = "",
    district: str = "",
    base_education: str = "",
    budget_only: bool = False,
    settings: Settings = Depends(get_settings),
):
    snapshot = await _load(settings)
    spec = FilterSpec(
        query=q.strip(),
        format=format or None,
        direction=direction or None,
        district=district or None,
        base_education=base_education or None,
        budget_only=budget_only,
    )
    items = filter_programs(snapshot.programs, spec)
    return ProgramsResponse(
        total=len(snapshot.programs),
        count=len(items),
        filtered=spec.is_active,
        items=[to_output(p) for p in items],
    )


@app.get("/facets", response_model=FacetOptions)
async def facets(settings: Settings = Depends(get_settings)):
    snapshot = await _load(settings)
    return facet_options(snapshot.programs)


@app.get("/university", response_model=UniversityResponse)
async def university(name: str = Query(""), settings: Settings = Depends(get_settings)):
    wanted = clean_text(name)
    if not wanted:
        raise HTTPException(status_code=422, detail="Вуз не выбран")

    snapshot = await _load(settings, UNIVERSITY_FIELDS)
    items = filter_by_institution(snapshot.programs, wanted)
    return UniversityResponse(name=wanted, count=len(items), items=[to_output(p) for p in items])


@app.post("/parse", response_model=ParseReport)
async def parse_upload(file: UploadFile = File(...), settings: Settings = Depends(get_settings)):
    if not (file.filename or "").lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    try:
        snapshot = build_snapshot(decode_csv_bytes(raw), delimiter=settings.delimiter)
    except CatalogError as e:
        raise HTTPException(status_code=422, detail=e.message)

    return ParseReport(
        summary=ReportSummary(
            rows=len(snapshot.programs),
            columns=len(snapshot.headers),
            warnings=len(snapshot.warnings),
        ),
        headers=list(snapshot.headers),
        columns=snapshot.column_map,
        warnings=list(snapshot.warnings),
        programs=list(snapshot.programs),
    )
