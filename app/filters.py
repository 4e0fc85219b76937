from __future__ import annotations

from typing import Iterable, List, Sequence
from urllib.parse import urlencode

from .models import FacetOptions, FilterSpec, ProgramOut, ProgramRecord
from .normalize import normalize_for_search, normalize_text
from .rules import BUDGET_YES, DIRECTION_CANONICAL, UNIVERSITY_PATH


def has_budget(program: ProgramRecord) -> bool:
    return normalize_text(program.budget_seat) == BUDGET_YES


def _matches(program: ProgramRecord, spec: FilterSpec, tokens: List[str]) -> bool:
    if not all(token in program.search_index for token in tokens):
        return False
    if spec.format and program.education_level != spec.format:
        return False
    if spec.direction and normalize_text(program.macrogroup_name) != normalize_text(spec.direction):
        return False
    if spec.district and program.district != spec.district:
        return False
    if spec.base_education and program.base_education != spec.base_education:
        return False
    if spec.budget_only and not has_budget(program):
        return False
    return True


def filter_programs(programs: Iterable[ProgramRecord], spec: FilterSpec) -> List[ProgramRecord]:
    """Keep records passing every active predicate, in input order."""
    tokens = normalize_for_search(spec.query).split()
    return [program for program in programs if _matches(program, spec, tokens)]


def filter_by_institution(programs: Iterable[ProgramRecord], name: str) -> List[ProgramRecord]:
    wanted = normalize_text(name)
    return [program for program in programs if normalize_text(program.institution_name) == wanted]


def _distinct_sorted(values: Iterable[str]) -> List[str]:
    return sorted({value for value in values if value})


def facet_options(programs: Sequence[ProgramRecord]) -> FacetOptions:
    present = {program.macrogroup_name for program in programs}
    districts = _distinct_sorted(program.district for program in programs)
    levels = _distinct_sorted(program.base_education for program in programs)
    return FacetOptions(
        formats=_distinct_sorted(program.education_level for program in programs),
        directions=[direction for direction in DIRECTION_CANONICAL if direction in present],
        districts=districts,
        base_educations=levels,
        district_available=bool(districts),
        base_education_available=bool(levels),
    )


def university_url(name: str) -> str:
    return f"{UNIVERSITY_PATH}?{urlencode({'name': name})}"


def to_output(program: ProgramRecord) -> ProgramOut:
    return ProgramOut(
        **program.model_dump(),
        has_budget=has_budget(program),
        university_url=university_url(program.institution_name),
    )
