from app.filters import (
    facet_options,
    filter_by_institution,
    filter_programs,
    has_budget,
    to_output,
    university_url,
)
from app.models import FilterSpec, ProgramRecord
from app.search import build_search_index


def _program(**fields):
    fields.setdefault("search_index", build_search_index(
        program_name=fields.get("program_name", ""),
        institution_name=fields.get("institution_name", ""),
        fgos_code=fields.get("fgos_code", ""),
        macrogroup_name=fields.get("macrogroup_name", ""),
        city=fields.get("city", ""),
    ))
    return ProgramRecord(**fields)


PROGRAMS = [
    _program(
        program_name="Информатика и вычислительная техника",
        institution_name="Московский государственный университет",
        education_level="Очная",
        macrogroup_name="Право, управление и коммуникации",
        district="Центральный",
        base_education="Среднее общее",
        budget_seat="Да",
        city="Москва",
    ),
    _program(
        program_name="Лечебное дело",
        institution_name="Казанский федеральный университет",
        education_level="Заочная",
        macrogroup_name="Здравоохранение и биотехнологии",
        district="Приволжский",
        base_education="Среднее общее",
        budget_seat="нет",
        city="Казань",
    ),
    _program(
        program_name="Беспилотные системы",
        institution_name="Авиационный колледж",
        education_level="Очная",
        macrogroup_name="Машиностроение и производственные технологии",
        district="Приволжский",
        base_education="Основное общее",
        budget_seat="",
        city="Казань",
    ),
]


def test_empty_spec_returns_everything_in_order():
    assert filter_programs(PROGRAMS, FilterSpec()) == PROGRAMS
    assert not FilterSpec().is_active


def test_query_matches_by_initials():
    result = filter_programs(PROGRAMS, FilterSpec(query="мгу"))
    assert [p.institution_name for p in result] == ["Московский государственный университет"]


def test_query_tokens_are_anded_substrings():
    assert len(filter_programs(PROGRAMS, FilterSpec(query="казан"))) == 2
    result = filter_programs(PROGRAMS, FilterSpec(query="Казань, лечеб"))
    assert [p.program_name for p in result] == ["Лечебное дело"]
    assert filter_programs(PROGRAMS, FilterSpec(query="казань москва")) == []


def test_query_folds_yo():
    programs = [_program(program_name="Учёт и аудит")]
    assert filter_programs(programs, FilterSpec(query="УЧЁТ")) == programs


def test_format_and_district_are_exact():
    assert len(filter_programs(PROGRAMS, FilterSpec(format="Очная"))) == 2
    assert filter_programs(PROGRAMS, FilterSpec(format="очная")) == []
    assert len(filter_programs(PROGRAMS, FilterSpec(district="Приволжский"))) == 2


def test_direction_is_normalized():
    result = filter_programs(PROGRAMS, FilterSpec(direction="  здравоохранение И биотехнологии"))
    assert [p.program_name for p in result] == ["Лечебное дело"]


def test_budget_only():
    result = filter_programs(PROGRAMS, FilterSpec(budget_only=True))
    assert [p.budget_seat for p in result] == ["Да"]
    assert has_budget(PROGRAMS[0])
    assert not has_budget(PROGRAMS[1])


def test_adding_facets_never_grows_result():
    specs = [
        FilterSpec(),
        FilterSpec(district="Приволжский"),
        FilterSpec(district="Приволжский", format="Очная"),
        FilterSpec(district="Приволжский", format="Очная", base_education="Основное общее"),
        FilterSpec(district="Приволжский", format="Очная", base_education="Основное общее", budget_only=True),
    ]
    sizes = [len(filter_programs(PROGRAMS, spec)) for spec in specs]
    assert sizes == sorted(sizes, reverse=True)
    assert sizes == [3, 2, 1, 1, 0]


def test_filter_does_not_touch_input():
    before = list(PROGRAMS)
    filter_programs(PROGRAMS, FilterSpec(query="казань", budget_only=True))
    assert PROGRAMS == before


def test_filter_by_institution_normalizes_names():
    result = filter_by_institution(PROGRAMS, "  казанский ФЕДЕРАЛЬНЫЙ  университет")
    assert [p.program_name for p in result] == ["Лечебное дело"]
    assert filter_by_institution(PROGRAMS, "Казанский") == []


def test_facet_options():
    programs = PROGRAMS + [_program(macrogroup_name="Космос", education_level="Дистанционная")]
    options = facet_options(programs)
    assert options.formats == ["Дистанционная", "Заочная", "Очная"]
    assert options.directions == [
        "Здравоохранение и биотехнологии",
        "Машиностроение и производственные технологии",
        "Право, управление и коммуникации",
    ]
    assert options.districts == ["Приволжский", "Центральный"]
    assert options.base_educations == ["Основное общее", "Среднее общее"]
    assert options.district_available


def test_facet_options_flag_missing_facets():
    options = facet_options([_program(program_name="x")])
    assert options.districts == []
    assert not options.district_available
    assert not options.base_education_available


def test_university_url_encodes_raw_name():
    assert university_url("МГУ им. М.В. Ломоносова") == (
        "/university?name=%D0%9C%D0%93%D0%A3+%D0%B8%D0%BC.+%D0%9C.%D0%92.+"
        "%D0%9B%D0%BE%D0%BC%D0%BE%D0%BD%D0%BE%D1%81%D0%BE%D0%B2%D0%B0"
    )


def test_to_output_adds_card_fields():
    out = to_output(PROGRAMS[0])
    assert out.has_budget
    assert out.university_url.startswith("/university?name=")
    assert out.program_name == PROGRAMS[0].program_name
    assert out.search_index == PROGRAMS[0].search_index
