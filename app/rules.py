"""
Fixed catalog rules.

Lookup tables for headers, directions and text fixes live here so the
pipeline modules stay free of literals.
"""

DEFAULT_DELIMITER = ";"
BUDGET_YES = "да"

# Known misspellings found in source data: wrong -> right.
TYPO_FIXES = {
    "Рекспублика": "Республика",
}

DIRECTION_CANONICAL = (
    "Агро, ветеринария и пищевые технологии",
    "Здравоохранение и биотехнологии",
    "Машиностроение и производственные технологии",
    "Нефтегазовая промышленность и недропользование",
    "Образование и гуманитарные направления",
    "Право, управление и коммуникации",
    "Строительство, архитектура и геоданные",
)

# Keys are normalized (lowercase) raw labels.
DIRECTION_MAP = {
    "агро и пищевые технологии": "Агро, ветеринария и пищевые технологии",
    "здравоохранение": "Здравоохранение и биотехнологии",
    "машиностроение": "Машиностроение и производственные технологии",
    "нефтегазовая промышленность": "Нефтегазовая промышленность и недропользование",
    "образование и гуманитарные": "Образование и гуманитарные направления",
    "право и управление": "Право, управление и коммуникации",
    "строительство и архитектура": "Строительство, архитектура и геоданные",
    "it и цифровые технологии": "Право, управление и коммуникации",
    "энергетика и электросети": "Машиностроение и производственные технологии",
    "транспорт и бпла": "Машиностроение и производственные технологии",
}

# Logical field -> acceptable header spellings, highest priority first.
COLUMN_CANDIDATES = {
    "direction": ("macrogroup_name", "Направление"),
    "format": ("education_level", "Формат обучения"),
    "fgos": ("fgos_code", "Код ФГОС"),
    "institution": ("institution_name", "ВУЗ", "Вуз", "Организация"),
    "program": ("program_name", "Название программы"),
    "city": ("region", "Город", "Регион"),
    "district": ("Федеральный округ РФ", "Федеральный округ", "Округ РФ", "Округ"),
    "baseEducation": (
        "Базовый уровень образования",
        "Уровень образования (входной)",
        "Базовый уровень",
    ),
    "budget": ("budget_seat", "Бюджетные места"),
    "url": ("URL", "url", "Ссылка"),
    "description": ("Описание", "Описание программы", "program_description"),
}

# Logical field -> ProgramRecord attribute.
FIELD_ATTRIBUTES = {
    "direction": "macrogroup_name",
    "format": "education_level",
    "fgos": "fgos_code",
    "institution": "institution_name",
    "program": "program_name",
    "city": "city",
    "district": "district",
    "baseEducation": "base_education",
    "budget": "budget_seat",
    "url": "url",
    "description": "description",
}

# Page profiles: which logical fields a view resolves.
CATALOG_FIELDS = tuple(COLUMN_CANDIDATES)
UNIVERSITY_FIELDS = tuple(
    field for field in COLUMN_CANDIDATES if field not in ("district", "baseEducation")
)

UNIVERSITY_PATH = "/university"
