"""
Category <-> module mapping.

Every technology category maps to exactly one canonical module row. The one
non-bijective entry is "Feature Engineering", which has no category of its own
and aggregates both `processing` and `ml`.
"""
from __future__ import annotations

from typing import Dict, List, Optional


DATA_COLLECTION = "Сбор данных"
DATA_PROCESSING = "Обработка данных"
FEATURE_ENGINEERING = "Feature Engineering"
SIGNAL_GENERATION = "Генерация сигналов"
RISK_MANAGEMENT = "Риск-менеджмент"
EXECUTION = "Исполнение сделок"
MARKET_ADAPTATION = "Адаптация к рынку"
VISUALIZATION = "Визуализация и мониторинг"
INFRASTRUCTURE = "Инфраструктура"

TECHNOLOGY_CATEGORIES: List[str] = [
    "data",
    "processing",
    "ml",
    "visualization",
    "infrastructure",
    "risk",
    "execution",
    "adaptation",
]

CATEGORY_TO_MODULE: Dict[str, str] = {
    "data": DATA_COLLECTION,
    "processing": DATA_PROCESSING,
    "ml": SIGNAL_GENERATION,
    "visualization": VISUALIZATION,
    "infrastructure": INFRASTRUCTURE,
    "risk": RISK_MANAGEMENT,
    "execution": EXECUTION,
    "adaptation": MARKET_ADAPTATION,
}

# Row order of the matrix; Infrastructure only shows up in derived views.
UI_MODULES: List[str] = [
    DATA_COLLECTION,
    DATA_PROCESSING,
    FEATURE_ENGINEERING,
    SIGNAL_GENERATION,
    RISK_MANAGEMENT,
    EXECUTION,
    MARKET_ADAPTATION,
    VISUALIZATION,
    INFRASTRUCTURE,
]

MODULE_TO_CATEGORIES: Dict[str, List[str]] = {
    DATA_COLLECTION: ["data"],
    DATA_PROCESSING: ["processing"],
    FEATURE_ENGINEERING: ["processing", "ml"],
    SIGNAL_GENERATION: ["ml"],
    RISK_MANAGEMENT: ["risk"],
    EXECUTION: ["execution"],
    MARKET_ADAPTATION: ["adaptation"],
    VISUALIZATION: ["visualization"],
    INFRASTRUCTURE: ["infrastructure"],
}

# Keys of CaseRecord.modules, in matrix order
CASE_MODULE_KEYS: Dict[str, str] = {
    "dataCollection": DATA_COLLECTION,
    "dataProcessing": DATA_PROCESSING,
    "featureEngineering": FEATURE_ENGINEERING,
    "signalGeneration": SIGNAL_GENERATION,
    "riskManagement": RISK_MANAGEMENT,
    "execution": EXECUTION,
    "marketAdaptation": MARKET_ADAPTATION,
    "visualization": VISUALIZATION,
}


def module_for_category(category: str) -> str:
    return CATEGORY_TO_MODULE.get(category, INFRASTRUCTURE)


def categories_for_module(module_name: str) -> List[str]:
    return list(MODULE_TO_CATEGORIES.get(module_name, []))


def module_for_case_key(key: str) -> str:
    try:
        return CASE_MODULE_KEYS[key]
    except KeyError:
        raise KeyError(f"Unknown case module key: {key!r}") from None


def normalize_module_name(name: str) -> Optional[str]:
    """
    Resolve a free-form module reference to a canonical module name.

    Accepts canonical names, legacy camelCase case keys and case-insensitive
    variants of either. Returns None when nothing matches.
    """
    if name in MODULE_TO_CATEGORIES:
        return name
    if name in CASE_MODULE_KEYS:
        return CASE_MODULE_KEYS[name]
    folded = name.strip().casefold()
    for module_name in UI_MODULES:
        if module_name.casefold() == folded:
            return module_name
    for key, module_name in CASE_MODULE_KEYS.items():
        if key.casefold() == folded:
            return module_name
    return None


def normalize_module_names(names: List[str]) -> List[str]:
    """Normalize each entry, keeping unknown names as-is."""
    return [normalize_module_name(n) or n for n in names]


__all__ = [
    "TECHNOLOGY_CATEGORIES",
    "CATEGORY_TO_MODULE",
    "MODULE_TO_CATEGORIES",
    "CASE_MODULE_KEYS",
    "UI_MODULES",
    "module_for_category",
    "categories_for_module",
    "module_for_case_key",
    "normalize_module_name",
    "normalize_module_names",
]
