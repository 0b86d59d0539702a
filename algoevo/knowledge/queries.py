"""
Read-only queries over technology and case records.
"""
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence

from algoevo.core.modules import CASE_MODULE_KEYS, module_for_case_key, normalize_module_name
from algoevo.core.schema import CaseRecord, TechnologyRecord


def technologies_by_period(
    technologies: Sequence[TechnologyRecord],
    start_year: int,
    end_year: int,
    *,
    current_year: Optional[int] = None,
) -> List[TechnologyRecord]:
    """Records whose [start, end or current year] overlaps [start_year, end_year]."""
    year = current_year if current_year is not None else date.today().year
    result = []
    for tech in technologies:
        tech_end = tech.periods.end if tech.periods.end is not None else year
        if tech.periods.start <= end_year and tech_end >= start_year:
            result.append(tech)
    return result


def technologies_by_module(technologies: Sequence[TechnologyRecord], module: str) -> List[TechnologyRecord]:
    target = normalize_module_name(module) or module
    result = []
    for tech in technologies:
        normalized = [normalize_module_name(name) or name for name in tech.applicable_modules]
        if target in normalized:
            result.append(tech)
    return result


def search_technologies(technologies: Sequence[TechnologyRecord], query: str) -> List[TechnologyRecord]:
    needle = (query or "").casefold()
    if not needle:
        return []
    return [
        tech
        for tech in technologies
        if needle in tech.name.casefold()
        or needle in (tech.full_name or "").casefold()
        or needle in tech.description.casefold()
    ]


def _case_labels(case: CaseRecord) -> List[str]:
    labels: List[str] = []
    for _, values in case.modules.items_by_key():
        labels.extend(values)
    return labels


def extract_all_case_technologies(cases: Sequence[CaseRecord]) -> List[str]:
    """Sorted union of stack names and module labels across all cases."""
    names = set()
    for case in cases:
        names.update(item.name for item in case.technologies)
        names.update(_case_labels(case))
    return sorted(names)


def find_cases_by_technology(cases: Sequence[CaseRecord], technology: str) -> List[CaseRecord]:
    needle = technology.casefold()
    return [
        case
        for case in cases
        if any(needle in item.name.casefold() for item in case.technologies)
        or any(needle in label.casefold() for label in _case_labels(case))
    ]


def case_technology_coverage(cases: Sequence[CaseRecord]) -> Dict[str, List[str]]:
    """Canonical module name -> ordered unique labels contributed by cases."""
    coverage: Dict[str, List[str]] = {module: [] for module in CASE_MODULE_KEYS.values()}
    for case in cases:
        for key, labels in case.modules.items_by_key():
            bucket = coverage[module_for_case_key(key)]
            for label in labels:
                if label not in bucket:
                    bucket.append(label)
    return coverage


__all__ = [
    "technologies_by_period",
    "technologies_by_module",
    "search_technologies",
    "extract_all_case_technologies",
    "find_cases_by_technology",
    "case_technology_coverage",
]
