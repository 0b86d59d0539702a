from __future__ import annotations

from .queries import (
    case_technology_coverage,
    extract_all_case_technologies,
    find_cases_by_technology,
    search_technologies,
    technologies_by_module,
    technologies_by_period,
)
from .store import KnowledgeBase, load_knowledge_base

__all__ = [
    "KnowledgeBase",
    "load_knowledge_base",
    "case_technology_coverage",
    "extract_all_case_technologies",
    "find_cases_by_technology",
    "search_technologies",
    "technologies_by_module",
    "technologies_by_period",
]
