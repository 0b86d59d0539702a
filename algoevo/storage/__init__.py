from __future__ import annotations

from .case_store import (
    BaseCaseStore,
    FileCaseStore,
    InMemoryCaseStore,
    build_case_from_text,
    init_case_store,
)

__all__ = [
    "BaseCaseStore",
    "FileCaseStore",
    "InMemoryCaseStore",
    "build_case_from_text",
    "init_case_store",
]
