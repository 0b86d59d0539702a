from __future__ import annotations

import json
import logging
import uuid
from pathlib import Path
from typing import Any, List, Optional

from algoevo.core.errors import RecordValidationError, StoreCorruptedError
from algoevo.core.schema import CaseRecord, validate_record

logger = logging.getLogger(__name__)

DESCRIPTION_LIMIT = 2000
NAME_LIMIT = 80
IMPORTED_PERIOD = "unknown"


class BaseCaseStore:
    def load(self) -> List[CaseRecord]:
        raise NotImplementedError

    def load_valid(self, issues: Optional[List[RecordValidationError]] = None) -> List[CaseRecord]:
        """Cases that still match the schema; stores that validate on write return everything."""
        return self.load()

    def append(self, case: CaseRecord) -> CaseRecord:
        raise NotImplementedError


class InMemoryCaseStore(BaseCaseStore):
    """Volatile store used when no file path is configured."""

    def __init__(self, cases: Optional[List[CaseRecord]] = None) -> None:
        self._cases: List[CaseRecord] = list(cases or [])

    def load(self) -> List[CaseRecord]:
        return [case.model_copy(deep=True) for case in self._cases]

    def append(self, case: CaseRecord) -> CaseRecord:
        if any(existing.id == case.id for existing in self._cases):
            raise RecordValidationError(f"Case id {case.id!r} already exists")
        self._cases.append(case)
        return case


class FileCaseStore(BaseCaseStore):
    """
    Imported cases persisted as one JSON array (same shape as /api/trading-machines).

    Writes are read-modify-write through a temp file and an atomic replace, so a
    failed write never leaves a half-written file behind. There is no locking:
    two concurrent appends can lose one of the updates.
    """

    def __init__(self, path: str | Path = "outputs/imported_cases.json") -> None:
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self._persist([])

    def _persist(self, payload: List[Any]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    def _read_raw(self) -> List[Any]:
        if not self.path.exists():
            self._persist([])
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StoreCorruptedError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(payload, list):
            raise StoreCorruptedError(f"{self.path} must hold a JSON array, got {type(payload).__name__}")
        return payload

    def load(self) -> List[CaseRecord]:
        """All stored cases; any entry that fails validation raises StoreCorruptedError."""
        cases: List[CaseRecord] = []
        for idx, item in enumerate(self._read_raw()):
            try:
                cases.append(validate_record(CaseRecord, item, what=f"imported case #{idx}"))
            except RecordValidationError as exc:
                raise StoreCorruptedError(f"{self.path}: {exc}") from exc
        return cases

    def load_valid(self, issues: Optional[List[RecordValidationError]] = None) -> List[CaseRecord]:
        """
        Stored cases that still match the schema. Invalid entries are logged,
        collected in `issues` and skipped; they stay in the file untouched.

        Raises:
            StoreCorruptedError: If the file is not a JSON array at all
        """
        cases: List[CaseRecord] = []
        for idx, item in enumerate(self._read_raw()):
            try:
                cases.append(validate_record(CaseRecord, item, what=f"imported case #{idx}"))
            except RecordValidationError as exc:
                logger.warning("Skipping stored case in %s: %s", self.path, exc)
                if issues is not None:
                    issues.append(exc)
        return cases

    def append(self, case: CaseRecord) -> CaseRecord:
        case = validate_record(CaseRecord, case.to_json(), what="trading-machine case")
        payload = self._read_raw()
        if any(isinstance(item, dict) and item.get("id") == case.id for item in payload):
            raise RecordValidationError(f"Case id {case.id!r} already exists")
        payload.append(case.to_json())
        self._persist(payload)
        logger.info("Imported case %s (%s) into %s", case.id, case.name, self.path)
        return case


def _default_name(raw_text: str) -> str:
    for line in raw_text.splitlines():
        line = line.strip()
        if line:
            return line[:NAME_LIMIT]
    return "Imported case"


def build_case_from_text(raw_text: str, name: Optional[str] = None) -> CaseRecord:
    """
    Build the minimal case record for a free-text import.

    The period is left as "unknown"; such cases are listed by the API but do
    not contribute to the matrices.
    """
    if not raw_text or not raw_text.strip():
        raise RecordValidationError("rawText is required")
    case_name = (name or "").strip()[:NAME_LIMIT] or _default_name(raw_text)
    data = {
        "id": f"imported-{uuid.uuid4().hex[:12]}",
        "name": case_name,
        "period": IMPORTED_PERIOD,
        "description": raw_text[:DESCRIPTION_LIMIT],
        "strategy": "Не указана",
        "timeframe": "Не указан",
        "marketType": "Не указан",
        "technologies": [],
        "modules": {},
        "advantages": [],
        "disadvantages": [],
    }
    return validate_record(CaseRecord, data, what="imported case")


def init_case_store(path: Optional[str | Path]) -> BaseCaseStore:
    if path:
        return FileCaseStore(path)
    logger.warning("No imported_cases_path configured, imported cases will not be persisted")
    return InMemoryCaseStore()


__all__ = [
    "BaseCaseStore",
    "InMemoryCaseStore",
    "FileCaseStore",
    "build_case_from_text",
    "init_case_store",
    "DESCRIPTION_LIMIT",
]
