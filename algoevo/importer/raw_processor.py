"""
RAW -> Markdown import step.

Scans a raw directory for *.json, *.txt and *.md snippets, detects whether each
one describes a technology or a case, checks a minimal schema and writes a
Markdown file with YAML front matter into the processed directory. Problems are
appended to an error log; one bad file never stops the batch.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from algoevo.core.schema import TechnologyCategory

logger = logging.getLogger(__name__)

RAW_SUFFIXES = (".json", ".txt", ".md")
_JSON_FENCE = re.compile(r"```json[\r\n]+(.*?)```", re.IGNORECASE | re.DOTALL)


class RawPeriods(BaseModel):
    start: int
    peak: Optional[int] = None
    decline: Optional[int] = None
    end: Optional[int] = None


class RawTechnology(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: TechnologyCategory
    periods: RawPeriods


class RawCasePeriod(BaseModel):
    start: int
    end: Optional[int] = None


class RawCase(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    period: RawCasePeriod
    modules: Dict[str, List[str]]


@dataclass
class ImportSummary:
    ok: int = 0
    skipped: int = 0
    failed: int = 0

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.ok, self.skipped, self.failed


class RawImportProcessor:
    def __init__(self, raw_dir: str | Path, out_dir: str | Path, log_path: str | Path) -> None:
        self.raw_dir = Path(raw_dir)
        self.out_dir = Path(out_dir)
        self.log_path = Path(log_path)
        for directory in (self.raw_dir, self.out_dir, self.log_path.parent):
            directory.mkdir(parents=True, exist_ok=True)

    def _log_error(self, message: str) -> None:
        logger.warning(message)
        stamp = datetime.now(timezone.utc).isoformat()
        with self.log_path.open("a", encoding="utf-8") as f:
            f.write(f"[{stamp}] {message}\n")

    def _parse(self, path: Path) -> Optional[Any]:
        content = path.read_text(encoding="utf-8")
        try:
            if path.suffix.lower() == ".json":
                return json.loads(content)
            match = _JSON_FENCE.search(content)
            if match:
                return json.loads(match.group(1))
        except json.JSONDecodeError as exc:
            self._log_error(f"Parse error in {path}: {exc}")
        return None

    def process_file(self, path: Path) -> str:
        """Process one raw file. Returns 'ok', 'skip' or 'error'."""
        payload = self._parse(path)
        kind = detect_type(path.name, payload)
        if kind == "unknown":
            self._log_error(f"Unknown type for {path}")
            return "skip"

        try:
            if kind == "tech":
                markdown = technology_to_markdown(RawTechnology.model_validate(payload or {}))
            else:
                markdown = case_to_markdown(RawCase.model_validate(payload or {}))
        except ValidationError as exc:
            self._log_error(f"Validation error for {path}: {exc.error_count()} error(s): {exc.errors()[0]['msg']}")
            return "error"

        out = self.out_dir / f"{path.stem}.md"
        out.write_text(markdown, encoding="utf-8")
        logger.debug("Wrote %s", out)
        return "ok"

    def run(self) -> ImportSummary:
        summary = ImportSummary()
        targets = sorted(p for p in self.raw_dir.iterdir() if p.is_file() and p.suffix.lower() in RAW_SUFFIXES)
        for path in targets:
            status = self.process_file(path)
            if status == "ok":
                summary.ok += 1
            elif status == "skip":
                summary.skipped += 1
            else:
                summary.failed += 1
        logger.info("Processed: %d, skipped: %d, failed: %d", *summary.as_tuple())
        return summary


def detect_type(filename: str, payload: Any = None) -> str:
    """'tech' | 'case' | 'unknown', by file prefix first, then by content keys."""
    base = Path(filename).name.lower()
    if base.startswith("tech_"):
        return "tech"
    if base.startswith("case_"):
        return "case"
    if isinstance(payload, dict):
        if "category" in payload and "periods" in payload:
            return "tech"
        if "modules" in payload and "period" in payload:
            return "case"
    return "unknown"


def _front_matter(meta: Dict[str, Any]) -> str:
    body = yaml.safe_dump(meta, allow_unicode=True, sort_keys=False, default_flow_style=None).strip()
    return f"---\n{body}\n---\n"


def technology_to_markdown(tech: RawTechnology) -> str:
    meta = {
        "id": tech.id,
        "type": "technology",
        "name": tech.name,
        "category": tech.category,
        "periods": tech.periods.model_dump(exclude_none=True),
    }
    return f"{_front_matter(meta)}\n# {tech.name}\n\n{tech.description}\n"


def case_to_markdown(case: RawCase) -> str:
    meta = {
        "id": case.id,
        "type": "case",
        "title": case.title,
        "period": case.period.model_dump(exclude_none=True),
        "modules": case.modules,
    }
    modules_list = "\n".join(f"- {name}: {', '.join(items)}" for name, items in case.modules.items())
    return f"{_front_matter(meta)}\n# {case.title}\n\n{case.description}\n\n## Modules\n{modules_list}\n"


def process_raw_directory(
    raw_dir: str | Path,
    out_dir: str | Path,
    log_path: str | Path,
) -> Tuple[int, int, int]:
    """Run the RAW -> Markdown step; returns (ok, skipped, failed)."""
    return RawImportProcessor(raw_dir, out_dir, log_path).run().as_tuple()


__all__ = [
    "RawImportProcessor",
    "ImportSummary",
    "detect_type",
    "technology_to_markdown",
    "case_to_markdown",
    "process_raw_directory",
]
