"""
Evolution matrix assembly.

Three views share the ModuleData shape:

- baseline:   the hand-authored 8 x 5 matrix, unchanged
- integrated: baseline + every technology record + every case, merged per cell
- dynamic:    one row per distinct technology name, placed in its start
              revision with a single follow-up "evolution" cell

All functions are pure: every call starts from fresh copies of its inputs, so
repeated calls give identical output. Cases whose period has no parseable year
are logged and left out instead of failing the whole view.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from algoevo.core.errors import DataQualityError
from algoevo.core.modules import module_for_case_key, module_for_category
from algoevo.core.revisions import (
    REVISION_ORDER,
    classify_period_string,
    next_revision,
    revision_for_technology,
    style_for_revision,
)
from algoevo.core.schema import CaseRecord, EvolutionData, ModuleData, TechnologyRecord
from algoevo.matrix.cells import MatrixRow, TechCell, rows_from_modules
from algoevo.matrix.links import reference_label

logger = logging.getLogger(__name__)

EVOLUTION_ARROW = " → "
INDENT_MARKER = "↳ "
ROW_NAME_SEPARATOR = ": "


def case_note(case_name: str) -> str:
    return f'(из кейса "{case_name}")'


def _case_revision(case: CaseRecord, issues: Optional[List[DataQualityError]]) -> Optional[str]:
    try:
        return classify_period_string(case.period, record_id=case.id)
    except DataQualityError as exc:
        logger.warning("Skipping case %s in matrix assembly: %s", case.id, exc)
        if issues is not None:
            issues.append(exc)
        return None


# ============================================================================
# Baseline
# ============================================================================


def baseline_matrix(baseline: Sequence[ModuleData]) -> EvolutionData:
    return EvolutionData(modules=[m.model_copy(deep=True) for m in baseline])


# ============================================================================
# Integrated
# ============================================================================


class _RowIndex:
    def __init__(self, rows: List[MatrixRow]):
        self.rows = rows
        self._by_name: Dict[str, MatrixRow] = {row.name: row for row in rows}

    def get_or_add(self, name: str) -> MatrixRow:
        row = self._by_name.get(name)
        if row is None:
            row = MatrixRow(name=name)
            self.rows.append(row)
            self._by_name[name] = row
        return row


def integrated_matrix(
    baseline: Sequence[ModuleData],
    technologies: Sequence[TechnologyRecord],
    cases: Sequence[CaseRecord],
    *,
    issues: Optional[List[DataQualityError]] = None,
) -> EvolutionData:
    """
    Merge technology records and case technologies into a copy of the baseline.

    A name is appended to a cell only when it is not already present in the
    cell text (case-insensitive substring). Modules without a baseline row
    (Infrastructure) are appended as new rows.
    """
    index = _RowIndex(rows_from_modules(baseline))

    for tech in technologies:
        revision = revision_for_technology(tech)
        row = index.get_or_add(module_for_category(tech.category))
        row.cells[revision].add(tech.name, revision=revision)

    for case in cases:
        revision = _case_revision(case, issues)
        if revision is None:
            continue
        for key, labels in case.modules.items_by_key():
            labels = [label for label in labels if label.strip()]
            if not labels:
                continue
            cell = index.get_or_add(module_for_case_key(key)).cells[revision]
            for label in labels:
                cell.add(label, revision=revision)
            cell.add_note(case_note(case.name))

    return EvolutionData(modules=[row.to_module() for row in index.rows])


# ============================================================================
# Dynamic
# ============================================================================


@dataclass
class _DynamicEntry:
    name: str
    module: str
    revision: str
    desc: str
    has_predecessor: bool = False
    successors: List[str] = field(default_factory=list)

    @property
    def row_name(self) -> str:
        prefix = INDENT_MARKER if self.has_predecessor else ""
        return f"{prefix}{self.module}{ROW_NAME_SEPARATOR}{self.name}"

    def sort_key(self) -> tuple:
        return (self.module, self.has_predecessor, self.name)

    def to_row(self) -> MatrixRow:
        row = MatrixRow(name=self.row_name)
        row.cells[self.revision] = TechCell(
            names=[self.name],
            period=style_for_revision(self.revision),
            desc=self.desc,
        )
        follow_up = next_revision(self.revision)
        if follow_up is not None:
            if self.successors:
                text = f"{self.name}{EVOLUTION_ARROW}{', '.join(self.successors)}"
                desc = f"Эволюция: {', '.join(self.successors)}"
            else:
                text = self.name
                desc = "Продолжение использования"
            row.cells[follow_up] = TechCell(names=[text], period=style_for_revision(follow_up), desc=desc)
        return row


def dynamic_matrix(
    technologies: Sequence[TechnologyRecord],
    cases: Sequence[CaseRecord],
    *,
    issues: Optional[List[DataQualityError]] = None,
) -> EvolutionData:
    """
    One row per distinct technology name, from the technology table and from
    every label inside case modules. The first occurrence of a name wins.
    """
    entries: Dict[str, _DynamicEntry] = {}

    for tech in technologies:
        if tech.name in entries:
            continue
        entries[tech.name] = _DynamicEntry(
            name=tech.name,
            module=module_for_category(tech.category),
            revision=revision_for_technology(tech),
            desc=tech.description,
            has_predecessor=bool(tech.predecessors),
            successors=[reference_label(ref, technologies) for ref in tech.successors],
        )

    for case in cases:
        revision = _case_revision(case, issues)
        if revision is None:
            continue
        for key, labels in case.modules.items_by_key():
            module = module_for_case_key(key)
            for label in labels:
                name = label.strip()
                if not name or name in entries:
                    continue
                entries[name] = _DynamicEntry(
                    name=name,
                    module=module,
                    revision=revision,
                    desc=f'из кейса "{case.name}"',
                )

    ordered = sorted(entries.values(), key=_DynamicEntry.sort_key)
    return EvolutionData(modules=[entry.to_row().to_module() for entry in ordered])


def technology_name_from_row(row_name: str) -> str:
    """Technology part of a dynamic row name ("<module>: <technology>")."""
    _, _, name = row_name.partition(ROW_NAME_SEPARATOR)
    return name


# ============================================================================
# Filters
# ============================================================================


def hide_unchanged(evolution: EvolutionData) -> EvolutionData:
    """Drop modules whose technology never changes from one revision to the next."""
    kept: List[ModuleData] = []
    for module in evolution.modules:
        revisions = [getattr(module.revisions, key) for key in REVISION_ORDER]
        changed = any(
            cur.tech != prev.tech and cur.tech.strip() != ""
            for prev, cur in zip(revisions, revisions[1:])
        )
        if changed:
            kept.append(module)
    return EvolutionData(modules=kept)


MATRIX_VIEWS = ("baseline", "integrated", "dynamic")


def build_matrix(
    view: str,
    baseline: Sequence[ModuleData],
    technologies: Sequence[TechnologyRecord],
    cases: Sequence[CaseRecord],
    *,
    issues: Optional[List[DataQualityError]] = None,
) -> EvolutionData:
    if view == "baseline":
        return baseline_matrix(baseline)
    if view == "integrated":
        return integrated_matrix(baseline, technologies, cases, issues=issues)
    if view == "dynamic":
        return dynamic_matrix(technologies, cases, issues=issues)
    raise ValueError(f"Unknown matrix view {view!r}; expected one of {MATRIX_VIEWS}")


__all__ = [
    "baseline_matrix",
    "integrated_matrix",
    "dynamic_matrix",
    "hide_unchanged",
    "build_matrix",
    "technology_name_from_row",
    "case_note",
    "MATRIX_VIEWS",
    "EVOLUTION_ARROW",
    "INDENT_MARKER",
]
