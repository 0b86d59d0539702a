"""
Consistency checks for the knowledge base.

These are lightweight cross-record checks that schema validation cannot do
on a single record: duplicate ids, dangling evolution links, module names
nothing maps to, and case periods the matrix assembler would have to skip.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence

from algoevo.core.errors import DataQualityError, RecordValidationError
from algoevo.core.modules import UI_MODULES, normalize_module_name
from algoevo.core.revisions import REVISION_ORDER, parse_period_year
from algoevo.core.schema import CaseRecord
from algoevo.knowledge.store import KnowledgeBase
from algoevo.matrix.links import resolve_reference

EXPECTED_TECHNOLOGIES = ["Random Forest", "LSTM", "Pandas", "NumPy", "Scikit-learn"]


@dataclass
class ConsistencyViolation:
    """
    A single consistency problem.

    Attributes:
        rule: Name of the rule that was violated
        subject: Id or name of the offending record
        message: Human-readable description
        severity: 'error' or 'warning'
    """
    rule: str
    subject: Optional[str]
    message: str
    severity: str = "error"

    def __str__(self):
        return f"[{self.severity.upper()}] {self.rule} ({self.subject}): {self.message}"


def _duplicates(ids: Sequence[str]) -> List[str]:
    return [value for value, count in Counter(ids).items() if count > 1]


def verify_knowledge_base(
    kb: KnowledgeBase,
    imported_cases: Sequence[CaseRecord] = (),
    store_issues: Sequence[RecordValidationError] = (),
) -> List[ConsistencyViolation]:
    """
    Run every consistency rule over the knowledge base.

    Returns:
        List of ConsistencyViolation objects (empty if everything is consistent)
    """
    violations: List[ConsistencyViolation] = []
    technologies = kb.technologies
    cases = [*kb.cases, *imported_cases]

    # --- Rule 1: unique ids ---
    for dup in _duplicates([t.id for t in technologies]):
        violations.append(ConsistencyViolation(
            rule="duplicate_technology_id",
            subject=dup,
            message=f"Technology id {dup!r} is used by more than one record",
        ))
    for dup in _duplicates([c.id for c in cases]):
        violations.append(ConsistencyViolation(
            rule="duplicate_case_id",
            subject=dup,
            message=f"Case id {dup!r} is used by more than one record",
        ))

    for issue in store_issues:
        violations.append(ConsistencyViolation(
            rule="invalid_stored_case",
            subject="imported_cases",
            message=str(issue),
        ))

    # --- Rule 2: applicableModules must map to a known module ---
    for tech in technologies:
        for module in tech.applicable_modules:
            if normalize_module_name(module) is None:
                violations.append(ConsistencyViolation(
                    rule="unknown_applicable_module",
                    subject=tech.id,
                    message=f"applicableModules entry {module!r} matches no module",
                    severity="warning",
                ))

    # --- Rule 3: evolution references should resolve ---
    for tech in technologies:
        if tech.evolution is None:
            continue
        for kind in ("predecessors", "successors", "variants"):
            for ref in getattr(tech.evolution, kind):
                if resolve_reference(ref, technologies) is None:
                    violations.append(ConsistencyViolation(
                        rule="unresolved_reference",
                        subject=tech.id,
                        message=f"{kind} reference {ref!r} resolves to no technology",
                        severity="warning",
                    ))

    # --- Rule 4: case periods must carry a year ---
    for case in cases:
        try:
            parse_period_year(case.period, record_id=case.id)
        except DataQualityError as exc:
            violations.append(ConsistencyViolation(
                rule="unparseable_case_period",
                subject=case.id,
                message=f"{exc}; case is left out of the matrices",
                severity="warning",
            ))

    # --- Rule 5: baseline rows are complete and canonical ---
    for module in kb.baseline:
        present = set(module.revisions.model_dump().keys())
        missing = [key for key in REVISION_ORDER if key not in present]
        if missing:
            violations.append(ConsistencyViolation(
                rule="baseline_revisions",
                subject=module.name,
                message=f"Baseline row is missing revisions {missing}",
            ))
        if module.name not in UI_MODULES:
            violations.append(ConsistencyViolation(
                rule="baseline_module_name",
                subject=module.name,
                message="Baseline row name is not a canonical module",
            ))

    # --- Rule 6: core technologies are present ---
    names = {t.name for t in technologies}
    for expected in EXPECTED_TECHNOLOGIES:
        if expected not in names:
            violations.append(ConsistencyViolation(
                rule="missing_core_technology",
                subject=expected,
                message=f"Expected technology {expected!r} is not in the catalog",
                severity="warning",
            ))

    return violations


def has_errors(violations: Sequence[ConsistencyViolation]) -> bool:
    return any(v.severity == "error" for v in violations)


__all__ = ["ConsistencyViolation", "verify_knowledge_base", "has_errors", "EXPECTED_TECHNOLOGIES"]
