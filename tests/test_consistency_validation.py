from __future__ import annotations

from dataclasses import replace

from algoevo.core.errors import RecordValidationError
from algoevo.validation import has_errors, verify_knowledge_base
from tests.record_helpers import make_case, make_tech


def _rules(violations):
    return {v.rule for v in violations}


def test_seed_knowledge_base_has_no_errors(kb):
    violations = verify_knowledge_base(kb)
    assert not has_errors(violations)
    assert "missing_core_technology" not in _rules(violations)


def test_duplicate_ids_are_errors(kb):
    dup = make_tech("lstm", "LSTM Clone")
    broken = replace(kb, technologies=[*kb.technologies, dup])
    violations = verify_knowledge_base(broken)
    assert "duplicate_technology_id" in _rules(violations)
    assert has_errors(violations)


def test_imported_case_problems(kb):
    imported = [make_case(id="random-forest-scalper-2015"), make_case(id="imported-abc", period="unknown")]
    violations = verify_knowledge_base(kb, imported)
    rules = _rules(violations)
    assert "duplicate_case_id" in rules
    period = [v for v in violations if v.rule == "unparseable_case_period"]
    assert [v.subject for v in period] == ["imported-abc"]
    assert period[0].severity == "warning"


def test_unknown_modules_and_dangling_references_are_warnings(kb):
    odd = make_tech(
        "odd",
        "Odd",
        applicableModules=["Portfolio"],
        evolution={"successors": ["Quantum Annealer"]},
    )
    violations = verify_knowledge_base(replace(kb, technologies=[*kb.technologies, odd]))
    mine = [v for v in violations if v.subject == "odd"]
    assert {v.rule for v in mine} == {"unknown_applicable_module", "unresolved_reference"}
    assert all(v.severity == "warning" for v in mine)
    assert "odd" in str(mine[0])


def test_missing_core_technologies_reported(kb):
    violations = verify_knowledge_base(replace(kb, technologies=[]))
    missing = {v.subject for v in violations if v.rule == "missing_core_technology"}
    assert missing == {"Random Forest", "LSTM", "Pandas", "NumPy", "Scikit-learn"}


def test_invalid_stored_cases_are_errors(kb):
    issue = RecordValidationError("Invalid imported case #3: name: Field required")
    violations = verify_knowledge_base(kb, (), [issue])
    stored = [v for v in violations if v.rule == "invalid_stored_case"]
    assert len(stored) == 1
    assert stored[0].message == str(issue)
    assert has_errors(violations)
