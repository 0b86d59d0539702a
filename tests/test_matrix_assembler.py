from __future__ import annotations

import pytest

from algoevo.core.errors import DataQualityError
from algoevo.core.modules import INFRASTRUCTURE
from algoevo.core.schema import EvolutionData
from algoevo.matrix.assembler import (
    INDENT_MARKER,
    baseline_matrix,
    build_matrix,
    dynamic_matrix,
    hide_unchanged,
    integrated_matrix,
    technology_name_from_row,
)
from tests.record_helpers import make_case, make_tech


def _module(evolution: EvolutionData, name: str):
    for module in evolution.modules:
        if module.name == name:
            return module
    raise AssertionError(f"module {name!r} not found")


def test_baseline_is_a_copy(kb):
    first = baseline_matrix(kb.baseline)
    first.modules[0].revisions.rev1.tech = "mutated"
    assert kb.baseline[0].revisions.rev1.tech == "Reuters API, Bloomberg"
    assert len(baseline_matrix(kb.baseline).modules) == 8


def test_integrated_is_idempotent(kb):
    first = integrated_matrix(kb.baseline, kb.technologies, kb.cases)
    second = integrated_matrix(kb.baseline, kb.technologies, kb.cases)
    assert first.model_dump_json() == second.model_dump_json()


def test_integrated_does_not_grow_cells_with_known_substrings(kb):
    once = integrated_matrix(kb.baseline, kb.technologies, [])
    again = integrated_matrix(once.modules, kb.technologies, [])
    for a, b in zip(once.modules, again.modules):
        for key in ("rev1", "rev2", "rev3", "rev4", "rev5"):
            assert getattr(a.revisions, key).tech == getattr(b.revisions, key).tech


def test_scenario_random_forest_lands_in_signal_generation_rev1(kb):
    rf = make_tech("random-forest", "Random Forest", periods={"start": 2001, "peak": 2015})
    evolution = integrated_matrix(kb.baseline, [rf], [])
    cell = _module(evolution, "Генерация сигналов").revisions.rev1
    assert "Random Forest" in cell.tech
    assert cell.tech.startswith("Rule-based")


def test_scenario_case_twap_lands_in_execution_rev2_with_provenance(kb):
    case = make_case(name="TWAP Desk", period="2020-2022", execution=["TWAP"])
    evolution = integrated_matrix(kb.baseline, [], [case])
    cell = _module(evolution, "Исполнение сделок").revisions.rev2
    assert cell.tech == "Smart Routing, TWAP"
    assert cell.desc.endswith('(из кейса "TWAP Desk")')
    assert cell.desc.count("из кейса") == 1


def test_case_note_skipped_for_empty_module_lists(kb):
    case = make_case(name="Only Exec", period="2016", execution=["TWAP"])
    evolution = integrated_matrix(kb.baseline, [], [case])
    assert "из кейса" not in _module(evolution, "Сбор данных").revisions.rev2.desc


def test_infrastructure_row_added_when_needed(kb):
    docker = make_tech("docker", "Docker", category="infrastructure", periods={"start": 2013, "peak": 2019})
    evolution = integrated_matrix(kb.baseline, [docker], [])
    assert evolution.modules[-1].name == INFRASTRUCTURE
    row = evolution.modules[-1].revisions
    assert row.rev2.tech == "Docker" and row.rev2.period == "early"
    assert row.rev1.tech == "" and row.rev1.period == "empty"


def test_unparseable_case_period_is_skipped_not_fatal(kb):
    bad = make_case(id="imported-1", name="Bad", period="unknown", execution=["Iceberg Orders"])
    good = make_case(id="good", name="Good", period="2023", execution=["Iceberg Orders"])
    issues = []
    evolution = integrated_matrix(kb.baseline, [], [bad, good], issues=issues)
    assert len(issues) == 1 and isinstance(issues[0], DataQualityError)
    assert issues[0].record_id == "imported-1"
    execution = _module(evolution, "Исполнение сделок").revisions
    assert "Iceberg Orders" in execution.rev4.tech
    assert 'Bad' not in execution.rev4.desc


def test_dynamic_matrix_completeness(kb):
    evolution = dynamic_matrix(kb.technologies, kb.cases)
    names = [technology_name_from_row(m.name) for m in evolution.modules]
    assert len(names) == len(set(names))

    expected = {t.name for t in kb.technologies}
    for case in kb.cases:
        for _, labels in case.modules.items_by_key():
            expected.update(label.strip() for label in labels if label.strip())
    assert set(names) == expected
    for tech in kb.technologies:
        assert tech.name in names


def test_dynamic_row_cells(kb):
    lstm = make_tech(
        "lstm",
        "LSTM",
        periods={"start": 1997, "peak": 2018},
        evolution={"predecessors": ["rnn"], "successors": ["transformer"]},
    )
    transformer = make_tech("transformer", "Transformer", periods={"start": 2017, "peak": 2023})
    evolution = dynamic_matrix([lstm, transformer], [])
    rows = {technology_name_from_row(m.name): m for m in evolution.modules}

    lstm_row = rows["LSTM"]
    assert lstm_row.name.startswith(INDENT_MARKER)
    assert lstm_row.revisions.rev1.tech == ""
    assert lstm_row.revisions.rev2.tech == "LSTM"
    assert lstm_row.revisions.rev3.tech == "LSTM → Transformer"
    assert lstm_row.revisions.rev3.desc == "Эволюция: Transformer"
    assert lstm_row.revisions.rev4.tech == ""

    transformer_row = rows["Transformer"]
    assert transformer_row.revisions.rev4.tech == "Transformer"
    assert transformer_row.revisions.rev5.tech == "Transformer"
    assert transformer_row.revisions.rev5.desc == "Продолжение использования"

    # parents sort before children within a module
    assert evolution.modules[0].name == "Генерация сигналов: Transformer"


def test_dynamic_first_writer_wins(kb):
    tech = make_tech("ccxt", "CCXT", category="data", periods={"start": 2017, "peak": 2021})
    case = make_case(period="2015", dataCollection=["CCXT"])
    evolution = dynamic_matrix([tech], [case])
    assert len(evolution.modules) == 1
    assert evolution.modules[0].revisions.rev3.tech == "CCXT"
    assert evolution.modules[0].revisions.rev3.desc == "CCXT description"


def test_hide_unchanged_drops_static_rows(kb):
    old = make_case(id="old", period="2015", execution=["Old Tech"])
    late = make_case(id="late", period="2024", execution=["Late Tech"])
    evolution = dynamic_matrix([], [old, late])
    assert len(evolution.modules) == 2
    kept = [technology_name_from_row(m.name) for m in hide_unchanged(evolution).modules]
    assert kept == ["Late Tech"]

    baseline = baseline_matrix(kb.baseline)
    assert len(hide_unchanged(baseline).modules) == len(baseline.modules)


def test_build_matrix_unknown_view(kb):
    with pytest.raises(ValueError):
        build_matrix("sideways", kb.baseline, kb.technologies, kb.cases)
