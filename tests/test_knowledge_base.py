from __future__ import annotations

import pytest

from algoevo.core.errors import RecordValidationError
from algoevo.core.schema import CaseModules, TechnologyRecord, validate_record
from algoevo.knowledge import (
    case_technology_coverage,
    extract_all_case_technologies,
    find_cases_by_technology,
    search_technologies,
    technologies_by_module,
    technologies_by_period,
)


def test_seed_data_loads(kb):
    assert kb.all_module_names() == [
        "Сбор данных",
        "Обработка данных",
        "Feature Engineering",
        "Генерация сигналов",
        "Риск-менеджмент",
        "Исполнение сделок",
        "Адаптация к рынку",
        "Визуализация и мониторинг",
    ]
    ids = [t.id for t in kb.technologies]
    assert len(ids) == len(set(ids))
    assert {"random-forest", "lstm", "transformer", "ccxt"} <= set(ids)
    assert [c.id for c in kb.cases] == ["random-forest-scalper-2015", "rl-ppo-scalper-2020"]
    assert kb.tree.name == "ML"
    assert len(kb.tree.children) == 5


def test_get_module_by_name(kb):
    module = kb.get_module_by_name("Адаптация к рынку")
    assert module.revisions.rev1.tech == ""
    assert module.revisions.rev1.period == "empty"
    assert kb.get_module_by_name("__does_not_exist__") is None


def test_technology_json_uses_camelcase(kb):
    payload = kb.get_technology("lstm").to_json()
    assert payload["fullName"] == "Long Short-Term Memory"
    assert payload["applicableModules"] == ["signalGeneration", "marketAdaptation"]
    assert "useCases" in payload


def test_period_ordering_is_enforced():
    data = {
        "id": "bad",
        "name": "Bad",
        "description": "x",
        "category": "ml",
        "periods": {"start": 2020, "peak": 2010},
    }
    with pytest.raises(RecordValidationError):
        validate_record(TechnologyRecord, data, what="technology")


def test_case_modules_reject_extra_keys():
    with pytest.raises(RecordValidationError):
        validate_record(CaseModules, {"portfolio": ["x"]})


def test_technologies_by_period(kb):
    techs = technologies_by_period(kb.technologies, 1980, 1985, current_year=2025)
    assert [t.id for t in techs] == ["rnn"]


def test_technologies_by_module_normalizes_keys(kb):
    ids = {t.id for t in technologies_by_module(kb.technologies, "Генерация сигналов")}
    assert {"random-forest", "lstm", "transformer", "decision-trees"} <= ids
    assert ids == {t.id for t in technologies_by_module(kb.technologies, "signalGeneration")}


def test_search_technologies(kb):
    assert [t.id for t in search_technologies(kb.technologies, "short-term")] == ["lstm"]
    assert search_technologies(kb.technologies, "") == []


def test_case_queries(kb):
    names = extract_all_case_technologies(kb.cases)
    assert names == sorted(names)
    assert "stable-baselines3" in names and "RandomForestClassifier" in names

    found = find_cases_by_technology(kb.cases, "ppo")
    assert [c.id for c in found] == ["rl-ppo-scalper-2020"]
    assert len(find_cases_by_technology(kb.cases, "ccxt")) == 2

    coverage = case_technology_coverage(kb.cases)
    assert len(coverage) == 8
    assert coverage["Сбор данных"] == ["Binance API", "CCXT", "OHLCV данные", "CCXT.pro", "OHLCV"]
