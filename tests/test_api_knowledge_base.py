from __future__ import annotations

import json
import logging

import pytest
from fastapi.testclient import TestClient

from algoevo.api.server import create_app
from algoevo.enrichment import external
from algoevo.storage.case_store import InMemoryCaseStore
from algoevo.system.config_loader import build_system_config

pytestmark = pytest.mark.integration


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_revisions_table(client):
    data = client.get("/api/revisions").json()
    assert [r["key"] for r in data] == ["rev1", "rev2", "rev3", "rev4", "rev5"]
    assert data[1]["years"] == [2016, 2020]


def test_modules(client):
    resp = client.get("/api/modules")
    assert resp.status_code == 200
    modules = resp.json()
    assert len(modules) == 8
    assert set(modules[0]["revisions"]) == {"rev1", "rev2", "rev3", "rev4", "rev5"}

    one = client.get("/api/modules/Сбор данных")
    assert one.status_code == 200
    assert one.json()["revisions"]["rev2"]["tech"] == "WebSocket, FIX, CCXT"


def test_unknown_module_is_404_with_error(client):
    resp = client.get("/api/modules/__does_not_exist__")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_evolution_views(client):
    baseline = client.get("/api/evolution").json()
    assert len(baseline["modules"]) == 8

    integrated = client.get("/api/evolution/integrated").json()
    names = [m["name"] for m in integrated["modules"]]
    assert names[-1] == "Инфраструктура"
    signals = next(m for m in integrated["modules"] if m["name"] == "Генерация сигналов")
    assert "Random Forest" in signals["revisions"]["rev1"]["tech"]

    dynamic = client.get("/api/evolution/dynamic").json()
    assert any(m["name"].endswith(": LSTM") for m in dynamic["modules"])

    hidden = client.get("/api/evolution/dynamic", params={"hide_unchanged": "true"}).json()
    assert len(hidden["modules"]) < len(dynamic["modules"])


def test_deprecated_aliases_match_and_warn(client, caplog):
    with caplog.at_level(logging.WARNING, logger="algoevo.api.server"):
        legacy = client.get("/api/evolution-data/integrated")
    assert legacy.status_code == 200
    assert legacy.json() == client.get("/api/evolution/integrated").json()
    assert client.get("/api/evolution-data").json() == client.get("/api/evolution").json()
    assert client.get("/api/evolution-data/dynamic").json() == client.get("/api/evolution/dynamic").json()
    assert any("Deprecated endpoint" in r.getMessage() for r in caplog.records)


def test_deprecated_alias_silent_in_production(caplog):
    cfg = build_system_config({"environment": "production", "enrichment": {"enabled": False}})
    client = TestClient(create_app(cfg, case_store=InMemoryCaseStore()))
    with caplog.at_level(logging.WARNING, logger="algoevo.api.server"):
        assert client.get("/api/evolution-data").status_code == 200
    assert not any("Deprecated endpoint" in r.getMessage() for r in caplog.records)


def test_technologies(client):
    data = client.get("/api/technologies").json()
    lstm = next(t for t in data if t["id"] == "lstm")
    assert lstm["fullName"] == "Long Short-Term Memory"
    assert "full_name" not in lstm

    assert client.get("/api/technologies/lstm").json()["name"] == "LSTM"
    assert client.get("/api/technologies/nope").status_code == 404

    found = client.get("/api/technologies/search", params={"q": "transformer"}).json()
    assert {t["id"] for t in found} >= {"transformer", "vision-transformer"}


def test_technology_rows(client):
    rows = client.get("/api/technologies/rows", params={"module": "Обработка данных"}).json()
    names = [r["name"] for r in rows]
    assert "Pandas" in names and "Docker" not in names
    assert all(r["revisions"]["rev1"] == "" for r in rows)

    all_rows = client.get("/api/technologies/rows").json()
    assert len({r["id"] for r in all_rows}) == len(all_rows)


def test_technology_evolution_links(client):
    view = client.get("/api/technologies/lstm/evolution").json()
    assert view["predecessors"] == [{"label": "RNN", "id": "rnn", "name": "RNN"}]
    assert view["variants"][0]["id"] == "gru"

    var = client.get("/api/technologies/var-models/evolution").json()
    assert var["successors"] == [{"label": "Adaptive Risk Models"}]


def test_enrich_returns_null_when_disabled(client):
    resp = client.get("/api/technologies/enrich", params={"name": "Polars"})
    assert resp.status_code == 200
    assert resp.json() == {"result": None}


def test_enrich_swallows_upstream_failure(monkeypatch):
    def down(*args, **kwargs):
        raise external.requests.ConnectionError("offline")

    monkeypatch.setattr(external.requests, "get", down)
    cfg = build_system_config({"enrichment": {"enabled": True}})
    client = TestClient(create_app(cfg, case_store=InMemoryCaseStore()))
    resp = client.get("/api/technologies/enrich", params={"name": "Polars"})
    assert resp.status_code == 200
    assert resp.json() == {"result": None}


def test_trading_machines_and_tree(client):
    cases = client.get("/api/trading-machines").json()
    assert [c["id"] for c in cases] == ["random-forest-scalper-2015", "rl-ppo-scalper-2020"]
    assert cases[0]["marketType"] == "Криптовалюты (BTC/USDT)"

    one = client.get("/api/trading-machines/rl-ppo-scalper-2020").json()
    assert one["modules"]["signalGeneration"][0] == "PPO (Stable-Baselines3)"
    assert client.get("/api/trading-machines/missing").status_code == 404

    coverage = client.get("/api/trading-machines/coverage").json()
    assert "CCXT" in coverage["Сбор данных"]

    tree = client.get("/api/tree-data").json()
    assert tree["name"] == "ML"
    assert tree["children"][0]["name"] == "Traditional ML"


def test_import_round_trip(client):
    raw_text = "Mean reversion bot\n" + "z" * 2500
    resp = client.post("/api/import/trading-machine", json={"rawText": raw_text})
    assert resp.status_code == 201
    created = resp.json()
    assert created["description"] == raw_text[:2000]
    assert created["period"] == "unknown"

    listed = client.get("/api/trading-machines").json()
    match = [c for c in listed if c["id"] == created["id"]]
    assert len(match) == 1
    assert match[0]["description"] == raw_text[:2000]
    assert client.get(f"/api/trading-machines/{created['id']}").status_code == 200

    # an imported case without a year is listed but does not break the matrices
    assert client.get("/api/evolution/integrated").status_code == 200
    assert client.get("/api/evolution/dynamic").status_code == 200


def test_import_requires_raw_text(client):
    resp = client.post("/api/import/trading-machine", json={"name": "no text"})
    assert resp.status_code == 400
    assert "rawText" in resp.json()["error"]

    resp = client.post("/api/import/trading-machine", content=b"not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert "error" in resp.json()
    assert client.get("/api/trading-machines").json()[-1]["id"] == "rl-ppo-scalper-2020"


def test_parse_technology_text(client):
    resp = client.post(
        "/api/import/technology/parse",
        json={"text": "Плюсы:\n- Быстро\nМинусы:\n- Дорого", "name": "X"},
    )
    assert resp.status_code == 200
    assert resp.json()["advantages"] == ["Быстро"]
    assert resp.json()["disadvantages"] == ["Дорого"]
    assert client.post("/api/import/technology/parse", json={}).status_code == 400


def test_invalid_stored_case_is_skipped_not_fatal(client, app_cfg):
    created = client.post("/api/import/trading-machine", json={"rawText": "Grid bot"}).json()
    path = app_cfg["storage_cfg"].imported_cases_path
    with open(path, encoding="utf-8") as f:
        stored = json.load(f)
    stored.append({"id": "broken"})
    with open(path, "w", encoding="utf-8") as f:
        json.dump(stored, f)

    for url in ("/api/evolution/integrated", "/api/evolution/dynamic", "/api/trading-machines/coverage"):
        assert client.get(url).status_code == 200, url

    resp = client.get("/api/trading-machines")
    assert resp.status_code == 200
    ids = [c["id"] for c in resp.json()]
    assert created["id"] in ids and "broken" not in ids
    assert client.get(f"/api/trading-machines/{created['id']}").status_code == 200

    # the broken entry stays on disk and later imports still append
    assert client.post("/api/import/trading-machine", json={"rawText": "Another bot"}).status_code == 201
    with open(path, encoding="utf-8") as f:
        assert len(json.load(f)) == 3


def test_unreadable_store_file(app_cfg):
    client = TestClient(create_app(app_cfg), raise_server_exceptions=False)
    with open(app_cfg["storage_cfg"].imported_cases_path, "w", encoding="utf-8") as f:
        f.write("{not json")

    resp = client.get("/api/trading-machines")
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}

    integrated = client.get("/api/evolution/integrated")
    assert integrated.status_code == 200
    signals = next(m for m in integrated.json()["modules"] if m["name"] == "Генерация сигналов")
    assert "Random Forest" in signals["revisions"]["rev1"]["tech"]
