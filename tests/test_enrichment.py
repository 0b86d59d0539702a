from __future__ import annotations

import requests

from algoevo.enrichment import external
from algoevo.enrichment.external import enrich_technologies, fetch_technology_data
from algoevo.enrichment.text_parser import parse_technology_description
from algoevo.system.config_loader import EnrichmentConfig
from tests.record_helpers import make_tech


class FakeResponse:
    def __init__(self, status_code: int, payload=None):
        self.status_code = status_code
        self._payload = payload

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def _router(responses):
    calls = []

    def fake_get(url, params=None, timeout=None, headers=None):
        calls.append(url)
        for prefix, response in responses.items():
            if url.startswith(prefix):
                if isinstance(response, Exception):
                    raise response
                return response
        raise AssertionError(f"unexpected url {url}")

    return fake_get, calls


CFG = EnrichmentConfig(
    enabled=True,
    timeout_seconds=1,
    wiki_base_url="https://wiki.test/summary/",
    github_search_url="https://github.test/search",
)


def test_parse_sections_and_description():
    text = """
    Polars - быстрая библиотека датафреймов на Rust
    Преимущества:
    - Многопоточность
    • Ленивые вычисления
    Недостатки:
    * Молодая экосистема
    Применение:
    - Обработка тиковых данных
    Период: 2020 - 2024
    """
    result = parse_technology_description(text, name="Polars")
    assert result["name"] == "Polars"
    assert result["description"].startswith("Polars - быстрая")
    assert result["advantages"] == ["Многопоточность", "Ленивые вычисления"]
    assert result["disadvantages"] == ["Молодая экосистема"]
    assert result["useCases"] == ["Обработка тиковых данных"]
    assert result["periods"] == {"start": 2020, "end": 2024}


def test_parse_tolerates_garbage():
    result = parse_technology_description("- orphan bullet\n::::\nshort")
    assert result["advantages"] == [] and "description" not in result
    assert parse_technology_description("")["useCases"] == []


def test_fetch_prefers_wikipedia(monkeypatch):
    fake_get, calls = _router(
        {
            "https://wiki.test/": FakeResponse(
                200, {"extract": "Polars is a DataFrame library", "content_urls": {"desktop": {"page": "https://w/p"}}}
            ),
        }
    )
    monkeypatch.setattr(external.requests, "get", fake_get)
    result = fetch_technology_data("Polars", CFG)
    assert result == {
        "name": "Polars",
        "description": "Polars is a DataFrame library",
        "sources": ["Wikipedia: https://w/p"],
    }
    assert len(calls) == 1


def test_fetch_falls_back_to_github(monkeypatch):
    fake_get, _ = _router(
        {
            "https://wiki.test/": FakeResponse(404),
            "https://github.test/": FakeResponse(
                200,
                {"items": [{"description": "Fast dataframes", "created_at": "2020-05-13T10:00:00Z", "html_url": "https://gh/p"}]},
            ),
        }
    )
    monkeypatch.setattr(external.requests, "get", fake_get)
    result = fetch_technology_data("Polars", CFG)
    assert result["description"] == "Fast dataframes"
    assert result["periods"] == {"start": 2020}
    assert result["sources"] == ["GitHub: https://gh/p"]


def test_fetch_swallows_network_errors(monkeypatch):
    fake_get, _ = _router(
        {
            "https://wiki.test/": requests.ConnectionError("down"),
            "https://github.test/": FakeResponse(200, None),
        }
    )
    monkeypatch.setattr(external.requests, "get", fake_get)
    assert fetch_technology_data("Polars", CFG) is None


def test_fetch_disabled_does_no_io(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("network used")

    monkeypatch.setattr(external.requests, "get", fail)
    assert fetch_technology_data("Polars", EnrichmentConfig(enabled=False)) is None


def test_enrich_technologies(monkeypatch):
    fake_get, _ = _router(
        {
            "https://wiki.test/summary/DuckDB": FakeResponse(200, {"extract": "In-process OLAP database"}),
            "https://wiki.test/": FakeResponse(404),
            "https://github.test/": FakeResponse(200, {"items": []}),
        }
    )
    monkeypatch.setattr(external.requests, "get", fake_get)
    known = [make_tech("lstm", "LSTM")]
    result = enrich_technologies(["lstm", "DuckDB", "Nothing Known"], known, CFG)
    assert [t.id for t in result] == ["lstm", "duckdb"]
    duckdb = result[1]
    assert duckdb.category == "infrastructure"
    assert duckdb.description == "In-process OLAP database"
    assert duckdb.sources == ["Wikipedia: "]
