from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

import requests

from algoevo.core.errors import UpstreamUnavailable
from algoevo.core.schema import TechnologyRecord
from algoevo.system.config_loader import EnrichmentConfig

logger = logging.getLogger(__name__)


def _get_json(url: str, *, params: Optional[Dict[str, Any]] = None, timeout: float = 10.0) -> Any:
    try:
        response = requests.get(url, params=params, timeout=timeout, headers={"Accept": "application/json"})
    except requests.RequestException as exc:
        raise UpstreamUnavailable(f"GET {url} failed: {exc}") from exc
    if not response.ok:
        raise UpstreamUnavailable(f"GET {url} returned {response.status_code}")
    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamUnavailable(f"GET {url} returned invalid JSON") from exc


def _from_wikipedia(name: str, cfg: EnrichmentConfig) -> Optional[Dict[str, Any]]:
    data = _get_json(f"{cfg.wiki_base_url}{quote(name, safe='')}", timeout=cfg.timeout_seconds)
    if not isinstance(data, dict):
        return None
    page = ((data.get("content_urls") or {}).get("desktop") or {}).get("page") or ""
    return {
        "name": name,
        "description": data.get("extract") or f"{name} - технология из внешнего источника",
        "sources": [f"Wikipedia: {page}"],
    }


def _from_github(name: str, cfg: EnrichmentConfig) -> Optional[Dict[str, Any]]:
    params = {"q": name, "sort": "stars", "order": "desc", "per_page": 1}
    data = _get_json(cfg.github_search_url, params=params, timeout=cfg.timeout_seconds)
    items = data.get("items") if isinstance(data, dict) else None
    if not items:
        return None
    repo = items[0]
    result: Dict[str, Any] = {
        "name": name,
        "description": repo.get("description") or f"{name} - популярная технология",
        "sources": [f"GitHub: {repo.get('html_url', '')}"],
    }
    created = str(repo.get("created_at") or "")
    if len(created) >= 4 and created[:4].isdigit():
        result["periods"] = {"start": int(created[:4])}
    return result


def fetch_technology_data(name: str, cfg: Optional[EnrichmentConfig] = None) -> Optional[Dict[str, Any]]:
    """
    Best-effort lookup of a technology in external sources.

    Wikipedia's summary endpoint is tried first, then the GitHub repository
    search (top-starred match). Returns a partial technology record, or None
    when enrichment is disabled or every source fails.
    """
    cfg = cfg or EnrichmentConfig()
    if not cfg.enabled or not name or not name.strip():
        return None
    name = name.strip()

    for source, fetch in (("wikipedia", _from_wikipedia), ("github", _from_github)):
        try:
            result = fetch(name, cfg)
        except UpstreamUnavailable as exc:
            logger.warning("Enrichment source %s unavailable for %r: %s", source, name, exc)
            continue
        except (KeyError, TypeError, AttributeError) as exc:
            logger.warning("Unexpected %s payload for %r: %s", source, name, exc)
            continue
        if result is not None:
            return result
    return None


def _slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip().lower())


def enrich_technologies(
    names: Iterable[str],
    known: Iterable[TechnologyRecord],
    cfg: Optional[EnrichmentConfig] = None,
) -> List[TechnologyRecord]:
    """
    Resolve names against the catalog, fetching unknown ones externally.

    Known names (case-insensitive) come back as the existing record. Unknown
    names become `infrastructure` records; names no source knows are dropped.
    """
    by_name = {tech.name.casefold(): tech for tech in known}
    result: List[TechnologyRecord] = []
    for name in names:
        existing = by_name.get(name.casefold())
        if existing is not None:
            result.append(existing)
            continue
        data = fetch_technology_data(name, cfg)
        if data is None:
            continue
        record = TechnologyRecord(
            id=_slugify(name),
            name=name,
            description=data.get("description") or f"{name} - технология",
            category="infrastructure",
            periods=data.get("periods") or {"start": date.today().year},
            applicable_modules=[],
            advantages=["Загружено из внешнего источника"],
            disadvantages=["Требует дополнительного исследования"],
            use_cases=["Определяется в процессе использования"],
            sources=data.get("sources") or [],
        )
        result.append(record)
    return result


__all__ = ["fetch_technology_data", "enrich_technologies"]
