from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from algoevo.core.errors import (
    DataQualityError,
    NotFoundError,
    RecordValidationError,
    StoreCorruptedError,
)
from algoevo.core.revisions import REVISION_ORDER, REVISIONS
from algoevo.core.schema import (
    CaseRecord,
    EvolutionData,
    ImportCaseRequest,
    ModuleData,
    ParseTechnologyRequest,
    RevisionInfo,
    TechnologyEvolutionView,
    TechnologyRecord,
    TechnologyRow,
    TreeNode,
)
from algoevo.enrichment.external import fetch_technology_data
from algoevo.enrichment.text_parser import parse_technology_description
from algoevo.knowledge import (
    KnowledgeBase,
    case_technology_coverage,
    load_knowledge_base,
    search_technologies,
)
from algoevo.matrix import build_matrix, build_rows, evolution_view
from algoevo.matrix.assembler import hide_unchanged as drop_unchanged_modules
from algoevo.storage.case_store import BaseCaseStore, build_case_from_text, init_case_store
from algoevo.system.config_loader import is_production, load_system_config

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    status: str


class EnrichResponse(BaseModel):
    result: Optional[Dict[str, Any]] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        message = f"{loc}: {first.get('msg')}" if loc else str(first.get("msg", "Invalid request"))
        return _error(400, message)

    @app.exception_handler(RecordValidationError)
    async def record_validation_error(request: Request, exc: RecordValidationError):
        return _error(400, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")


def create_app(
    cfg: Optional[Dict[str, Any]] = None,
    *,
    case_store: Optional[BaseCaseStore] = None,
    knowledge_base: Optional[KnowledgeBase] = None,
) -> FastAPI:
    cfg = cfg if cfg is not None else load_system_config()
    api_cfg = cfg["api_cfg"]
    storage_cfg = cfg["storage_cfg"]
    enrichment_cfg = cfg["enrichment_cfg"]

    app = FastAPI(
        title=api_cfg.title,
        version=api_cfg.version,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    kb = knowledge_base if knowledge_base is not None else load_knowledge_base()
    store = case_store if case_store is not None else init_case_store(storage_cfg.imported_cases_path)

    try:
        imported_count: Any = len(store.load_valid())
    except StoreCorruptedError as exc:
        logger.error("Imported case store is unreadable: %s", exc)
        imported_count = "unreadable"
    logger.info(
        "knowledge base loaded: modules=%d technologies=%d cases=%d imported=%s",
        len(kb.baseline),
        len(kb.technologies),
        len(kb.cases),
        imported_count,
    )

    app.state.cfg = cfg
    app.state.kb = kb
    app.state.case_store = store

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s %s %d in %dms", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    def _all_cases() -> List[CaseRecord]:
        return [*kb.cases, *store.load_valid()]

    def _matrix_cases() -> List[CaseRecord]:
        try:
            return _all_cases()
        except StoreCorruptedError as exc:
            logger.error("Building matrix without imported cases: %s", exc)
            return list(kb.cases)

    def _evolution(view: str, hide: bool) -> EvolutionData:
        issues: List[DataQualityError] = []
        cases = _matrix_cases() if view != "baseline" else []
        evolution = build_matrix(view, kb.baseline, kb.technologies, cases, issues=issues)
        if issues:
            logger.info("%s matrix skipped %d case(s) with unparseable periods", view, len(issues))
        return drop_unchanged_modules(evolution) if hide else evolution

    def _deprecated(path: str, replacement: str) -> None:
        if not is_production(cfg):
            logger.warning("Deprecated endpoint %s called, use %s instead", path, replacement)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return {"status": "ok"}

    @app.get("/api/revisions", response_model=List[RevisionInfo])
    def list_revisions() -> List[RevisionInfo]:
        return [
            RevisionInfo(
                key=meta.key,
                label=meta.label,
                period=meta.period,
                years=list(meta.years),
            )
            for meta in (REVISIONS[key] for key in REVISION_ORDER)
        ]

    # ------------------------------------------------------------------
    # Modules and evolution matrices
    # ------------------------------------------------------------------

    @app.get("/api/modules", response_model=List[ModuleData])
    def list_modules() -> List[ModuleData]:
        return kb.baseline

    @app.get("/api/modules/{module_id}", response_model=ModuleData)
    def get_module(module_id: str) -> ModuleData:
        module = kb.get_module_by_name(module_id)
        if module is None:
            raise NotFoundError(f"Module not found: {module_id}")
        return module

    @app.get("/api/evolution", response_model=EvolutionData)
    def evolution(hide_unchanged: bool = Query(False)) -> EvolutionData:
        return _evolution("baseline", hide_unchanged)

    @app.get("/api/evolution/integrated", response_model=EvolutionData)
    def evolution_integrated(hide_unchanged: bool = Query(False)) -> EvolutionData:
        return _evolution("integrated", hide_unchanged)

    @app.get("/api/evolution/dynamic", response_model=EvolutionData)
    def evolution_dynamic(hide_unchanged: bool = Query(False)) -> EvolutionData:
        return _evolution("dynamic", hide_unchanged)

    @app.get("/api/evolution-data", response_model=EvolutionData, deprecated=True)
    def evolution_data_legacy(hide_unchanged: bool = Query(False)) -> EvolutionData:
        _deprecated("/api/evolution-data", "/api/evolution")
        return _evolution("baseline", hide_unchanged)

    @app.get("/api/evolution-data/integrated", response_model=EvolutionData, deprecated=True)
    def evolution_data_integrated_legacy(hide_unchanged: bool = Query(False)) -> EvolutionData:
        _deprecated("/api/evolution-data/integrated", "/api/evolution/integrated")
        return _evolution("integrated", hide_unchanged)

    @app.get("/api/evolution-data/dynamic", response_model=EvolutionData, deprecated=True)
    def evolution_data_dynamic_legacy(hide_unchanged: bool = Query(False)) -> EvolutionData:
        _deprecated("/api/evolution-data/dynamic", "/api/evolution/dynamic")
        return _evolution("dynamic", hide_unchanged)

    # ------------------------------------------------------------------
    # Technologies
    # ------------------------------------------------------------------

    @app.get("/api/technologies", response_model=List[TechnologyRecord], response_model_exclude_none=True)
    def list_technologies() -> List[TechnologyRecord]:
        return kb.technologies

    @app.get("/api/technologies/search", response_model=List[TechnologyRecord], response_model_exclude_none=True)
    def technologies_search(q: str = Query("", description="Text to look for in name, full name or description")):
        return search_technologies(kb.technologies, q)

    @app.get("/api/technologies/rows", response_model=List[TechnologyRow])
    def technology_rows(module: Optional[str] = Query(None)) -> List[TechnologyRow]:
        return build_rows(kb.technologies, module)

    @app.get("/api/technologies/enrich", response_model=EnrichResponse)
    def technology_enrich(name: str = Query(..., min_length=1)) -> EnrichResponse:
        return EnrichResponse(result=fetch_technology_data(name, enrichment_cfg))

    @app.get("/api/technologies/{tech_id}", response_model=TechnologyRecord, response_model_exclude_none=True)
    def get_technology(tech_id: str) -> TechnologyRecord:
        tech = kb.get_technology(tech_id)
        if tech is None:
            raise NotFoundError(f"Technology not found: {tech_id}")
        return tech

    @app.get(
        "/api/technologies/{tech_id}/evolution",
        response_model=TechnologyEvolutionView,
        response_model_exclude_none=True,
    )
    def get_technology_evolution(tech_id: str) -> TechnologyEvolutionView:
        tech = kb.get_technology(tech_id)
        if tech is None:
            raise NotFoundError(f"Technology not found: {tech_id}")
        return evolution_view(tech, kb.technologies)

    # ------------------------------------------------------------------
    # Trading-machine cases
    # ------------------------------------------------------------------

    @app.get("/api/trading-machines", response_model=List[CaseRecord], response_model_exclude_none=True)
    def list_trading_machines() -> List[CaseRecord]:
        return _all_cases()

    @app.get("/api/trading-machines/coverage", response_model=Dict[str, List[str]])
    def trading_machine_coverage() -> Dict[str, List[str]]:
        return case_technology_coverage(_all_cases())

    @app.get("/api/trading-machines/{case_id}", response_model=CaseRecord, response_model_exclude_none=True)
    def get_trading_machine(case_id: str) -> CaseRecord:
        case = kb.get_case(case_id, extra=store.load_valid())
        if case is None:
            raise NotFoundError(f"Trading machine not found: {case_id}")
        return case

    @app.get("/api/tree-data", response_model=TreeNode, response_model_exclude_none=True)
    def tree_data() -> TreeNode:
        if kb.tree is None:
            raise NotFoundError("Tree data is not available")
        return kb.tree

    # ------------------------------------------------------------------
    # Imports
    # ------------------------------------------------------------------

    @app.post(
        "/api/import/trading-machine",
        response_model=CaseRecord,
        response_model_exclude_none=True,
        status_code=201,
    )
    def import_trading_machine(payload: ImportCaseRequest) -> CaseRecord:
        if not payload.raw_text or not payload.raw_text.strip():
            raise RecordValidationError("rawText is required")
        case = build_case_from_text(payload.raw_text, payload.name)
        return store.append(case)

    @app.post("/api/import/technology/parse")
    def import_technology_parse(payload: ParseTechnologyRequest) -> Dict[str, Any]:
        if not payload.text or not payload.text.strip():
            raise RecordValidationError("text is required")
        return parse_technology_description(payload.text, payload.name)

    return app


__all__ = ["create_app"]
