"""
Record schemas for technologies, trading-machine cases and matrix views.

Attributes are snake_case; JSON payloads use the camelCase aliases the UI
consumes. Models accept either form on input.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from algoevo.core.errors import RecordValidationError


TechnologyCategory = Literal[
    "data",
    "processing",
    "ml",
    "visualization",
    "infrastructure",
    "risk",
    "execution",
    "adaptation",
]
CellPeriod = Literal["empty", "early", "modern", "current"]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


# ============================================================================
# Technologies
# ============================================================================


class TechnologyPeriods(_Record):
    start: int
    peak: Optional[int] = None
    decline: Optional[int] = None
    end: Optional[int] = None

    @model_validator(mode="after")
    def _check_order(self) -> "TechnologyPeriods":
        present = [
            (name, value)
            for name, value in (
                ("start", self.start),
                ("peak", self.peak),
                ("decline", self.decline),
                ("end", self.end),
            )
            if value is not None
        ]
        for (prev_name, prev), (name, value) in zip(present, present[1:]):
            if value < prev:
                raise ValueError(f"periods.{name} ({value}) is before periods.{prev_name} ({prev})")
        return self


class TechnologyEvolution(_Record):
    predecessors: List[str] = Field(default_factory=list)
    successors: List[str] = Field(default_factory=list)
    variants: List[str] = Field(default_factory=list)


class TechnologyRecord(_Record):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    full_name: Optional[str] = Field(None, alias="fullName")
    description: str
    category: TechnologyCategory
    periods: TechnologyPeriods
    evolution: Optional[TechnologyEvolution] = None
    applicable_modules: List[str] = Field(default_factory=list, alias="applicableModules")
    advantages: List[str] = Field(default_factory=list)
    disadvantages: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list, alias="useCases")
    sources: Optional[List[str]] = None

    @property
    def predecessors(self) -> List[str]:
        return list(self.evolution.predecessors) if self.evolution else []

    @property
    def successors(self) -> List[str]:
        return list(self.evolution.successors) if self.evolution else []


# ============================================================================
# Trading-machine cases
# ============================================================================


class TechnologyStackItem(_Record):
    name: str
    version: Optional[str] = None
    purpose: str
    category: TechnologyCategory


class CaseModules(_Record):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    data_collection: List[str] = Field(default_factory=list, alias="dataCollection")
    data_processing: List[str] = Field(default_factory=list, alias="dataProcessing")
    feature_engineering: List[str] = Field(default_factory=list, alias="featureEngineering")
    signal_generation: List[str] = Field(default_factory=list, alias="signalGeneration")
    risk_management: List[str] = Field(default_factory=list, alias="riskManagement")
    execution: List[str] = Field(default_factory=list)
    market_adaptation: List[str] = Field(default_factory=list, alias="marketAdaptation")
    visualization: List[str] = Field(default_factory=list)

    def items_by_key(self) -> List[tuple[str, List[str]]]:
        """(camelCase key, labels) pairs in matrix order."""
        dumped = self.model_dump(by_alias=True)
        return [(key, list(values)) for key, values in dumped.items()]


class CasePerformance(_Record):
    accuracy: Optional[float] = None
    precision: Optional[float] = None
    recall: Optional[float] = None
    f1_score: Optional[float] = Field(None, alias="f1Score")
    sharpe_ratio: Optional[float] = Field(None, alias="sharpeRatio")
    max_drawdown: Optional[float] = Field(None, alias="maxDrawdown")


class CaseRecord(_Record):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    period: str
    author: Optional[str] = None
    description: str
    strategy: str
    timeframe: str
    market_type: str = Field(..., alias="marketType")
    technologies: List[TechnologyStackItem] = Field(default_factory=list)
    modules: CaseModules
    performance: Optional[CasePerformance] = None
    code_example: Optional[str] = Field(None, alias="codeExample")
    advantages: List[str] = Field(default_factory=list)
    disadvantages: List[str] = Field(default_factory=list)


# ============================================================================
# Evolution matrix
# ============================================================================


class RevisionData(_Record):
    tech: str = ""
    period: CellPeriod = "empty"
    desc: str = ""


class ModuleRevisions(_Record):
    rev1: RevisionData
    rev2: RevisionData
    rev3: RevisionData
    rev4: RevisionData
    rev5: RevisionData


class ModuleData(_Record):
    name: str
    revisions: ModuleRevisions


class EvolutionData(_Record):
    modules: List[ModuleData]


class TreeNode(_Record):
    name: str
    children: Optional[List["TreeNode"]] = None
    value: Optional[float] = None
    type: Optional[str] = None
    description: Optional[str] = None


TreeNode.model_rebuild()


class RevisionInfo(_Record):
    key: str
    label: str
    period: str
    years: List[int]


# ============================================================================
# Technology rows and evolution links
# ============================================================================


class RowRevisions(_Record):
    rev1: str = ""
    rev2: str = ""
    rev3: str = ""
    rev4: str = ""
    rev5: str = ""


class TechnologyRow(_Record):
    id: str
    name: str
    category: str
    module: str
    applicable_modules: List[str] = Field(default_factory=list, alias="applicableModules")
    revisions: RowRevisions = Field(default_factory=RowRevisions)
    predecessors: List[str] = Field(default_factory=list)
    successors: List[str] = Field(default_factory=list)


class EvolutionLink(_Record):
    """A predecessor/successor reference; id is None when it resolves to no record."""
    label: str
    id: Optional[str] = None
    name: Optional[str] = None

    @property
    def linked(self) -> bool:
        return self.id is not None


class TechnologyEvolutionView(_Record):
    id: str
    name: str
    predecessors: List[EvolutionLink] = Field(default_factory=list)
    successors: List[EvolutionLink] = Field(default_factory=list)
    variants: List[EvolutionLink] = Field(default_factory=list)


# ============================================================================
# Request bodies
# ============================================================================


class ImportCaseRequest(_Record):
    raw_text: Optional[str] = Field(None, alias="rawText")
    name: Optional[str] = None


class ParseTechnologyRequest(_Record):
    text: Optional[str] = None
    name: Optional[str] = None


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


def validate_record(model: type[_Record], data: Any, *, what: str = "record") -> Any:
    """Validate `data` against `model`, raising RecordValidationError with a readable message."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise RecordValidationError(f"Invalid {what}: {_format_validation_error(exc)}") from exc


def validate_records(model: type[_Record], items: Iterable[Any], *, what: str = "record") -> List[Any]:
    return [validate_record(model, item, what=what) for item in items]


__all__ = [
    "TechnologyCategory",
    "CellPeriod",
    "TechnologyPeriods",
    "TechnologyEvolution",
    "TechnologyRecord",
    "TechnologyStackItem",
    "CaseModules",
    "CasePerformance",
    "CaseRecord",
    "RevisionData",
    "ModuleRevisions",
    "ModuleData",
    "EvolutionData",
    "TreeNode",
    "RevisionInfo",
    "RowRevisions",
    "TechnologyRow",
    "EvolutionLink",
    "TechnologyEvolutionView",
    "ImportCaseRequest",
    "ParseTechnologyRequest",
    "validate_record",
    "validate_records",
]
