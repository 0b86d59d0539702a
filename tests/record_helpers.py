from __future__ import annotations

from typing import Any, Dict

from algoevo.core.schema import CaseRecord, TechnologyRecord


def make_tech(id: str, name: str, category: str = "ml", start: int = 2010, **overrides: Any) -> TechnologyRecord:
    data: Dict[str, Any] = {
        "id": id,
        "name": name,
        "description": f"{name} description",
        "category": category,
        "periods": {"start": start},
        "applicableModules": [],
    }
    data.update(overrides)
    return TechnologyRecord.model_validate(data)


def make_case(id: str = "case-1", name: str = "Test Case", period: str = "2015-2017", **modules: Any) -> CaseRecord:
    return CaseRecord.model_validate(
        {
            "id": id,
            "name": name,
            "period": period,
            "description": "test case",
            "strategy": "scalping",
            "timeframe": "1m",
            "marketType": "crypto",
            "modules": modules,
        }
    )
