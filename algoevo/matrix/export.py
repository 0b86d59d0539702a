from __future__ import annotations

from typing import Dict, List

import pandas as pd

from algoevo.core.revisions import REVISION_ORDER
from algoevo.core.schema import EvolutionData


def matrix_to_frame(evolution: EvolutionData, *, with_desc: bool = False) -> pd.DataFrame:
    """One row per module, one column per revision holding the cell text."""
    records = []
    for module in evolution.modules:
        row: Dict[str, str] = {"module": module.name}
        for key in REVISION_ORDER:
            cell = getattr(module.revisions, key)
            row[key] = cell.tech
            if with_desc:
                row[f"{key}_desc"] = cell.desc
        records.append(row)
    columns = ["module"]
    for key in REVISION_ORDER:
        columns.append(key)
        if with_desc:
            columns.append(f"{key}_desc")
    return pd.DataFrame.from_records(records, columns=columns)


def coverage_to_frame(coverage: Dict[str, List[str]]) -> pd.DataFrame:
    """Long format: (module, technology) pairs."""
    rows = [(module, tech) for module, techs in coverage.items() for tech in techs]
    return pd.DataFrame(rows, columns=["module", "technology"])


__all__ = ["matrix_to_frame", "coverage_to_frame"]
