"""
Flattened technology x revision rows.
"""
from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional, Sequence, Set

from algoevo.core.modules import module_for_category, normalize_module_names
from algoevo.core.revisions import REVISION_ORDER, REVISIONS, revision_for_technology, revision_index
from algoevo.core.schema import RowRevisions, TechnologyRecord, TechnologyRow
from algoevo.matrix.assembler import EVOLUTION_ARROW
from algoevo.matrix.links import reference_label, resolve_reference


def _base_row(tech: TechnologyRecord, module: str) -> TechnologyRow:
    return TechnologyRow(
        id=tech.id,
        name=tech.name,
        category=tech.category,
        module=module,
        applicable_modules=list(tech.applicable_modules) or [module],
        revisions=RowRevisions(),
        predecessors=tech.predecessors,
        successors=tech.successors,
    )


def _matches_module(tech: TechnologyRecord, module_filter: str) -> bool:
    if module_for_category(tech.category) == module_filter:
        return True
    if module_filter in tech.applicable_modules:
        return True
    return module_filter in normalize_module_names(tech.applicable_modules)


def filter_rows(technologies: Sequence[TechnologyRecord], module_filter: str) -> List[TechnologyRow]:
    """Revision-blind rows for every technology relevant to `module_filter`."""
    return [
        _base_row(tech, module_for_category(tech.category))
        for tech in technologies
        if _matches_module(tech, module_filter)
    ]


def fill_revisions(
    tech: TechnologyRecord,
    current_year: int,
    technologies: Optional[Sequence[TechnologyRecord]] = None,
) -> RowRevisions:
    """
    Name in the peak revision, continuation (or "name → successors") in every
    other revision the technology's lifetime intersects that opens after its
    start year. Successors are shown by display name when `technologies` is given.
    """
    start_rev = revision_for_technology(tech)
    start_idx = revision_index(start_rev)
    end_year = tech.periods.end if tech.periods.end is not None else max(current_year, tech.periods.start)
    successors = tech.successors
    if technologies is not None:
        successors = [reference_label(ref, technologies) for ref in successors]
    continuation = f"{tech.name}{EVOLUTION_ARROW}{', '.join(successors)}" if successors else tech.name

    values: Dict[str, str] = {}
    for idx, key in enumerate(REVISION_ORDER):
        if not REVISIONS[key].intersects(tech.periods.start, end_year):
            continue
        if idx == start_idx:
            values[key] = tech.name
        elif REVISIONS[key].years[0] > tech.periods.start:
            values[key] = continuation
    return RowRevisions(**values)


def build_rows(
    technologies: Sequence[TechnologyRecord],
    module_filter: Optional[str] = None,
    *,
    current_year: Optional[int] = None,
) -> List[TechnologyRow]:
    """
    Build technology rows.

    Without a filter, technologies are grouped by canonical module (modules in
    order of first appearance), ordered by start year, and each row is followed
    by rows for its not-yet-emitted successors. With a filter, see filter_rows.
    """
    if not technologies:
        return []
    if module_filter:
        return filter_rows(technologies, module_filter)

    year = current_year if current_year is not None else date.today().year
    groups: Dict[str, List[TechnologyRecord]] = {}
    for tech in technologies:
        groups.setdefault(module_for_category(tech.category), []).append(tech)

    rows: List[TechnologyRow] = []
    emitted: Set[str] = set()

    for module, techs in groups.items():
        for tech in sorted(techs, key=lambda t: t.periods.start):
            if tech.id in emitted:
                continue
            row = _base_row(tech, module)
            row.revisions = fill_revisions(tech, year, technologies)
            rows.append(row)
            emitted.add(tech.id)

            for ref in tech.successors:
                successor = resolve_reference(ref, technologies)
                if successor is None or successor.id in emitted:
                    continue
                successor_row = _base_row(successor, module)
                successor_row.predecessors = successor.predecessors or [tech.id]
                setattr(successor_row.revisions, revision_for_technology(successor), successor.name)
                rows.append(successor_row)
                emitted.add(successor.id)

    return rows


__all__ = ["build_rows", "filter_rows", "fill_revisions"]
