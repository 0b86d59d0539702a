"""
Resolution of evolution references (predecessors, successors, variants).

Source records refer to each other sometimes by id and sometimes by display
name, so a reference is resolved in three tiers, first match wins:

1. exact id
2. exact (case-sensitive) name
3. case-insensitive substring in either direction
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from algoevo.core.schema import EvolutionLink, TechnologyEvolutionView, TechnologyRecord


def resolve_by_id(ref: str, technologies: Sequence[TechnologyRecord]) -> Optional[TechnologyRecord]:
    for tech in technologies:
        if tech.id == ref:
            return tech
    return None


def resolve_by_name(ref: str, technologies: Sequence[TechnologyRecord]) -> Optional[TechnologyRecord]:
    for tech in technologies:
        if tech.name == ref:
            return tech
    return None


def resolve_by_substring(ref: str, technologies: Sequence[TechnologyRecord]) -> Optional[TechnologyRecord]:
    needle = ref.casefold()
    for tech in technologies:
        name = tech.name.casefold()
        if needle in name or name in needle:
            return tech
    return None


def resolve_reference(ref: str, technologies: Sequence[TechnologyRecord]) -> Optional[TechnologyRecord]:
    """Resolve one reference string to a technology record, or None if nothing matches."""
    if not ref or not ref.strip():
        return None
    return (
        resolve_by_id(ref, technologies)
        or resolve_by_name(ref, technologies)
        or resolve_by_substring(ref, technologies)
    )


def reference_label(ref: str, technologies: Sequence[TechnologyRecord]) -> str:
    """Display name for a reference; unresolved references keep their raw text."""
    tech = resolve_reference(ref, technologies)
    return tech.name if tech is not None else ref


def build_links(refs: Sequence[str], technologies: Sequence[TechnologyRecord]) -> List[EvolutionLink]:
    links: List[EvolutionLink] = []
    for ref in refs:
        tech = resolve_reference(ref, technologies)
        if tech is None:
            links.append(EvolutionLink(label=ref))
        else:
            links.append(EvolutionLink(label=tech.name, id=tech.id, name=tech.name))
    return links


def evolution_view(tech: TechnologyRecord, technologies: Sequence[TechnologyRecord]) -> TechnologyEvolutionView:
    """One level of the evolution graph around `tech`."""
    evolution = tech.evolution
    return TechnologyEvolutionView(
        id=tech.id,
        name=tech.name,
        predecessors=build_links(evolution.predecessors if evolution else [], technologies),
        successors=build_links(evolution.successors if evolution else [], technologies),
        variants=build_links(evolution.variants if evolution else [], technologies),
    )


__all__ = [
    "resolve_by_id",
    "resolve_by_name",
    "resolve_by_substring",
    "resolve_reference",
    "reference_label",
    "build_links",
    "evolution_view",
]
