"""
Revision buckets and year classification.

REVISIONS is the single table of year ranges; every other component places
years through classify_year so that no component carries its own copy of the
boundaries.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Tuple, TYPE_CHECKING

from algoevo.core.errors import DataQualityError, UnknownRevisionError

if TYPE_CHECKING:
    from algoevo.core.schema import TechnologyRecord


RevisionKey = Literal["rev1", "rev2", "rev3", "rev4", "rev5"]
PeriodStyle = Literal["empty", "early", "modern", "current"]


@dataclass(frozen=True)
class RevisionMeta:
    """
    One revision bucket.

    Attributes:
        key: Stable key (rev1..rev5)
        label: Column header shown by the UI
        period: Human-readable year range
        years: Inclusive (first, last) year range
        style: Cell period style used when a slot gets filled
    """
    key: str
    label: str
    period: str
    years: Tuple[int, int]
    style: str

    def contains(self, year: int) -> bool:
        return self.years[0] <= year <= self.years[1]

    def intersects(self, start: int, end: int) -> bool:
        return start <= self.years[1] and end >= self.years[0]


REVISIONS: Dict[str, RevisionMeta] = {
    "rev1": RevisionMeta("rev1", "Rev 1 (2015)", "2000-2015", (2000, 2015), "early"),
    "rev2": RevisionMeta("rev2", "Rev 2 (2020)", "2016-2020", (2016, 2020), "early"),
    "rev3": RevisionMeta("rev3", "Rev 3 (2022)", "2021-2022", (2021, 2022), "modern"),
    "rev4": RevisionMeta("rev4", "Rev 4 (2023)", "2023-2023", (2023, 2023), "modern"),
    "rev5": RevisionMeta("rev5", "Rev 5 (2024)", "2024-2025", (2024, 2025), "current"),
}

REVISION_ORDER: List[str] = ["rev1", "rev2", "rev3", "rev4", "rev5"]

_YEAR_PATTERN = re.compile(r"\d{4}")


def revision_index(key: str) -> int:
    try:
        return REVISION_ORDER.index(key)
    except ValueError:
        raise UnknownRevisionError(f"Unknown revision key: {key!r}") from None


def revision_meta(key: str) -> RevisionMeta:
    try:
        return REVISIONS[key]
    except KeyError:
        raise UnknownRevisionError(f"Unknown revision key: {key!r}") from None


def next_revision(key: str) -> Optional[str]:
    """Revision that follows `key`, or None for the last bucket."""
    idx = revision_index(key)
    if idx + 1 < len(REVISION_ORDER):
        return REVISION_ORDER[idx + 1]
    return None


def classify_year(year: int) -> str:
    """
    Map a calendar year to its revision bucket.

    Years before rev1 clamp to rev1; years after the last bucket fall into
    rev5, which is open-ended.
    """
    for key in REVISION_ORDER:
        if year <= REVISIONS[key].years[1]:
            return key
    return REVISION_ORDER[-1]


def parse_period_year(period: str, *, record_id: Optional[str] = None) -> int:
    """Extract the first 4-digit year from a free-text period like "2015-2017" or "2020+"."""
    match = _YEAR_PATTERN.search(period or "")
    if match is None:
        raise DataQualityError(
            f"Period {period!r} has no 4-digit year",
            record_id=record_id,
            value=period,
        )
    return int(match.group(0))


def classify_period_string(period: str, *, record_id: Optional[str] = None) -> str:
    """
    Classify a case period string by its first 4-digit year.

    Raises:
        DataQualityError: If the string holds no 4-digit year
    """
    return classify_year(parse_period_year(period, record_id=record_id))


def technology_year(tech: "TechnologyRecord") -> int:
    """A technology is bucketed by its peak year, falling back to its start year."""
    peak = tech.periods.peak
    return peak if peak is not None else tech.periods.start


def revision_for_technology(tech: "TechnologyRecord") -> str:
    return classify_year(technology_year(tech))


def style_for_revision(key: str) -> str:
    return revision_meta(key).style


__all__ = [
    "RevisionKey",
    "PeriodStyle",
    "RevisionMeta",
    "REVISIONS",
    "REVISION_ORDER",
    "revision_index",
    "revision_meta",
    "next_revision",
    "classify_year",
    "parse_period_year",
    "classify_period_string",
    "technology_year",
    "revision_for_technology",
    "style_for_revision",
]
