"""
Matrix cell contents kept as an ordered set of technology names.

Cells are joined into display strings only when a view is serialized.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from algoevo.core.revisions import REVISION_ORDER, style_for_revision
from algoevo.core.schema import ModuleData, ModuleRevisions, RevisionData

SEPARATOR = ", "


def split_cell_text(text: str) -> List[str]:
    return [part.strip() for part in (text or "").split(",") if part.strip()]


@dataclass
class TechCell:
    names: List[str] = field(default_factory=list)
    period: str = "empty"
    desc: str = ""

    @classmethod
    def from_revision(cls, data: RevisionData) -> "TechCell":
        return cls(names=split_cell_text(data.tech), period=data.period, desc=data.desc)

    @property
    def text(self) -> str:
        return SEPARATOR.join(self.names)

    def covers(self, name: str) -> bool:
        """True when `name` already shows up in the cell, compared case-insensitively as a substring."""
        needle = name.strip().casefold()
        if not needle:
            return True
        if any(existing.casefold() == needle for existing in self.names):
            return True
        return needle in self.text.casefold()

    def add(self, name: str, *, revision: str) -> bool:
        """Append `name` unless covered. Returns True if the cell grew."""
        if self.covers(name):
            return False
        self.names.append(name.strip())
        if self.period == "empty":
            self.period = style_for_revision(revision)
        return True

    def add_note(self, note: str) -> bool:
        if note in self.desc:
            return False
        self.desc = f"{self.desc} {note}".strip() if self.desc else note
        return True

    def to_revision(self) -> RevisionData:
        if not self.names:
            return RevisionData(tech="", period="empty", desc=self.desc)
        return RevisionData(tech=self.text, period=self.period, desc=self.desc)


@dataclass
class MatrixRow:
    name: str
    cells: Dict[str, TechCell] = field(default_factory=lambda: {key: TechCell() for key in REVISION_ORDER})

    @classmethod
    def from_module(cls, module: ModuleData) -> "MatrixRow":
        revisions = module.revisions
        return cls(
            name=module.name,
            cells={key: TechCell.from_revision(getattr(revisions, key)) for key in REVISION_ORDER},
        )

    def to_module(self) -> ModuleData:
        return ModuleData(
            name=self.name,
            revisions=ModuleRevisions(**{key: self.cells[key].to_revision() for key in REVISION_ORDER}),
        )


def rows_from_modules(modules: Iterable[ModuleData]) -> List[MatrixRow]:
    """Fresh, independent rows for every module (the baseline is never mutated)."""
    return [MatrixRow.from_module(m) for m in modules]


__all__ = ["TechCell", "MatrixRow", "rows_from_modules", "split_cell_text", "SEPARATOR"]
