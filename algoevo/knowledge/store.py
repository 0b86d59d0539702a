"""
In-memory knowledge base.

Seed literals are validated once into typed records. The resulting
KnowledgeBase is treated as read-only for the life of the process.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from algoevo.core.schema import (
    CaseRecord,
    ModuleData,
    TechnologyRecord,
    TreeNode,
    validate_record,
    validate_records,
)
from algoevo.knowledge.baseline import BASELINE_MODULES
from algoevo.knowledge.cases import TRADING_MACHINE_CASES
from algoevo.knowledge.technologies import TECHNOLOGY_DATABASE
from algoevo.knowledge.tree import TREE_DATA


@dataclass
class KnowledgeBase:
    technologies: List[TechnologyRecord] = field(default_factory=list)
    cases: List[CaseRecord] = field(default_factory=list)
    baseline: List[ModuleData] = field(default_factory=list)
    tree: Optional[TreeNode] = None

    def get_module_by_name(self, name: str) -> Optional[ModuleData]:
        """Baseline module with exactly this name."""
        for module in self.baseline:
            if module.name == name:
                return module
        return None

    def all_module_names(self) -> List[str]:
        return [module.name for module in self.baseline]

    def get_technology(self, tech_id: str) -> Optional[TechnologyRecord]:
        for tech in self.technologies:
            if tech.id == tech_id:
                return tech
        return None

    def get_case(self, case_id: str, extra: Optional[List[CaseRecord]] = None) -> Optional[CaseRecord]:
        for case in [*self.cases, *(extra or [])]:
            if case.id == case_id:
                return case
        return None

    def summary(self) -> dict:
        return {
            "modules": len(self.baseline),
            "technologies": len(self.technologies),
            "cases": len(self.cases),
        }


def load_knowledge_base() -> KnowledgeBase:
    """
    Validate the seed data and build a KnowledgeBase.

    Raises:
        RecordValidationError: If any seed record violates its schema
    """
    return KnowledgeBase(
        technologies=validate_records(TechnologyRecord, TECHNOLOGY_DATABASE, what="technology"),
        cases=validate_records(CaseRecord, TRADING_MACHINE_CASES, what="trading-machine case"),
        baseline=validate_records(ModuleData, BASELINE_MODULES, what="baseline module"),
        tree=validate_record(TreeNode, TREE_DATA, what="tree node"),
    )


__all__ = ["KnowledgeBase", "load_knowledge_base"]
