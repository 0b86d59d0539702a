"""
Knowledge-base verification entry-points.
"""
from __future__ import annotations

from .consistency import ConsistencyViolation, has_errors, verify_knowledge_base

__all__ = ["ConsistencyViolation", "has_errors", "verify_knowledge_base"]
