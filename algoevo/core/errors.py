"""
Error taxonomy for the knowledge base.

Derivation code raises these; only the HTTP layer turns them into status codes.
"""
from __future__ import annotations

from typing import Any, Optional


class KnowledgeBaseError(Exception):
    """Base class for all knowledge-base errors."""


class RecordValidationError(KnowledgeBaseError, ValueError):
    """Raised when an input record does not match its schema (surfaced as 400)."""


class NotFoundError(KnowledgeBaseError, LookupError):
    """Raised when a module, technology or case id has no match (surfaced as 404)."""


class DataQualityError(KnowledgeBaseError, ValueError):
    """
    A stored value cannot be interpreted during matrix assembly.

    Assemblers log and skip the offending contribution instead of failing the
    whole derivation.
    """

    def __init__(self, message: str, *, record_id: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.record_id = record_id
        self.value = value


class UpstreamUnavailable(KnowledgeBaseError, RuntimeError):
    """External enrichment source unreachable or answered with a non-OK status."""


class StoreCorruptedError(KnowledgeBaseError, RuntimeError):
    """Persisted case file no longer matches the case schema."""


class UnknownRevisionError(KnowledgeBaseError, KeyError):
    """A revision key outside rev1..rev5 was passed in."""


__all__ = [
    "KnowledgeBaseError",
    "RecordValidationError",
    "NotFoundError",
    "DataQualityError",
    "UpstreamUnavailable",
    "StoreCorruptedError",
    "UnknownRevisionError",
]
