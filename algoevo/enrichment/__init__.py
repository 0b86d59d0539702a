from __future__ import annotations

from .external import enrich_technologies, fetch_technology_data
from .text_parser import parse_technology_description

__all__ = ["enrich_technologies", "fetch_technology_data", "parse_technology_description"]
