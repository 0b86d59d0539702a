"""
Heuristic parser for pasted technology descriptions.

Recognised section headers (case-insensitive, anywhere in a non-bullet line):

    преимущества / плюсы          -> advantages
    недостатки / минусы           -> disadvantages
    применение / использование    -> useCases
    период / годы                 -> periods (4-digit years on that line)

Bullet lines ("-", "•", "*") under the active section are collected. The first
non-bullet line without a colon and at least 20 characters long becomes the
description. Output is a partial technology record in JSON shape, never validated.
"""
from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

BULLET_PREFIXES = ("-", "•", "*")
MIN_DESCRIPTION_LENGTH = 20

_SECTION_KEYWORDS = (
    ("advantages", ("преимущества", "плюсы")),
    ("disadvantages", ("недостатки", "минусы")),
    ("useCases", ("применение", "использование")),
)
_PERIOD_KEYWORDS = ("период", "годы")
_YEAR_PATTERN = re.compile(r"\d{4}")


def _section_for(line: str) -> Optional[str]:
    lowered = line.casefold()
    for section, keywords in _SECTION_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return section
    return None


def _parse_periods(line: str) -> Optional[Dict[str, int]]:
    years = [int(y) for y in _YEAR_PATTERN.findall(line)]
    if not years:
        return None
    periods = {"start": years[0]}
    if len(years) > 1:
        periods["end"] = years[-1]
    return periods


def parse_technology_description(text: str, name: Optional[str] = None) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "advantages": [],
        "disadvantages": [],
        "useCases": [],
        "applicableModules": [],
    }
    if name:
        result["name"] = name.strip()

    current: Optional[str] = None
    lines: List[str] = [line.strip() for line in (text or "").splitlines()]

    for line in lines:
        if not line:
            continue
        is_bullet = line.startswith(BULLET_PREFIXES)

        if not is_bullet:
            if any(keyword in line.casefold() for keyword in _PERIOD_KEYWORDS):
                periods = _parse_periods(line)
                if periods is not None:
                    result["periods"] = periods
                continue
            section = _section_for(line)
            if section is not None:
                current = section
                continue

        if is_bullet:
            if current is not None:
                content = line[1:].strip()
                if content:
                    result[current].append(content)
            continue

        if "description" not in result and ":" not in line and len(line) >= MIN_DESCRIPTION_LENGTH:
            result["description"] = line

    return result


__all__ = ["parse_technology_description"]
