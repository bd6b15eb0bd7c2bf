from __future__ import annotations

import re
import time
from typing import Optional

from .models import Section, SectionType
from .patterns import DEFAULT_NAME_PREFIXES, NAME_PATTERNS, first_match

_LOWERCASE_TYPES = {SectionType.DATA, SectionType.SCHEMA}


def _current_millis() -> int:
    return int(time.time() * 1000)


def slugify(value: str) -> str:
    lower = re.sub(r"[^a-zA-Z0-9]+", "-", value).strip("-")
    return lower.lower()


def normalize_name(value: str, section_type: SectionType) -> str:
    """Make an extracted name safe to use as a file stem for its role."""
    if section_type is SectionType.MAIN:
        return slugify(value)
    cleaned = re.sub(r"[^\w-]+", "_", value.strip()).strip("_-")
    if section_type in _LOWERCASE_TYPES:
        cleaned = cleaned.lower()
    return cleaned


def name_for(section: Section, now_ms: Optional[int] = None) -> str:
    """Derive a file stem from the section content.

    Falls back to ``<prefix>_<epoch millis>`` when no pattern matches, so
    repeated runs accumulate new files instead of replacing older ones.
    """
    extracted = first_match(NAME_PATTERNS.get(section.type, []), section.content)
    if extracted:
        name = normalize_name(extracted, section.type)
        if name:
            return name
    stamp = now_ms if now_ms is not None else _current_millis()
    return f"{DEFAULT_NAME_PREFIXES[section.type]}_{stamp}"
