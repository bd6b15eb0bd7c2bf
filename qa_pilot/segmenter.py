"""Split a generated reply into typed sections by their markdown headings."""

from __future__ import annotations

import logging
from typing import List, Tuple

from .models import Section, SectionType
from .patterns import SECTION_MARKERS

LOGGER = logging.getLogger("section_segmenter")


def find_markers(raw_text: str) -> List[Tuple[int, SectionType, str]]:
    """Return ``(position, type, heading)`` for every marker, sorted by position.

    Only one marker survives per position; the pattern declared first wins.
    """
    found: List[Tuple[int, int, SectionType, str]] = []
    for order, (section_type, pattern) in enumerate(SECTION_MARKERS):
        for match in pattern.finditer(raw_text):
            found.append((match.start(), order, section_type, match.group(0)))
    found.sort(key=lambda item: (item[0], item[1]))

    markers: List[Tuple[int, SectionType, str]] = []
    for position, _, section_type, heading in found:
        if markers and markers[-1][0] == position:
            continue
        markers.append((position, section_type, heading))
    return markers


def segment(raw_text: str) -> List[Section]:
    markers = find_markers(raw_text)
    if not markers:
        LOGGER.debug("No section markers found; treating the whole reply as the main spec.")
        return [Section(type=SectionType.MAIN, content=raw_text.strip(), start_index=0)]

    sections: List[Section] = []
    for index, (position, section_type, heading) in enumerate(markers):
        end = markers[index + 1][0] if index + 1 < len(markers) else len(raw_text)
        body = raw_text[position:end]
        if body.startswith(heading):
            body = body[len(heading):]
        body = body.strip()
        if not body:
            LOGGER.debug("Discarding empty %s section at offset %d.", section_type.value, position)
            continue
        sections.append(Section(type=section_type, content=body, start_index=position))

    LOGGER.info(
        "Segmented reply into %d section(s): %s",
        len(sections),
        ", ".join(section.type.value for section in sections),
    )
    return sections
