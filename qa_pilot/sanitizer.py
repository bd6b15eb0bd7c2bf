"""Clean generated section text before it is written to disk."""

from __future__ import annotations

import json
import logging
import re
from enum import Enum
from typing import Any, Optional

from .patterns import SECTION_MARKERS

LOGGER = logging.getLogger("content_sanitizer")

_FENCE_LINE = re.compile(r"^[ \t]*```[\w+#.-]*[ \t]*$")
_DECORATION_LINE = re.compile(r"^(?:#{1,6}[ \t]|[-*+][ \t])")


class TargetKind(str, Enum):
    CODE = "code"
    JSON = "json"


def strip_leading_marker(content: str) -> str:
    text = content.lstrip()
    for _, pattern in SECTION_MARKERS:
        match = pattern.match(text)
        if match:
            return text[match.end():]
    return content


def strip_fences(content: str) -> str:
    return "\n".join(line for line in content.splitlines() if not _FENCE_LINE.match(line))


def strip_decoration(content: str) -> str:
    # Lossy: a column-0 bullet inside code is removed as well.
    return "\n".join(line for line in content.splitlines() if not _DECORATION_LINE.match(line))


def trim_blank_lines(content: str) -> str:
    lines = content.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)


def _decode_first(text: str, opener: str) -> Optional[Any]:
    idx = text.find(opener)
    if idx == -1:
        return None
    decoder = json.JSONDecoder()
    try:
        payload, _ = decoder.raw_decode(text, idx)
    except json.JSONDecodeError:
        return None
    return payload


def extract_json_object(text: str) -> Optional[Any]:
    return _decode_first(text, "{")


def extract_json(text: str) -> Optional[Any]:
    """Decode the JSON value that opens earliest in ``text``.

    A top-level array stays whole instead of collapsing to its first object.
    When the earliest opener does not decode, the other one is tried.
    """
    openers = sorted((text.find(opener), opener) for opener in ("{", "[") if opener in text)
    for _, opener in openers:
        payload = _decode_first(text, opener)
        if payload is not None:
            return payload
    return None


def sanitize(content: str, target_kind: TargetKind = TargetKind.CODE) -> str:
    cleaned = strip_leading_marker(content)
    cleaned = strip_fences(cleaned)
    cleaned = strip_decoration(cleaned)
    cleaned = trim_blank_lines(cleaned)

    if target_kind is not TargetKind.JSON:
        return cleaned

    payload = extract_json(cleaned)
    if payload is None:
        LOGGER.warning("Generated JSON section could not be parsed; writing it unchanged.")
        return cleaned
    return json.dumps(payload, indent=2, ensure_ascii=False)
