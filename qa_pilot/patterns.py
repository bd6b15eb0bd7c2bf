"""Pattern tables used to impose structure on generated text.

Tables are plain data so they can be tested and extended without touching the
segmenter or namer logic.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from .models import SectionType

# Heading prefix: markdown heading hashes or bold, then an optional "1." / "2)".
_HEADING = r"^[ \t]*(?:#{1,6}[ \t]+|\*\*[ \t]*)(?:\d+[.)][ \t]*)?"
_REST_OF_LINE = r"\b[^\n]*$"

# Declaration order breaks ties between markers found at the same position.
SECTION_MARKERS: List[Tuple[SectionType, Pattern[str]]] = [
    (SectionType.PAGE, re.compile(_HEADING + r"pages?(?:[ \t]+objects?)?" + _REST_OF_LINE, re.IGNORECASE | re.MULTILINE)),
    (SectionType.UTILITY, re.compile(_HEADING + r"(?:utility|utilities|utils?|helpers?)" + _REST_OF_LINE, re.IGNORECASE | re.MULTILINE)),
    (SectionType.DATA, re.compile(_HEADING + r"(?:test[ \t]+)?data" + _REST_OF_LINE, re.IGNORECASE | re.MULTILINE)),
    (SectionType.SERVICE, re.compile(_HEADING + r"(?:api[ \t]+)?services?(?:[ \t]+objects?)?" + _REST_OF_LINE, re.IGNORECASE | re.MULTILINE)),
    (SectionType.SCHEMA, re.compile(_HEADING + r"(?:json[ \t]+)?schemas?" + _REST_OF_LINE, re.IGNORECASE | re.MULTILINE)),
    (SectionType.MAIN, re.compile(_HEADING + r"(?:main[ \t]+test|test[ \t]+specs?|test[ \t]+files?|specs?)" + _REST_OF_LINE, re.IGNORECASE | re.MULTILINE)),
]

# "// pages/LoginPage.js" naming the file explicitly.
_PATH_COMMENT = r"^[ \t]*//[ \t]*(?:[\w.-]+/)*(\w[\w-]*?)(?:\.spec)?\.(?:js|ts|json)\b"

NAME_PATTERNS: Dict[SectionType, List[Pattern[str]]] = {
    SectionType.PAGE: [
        re.compile(_PATH_COMMENT, re.MULTILINE),
        re.compile(r"\bclass\s+([A-Za-z_]\w*Page)\b"),
        re.compile(r"\bclass\s+([A-Za-z_]\w*)"),
        re.compile(r"\bpage\s+object\s*[:\-]\s*([A-Za-z_]\w*)", re.IGNORECASE),
    ],
    SectionType.UTILITY: [
        re.compile(_PATH_COMMENT, re.MULTILINE),
        re.compile(r"\bexport\s+(?:async\s+)?function\s+([A-Za-z_]\w*)"),
        re.compile(r"\bexport\s+const\s+([A-Za-z_]\w*)"),
        re.compile(r"\butil(?:ity|ities|s)?\s*[:\-]\s*([A-Za-z_]\w*)", re.IGNORECASE),
    ],
    SectionType.DATA: [
        re.compile(_PATH_COMMENT, re.MULTILINE),
        re.compile(r"\"name\"\s*:\s*\"([\w\s-]+)\""),
        re.compile(r"\bdata\s*[:\-]\s*([A-Za-z_]\w*)", re.IGNORECASE),
        re.compile(r"^\s*\{\s*\"([\w-]+)\"\s*:", re.MULTILINE),
    ],
    SectionType.SERVICE: [
        re.compile(_PATH_COMMENT, re.MULTILINE),
        re.compile(r"\bclass\s+([A-Za-z_]\w*Service)\b"),
        re.compile(r"\bclass\s+([A-Za-z_]\w*)"),
        re.compile(r"\bservice\s*[:\-]\s*([A-Za-z_]\w*)", re.IGNORECASE),
    ],
    SectionType.SCHEMA: [
        re.compile(_PATH_COMMENT, re.MULTILINE),
        re.compile(r"\"title\"\s*:\s*\"([\w\s-]+)\""),
        re.compile(r"\bschema\s*[:\-]\s*([A-Za-z_]\w*)", re.IGNORECASE),
        re.compile(r"\"\$id\"\s*:\s*\"(?:[^\"]*/)?([\w-]+?)(?:\.json)?\""),
    ],
    SectionType.MAIN: [
        re.compile(_PATH_COMMENT, re.MULTILINE),
        re.compile(r"\btest\.describe\(\s*['\"`]([^'\"`]+)['\"`]"),
        re.compile(r"\btest\(\s*['\"`]([^'\"`]+)['\"`]"),
    ],
}

DEFAULT_NAME_PREFIXES: Dict[SectionType, str] = {
    SectionType.PAGE: "GeneratedPage",
    SectionType.UTILITY: "generatedUtils",
    SectionType.DATA: "test_data",
    SectionType.SERVICE: "GeneratedService",
    SectionType.SCHEMA: "schema",
    SectionType.MAIN: "generated-test",
}


def first_match(patterns: Iterable[Pattern[str]], text: str) -> Optional[str]:
    """Return the first capturing group of the first pattern that matches."""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            value = match.group(1).strip()
            if value:
                return value
    return None
