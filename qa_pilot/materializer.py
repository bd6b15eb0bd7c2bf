"""Persist segmented sections as files inside a per-suite-type scaffold."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set

from .models import Artifact, Section, SectionType, SuiteType
from .naming import name_for
from .sanitizer import TargetKind, sanitize
from .scaffold_seeds import SEED_FILES
from .tools.filesystem import write_file, write_file_if_absent

LOGGER = logging.getLogger("artifact_materializer")

SPEC_SUFFIX = ".spec.js"

SCAFFOLD_FOLDERS: Dict[SuiteType, List[str]] = {
    SuiteType.UI: ["pages", "utils", "data", "fixtures", "specs"],
    SuiteType.API: ["services", "utils", "data", "schemas", "fixtures", "specs"],
}

SECTION_FOLDERS: Dict[SectionType, str] = {
    SectionType.PAGE: "pages",
    SectionType.UTILITY: "utils",
    SectionType.DATA: "data",
    SectionType.SERVICE: "services",
    SectionType.SCHEMA: "schemas",
    SectionType.MAIN: "specs",
}

SECTION_EXTENSIONS: Dict[SectionType, str] = {
    SectionType.PAGE: ".js",
    SectionType.UTILITY: ".js",
    SectionType.DATA: ".json",
    SectionType.SERVICE: ".js",
    SectionType.SCHEMA: ".json",
    SectionType.MAIN: SPEC_SUFFIX,
}


def ensure_scaffold(base_folder: Path, suite_type: SuiteType) -> List[Path]:
    """Create the scaffold folders and seed files; existing files are left alone."""
    base_folder.mkdir(parents=True, exist_ok=True)
    folders: List[Path] = []
    for name in SCAFFOLD_FOLDERS[suite_type]:
        folder = base_folder / name
        folder.mkdir(parents=True, exist_ok=True)
        folders.append(folder)

    for relative, content in SEED_FILES[suite_type].items():
        if write_file_if_absent(base_folder / relative, content):
            LOGGER.info("Seeded %s", base_folder / relative)
    return folders


def _unique_path(folder: Path, stem: str, extension: str, used: Set[Path]) -> Path:
    candidate = folder / f"{stem}{extension}"
    counter = 2
    while candidate in used:
        candidate = folder / f"{stem}-{counter}{extension}"
        counter += 1
    used.add(candidate)
    return candidate


def materialize(
    sections: Sequence[Section],
    base_folder: Path,
    suite_type: SuiteType,
    *,
    now_ms: Optional[int] = None,
) -> List[Artifact]:
    base_folder = Path(base_folder)
    ensure_scaffold(base_folder, suite_type)

    artifacts: List[Artifact] = []
    # Seed files are never overwritten; a clashing section gets a suffixed name.
    used: Set[Path] = {base_folder / relative for relative in SEED_FILES[suite_type]}
    for section in sections:
        folder_name = SECTION_FOLDERS.get(section.type, "specs")
        extension = SECTION_EXTENSIONS.get(section.type, SPEC_SUFFIX)
        stem = name_for(section, now_ms=now_ms)
        target = _unique_path(base_folder / folder_name, stem, extension, used)

        kind = TargetKind.JSON if extension == ".json" else TargetKind.CODE
        write_file(target, sanitize(section.content, kind))
        LOGGER.info("Wrote %s artifact %s", section.type.value, target)

        artifacts.append(
            Artifact(
                path=target,
                type=section.type,
                folder=folder_name,
                name=target.name[: -len(extension)],
            )
        )
    return artifacts
