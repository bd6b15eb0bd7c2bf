"""Turn natural-language test goals into Playwright artifacts and run records."""

from .errors import GenerationError, PlanCacheError, QaPilotError, SpecDiscoveryError
from .models import (
    Artifact,
    CacheEntry,
    FileResult,
    FileStatus,
    RunOutcome,
    Section,
    SectionType,
    SuiteType,
    TestPlan,
    TestSuite,
)

__all__ = [
    "Artifact",
    "CacheEntry",
    "FileResult",
    "FileStatus",
    "GenerationError",
    "PlanCacheError",
    "QaPilotError",
    "RunOutcome",
    "Section",
    "SectionType",
    "SpecDiscoveryError",
    "SuiteType",
    "TestPlan",
    "TestSuite",
]
