"""Data model shared by the planning, generation and execution stages."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SuiteType(str, Enum):
    UI = "UI"
    API = "API"

    @classmethod
    def _missing_(cls, value: object) -> Optional["SuiteType"]:
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().upper():
                    return member
        return None

    @property
    def folder_name(self) -> str:
        return self.value.lower()


class SectionType(str, Enum):
    PAGE = "page"
    UTILITY = "utility"
    DATA = "data"
    SERVICE = "service"
    SCHEMA = "schema"
    MAIN = "main"


class FileStatus(str, Enum):
    PASSED = "PASSED"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class TestSuite(BaseModel):
    __test__ = False

    model_config = ConfigDict(populate_by_name=True)

    name: str
    type: SuiteType
    steps: List[str] = Field(default_factory=list)


class TestPlan(BaseModel):
    """A goal plus the ordered suites generated for it.

    Model output has used both ``tests`` and ``testSuites`` for the suite list,
    so both are accepted on input; serialization always writes ``testSuites``.
    """

    __test__ = False

    model_config = ConfigDict(populate_by_name=True)

    goal: str = ""
    test_suites: List[TestSuite] = Field(
        default_factory=list,
        validation_alias=AliasChoices("testSuites", "test_suites", "tests"),
        serialization_alias="testSuites",
    )

    @field_validator("test_suites", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def suite_types(self) -> List[SuiteType]:
        seen: List[SuiteType] = []
        for suite in self.test_suites:
            if suite.type not in seen:
                seen.append(suite.type)
        return seen


class CacheEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    goal: str
    plan: TestPlan
    timestamp: str
    file_name: str = Field(alias="fileName")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True)
class Section:
    type: SectionType
    content: str
    start_index: int


@dataclass(frozen=True)
class Artifact:
    path: Path
    type: SectionType
    folder: str
    name: str


@dataclass
class FileResult:
    file: str
    status: FileStatus
    output: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"file": self.file, "status": self.status.value}
        if self.output is not None:
            payload["output"] = self.output
        if self.error is not None:
            payload["error"] = self.error
        return payload


@dataclass
class RunOutcome:
    """Aggregated result of running one suite.

    ``total_files`` and ``status`` are always derived from the three counters,
    never stored on their own.
    """

    suite: TestSuite
    results: List[FileResult] = field(default_factory=list)
    passed_files: int = 0
    failed_files: int = 0
    skipped_files: int = 0
    error: Optional[str] = None

    @classmethod
    def from_results(cls, suite: TestSuite, results: List[FileResult]) -> "RunOutcome":
        return cls(
            suite=suite,
            results=list(results),
            passed_files=sum(1 for item in results if item.status is FileStatus.PASSED),
            failed_files=sum(1 for item in results if item.status is FileStatus.FAILED),
            skipped_files=sum(1 for item in results if item.status is FileStatus.SKIPPED),
        )

    @classmethod
    def failure(cls, suite: TestSuite, message: str) -> "RunOutcome":
        return cls(suite=suite, results=[], failed_files=1, error=message)

    @property
    def total_files(self) -> int:
        return self.passed_files + self.failed_files + self.skipped_files

    @property
    def status(self) -> FileStatus:
        if self.failed_files > 0:
            return FileStatus.FAILED
        if self.skipped_files == self.total_files:
            return FileStatus.SKIPPED
        return FileStatus.PASSED

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "name": self.suite.name,
            "type": self.suite.type.value,
            "steps": list(self.suite.steps),
            "status": self.status.value,
            "results": [item.to_dict() for item in self.results],
            "totalFiles": self.total_files,
            "passedFiles": self.passed_files,
            "failedFiles": self.failed_files,
            "skippedFiles": self.skipped_files,
        }
        if self.error is not None:
            record["error"] = self.error
        return record
