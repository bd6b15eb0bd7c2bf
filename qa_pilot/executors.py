"""Executor backends that run a suite's generated spec files.

Both backends share spec discovery: files ending in ``.spec.js`` inside
``<tests_root>/<ui|api>/specs``, in name order. A missing folder or an empty
match raises :class:`SpecDiscoveryError`; everything that goes wrong with a
single file becomes a FAILED :class:`FileResult` for that file.
"""

from __future__ import annotations

import logging
import re
import subprocess
import time
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .errors import SpecDiscoveryError
from .materializer import SPEC_SUFFIX
from .models import FileResult, FileStatus, RunOutcome, SuiteType, TestSuite
from .tools.filesystem import Runner, list_files, run_command

LOGGER = logging.getLogger("suite_executor")

DEFAULT_SPEC_TIMEOUT = 60
PLAYWRIGHT_COMMAND = ("npx", "playwright", "test")

_SKIPPED_RE = re.compile(r"\b\d+\s+skipped\b", re.IGNORECASE)
_PASSED_RE = re.compile(r"\b\d+\s+passed\b", re.IGNORECASE)


def specs_folder(tests_root: Path, suite_type: SuiteType) -> Path:
    return Path(tests_root) / suite_type.folder_name / "specs"


def discover_spec_files(tests_root: Path, suite_type: SuiteType) -> List[Path]:
    folder = specs_folder(tests_root, suite_type)
    if not folder.is_dir():
        raise SpecDiscoveryError(f"{suite_type.value} test directory not found: {folder}")
    files = list_files(folder, SPEC_SUFFIX)
    if not files:
        raise SpecDiscoveryError(f"No {suite_type.value} test spec files found in {folder}")
    return files


class SuiteExecutor:
    """Runs every spec file of a suite and aggregates the file results."""

    label = "executor"

    def __init__(self, tests_root: Path) -> None:
        self.tests_root = Path(tests_root)

    def run(self, suite: TestSuite) -> RunOutcome:
        spec_files = discover_spec_files(self.tests_root, suite.type)
        LOGGER.info(
            "[%s] Found %d %s spec file(s) for '%s': %s",
            self.label,
            len(spec_files),
            suite.type.value,
            suite.name,
            ", ".join(path.name for path in spec_files),
        )

        results: List[FileResult] = []
        for spec_path in spec_files:
            try:
                result = self.run_file(spec_path)
            except Exception as exc:
                LOGGER.error("[%s] Error running %s: %s", self.label, spec_path.name, exc)
                result = FileResult(file=spec_path.name, status=FileStatus.FAILED, error=str(exc))
            results.append(result)
        return RunOutcome.from_results(suite, results)

    def run_file(self, spec_path: Path) -> FileResult:
        raise NotImplementedError


class PlaywrightExecutor(SuiteExecutor):
    label = "playwright"

    def __init__(
        self,
        tests_root: Path,
        *,
        timeout_seconds: float = DEFAULT_SPEC_TIMEOUT,
        command: Sequence[str] = PLAYWRIGHT_COMMAND,
        cwd: Optional[Path] = None,
        runner: Runner = subprocess.run,
    ) -> None:
        super().__init__(tests_root)
        self.timeout_seconds = timeout_seconds
        self.command = tuple(command)
        self.cwd = cwd
        self.runner = runner

    def run_file(self, spec_path: Path) -> FileResult:
        LOGGER.info("[%s] Running spec file %s", self.label, spec_path.name)
        completed = run_command(
            [*self.command, str(spec_path), "--reporter=line"],
            cwd=self.cwd,
            timeout_seconds=self.timeout_seconds,
            runner=self.runner,
        )
        stdout = str(completed["stdout"])
        stderr = str(completed["stderr"])

        if completed["timeout"]:
            message = f"Timed out after {self.timeout_seconds} seconds"
            LOGGER.error("[%s] %s: %s", self.label, spec_path.name, message)
            return FileResult(file=spec_path.name, status=FileStatus.FAILED, error=message)

        if completed["returncode"] != 0 or "Error:" in stderr:
            error = (stderr or stdout).strip() or f"Exited with code {completed['returncode']}"
            LOGGER.error("[%s] %s failed", self.label, spec_path.name)
            return FileResult(file=spec_path.name, status=FileStatus.FAILED, error=error)

        if _SKIPPED_RE.search(stdout) and not _PASSED_RE.search(stdout):
            LOGGER.info("[%s] %s skipped", self.label, spec_path.name)
            return FileResult(file=spec_path.name, status=FileStatus.SKIPPED, output=stdout)

        LOGGER.info("[%s] %s completed successfully", self.label, spec_path.name)
        return FileResult(file=spec_path.name, status=FileStatus.PASSED, output=stdout)


class SimulatedExecutor(SuiteExecutor):
    """Reports every discovered spec file as passed without launching a browser."""

    label = "simulated"

    def __init__(
        self,
        tests_root: Path,
        *,
        delay_seconds: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        super().__init__(tests_root)
        self.delay_seconds = delay_seconds
        self.sleep = sleep

    def run_file(self, spec_path: Path) -> FileResult:
        if self.delay_seconds > 0:
            self.sleep(self.delay_seconds)
        LOGGER.info("[%s] %s completed successfully", self.label, spec_path.name)
        return FileResult(
            file=spec_path.name,
            status=FileStatus.PASSED,
            output="Simulated test execution completed successfully",
        )
