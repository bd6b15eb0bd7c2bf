"""Run every suite of a plan through one executor backend and record outcomes."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Union

from .executors import PlaywrightExecutor, SimulatedExecutor, SuiteExecutor
from .models import FileStatus, RunOutcome, SuiteType, TestPlan, TestSuite
from .run_log import RunLog

LOGGER = logging.getLogger("run_orchestrator")


class ExecutionMode(str, Enum):
    REAL = "real"
    SIMULATED = "simulated"


@dataclass(frozen=True)
class Ok:
    outcome: RunOutcome


@dataclass(frozen=True)
class Err:
    reason: str


SuiteResult = Union[Ok, Err]


@dataclass(frozen=True)
class RunSummary:
    total: int
    passed: int
    failed: int
    skipped: int


def build_executors(
    mode: ExecutionMode,
    tests_root: Path,
    *,
    timeout_seconds: float = 60,
    simulated_delay: float = 0.0,
) -> Dict[SuiteType, SuiteExecutor]:
    if mode is ExecutionMode.SIMULATED:
        backend: SuiteExecutor = SimulatedExecutor(tests_root, delay_seconds=simulated_delay)
    else:
        backend = PlaywrightExecutor(tests_root, timeout_seconds=timeout_seconds)
    return {suite_type: backend for suite_type in SuiteType}


class RunOrchestrator:
    def __init__(self, executors: Mapping[SuiteType, SuiteExecutor], run_log: RunLog) -> None:
        self.executors = dict(executors)
        self.run_log = run_log

    @classmethod
    def for_mode(
        cls,
        mode: ExecutionMode,
        *,
        tests_root: Path,
        results_dir: Path,
        timeout_seconds: float = 60,
        simulated_delay: float = 0.0,
    ) -> "RunOrchestrator":
        LOGGER.info("Execution mode: %s", mode.value)
        executors = build_executors(
            mode,
            tests_root,
            timeout_seconds=timeout_seconds,
            simulated_delay=simulated_delay,
        )
        return cls(executors, RunLog(results_dir))

    def execute_suite(self, suite: TestSuite) -> SuiteResult:
        executor = self.executors.get(suite.type)
        if executor is None:
            return Err(f"No executor configured for suite type {suite.type.value}")
        try:
            return Ok(executor.run(suite))
        except Exception as exc:
            LOGGER.error("Suite '%s' could not be executed: %s", suite.name, exc)
            return Err(str(exc))

    @staticmethod
    def collapse(suite: TestSuite, result: SuiteResult) -> RunOutcome:
        if isinstance(result, Ok):
            return result.outcome
        return RunOutcome.failure(suite, result.reason)

    def run(self, plan: TestPlan) -> List[RunOutcome]:
        outcomes: List[RunOutcome] = []
        for suite in plan.test_suites:
            LOGGER.info("Running: %s (%s)", suite.name, suite.type.value)
            outcome = self.collapse(suite, self.execute_suite(suite))
            LOGGER.info(
                "%s suite '%s': %d/%d passed, %d failed, %d skipped -> %s",
                suite.type.value,
                suite.name,
                outcome.passed_files,
                outcome.total_files,
                outcome.failed_files,
                outcome.skipped_files,
                outcome.status.value,
            )
            outcomes.append(outcome)
            self.run_log.append(outcome)
        return outcomes


def summarize_outcomes(outcomes: Sequence[RunOutcome]) -> RunSummary:
    return RunSummary(
        total=len(outcomes),
        passed=sum(1 for item in outcomes if item.status is FileStatus.PASSED),
        failed=sum(1 for item in outcomes if item.status is FileStatus.FAILED),
        skipped=sum(1 for item in outcomes if item.status is FileStatus.SKIPPED),
    )
