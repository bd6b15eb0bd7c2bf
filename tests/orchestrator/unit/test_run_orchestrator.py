"""Run orchestrator tests."""

from __future__ import annotations

from pathlib import Path
from typing import List

from qa_pilot.errors import SpecDiscoveryError
from qa_pilot.executors import PlaywrightExecutor, SimulatedExecutor, SuiteExecutor
from qa_pilot.models import FileResult, FileStatus, RunOutcome, SuiteType, TestPlan, TestSuite
from qa_pilot.orchestrator import (
    Err,
    ExecutionMode,
    Ok,
    RunOrchestrator,
    build_executors,
    summarize_outcomes,
)
from qa_pilot.run_log import RunLog


class StubExecutor(SuiteExecutor):
    """Returns canned outcomes, or raises, per suite name."""

    def __init__(self, behaviour: dict) -> None:
        super().__init__(Path("."))
        self.behaviour = behaviour
        self.seen: List[str] = []

    def run(self, suite: TestSuite) -> RunOutcome:
        self.seen.append(suite.name)
        result = self.behaviour[suite.name]
        if isinstance(result, Exception):
            raise result
        return RunOutcome.from_results(suite, result)


def _plan(*suites: TestSuite) -> TestPlan:
    return TestPlan(goal="Validate login", test_suites=list(suites))


def test_build_executors_uses_one_backend_per_mode(tmp_path: Path) -> None:
    simulated = build_executors(ExecutionMode.SIMULATED, tmp_path)
    real = build_executors(ExecutionMode.REAL, tmp_path, timeout_seconds=5)

    assert set(simulated) == {SuiteType.UI, SuiteType.API}
    assert all(isinstance(item, SimulatedExecutor) for item in simulated.values())
    assert all(isinstance(item, PlaywrightExecutor) for item in real.values())
    assert real[SuiteType.UI].timeout_seconds == 5


def test_execute_suite_wraps_exceptions_in_err(tmp_path: Path) -> None:
    suite = TestSuite(name="Login UI", type=SuiteType.UI)
    executor = StubExecutor({"Login UI": SpecDiscoveryError("No UI test spec files found")})
    orchestrator = RunOrchestrator({SuiteType.UI: executor}, RunLog(tmp_path))

    result = orchestrator.execute_suite(suite)

    assert result == Err("No UI test spec files found")


def test_execute_suite_reports_missing_backend(tmp_path: Path) -> None:
    orchestrator = RunOrchestrator({}, RunLog(tmp_path))

    result = orchestrator.execute_suite(TestSuite(name="x", type=SuiteType.API))

    assert isinstance(result, Err)
    assert "API" in result.reason


def test_failure_in_one_suite_does_not_stop_the_next(tmp_path: Path) -> None:
    ui = TestSuite(name="Login UI", type=SuiteType.UI)
    api = TestSuite(name="Login API", type=SuiteType.API)
    executor = StubExecutor(
        {
            "Login UI": RuntimeError("browser crashed"),
            "Login API": [FileResult("a.spec.js", FileStatus.PASSED, output="ok")],
        }
    )
    orchestrator = RunOrchestrator(
        {SuiteType.UI: executor, SuiteType.API: executor},
        RunLog(tmp_path),
    )

    outcomes = orchestrator.run(_plan(ui, api))

    assert executor.seen == ["Login UI", "Login API"]
    assert [outcome.status for outcome in outcomes] == [FileStatus.FAILED, FileStatus.PASSED]
    assert outcomes[0].error == "browser crashed"
    assert outcomes[0].total_files == outcomes[0].failed_files == 1


def test_run_appends_one_record_per_suite(tmp_path: Path) -> None:
    suites = [TestSuite(name=f"suite {index}", type=SuiteType.API) for index in range(3)]
    executor = StubExecutor(
        {suite.name: [FileResult("a.spec.js", FileStatus.PASSED)] for suite in suites}
    )
    run_log = RunLog(tmp_path)
    orchestrator = RunOrchestrator({SuiteType.API: executor}, run_log)

    orchestrator.run(_plan(*suites))
    orchestrator.run(_plan(suites[0]))

    records = run_log.read_records()
    assert [record["name"] for record in records] == ["suite 0", "suite 1", "suite 2", "suite 0"]


def test_collapse_passes_ok_outcome_through() -> None:
    suite = TestSuite(name="x", type=SuiteType.UI)
    outcome = RunOutcome.from_results(suite, [FileResult("a", FileStatus.SKIPPED)])

    assert RunOrchestrator.collapse(suite, Ok(outcome)) is outcome


def test_for_mode_simulated_runs_discovered_specs(tmp_path: Path) -> None:
    specs = tmp_path / "tests" / "ui" / "specs"
    specs.mkdir(parents=True)
    (specs / "login.spec.js").write_text("", encoding="utf-8")
    orchestrator = RunOrchestrator.for_mode(
        ExecutionMode.SIMULATED,
        tests_root=tmp_path / "tests",
        results_dir=tmp_path / "results",
    )

    outcomes = orchestrator.run(_plan(TestSuite(name="Login UI", type=SuiteType.UI)))

    assert outcomes[0].status is FileStatus.PASSED
    assert (tmp_path / "results" / "run.jsonl").exists()


def test_summarize_outcomes_counts_statuses() -> None:
    suite = TestSuite(name="x", type=SuiteType.UI)
    outcomes = [
        RunOutcome.from_results(suite, [FileResult("a", FileStatus.PASSED)]),
        RunOutcome.failure(suite, "boom"),
        RunOutcome.from_results(suite, [FileResult("a", FileStatus.SKIPPED)]),
        RunOutcome.from_results(suite, [FileResult("b", FileStatus.PASSED)]),
    ]

    summary = summarize_outcomes(outcomes)

    assert (summary.total, summary.passed, summary.failed, summary.skipped) == (4, 2, 1, 1)
