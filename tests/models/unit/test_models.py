"""Data model tests."""

from __future__ import annotations

from qa_pilot.models import FileResult, FileStatus, RunOutcome, SuiteType, TestPlan, TestSuite


def _suite() -> TestSuite:
    return TestSuite(name="Checkout", type=SuiteType.API, steps=["POST /cart"])


def test_suite_type_parsing_is_case_insensitive() -> None:
    assert SuiteType("ui") is SuiteType.UI
    assert TestSuite.model_validate({"name": "x", "type": "api"}).type is SuiteType.API


def test_plan_accepts_legacy_tests_key_and_serializes_test_suites() -> None:
    plan = TestPlan.model_validate(
        {"goal": "g", "tests": [{"name": "a", "type": "UI", "steps": ["s"]}]}
    )

    assert len(plan.test_suites) == 1
    assert plan.to_payload() == {
        "goal": "g",
        "testSuites": [{"name": "a", "type": "UI", "steps": ["s"]}],
    }


def test_plan_suites_default_to_empty_and_null_is_empty() -> None:
    assert TestPlan(goal="g").test_suites == []
    assert TestPlan.model_validate({"goal": "g", "testSuites": None}).test_suites == []


def test_suite_types_keep_first_seen_order() -> None:
    plan = TestPlan.model_validate(
        {
            "goal": "g",
            "testSuites": [
                {"name": "a", "type": "API"},
                {"name": "b", "type": "UI"},
                {"name": "c", "type": "API"},
            ],
        }
    )

    assert plan.suite_types() == [SuiteType.API, SuiteType.UI]


def test_outcome_counters_and_status_from_results() -> None:
    outcome = RunOutcome.from_results(
        _suite(),
        [
            FileResult("a.spec.js", FileStatus.PASSED, output="ok"),
            FileResult("b.spec.js", FileStatus.SKIPPED, output="skipped"),
            FileResult("c.spec.js", FileStatus.FAILED, error="boom"),
        ],
    )

    assert (outcome.passed_files, outcome.failed_files, outcome.skipped_files) == (1, 1, 1)
    assert outcome.total_files == 3
    assert outcome.status is FileStatus.FAILED


def test_status_is_skipped_only_when_every_file_skipped() -> None:
    all_skipped = RunOutcome.from_results(_suite(), [FileResult("a", FileStatus.SKIPPED)])
    mixed = RunOutcome.from_results(
        _suite(),
        [FileResult("a", FileStatus.SKIPPED), FileResult("b", FileStatus.PASSED)],
    )

    assert all_skipped.status is FileStatus.SKIPPED
    assert mixed.status is FileStatus.PASSED


def test_failure_outcome_keeps_counter_invariant() -> None:
    outcome = RunOutcome.failure(_suite(), "No API test spec files found")

    assert outcome.failed_files == 1
    assert outcome.passed_files == outcome.skipped_files == 0
    assert outcome.total_files == 1
    assert outcome.status is FileStatus.FAILED
    assert outcome.error == "No API test spec files found"


def test_outcome_record_uses_run_log_field_names() -> None:
    outcome = RunOutcome.from_results(_suite(), [FileResult("a.spec.js", FileStatus.PASSED, output="ok")])

    record = outcome.to_record()

    assert record == {
        "name": "Checkout",
        "type": "API",
        "steps": ["POST /cart"],
        "status": "PASSED",
        "results": [{"file": "a.spec.js", "status": "PASSED", "output": "ok"}],
        "totalFiles": 1,
        "passedFiles": 1,
        "failedFiles": 0,
        "skippedFiles": 0,
    }
