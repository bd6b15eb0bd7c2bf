"""Command line error handling tests."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("agent_framework")

from qa_pilot.cli import main  # noqa: E402
from qa_pilot.plan_cache import PlanCache  # noqa: E402


def test_corrupt_cached_plan_exits_with_error_code(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    plans_dir = tmp_path / "plans"
    monkeypatch.setenv("QA_PILOT_PLANS_DIR", str(plans_dir))
    monkeypatch.setenv("QA_PILOT_RESULTS_DIR", str(tmp_path / "results"))
    monkeypatch.setenv("QA_PILOT_TESTS_DIR", str(tmp_path / "tests-generated"))
    target = PlanCache(plans_dir).path_for("Validate login")
    target.parent.mkdir(parents=True)
    target.write_bytes(b"\xff\xfe")

    with pytest.raises(SystemExit) as excinfo:
        main(["execute", "Validate login", "--simulate"])

    assert excinfo.value.code == 1
    assert "not a valid cache entry" in caplog.text
