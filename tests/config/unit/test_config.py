"""Settings loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from qa_pilot.config import load_settings


def test_defaults_with_empty_environment() -> None:
    settings = load_settings({})

    assert settings.test_mode is False
    assert settings.tests_dir == Path("tests-generated")
    assert settings.plans_dir == Path("test-plans")
    assert settings.results_dir == Path("results")
    assert settings.spec_timeout_seconds == 60
    assert settings.llm.temperature == pytest.approx(0.2)
    assert settings.llm.max_tokens == 3200
    assert not settings.llm.anthropic_configured
    assert not settings.llm.azure_configured


@pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("false", False), ("", False)])
def test_test_mode_flag(value: str, expected: bool) -> None:
    assert load_settings({"TEST_MODE": value}).test_mode is expected


def test_overrides_and_backend_detection() -> None:
    settings = load_settings(
        {
            "QA_PILOT_TESTS_DIR": "out/tests",
            "QA_PILOT_SPEC_TIMEOUT": "15",
            "ANTHROPIC_FOUNDRY_ENDPOINT": "https://example.invalid/anthropic",
            "ANTHROPIC_FOUNDRY_DEPLOYMENT": "claude",
            "ANTHROPIC_FOUNDRY_API_KEY": "secret",
            "AZURE_OPENAI_ENDPOINT": "https://example.invalid/openai",
            "LLM_MAX_TOKENS": "1024",
        }
    )

    assert settings.tests_dir == Path("out/tests")
    assert settings.spec_timeout_seconds == 15
    assert settings.llm.anthropic_configured
    assert not settings.llm.azure_configured
    assert settings.llm.max_tokens == 1024
