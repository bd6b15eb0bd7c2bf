"""Mock provider and response metadata tests."""

from __future__ import annotations

import asyncio
import json
import logging
from types import SimpleNamespace

import pytest

from qa_pilot.agent_debug import collect_response_metadata, debug_metadata_enabled, log_provider_response
from qa_pilot.mock_llm_client import MockProvider
from qa_pilot.prompts import API_TEST_SYSTEM_PROMPT, PLANNER_SYSTEM_PROMPT, UI_TEST_SYSTEM_PROMPT


@pytest.mark.parametrize(
    "system_prompt,expected_key",
    [
        (PLANNER_SYSTEM_PROMPT, "plan"),
        (UI_TEST_SYSTEM_PROMPT, "ui"),
        (API_TEST_SYSTEM_PROMPT, "api"),
    ],
)
def test_mock_provider_routes_by_system_prompt(system_prompt: str, expected_key: str) -> None:
    provider = MockProvider()

    reply = asyncio.run(
        provider.complete([{"role": "system", "content": system_prompt}, {"role": "user", "content": "g"}])
    )

    assert reply == provider.replies[expected_key]


def test_mock_provider_default_reply_is_json() -> None:
    reply = asyncio.run(MockProvider().complete([{"role": "user", "content": "hello"}]))

    assert "message" in json.loads(reply)


def test_debug_metadata_flag() -> None:
    assert debug_metadata_enabled({"AGENT_FRAMEWORK_DEBUG_METADATA": "True"})
    assert not debug_metadata_enabled({})


def test_collect_response_metadata() -> None:
    response = SimpleNamespace(
        response_id="resp-1",
        model_id="claude",
        usage_details={"input_token_count": 12, "output_token_count": None},
        messages=[object(), object()],
    )

    metadata = collect_response_metadata(response)

    assert metadata == {
        "response_id": "resp-1",
        "model_id": "claude",
        "usage": {"input_token_count": 12},
        "message_count": 2,
    }


def test_log_provider_response_when_forced(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("provider_test")

    with caplog.at_level(logging.INFO, logger="provider_test"):
        log_provider_response("mock", SimpleNamespace(response_id="r"), logger=logger, force=True)

    assert "Provider response metadata" in caplog.text
    assert '"response_id": "r"' in caplog.text
