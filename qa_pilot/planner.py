from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from .errors import GenerationError
from .models import TestPlan
from .prompts import PLANNER_SYSTEM_PROMPT
from .provider import GenerationProvider
from .sanitizer import extract_json_object

LOGGER = logging.getLogger("test_planner")


def parse_plan(raw_text: str, goal: str) -> Optional[TestPlan]:
    """Decode the first JSON object in a planner reply, or ``None`` if there is none."""
    payload: Any = extract_json_object(raw_text)
    if not isinstance(payload, dict):
        return None
    try:
        plan = TestPlan.model_validate(payload)
    except ValidationError as exc:
        LOGGER.error("Planner reply does not describe a test plan: %s", exc)
        return None
    if not plan.goal:
        plan.goal = goal
    return plan


async def plan_tests(goal: str, provider: GenerationProvider) -> TestPlan:
    """Ask the provider for a plan; any failure degrades to an empty plan."""
    messages = [
        {"role": "system", "content": PLANNER_SYSTEM_PROMPT},
        {"role": "user", "content": goal},
    ]
    try:
        raw_text = await provider.complete(messages)
    except GenerationError as exc:
        LOGGER.error("Plan generation failed: %s", exc)
        return TestPlan(goal=goal, test_suites=[])

    plan = parse_plan(raw_text, goal)
    if plan is None:
        LOGGER.error("Failed to parse planner output: %s", raw_text[:500])
        return TestPlan(goal=goal, test_suites=[])

    LOGGER.info("Planned %d suite(s) for goal '%s'", len(plan.test_suites), goal)
    return plan
