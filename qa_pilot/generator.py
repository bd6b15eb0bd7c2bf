"""Turn a cached plan into test artifacts on disk through the provider."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List

from .errors import SpecDiscoveryError
from .executors import discover_spec_files
from .materializer import materialize
from .models import Artifact, SuiteType, TestPlan
from .prompts import API_TEST_SYSTEM_PROMPT, UI_TEST_SYSTEM_PROMPT, build_generation_prompt
from .provider import GenerationProvider
from .segmenter import segment

LOGGER = logging.getLogger("test_generator")

SYSTEM_PROMPTS: Dict[SuiteType, str] = {
    SuiteType.UI: UI_TEST_SYSTEM_PROMPT,
    SuiteType.API: API_TEST_SYSTEM_PROMPT,
}


def suite_base_folder(tests_root: Path, suite_type: SuiteType) -> Path:
    return Path(tests_root) / suite_type.folder_name


def existing_spec_files(tests_root: Path, suite_type: SuiteType) -> List[Path]:
    try:
        return discover_spec_files(tests_root, suite_type)
    except SpecDiscoveryError:
        return []


async def generate_tests(
    goal: str,
    plan: TestPlan,
    suite_type: SuiteType,
    provider: GenerationProvider,
    tests_root: Path,
) -> List[Artifact]:
    """Generate and write the artifacts for one suite type.

    A :class:`GenerationError` from the provider propagates since there is
    nothing to write without a reply.
    """
    messages = [
        {"role": "system", "content": SYSTEM_PROMPTS[suite_type]},
        {"role": "user", "content": build_generation_prompt(goal, json.dumps(plan.to_payload(), indent=2))},
    ]
    raw_text = await provider.complete(messages)

    sections = segment(raw_text)
    artifacts = materialize(sections, suite_base_folder(tests_root, suite_type), suite_type)
    LOGGER.info(
        "Generated %d %s artifact(s) for goal '%s'",
        len(artifacts),
        suite_type.value,
        goal,
    )
    return artifacts
