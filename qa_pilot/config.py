from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

_TRUTHY_VALUES = {"1", "true", "yes", "on"}


def _flag(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY_VALUES


def _optional(env: Mapping[str, str], name: str) -> Optional[str]:
    value = env.get(name, "").strip()
    return value or None


@dataclass(frozen=True)
class LlmSettings:
    anthropic_endpoint: Optional[str] = None
    anthropic_deployment: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    azure_endpoint: Optional[str] = None
    azure_api_key: Optional[str] = None
    azure_deployment: Optional[str] = None
    azure_api_version: str = "2024-12-01-preview"
    temperature: float = 0.2
    max_tokens: int = 3200

    @property
    def anthropic_configured(self) -> bool:
        return bool(self.anthropic_endpoint and self.anthropic_deployment and self.anthropic_api_key)

    @property
    def azure_configured(self) -> bool:
        return bool(self.azure_endpoint and self.azure_deployment and self.azure_api_key)


@dataclass(frozen=True)
class Settings:
    test_mode: bool = False
    tests_dir: Path = Path("tests-generated")
    plans_dir: Path = Path("test-plans")
    results_dir: Path = Path("results")
    spec_timeout_seconds: float = 60
    simulated_delay_seconds: float = 0.0
    llm: LlmSettings = LlmSettings()


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from ``env`` (the process environment by default)."""
    source = os.environ if env is None else env
    llm = LlmSettings(
        anthropic_endpoint=_optional(source, "ANTHROPIC_FOUNDRY_ENDPOINT"),
        anthropic_deployment=_optional(source, "ANTHROPIC_FOUNDRY_DEPLOYMENT"),
        anthropic_api_key=_optional(source, "ANTHROPIC_FOUNDRY_API_KEY"),
        azure_endpoint=_optional(source, "AZURE_OPENAI_ENDPOINT"),
        azure_api_key=_optional(source, "AZURE_OPENAI_KEY"),
        azure_deployment=_optional(source, "AZURE_OPENAI_DEPLOYMENT"),
        azure_api_version=source.get("AZURE_OPENAI_API_VERSION", "2024-12-01-preview"),
        temperature=float(source.get("LLM_TEMPERATURE", "0.2")),
        max_tokens=int(source.get("LLM_MAX_TOKENS", "3200")),
    )
    return Settings(
        test_mode=_flag(source, "TEST_MODE"),
        tests_dir=Path(source.get("QA_PILOT_TESTS_DIR", "tests-generated")),
        plans_dir=Path(source.get("QA_PILOT_PLANS_DIR", "test-plans")),
        results_dir=Path(source.get("QA_PILOT_RESULTS_DIR", "results")),
        spec_timeout_seconds=float(source.get("QA_PILOT_SPEC_TIMEOUT", "60")),
        simulated_delay_seconds=float(source.get("QA_PILOT_SIMULATED_DELAY", "0")),
        llm=llm,
    )
