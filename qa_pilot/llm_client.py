"""Generation providers backed by agent-framework chat clients."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from agent_framework import ChatMessage
from agent_framework.anthropic import AnthropicClient
from agent_framework.azure import AzureOpenAIAssistantsClient
from anthropic import AsyncAnthropicFoundry

from .agent_debug import log_provider_response
from .config import LlmSettings, Settings
from .errors import GenerationError
from .mock_llm_client import MockProvider
from .provider import GenerationProvider, Message

LOGGER = logging.getLogger("llm_client")


def extract_text_from_response(response: Any) -> Optional[str]:
    if response is None:
        return None

    text_attr = getattr(response, "text", None)
    if isinstance(text_attr, str) and text_attr.strip():
        return text_attr.strip()

    messages = getattr(response, "messages", None)
    if isinstance(messages, list):
        fragments: List[str] = []
        for message in messages:
            message_text = getattr(message, "text", None)
            if isinstance(message_text, str) and message_text.strip():
                fragments.append(message_text.strip())
                continue
            message_content = getattr(message, "contents", None) or getattr(message, "content", None)
            if isinstance(message_content, list):
                for item in message_content:
                    if isinstance(item, dict):
                        value = item.get("text") or item.get("value")
                        if isinstance(value, str) and value.strip():
                            fragments.append(value.strip())
                    else:
                        item_text = getattr(item, "text", None)
                        if isinstance(item_text, str) and item_text.strip():
                            fragments.append(item_text.strip())
        if fragments:
            return "\n".join(fragments).strip()

    raw = getattr(response, "raw_representation", None)
    if raw is not None and raw is not response:
        return extract_text_from_response(raw)

    return None


def to_chat_messages(messages: Sequence[Message]) -> List[ChatMessage]:
    return [ChatMessage(role=message["role"], text=message["content"]) for message in messages]


class _ChatClientProvider:
    label = "chat"

    def __init__(self, settings: LlmSettings) -> None:
        self.settings = settings

    async def _get_response(self, chat: List[ChatMessage]) -> Any:
        raise NotImplementedError

    async def complete(self, messages: Sequence[Message]) -> str:
        chat = to_chat_messages(messages)
        try:
            response = await self._get_response(chat)
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError(f"{self.label} request failed: {exc}") from exc

        log_provider_response(self.label, response, logger=LOGGER)
        raw_text = extract_text_from_response(response)
        if not raw_text:
            raise GenerationError(f"{self.label} returned an empty response.")
        return raw_text


class AnthropicFoundryProvider(_ChatClientProvider):
    label = "anthropic-foundry"

    def __init__(self, settings: LlmSettings) -> None:
        super().__init__(settings)
        anthropic_client = AsyncAnthropicFoundry(
            api_key=settings.anthropic_api_key,
            base_url=settings.anthropic_endpoint,
        )
        self._client = AnthropicClient(
            model_id=settings.anthropic_deployment,
            anthropic_client=anthropic_client,
        )

    async def _get_response(self, chat: List[ChatMessage]) -> Any:
        return await self._client.get_response(
            chat,
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
        )


class AzureOpenAIProvider(_ChatClientProvider):
    label = "azure-openai"

    def _client_kwargs(self) -> Dict[str, Any]:
        return {
            "endpoint": self.settings.azure_endpoint,
            "deployment_name": self.settings.azure_deployment,
            "api_version": self.settings.azure_api_version,
            "api_key": self.settings.azure_api_key,
        }

    async def _get_response(self, chat: List[ChatMessage]) -> Any:
        async with AzureOpenAIAssistantsClient(**self._client_kwargs()) as client:
            return await client.get_response(
                chat,
                temperature=self.settings.temperature,
                max_tokens=self.settings.max_tokens,
            )


def build_provider(settings: Settings) -> GenerationProvider:
    if settings.test_mode:
        LOGGER.info("TEST_MODE enabled; using the simulated provider.")
        return MockProvider()
    if settings.llm.anthropic_configured:
        LOGGER.info("Using Anthropic Foundry deployment '%s'.", settings.llm.anthropic_deployment)
        return AnthropicFoundryProvider(settings.llm)
    if settings.llm.azure_configured:
        LOGGER.info("Using Azure OpenAI deployment '%s'.", settings.llm.azure_deployment)
        return AzureOpenAIProvider(settings.llm)
    raise GenerationError(
        "No generation backend configured: set ANTHROPIC_FOUNDRY_* or AZURE_OPENAI_* "
        "variables, or TEST_MODE=true."
    )
