from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

_DEBUG_ENV_VALUES = {"1", "true", "yes", "on"}
_METADATA_ATTRS = ("response_id", "conversation_id", "model_id", "created_at", "finish_reason")


def debug_metadata_enabled(env: Optional[Mapping[str, str]] = None) -> bool:
    source = os.environ if env is None else env
    value = source.get("AGENT_FRAMEWORK_DEBUG_METADATA", "")
    return value.strip().lower() in _DEBUG_ENV_VALUES


def _stringify(value: Any) -> Any:
    """Best-effort conversion of chat client objects into JSON-friendly data."""
    if value is None:
        return None
    if hasattr(value, "to_dict") and callable(value.to_dict):
        try:
            return value.to_dict(exclude_none=True)
        except TypeError:
            return value.to_dict()
    if isinstance(value, (list, tuple, set)):
        return [_stringify(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _stringify(val) for key, val in value.items() if val is not None}
    if isinstance(value, (str, int, float, bool)):
        return value
    return repr(value)


def collect_response_metadata(response: Any) -> Dict[str, Any]:
    metadata: Dict[str, Any] = {}
    for attr in _METADATA_ATTRS:
        value = getattr(response, attr, None)
        if value is not None:
            metadata[attr] = _stringify(value)

    usage = getattr(response, "usage_details", None)
    if usage is not None:
        usage_dict = _stringify(usage)
        if usage_dict:
            metadata["usage"] = usage_dict

    messages = getattr(response, "messages", None)
    if isinstance(messages, list):
        metadata["message_count"] = len(messages)
    return metadata


def log_provider_response(
    label: str,
    response: Any,
    *,
    logger: logging.Logger,
    force: bool = False,
) -> None:
    """Log metadata for one chat completion when diagnostics are enabled."""
    if not (force or debug_metadata_enabled()):
        return

    if response is None:
        logger.info("[%s] Provider response is None; no metadata available.", label)
        return

    metadata = collect_response_metadata(response)
    logger.info("[%s] Provider response metadata: %s", label, json.dumps(metadata, default=str))
