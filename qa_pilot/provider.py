from __future__ import annotations

from typing import Dict, Protocol, Sequence

Message = Dict[str, str]


class GenerationProvider(Protocol):
    """Anything that turns role-tagged messages into one text completion."""

    async def complete(self, messages: Sequence[Message]) -> str:
        ...
