"""Boundary Protocols: contracts between services and external adapters.

Invariants:
    - Services depend on these Protocols, never on SDK classes
    - Implementations provided by infrastructure/ and injected by create_app()

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol


class TextCompletionClient(Protocol):
    """Single-prompt text generation. Raises SummaryServiceError on any failure."""

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        max_tokens: int,
        temperature: float,
        top_p: float | None = None,
    ) -> str: ...
