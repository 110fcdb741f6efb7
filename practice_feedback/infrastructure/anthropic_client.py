"""Summary Text Client: wraps the Anthropic SDK with error mapping and reply extraction.

Invariants:
    - Exactly one API call per complete(); SDK retries disabled (max_retries=0)
    - Timeout applied only when configured, otherwise the SDK default
    - Every failure surfaces as SummaryServiceError (core/errors.py), including
      replies without a text block or with blank text
    - Returned text is stripped

Design Decisions:
    - Wrapper over raw client: isolates SDK types from the summary generator
    - AsyncAnthropicBedrock for provider "bedrock": same Messages API, AWS
      default credential chain (env vars, ~/.aws, instance role)
    - top_p sent only when configured: newer models reject it alongside temperature
"""

import logging

import anthropic
from anthropic import (
    APIError,
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    RateLimitError,
)

from practice_feedback.config import Settings
from practice_feedback.core.errors import SummaryServiceError

logger = logging.getLogger(__name__)


class SummaryTextClient:
    """Single-prompt completion over an async Anthropic (or Bedrock) client."""

    def __init__(self, client: anthropic.AsyncAnthropic | anthropic.AsyncAnthropicBedrock):
        self.client = client

    async def complete(
        self,
        prompt: str,
        *,
        model: str,
        max_tokens: int,
        temperature: float,
        top_p: float | None = None,
    ) -> str:
        """Send `prompt` as one user message and return the first text block."""
        params: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if top_p is not None:
            params["top_p"] = top_p

        try:
            response = await self.client.messages.create(**params)
        except APITimeoutError:
            raise SummaryServiceError("API timeout", "timeout")
        except RateLimitError as e:
            raise SummaryServiceError(f"Rate limit exceeded: {e}", "rate_limit")
        except APIConnectionError as e:
            raise SummaryServiceError(f"Connection error: {e}", "connection_error")
        except APIStatusError as e:
            raise SummaryServiceError(
                f"API returned status {e.status_code}: {e.message}", "status_error",
            )
        except APIError as e:
            raise SummaryServiceError(str(e), "client_error")

        self._log_success(response)
        return _extract_text(response)

    def _log_success(self, response) -> None:
        usage = getattr(response, "usage", None)
        logger.info(
            "Summary model call succeeded",
            extra={
                "input_tokens": getattr(usage, "input_tokens", None),
                "output_tokens": getattr(usage, "output_tokens", None),
            },
        )


def _extract_text(response) -> str:
    """First text block of a Messages API reply. Raises on anything else."""
    content = getattr(response, "content", None)
    if not content:
        raise SummaryServiceError("No content in model reply", "empty_reply")
    for block in content:
        if getattr(block, "type", None) == "text":
            text = (getattr(block, "text", None) or "").strip()
            if not text:
                break
            return text
    raise SummaryServiceError("No text output in model reply", "empty_reply")


def build_text_client(settings: Settings) -> SummaryTextClient:
    """Construct the SDK client selected by settings.summary_provider."""
    options: dict = {"max_retries": 0}
    if settings.anthropic_timeout_seconds is not None:
        options["timeout"] = settings.anthropic_timeout_seconds

    if settings.summary_provider == "bedrock":
        client = anthropic.AsyncAnthropicBedrock(
            aws_region=settings.aws_region, **options,
        )
    else:
        client = anthropic.AsyncAnthropic(
            api_key=settings.anthropic_api_key, **options,
        )
    logger.info(f"Summary client ready (provider={settings.summary_provider})")
    return SummaryTextClient(client)
