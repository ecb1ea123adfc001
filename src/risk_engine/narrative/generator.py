"""Text-generation collaborators for the narrative explainer.

All network I/O of the narrative step lives here.
"""

from __future__ import annotations

import logging
from typing import Protocol

import anthropic
from anthropic import Anthropic

from risk_engine.exceptions import NarrativeUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_TIMEOUT_S = 20.0


class TextGenerator(Protocol):
    """Anything that turns a prompt into a short piece of text."""

    def generate(self, prompt: str, *, system_prompt: str, max_tokens: int) -> str:
        ...


class AnthropicTextGenerator:
    """TextGenerator backed by the Anthropic Messages API.

    Retries are off by default: a caller-level retry wrapper decides that.
    Every SDK failure surfaces as NarrativeUnavailableError.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        max_retries: int = 0,
        client: Anthropic | None = None,
    ) -> None:
        self.model = model
        self.client = client or Anthropic(
            api_key=api_key, timeout=timeout_s, max_retries=max_retries
        )

    def generate(self, prompt: str, *, system_prompt: str, max_tokens: int) -> str:
        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=max_tokens,
                system=system_prompt,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as exc:
            raise NarrativeUnavailableError(f"Text generation failed: {exc}") from exc

        text = "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        ).strip()
        if not text:
            raise NarrativeUnavailableError("Text generation returned no text")

        logger.debug("Generated %d characters with %s", len(text), self.model)
        return text
