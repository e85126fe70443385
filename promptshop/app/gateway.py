"""Boundary to the external text-completion service."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from openai import OpenAI, OpenAIError

from promptshop.app.common.errors import GatewayError

logger = logging.getLogger(__name__)


class ModelGateway(ABC):
    @abstractmethod
    def complete(self, prompt: str) -> str:
        """Freeform text answer for ``prompt``."""

    @abstractmethod
    def complete_json(self, prompt: str, schema: Dict[str, Any], name: str = "shop") -> str:
        """JSON text answer for ``prompt``, constrained to ``schema``."""


class OpenAIGateway(ModelGateway):
    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
        timeout: float = 60.0,
        max_retries: int = 1,
        client: Optional[OpenAI] = None,
    ):
        self.model = model
        self.temperature = temperature
        self._api_key = api_key
        self._timeout = timeout
        self._max_retries = max_retries
        self._client = client

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "OpenAIGateway":
        return cls(
            api_key=config["OPENAI_API_KEY"],
            model=config["OPENAI_MODEL"],
            temperature=config["OPENAI_TEMPERATURE"],
            timeout=config["OPENAI_TIMEOUT"],
            max_retries=config["OPENAI_MAX_RETRIES"],
        )

    @property
    def client(self) -> OpenAI:
        # Built on first use so the app starts without a key (health checks, cached views).
        if self._client is None:
            self._client = OpenAI(api_key=self._api_key or None, timeout=self._timeout, max_retries=self._max_retries)
        return self._client

    def complete(self, prompt: str) -> str:
        return self._chat(prompt)

    def complete_json(self, prompt: str, schema: Dict[str, Any], name: str = "shop") -> str:
        return self._chat(
            prompt,
            response_format={"type": "json_schema", "json_schema": {"name": name, "schema": schema}},
        )

    def _chat(self, prompt: str, **extra: Any) -> str:
        t0 = time.perf_counter()
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                **extra,
            )
        except OpenAIError as exc:
            logger.error("Completion request failed: %s", exc)
            raise GatewayError(f"Completion request failed: {exc}", {"model": self.model}) from exc
        finally:
            logger.info("Execution time: %.2f seconds", time.perf_counter() - t0)
        return response.choices[0].message.content or ""
