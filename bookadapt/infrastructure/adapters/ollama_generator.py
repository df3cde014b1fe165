"""Ollama adapter for the text-generation port."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from ...application.ports.text_generator import (
    GenerationOptions,
    GenerationResult,
    TextGeneratorPort,
)
from ...domain.errors import BackendError, BackendUnavailable

logger = logging.getLogger(__name__)

HEALTH_TIMEOUT_SECONDS = 5.0


def _error_detail(response: httpx.Response) -> str:
    """Best-effort error message from an Ollama error response."""
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip() or response.reason_phrase
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    return response.reason_phrase


class OllamaGeneratorAdapter(TextGeneratorPort):
    """Calls a local Ollama server (``/api/generate``) without streaming."""

    def __init__(self, *, base_url: str = "http://127.0.0.1:11434") -> None:
        self._base_url = base_url.rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def generate(
        self,
        prompt: str,
        *,
        model: str,
        timeout_seconds: float,
        options: GenerationOptions | None = None,
    ) -> GenerationResult:
        options = options or GenerationOptions()
        sampling: dict[str, Any] = {
            "temperature": options.temperature,
            "num_predict": options.max_tokens,
        }

        start_time = time.time()
        try:
            response = httpx.post(
                f"{self._base_url}/api/generate",
                json={
                    "model": model,
                    "prompt": prompt,
                    "stream": False,
                    "options": sampling,
                },
                timeout=timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BackendError(exc.response.status_code, _error_detail(exc.response)) from exc
        except httpx.HTTPError as exc:
            raise BackendUnavailable(self._base_url, f"{type(exc).__name__}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise BackendError(None, f"Invalid generate payload: {exc}") from exc
        if not isinstance(payload, dict):
            raise BackendError(None, "Invalid generate payload: expected a JSON object")

        text = payload.get("response")
        duration = time.time() - start_time
        logger.debug(
            f"Ollama generate finished in {duration:.1f}s",
            extra={"model": model, "eval_count": payload.get("eval_count")},
        )
        return GenerationResult(
            text=text if isinstance(text, str) else "",
            model=str(payload.get("model") or model),
            duration_seconds=duration,
        )

    def list_models(self) -> list[str]:
        """
        Names of the models installed on the server (``/api/tags``).

        Raises:
            BackendUnavailable: If the server cannot be reached
            BackendError: If the server answers with an error or a malformed body
        """
        try:
            response = httpx.get(f"{self._base_url}/api/tags", timeout=HEALTH_TIMEOUT_SECONDS)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise BackendError(exc.response.status_code, _error_detail(exc.response)) from exc
        except httpx.HTTPError as exc:
            raise BackendUnavailable(self._base_url, f"{type(exc).__name__}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise BackendError(None, f"Invalid tags payload: {exc}") from exc
        models = payload.get("models") if isinstance(payload, dict) else None
        if not isinstance(models, list):
            raise BackendError(None, "Invalid tags payload: missing models")
        return [m["name"] for m in models if isinstance(m, dict) and isinstance(m.get("name"), str)]

    def is_available(self) -> bool:
        try:
            response = httpx.get(f"{self._base_url}/api/tags", timeout=HEALTH_TIMEOUT_SECONDS)
        except httpx.HTTPError as exc:
            logger.debug(f"Ollama health check failed: {exc}")
            return False
        logger.debug(f"Ollama health check status: {response.status_code}")
        return response.is_success
