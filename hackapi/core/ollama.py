"""
core/ollama.py – OllamaService class.
Talks to the local Ollama inference server (generate + model list).
"""
import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class OllamaError(RuntimeError):
    """Inference server unreachable, non-2xx, or malformed reply."""


class OllamaService:
    """Thin async wrapper over Ollama's REST API."""

    def __init__(
        self,
        base_url: str = "http://localhost:11434",
        default_model: str = "llama3.2:3b",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self.default_model = default_model
        self._timeout = timeout
        self._transport = transport

    # ── Public API ─────────────────────────────────────────────────────────────

    async def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """POST /api/generate (non-streaming), return the `response` text."""
        model = model or self.default_model
        data = await self._request("POST", "/api/generate", json={
            "model": model,
            "prompt": prompt,
            "stream": False,
        })
        text = data.get("response")
        if not isinstance(text, str):
            raise OllamaError("Ollama reply has no 'response' field")
        logger.info("[Ollama] %s → %d chars", model, len(text))
        return text

    async def list_models(self) -> list[dict]:
        """GET /api/tags → installed models."""
        data = await self._request("GET", "/api/tags")
        models = data.get("models", [])
        if not isinstance(models, list):
            raise OllamaError("Ollama reply has no 'models' list")
        return models

    async def status(self) -> dict:
        """{'status': 'connected'|'disconnected', 'models': [...]} – never raises."""
        try:
            models = await self.list_models()
        except OllamaError as e:
            logger.warning("Ollama not reachable: %s", e)
            return {"status": "disconnected", "models": []}
        return {"status": "connected", "models": models}

    async def is_connected(self) -> bool:
        return (await self.status())["status"] == "connected"

    # ── Private helpers ────────────────────────────────────────────────────────

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> dict:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url, timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise OllamaError(f"Failed to connect to Ollama service ({type(e).__name__})") from e

        if resp.status_code != 200:
            raise OllamaError(f"Ollama {method} {path} failed: {resp.status_code} {resp.reason_phrase}")
        try:
            data = resp.json()
        except ValueError as e:
            raise OllamaError(f"Ollama {path} returned invalid JSON") from e
        if not isinstance(data, dict):
            raise OllamaError(f"Ollama {path} returned unexpected JSON")
        return data
