"""HTTP client used to invoke the remote functions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from ajoconnect.config import Settings, get_settings

logger = logging.getLogger(__name__)


class FunctionInvocationError(Exception):
    """Error reported by a remote function (non-2xx answer)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True)
class FunctionResponse:
    """Body of a remote function answer, or the error it reported."""

    data: Any = None
    error: FunctionInvocationError | None = None


class FunctionsClient:
    """Invoke remote functions by name with a JSON body.

    Transport failures (connection errors, timeouts) are raised; answers with a
    non-2xx status come back as ``FunctionResponse.error``.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "FunctionsClient":
        settings = settings or get_settings()
        return cls(
            base_url=settings.functions_base_url,
            api_key=settings.functions_api_key,
            timeout_seconds=settings.functions_timeout_seconds,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._api_key:
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def invoke(self, name: str, body: dict[str, Any]) -> FunctionResponse:
        async with httpx.AsyncClient(
            timeout=self._timeout_seconds, transport=self._transport
        ) as client:
            response = await client.post(
                f"{self._base_url}/{name}", json=body, headers=self._headers()
            )

        payload = _decode_body(response)
        if response.is_success:
            return FunctionResponse(data=payload)

        message = None
        if isinstance(payload, dict):
            message = payload.get("error") or payload.get("message")
        if not message:
            message = f"Function {name} returned status {response.status_code}"
        logger.warning(
            "Function %s answered with status %s: %s", name, response.status_code, message
        )
        return FunctionResponse(
            error=FunctionInvocationError(str(message), status_code=response.status_code)
        )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


__all__ = ["FunctionInvocationError", "FunctionResponse", "FunctionsClient"]
