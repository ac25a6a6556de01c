"""HTTP client for the retrieval backend.

Operations:
- `POST /api/ingest/file`        -> RegistrationResult
- `POST /api/semantic_search`    -> SearchResult

Failure convention of the backend: a non-2xx status, or a JSON body with
`success: false`, optionally carrying a string `detail`.

This module raises `RetrievalError` for every failure so callers have a single
exception type to catch. No retries are attempted.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from semsearch_contracts.ingest import RegistrationRequest, RegistrationResult
from semsearch_contracts.search import SearchQuery, SearchResult

from ..settings.config import RetrievalSettings

logger = logging.getLogger(__name__)

INGEST_FILE_PATH = "/api/ingest/file"
SEMANTIC_SEARCH_PATH = "/api/semantic_search"

_ResultT = TypeVar("_ResultT", bound=BaseModel)


@dataclass
class RetrievalError(RuntimeError):
    """Raised when a retrieval backend call fails.

    Codes:
    - transport: network error before a response arrived
    - timeout: no response within the configured timeout
    - http_status: non-2xx status
    - backend_failure: 2xx with `success: false`
    - invalid_response: body is not JSON or does not fit the contract
    """

    code: str
    message: str = ""
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message or self.code


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _detail_of(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if isinstance(detail, str) and detail.strip():
        return detail
    return None


class RetrievalClient:
    """Thin synchronous client; create one per request and close it afterwards."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: RetrievalSettings) -> RetrievalClient:
        return cls(settings.api_url, timeout=settings.timeout_seconds)

    def __enter__(self) -> RetrievalClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def ingest_file(self, request: RegistrationRequest) -> RegistrationResult:
        return self._post(INGEST_FILE_PATH, request, RegistrationResult)

    def semantic_search(self, query: SearchQuery) -> SearchResult:
        return self._post(SEMANTIC_SEARCH_PATH, query, SearchResult)

    def _post(self, path: str, payload: BaseModel, result_type: type[_ResultT]) -> _ResultT:
        t0 = time.perf_counter()
        logger.info("retrieval.call start op=%s base_url=%s", path, self.base_url)

        try:
            response = self._http.post(path, json=payload.model_dump(mode="json"))
        except httpx.TimeoutException as e:
            logger.warning("retrieval.call timeout op=%s", path)
            raise RetrievalError("timeout", f"Retrieval service timed out ({path})") from e
        except httpx.HTTPError as e:
            logger.warning("retrieval.call transport_error op=%s error=%s", path, type(e).__name__)
            raise RetrievalError("transport", f"Could not reach retrieval service: {e}") from e

        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        logger.info(
            "retrieval.call end op=%s status=%s elapsed_ms=%s",
            path,
            response.status_code,
            elapsed_ms,
        )

        body = _json_body(response)

        if not response.is_success:
            raise RetrievalError(
                "http_status",
                _detail_of(body) or f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(body, dict):
            raise RetrievalError(
                "invalid_response",
                f"Retrieval service returned a non-JSON response (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        if body.get("success") is False:
            message = _detail_of(body) or str(body.get("message") or "") or "Retrieval service reported a failure"
            raise RetrievalError("backend_failure", message, status_code=response.status_code)

        try:
            return result_type.model_validate(body)
        except ValidationError as e:
            raise RetrievalError(
                "invalid_response",
                f"Retrieval service response did not match {result_type.__name__}: {e.error_count()} error(s)",
                status_code=response.status_code,
            ) from e
