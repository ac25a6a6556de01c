"""Schema export helpers.

This module is intentionally small and dependency-free beyond Pydantic.
It can be used by:
- backend: publish the chat endpoint contract alongside OpenAPI
- frontend: consume JSON Schema for types (codegen)
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from .chat import ChatErrorResponse, ChatRequest, Message
from .ingest import RegistrationRequest, RegistrationResult
from .search import SearchQuery, SearchResult


def export_json_schema() -> dict[str, Any]:
    """Return a single bundled JSON schema for the public contract models."""

    # Prefer a stable, explicit set of models rather than introspecting modules.
    return {
        "title": "semsearch-contracts",
        "models": {
            "ChatRequest": ChatRequest.model_json_schema(),
            "ChatErrorResponse": ChatErrorResponse.model_json_schema(),
            "Message": Message.model_json_schema(),
            "RegistrationRequest": RegistrationRequest.model_json_schema(),
            "RegistrationResult": RegistrationResult.model_json_schema(),
            "SearchQuery": SearchQuery.model_json_schema(),
            "SearchResult": SearchResult.model_json_schema(),
        },
    }


def to_json(schema: dict[str, Any], *, indent: int = 2) -> str:
    """Serialize a schema dict to JSON."""

    return json.dumps(schema, indent=indent, sort_keys=True)


def model_schema(model: type[BaseModel]) -> dict[str, Any]:
    return model.model_json_schema()
