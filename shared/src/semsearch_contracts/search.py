"""Semantic search contracts for `POST /api/semantic_search`."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SearchQuery(BaseModel):
    query: str
    limit: int = Field(default=5, ge=1)
    similarity_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    synthesize: bool = True


class SearchResult(BaseModel):
    success: bool = True
    query: str | None = None
    # Opaque to the router; only counted and passed through.
    matches: list[Any] | None = None
    total_matches: int | None = None
    # Backend-chosen strategy label (local, external, hybrid, ...).
    source: str | None = None
    reasoning: str | None = None
    synthesized_answer: str | None = None
    synthesis_sources: list[str] | None = None
    synthesis_model: str | None = None
    message: str | None = None
