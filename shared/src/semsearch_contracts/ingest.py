"""Registration (ingestion) contracts for `POST /api/ingest/file`."""

from __future__ import annotations

import re

from pydantic import BaseModel, field_validator


_CANONICAL_REPO_URL = re.compile(r"^https://[^/\s]+/[\w.-]+/[\w.-]+$")


class RegistrationRequest(BaseModel):
    repo_url: str
    file_path: str

    @field_validator("repo_url")
    @classmethod
    def _canonical_repo_url(cls, v: str) -> str:
        # Owner and repo made only of dots (".", "..") are path traversal, not names.
        if not _CANONICAL_REPO_URL.match(v) or any(not seg.strip(".") for seg in v.split("/")[3:]):
            raise ValueError(f"repo_url must look like https://<host>/<owner>/<repo>: {v!r}")
        return v

    @field_validator("file_path")
    @classmethod
    def _non_empty_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("file_path must not be empty")
        return v


class RegistrationResult(BaseModel):
    success: bool = True
    # Backends may send null for any of these on success; only `success` decides failure.
    repo_url: str | None = None
    file_path: str | None = None
    summary: str | None = None
    embedding_dimensions: int | None = None
    inserted_id: str | None = None
    message: str | None = None
