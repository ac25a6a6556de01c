"""Shared contract models (single source of truth).

Minimal re-exports for convenient importing.
"""

from .api_version import API_VERSION
from .chat import ChatErrorResponse, ChatRequest, Message, MessageRole
from .ingest import RegistrationRequest, RegistrationResult
from .search import SearchQuery, SearchResult

__all__ = [
    "API_VERSION",
    "ChatErrorResponse",
    "ChatRequest",
    "Message",
    "MessageRole",
    "RegistrationRequest",
    "RegistrationResult",
    "SearchQuery",
    "SearchResult",
]
