"""Dispatch one classified chat message to the retrieval backend.

Guarantees:
- Always returns exactly one assistant Message.
- Backend and transport failures become failure-styled replies; they never propagate.
- Holds no state between calls.
"""

from __future__ import annotations

import logging

from semsearch_contracts.chat import Message, MessageRole
from semsearch_contracts.search import SearchQuery

from ..retrieval.client import RetrievalClient, RetrievalError
from ..settings.config import RetrievalSettings
from . import replies
from .intent import Help, Intent, Question, Register, UnknownCommand, classify, intent_name

logger = logging.getLogger(__name__)


def _assistant(content: str) -> Message:
    return Message(role=MessageRole.assistant, content=content)


def _register(intent: Register, client: RetrievalClient) -> Message:
    req = intent.request
    logger.info(
        "chat.register repo_url=%s file_path_chars=%s implicit=%s",
        req.repo_url,
        len(req.file_path),
        intent.implicit,
    )
    try:
        result = client.ingest_file(req)
    except RetrievalError as e:
        logger.warning("chat.register failed code=%s status=%s", e.code, e.status_code)
        return _assistant(replies.registration_failed(e, implicit=intent.implicit))
    return _assistant(replies.registration_succeeded(result))


def _search(intent: Question, client: RetrievalClient, settings: RetrievalSettings) -> Message:
    query = SearchQuery(
        query=intent.text,
        limit=settings.search_limit,
        similarity_threshold=settings.similarity_threshold,
        synthesize=settings.synthesize,
    )
    try:
        result = client.semantic_search(query)
    except RetrievalError as e:
        logger.warning("chat.search failed code=%s status=%s", e.code, e.status_code)
        return _assistant(replies.search_failed(e))

    logger.info(
        "chat.search done source=%s total_matches=%s synthesized=%s",
        result.source,
        result.total_matches,
        bool(result.synthesized_answer),
    )
    return _assistant(replies.search_answer(result))


def dispatch(intent: Intent, *, client: RetrievalClient, settings: RetrievalSettings) -> Message:
    if isinstance(intent, Help):
        return _assistant(replies.HELP_TEXT)
    if isinstance(intent, UnknownCommand):
        return _assistant(replies.UNKNOWN_COMMAND_TEXT)
    if isinstance(intent, Register):
        return _register(intent, client)
    if isinstance(intent, Question):
        return _search(intent, client, settings)
    raise TypeError(f"Unhandled intent: {intent!r}")


def respond(message: str, *, client: RetrievalClient, settings: RetrievalSettings) -> Message:
    """Classify the latest user message and produce the assistant reply."""

    intent = classify(message)
    logger.info("chat.classified intent=%s message_chars=%s", intent_name(intent), len(message))
    return dispatch(intent, client=client, settings=settings)
