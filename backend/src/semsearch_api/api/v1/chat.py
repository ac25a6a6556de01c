"""Chat endpoint (v1).

Endpoints:
- POST `/api/v1/chat` submit a chat turn; returns one assistant Message

Request validation failures (missing/empty history, blank last message) and
unexpected internal faults are answered with `ChatErrorResponse` instead of a chat
turn. Everything else, including retrieval backend failures, is a normal reply.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from semsearch_contracts.chat import ChatErrorResponse, ChatRequest, Message

from ...services.retrieval.client import RetrievalClient
from ...services.routing.dispatcher import respond
from ...services.routing.replies import describe_failure
from ...services.settings.config import RetrievalSettings, load_retrieval_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def get_settings() -> RetrievalSettings:
    return load_retrieval_settings()


def get_retrieval_client(
    settings: RetrievalSettings = Depends(get_settings),
) -> Iterator[RetrievalClient]:
    with RetrievalClient.from_settings(settings) as client:
        yield client


def _error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ChatErrorResponse(error=error).model_dump(exclude_none=True),
    )


@router.post(
    "",
    response_model=Message,
    responses={400: {"model": ChatErrorResponse}, 500: {"model": ChatErrorResponse}},
)
def submit_chat_turn(
    req: ChatRequest,
    client: RetrievalClient = Depends(get_retrieval_client),
    settings: RetrievalSettings = Depends(get_settings),
):
    if not req.messages:
        return _error(400, "No messages provided")

    last = req.messages[-1]
    if not last.content.strip():
        return _error(400, "Last message is empty")

    try:
        return respond(last.content, client=client, settings=settings)
    except Exception as e:
        logger.exception("chat.submit unexpected failure history_len=%s", len(req.messages))
        return _error(500, describe_failure(e))
