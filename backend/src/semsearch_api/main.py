"""FastAPI app entrypoint."""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from semsearch_contracts.api_version import API_VERSION
from semsearch_contracts.chat import ChatErrorResponse

from .logging_config import configure_logging

# Load .env files if present (local dev convenience). In production, prefer real env vars.
from .services.settings.env import load_env
from .services.settings.config import cors_allow_origins

from .api.v1.chat import router as chat_router


def _build_v1_router() -> APIRouter:
    v1 = APIRouter(prefix="/api/v1")

    @v1.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "api_version": API_VERSION}

    v1.include_router(chat_router)
    return v1


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed chat bodies are reported like an empty history: 400 + ChatErrorResponse.
    body = ChatErrorResponse(
        error="Invalid request body",
        detail=[{"loc": list(err.get("loc", ())), "msg": err.get("msg", "")} for err in exc.errors()],
    )
    return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))


load_env()
configure_logging()

app = FastAPI(title="SemSearch Chat Router", version=API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, _request_validation_handler)

app.include_router(_build_v1_router())
