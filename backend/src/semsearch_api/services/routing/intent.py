from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union

from semsearch_contracts.ingest import RegistrationRequest

from .links import find_file_link, parse_ingest_args


HELP_COMMAND: Final[str] = "/help"
INGEST_PREFIX: Final[str] = "/ingest "


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Register:
    request: RegistrationRequest
    # True when the link was picked out of a plain message rather than `/ingest`.
    implicit: bool = False


@dataclass(frozen=True)
class UnknownCommand:
    raw: str


@dataclass(frozen=True)
class Question:
    text: str


Intent = Union[Help, Register, UnknownCommand, Question]


def intent_name(intent: Intent) -> str:
    return type(intent).__name__.lower()


def classify(message: str) -> Intent:
    """Classify one chat message.

    Order matters:
    - `/help` (exact, surrounding whitespace ignored)
    - `/ingest <args>` parsed by the link grammar; unparseable args are an unknown command
    - any other `/...` is an unknown command
    - a file link anywhere in plain text is an implicit registration
    - everything else is a question, passed through unmodified

    Callers must reject empty/blank messages before calling this.
    """

    stripped = message.strip()

    if stripped.startswith("/"):
        if stripped == HELP_COMMAND:
            return Help()
        if stripped.startswith(INGEST_PREFIX):
            request = parse_ingest_args(stripped[len(INGEST_PREFIX):])
            if request is not None:
                return Register(request=request)
        return UnknownCommand(raw=stripped)

    request = find_file_link(message)
    if request is not None:
        return Register(request=request, implicit=True)

    return Question(text=message)
