from __future__ import annotations

import pytest

from semsearch_api.services.routing.intent import (
    Help,
    Question,
    Register,
    UnknownCommand,
    classify,
)
from semsearch_contracts.ingest import RegistrationRequest


def _registered(intent: object) -> RegistrationRequest:
    assert isinstance(intent, Register)
    return intent.request


@pytest.mark.parametrize(
    "text",
    [
        "How does the authentication function work?",
        "  leading and trailing spaces are kept  ",
        "what's in https://github.com/o/r (no blob link)?",
        "multi\nline question",
    ],
)
def test_plain_text_is_question_with_original_text(text: str) -> None:
    assert classify(text) == Question(text=text)


@pytest.mark.parametrize("text", ["/help", "  /help", "/help  ", "\n/help\t"])
def test_help_ignores_surrounding_whitespace(text: str) -> None:
    assert classify(text) == Help()


def test_help_with_arguments_is_unknown_command() -> None:
    assert isinstance(classify("/help me"), UnknownCommand)


def test_ingest_full_link_form() -> None:
    req = _registered(classify("/ingest https://github.com/o/r/blob/main/a/b.py"))
    assert req.repo_url == "https://github.com/o/r"
    assert req.file_path == "a/b.py"


def test_ingest_two_token_form_rejoins_path_tokens() -> None:
    req = _registered(classify("/ingest https://github.com/o/r a/b c.py"))
    assert req.repo_url == "https://github.com/o/r"
    assert req.file_path == "a/b c.py"


def test_ingest_two_token_form_collapses_whitespace_runs() -> None:
    req = _registered(classify("/ingest   https://github.com/o/r.git   a/b    c.py  "))
    assert req.repo_url == "https://github.com/o/r"
    assert req.file_path == "a/b c.py"


def test_both_ingest_forms_yield_same_request() -> None:
    full = _registered(classify("/ingest https://github.com/o/r/blob/main/a/b.py"))
    two_token = _registered(classify("/ingest https://github.com/o/r a/b.py"))
    assert full == two_token


@pytest.mark.parametrize(
    "text",
    [
        "/ingest not-a-url",
        "/ingest https://github.com/o/r",
        "/ingest https://github.com/o/r/tree/main a.py",
        "/ingest",
        "/foo",
        "/ingestx https://github.com/o/r a.py",
    ],
)
def test_unparseable_commands_are_unknown(text: str) -> None:
    intent = classify(text)
    assert isinstance(intent, UnknownCommand)
    assert intent.raw == text.strip()


def test_bare_link_in_prose_is_implicit_registration() -> None:
    intent = classify("see https://github.com/o/r/blob/main/x.cpp for details")
    assert isinstance(intent, Register)
    assert intent.implicit is True
    assert intent.request == RegistrationRequest(repo_url="https://github.com/o/r", file_path="x.cpp")


def test_bare_link_drops_trailing_sentence_punctuation() -> None:
    req = _registered(classify("Please look at https://github.com/o/r/blob/dev/src/lib.rs."))
    assert req.file_path == "src/lib.rs"


def test_bare_link_on_other_host_is_canonicalized_to_https() -> None:
    req = _registered(classify("http://GitLab.example.com/team/proj/blob/v1.2/README.md"))
    assert req.repo_url == "https://gitlab.example.com/team/proj"
    assert req.file_path == "README.md"


def test_ingest_full_link_path_may_span_lines() -> None:
    req = _registered(classify("/ingest https://github.com/o/r/blob/main/a\nb.py"))
    assert req.repo_url == "https://github.com/o/r"
    assert req.file_path == "a\nb.py"


@pytest.mark.parametrize(
    "text",
    [
        "/ingest https://github.com/o/.. a.py",
        "/ingest https://github.com/./r a.py",
        "/ingest https://github.com/o/../blob/main/a.py",
    ],
)
def test_dot_only_owner_or_repo_is_unknown_command(text: str) -> None:
    assert isinstance(classify(text), UnknownCommand)


def test_dot_only_repo_in_bare_link_is_question() -> None:
    text = "see https://github.com/o/../blob/main/x.cpp"
    assert classify(text) == Question(text=text)
