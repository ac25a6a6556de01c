from __future__ import annotations

import json

from semsearch_contracts.chat import ChatErrorResponse, ChatRequest, Message, MessageRole
from semsearch_contracts.ingest import RegistrationRequest, RegistrationResult
from semsearch_contracts.schema_export import export_json_schema
from semsearch_contracts.search import SearchQuery, SearchResult


def dump(title: str, obj) -> None:
    print(f"\n# {title}")
    if hasattr(obj, "model_dump"):
        print(json.dumps(obj.model_dump(mode="json"), indent=2, sort_keys=True))
    else:
        print(json.dumps(obj, indent=2, sort_keys=True))


def main() -> None:
    # Chat turn
    chat_req = ChatRequest(
        messages=[
            Message(role=MessageRole.assistant, content="Welcome!"),
            Message(role=MessageRole.user, content="/ingest https://github.com/owner/repo src/main.py"),
        ]
    )
    dump("chat.request", chat_req)
    dump("chat.error", ChatErrorResponse(error="No messages provided"))

    # Registration
    reg_req = RegistrationRequest(repo_url="https://github.com/owner/repo", file_path="src/main.py")
    reg_res = RegistrationResult(
        success=True,
        repo_url=reg_req.repo_url,
        file_path=reg_req.file_path,
        summary="Entry point that wires the CLI to the parser.",
        embedding_dimensions=1536,
        inserted_id="665f1c0e9b1e8a0012345678",
        message="File ingested",
    )
    dump("ingest.request", reg_req)
    dump("ingest.result", reg_res)

    # Semantic search
    search_req = SearchQuery(query="How does the parser handle errors?")
    search_res = SearchResult(
        success=True,
        query=search_req.query,
        matches=[{"file_path": "src/parser.py", "score": 0.83}],
        total_matches=1,
        source="local",
        reasoning="Question refers to ingested code.",
        synthesized_answer="The parser raises ParseError with the offending token.",
        synthesis_sources=["src/parser.py"],
        synthesis_model="haiku",
        message="ok",
    )
    dump("search.request", search_req)
    dump("search.result", search_res)

    dump("schema.models", sorted(export_json_schema()["models"].keys()))


if __name__ == "__main__":
    main()
