from __future__ import annotations

from semsearch_contracts.chat import Message, MessageRole

from semsearch_api.logging_config import configure_logging
from semsearch_api.services.retrieval.client import RetrievalClient
from semsearch_api.services.routing.dispatcher import respond
from semsearch_api.services.settings.config import load_retrieval_settings
from semsearch_api.services.settings.env import load_env


WELCOME = (
    "Welcome! Ingest a file with `/ingest <repo_url> <file_path>` or a full file link, "
    "then ask questions about it. Type /help for details, Ctrl-D to quit."
)


def main() -> None:
    # Talks to the retrieval service configured by RETRIEVAL_API_URL (see .env).
    load_env()
    configure_logging()
    settings = load_retrieval_settings()

    transcript: list[Message] = [Message(role=MessageRole.assistant, content=WELCOME)]
    print(WELCOME)

    while True:
        try:
            line = input("\n> ")
        except EOFError:
            print()
            break
        if not line.strip():
            continue

        transcript.append(Message(role=MessageRole.user, content=line))
        with RetrievalClient.from_settings(settings) as client:
            reply = respond(transcript[-1].content, client=client, settings=settings)
        transcript.append(reply)
        print(f"\n{reply.content}")


if __name__ == "__main__":
    main()
