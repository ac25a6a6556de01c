"""Reply texts for the chat router.

Everything here is pure string formatting so replies can be tested without a
backend. Failures are always rendered through `describe_failure`.
"""

from __future__ import annotations

from typing import Final

import httpx

from semsearch_contracts.ingest import RegistrationResult
from semsearch_contracts.search import SearchResult

from ..retrieval.client import RetrievalError


FAILURE_MARKER: Final[str] = "❌"
MAX_FOOTER_SOURCES: Final[int] = 3

HELP_TEXT: Final[str] = """# 🚀 SemSearch AI - How It Works

**SemSearch AI** helps you explore and understand code repositories by asking questions about files you have ingested.

## 📥 Ingesting Code

Use the `/ingest` command to add a file to the knowledge base:

- `/ingest https://github.com/owner/repo/blob/main/src/main.cpp`
- `/ingest https://github.com/owner/repo src/main.cpp`

Pasting a file link into a normal message works too.

**What happens during ingestion:**
1. **Fetches** the file from the repository
2. **Summarizes** the code
3. **Creates embeddings** for the summary and code
4. **Stores** them in a vector search index

## 🔍 Search Strategies

When you ask a question, the retrieval service picks a search strategy:

### 1️⃣ Local
- Searches only your **ingested code** using vector similarity
- Best for: questions about specific code you've ingested

### 2️⃣ External
- Searches **external documentation** and web resources
- Best for: general programming concepts, syntax, library docs

### 3️⃣ Hybrid
- Searches **both** your ingested code and external sources
- Best for: questions that need both context and documentation

## ✨ Answer Synthesis

Results are combined into a natural language answer that cites its sources (file paths or web URLs).
The footer under each answer shows which strategy was used and why.

## 🎯 Tips
- **Ingest multiple files** to build a comprehensive knowledge base
- **Ask specific questions** for local search
- **Ask conceptual questions** to trigger external search

Type `/help` at any time to see this message again."""

UNKNOWN_COMMAND_TEXT: Final[str] = (
    f"{FAILURE_MARKER} **Unknown command**\n\n"
    "Available commands:\n"
    "- `/help` - Learn how SemSearch AI works\n"
    "- `/ingest <repo_url> <file_path>` - Ingest a file from a repository\n"
    "- `/ingest <full_file_url>` - Ingest a file using a full file link\n\n"
    "Example: `/ingest https://github.com/owner/repo src/main.py`"
)


def describe_failure(failure: BaseException | str | None) -> str:
    """Turn any failure into the text shown to the user."""

    if isinstance(failure, RetrievalError):
        return str(failure)
    if isinstance(failure, httpx.TimeoutException):
        return "Retrieval service timed out"
    if isinstance(failure, httpx.HTTPError):
        return f"Could not reach retrieval service: {failure}"
    if isinstance(failure, BaseException):
        text = str(failure).strip()
        return text or type(failure).__name__
    if isinstance(failure, str) and failure.strip():
        return failure
    return "An unexpected error occurred"


def registration_succeeded(result: RegistrationResult) -> str:
    return (
        "✅ **File ingested successfully!**\n\n"
        f"**Repository:** {result.repo_url or ''}\n"
        f"**File:** {result.file_path or ''}\n"
        f"**Summary:** {result.summary or ''}\n\n"
        f"The file has been embedded with {result.embedding_dimensions or 0} dimensions. "
        "You can now ask questions about this code!"
    )


def registration_failed(failure: BaseException | str | None, *, implicit: bool = False) -> str:
    hint = "Please check the URL and try again." if implicit else "Please check the command format and try again."
    return f"{FAILURE_MARKER} **Error ingesting file:** {describe_failure(failure)}\n\n{hint}"


def search_answer(result: SearchResult) -> str:
    if result.synthesized_answer:
        text = result.synthesized_answer
    else:
        text = f"Found {result.total_matches or 0} matches, but no synthesized answer was generated."

    footer = [f"**Search Strategy:** {result.source or 'unknown'}"]
    if result.reasoning:
        footer.append(f"**Reasoning:** {result.reasoning}")
    if result.synthesis_sources:
        footer.append(f"**Sources:** {', '.join(result.synthesis_sources[:MAX_FOOTER_SOURCES])}")

    return text + "\n\n---\n\n" + "\n".join(footer)


def search_failed(failure: BaseException | str | None) -> str:
    return (
        f"{FAILURE_MARKER} **Error searching:** {describe_failure(failure)}\n\n"
        "Please make sure you've ingested a file first, or try a different question."
    )
