"""Repository link grammar shared by `/ingest` and bare-link registration.

Accepted shapes:
- file link:  http(s)://<host>/<owner>/<repo>/blob/<ref>/<path>
- repo root:  http(s)://<host>/<owner>/<repo>[.git]

Owner, repo and ref are word characters, dots or hyphens. Every parsed repo URL is
canonicalized to https://<host>/<owner>/<repo> (lowercase host, no `.git`).
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from semsearch_contracts.ingest import RegistrationRequest


_SEGMENT = r"[\w.-]+"
_REPO_PREFIX = rf"(?P<scheme>https?)://(?P<host>[^/\s]+)/(?P<owner>{_SEGMENT})/(?P<repo>{_SEGMENT})"
_BLOB_PREFIX = rf"{_REPO_PREFIX}/blob/(?P<ref>{_SEGMENT})/"

# Anchored: the path runs to the end of the argument and may contain spaces.
_FILE_LINK = re.compile(rf"{_BLOB_PREFIX}(?P<path>.+)", re.DOTALL)
# Scanning free text: the path ends at the first whitespace.
_EMBEDDED_FILE_LINK = re.compile(rf"{_BLOB_PREFIX}(?P<path>\S+)")
_REPO_ROOT = re.compile(rf"{_REPO_PREFIX}/?")

_TRAILING_PUNCTUATION = ".,;:!?)]}>'\""


def canonical_repo_url(host: str, owner: str, repo: str) -> str | None:
    if repo.endswith(".git"):
        repo = repo[:-4]
    # "." and ".." are path segments, not names.
    if not owner.strip(".") or not repo.strip("."):
        return None
    return f"https://{host.lower()}/{owner}/{repo}"


def _registration(match: re.Match[str], file_path: str) -> RegistrationRequest | None:
    repo_url = canonical_repo_url(match.group("host"), match.group("owner"), match.group("repo"))
    if repo_url is None or not file_path:
        return None
    try:
        return RegistrationRequest(repo_url=repo_url, file_path=file_path)
    except ValidationError:
        return None


def parse_file_link(text: str) -> RegistrationRequest | None:
    """Parse a text that is exactly one file link."""

    m = _FILE_LINK.fullmatch(text.strip())
    if not m:
        return None
    return _registration(m, m.group("path"))


def find_file_link(text: str) -> RegistrationRequest | None:
    """Find the first file link anywhere in free text."""

    for m in _EMBEDDED_FILE_LINK.finditer(text):
        found = _registration(m, m.group("path").rstrip(_TRAILING_PUNCTUATION))
        if found is not None:
            return found
    return None


def parse_repo_root(token: str) -> str | None:
    """Return the canonical repo URL if `token` is exactly a repository root link."""

    m = _REPO_ROOT.fullmatch(token)
    if not m:
        return None
    return canonical_repo_url(m.group("host"), m.group("owner"), m.group("repo"))


def parse_ingest_args(args: str) -> RegistrationRequest | None:
    """Parse the argument text of `/ingest`.

    Tries the full file link first, then `<repo-root-url> <file path...>` where the
    path tokens are rejoined with single spaces.
    """

    found = parse_file_link(args)
    if found is not None:
        return found

    tokens = args.split()
    if len(tokens) < 2:
        return None

    repo_url = parse_repo_root(tokens[0])
    if repo_url is None:
        return None

    try:
        return RegistrationRequest(repo_url=repo_url, file_path=" ".join(tokens[1:]))
    except ValidationError:
        return None
