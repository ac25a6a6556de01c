from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv


def load_env() -> None:
    """Load local .env files if present.

    This is a dev convenience so the router can be started without manually exporting
    variables. In production (Docker/K8s/etc.), prefer real environment variables.

    Load order (later does NOT override existing env vars):
    1) <repo_root>/.env
    2) <repo_root>/.env.local
    """

    # backend/src/semsearch_api/services/settings/env.py -> repo root is 5 parents up
    # (env.py -> settings -> services -> semsearch_api -> src -> backend)
    repo_root = Path(__file__).resolve().parents[5]

    load_dotenv(dotenv_path=repo_root / ".env", override=False)
    load_dotenv(dotenv_path=repo_root / ".env.local", override=False)
