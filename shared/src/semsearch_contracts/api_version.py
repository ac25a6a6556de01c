"""API version constants.

This module provides a single source of truth for contract versioning.
"""

from __future__ import annotations

from typing import Final


API_VERSION: Final[str] = "v1"
