# inator_studio/core/logging.py
import sys
import os
from datetime import datetime
from typing import Any


# Only these scopes are shown by default.
# Everything else is gated behind INATOR_DEBUG.
INFO_SCOPES = {
    "STARTUP",      # Environment check and banner
    "GENERATE",     # Request boundary
    "GEMINI",       # LLM boundary
    "STORE",        # Record persistence
    "MONITORING",   # Metrics registration
    "API",          # Error responses
}

# DEBUG-only scopes (hidden by default)
DEBUG_SCOPES = {
    "HISTORY",
    "FRONTEND",
}


def _debug_enabled() -> bool:
    return os.getenv("INATOR_DEBUG", "false").lower() == "true"


def log(scope: str, message: str, data: Any = None) -> None:
    """
    Unified logging function for Inator Studio.

    Only INFO_SCOPES are shown by default.
    Set INATOR_DEBUG=true to see all scopes.
    """
    if not _debug_enabled() and scope not in INFO_SCOPES:
        return

    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] [{scope}] {message}")

    if data:
        print(f"  Data: {data}")

    sys.stdout.flush()


def log_section(scope: str, title: str) -> None:
    """
    Log a section header with visual separator.
    """
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"\n{'='*60}")
    print(f"[{timestamp}] [{scope}] {title}")
    print(f"{'='*60}")
    sys.stdout.flush()
