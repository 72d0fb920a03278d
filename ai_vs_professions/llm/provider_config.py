"""Provider/runtime configuration for the Gemini layer.

Architectural role:
    Centralizes model selection, endpoint and credential lookup for
    `ai_vs_professions.llm.client` and the analysis/image services.

Determinism:
    Deterministic for a fixed process environment and key files. Values are resolved
    at import time (plus runtime key-file reads in `load_key`).

Failure behavior:
    Missing key material is represented as `None`; the transport client raises
    `TransportError` only when a request is actually attempted.
"""

import os
from dotenv import load_dotenv

load_dotenv()

GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL",
    "https://generativelanguage.googleapis.com/v1beta/models",
)
GEMINI_KEY_FILE = "config/gemini.key"

# Text model used for the replaceability verdict.
ANALYSIS_MODEL = os.getenv("ANALYSIS_MODEL", "gemini-2.5-flash")

# Image model used for the illustration.
IMAGE_MODEL = os.getenv("IMAGE_MODEL", "gemini-2.5-flash-image")
IMAGE_ASPECT_RATIO = "1:1"

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "120"))

# Sensitive request/response debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/gemini.key` -> `GEMINI_API_KEY`).
        2. Raw file contents at `path`.

    Edge cases:
        - `None` path returns `None`.
        - Missing or empty file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None
