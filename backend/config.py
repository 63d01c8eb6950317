import logging
import os
from dotenv import load_dotenv

load_dotenv()

PLACEHOLDER_KEY = "YOUR_GROQ_API_KEY_HERE"

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
TEMPERATURE = 0.7
MAX_TOKENS = 500
# resume / job text are cut to this many chars before going into the prompt
MAX_PROMPT_CHARS = 2000

PORT = int(os.getenv("PORT", "8000"))


def resolve_log_level(name) -> str:
    """Map a LOG_LEVEL name to one logging knows, INFO for anything else."""
    name = (name or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))

API_KEY_VARS = ("GROQ_API_KEY", "NEXT_PUBLIC_GROQ_API_KEY")


def get_api_key():
    """Return the first valid Groq key from the environment, or None.

    Blank values and the placeholder are skipped, so a placeholder left in
    GROQ_API_KEY does not hide a real key under the legacy name. Read on every
    call so a key added to the environment is picked up without a restart.
    """
    for var in API_KEY_VARS:
        key = (os.getenv(var) or "").strip()
        if key and key != PLACEHOLDER_KEY:
            return key
    return None
