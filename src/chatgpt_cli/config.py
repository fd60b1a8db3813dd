import os

# Wire protocol (fixed)
OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"
MODEL = "gpt-4o-mini"
REQUEST_TIMEOUT_S = 60.0

API_KEY_ENV = "OPENAI_API_KEY"
PROG_NAME = "chatgpt-cli"

_KNOWN_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "").strip().upper()
if LOGGING_LEVEL not in _KNOWN_LEVELS:
    LOGGING_LEVEL = "WARNING"
