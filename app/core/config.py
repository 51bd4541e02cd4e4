# centralized configuration loader
# runs load_dotenv() to read .env
# API keys are read per call through get_api_key(), so a missing key fails one request, not the process

import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

# Models
DEFAULT_MODEL = os.getenv("DEFAULT_MODEL", "gemini")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
SARVAM_MODEL = os.getenv("SARVAM_MODEL", "sarvam-m")
SARVAM_URL = os.getenv("SARVAM_URL", "https://api.sarvam.ai/v1/chat/completions")
SARVAM_TEMPERATURE = float(os.getenv("SARVAM_TEMPERATURE", "0.7"))

# Outbound HTTP
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "60"))

# Client
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
REVEAL_DELAY_MS = int(os.getenv("REVEAL_DELAY_MS", "15"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_api_key(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None
