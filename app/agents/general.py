"""
used to load the system message sent ahead of the user prompt to chat-completion providers
"""
from pathlib import Path


def load_system_prompt() -> str:
    p = Path(__file__).resolve().parents[1] / "prompts" / "sarvam_system.txt"
    return p.read_text(encoding="utf-8").strip()
