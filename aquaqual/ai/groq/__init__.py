"""Groq module for hosted chat completions."""

from aquaqual.ai.groq.config import GroqSettings, get_groq_settings
from aquaqual.ai.groq.exceptions import (
    GroqAuthenticationError,
    GroqCompletionError,
    GroqError,
)

__all__ = [
    "GroqSettings",
    "get_groq_settings",
    "GroqError",
    "GroqAuthenticationError",
    "GroqCompletionError",
]
