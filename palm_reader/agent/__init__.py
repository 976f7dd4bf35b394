"""Agno agent logic for the remote reading service.

Responsibilities:
    - Agent initialization with the Gemini model
    - Sending one image plus instruction per request
    - Returning the generated text untouched

Maintains clean separation from the UI and the reading session state.
"""

from palm_reader.agent.config import ReaderConfig, get_reader_config
from palm_reader.agent.prompts import PALM_READING_PROMPT
from palm_reader.agent.reader_agent import (
    ReaderService,
    ReadingServiceError,
    generate_reading,
    get_reader_service,
)

__all__ = [
    "PALM_READING_PROMPT",
    "ReaderConfig",
    "ReaderService",
    "ReadingServiceError",
    "generate_reading",
    "get_reader_config",
    "get_reader_service",
]
