"""Reading service configuration with environment variable loading.

Pydantic-based configuration for the agno Gemini agent.
The only credential read from the environment is GEMINI_API_KEY.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-3-flash-preview"


class ReaderConfig(BaseModel):
    """Configuration for the palm reading agent.

    Attributes:
        api_key: Gemini API key.
        model_name: Gemini model identifier.
        temperature: Optional sampling temperature; provider default when None.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        validate_default=True,
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default=DEFAULT_MODEL,
        min_length=1,
        description="Gemini model to use",
    )
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for reading generation",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()


def get_reader_config() -> ReaderConfig:
    """Create reader configuration from environment.

    Returns:
        Configured ReaderConfig instance.

    Raises:
        ValueError: If GEMINI_API_KEY is not set.
    """
    return ReaderConfig()
