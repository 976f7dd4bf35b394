"""Agno agent service for generating palm readings with Gemini.

Wraps an agno Agent backed by the Gemini model behind one request/response
call: raw image bytes, media type and instruction in, generated text out.

Architecture Decisions:

1. **No storage** - Each reading is a single stateless request. The agent has
   no session history, knowledge base or database attached.

2. **Singleton Pattern** - Agent construction validates config and builds the
   Gemini client. The singleton reuses it across all page sessions.

3. **Errors propagate** - ``generate`` does not catch provider errors. The
   reading session is the one place that turns failures into a user message.
"""

import logging

from agno.agent import Agent
from agno.media import Image
from agno.models.google import Gemini
from agno.run.base import RunStatus

from palm_reader.agent.config import ReaderConfig, get_reader_config
from palm_reader.agent.prompts import AGENT_DESCRIPTION

logger = logging.getLogger(__name__)


class ReadingServiceError(Exception):
    """Raised when the agent run ends in an error status."""

    pass


class ReaderService:
    """Service for the agno palm reading agent.

    Wraps agno's Agent with:
    - Gemini multimodal model configured from ReaderConfig
    - Singleton lifecycle management
    - A plain async call returning the generated text
    """

    def __init__(self, config: ReaderConfig | None = None) -> None:
        """Initialize the reader service.

        Args:
            config: Optional reader configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_reader_config()
        self._agent = self._create_agent()

    def _create_agent(self) -> Agent:
        """Create the agno agent instance.

        Returns:
            Configured Agent with the Gemini model.
        """
        model = Gemini(
            id=self._config.model_name,
            api_key=self._config.api_key,
            temperature=self._config.temperature,
        )

        return Agent(
            model=model,
            description=AGENT_DESCRIPTION,
            # Readings come back as markdown with a heading per palm line
            markdown=True,
        )

    async def generate(self, payload: bytes, media_type: str, instruction: str) -> str | None:
        """Generate text for one image and instruction.

        Args:
            payload: Raw image bytes.
            media_type: Declared media type of the image, e.g. ``image/png``.
            instruction: Natural-language prompt sent with the image.

        Returns:
            Generated text, or None if the response carried no text.

        Raises:
            ReadingServiceError: If agno reports the run as failed.
        """
        image = Image(
            content=payload,
            mime_type=media_type,
            format=media_type.partition("/")[2] or None,
        )

        logger.info(f"Requesting reading from {self._config.model_name} ({media_type}, {len(payload)} bytes)")
        response = await self._agent.arun(instruction, images=[image])

        if response.status == RunStatus.error:
            raise ReadingServiceError(f"Reading run failed: {response.content}")

        content = response.content
        if content is None:
            return None
        return content if isinstance(content, str) else str(content)


# Module-level singleton instance
_reader_service: ReaderService | None = None


def get_reader_service() -> ReaderService:
    """Get or create the global reader service.

    Returns:
        The ReaderService instance.

    Raises:
        ValidationError: If GEMINI_API_KEY is not set.
    """
    global _reader_service
    if _reader_service is None:
        _reader_service = ReaderService()
    return _reader_service


async def generate_reading(payload: bytes, media_type: str, instruction: str) -> str | None:
    """Generate a reading with the global reader service.

    Resolves the service on first use, so a missing credential fails the
    request instead of the page.
    """
    return await get_reader_service().generate(payload, media_type, instruction)
