from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SessionPhase(str, Enum):
    """Observable phase of a reading session."""

    IDLE = "idle"
    LOADING = "loading"
    RESULT = "result"
    ERROR = "error"


class ErrorKind(str, Enum):
    """Cause of the current error message, kept for diagnostics."""

    VALIDATION = "validation"
    READ = "read"
    SERVICE = "service"


class EncodedImage(BaseModel):
    """An uploaded picture held as a base64 data URL.

    Attributes:
        data_url: ``data:<media type>;base64,<payload>``.
    """

    model_config = ConfigDict(frozen=True)

    data_url: str = Field(..., min_length=1)

    @property
    def media_type(self) -> str:
        """Declared media type taken from the data URL header."""
        from palm_reader.imaging.encoding import split_data_url

        return split_data_url(self.data_url)[1]

    @property
    def payload(self) -> bytes:
        """Raw image bytes decoded from the data URL."""
        from palm_reader.imaging.encoding import split_data_url

        return split_data_url(self.data_url)[0]


class SessionSnapshot(BaseModel):
    """Read-only view of a reading session.

    Attributes:
        phase: Derived phase (idle, loading, result, error).
        image: The uploaded image, if any.
        reading: Generated reading text, if any.
        error: User-facing error message, if any.
        error_kind: What caused the error message.
    """

    model_config = ConfigDict(frozen=True)

    phase: SessionPhase
    image: EncodedImage | None = None
    reading: str | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
