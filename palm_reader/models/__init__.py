"""Pydantic models shared across the reading flow.

Models:
    - EncodedImage: Uploaded picture as a base64 data URL
    - SessionPhase: Idle, loading, result or error
    - ErrorKind: Validation, read or service failure
    - SessionSnapshot: Read-only view of a reading session
"""

from palm_reader.models.schemas import EncodedImage, ErrorKind, SessionPhase, SessionSnapshot

__all__ = ["EncodedImage", "ErrorKind", "SessionPhase", "SessionSnapshot"]
