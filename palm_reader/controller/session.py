"""Reading session state machine.

Mediates between file selection, the remote reading call and the page.

Phases:
    idle    -> select_image (valid)            -> loading
    loading -> analysis succeeds                -> result
    loading -> analysis fails                   -> error
    idle    -> select_image (bad type or read)  -> error
    result  -> reset                            -> idle
    error   -> reset                            -> idle

Only one analysis can be outstanding. The phase is derived from the stored
fields, never kept separately.
"""

import logging
from collections.abc import Awaitable, Callable

from palm_reader.agent.prompts import PALM_READING_PROMPT
from palm_reader.controller.messages import (
    EMPTY_READING_FALLBACK,
    INVALID_FILE_MESSAGE,
    READ_FAILURE_MESSAGE,
    SERVICE_FAILURE_MESSAGE,
)
from palm_reader.imaging.encoding import (
    ImageReadError,
    SelectedFile,
    is_image_media_type,
    read_selected_file,
    split_data_url,
)
from palm_reader.models.schemas import EncodedImage, ErrorKind, SessionPhase, SessionSnapshot

logger = logging.getLogger(__name__)

ReadingBackend = Callable[[bytes, str, str], Awaitable[str | None]]
"""Remote call taking payload, media type and instruction; returns text or None."""

ChangeListener = Callable[[SessionSnapshot], None]


class ReadingSession:
    """Holds the state of one palm reading flow.

    Attributes are private; read them through ``snapshot`` or ``phase``.
    """

    def __init__(
        self,
        backend: ReadingBackend,
        on_change: ChangeListener | None = None,
        instruction: str = PALM_READING_PROMPT,
    ) -> None:
        """Create an idle session.

        Args:
            backend: Async request/response call to the reading service.
            on_change: Called with a fresh snapshot after every transition.
            instruction: Prompt sent along with each image.
        """
        self._backend = backend
        self._on_change = on_change
        self._instruction = instruction

        self._image: EncodedImage | None = None
        self._reading: str | None = None
        self._error: str | None = None
        self._error_kind: ErrorKind | None = None
        self._is_loading: bool = False

    @property
    def phase(self) -> SessionPhase:
        if self._is_loading:
            return SessionPhase.LOADING
        if self._error is not None:
            return SessionPhase.ERROR
        if self._reading is not None:
            return SessionPhase.RESULT
        return SessionPhase.IDLE

    @property
    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self.phase,
            image=self._image,
            reading=self._reading,
            error=self._error,
            error_kind=self._error_kind,
        )

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot)

    def _fail(self, kind: ErrorKind, message: str) -> None:
        self._reading = None
        self._error = message
        self._error_kind = kind

    async def select_image(self, file: SelectedFile) -> SessionSnapshot:
        """Accept a user-selected file and analyze it.

        Files without an image media type are rejected before any read.
        A read failure also ends in the error phase without a service call.

        Args:
            file: The selected file.

        Returns:
            Snapshot after the flow settles.
        """
        if self._is_loading:
            logger.warning(f"Ignoring {file!r}: a reading is already in progress")
            return self.snapshot

        if not is_image_media_type(file.media_type):
            logger.warning(f"Rejected {file!r}: not an image")
            self._image = None
            self._fail(ErrorKind.VALIDATION, INVALID_FILE_MESSAGE)
            self._notify()
            return self.snapshot

        try:
            encoded = await read_selected_file(file)
        except ImageReadError as e:
            logger.warning(f"Image read error: {e}")
            self._image = None
            self._fail(ErrorKind.READ, READ_FAILURE_MESSAGE)
            self._notify()
            return self.snapshot

        self._image = encoded
        self._error = None
        self._error_kind = None
        return await self.analyze(encoded)

    async def analyze(self, image: EncodedImage) -> SessionSnapshot:
        """Send an encoded image to the reading service.

        Enters the loading phase, issues exactly one backend call and leaves
        loading with either a reading or the generic service error. The cause
        of a failure is only logged.

        Args:
            image: Encoded image from ``select_image``.

        Returns:
            Snapshot after the call settles.
        """
        if self._is_loading:
            logger.warning("Ignoring analyze: a reading is already in progress")
            return self.snapshot

        self._is_loading = True
        self._reading = None
        self._error = None
        self._error_kind = None

        try:
            self._notify()
            payload, media_type = split_data_url(image.data_url)
            text = await self._backend(payload, media_type, self._instruction)
            self._reading = text or EMPTY_READING_FALLBACK
            logger.info(f"Reading received ({len(self._reading)} chars)")
        except Exception:
            logger.exception("Error analyzing palm")
            self._fail(ErrorKind.SERVICE, SERVICE_FAILURE_MESSAGE)
        finally:
            self._is_loading = False

        self._notify()
        return self.snapshot

    def reset(self) -> SessionSnapshot:
        """Clear image, reading and error, returning to idle.

        Ignored while a reading is in progress; loading only ends when the
        outstanding call settles.
        """
        if self._is_loading:
            logger.warning("Ignoring reset: a reading is already in progress")
            return self.snapshot

        self._image = None
        self._reading = None
        self._error = None
        self._error_kind = None
        self._notify()
        return self.snapshot
