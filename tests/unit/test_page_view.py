"""Unit tests for choosing what the reading page shows."""

import pytest
import pytest_check as check

from palm_reader.controller.messages import (
    INVALID_FILE_MESSAGE,
    READ_FAILURE_MESSAGE,
    SERVICE_FAILURE_MESSAGE,
)
from palm_reader.imaging.encoding import encode_image
from palm_reader.models.schemas import ErrorKind, SessionPhase, SessionSnapshot
from palm_reader.ui.palm_page import PageView, banner_message, page_view


class TestPageView:
    def test_idle_shows_upload(self) -> None:
        snapshot = SessionSnapshot(phase=SessionPhase.IDLE)

        check.equal(page_view(snapshot), PageView.UPLOAD)
        check.is_none(banner_message(snapshot))

    def test_loading_shows_loading(self) -> None:
        snapshot = SessionSnapshot(
            phase=SessionPhase.LOADING, image=encode_image(b"\x89PNG", "image/png")
        )

        check.equal(page_view(snapshot), PageView.LOADING)
        check.is_none(banner_message(snapshot))

    def test_result_shows_reading(self) -> None:
        snapshot = SessionSnapshot(
            phase=SessionPhase.RESULT,
            image=encode_image(b"\x89PNG", "image/png"),
            reading="## 感情线\n深邃而绵长。",
        )

        check.equal(page_view(snapshot), PageView.RESULT)
        check.is_none(banner_message(snapshot))


class TestErrorBanner:
    @pytest.mark.parametrize(
        ("kind", "message"),
        [
            (ErrorKind.VALIDATION, INVALID_FILE_MESSAGE),
            (ErrorKind.READ, READ_FAILURE_MESSAGE),
            (ErrorKind.SERVICE, SERVICE_FAILURE_MESSAGE),
        ],
    )
    def test_every_error_kind_renders_the_same_way(
        self, kind: ErrorKind, message: str
    ) -> None:
        """Each error keeps the upload zone and shows its message in the banner."""
        snapshot = SessionSnapshot(phase=SessionPhase.ERROR, error=message, error_kind=kind)

        check.equal(page_view(snapshot), PageView.UPLOAD)
        check.equal(banner_message(snapshot), message)
