"""NiceGUI palm reading page."""

import logging
from enum import Enum

from nicegui import events, ui

from palm_reader.agent.reader_agent import generate_reading
from palm_reader.controller.session import ReadingSession
from palm_reader.imaging.encoding import SelectedFile
from palm_reader.models.schemas import SessionPhase, SessionSnapshot
from palm_reader.ui.markdown import markdown_to_html

logger = logging.getLogger(__name__)

APP_TITLE = "AI 灵境手相"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500&family=Playfair+Display:wght@400;500&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }
    .font-serif { font-family: 'Playfair Display', serif; }

    body { background: #09090b; color: #f4f4f5; min-height: 100vh; }

    .glow {
        position: fixed; border-radius: 9999px; pointer-events: none; z-index: 0;
        filter: blur(120px);
    }
    .glow-top { top: -10%; left: -10%; width: 40%; height: 40%; background: rgba(88, 28, 135, 0.2); }
    .glow-bottom { bottom: -10%; right: -10%; width: 40%; height: 40%; background: rgba(49, 46, 129, 0.2); }

    .title {
        background: linear-gradient(135deg, #f4f4f5 0%, #d4d4d8 50%, #71717a 100%);
        -webkit-background-clip: text;
        background-clip: text;
        color: transparent;
    }

    .upload-zone {
        border: 2px dashed rgba(255, 255, 255, 0.1);
        background: rgba(255, 255, 255, 0.05);
        border-radius: 24px;
        transition: all 0.5s;
    }
    .upload-zone:hover { background: rgba(255, 255, 255, 0.1); border-color: rgba(168, 85, 247, 0.5); }

    .palm-photo {
        border-radius: 9999px;
        border: 4px solid rgba(255, 255, 255, 0.1);
        box-shadow: 0 0 40px rgba(168, 85, 247, 0.2);
    }

    .reading-card {
        background: rgba(24, 24, 27, 0.6);
        border: 1px solid rgba(255, 255, 255, 0.1);
        border-radius: 24px;
        backdrop-filter: blur(12px);
    }
    .reading-card { color: #d4d4d8; line-height: 1.8; }
    .reading-card em { font-style: italic; }

    .error-banner {
        background: rgba(69, 10, 10, 0.5);
        border: 1px solid rgba(127, 29, 29, 0.5);
        border-radius: 12px;
        color: #fecaca;
    }
</style>
"""


class PageView(str, Enum):
    """Main view shown under the header."""

    UPLOAD = "upload"
    LOADING = "loading"
    RESULT = "result"


def page_view(snapshot: SessionSnapshot) -> PageView:
    """Pick the main view for a snapshot.

    Errors of every kind keep the upload zone so a new image can be chosen.
    """
    if snapshot.phase == SessionPhase.LOADING:
        return PageView.LOADING
    if snapshot.phase == SessionPhase.RESULT:
        return PageView.RESULT
    return PageView.UPLOAD


def banner_message(snapshot: SessionSnapshot) -> str | None:
    """Message for the inline error banner, if one should be shown."""
    if snapshot.phase == SessionPhase.ERROR:
        return snapshot.error
    return None


def selected_file_from_upload(e: events.UploadEventArguments) -> SelectedFile:
    """Adapt a NiceGUI upload event to a SelectedFile."""
    return SelectedFile(e.file.name, e.file.content_type, e.file.read)


@ui.page("/")
def palm_page() -> None:
    """Main palm reading page."""
    ui.add_head_html(CUSTOM_CSS)
    ui.query("body").classes("bg-zinc-950")

    view_container: ui.column
    error_container: ui.column

    def on_change(snapshot: SessionSnapshot) -> None:
        render(snapshot)

    session = ReadingSession(generate_reading, on_change=on_change)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        file = selected_file_from_upload(e)
        logger.info(f"Upload received: {file!r}")
        await session.select_image(file)

    def reset() -> None:
        session.reset()

    def render_upload() -> None:
        with ui.column().classes(
            "upload-zone w-full p-12 items-center justify-center text-center gap-2"
        ):
            with ui.element("div").classes(
                "w-20 h-20 mb-4 rounded-full bg-zinc-900 flex items-center justify-center"
            ):
                ui.icon("photo_camera").classes("text-4xl text-purple-400")
            ui.label("洞悉你的命运").classes("font-serif text-2xl text-zinc-200")
            ui.label("拍一张清晰的手掌照片，或上传已有图片以开始解读。").classes(
                "text-zinc-400 max-w-sm"
            )
            ui.upload(
                label="选择图片",
                on_upload=handle_upload,
                auto_upload=True,
                max_files=1,
            ).props('accept="image/*" flat dark color=purple').classes("mt-6")

    def render_loading() -> None:
        with ui.column().classes("w-full items-center justify-center py-20 gap-2"):
            ui.spinner("dots", size="5em", color="purple").classes("mb-6")
            ui.label("正在沟通灵界...").classes("font-serif text-2xl text-zinc-200 animate-pulse")
            ui.label("正在解读你的命运轨迹").classes("text-zinc-500")

    def render_result(snapshot: SessionSnapshot) -> None:
        with ui.column().classes("w-full gap-8 items-center"):
            if snapshot.image is not None:
                ui.image(snapshot.image.data_url).classes("palm-photo w-48 h-48").props(
                    'fit=cover alt="你的手相"'
                )
            with ui.element("div").classes("reading-card w-full p-8 sm:p-10"):
                ui.html(markdown_to_html(snapshot.reading or ""), sanitize=False)
            ui.button("再看一次", icon="refresh", on_click=reset).props(
                "flat rounded no-caps color=grey-4"
            ).classes("mt-4 mb-12")

    def render_error(message: str) -> None:
        with ui.row().classes("error-banner w-full mt-6 px-4 py-3 items-center gap-3 no-wrap"):
            ui.icon("error_outline").classes("text-xl shrink-0")
            ui.label(message).classes("text-sm flex-grow")
            ui.button(icon="close", on_click=reset).props("flat round dense size=sm color=red-2")

    def render(snapshot: SessionSnapshot) -> None:
        view_container.clear()
        error_container.clear()
        view = page_view(snapshot)
        with view_container:
            if view == PageView.LOADING:
                render_loading()
            elif view == PageView.RESULT:
                render_result(snapshot)
            else:
                render_upload()
        if message := banner_message(snapshot):
            with error_container:
                render_error(message)

    # === UI Layout ===
    ui.element("div").classes("glow glow-top")
    ui.element("div").classes("glow glow-bottom")

    with ui.column().classes("w-full max-w-3xl mx-auto py-12 px-4 items-center z-10"):
        # Header
        with ui.column().classes("w-full items-center text-center mb-12 gap-4"):
            with ui.element("div").classes(
                "p-3 rounded-full bg-white/5 border border-white/10"
            ):
                ui.icon("auto_awesome").classes("text-2xl text-purple-400")
            ui.label(APP_TITLE).classes(
                "title font-serif text-5xl sm:text-6xl md:text-7xl font-medium tracking-tight"
            )
            ui.label("探索掌纹中隐藏的命运密码。").classes(
                "text-zinc-400 text-lg sm:text-xl font-light tracking-wide"
            )

        view_container = ui.column().classes("w-full items-center")
        error_container = ui.column().classes("w-full")
        render(session.snapshot)

