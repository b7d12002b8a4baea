"""
HTTP surface for tree pages, generated descriptions and spoken audio.
"""
from fastapi import FastAPI, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, StreamingResponse
from starlette.background import BackgroundTask

from treeqr.config.settings import Settings
from treeqr.description.exceptions import GenerationFailedError
from treeqr.logging.logger import Log
from treeqr.pipeline.pipeline import TreePipeline
from treeqr.speech.audio_proxy import AudioProxy
from treeqr.speech.exceptions import EmptyTextError, TtsUnavailableError
from treeqr.trees.exceptions import RecordNotFoundError, StoreUnavailableError


def create_app(
    pipeline: TreePipeline,
    audio_proxy: AudioProxy,
    settings: Settings,
) -> FastAPI:
    """Build the FastAPI app around already constructed collaborators."""
    app = FastAPI(title="Tree QR Pages")

    @app.exception_handler(RecordNotFoundError)
    def handle_not_found(request: Request, exc: RecordNotFoundError) -> PlainTextResponse:
        Log.info("Tree not found", path=request.url.path)
        return PlainTextResponse("Tree not found", status_code=404)

    @app.exception_handler(StoreUnavailableError)
    def handle_store_unavailable(
        request: Request, exc: StoreUnavailableError
    ) -> PlainTextResponse:
        Log.error("Tree store unavailable", path=request.url.path, error=exc)
        status_code = settings.store_unavailable_status
        body = "Tree not found" if status_code == 404 else "Tree store unavailable"
        return PlainTextResponse(body, status_code=status_code)

    @app.exception_handler(GenerationFailedError)
    def handle_generation_failed(
        request: Request, exc: GenerationFailedError
    ) -> PlainTextResponse:
        Log.exception("AI generation failed", exc, path=request.url.path)
        return PlainTextResponse("Failed to generate description", status_code=500)

    @app.exception_handler(EmptyTextError)
    def handle_empty_text(request: Request, exc: EmptyTextError) -> PlainTextResponse:
        return PlainTextResponse("Missing 'text' parameter", status_code=400)

    @app.exception_handler(TtsUnavailableError)
    def handle_tts_unavailable(request: Request, exc: TtsUnavailableError) -> PlainTextResponse:
        Log.error("TTS request failed", path=request.url.path, error=exc)
        return PlainTextResponse("Failed to get TTS audio", status_code=500)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "ok"}

    @app.get("/speak")
    def speak(text: str | None = Query(default=None)) -> StreamingResponse:
        """Relay synthesized speech for ``text`` from the local TTS service."""
        stream = audio_proxy.open_stream(text or "")
        return StreamingResponse(
            stream.chunks(),
            media_type=stream.content_type or None,
            background=BackgroundTask(stream.close),
        )

    @app.get("/generate-description/{tree_id}", response_class=PlainTextResponse)
    def generate_description(tree_id: str) -> PlainTextResponse:
        """Generate a first-person story told by the tree."""
        return PlainTextResponse(pipeline.describe(tree_id))

    @app.get("/{tree_id}", response_class=HTMLResponse)
    def tree_page(tree_id: str) -> HTMLResponse:
        """Render the tree details page."""
        return HTMLResponse(pipeline.render_page(tree_id))

    return app
