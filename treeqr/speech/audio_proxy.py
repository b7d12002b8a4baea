"""Proxy to the local text-to-speech service."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import BinaryIO
from urllib.parse import quote

import httpx

from treeqr.logging.logger import Log
from treeqr.speech.exceptions import EmptyTextError, TtsUnavailableError


@dataclass(frozen=True)
class AudioResult:
    """Outcome of copying a synthesized clip into a sink."""

    content_type: str
    bytes_written: int


class AudioStream:
    """An open upstream audio response.

    The upstream body is released when ``chunks()`` is exhausted, fails, or is
    closed early, and on ``close()``. Calling ``close()`` more than once is safe.
    """

    def __init__(self, response: httpx.Response, chunk_size: int) -> None:
        self._response = response
        self._chunk_size = chunk_size

    @property
    def content_type(self) -> str:
        return self._response.headers.get("content-type", "")

    def chunks(self) -> Iterator[bytes]:
        """Yield the upstream body in order, without buffering it whole."""
        try:
            yield from self._response.iter_bytes(chunk_size=self._chunk_size)
        except httpx.TransportError as exc:
            Log.warning("TTS stream interrupted", error=exc)
        finally:
            self._response.close()

    def close(self) -> None:
        self._response.close()


class AudioProxy:
    """Forwards text to the speech synthesis endpoint and relays the audio."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        chunk_size: int = 8192,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._chunk_size = chunk_size
        self._client = client if client is not None else httpx.Client(timeout=timeout_seconds)

    def open_stream(self, text: str) -> AudioStream:
        """Request synthesis of ``text`` and return the open upstream stream.

        Raises:
            EmptyTextError: if ``text`` is empty. No request is made.
            TtsUnavailableError: if the synthesis service cannot be reached.
        """
        if not text:
            raise EmptyTextError("Missing 'text' parameter")

        url = f"{self._base_url}/speak?text={quote(text, safe='')}"
        request = self._client.build_request("GET", url)
        try:
            response = self._client.send(request, stream=True)
        except httpx.TransportError as exc:
            raise TtsUnavailableError(f"TTS service unreachable: {exc}") from exc

        if response.is_error:
            Log.warning("TTS service answered with an error status", status=response.status_code)
        return AudioStream(response, self._chunk_size)

    def synthesize_and_stream(self, text: str, sink: BinaryIO) -> AudioResult:
        """Copy the synthesized audio for ``text`` into ``sink``.

        Raises:
            EmptyTextError: if ``text`` is empty. No request is made.
            TtsUnavailableError: if the synthesis service cannot be reached.
        """
        stream = self.open_stream(text)
        written = 0
        try:
            for chunk in stream.chunks():
                sink.write(chunk)
                written += len(chunk)
        finally:
            stream.close()
        Log.debug("Relayed audio", bytes=written, content_type=stream.content_type)
        return AudioResult(content_type=stream.content_type, bytes_written=written)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
