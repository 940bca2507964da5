import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from app_factory import create_app
from config import AppConfig, ServerConfig, SummarizationConfig, TranscriptionConfig
from dependencies import get_summarization_backend, get_transcription_backend
from domain import AudioUpload, BackendResponse
from interfaces import SummarizationBackend, TranscriptionBackend

TRANSCRIPTION_URL = "http://whisper.test:8000"
SUMMARIZATION_URL = "http://llm.test:8001"


class BlockingBackendMixin:
    """Lets a fake hang like a slow backend and note when it is cancelled."""

    async def _wait_if_blocked(self) -> None:
        if not self.block:
            return
        try:
            await asyncio.sleep(30)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


class FakeTranscriptionBackend(BlockingBackendMixin, TranscriptionBackend):
    """Records uploads and answers with a canned response or error."""

    def __init__(self, response: BackendResponse | None = None, error: Exception | None = None):
        self.calls: list[AudioUpload] = []
        self.response = response or BackendResponse(
            status_code=200, body=b'{"text":"hello world"}'
        )
        self.error = error
        self.block = False
        self.cancelled = False

    async def transcribe(self, upload: AudioUpload) -> BackendResponse:
        self.calls.append(upload)
        await self._wait_if_blocked()
        if self.error is not None:
            raise self.error
        return self.response


class FakeSummarizationBackend(BlockingBackendMixin, SummarizationBackend):
    """Records texts and answers with a canned response or error."""

    def __init__(self, response: BackendResponse | None = None, error: Exception | None = None):
        self.calls: list[str] = []
        self.response = response or BackendResponse(
            status_code=200, body=b'{"choices":[{"message":{"content":"Hi."}}]}'
        )
        self.error = error
        self.block = False
        self.cancelled = False

    async def summarize(self, text: str) -> BackendResponse:
        self.calls.append(text)
        await self._wait_if_blocked()
        if self.error is not None:
            raise self.error
        return self.response


def make_config(tmp_path=None, **overrides) -> AppConfig:
    transcription = {"base_url": TRANSCRIPTION_URL, **overrides.pop("transcription", {})}
    summarization = {"base_url": SUMMARIZATION_URL, **overrides.pop("summarization", {})}
    server = {"static_dir": tmp_path} if tmp_path is not None else {}
    return AppConfig(
        transcription=TranscriptionConfig(**transcription),
        summarization=SummarizationConfig(**summarization),
        server=ServerConfig(**server),
    )


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every outbound request it receives."""

    def __init__(self, respond):
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return respond(request)

        super().__init__(handler)


@pytest.fixture
def transcription_backend():
    return FakeTranscriptionBackend()


@pytest.fixture
def summarization_backend():
    return FakeSummarizationBackend()


@pytest.fixture
def fake_client(transcription_backend, summarization_backend):
    """Client whose backends are replaced by counting fakes."""
    app = create_app(make_config())
    app.dependency_overrides[get_transcription_backend] = lambda: transcription_backend
    app.dependency_overrides[get_summarization_backend] = lambda: summarization_backend
    with TestClient(app) as client:
        yield client


@pytest.fixture
def wire_client_factory():
    """Builds a client whose real backends talk to a recording mock transport."""
    clients = []

    def factory(respond, config: AppConfig | None = None):
        transport = RecordingTransport(respond)
        client = TestClient(create_app(config or make_config(), transport=transport))
        client.__enter__()
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client_gone(monkeypatch):
    """Makes every request report a disconnected client and poll quickly."""
    from starlette.requests import Request

    import routes.disconnect

    async def is_disconnected(self) -> bool:
        return True

    monkeypatch.setattr(Request, "is_disconnected", is_disconnected)
    monkeypatch.setattr(routes.disconnect, "DISCONNECT_POLL_SECONDS", 0.01)


def chunked(body: bytes, chunk_size: int = 64):
    """Yields body in pieces so the client sends it without Content-Length."""
    for start in range(0, len(body), chunk_size):
        yield body[start:start + chunk_size]


def multipart_body(filename: str, payload: bytes, boundary: str = "gateway-test-boundary"):
    body = (
        f"--{boundary}\r\n"
        f'Content-Disposition: form-data; name="file"; filename="{filename}"\r\n'
        "Content-Type: audio/wav\r\n\r\n"
    ).encode() + payload + f"\r\n--{boundary}--\r\n".encode()
    return body, {"content-type": f"multipart/form-data; boundary={boundary}"}
