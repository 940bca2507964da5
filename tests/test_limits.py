import pytest
from fastapi import HTTPException

from routes.limits import limit_receive, read_body_limited


class ChunkSource:
    """Feeds body chunks one ASGI message at a time and counts how many were pulled."""

    def __init__(self, chunks: list[bytes]):
        self.chunks = chunks
        self.pulled = 0

    async def receive(self):
        chunk = self.chunks[self.pulled]
        self.pulled += 1
        return {
            "type": "http.request",
            "body": chunk,
            "more_body": self.pulled < len(self.chunks),
        }


class StreamingRequest:
    def __init__(self, source: ChunkSource, headers: dict[str, str] | None = None):
        self.source = source
        self.headers = headers or {}

    async def stream(self):
        while True:
            message = await self.source.receive()
            yield message["body"]
            if not message["more_body"]:
                return


@pytest.mark.asyncio
async def test_limit_receive_stops_at_first_chunk_over_cap():
    source = ChunkSource([b"x" * 1024] * 2000)
    receive = limit_receive(source.receive, max_bytes=64)

    with pytest.raises(HTTPException) as exc_info:
        while True:
            await receive()

    assert exc_info.value.status_code == 413
    assert source.pulled == 1


@pytest.mark.asyncio
async def test_limit_receive_passes_bodies_within_cap():
    source = ChunkSource([b"a" * 10, b"b" * 10])
    receive = limit_receive(source.receive, max_bytes=20)

    first = await receive()
    second = await receive()

    assert first["body"] + second["body"] == b"a" * 10 + b"b" * 10


@pytest.mark.asyncio
async def test_read_body_limited_stops_reading_past_cap():
    source = ChunkSource([b"y" * 16] * 2000)

    with pytest.raises(HTTPException) as exc_info:
        await read_body_limited(StreamingRequest(source), max_bytes=64)

    assert exc_info.value.status_code == 413
    assert source.pulled == 5


@pytest.mark.asyncio
async def test_read_body_limited_rejects_declared_length_without_reading():
    source = ChunkSource([b"{}"])
    request = StreamingRequest(source, headers={"content-length": "4096"})

    with pytest.raises(HTTPException) as exc_info:
        await read_body_limited(request, max_bytes=64)

    assert exc_info.value.status_code == 413
    assert source.pulled == 0


@pytest.mark.asyncio
async def test_read_body_limited_returns_full_body():
    source = ChunkSource([b'{"text":', b'"hello"}'])

    body = await read_body_limited(StreamingRequest(source), max_bytes=64)

    assert body == b'{"text":"hello"}'
