import httpx
import pytest

from scrape.schemas import RequestOptions

class RecordingProgress:
    """Stand-in for the tqdm bar that remembers every state it was shown."""

    instances = []

    def __init__(self, total_bytes, url):
        self.total_bytes = total_bytes
        self.url = url
        self.states = []
        self.closed = False
        RecordingProgress.instances.append(self)

    def update(self, state):
        self.states.append((state.downloaded_bytes, state.total_bytes))

    def close(self):
        self.closed = True

@pytest.fixture
def progress():
    """Fresh RecordingProgress class per test"""
    RecordingProgress.instances = []
    yield RecordingProgress
    RecordingProgress.instances = []

@pytest.fixture
def make_client():
    """Build an AsyncClient whose requests are answered by a handler instead of the network"""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
    return _make

@pytest.fixture
def options():
    return RequestOptions()

@pytest.fixture
def chunked():
    """Async body stream yielding data in fixed-size chunks"""
    def _chunked(data: bytes, size: int):
        async def _gen():
            for start in range(0, len(data), size):
                yield data[start:start + size]
        return _gen()
    return _chunked
