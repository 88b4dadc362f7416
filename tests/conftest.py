import pytest

from tello_blocks.transport import RecordingTransport, Transport, TransportError


class FailingTransport(Transport):
    """Raises on every call, like a link that is down."""

    def __init__(self, error=None):
        self.error = error or TransportError("link down")
        self.attempts = 0

    def connect(self):
        self.attempts += 1
        raise self.error

    def send(self, command):
        self.attempts += 1
        raise self.error


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def failing_transport():
    return FailingTransport()


@pytest.fixture
def crashing_transport():
    return FailingTransport(RuntimeError("socket exploded"))
