import io

import pytest
from redis import Connection


class BrokenSink:
    """Accepts a fixed number of writes, then fails like a closed connection."""

    def __init__(self, writes_before_failure: int) -> None:
        self.writes_before_failure = writes_before_failure
        self.written = bytearray()

    def write(self, data: bytes) -> int:
        if self.writes_before_failure == 0:
            raise BrokenPipeError("connection closed")

        self.writes_before_failure -= 1
        self.written += data
        return len(data)


@pytest.fixture
def sink():
    return io.BytesIO()


@pytest.fixture
def broken_sink():
    return BrokenSink


@pytest.fixture(scope="package")
def redis_connection():
    connection = Connection()

    yield connection

    connection.disconnect()
