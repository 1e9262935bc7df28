from __future__ import annotations

import io
import logging
import operator
from collections.abc import Collection
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from toy_redis_client.resp.markers import CRLF, NULL_LENGTH, Marker

logger = logging.getLogger(__name__)

Text = str | bytes

INT64_MIN = -(2**63)
INT64_SPAN = 2**64


class Sink(Protocol):
    def write(self, data: bytes | memoryview, /) -> object:
        ...


@runtime_checkable
class Encodable(Protocol):
    def put(self, sink: Sink) -> None:
        ...


def put(sink: Sink, value: Encodable) -> None:
    """Write the RESP frame of `value` onto `sink`."""
    if not isinstance(value, Encodable):
        raise TypeError(f"Cannot encode a value of type {type(value).__name__}")

    value.put(sink)


def encode(*values: Encodable) -> bytes:
    buffer = io.BytesIO()
    for value in values:
        put(buffer, value)

    data = buffer.getvalue()
    logger.debug(f"Encoded {len(values)} value(s) into {len(data)} bytes")
    return data


def _check_text(value: object) -> None:
    if not isinstance(value, (str, bytes)):
        raise TypeError(f"Expected str or bytes, got {type(value).__name__}")


def _to_bytes(value: Text, encoding: str, errors: str) -> bytes:
    if isinstance(value, str):
        return value.encode(encoding, errors)
    return value


def _to_int64(value: int) -> int:
    return (value - INT64_MIN) % INT64_SPAN + INT64_MIN


def _put_line(sink: Sink, marker: bytes, data: bytes) -> None:
    sink.write(marker)
    sink.write(data)
    sink.write(CRLF)


def _put_length_prefixed(sink: Sink, data: bytes | memoryview) -> None:
    sink.write(Marker.BULK_STRING + b"%d" % len(data) + CRLF)
    sink.write(data)
    sink.write(CRLF)


def _put_null_bulk_string(sink: Sink) -> None:
    sink.write(Marker.BULK_STRING + NULL_LENGTH + CRLF)


@dataclass(frozen=True, slots=True)
class SimpleString:
    value: Text
    encoding: str = "utf-8"
    errors: str = "strict"

    def __post_init__(self) -> None:
        _check_text(self.value)

    def put(self, sink: Sink) -> None:
        _put_line(
            sink,
            Marker.SIMPLE_STRING,
            _to_bytes(self.value, self.encoding, self.errors),
        )


@dataclass(frozen=True, slots=True)
class ErrorMessage:
    value: Text
    encoding: str = "utf-8"
    errors: str = "strict"

    def __post_init__(self) -> None:
        _check_text(self.value)

    def put(self, sink: Sink) -> None:
        _put_line(
            sink,
            Marker.ERROR_MESSAGE,
            _to_bytes(self.value, self.encoding, self.errors),
        )


@dataclass(frozen=True, slots=True)
class Integer:
    """A signed 64-bit integer.

    Any integral source is accepted (anything implementing ``__index__``);
    values outside the 64-bit range wrap around in two's complement.
    """

    value: int

    def __post_init__(self) -> None:
        try:
            value = operator.index(self.value)
        except TypeError:
            raise TypeError(
                "Integer has to be created only from an integral type, "
                f"got {type(self.value).__name__}"
            ) from None

        object.__setattr__(self, "value", _to_int64(value))

    def put(self, sink: Sink) -> None:
        sink.write(Marker.INTEGER + b"%d" % self.value + CRLF)


@dataclass(frozen=True, slots=True)
class BulkString:
    """A binary-safe, length-prefixed string. ``None`` is the null bulk string."""

    value: Text | None = None
    encoding: str = "utf-8"
    errors: str = "strict"

    def __post_init__(self) -> None:
        if self.value is not None:
            _check_text(self.value)

    def put(self, sink: Sink) -> None:
        if self.value is None:
            _put_null_bulk_string(sink)
            return

        _put_length_prefixed(sink, _to_bytes(self.value, self.encoding, self.errors))


@dataclass(frozen=True, slots=True)
class BinaryData:
    """Raw bytes from any buffer object, framed like a bulk string."""

    value: bytes | bytearray | memoryview | None = None

    def __post_init__(self) -> None:
        if self.value is not None:
            with memoryview(self.value) as view:
                if not view.c_contiguous:
                    raise TypeError("BinaryData requires a C-contiguous buffer")

    def put(self, sink: Sink) -> None:
        if self.value is None:
            _put_null_bulk_string(sink)
            return

        with memoryview(self.value) as view, view.cast("B") as data:
            _put_length_prefixed(sink, data)


@dataclass(frozen=True, slots=True)
class Null:
    def put(self, sink: Sink) -> None:
        BulkString().put(sink)


@dataclass(frozen=True, slots=True)
class NullArray:
    def put(self, sink: Sink) -> None:
        sink.write(Marker.ARRAY + NULL_LENGTH + CRLF)


@dataclass(frozen=True, slots=True)
class _Fixed:
    values: tuple[Encodable, ...]


@dataclass(frozen=True, slots=True)
class _Runtime:
    values: Collection[Text]
    encoding: str
    errors: str


def _put_array_header(sink: Sink, count: int) -> None:
    sink.write(Marker.ARRAY + b"%d" % count + CRLF)


class Array:
    """A RESP array.

    ``Array(*values)`` holds a fixed, possibly heterogeneous sequence of
    encodable values. ``Array.from_list(values)`` borrows a runtime-sized
    collection of text and frames every element as a simple string.
    """

    __slots__ = ("_payload",)

    def __init__(self, *values: Encodable) -> None:
        for value in values:
            if not isinstance(value, Encodable):
                raise TypeError(
                    f"Cannot put a value of type {type(value).__name__} in an array"
                )

        self._payload: _Fixed | _Runtime = _Fixed(values)

    @classmethod
    def from_list(
        cls, values: Collection[Text], encoding: str = "utf-8", errors: str = "strict"
    ) -> Array:
        if isinstance(values, (str, bytes, bytearray, memoryview)):
            raise TypeError(
                f"Expected a collection of text, got a single {type(values).__name__}"
            )
        if iter(values) is values:
            raise TypeError("Expected a re-iterable collection, got an iterator")

        array = cls.__new__(cls)
        array._payload = _Runtime(values, encoding, errors)
        return array

    @staticmethod
    def null() -> NullArray:
        return NullArray()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._payload!r})"

    def put(self, sink: Sink) -> None:
        match self._payload:
            case _Fixed(values):
                _put_array_header(sink, len(values))
                for value in values:
                    put(sink, value)

            case _Runtime(values, encoding, errors):
                items = [SimpleString(item, encoding, errors) for item in values]
                _put_array_header(sink, len(items))
                for item in items:
                    item.put(sink)
