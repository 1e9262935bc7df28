from collections.abc import Collection
from typing import Any

from toy_redis_client.resp.encoder import (
    Array,
    BinaryData,
    BulkString,
    Encodable,
    ErrorMessage,
    Integer,
    Null,
    NullArray,
    SimpleString,
    Text,
    encode,
)


def to_value(obj: Any, encoding: str = "utf-8", errors: str = "strict") -> Encodable:
    """Map a native Python object onto the RESP value kind that frames it."""
    if isinstance(obj, Encodable):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, str):
        return BulkString(obj, encoding, errors)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BinaryData(obj)
    if isinstance(obj, (list, tuple)):
        return Array(*(to_value(item, encoding, errors) for item in obj))

    raise TypeError(f"Cannot encode a value of type {type(obj).__name__}")


class RESPEncoder:
    @staticmethod
    def encode_simple_string(data: Text) -> bytes:
        return encode(SimpleString(data))

    @staticmethod
    def encode_error(error: Text) -> bytes:
        return encode(ErrorMessage(error))

    @staticmethod
    def encode_integer(data: int) -> bytes:
        return encode(Integer(data))

    @staticmethod
    def encode_bulk_string(data: Text | None) -> bytes:
        return encode(BulkString(data))

    @staticmethod
    def encode_binary(data: bytes | bytearray | memoryview | None) -> bytes:
        return encode(BinaryData(data))

    @staticmethod
    def encode_null() -> bytes:
        return encode(Null())

    @staticmethod
    def encode_array(*elements: Any) -> bytes:
        return encode(Array(*(to_value(element) for element in elements)))

    @staticmethod
    def encode_list(values: Collection[Text]) -> bytes:
        return encode(Array.from_list(values))

    @staticmethod
    def encode_null_array() -> bytes:
        return encode(NullArray())
