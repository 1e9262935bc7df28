import codecs
from dataclasses import dataclass
from enum import Enum, auto


class OutputFormat(Enum):
    RAW = auto()
    ESCAPED = auto()
    HEX = auto()


@dataclass
class ClientConfig:
    encoding: str = "utf-8"
    errors: str = "strict"
    output_format: OutputFormat = OutputFormat.RAW
    runtime_list: bool = False
    null_array: bool = False

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding}") from None

        try:
            codecs.lookup_error(self.errors)
        except LookupError:
            raise ValueError(f"Unknown encoding error handler: {self.errors}") from None
