class Marker:
    """Leading bytes that identify each RESP value kind, plus the line terminator."""

    SIMPLE_STRING = b"+"
    ERROR_MESSAGE = b"-"
    INTEGER = b":"
    BULK_STRING = b"$"
    ARRAY = b"*"
    CR = b"\r"
    LF = b"\n"


CRLF = Marker.CR + Marker.LF
NULL_LENGTH = b"-1"
