import argparse
import logging
import sys
from collections.abc import Sequence

from toy_redis_client.config import ClientConfig, OutputFormat
from toy_redis_client.resp.encoder import (
    Array,
    BulkString,
    Encodable,
    NullArray,
    encode,
    put,
)


def parse_args(argv: Sequence[str] | None = None) -> tuple[ClientConfig, list[str], bool]:
    parser = argparse.ArgumentParser(
        description="Encode a request as a RESP array and write it to stdout."
    )
    parser.add_argument("args", nargs="*", help="The request arguments")
    parser.add_argument(
        "--encoding", type=str, default="utf-8", help="The codec used for text"
    )
    parser.add_argument(
        "--errors", type=str, default="strict", help="The codec error handler"
    )
    parser.add_argument(
        "--format",
        choices=[output_format.name.lower() for output_format in OutputFormat],
        default="raw",
        help="How to print the encoded frame",
    )
    shape = parser.add_mutually_exclusive_group()
    shape.add_argument(
        "--list",
        action="store_true",
        help="Encode the arguments as a runtime list of simple strings",
    )
    shape.add_argument(
        "--null-array", action="store_true", help="Encode the null array instead"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args(argv)

    try:
        config = ClientConfig(
            encoding=args.encoding,
            errors=args.errors,
            output_format=OutputFormat[args.format.upper()],
            runtime_list=args.list,
            null_array=args.null_array,
        )
    except ValueError as e:
        parser.error(str(e))

    return config, args.args, args.verbose


def build_request(config: ClientConfig, args: Sequence[str]) -> Encodable:
    if config.null_array:
        return NullArray()

    if config.runtime_list:
        return Array.from_list(args, config.encoding, config.errors)

    return Array(*(BulkString(arg, config.encoding, config.errors) for arg in args))


def write_request(config: ClientConfig, request: Encodable) -> None:
    match config.output_format:
        case OutputFormat.RAW:
            put(sys.stdout.buffer, request)
            sys.stdout.buffer.flush()

        case OutputFormat.ESCAPED:
            print(repr(encode(request)))

        case OutputFormat.HEX:
            print(encode(request).hex())


def run(argv: Sequence[str] | None = None) -> int:
    config, args, verbose = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    request = build_request(config, args)
    logging.debug(f"Encoding {request!r}")

    try:
        write_request(config, request)
    except OSError as e:
        logging.error(f"Failed to write the request: {str(e)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(run())
