import pytest

from toy_redis_client import main
from toy_redis_client.config import ClientConfig, OutputFormat


def test_raw_output(capsysbinary):
    assert main.run(["SET", "key", "value"]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out == b"*3\r\n$3\r\nSET\r\n$3\r\nkey\r\n$5\r\nvalue\r\n"


def test_escaped_output(capsysbinary):
    assert main.run(["--format", "escaped", "PING"]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out.strip() == rb"b'*1\r\n$4\r\nPING\r\n'"


def test_hex_output(capsysbinary):
    assert main.run(["--format", "hex", "PING"]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out.strip() == b"*1\r\n$4\r\nPING\r\n".hex().encode()


def test_runtime_list_output(capsysbinary):
    assert main.run(["--list", "a", "b", "c"]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out == b"*3\r\n+a\r\n+b\r\n+c\r\n"


def test_null_array_output(capsysbinary):
    assert main.run(["--null-array"]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out == b"*-1\r\n"


def test_no_arguments_is_empty_array(capsysbinary):
    assert main.run([]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out == b"*0\r\n"


def test_encoding_option(capsysbinary):
    assert main.run(["--encoding", "latin-1", "é"]) == 0

    captured = capsysbinary.readouterr()
    assert captured.out == b"*1\r\n$1\r\n\xe9\r\n"


def test_unknown_encoding_is_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        main.run(["--encoding", "no-such-codec", "PING"])

    assert exc_info.value.code == 2


def test_list_and_null_array_are_mutually_exclusive():
    with pytest.raises(SystemExit) as exc_info:
        main.run(["--list", "--null-array", "a"])

    assert exc_info.value.code == 2


def test_sink_failure_exit_status(monkeypatch):
    def fail(config, request):
        raise BrokenPipeError("stdout closed")

    monkeypatch.setattr(main, "write_request", fail)

    assert main.run(["PING"]) == 1


def test_parse_args_defaults():
    config, args, verbose = main.parse_args(["GET", "key"])

    assert config == ClientConfig()
    assert config.output_format is OutputFormat.RAW
    assert args == ["GET", "key"]
    assert verbose is False


@pytest.mark.parametrize(
    "kwargs",
    [
        pytest.param({"encoding": "no-such-codec"}, id="encoding"),
        pytest.param({"errors": "no-such-handler"}, id="errors"),
    ],
)
def test_config_rejects_unknown_codec_settings(kwargs):
    with pytest.raises(ValueError, match="Unknown encoding"):
        ClientConfig(**kwargs)
