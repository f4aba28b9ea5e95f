import pytest

from word_order.cli import main
from word_order.config.logging_config import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Restore the default log level after every invocation."""
    yield
    configure_logging()


def test_prints_order(capsys):
    assert main(["baa"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Order of word baa: 3.\n\n"


def test_missing_word(capsys):
    """Forgetting the word prints a notice but still exits successfully."""
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "forgot to supply a word" in captured.out


def test_overflow_exits_with_error(capsys):
    assert main(["abcdefghijklmnopqrstu"]) == 1
    captured = capsys.readouterr()
    assert "Input too long" in captured.err
    assert "Order of word" not in captured.out


def test_unbounded_flag(capsys):
    assert main(["abcdefghijklmnopqrstu", "--unbounded"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Order of word abcdefghijklmnopqrstu: 1.\n\n"


@pytest.mark.parametrize("direction", ["insert", "remove"])
def test_direction_flag(capsys, direction):
    assert main(["abba", "--direction", direction]) == 0
    assert "Order of word abba: 3." in capsys.readouterr().out


def test_narrow_dtype(capsys):
    assert main(["fedcba", "--dtype", "uint8"]) == 1
    assert "Input too long" in capsys.readouterr().err


def test_invalid_dtype(capsys):
    assert main(["ab", "--dtype", "float32"]) == 1
    assert "invalid configuration" in capsys.readouterr().err


def test_config_file(tmp_path, capsys):
    path = tmp_path / "order.yaml"
    path.write_text("dtype: int32\ndirection: remove\n")

    # 13! exceeds the int32 limit
    assert main(["mlkjihgfedcba", "--config", str(path)]) == 1
    capsys.readouterr()

    # command-line flags take precedence over the file
    assert main(["mlkjihgfedcba", "--config", str(path), "--unbounded"]) == 0
    assert "Order of word mlkjihgfedcba: 6227020800." in capsys.readouterr().out


def test_missing_config_file(tmp_path, capsys):
    assert main(["ab", "--config", str(tmp_path / "absent.yaml")]) == 1
    assert "invalid configuration" in capsys.readouterr().err


def test_debug_logging_goes_to_stderr(capsys):
    assert main(["ba", "--log-level", "debug", "--log-format", "json"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Order of word ba: 2.\n\n"
    assert "Computed word order" in captured.err


@pytest.mark.parametrize(
    "name, content",
    [
        ("scalar.yaml", "5\n"),
        ("null.json", "null"),
        ("level.yaml", "log_level: 5\n"),
        ("broken.yaml", "dtype: [uint8\n"),
        ("keys.yaml", "5: uint8\nbits: 8\n"),
    ],
)
def test_malformed_config_file(tmp_path, capsys, name, content):
    path = tmp_path / name
    path.write_text(content)

    assert main(["ab", "--config", str(path)]) == 1
    captured = capsys.readouterr()
    assert "invalid configuration" in captured.err
    assert captured.out == ""


def test_no_unbounded_overrides_config(tmp_path, capsys):
    path = tmp_path / "order.yaml"
    path.write_text("unbounded: true\n")

    assert main(["abcdefghijklmnopqrstu", "--config", str(path)]) == 0
    capsys.readouterr()

    assert main(["abcdefghijklmnopqrstu", "--config", str(path), "--no-unbounded"]) == 1
    assert "Input too long" in capsys.readouterr().err
