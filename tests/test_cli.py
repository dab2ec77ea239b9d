import logging

import pytest

from promiselab.cli import build_parser, main


@pytest.fixture(autouse=True)
def _restore_logger():
    logger = logging.getLogger("promiselab")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.demos == "all"
    assert args.time_unit == 0.001
    assert args.trace is False


def test_closures_only(capsys):
    assert main(["closures"]) == 0
    err = capsys.readouterr().err
    assert "Current count: 2" in err
    assert "Button myButton clicked 3 times." in err
    assert "Data received" not in err


def test_promises_with_trace(capsys):
    assert main(["promises", "--time-unit", "0.0001", "--trace"]) == 0
    captured = capsys.readouterr()
    assert "Fastest data received: Fast API data" in captured.err
    assert "API 10 failed with reason: Error fetching data from API 10" in captured.err
    assert "fulfilled" in captured.out
    assert "API 1" in captured.out


def test_logging_configured_once():
    main(["closures"])
    main(["closures"])
    logger = logging.getLogger("promiselab")
    assert sum(1 for h in logger.handlers if getattr(h, "_promiselab", False)) == 1


def test_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["nonsense"])


@pytest.mark.parametrize("argv", [["--log-level", "LOUD"], ["--time-unit", "0"]])
def test_invalid_settings_exit_with_usage(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["closures", *argv])
    assert exc_info.value.code == 2
    err = capsys.readouterr().err
    assert "usage: promiselab" in err
    assert "Traceback" not in err
