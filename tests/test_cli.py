import json
import logging

import pandas as pd
import pytest

from fars.cli import main
from fars.utils.logging import JsonFormatter, configure_logging, reset_logging

from conftest import write_accidents


def test_cli_summarize_prints_table(data_dir, capsys):
    main(["summarize", "--years", "2013", "2014", "--data-dir", str(data_dir)])
    out = capsys.readouterr().out
    assert "2013" in out
    assert "2014" in out
    assert "MONTH" in out


def test_cli_summarize_writes_csv(data_dir, tmp_path):
    out = tmp_path / "summary.csv"
    main([
        "summarize", "--years", "2013", "--data-dir", str(data_dir),
        "--output", str(out),
    ])
    table = pd.read_csv(out, index_col="MONTH")
    assert table.index.tolist() == list(range(1, 13))
    assert table.loc[1, "2013"] == 2


def test_cli_summarize_all_invalid_exits(data_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["summarize", "--years", "1990", "--data-dir", str(data_dir)])
    assert excinfo.value.code == 1
    assert "no valid years" in capsys.readouterr().err


def test_cli_map_invalid_state_exits(data_dir, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["map", "--state", "99", "--year", "2013", "--data-dir", str(data_dir)])
    assert excinfo.value.code == 1
    assert "invalid STATE number" in capsys.readouterr().err


def test_cli_map_writes_html(data_dir, tmp_path, capsys):
    out = tmp_path / "map.html"
    main([
        "map", "--state", "1", "--year", "2014", "--data-dir", str(data_dir),
        "--output", str(out),
    ])
    assert out.exists()
    assert "saved" in capsys.readouterr().out


def test_json_formatter_merges_extra():
    record = logging.LogRecord(
        name="fars.data.reader", level=logging.WARNING, pathname=__file__,
        lineno=1, msg="invalid year: %s", args=(9999,), exc_info=None,
    )
    record.year = "9999"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "invalid year: 9999"
    assert payload["level"] == "WARNING"
    assert payload["year"] == "9999"


def test_configure_logging_does_not_stack_handlers():
    logger = configure_logging("INFO")
    configure_logging("DEBUG", json_format=True)
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)
    assert logger.level == logging.DEBUG


def test_configure_logging_stops_root_propagation(caplog):
    logger = configure_logging("INFO")
    assert logger.propagate is False
    logger.warning("only once")
    assert "only once" not in caplog.messages

    reset_logging()
    assert logger.handlers == []
    assert logger.propagate is True


def test_cli_map_reports_saved_path_once(data_dir, tmp_path, capsys):
    out = tmp_path / "map.html"
    main([
        "--log-level", "INFO",
        "map", "--state", "6", "--year", "2013", "--data-dir", str(data_dir),
        "--output", str(out),
    ])
    captured = capsys.readouterr()
    assert (captured.out + captured.err).count("saved") == 1


def test_cli_map_non_numeric_coordinates_exits(tmp_path, capsys):
    write_accidents(tmp_path, 2013, pd.DataFrame({
        "STATE": [1], "MONTH": [1], "LONGITUD": ["x"], "LATITUDE": [30.0],
    }))
    with pytest.raises(SystemExit) as excinfo:
        main(["map", "--state", "1", "--year", "2013", "--data-dir", str(tmp_path)])
    assert excinfo.value.code == 1
    assert "LONGITUD" in capsys.readouterr().err
