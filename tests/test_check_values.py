"""Tests for the check-values command."""

import json
import logging

import pytest

from check_values import load_records, main, setup_logging

CONFIG = """
fields:
  price:
    expected: 19.99
    epsilon: 1.0e-5
  quantity:
    matcher: type_of
    expected: int
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "expectations.yaml"
    path.write_text(CONFIG)
    return path


def _write_records(tmp_path, records):
    path = tmp_path / "records.json"
    path.write_text(json.dumps(records))
    return path


class TestMain:
    def test_all_match_exits_zero(self, tmp_path, config_file, capsys):
        records = _write_records(tmp_path, [{"price": 19.99, "quantity": 1}])
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(config_file), "--records", str(records)])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "Record 0: 1.00 (2/2 fields)" in out
        assert "✓ price: 19.99" in out

    def test_mismatch_exits_one(self, tmp_path, config_file, capsys):
        records = _write_records(tmp_path, {"price": 21.0, "quantity": "1"})
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(config_file), "--records", str(records)])
        assert exc.value.code == 1
        out = capsys.readouterr().out
        assert "✗ price: expected 19.99, was 21.0" in out
        assert "✗ quantity: expected type_of(int), type_of(str)" in out

    def test_bad_config_exits_two(self, tmp_path):
        records = _write_records(tmp_path, [])
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(tmp_path / "missing.yaml"), "--records", str(records)])
        assert exc.value.code == 2

    def test_field_not_a_mapping_exits_two(self, tmp_path, capsys):
        config = tmp_path / "flat.yaml"
        config.write_text("fields:\n  price: 19.99\n")
        records = _write_records(tmp_path, [{"price": 19.99}])
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(config), "--records", str(records)])
        assert exc.value.code == 2
        assert "config must be a mapping" in capsys.readouterr().err

    def test_log_file(self, tmp_path, config_file):
        records = _write_records(tmp_path, [{"price": 19.99, "quantity": 1}])
        log_file = tmp_path / "logs" / "check.log"
        with pytest.raises(SystemExit):
            main(["--config", str(config_file), "--records", str(records), "--log-file", str(log_file), "--verbose"])
        assert "Loaded 2 field matchers" in log_file.read_text()


class TestLoadRecords:
    def test_single_object(self, tmp_path):
        assert load_records(_write_records(tmp_path, {"a": 1})) == [{"a": 1}]

    def test_rejects_scalars(self, tmp_path):
        with pytest.raises(ValueError):
            load_records(_write_records(tmp_path, [1, 2]))


class TestSetupLogging:
    def test_repeated_calls_replace_handlers(self, tmp_path):
        setup_logging()
        first = logging.getLogger().handlers[:]

        setup_logging(tmp_path / "check.log")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert not any(h in handlers for h in first)
        assert any(isinstance(h, logging.FileHandler) for h in handlers)
