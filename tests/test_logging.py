"""Tests for representations.logging."""

import json
import logging

import pytest

from representations.exceptions import RepresentationExecutionException
from representations.logging import JSONFormatter, LoggerConfig, SensitiveDataFilter, getLogger
from representations.representation import Representation


def make_record(msg, args=None, **extra):
    record = logging.LogRecord("representations.test", logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestGetLogger:
    def test_module_names_are_kept(self):
        assert getLogger("representations.representation").name == "representations.representation"

    def test_allowed_name(self):
        assert getLogger("application").name == "application"

    def test_unknown_plain_name_falls_back_to_root(self):
        assert getLogger("whatever") is logging.getLogger()


class TestSensitiveDataFilter:
    def test_redacts_json_fields(self):
        record = make_record('{"name": "Ada", "password": "hunter2"}')
        SensitiveDataFilter().filter(record)
        assert record.msg == '{"name": "Ada", "password": "[REDACTED]"}'

    def test_redacts_repr_args(self):
        record = make_record("data %s", (str({"token": "abc", "name": "Ada"}),))
        SensitiveDataFilter().filter(record)
        assert record.getMessage() == "data {'token': '[REDACTED]', 'name': 'Ada'}"

    def test_additional_fields(self):
        record = make_record('{"pin": "1234"}')
        SensitiveDataFilter(["pin"]).filter(record)
        assert record.msg == '{"pin": "[REDACTED]"}'


class TestJSONFormatter:
    def test_formats_extra_fields(self):
        record = make_record("Resolved %s", ("user",), representation="user")
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "Resolved user"
        assert data["level"] == "INFO"
        assert data["representation"] == "user"


class TestLoggerConfig:
    def test_setup_logger_writes_file(self, tmp_path):
        log_file = tmp_path / "logs" / "representations.log"
        logger = LoggerConfig.setup_logger(
            "representations.filetest",
            level=logging.DEBUG,
            log_file=log_file,
            console=False,
        )
        logger.info('{"password": "hunter2"}')
        for handler in logger.handlers:
            handler.flush()

        line = json.loads(log_file.read_text().strip())
        assert "hunter2" not in line["message"]
        assert not logger.propagate

    def test_level_by_environment(self):
        assert LoggerConfig.get_level_by_environment("production") == logging.WARNING
        assert LoggerConfig.get_level_by_environment("unknown") == logging.INFO


class TestRepresentationLogging:
    def test_execution_failure_is_logged(self, write_representation, caplog):
        write_representation("broken", "1 / 0")
        with caplog.at_level(logging.ERROR, logger="representations.representation"):
            with pytest.raises(RepresentationExecutionException):
                Representation.forge("broken").output()
        assert any("broken" in record.getMessage() for record in caplog.records)
