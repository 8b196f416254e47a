import json
import logging

from battlegroup.game.infra.logging import (
    JsonFormatter,
    LoggingConfig,
    build_logging_config,
    configure_logging,
    shutdown_logging,
)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"custom": 1}


def test_build_logging_config_reads_env(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("BATTLEGROUP_LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("BATTLEGROUP_LOG_DIR", str(tmp_path / "logs"))
    config = build_logging_config()
    assert config.level_name == "DEBUG"
    assert config.console_format == "json"
    assert config.file_path is not None and config.file_path.endswith(".jsonl")


def test_build_logging_config_without_log_dir_has_no_file(monkeypatch) -> None:
    monkeypatch.delenv("BATTLEGROUP_LOG_DIR", raising=False)
    monkeypatch.delenv("BATTLEGROUP_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "warning")
    config = build_logging_config()
    assert config.file_path is None
    assert config.level_name == "WARNING"


def test_configure_logging_writes_json_lines_file(tmp_path) -> None:
    file_path = tmp_path / "logs" / "run.jsonl"
    configure_logging(LoggingConfig(level_name="DEBUG", file_path=str(file_path)))
    try:
        logging.getLogger("test.logging.file").info("hello %s", "file", extra={"turn": 3})
    finally:
        shutdown_logging()
    lines = file_path.read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["msg"] == "hello file"
    assert payload["fields"]["turn"] == 3
    configure_logging(LoggingConfig())
    assert logging.getLogger().level == logging.INFO
