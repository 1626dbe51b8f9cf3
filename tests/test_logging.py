"""Tests for setup_logging: one root handler, server loggers routed through it."""

import logging

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient

import springmon.__main__ as springmon_main
from springmon.core import config
from springmon.core.events import lifespan
from springmon.core.logging import SERVER_LOGGERS, setup_logging


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_single_root_handler(restore_root):
    setup_logging(log_level="debug")
    setup_logging(log_level="warning")
    assert len(restore_root.handlers) == 1
    assert restore_root.level == logging.WARNING
    assert isinstance(
        restore_root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter
    )


def test_server_loggers_propagate(restore_root):
    uvicorn_error = logging.getLogger("uvicorn.error")
    uvicorn_error.addHandler(logging.NullHandler())
    uvicorn_error.propagate = False

    setup_logging()
    for name in SERVER_LOGGERS:
        assert logging.getLogger(name).handlers == []
        assert logging.getLogger(name).propagate is True
    assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_json_output_carries_service(restore_root, capsys):
    setup_logging(json_logs=True, service_name="springmon-test")
    logging.getLogger("uvicorn.error").info("server_ready")
    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert '"event": "server_ready"' in line
    assert '"service": "springmon-test"' in line


def test_lifespan_events(restore_root, capsys):
    setup_logging(json_logs=True)
    with TestClient(FastAPI(lifespan=lifespan)):
        pass
    out = capsys.readouterr().out
    assert '"event": "springmon_starting"' in out
    assert '"event": "springmon_stopping"' in out


def test_runner_configures_logging_before_serving(restore_root, capsys, monkeypatch):
    calls = []
    monkeypatch.setattr(springmon_main.uvicorn, "run", lambda *a, **kw: calls.append(kw))
    monkeypatch.setattr(config.settings, "environment", "production")
    springmon_main.main()

    out = capsys.readouterr().out
    assert '"event": "springmon_serving"' in out
    assert f'"bind": "{config.settings.bind}"' in out
    assert calls[0]["log_config"] is None
    assert calls[0]["port"] == config.settings.service_port
