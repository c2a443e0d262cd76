import subprocess
import sys
from pathlib import Path

from measured.backends import LogRecorder
from measured.core.config import settings
from measured.core.logger import configure_logging, logger

PROJECT_ROOT = Path(__file__).resolve().parents[1]

HOST_APP = """
from loguru import logger

received = []
logger.add(received.append, format="{message}")

import measured

logger.info("host message")
print(len(received))
"""


def test_import_keeps_host_handlers():
    res = subprocess.run(
        [sys.executable, "-c", HOST_APP],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        check=True,
    )

    assert res.stdout.strip() == "1"


def test_package_logs_are_silent_until_enabled():
    messages = []
    handler_id = logger.add(messages.append, format="{message}")
    try:
        LogRecorder(level="INFO").record("add", 1_000_000)
    finally:
        logger.remove(handler_id)

    assert messages == []


def test_configure_logging_adds_sinks(capsys, monkeypatch, tmp_path):
    log_file = tmp_path / "measured.log"
    monkeypatch.setattr(settings, "LOG_FILE", str(log_file))

    handler_ids = configure_logging()
    try:
        LogRecorder(level="INFO").record("add", 2_000_000)
        assert len(handler_ids) == 2
        assert log_file.exists()
    finally:
        for handler_id in handler_ids:
            logger.remove(handler_id)
        logger.disable("measured")

    assert "add latency: 2.00 ms" in capsys.readouterr().err
