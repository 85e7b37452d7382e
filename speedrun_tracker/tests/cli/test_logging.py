from __future__ import annotations

import logging
from pathlib import Path

from core.logging import get_log_file_path, setup_logging


def test_setup_logging_writes_file_and_emits(tmp_path: Path) -> None:
    logger, emitter = setup_logging(logs_dir=tmp_path)
    received: list[str] = []
    emitter.log_message.connect(received.append)

    logging.getLogger("speedrun_tracker.engine").info("Scan finished: worlds=%s", 3)
    for handler in logger.handlers:
        handler.flush()

    assert any("Scan finished: worlds=3" in message for message in received)
    assert "| INFO | speedrun_tracker.engine |" in received[0]
    assert "Scan finished: worlds=3" in get_log_file_path(tmp_path).read_text(encoding="utf-8")


def test_debug_records_dropped_unless_enabled(tmp_path: Path) -> None:
    _logger, emitter = setup_logging(logs_dir=tmp_path)
    received: list[str] = []
    emitter.log_message.connect(received.append)

    logging.getLogger("speedrun_tracker.probe").debug("hidden")
    assert received == []

    _logger, emitter = setup_logging(debug=True, logs_dir=tmp_path)
    emitter.log_message.connect(received.append)
    logging.getLogger("speedrun_tracker.probe").debug("shown")
    assert len(received) == 1
