# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def log_messages():
    """
    捕获 collectkit 的日志文本（DEBUG 起）
    """
    messages = []
    sink_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
    logger.enable("collectkit")
    yield messages
    logger.disable("collectkit")
    logger.remove(sink_id)


@pytest.fixture
def digits():
    return [5, 6, 7, 8, 9]
