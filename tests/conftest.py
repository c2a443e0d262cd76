import pytest
from measured.backends import InMemoryRecorder
from measured.core.logger import logger
from measured.emission import set_backend


@pytest.fixture
def recorder():
    rec = InMemoryRecorder()
    set_backend(rec)
    yield rec
    set_backend(None)


@pytest.fixture
def log_messages():
    messages = []
    logger.enable("measured")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("measured")
