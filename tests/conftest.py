import logging

import pytest
import structlog

from core_domain.value_objects.nano_id import ALPHABET, NanoID


@pytest.fixture
def abc_id() -> NanoID:
    return NanoID("abc")


@pytest.fixture
def alphabet_prefix() -> str:
    return ALPHABET[:10]


@pytest.fixture
def restore_logging():
    """Restaura handlers do root logger e a configuração do structlog."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()
