import logging

import pytest

from dto_validator.config import validator_config
from dto_validator.schema import clear_cache
from dto_validator.utils.logging_utils import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def fresh_schema_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def strict_hints():
    previous = validator_config.strict_hints
    validator_config.strict_hints = True
    yield
    validator_config.strict_hints = previous


@pytest.fixture
def reset_package_logger():
    """Undo handlers installed by ``ValidatorConfig.set_logging``."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
