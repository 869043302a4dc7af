import logging

import pytest

from utils.logging import get_logger, setup_logging


def test_setup_logging_sets_level():
    setup_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    setup_logging()
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("chatty")


def test_get_logger_uses_module_name():
    assert get_logger("base122.encoding").name == "base122.encoding"
