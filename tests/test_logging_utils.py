import logging

import pytest

from price_maps import map_config
from price_maps.utils import logging_utils


@pytest.fixture
def package_logger():
    logger = logging.getLogger(logging_utils.PACKAGE_LOGGER)
    level = logger.level
    yield logger
    logger.setLevel(level)


def test_names_are_placed_under_the_package_logger():
    assert logging_utils.get_logger("app").name == "price_maps.app"


def test_package_names_are_left_alone():
    assert logging_utils.get_logger("price_maps.loaders").name == "price_maps.loaders"
    assert logging_utils.get_logger("price_maps").name == "price_maps"


def test_handlers_are_attached_once(package_logger):
    logging_utils.get_logger("first")
    handlers = list(package_logger.handlers)
    logging_utils.get_logger("second")
    logging_utils.configure_logging()
    assert package_logger.handlers == handlers


def test_explicit_level_applies_after_configuration(package_logger):
    logging_utils.get_logger("app")
    logging_utils.configure_logging(level="DEBUG")
    assert package_logger.level == logging.DEBUG


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("PRICE_MAPS_LOG_LEVEL", " warning ")
    assert map_config.get_log_level() == "WARNING"


def test_log_level_default(monkeypatch):
    monkeypatch.delenv("PRICE_MAPS_LOG_LEVEL", raising=False)
    assert map_config.get_log_level() == map_config.DEFAULT_LOG_LEVEL


def test_log_file_follows_log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("PRICE_MAPS_LOG_DIR", str(tmp_path))
    assert map_config.get_log_file() == tmp_path / map_config.LOG_FILE_BASENAME


def test_log_file_default(monkeypatch):
    monkeypatch.delenv("PRICE_MAPS_LOG_DIR", raising=False)
    assert map_config.get_log_file() == map_config.LOG_DIR / map_config.LOG_FILE_BASENAME
