import logging

import pytest

from rtime.infra.logger import PACKAGE_LOGGER, LoggerFactory


@pytest.fixture
def restore_package_logger():
    yield
    LoggerFactory.configure({})


def test_module_loggers_share_package_handlers(restore_package_logger):
    LoggerFactory.configure({})
    tables = LoggerFactory.get_logger("rtime.tables")
    loader = LoggerFactory.get_logger("rtime.pdio.loader")
    package = logging.getLogger(PACKAGE_LOGGER)
    assert tables.parent is package and loader.parent is package
    assert not tables.handlers and not loader.handlers
    assert tables.propagate and loader.propagate
    assert len(package.handlers) == 1


def test_names_outside_the_package_are_nested():
    assert LoggerFactory.get_logger("cli").name == "rtime.cli"
    assert LoggerFactory.get_logger("rtime").name == "rtime"


def test_reconfigure_does_not_stack_handlers(restore_package_logger):
    LoggerFactory.configure({"RTIME_LOGLEVEL": "debug"})
    LoggerFactory.configure({"RTIME_LOGLEVEL": "debug"})
    package = logging.getLogger(PACKAGE_LOGGER)
    assert len(package.handlers) == 1
    assert package.level == logging.DEBUG


@pytest.mark.parametrize("value, level", [
    ("", logging.INFO),
    ("info", logging.INFO),
    ("10", logging.DEBUG),
    ("chatty", logging.INFO),
])
def test_level_from_env(restore_package_logger, value, level):
    LoggerFactory.configure({"RTIME_LOGLEVEL": value})
    assert logging.getLogger(PACKAGE_LOGGER).level == level


def test_log_file_receives_module_records(restore_package_logger, tmp_path):
    path = tmp_path / "rtime.log"
    LoggerFactory.configure({"RTIME_LOGFILE": str(path)})
    LoggerFactory.get_logger("rtime.tables").warning("names rejected")
    for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
        handler.flush()
    assert path.read_text(encoding="utf-8") == "[WARNING] rtime.tables: names rejected\n"


def test_unopenable_log_file_keeps_stderr(restore_package_logger, tmp_path):
    LoggerFactory.configure({"RTIME_LOGFILE": str(tmp_path / "missing" / "rtime.log")})
    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)
