import logging

import pytest

from cookbook_builder.logging_utils import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate


def test_setup_leaves_root_logger_alone():
    root = logging.getLogger()
    root_handlers, root_level = list(root.handlers), root.level

    setup_logging()

    assert root.handlers == root_handlers
    assert root.level == root_level


def test_verbose_switches_package_level_to_debug():
    package_logger = setup_logging(verbose=True)
    assert package_logger is logging.getLogger(PACKAGE_LOGGER)
    assert package_logger.level == logging.DEBUG
    assert setup_logging().level == logging.INFO


def test_repeated_setup_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    package_logger = setup_logging(log_file=str(log_file))
    assert len(package_logger.handlers) == 2

    setup_logging()
    assert len(package_logger.handlers) == 1
    assert not package_logger.propagate


def test_module_loggers_write_to_the_log_file(tmp_path):
    log_file = tmp_path / "run.log"
    package_logger = setup_logging(log_file=str(log_file))
    get_logger("cookbook_builder.pipelines").info("Cookbook written to: %s", "x.pdf")
    for handler in package_logger.handlers:
        handler.flush()
    assert "[INFO] cookbook_builder.pipelines: Cookbook written to: x.pdf" in log_file.read_text(encoding="utf-8")
