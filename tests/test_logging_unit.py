import logging

from logging_config import setup_logging
from solver.elimination import GaussianElimination


def test_setup_logging_configures_both_namespaces(reset_loggers) -> None:
    setup_logging(logging.DEBUG)
    for name in ("solver", "cli"):
        logger = logging.getLogger(name)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1


def test_setup_logging_is_idempotent(reset_loggers) -> None:
    setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    assert len(logging.getLogger("solver").handlers) == 1


def test_log_file_receives_engine_records(tmp_path, reset_loggers) -> None:
    log_file = tmp_path / "solver.log"
    setup_logging(logging.DEBUG, str(log_file))
    GaussianElimination([[0, 1, 2], [1, 1, 3]]).solve()

    for handler in logging.getLogger("solver").handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "Swapped rows 1 and 2" in text
    assert "solver.elimination - INFO - Classified 2x3 system as unique" in text
