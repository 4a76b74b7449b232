import logging
from smithchart.utils.logging_config import get_logger, setup_logging

def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "chart.log"
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging(level=logging.DEBUG, log_file=str(log_file))
        assert len(root.handlers) == 2
        assert logging.getLogger("matplotlib").level == logging.WARNING
        get_logger("smithchart.test").debug("grid drawn")
        for handler in root.handlers:
            handler.flush()
        assert "[DEBUG] smithchart.test: grid drawn" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)

def test_get_logger_level_is_optional():
    assert get_logger("smithchart.inherit").level == logging.NOTSET
    assert get_logger("smithchart.explicit", logging.ERROR).level == logging.ERROR
