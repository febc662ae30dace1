import logging

from brightsmile.logging_config import ColoredFormatter, get_logger, setup_logger


def test_setup_logger_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "site.log"
    logger = setup_logger("brightsmile.test_file", level="DEBUG", log_file=log_file, console_output=False)

    logger.debug("theme resolved")
    for handler in logger.handlers:
        handler.flush()

    contents = log_file.read_text(encoding="utf-8")
    assert "[DEBUG] (brightsmile.test_file) theme resolved" in contents


def test_setup_logger_does_not_duplicate_handlers():
    setup_logger("brightsmile.test_dupe", console_output=True)
    logger = setup_logger("brightsmile.test_dupe", console_output=True)

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_get_logger_returns_child_of_configured_parent():
    parent = setup_logger("brightsmile.test_parent", console_output=False)

    child = get_logger("brightsmile.test_parent.child")

    assert child.parent is parent


def test_plain_console_format():
    record = logging.LogRecord("brightsmile", logging.INFO, __file__, 1, "hello", None, None)

    line = ColoredFormatter(use_colors=False).format(record)

    assert line.endswith("[INFO] (brightsmile) hello")
