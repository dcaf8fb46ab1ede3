import logging

from promptize.utils.log_utils import setup_logger


def file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_no_file_by_default(monkeypatch):
    monkeypatch.delenv("LOG_DIR", raising=False)
    logger = setup_logger("promptize.test.nofile", logging.DEBUG)
    assert logger.level == logging.DEBUG
    assert file_handlers(logger) == []


def test_tee_to_log_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    logger = setup_logger("promptize.test.tee")
    setup_logger("promptize.test.tee")
    try:
        assert len(file_handlers(logger)) == 1
        logger.info("hello")
        file_handlers(logger)[0].flush()
        assert "hello" in next(tmp_path.iterdir()).read_text()
    finally:
        for h in file_handlers(logger):
            logger.removeHandler(h)
            h.close()


def test_no_file_in_production(monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_DIR", str(tmp_path))
    monkeypatch.setenv("ENVIRONMENT", "production")
    logger = setup_logger("promptize.test.prod")
    assert file_handlers(logger) == []
