import httpx
from loguru import logger

from linkparser.fetcher import PageFetcher
from linkparser.utils.config_loader import Config
from linkparser.utils.logger import configure_logging, setup_logger


def test_setup_logger_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "linkparser.log"

    bound = setup_logger("DEBUG", str(log_file))
    bound.debug("scanner warmed up")

    # swapping sinks closes the file handle and flushes it
    setup_logger("INFO")

    content = log_file.read_text()
    assert "DEBUG" in content
    assert "scanner warmed up" in content


def test_setup_logger_is_idempotent_for_same_settings(tmp_path):
    log_file = tmp_path / "again.log"

    first = setup_logger("WARNING", str(log_file))
    second = setup_logger("warning", str(log_file))
    logger.info("below threshold")
    logger.warning("above threshold")

    setup_logger("INFO")

    assert first is second
    content = log_file.read_text()
    assert content.count("above threshold") == 1
    assert "below threshold" not in content


def test_configure_logging_applies_config(tmp_path):
    log_file = tmp_path / "configured.log"

    configure_logging(Config(log_level="DEBUG", log_path=str(log_file)))
    logger.debug("configured from settings")
    setup_logger("INFO")

    assert "configured from settings" in log_file.read_text()


def test_fetcher_without_config_sets_up_logging(monkeypatch, tmp_path):
    log_file = tmp_path / "fetcher.log"
    monkeypatch.setenv("LINKPARSER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LINKPARSER_LOG_PATH", str(log_file))

    fetcher = PageFetcher(client=httpx.AsyncClient())
    logger.debug("fetcher ready")
    setup_logger("INFO")

    assert fetcher.config.log_path == str(log_file)
    assert "fetcher ready" in log_file.read_text()
