from loguru import logger

from qtcommandbind.core.logging import setup_logging


def test_setup_logging_writes_file_sink(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(debug_mode=True, log_dir=str(log_dir))
    logger.debug("binding trace")
    # Removing the sinks closes (and flushes) the log file
    logger.remove()

    files = list(log_dir.glob("qtcommandbind_*.log"))
    assert len(files) == 1
    assert "binding trace" in files[0].read_text()


def test_setup_logging_without_file_sink(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    try:
        setup_logging(debug_mode=False)
        assert list(tmp_path.iterdir()) == []
    finally:
        logger.remove()
