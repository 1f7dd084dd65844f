import logging

from core.logger_setup import configure_logging, get_logger


def test_configure_logging_writes_and_backs_up(tmp_path):
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        log_file = configure_logging(log_dir=str(tmp_path), filename="lens.log", level=logging.INFO)
        get_logger("LensController").info("[Lens] first session")
        for handler in root.handlers:
            handler.flush()
        assert "first session" in (tmp_path / "lens.log").read_text()

        configure_logging(log_dir=str(tmp_path), filename="lens.log", level=logging.INFO)
        get_logger("LensController").debug("[Lens] below level")
        for handler in root.handlers:
            handler.flush()
        backups = [p for p in tmp_path.iterdir() if p.name.startswith("lens_")]
        assert len(backups) == 1
        assert "first session" in backups[0].read_text()
        assert log_file.endswith("lens.log")
        assert "below level" not in (tmp_path / "lens.log").read_text()
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)
