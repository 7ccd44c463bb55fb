"""
Tests for loguru setup.
"""

from loguru import logger

from sizeguard.logging_config import setup_logging


class TestSetupLogging:

    def teardown_method(self):
        setup_logging(level="DEBUG", suppress_console=True, force=True)

    def test_configures_only_once(self, capfd):
        setup_logging(suppress_console=True, force=True)
        setup_logging(level="DEBUG", suppress_console=False)
        logger.warning("should not appear")
        assert capfd.readouterr().err == ""

    def test_force_reconfigures(self, capfd):
        setup_logging(level="WARNING", suppress_console=False, force=True)
        logger.info("quiet info")
        logger.warning("loud warning")
        err = capfd.readouterr().err
        assert "loud warning" in err
        assert "quiet info" not in err

    def test_level_from_env(self, capfd, monkeypatch):
        monkeypatch.setenv("SIZEGUARD_LOG_LEVEL", "error")
        setup_logging(suppress_console=False, force=True)
        logger.warning("filtered warning")
        logger.error("kept error")
        err = capfd.readouterr().err
        assert "kept error" in err
        assert "filtered warning" not in err

    def test_machine_mode_env_suppresses_console(self, capfd, monkeypatch):
        monkeypatch.setenv("SIZEGUARD_MACHINE_MODE", "1")
        setup_logging(force=True)
        logger.error("hidden")
        assert capfd.readouterr().err == ""

    def test_file_logging(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SIZEGUARD_LOG_DIR", str(tmp_path / "logs"))
        setup_logging(suppress_console=True, enable_file_logging=True, force=True)
        logger.info("written to file")
        logger.complete()
        setup_logging(suppress_console=True, force=True)
        assert "written to file" in (tmp_path / "logs" / "sizeguard.log").read_text()
