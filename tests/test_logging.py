"""Tests pour le module logging."""

import logging

from unix_command_utils.logging import Logger, FileLogger


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        assert isinstance(logger, Logger)

    def test_log_info(self, tmp_path):
        """Test du logging info."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Test message")

        content = log_file.read_text()
        assert "INFO" in content
        assert "Test message" in content

    def test_log_warning(self, tmp_path):
        """Test du logging warning."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_warning("Warning message")

        content = log_file.read_text()
        assert "WARNING" in content
        assert "Warning message" in content

    def test_log_error(self, tmp_path):
        """Test du logging error."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_error("Error message")

        content = log_file.read_text()
        assert "ERROR" in content
        assert "Error message" in content

    def test_log_debug_filtre_par_defaut(self, tmp_path):
        """Au niveau INFO par défaut, DEBUG n'est pas écrit."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_debug("ls -la")

        assert "ls -la" not in log_file.read_text()

    def test_log_debug_niveau_debug(self, tmp_path):
        """Avec le niveau DEBUG, les messages de diagnostic sont écrits."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(
            str(log_file), config={"logging": {"level": "debug"}}
        )

        logger.log_debug("ls -la")

        content = log_file.read_text()
        assert "DEBUG - ls -la" in content

    def test_creates_log_directory(self, tmp_path):
        """Test que le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "test.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_config_from_dict(self, tmp_path):
        """Test de la configuration depuis un dictionnaire."""
        log_file = tmp_path / "test.log"
        config = {
            "logging": {
                "level": "DEBUG",
                "format": "%(levelname)s - %(message)s"
            }
        }

        logger = FileLogger(str(log_file), config=config)
        logger.log_info("Test")

        content = log_file.read_text()
        assert "INFO - Test" in content

    def test_config_non_dict(self, tmp_path):
        """Une config qui n'est pas un dict utilise les défauts."""
        log_file = tmp_path / "test.log"

        logger = FileLogger(str(log_file), config=["inattendu"])
        logger.log_info("Test défaut")

        assert logger.logger.level == logging.INFO
        assert "Test défaut" in log_file.read_text(encoding="utf-8")

    def test_utf8_encoding(self, tmp_path):
        """Test de l'encodage UTF-8."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Message avec accents: éàü")

        content = log_file.read_text(encoding='utf-8')
        assert "éàü" in content


class TestFileLoggerConsole:
    """Tests pour FileLogger avec sortie console et handlers dupliqués."""

    def test_console_output_active(self, tmp_path):
        """FileLogger avec console_output=True crée un StreamHandler."""
        log_file = str(tmp_path / "console.log")
        logger = FileLogger(log_file, console_output=True)
        assert len(logger.logger.handlers) == 2
        logger.log_info("Test console")

    def test_logger_handler_existant_reutilise(self, tmp_path):
        """Deux FileLogger sur le même fichier partagent le handler."""
        log_file = str(tmp_path / "shared.log")
        logger1 = FileLogger(log_file)
        logger2 = FileLogger(log_file)

        assert logger2.handler is logger1.handler
        assert len(logger2.logger.handlers) == 1
